"""Enigma machine simulator with base16 and base26 letter codecs."""