"""GOST 28147-89 (Magma) block cipher with CFB, gamma and hash modes."""