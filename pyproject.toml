[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cipherkit"
version = "0.1.0"
description = "Enigma machine simulator, GOST 28147-89 (Magma) block cipher with its modes, and a generic Feistel network"
requires-python = ">=3.10"
dependencies = []
keywords = ["cryptography", "enigma", "magma", "gost", "feistel", "block cipher", "base26"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Security :: Cryptography",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cipherkit-gendigs = "cipherkit.gendigs:main"

[tool.hatch.build.targets.wheel]
packages = ["cipherkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
