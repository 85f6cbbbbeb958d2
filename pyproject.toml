[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cipherkit"
version = "0.1.0"
description = "AES block cipher with CBC, CTR and CCM modes, bcrypt password hashing and classical ciphers"
requires-python = ">=3.10"
dependencies = [
    "bcrypt",
]
keywords = [
    "aes",
    "cbc",
    "ctr",
    "ccm",
    "bcrypt",
    "caesar",
    "vigenere",
    "cryptography",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
cipherkit = "cipherkit.cli:main"
cipherkit-caesar = "cipherkit.cli:caesar_main"

[tool.hatch.build.targets.wheel]
packages = ["cipherkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
