import pytest

from cipherkit.classical import (
    CaesarCipher,
    caesar_decrypt,
    caesar_encrypt,
    vigenere_decrypt,
    vigenere_encrypt,
)

MESSAGE = "Hello, World! 123"


def test_vigenere_worked_example():
    assert vigenere_encrypt("ATTACKATDAWN", "LEMON") == "LXFOPVEFRNHR"


def test_vigenere_decrypt_worked_example():
    assert vigenere_decrypt("LXFOPVEFRNHR", "LEMON") == "ATTACKATDAWN"


@pytest.mark.parametrize("key", ["key", "LEMON", "MiXeD", "z"])
def test_vigenere_round_trip(key):
    assert vigenere_decrypt(vigenere_encrypt(MESSAGE, key), key) == MESSAGE


def test_vigenere_keeps_non_letters_and_case():
    encrypted = vigenere_encrypt(MESSAGE, "secret")
    assert [c for c in encrypted if not c.isalpha()] == [c for c in MESSAGE if not c.isalpha()]
    assert [c.isupper() for c in encrypted if c.isalpha()] == [
        c.isupper() for c in MESSAGE if c.isalpha()
    ]


def test_vigenere_key_a_is_identity():
    assert vigenere_encrypt(MESSAGE, "a") == MESSAGE


def test_vigenere_key_case_does_not_matter():
    assert vigenere_encrypt(MESSAGE, "Lemon") == vigenere_encrypt(MESSAGE, "lEMON")


def test_vigenere_empty_key_rejected():
    with pytest.raises(ValueError):
        vigenere_encrypt(MESSAGE, "")
    with pytest.raises(ValueError):
        vigenere_decrypt(MESSAGE, "")


def test_caesar_simple_shift():
    assert caesar_encrypt("abc XYZ", 3) == "def ABC"


@pytest.mark.parametrize("shift", range(26))
def test_caesar_round_trip(shift):
    assert caesar_decrypt(caesar_encrypt(MESSAGE, shift), shift) == MESSAGE


def test_caesar_full_turn_is_identity():
    assert caesar_encrypt(MESSAGE, 26) == MESSAGE
    assert caesar_encrypt(MESSAGE, 0) == MESSAGE


def test_caesar_matches_vigenere_with_single_letter_key():
    assert caesar_encrypt(MESSAGE, 7) == vigenere_encrypt(MESSAGE, "h")


def test_caesar_leaves_non_ascii_untouched():
    assert caesar_encrypt("é", 5) == "é"


@pytest.mark.parametrize("key", range(1, 26))
def test_caesar_cipher_class_round_trip(key):
    cipher = CaesarCipher()
    assert cipher.decrypt(cipher.encrypt(MESSAGE, key), key) == MESSAGE


def test_caesar_cipher_class_agrees_with_function():
    assert CaesarCipher().encrypt(MESSAGE, 11) == caesar_encrypt(MESSAGE, 11)
    assert CaesarCipher().decrypt(MESSAGE, 11) == caesar_encrypt(MESSAGE, 15)