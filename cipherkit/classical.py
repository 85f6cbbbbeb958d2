"""Caesar and Vigenère ciphers over ASCII letters.

Letters keep their case; every other character passes through unchanged.
Arithmetic follows signed 8-bit character rules, so shifts that leave the
alphabet produce characters outside it exactly as the reference program does.
"""

from __future__ import annotations

_ALPHABET_SIZE = 26


def _c_mod(value: int, modulus: int) -> int:
    """Remainder truncated toward zero, keeping the sign of the dividend."""
    remainder = abs(value) % modulus
    return -remainder if value < 0 else remainder


def _is_letter(ch: str) -> bool:
    return ch.isascii() and ch.isalpha()


def _base(ch: str) -> int:
    return ord("A") if ch.isupper() else ord("a")


def _char(code: int) -> str:
    return chr(code & 0xFF)


def _check_key(key: str) -> None:
    if not key:
        raise ValueError("key must not be empty")


def vigenere_encrypt(message: str, key: str) -> str:
    """Encrypt with the Vigenère cipher; the key advances on every character."""
    _check_key(key)
    out = []
    for pos, ch in enumerate(message):
        if _is_letter(ch):
            k = key[pos % len(key)]
            value = (ord(ch) - _base(ch)) + (ord(k) - _base(k))
            ch = _char(_c_mod(value, _ALPHABET_SIZE) + _base(ch))
        out.append(ch)
    return "".join(out)


def vigenere_decrypt(message: str, key: str) -> str:
    """Decrypt a Vigenère ciphertext made with the same key."""
    _check_key(key)
    out = []
    for pos, ch in enumerate(message):
        if _is_letter(ch):
            k = key[pos % len(key)]
            value = (ord(ch) - _base(ch)) - (ord(k) - _base(k)) + _ALPHABET_SIZE
            ch = _char(_c_mod(value, _ALPHABET_SIZE) + _base(ch))
        out.append(ch)
    return "".join(out)


def caesar_encrypt(message: str, shift: int) -> str:
    """Shift every letter forward by ``shift`` places."""
    return "".join(
        _char(_c_mod(ord(ch) - _base(ch) + shift, _ALPHABET_SIZE) + _base(ch))
        if _is_letter(ch)
        else ch
        for ch in message
    )


def caesar_decrypt(message: str, shift: int) -> str:
    """Shift every letter back by ``shift`` places."""
    return "".join(
        _char(_c_mod(ord(ch) - _base(ch) - shift + _ALPHABET_SIZE, _ALPHABET_SIZE) + _base(ch))
        if _is_letter(ch)
        else ch
        for ch in message
    )


class CaesarCipher:
    """A Caesar cipher whose decryption is encryption by the complementary shift."""

    def encrypt(self, text: str, key: int) -> str:
        return caesar_encrypt(text, key)

    def decrypt(self, text: str, key: int) -> str:
        return self.encrypt(text, _ALPHABET_SIZE - key)