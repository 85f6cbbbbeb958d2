"""AES in CCM mode (NIST SP 800-38C): CBC-MAC authentication with CTR encryption."""

from __future__ import annotations

import hmac

from cipherkit.aes import AES, BLOCK_SIZE
from cipherkit.modes import cbc_mac, encrypt_ctr, increment_iv

MAC_LENGTHS = frozenset({4, 6, 8, 10, 12, 14, 16})
MIN_NONCE_LENGTH = 7
MAX_NONCE_LENGTH = 13
MAX_ASSOC_LENGTH = 32768

_ZERO_IV = bytes(BLOCK_SIZE)


class AuthenticationError(ValueError):
    """The MAC carried by a CCM ciphertext does not match its contents."""


def _check_params(assoc: bytes, nonce: bytes, mac_len: int) -> None:
    if mac_len not in MAC_LENGTHS:
        raise ValueError(
            f"MAC length must be one of {sorted(MAC_LENGTHS)}, not {mac_len}"
        )
    if not MIN_NONCE_LENGTH <= len(nonce) <= MAX_NONCE_LENGTH:
        raise ValueError(
            f"nonce must be {MIN_NONCE_LENGTH} to {MAX_NONCE_LENGTH} bytes long, "
            f"not {len(nonce)}"
        )
    if len(assoc) > MAX_ASSOC_LENGTH:
        raise ValueError(
            f"associated data may not exceed {MAX_ASSOC_LENGTH} bytes, not {len(assoc)}"
        )


def _length_field_size(nonce: bytes) -> int:
    return BLOCK_SIZE - 1 - len(nonce)


def _first_counter_block(nonce: bytes) -> bytes:
    flags = (_length_field_size(nonce) - 1) & 0x07
    return bytes([flags]) + nonce + bytes(_length_field_size(nonce))


def _first_format_block(assoc: bytes, payload_len: int, mac_len: int, nonce: bytes) -> bytes:
    flags = ((((mac_len - 2) // 2) & 0x07) << 3) | ((_length_field_size(nonce) - 1) & 0x07)
    if assoc:
        flags += 0x40
    block = bytearray([flags]) + nonce + bytes(_length_field_size(nonce))
    # Only the low sixteen bits of the payload length are recorded.
    block[14] = (payload_len >> 8) & 0xFF
    block[15] = payload_len & 0xFF
    return bytes(block)


def _format_assoc(assoc: bytes) -> bytes:
    data = (len(assoc) & 0xFFFF).to_bytes(2, "big") + assoc
    # The padding is always added, a whole block of it when the data is aligned.
    pad = BLOCK_SIZE - (BLOCK_SIZE + len(data)) % BLOCK_SIZE
    return data + bytes(pad)


def _format_payload(payload: bytes) -> bytes:
    return payload + bytes(-len(payload) % BLOCK_SIZE)


def _compute_mac(cipher: AES, payload: bytes, assoc: bytes, nonce: bytes, mac_len: int) -> bytes:
    formatted = (
        _first_format_block(assoc, len(payload), mac_len, nonce)
        + _format_assoc(assoc)
        + _format_payload(payload)
    )
    return cbc_mac(formatted, cipher, _ZERO_IV)


def _payload_counter(counter: bytes, mac_len: int) -> bytes:
    return increment_iv(counter, BLOCK_SIZE - 1 - mac_len)


def encrypt_ccm(payload: bytes, assoc: bytes, nonce: bytes, mac_len: int, key: bytes) -> bytes:
    """Encrypt and authenticate the payload; returns the ciphertext followed by the MAC."""
    payload, assoc, nonce = bytes(payload), bytes(assoc), bytes(nonce)
    _check_params(assoc, nonce, mac_len)
    cipher = AES(key)

    mac = _compute_mac(cipher, payload, assoc, nonce, mac_len)[:mac_len]
    counter = _first_counter_block(nonce)
    encrypted_payload = encrypt_ctr(payload, cipher, _payload_counter(counter, mac_len))
    encrypted_mac = encrypt_ctr(mac, cipher, counter)
    return encrypted_payload + encrypted_mac


def decrypt_ccm(
    ciphertext: bytes,
    assoc: bytes,
    nonce: bytes,
    mac_len: int,
    key: bytes,
    verify: bool = True,
) -> bytes:
    """Decrypt a CCM ciphertext and return the plaintext.

    With ``verify`` set, the embedded MAC is checked and AuthenticationError is
    raised when it does not match; without it the plaintext is returned unchecked.
    """
    ciphertext, assoc, nonce = bytes(ciphertext), bytes(assoc), bytes(nonce)
    _check_params(assoc, nonce, mac_len)
    if len(ciphertext) <= mac_len:
        raise ValueError(
            f"ciphertext of {len(ciphertext)} bytes is too short for a {mac_len}-byte MAC"
        )
    cipher = AES(key)

    split = len(ciphertext) - mac_len
    counter = _first_counter_block(nonce)
    plaintext = encrypt_ctr(ciphertext[:split], cipher, _payload_counter(counter, mac_len))

    if verify:
        received_mac = encrypt_ctr(ciphertext[split:], cipher, counter)
        expected_mac = _compute_mac(cipher, plaintext, assoc, nonce, mac_len)[:mac_len]
        if not hmac.compare_digest(received_mac, expected_mac):
            raise AuthenticationError("CCM authentication failed")
    return plaintext