"""CBC, CBC-MAC and CTR modes of operation for the AES block cipher."""

from __future__ import annotations

from collections.abc import Iterator

from cipherkit.aes import AES, BLOCK_SIZE


def xor_bytes(a: bytes, b: bytes) -> bytes:
    """XOR two byte strings; the result is as long as the shorter one."""
    return bytes(x ^ y for x, y in zip(a, b))


def _check_iv(iv: bytes) -> bytes:
    iv = bytes(iv)
    if len(iv) != BLOCK_SIZE:
        raise ValueError(f"IV must be {BLOCK_SIZE} bytes long, not {len(iv)}")
    return iv


def _blocks(data: bytes) -> Iterator[bytes]:
    data = bytes(data)
    if len(data) % BLOCK_SIZE:
        raise ValueError(
            f"input length {len(data)} is not a multiple of {BLOCK_SIZE} bytes"
        )
    for start in range(0, len(data), BLOCK_SIZE):
        yield data[start:start + BLOCK_SIZE]


def _cbc_chain(data: bytes, cipher: AES, iv: bytes) -> Iterator[bytes]:
    previous = _check_iv(iv)
    for block in _blocks(data):
        previous = cipher.encrypt_block(xor_bytes(previous, block))
        yield previous


def encrypt_cbc(data: bytes, cipher: AES, iv: bytes) -> bytes:
    """Encrypt data whose length is a multiple of the block size in CBC mode."""
    return b"".join(_cbc_chain(data, cipher, iv))


def decrypt_cbc(data: bytes, cipher: AES, iv: bytes) -> bytes:
    """Decrypt CBC ciphertext whose length is a multiple of the block size."""
    previous = _check_iv(iv)
    out = bytearray()
    for block in _blocks(data):
        out += xor_bytes(previous, cipher.decrypt_block(block))
        previous = block
    return bytes(out)


def cbc_mac(data: bytes, cipher: AES, iv: bytes) -> bytes:
    """Return only the last CBC ciphertext block of the data, its CBC-MAC."""
    last = None
    for last in _cbc_chain(data, cipher, iv):
        pass
    if last is None:
        raise ValueError("CBC-MAC needs at least one block of input")
    return last


def increment_iv(iv: bytes, counter_size: int) -> bytes:
    """Increment the last ``counter_size`` bytes of the IV as a big-endian counter.

    The counter wraps around within those bytes; the rest of the IV is kept.
    A counter size of zero or less leaves the IV unchanged.
    """
    iv = _check_iv(iv)
    if counter_size > BLOCK_SIZE:
        raise ValueError(f"counter size may not exceed {BLOCK_SIZE} bytes")
    if counter_size <= 0:
        return iv
    split = BLOCK_SIZE - counter_size
    counter = (int.from_bytes(iv[split:], "big") + 1) % (1 << (8 * counter_size))
    return iv[:split] + counter.to_bytes(counter_size, "big")


def _keystream(cipher: AES, iv: bytes) -> Iterator[bytes]:
    counter = _check_iv(iv)
    while True:
        yield cipher.encrypt_block(counter)
        counter = increment_iv(counter, BLOCK_SIZE)


def encrypt_ctr(data: bytes, cipher: AES, iv: bytes) -> bytes:
    """Encrypt data of any length in CTR mode, counting over the whole IV."""
    data = bytes(data)
    stream = _keystream(cipher, iv)
    return b"".join(
        xor_bytes(data[start:start + BLOCK_SIZE], next(stream))
        for start in range(0, len(data), BLOCK_SIZE)
    )


def decrypt_ctr(data: bytes, cipher: AES, iv: bytes) -> bytes:
    """Decrypt CTR data; the mode is its own inverse."""
    return encrypt_ctr(data, cipher, iv)