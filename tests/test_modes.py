import pytest

from cipherkit.aes import AES
from cipherkit.modes import (
    cbc_mac,
    decrypt_cbc,
    decrypt_ctr,
    encrypt_cbc,
    encrypt_ctr,
    increment_iv,
    xor_bytes,
)

KEY_128 = bytes.fromhex("2b7e151628aed2a6abf7158809cf4f3c")
CBC_IV = bytes.fromhex("000102030405060708090a0b0c0d0e0f")
CTR_IV = bytes.fromhex("f0f1f2f3f4f5f6f7f8f9fafbfcfdfeff")
PLAINTEXT = bytes.fromhex(
    "6bc1bee22e409f96e93d7e117393172a" "ae2d8a571e03ac9c9eb76fac45af8e51"
)


@pytest.fixture
def cipher():
    return AES(KEY_128)


def test_cbc_encrypt_known_vector(cipher):
    expected = bytes.fromhex(
        "7649abac8119b246cee98e9b12e9197d" "5086cb9b507219ee95db113a917678b2"
    )
    assert encrypt_cbc(PLAINTEXT, cipher, CBC_IV) == expected


def test_cbc_decrypt_reverses_known_vector(cipher):
    ciphertext = encrypt_cbc(PLAINTEXT, cipher, CBC_IV)
    assert decrypt_cbc(ciphertext, cipher, CBC_IV) == PLAINTEXT


@pytest.mark.parametrize("key_len", [16, 24, 32])
def test_cbc_round_trip_all_key_sizes(key_len):
    cipher = AES(bytes(range(key_len)))
    data = bytes(range(64))
    ciphertext = encrypt_cbc(data, cipher, CBC_IV)
    assert len(ciphertext) == len(data)
    assert ciphertext != data
    assert decrypt_cbc(ciphertext, cipher, CBC_IV) == data


def test_cbc_rejects_partial_block(cipher):
    with pytest.raises(ValueError):
        encrypt_cbc(b"x" * 17, cipher, CBC_IV)
    with pytest.raises(ValueError):
        decrypt_cbc(b"x" * 15, cipher, CBC_IV)


def test_cbc_rejects_bad_iv(cipher):
    with pytest.raises(ValueError):
        encrypt_cbc(PLAINTEXT, cipher, CBC_IV[:8])


def test_cbc_empty_input(cipher):
    assert encrypt_cbc(b"", cipher, CBC_IV) == b""


def test_cbc_mac_is_last_cbc_block(cipher):
    data = bytes(range(48))
    assert cbc_mac(data, cipher, CBC_IV) == encrypt_cbc(data, cipher, CBC_IV)[-16:]


def test_cbc_mac_rejects_empty_and_partial(cipher):
    with pytest.raises(ValueError):
        cbc_mac(b"", cipher, CBC_IV)
    with pytest.raises(ValueError):
        cbc_mac(b"abc", cipher, CBC_IV)


def test_ctr_encrypt_known_vector(cipher):
    expected = bytes.fromhex("874d6191b620e3261bef6864990db6ce")
    assert encrypt_ctr(PLAINTEXT, cipher, CTR_IV)[:16] == expected


def test_ctr_second_block_uses_incremented_counter(cipher):
    ciphertext = encrypt_ctr(PLAINTEXT, cipher, CTR_IV)
    next_iv = increment_iv(CTR_IV, 16)
    assert ciphertext[16:] == encrypt_ctr(PLAINTEXT[16:], cipher, next_iv)


def test_ctr_partial_block_is_prefix(cipher):
    data = bytes(range(40))
    full = encrypt_ctr(data, cipher, CTR_IV)
    assert encrypt_ctr(data[:21], cipher, CTR_IV) == full[:21]


def test_ctr_empty_input(cipher):
    assert encrypt_ctr(b"", cipher, CTR_IV) == b""


@pytest.mark.parametrize("length", [1, 15, 16, 17, 33, 100])
def test_ctr_round_trip(cipher, length):
    data = bytes((i * 7) & 0xFF for i in range(length))
    ciphertext = encrypt_ctr(data, cipher, CTR_IV)
    assert len(ciphertext) == length
    assert decrypt_ctr(ciphertext, cipher, CTR_IV) == data


def test_ctr_rejects_bad_iv(cipher):
    with pytest.raises(ValueError):
        encrypt_ctr(b"data", cipher, b"short")


def test_increment_iv_adds_one():
    result = increment_iv(CBC_IV, 16)
    assert int.from_bytes(result, "big") == int.from_bytes(CBC_IV, "big") + 1


def test_increment_iv_wraps_within_counter():
    iv = bytes([0x11] * 14) + b"\xff\xff"
    assert increment_iv(iv, 2) == bytes([0x11] * 14) + b"\x00\x00"


def test_increment_iv_carries_into_counter_bytes():
    iv = bytes(13) + b"\x00\x01\xff"
    result = increment_iv(iv, 3)
    assert result[:13] == iv[:13]
    assert int.from_bytes(result[13:], "big") == int.from_bytes(iv[13:], "big") + 1


@pytest.mark.parametrize("size", [0, -1])
def test_increment_iv_non_positive_size_is_noop(size):
    assert increment_iv(CTR_IV, size) == CTR_IV


def test_increment_iv_rejects_oversized_counter():
    with pytest.raises(ValueError):
        increment_iv(CTR_IV, 17)


def test_xor_bytes_self_is_zero():
    assert xor_bytes(PLAINTEXT, PLAINTEXT) == bytes(len(PLAINTEXT))


def test_xor_bytes_is_involution():
    assert xor_bytes(xor_bytes(PLAINTEXT, CBC_IV), CBC_IV) == PLAINTEXT[:16]


def test_xor_bytes_truncates_to_shorter():
    assert len(xor_bytes(b"abcdef", b"xyz")) == 3
    assert xor_bytes(b"abc", bytes(3)) == b"abc"