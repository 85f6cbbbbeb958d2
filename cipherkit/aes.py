"""The AES block cipher (FIPS 197) for 128, 192 and 256-bit keys."""

from __future__ import annotations

BLOCK_SIZE = 16

_KEY_ROUNDS = {16: 10, 24: 12, 32: 14}

_RCON = (
    0x01000000, 0x02000000, 0x04000000, 0x08000000, 0x10000000,
    0x20000000, 0x40000000, 0x80000000, 0x1B000000, 0x36000000,
    0x6C000000, 0xD8000000, 0xAB000000, 0x4D000000, 0x9A000000,
)


def _xtime(value: int) -> int:
    value <<= 1
    if value & 0x100:
        value ^= 0x11B
    return value


def _gf_mul(a: int, b: int) -> int:
    """Multiply two elements of GF(2^8) modulo the AES polynomial."""
    result = 0
    while b:
        if b & 1:
            result ^= a
        a = _xtime(a)
        b >>= 1
    return result


def _gf_inverse(value: int) -> int:
    if value == 0:
        return 0
    # a^254 is the multiplicative inverse in GF(2^8).
    result, base, exponent = 1, value, 254
    while exponent:
        if exponent & 1:
            result = _gf_mul(result, base)
        base = _gf_mul(base, base)
        exponent >>= 1
    return result


def _rotl8(value: int, shift: int) -> int:
    return ((value << shift) | (value >> (8 - shift))) & 0xFF


def _build_sbox() -> bytes:
    table = bytearray(256)
    for value in range(256):
        inv = _gf_inverse(value)
        table[value] = (
            inv ^ _rotl8(inv, 1) ^ _rotl8(inv, 2) ^ _rotl8(inv, 3) ^ _rotl8(inv, 4) ^ 0x63
        )
    return bytes(table)


_SBOX = _build_sbox()
_INV_SBOX = bytes(_SBOX.index(value) for value in range(256))

_MUL2, _MUL3, _MUL9, _MUL11, _MUL13, _MUL14 = (
    bytes(_gf_mul(value, factor) for value in range(256))
    for factor in (2, 3, 9, 11, 13, 14)
)


def _sub_word(word: int) -> int:
    return int.from_bytes(bytes(_SBOX[b] for b in word.to_bytes(4, "big")), "big")


def _rot_word(word: int) -> int:
    return ((word << 8) | (word >> 24)) & 0xFFFFFFFF


def key_setup(key: bytes) -> tuple[int, ...]:
    """Expand a 16, 24 or 32-byte key into its schedule of 32-bit words."""
    key = bytes(key)
    if len(key) not in _KEY_ROUNDS:
        raise ValueError(f"AES key must be 16, 24 or 32 bytes long, not {len(key)}")
    nk = len(key) // 4
    rounds = _KEY_ROUNDS[len(key)]
    words = [int.from_bytes(key[i:i + 4], "big") for i in range(0, len(key), 4)]
    for idx in range(nk, 4 * (rounds + 1)):
        temp = words[-1]
        if idx % nk == 0:
            temp = _sub_word(_rot_word(temp)) ^ _RCON[(idx - 1) // nk]
        elif nk > 6 and idx % nk == 4:
            temp = _sub_word(temp)
        words.append(words[idx - nk] ^ temp)
    return tuple(words)


def _add_round_key(state: list[int], round_key: bytes) -> list[int]:
    return [s ^ k for s, k in zip(state, round_key)]


def _shift_rows(state: list[int]) -> list[int]:
    return [state[(i % 4) + 4 * ((i // 4 + i % 4) % 4)] for i in range(16)]


def _inv_shift_rows(state: list[int]) -> list[int]:
    return [state[(i % 4) + 4 * ((i // 4 - i % 4) % 4)] for i in range(16)]


def _mix_columns(state: list[int]) -> list[int]:
    out: list[int] = []
    for col in range(0, 16, 4):
        a0, a1, a2, a3 = state[col:col + 4]
        out += (
            _MUL2[a0] ^ _MUL3[a1] ^ a2 ^ a3,
            a0 ^ _MUL2[a1] ^ _MUL3[a2] ^ a3,
            a0 ^ a1 ^ _MUL2[a2] ^ _MUL3[a3],
            _MUL3[a0] ^ a1 ^ a2 ^ _MUL2[a3],
        )
    return out


def _inv_mix_columns(state: list[int]) -> list[int]:
    out: list[int] = []
    for col in range(0, 16, 4):
        a0, a1, a2, a3 = state[col:col + 4]
        out += (
            _MUL14[a0] ^ _MUL11[a1] ^ _MUL13[a2] ^ _MUL9[a3],
            _MUL9[a0] ^ _MUL14[a1] ^ _MUL11[a2] ^ _MUL13[a3],
            _MUL13[a0] ^ _MUL9[a1] ^ _MUL14[a2] ^ _MUL11[a3],
            _MUL11[a0] ^ _MUL13[a1] ^ _MUL9[a2] ^ _MUL14[a3],
        )
    return out


def _check_block(block: bytes) -> list[int]:
    data = bytes(block)
    if len(data) != BLOCK_SIZE:
        raise ValueError(f"AES block must be {BLOCK_SIZE} bytes long, not {len(data)}")
    return list(data)


class AES:
    """An AES cipher bound to one key, working on single 16-byte blocks."""

    __slots__ = ("key_size", "rounds", "_round_keys")

    def __init__(self, key: bytes) -> None:
        words = key_setup(key)
        self.key_size = len(key) * 8
        self.rounds = _KEY_ROUNDS[len(key)]
        self._round_keys = [
            b"".join(word.to_bytes(4, "big") for word in words[i:i + 4])
            for i in range(0, len(words), 4)
        ]

    def encrypt_block(self, block: bytes) -> bytes:
        """Encrypt one 16-byte block."""
        state = _add_round_key(_check_block(block), self._round_keys[0])
        for round_key in self._round_keys[1:-1]:
            state = [_SBOX[b] for b in state]
            state = _mix_columns(_shift_rows(state))
            state = _add_round_key(state, round_key)
        state = _shift_rows([_SBOX[b] for b in state])
        return bytes(_add_round_key(state, self._round_keys[-1]))

    def decrypt_block(self, block: bytes) -> bytes:
        """Decrypt one 16-byte block."""
        state = _add_round_key(_check_block(block), self._round_keys[-1])
        for round_key in reversed(self._round_keys[1:-1]):
            state = [_INV_SBOX[b] for b in _inv_shift_rows(state)]
            state = _inv_mix_columns(_add_round_key(state, round_key))
        state = [_INV_SBOX[b] for b in _inv_shift_rows(state)]
        return bytes(_add_round_key(state, self._round_keys[0]))