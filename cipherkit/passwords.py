"""bcrypt password hashing: salt generation, hashing and verification."""

from __future__ import annotations

import hmac

import bcrypt as _bcrypt

HASH_PREFIX = "$2a$"
HASH_SIZE = 64
DEFAULT_WORK_FACTOR = 12
MIN_WORK_FACTOR = 4
MAX_WORK_FACTOR = 31


def _to_bytes(value: str | bytes) -> bytes:
    return value.encode("utf-8") if isinstance(value, str) else bytes(value)


def gensalt(work_factor: int = DEFAULT_WORK_FACTOR) -> str:
    """Generate a random ``$2a$`` salt.

    A work factor outside 4 to 31 falls back to the default of 12.
    """
    if not MIN_WORK_FACTOR <= work_factor <= MAX_WORK_FACTOR:
        work_factor = DEFAULT_WORK_FACTOR
    salt = _bcrypt.gensalt(rounds=work_factor, prefix=HASH_PREFIX.strip("$").encode())
    return salt.decode("ascii")


def hashpw(password: str | bytes, salt: str | bytes) -> str:
    """Hash a password with the given salt, or with the salt of an existing hash.

    Raises ValueError when the salt is not a valid bcrypt salt.
    """
    try:
        hashed = _bcrypt.hashpw(_to_bytes(password), _to_bytes(salt))
    except ValueError as exc:
        raise ValueError(f"cannot hash password with salt {salt!r}: {exc}") from exc
    return hashed.decode("ascii")


def checkpw(password: str | bytes, hashed: str | bytes) -> bool:
    """Tell whether the password matches the hash, comparing in constant time.

    Raises ValueError when the hash is not a valid bcrypt hash.
    """
    computed = hashpw(password, hashed).encode("ascii")
    return hmac.compare_digest(computed, _to_bytes(hashed))