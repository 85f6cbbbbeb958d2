"""AES with CBC, CTR and CCM modes, bcrypt password hashing, classical ciphers and a user store."""

__version__ = "0.1.0"

__all__ = ["aes", "modes", "ccm", "passwords", "classical", "users", "cli"]