"""Interactive front ends for the classical ciphers and the user store."""

from __future__ import annotations

import argparse
import sys
from typing import TextIO

from cipherkit.classical import (
    CaesarCipher,
    caesar_decrypt,
    caesar_encrypt,
    vigenere_decrypt,
    vigenere_encrypt,
)
from cipherkit.users import DEFAULT_PATH, UserStore


def _say(text: str) -> None:
    print(text, end="", flush=True)


class _Console:
    """Reads answers from a text stream, a line or a token at a time."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream

    def line(self) -> str:
        line = self._stream.readline()
        if not line:
            raise EOFError("input ended")
        return line.removesuffix("\n")

    def word(self) -> str:
        while True:
            tokens = self.line().split()
            if tokens:
                return tokens[0]

    def number(self) -> int | None:
        try:
            return int(self.word())
        except ValueError:
            return None


def _login(store: UserStore, name: str, password: str) -> bool:
    try:
        ok = store.login(name, password)
    except OSError:
        _say("Error opening the file.\n")
        return False
    _say("You are logged in.\n" if ok else "Username or password is invalid.\n")
    return ok


def _register(store: UserStore, name: str, password: str) -> bool:
    try:
        store.register(name, password)
    except OSError:
        _say("Error in opening the file.\n")
    if _login(store, name, password):
        return True
    _say("Registration failed.\n")
    return False


def _session(console: _Console, invalid_message: str) -> None:
    _say("\nDo you want to:\n1. Encrypt\n2. Decrypt\n")
    encrypting = console.number() == 1

    _say("\nEnter your message:\n")
    message = console.line()

    _say("\nChoose key type:\n1. String key\n2. Integer shift\n")
    key_type = console.number()

    if key_type == 1:
        _say("Enter your string key: ")
        key = console.word()
        if encrypting:
            _say(f"Encrypted Message: {vigenere_encrypt(message, key)}\n")
        else:
            _say(f"Decrypted Message: {vigenere_decrypt(message, key)}\n")
    elif key_type == 2:
        _say("Enter your integer shift: ")
        shift = console.number() or 0
        if encrypting:
            _say(f"Encrypted Message: {caesar_encrypt(message, shift)}\n")
        else:
            _say(f"Decrypted Message: {caesar_decrypt(message, shift)}\n")
    else:
        _say(invalid_message)


def _run(store: UserStore, console: _Console) -> None:
    _say("Welcome to the Cryptographic System\n")
    _say("Select\n1. Login \n2. Register\n")
    choice = console.number()

    if choice not in (1, 2):
        return

    _say("\nEnter your username: ")
    name = console.line()
    _say("Enter your password: ")
    password = console.line()

    if choice == 1:
        if _login(store, name, password):
            _session(console, "Invalid input.\n")
        else:
            _say("Login failed.\n")
        return

    if not _register(store, name, password):
        _say("Registration failed.\n")
        return
    _say("Registration successful.\n")
    if _login(store, name, password):
        _session(console, "Login failed.\n")
    else:
        _say("Invalid input\n")


def main(argv: list[str] | None = None) -> int:
    """Run the login/register menu followed by one encryption or decryption."""
    parser = argparse.ArgumentParser(
        prog="cipherkit",
        description="Log in or register, then encrypt or decrypt a message.",
    )
    parser.add_argument(
        "--users-file",
        default=DEFAULT_PATH,
        help=f"CSV file of registered users (default: {DEFAULT_PATH})",
    )
    args = parser.parse_args(argv)
    try:
        _run(UserStore(args.users_file), _Console(sys.stdin))
    except EOFError:
        return 1
    return 0


def caesar_main(argv: list[str] | None = None) -> int:
    """Run the Caesar cipher menu until the user chooses to exit."""
    parser = argparse.ArgumentParser(
        prog="cipherkit-caesar",
        description="Encrypt and decrypt text with the Caesar cipher.",
    )
    parser.parse_args(argv)
    cipher = CaesarCipher()
    console = _Console(sys.stdin)

    try:
        while True:
            _say("\n===== Cryptography Program =====\n")
            _say("1. Encrypt\n2. Decrypt\n3. Exit\n")
            _say("Choose an option: ")
            choice = console.number()
            if choice == 3:
                break
            if choice in (1, 2):
                _say("Enter text: ")
                text = console.line()
                _say("Enter key (1-25): ")
                key = console.number() or 0
                if choice == 1:
                    result = cipher.encrypt(text, key)
                else:
                    result = cipher.decrypt(text, key)
                _say(f"Result: {result}\n")
    except EOFError:
        pass

    _say("Exiting program...\n")
    return 0