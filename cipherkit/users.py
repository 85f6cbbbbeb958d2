"""A user store kept as ``name,password`` lines in a CSV file."""

from __future__ import annotations

import os
from pathlib import Path

DEFAULT_PATH = "login.csv"


class UserStore:
    """Registers users by appending to a file and checks their logins against it."""

    def __init__(self, path: str | os.PathLike[str] = DEFAULT_PATH) -> None:
        self.path = Path(path)

    def register(self, name: str, password: str) -> None:
        """Append a user; raises OSError when the file cannot be written."""
        with self.path.open("a", encoding="utf-8", newline="\n") as handle:
            handle.write(f"{name},{password}\n")

    def login(self, name: str, password: str) -> bool:
        """Tell whether some line holds this name and password.

        Raises OSError when the file cannot be read.
        """
        with self.path.open("r", encoding="utf-8", newline="\n") as handle:
            for line in handle:
                user, _, phrase = line.removesuffix("\n").partition(",")
                if user == name and phrase == password:
                    return True
        return False