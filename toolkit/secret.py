"""Secret keys, secret values and interactive credential prompting."""

from __future__ import annotations

import getpass
import sys
import threading
from collections.abc import Mapping
from typing import Any, Protocol

READING_CREDENTIAL_TIMEOUT = 45.0
"""Default number of seconds allowed for typing credentials."""

_EXPRESSION_CHARACTERS = frozenset("{}[]=+()@#^&*|")


class _Credentials(Protocol):
    username: str
    password: str
    data: str


class SecretKey(str):
    """Key of a secret.

    Keys starting with ``*`` (password) or ``#`` (user name) are static;
    any other key is dynamic and gets enclosed when used in a command.
    """

    def is_dynamic(self) -> bool:
        """Return True unless the key starts with ``*`` or ``#``."""
        return not self.startswith(("*", "#"))

    def secret(self, credentials: _Credentials) -> str:
        """Return the user name, password or data the key refers to."""
        if self.startswith("#") or self.endswith((".username}", ".Username}")):
            return credentials.username
        if credentials.password:
            return credentials.password
        return credentials.data


class Secret(str):
    """A secret value: either a location or an inline expression."""

    def is_location(self) -> bool:
        """Return True if the value holds none of the expression characters."""
        return not any(char in _EXPRESSION_CHARACTERS for char in self)


def new_secrets(secrets: Mapping[str, str] | None) -> dict[SecretKey, Secret]:
    """Build a secret map from plain strings."""
    return {SecretKey(key): Secret(value) for key, value in (secrets or {}).items()}


def read_user_and_password(
    timeout: float = READING_CREDENTIAL_TIMEOUT,
) -> tuple[str, str]:
    """Prompt for a user name and a password typed twice.

    Raises TimeoutError when not completed within ``timeout`` seconds and
    ValueError when the two passwords differ.
    """
    outcome: dict[str, Any] = {}

    def read() -> None:
        print("Enter Username: ", end="", flush=True)
        try:
            outcome["user"] = sys.stdin.readline()
        except (OSError, ValueError):
            outcome["user"] = ""
        try:
            first = getpass.getpass("Enter Password: ")
            second = getpass.getpass("\nRetype Password: ")
        except (OSError, EOFError) as error:
            outcome["error"] = OSError(f"failed to read password {error}")
            return
        if first != second:
            outcome["error"] = ValueError("password did not match")
            return
        outcome["password"] = first

    reader = threading.Thread(target=read, daemon=True)
    reader.start()
    reader.join(timeout)
    if reader.is_alive():
        raise TimeoutError("reading credential timeout")
    if "error" in outcome:
        raise outcome["error"]
    return outcome["user"].strip(), outcome["password"].strip()