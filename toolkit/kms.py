"""Requests and responses for key management encryption services."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Resource:
    """Data to process, given inline or by URL or parameter name."""

    url: str = ""
    parameter: str = ""
    data: bytes = b""


@dataclass
class EncryptRequest:
    """Asks for a resource to be encrypted with a key."""

    key: str = ""
    resource: Resource | None = None
    target_url: str = ""

    def validate(self) -> None:
        """Raise ValueError if the key or the resource is missing."""
        if not self.key:
            raise ValueError("key was empty")
        if self.resource is None:
            raise ValueError("nothing to encrypt")


@dataclass
class EncryptResponse:
    """Encrypted data and its text form."""

    encrypted_data: bytes = b""
    encrypted_text: str = ""


@dataclass
class DecryptRequest:
    """Asks for a resource to be decrypted with a key."""

    key: str = ""
    resource: Resource | None = None

    def validate(self) -> None:
        """Raise ValueError if the key or the resource is missing."""
        if not self.key:
            raise ValueError("key was empty")
        if self.resource is None:
            raise ValueError("nothing to decrypt")


@dataclass
class DecryptResponse:
    """Decrypted data and its text form."""

    data: bytes = b""
    text: str = ""