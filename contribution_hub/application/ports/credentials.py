"""Port for one-way credential hashing."""

from typing import Protocol


class CredentialHasherPort(Protocol):
    """Port hashing secrets at rest and verifying submitted ones."""

    def hash_secret(self, secret: str) -> str:
        """Return a salted one-way hash of the secret."""

    def verify_secret(self, secret: str, secret_hash: str) -> bool:
        """Return True when the secret matches the stored hash."""


__all__ = ["CredentialHasherPort"]
