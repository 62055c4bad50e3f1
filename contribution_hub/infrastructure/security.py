"""Credential hashing backed by bcrypt."""

import bcrypt

from contribution_hub.application.ports.credentials import (
    CredentialHasherPort,
)


def _to_bcrypt_secret(secret: str) -> bytes:
    """Encode the secret, keeping the first 72 bytes bcrypt reads."""
    encoded = secret.encode("utf-8")
    if len(encoded) > 72:
        encoded = encoded[:72]
    return encoded


class BcryptCredentialHasher(CredentialHasherPort):
    """Salted one-way hashing of account secrets."""

    def __init__(self, rounds: int = 12) -> None:
        """Initialize the hasher.

        Args:
            rounds: bcrypt cost factor.
        """
        self._rounds = rounds

    def hash_secret(self, secret: str) -> str:
        """Return a bcrypt hash as a UTF-8 string."""
        salt = bcrypt.gensalt(rounds=self._rounds)
        return bcrypt.hashpw(_to_bcrypt_secret(secret), salt).decode("utf-8")

    def verify_secret(self, secret: str, secret_hash: str) -> bool:
        """Return True when the secret matches the stored hash.

        A malformed stored hash counts as a mismatch.
        """
        try:
            return bcrypt.checkpw(
                _to_bcrypt_secret(secret),
                secret_hash.encode("utf-8"),
            )
        except ValueError:
            return False


__all__ = ["BcryptCredentialHasher"]
