"""Port for the key-value store holding serialized collections."""

from typing import Protocol


class BlobStorePort(Protocol):
    """Port exposing whole-document reads and writes by key."""

    def load(self, key: str) -> str | None:
        """Return the payload stored under ``key``, or None when absent."""

    def save(self, key: str, payload: str) -> None:
        """Replace the payload stored under ``key``."""


__all__ = ["BlobStorePort"]
