"""Opaque identifier generation."""

import uuid


def new_id(prefix: str) -> str:
    """Return a unique identifier such as ``p-3f2a...``.

    Args:
        prefix: Short entity prefix (``u``, ``p`` or ``n``).

    Returns:
        str: Prefixed random identifier.
    """
    return f"{prefix}-{uuid.uuid4().hex}"


__all__ = ["new_id"]
