"""Domain normalization helpers."""


def normalize_text(value: str | None) -> str:
    """Strip surrounding whitespace, mapping None to an empty string."""
    if not value:
        return ""
    return value.strip()


def membership_key(membership_id: str | None) -> str | None:
    """Return the case-insensitive comparison key for a membership id.

    Args:
        membership_id: Raw membership id as typed or stored.

    Returns:
        str | None: Upper-cased, stripped id, or None when blank.
    """
    cleaned = normalize_text(membership_id)
    return cleaned.upper() if cleaned else None


__all__ = ["normalize_text", "membership_key"]
