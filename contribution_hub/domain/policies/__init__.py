"""Domain policies package."""

from .account_lifecycle import (
    approve,
    change_credential,
    ensure_can_authenticate,
    new_registration,
    reject,
)

__all__ = [
    "approve",
    "change_credential",
    "ensure_can_authenticate",
    "new_registration",
    "reject",
]
