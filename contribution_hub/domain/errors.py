"""Typed errors surfaced by domain operations.

Every error carries a ``kind`` naming its category so adapters can branch on
it without inspecting messages.
"""


class ContributionHubError(Exception):
    """Base class for all categorized contribution hub errors."""

    kind = "ContributionHubError"


class NotFoundError(ContributionHubError):
    """Referenced account or payment does not exist."""

    kind = "NotFound"


class InvalidCredentialError(ContributionHubError):
    """Authentication secret did not match."""

    kind = "InvalidCredential"


class AccountPendingError(ContributionHubError):
    """Authentication blocked because the account awaits approval."""

    kind = "AccountPending"


class AccountDeactivatedError(ContributionHubError):
    """Authentication blocked because the account was rejected."""

    kind = "AccountDeactivated"


class ValidationError(ContributionHubError):
    """Malformed input or a transition the current state does not allow."""

    kind = "ValidationError"


class StorageFailure(ContributionHubError):
    """The persistence collaborator could not complete a read or write."""

    kind = "StorageFailure"


__all__ = [
    "ContributionHubError",
    "NotFoundError",
    "InvalidCredentialError",
    "AccountPendingError",
    "AccountDeactivatedError",
    "ValidationError",
    "StorageFailure",
]
