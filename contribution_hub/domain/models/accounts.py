"""Domain models for portal accounts."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class AccountRole(str, Enum):
    """Role held by an account."""

    MANAGER = "MANAGER"
    CLIENT = "CLIENT"


class AccountStatus(str, Enum):
    """Registration lifecycle state of an account."""

    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"


@dataclass(frozen=True)
class Account:
    """Registered identity, either a manager or a member.

    Attributes:
        id: Opaque unique identifier.
        name: Display name.
        email: Contact address.
        role: MANAGER or CLIENT.
        status: Lifecycle state.
        registered_at: Registration timestamp, never changed.
        membership_id: Login handle assigned on approval.
        credential_hash: Hashed secret, unset until approval.
        requires_credential_reset: True until the holder sets a secret.
        last_authenticated_at: Timestamp of the last successful sign-in.
    """

    id: str
    name: str
    email: str
    role: AccountRole
    status: AccountStatus
    registered_at: datetime
    membership_id: str | None = None
    credential_hash: str | None = None
    requires_credential_reset: bool = True
    last_authenticated_at: datetime | None = None

    @property
    def is_active_client(self) -> bool:
        """Return True for approved member accounts."""
        return (
            self.status is AccountStatus.APPROVED
            and self.role is AccountRole.CLIENT
        )


__all__ = ["Account", "AccountRole", "AccountStatus"]
