"""Account lifecycle transitions.

Accounts start PENDING. Approval and rejection are only allowed from
PENDING; REJECTED is terminal and only account deletion leaves it.
Credential changes are only allowed on APPROVED accounts.
"""

from dataclasses import replace
from datetime import datetime

from contribution_hub.domain.errors import (
    AccountDeactivatedError,
    AccountPendingError,
    ValidationError,
)
from contribution_hub.domain.models import Account, AccountRole, AccountStatus


def new_registration(
    account_id: str,
    name: str,
    email: str,
    registered_at: datetime,
) -> Account:
    """Return a freshly registered, pending member account."""
    return Account(
        id=account_id,
        name=name,
        email=email,
        role=AccountRole.CLIENT,
        status=AccountStatus.PENDING,
        registered_at=registered_at,
        requires_credential_reset=True,
    )


def approve(
    account: Account,
    membership_id: str,
    credential_hash: str,
) -> Account:
    """Approve a pending account and assign its login handle.

    Args:
        account: Account awaiting approval.
        membership_id: Login handle chosen by the manager.
        credential_hash: Hash of the temporary secret.

    Returns:
        Account: Approved account that must reset its secret.
    """
    _ensure_status(account, AccountStatus.PENDING, "approve")
    return replace(
        account,
        status=AccountStatus.APPROVED,
        membership_id=membership_id,
        credential_hash=credential_hash,
        requires_credential_reset=True,
    )


def reject(account: Account) -> Account:
    """Mark a pending account as rejected, keeping the record."""
    _ensure_status(account, AccountStatus.PENDING, "reject")
    return replace(account, status=AccountStatus.REJECTED)


def change_credential(
    account: Account,
    credential_hash: str,
    *,
    requires_reset: bool,
) -> Account:
    """Replace the secret of an approved account.

    Args:
        account: Approved account.
        credential_hash: Hash of the new secret.
        requires_reset: True when a manager set the secret and the holder
            must choose a new one at next sign-in.

    Returns:
        Account: Updated account.
    """
    _ensure_status(account, AccountStatus.APPROVED, "change the password of")
    return replace(
        account,
        credential_hash=credential_hash,
        requires_credential_reset=requires_reset,
    )


def ensure_can_authenticate(account: Account) -> None:
    """Raise when the account status forbids signing in."""
    if account.status is AccountStatus.PENDING:
        raise AccountPendingError("Account pending manager approval.")
    if account.status is AccountStatus.REJECTED:
        raise AccountDeactivatedError(
            "This account has been deactivated by an Admin."
        )


def _ensure_status(
    account: Account,
    expected: AccountStatus,
    action: str,
) -> None:
    if account.status is not expected:
        raise ValidationError(
            f"Cannot {action} account {account.id} with status "
            f"{account.status.value}; expected {expected.value}."
        )


__all__ = [
    "new_registration",
    "approve",
    "reject",
    "change_credential",
    "ensure_can_authenticate",
]
