"""Shared record lookups for application use cases."""

from collections.abc import Iterable

from contribution_hub.domain.errors import NotFoundError
from contribution_hub.domain.models import Account, Payment
from contribution_hub.domain.services.normalization import membership_key


def find_account(accounts: Iterable[Account], account_id: str) -> Account:
    """Return the account with the given id or raise NotFoundError."""
    for account in accounts:
        if account.id == account_id:
            return account
    raise NotFoundError(f"Account {account_id} not found.")


def find_account_by_membership_id(
    accounts: Iterable[Account],
    membership_id: str,
) -> Account | None:
    """Return the account holding the membership id, ignoring case."""
    key = membership_key(membership_id)
    if key is None:
        return None
    for account in accounts:
        if membership_key(account.membership_id) == key:
            return account
    return None


def find_payment(payments: Iterable[Payment], payment_id: str) -> Payment:
    """Return the payment with the given id or raise NotFoundError."""
    for payment in payments:
        if payment.id == payment_id:
            return payment
    raise NotFoundError(f"Payment {payment_id} not found.")


def replace_record(records: Iterable, updated) -> list:
    """Return a new list where the record sharing ``updated.id`` is swapped."""
    return [updated if record.id == updated.id else record for record in records]


__all__ = [
    "find_account",
    "find_account_by_membership_id",
    "find_payment",
    "replace_record",
]
