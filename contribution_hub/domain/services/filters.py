"""Filtering helpers for account and payment listings."""

from collections.abc import Iterable

from contribution_hub.domain.models import Account, Payment, PaymentStatus


def matches_search(account: Account, term: str) -> bool:
    """Return True when the term appears in the name or membership id.

    Matching is a case-insensitive substring test; a blank term matches
    every account.
    """
    needle = term.strip().lower()
    if not needle:
        return True
    if needle in account.name.lower():
        return True
    return bool(
        account.membership_id and needle in account.membership_id.lower()
    )


def search_accounts(accounts: Iterable[Account], term: str) -> list[Account]:
    """Return accounts matching the search term, keeping input order."""
    return [account for account in accounts if matches_search(account, term)]


def filter_payments(
    payments: Iterable[Payment],
    status: PaymentStatus | None = None,
) -> list[Payment]:
    """Filter payments by status and order them most recent first.

    Args:
        payments: Payments to list.
        status: Status to keep, or None for all payments.

    Returns:
        list[Payment]: Matching payments, newest submission first.
    """
    selected = [
        payment
        for payment in payments
        if status is None or payment.status is status
    ]
    return sorted(selected, key=lambda p: p.submitted_at, reverse=True)


__all__ = ["matches_search", "search_accounts", "filter_payments"]
