"""Domain services aggregating approved payments into totals.

All functions are pure: they only read the supplied collections and return
new values, so callers may pass the same snapshots to several of them.
"""

from collections.abc import Iterable, Sequence
from decimal import Decimal

from contribution_hub.domain.models import (
    PAYMENT_CATEGORIES,
    Account,
    CategoryTotals,
    LedgerEntry,
    Payment,
    PaymentCategory,
    PaymentStatus,
)


def totals_by_category(
    payments: Iterable[Payment],
    categories: Sequence[PaymentCategory] = PAYMENT_CATEGORIES,
) -> dict[PaymentCategory, Decimal]:
    """Sum approved payment amounts per category.

    Args:
        payments: Payments to aggregate, in any status.
        categories: Ordered categories to report on.

    Returns:
        dict[PaymentCategory, Decimal]: One entry per category, in category
        order, zero when no approved payment matches.
    """
    totals = {category: Decimal("0") for category in categories}
    for payment in payments:
        if payment.status is not PaymentStatus.APPROVED:
            continue
        if payment.category in totals:
            totals[payment.category] += payment.amount
    return totals


def grand_total(
    payments: Iterable[Payment],
    categories: Sequence[PaymentCategory] = PAYMENT_CATEGORIES,
) -> Decimal:
    """Return the sum of all category totals."""
    return sum(
        totals_by_category(payments, categories).values(),
        Decimal("0"),
    )


def summarize_payments(
    payments: Iterable[Payment],
    categories: Sequence[PaymentCategory] = PAYMENT_CATEGORIES,
) -> CategoryTotals:
    """Return category totals and their grand total in one pass.

    Args:
        payments: Payments to aggregate.
        categories: Ordered categories to report on.

    Returns:
        CategoryTotals: Per-category totals with the grand total.
    """
    by_category = totals_by_category(payments, categories)
    return CategoryTotals(
        by_category=by_category,
        grand_total=sum(by_category.values(), Decimal("0")),
    )


def per_account_ledger(
    accounts: Iterable[Account],
    payments: Iterable[Payment],
    categories: Sequence[PaymentCategory] = PAYMENT_CATEGORIES,
) -> list[LedgerEntry]:
    """Build the ledger of approved member accounts.

    Only APPROVED accounts with the CLIENT role are listed, in the order the
    accounts are supplied.

    Args:
        accounts: Accounts in storage order.
        payments: Payments across all accounts.
        categories: Ordered categories to report on.

    Returns:
        list[LedgerEntry]: One entry per active member.
    """
    payments_by_owner: dict[str, list[Payment]] = {}
    for payment in payments:
        payments_by_owner.setdefault(payment.owner_account_id, []).append(
            payment
        )
    return [
        LedgerEntry(
            account=account,
            totals=summarize_payments(
                payments_by_owner.get(account.id, []),
                categories,
            ),
        )
        for account in accounts
        if account.is_active_client
    ]


__all__ = [
    "totals_by_category",
    "grand_total",
    "summarize_payments",
    "per_account_ledger",
]
