"""Domain models for aggregated payment totals."""

from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal

from contribution_hub.domain.models.accounts import Account
from contribution_hub.domain.models.payments import PaymentCategory


@dataclass(frozen=True)
class CategoryTotals:
    """Approved amounts per category plus their sum."""

    by_category: Mapping[PaymentCategory, Decimal]
    grand_total: Decimal

    def amount_for(self, category: PaymentCategory) -> Decimal:
        """Return the total for a category, zero when absent."""
        return self.by_category.get(category, Decimal("0"))


@dataclass(frozen=True)
class LedgerEntry:
    """Per-account breakdown of approved totals."""

    account: Account
    totals: CategoryTotals

    @property
    def grand_total(self) -> Decimal:
        return self.totals.grand_total


__all__ = ["CategoryTotals", "LedgerEntry"]
