"""Use case building the consolidated ledger across members."""

from dataclasses import dataclass

from contribution_hub.application.ports.collections import (
    AccountsRepositoryPort,
    PaymentsRepositoryPort,
)
from contribution_hub.domain.models import CategoryTotals, LedgerEntry
from contribution_hub.domain.services.aggregation import (
    per_account_ledger,
    summarize_payments,
)
from contribution_hub.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class LedgerReport:
    """Per-member ledger with organisation-wide totals.

    Attributes:
        entries: One entry per approved member, in storage order.
        totals: Approved totals over every payment in storage.
    """

    entries: list[LedgerEntry]
    totals: CategoryTotals


class GetLedgerUseCase:
    """Compute the ledger from the stored accounts and payments."""

    def __init__(
        self,
        accounts_repository: AccountsRepositoryPort,
        payments_repository: PaymentsRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            accounts_repository: Port storing the accounts collection.
            payments_repository: Port storing the payments collection.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._accounts_repository = accounts_repository
        self._payments_repository = payments_repository
        self._logger = logger or get_app_logger()

    def execute(self) -> LedgerReport:
        """Return the ledger report."""
        accounts = self._accounts_repository.get()
        payments = self._payments_repository.get()
        entries = per_account_ledger(accounts, payments)
        totals = summarize_payments(payments)
        self._logger.info(
            f"Ledger computed: members={len(entries)}, "
            f"grand_total={totals.grand_total}"
        )
        return LedgerReport(entries=entries, totals=totals)


__all__ = ["GetLedgerUseCase", "LedgerReport"]
