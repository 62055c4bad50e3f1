"""Use case assembling the manager dashboard."""

from dataclasses import dataclass

from contribution_hub.application.ports.collections import (
    AccountsRepositoryPort,
    PaymentsRepositoryPort,
    SettingsRepositoryPort,
)
from contribution_hub.domain.models import (
    Account,
    AccountStatus,
    CategoryTotals,
    LedgerEntry,
    Payment,
    PaymentStatus,
    PortalSettings,
)
from contribution_hub.domain.services.aggregation import (
    per_account_ledger,
    summarize_payments,
)
from contribution_hub.domain.services.filters import (
    filter_payments,
    search_accounts,
)


@dataclass(frozen=True)
class ManagerDashboard:
    """Everything a manager sees on their dashboard.

    Attributes:
        pending_accounts: Registrations awaiting a decision.
        accounts: All accounts matching the search term.
        active_clients: Approved member accounts.
        pending_payments: Payments awaiting review, newest first.
        payments: Payments matching the status filter, newest first.
        totals: Organisation-wide approved totals.
        ledger: Per-member approved totals.
        settings: Current portal settings.
    """

    pending_accounts: list[Account]
    accounts: list[Account]
    active_clients: list[Account]
    pending_payments: list[Payment]
    payments: list[Payment]
    totals: CategoryTotals
    ledger: list[LedgerEntry]
    settings: PortalSettings


class GetManagerDashboardUseCase:
    """Read the data shown on the manager dashboard."""

    def __init__(
        self,
        accounts_repository: AccountsRepositoryPort,
        payments_repository: PaymentsRepositoryPort,
        settings_repository: SettingsRepositoryPort,
    ) -> None:
        self._accounts_repository = accounts_repository
        self._payments_repository = payments_repository
        self._settings_repository = settings_repository

    def execute(
        self,
        payment_status: PaymentStatus | None = PaymentStatus.PENDING,
        search_term: str = "",
    ) -> ManagerDashboard:
        """Return the manager dashboard.

        Args:
            payment_status: Status filter for the payment list, None for all.
            search_term: Name or membership id filter for the account list.

        Returns:
            ManagerDashboard: Dashboard data for managers.
        """
        accounts = self._accounts_repository.get()
        payments = self._payments_repository.get()
        return ManagerDashboard(
            pending_accounts=[
                account
                for account in accounts
                if account.status is AccountStatus.PENDING
            ],
            accounts=search_accounts(accounts, search_term),
            active_clients=[
                account for account in accounts if account.is_active_client
            ],
            pending_payments=filter_payments(payments, PaymentStatus.PENDING),
            payments=filter_payments(payments, payment_status),
            totals=summarize_payments(payments),
            ledger=per_account_ledger(accounts, payments),
            settings=self._settings_repository.get(),
        )


__all__ = ["GetManagerDashboardUseCase", "ManagerDashboard"]
