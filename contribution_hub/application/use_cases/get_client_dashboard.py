"""Use case assembling the member dashboard."""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime

from contribution_hub.application.ports.collections import (
    AccountsRepositoryPort,
    NotificationsRepositoryPort,
    PaymentsRepositoryPort,
    SettingsRepositoryPort,
)
from contribution_hub.application.use_cases.lookups import find_account
from contribution_hub.domain.models import (
    Account,
    CategoryTotals,
    Notification,
    Payment,
    PaymentStatus,
    PortalSettings,
)
from contribution_hub.domain.services.aggregation import summarize_payments
from contribution_hub.domain.services.deadlines import (
    next_contribution_deadline,
)
from contribution_hub.domain.services.filters import filter_payments
from contribution_hub.domain.services.notifications import (
    sort_most_recent_first,
    visible_to,
)
from contribution_hub.utils.clock import utc_now


@dataclass(frozen=True)
class ClientDashboard:
    """Everything a member sees on their dashboard.

    Attributes:
        account: The member account.
        payments: Own payments, newest first, optionally status-filtered.
        totals: Approved totals over all own payments.
        notifications: Direct and broadcast notifications, newest first.
        settings: Current portal settings.
        next_deadline: Upcoming contribution deadline, None when reminders
            are disabled.
    """

    account: Account
    payments: list[Payment]
    totals: CategoryTotals
    notifications: list[Notification]
    settings: PortalSettings
    next_deadline: datetime | None


class GetClientDashboardUseCase:
    """Read the data shown on a member dashboard."""

    def __init__(
        self,
        accounts_repository: AccountsRepositoryPort,
        payments_repository: PaymentsRepositoryPort,
        notifications_repository: NotificationsRepositoryPort,
        settings_repository: SettingsRepositoryPort,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._accounts_repository = accounts_repository
        self._payments_repository = payments_repository
        self._notifications_repository = notifications_repository
        self._settings_repository = settings_repository
        self._clock = clock or utc_now

    def execute(
        self,
        account_id: str,
        status: PaymentStatus | None = None,
    ) -> ClientDashboard:
        """Return the dashboard of one account.

        Args:
            account_id: Id of the member.
            status: Optional status used to filter the payment history.

        Returns:
            ClientDashboard: Dashboard data for the member.
        """
        account = find_account(self._accounts_repository.get(), account_id)
        own_payments = [
            payment
            for payment in self._payments_repository.get()
            if payment.owner_account_id == account.id
        ]
        settings = self._settings_repository.get()
        return ClientDashboard(
            account=account,
            payments=filter_payments(own_payments, status),
            totals=summarize_payments(own_payments),
            notifications=sort_most_recent_first(
                visible_to(account, self._notifications_repository.get())
            ),
            settings=settings,
            next_deadline=(
                next_contribution_deadline(self._clock())
                if settings.reminders_enabled
                else None
            ),
        )


__all__ = ["GetClientDashboardUseCase", "ClientDashboard"]
