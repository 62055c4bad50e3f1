"""Use cases for sending and reading notifications."""

from collections.abc import Callable
from datetime import datetime

from contribution_hub.application.ports.collections import (
    AccountsRepositoryPort,
    NotificationsRepositoryPort,
)
from contribution_hub.application.use_cases.lookups import find_account
from contribution_hub.domain.constants import BROADCAST_RECIPIENT
from contribution_hub.domain.models import Notification
from contribution_hub.domain.services.notifications import (
    sort_most_recent_first,
    visible_to,
)
from contribution_hub.domain.services.validation import require_text
from contribution_hub.infrastructure.logging.logger import get_app_logger
from contribution_hub.utils.clock import utc_now
from contribution_hub.utils.identifiers import new_id


class SendNotificationUseCase:
    """Store a notification for one account or for everyone."""

    def __init__(
        self,
        accounts_repository: AccountsRepositoryPort,
        notifications_repository: NotificationsRepositoryPort,
        logger=None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        """Initialize the use case.

        Args:
            accounts_repository: Port used to check direct recipients.
            notifications_repository: Port storing notifications.
            logger: Optional logger compatible with logging.Logger-like API.
            clock: Optional callable returning the current timestamp.
        """
        self._accounts_repository = accounts_repository
        self._notifications_repository = notifications_repository
        self._logger = logger or get_app_logger()
        self._clock = clock or utc_now

    def execute(self, recipient_id: str, body: str) -> Notification:
        """Send a notification.

        Args:
            recipient_id: Account id, or ``ALL`` for a broadcast.
            body: Message text.

        Returns:
            Notification: The stored notification.
        """
        body = require_text(body, "Message")
        if recipient_id != BROADCAST_RECIPIENT:
            find_account(self._accounts_repository.get(), recipient_id)

        notification = Notification(
            id=new_id("n"),
            recipient_id=recipient_id,
            body=body,
            sent_at=self._clock(),
        )
        notifications = self._notifications_repository.get()
        self._notifications_repository.replace([*notifications, notification])
        self._logger.info(
            f"Sent notification {notification.id} to {recipient_id}"
        )
        return notification

    def broadcast(self, body: str) -> Notification:
        """Send a notification visible to every account."""
        return self.execute(BROADCAST_RECIPIENT, body)


class GetNotificationsUseCase:
    """List the notifications an account can see, most recent first."""

    def __init__(
        self,
        accounts_repository: AccountsRepositoryPort,
        notifications_repository: NotificationsRepositoryPort,
    ) -> None:
        self._accounts_repository = accounts_repository
        self._notifications_repository = notifications_repository

    def execute(self, account_id: str) -> list[Notification]:
        account = find_account(self._accounts_repository.get(), account_id)
        return sort_most_recent_first(
            visible_to(account, self._notifications_repository.get())
        )


__all__ = ["SendNotificationUseCase", "GetNotificationsUseCase"]
