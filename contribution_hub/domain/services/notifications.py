"""Domain services for notification targeting."""

from collections.abc import Iterable

from contribution_hub.domain.constants import BROADCAST_RECIPIENT
from contribution_hub.domain.models import Account, Notification


def is_visible_to(account: Account, notification: Notification) -> bool:
    """Return True when the notification targets the account or everyone."""
    return notification.recipient_id in (account.id, BROADCAST_RECIPIENT)


def visible_to(
    account: Account,
    notifications: Iterable[Notification],
) -> list[Notification]:
    """Filter notifications visible to an account, keeping input order.

    Args:
        account: Account reading its notifications.
        notifications: All stored notifications.

    Returns:
        list[Notification]: Direct and broadcast notifications.
    """
    return [n for n in notifications if is_visible_to(account, n)]


def sort_most_recent_first(
    notifications: Iterable[Notification],
) -> list[Notification]:
    """Order notifications for a "recent notifications" view."""
    return sorted(notifications, key=lambda n: n.sent_at, reverse=True)


__all__ = ["is_visible_to", "visible_to", "sort_most_recent_first"]
