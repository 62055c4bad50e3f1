"""Ports for the four persisted collections.

Each collection is read and written as a whole: ``get`` returns every
record and ``replace`` overwrites the stored collection with the given one.
"""

from typing import Protocol

from contribution_hub.domain.models import (
    Account,
    Notification,
    Payment,
    PortalSettings,
)


class AccountsRepositoryPort(Protocol):
    """Port exposing the accounts collection."""

    def get(self) -> list[Account]:
        """Return all accounts in storage order."""

    def replace(self, accounts: list[Account]) -> None:
        """Overwrite the stored accounts."""


class PaymentsRepositoryPort(Protocol):
    """Port exposing the payments collection."""

    def get(self) -> list[Payment]:
        """Return all payments in storage order."""

    def replace(self, payments: list[Payment]) -> None:
        """Overwrite the stored payments."""


class NotificationsRepositoryPort(Protocol):
    """Port exposing the notifications collection."""

    def get(self) -> list[Notification]:
        """Return all notifications in storage order."""

    def replace(self, notifications: list[Notification]) -> None:
        """Overwrite the stored notifications."""


class SettingsRepositoryPort(Protocol):
    """Port exposing the single portal settings record."""

    def get(self) -> PortalSettings:
        """Return the stored settings, or defaults when none exist."""

    def replace(self, settings: PortalSettings) -> None:
        """Overwrite the stored settings."""


__all__ = [
    "AccountsRepositoryPort",
    "PaymentsRepositoryPort",
    "NotificationsRepositoryPort",
    "SettingsRepositoryPort",
]
