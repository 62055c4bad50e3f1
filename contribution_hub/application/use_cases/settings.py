"""Use cases reading and updating the portal settings."""

from dataclasses import replace

from contribution_hub.application.ports.collections import (
    SettingsRepositoryPort,
)
from contribution_hub.domain.models import PortalSettings
from contribution_hub.infrastructure.logging.logger import get_app_logger


class GetSettingsUseCase:
    """Return the current portal settings."""

    def __init__(self, settings_repository: SettingsRepositoryPort) -> None:
        self._settings_repository = settings_repository

    def execute(self) -> PortalSettings:
        return self._settings_repository.get()


class UpdateSettingsUseCase:
    """Replace the portal settings record."""

    def __init__(
        self,
        settings_repository: SettingsRepositoryPort,
        logger=None,
    ) -> None:
        self._settings_repository = settings_repository
        self._logger = logger or get_app_logger()

    def execute(self, settings: PortalSettings) -> PortalSettings:
        self._settings_repository.replace(settings)
        self._logger.info(f"Settings updated: {settings}")
        return settings


class ToggleRemindersUseCase:
    """Flip the reminders setting and persist it."""

    def __init__(
        self,
        settings_repository: SettingsRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            settings_repository: Port storing the settings record.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._settings_repository = settings_repository
        self._logger = logger or get_app_logger()

    def execute(self) -> PortalSettings:
        """Return the settings after toggling reminders."""
        current = self._settings_repository.get()
        updated = replace(
            current,
            reminders_enabled=not current.reminders_enabled,
        )
        self._settings_repository.replace(updated)
        self._logger.info(
            f"Payment reminders "
            f"{'enabled' if updated.reminders_enabled else 'disabled'}"
        )
        return updated


__all__ = [
    "GetSettingsUseCase",
    "UpdateSettingsUseCase",
    "ToggleRemindersUseCase",
]
