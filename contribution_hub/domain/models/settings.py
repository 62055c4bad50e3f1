"""Domain model for the process-wide portal settings."""

from dataclasses import dataclass


@dataclass(frozen=True)
class PortalSettings:
    """Settings shared by every account.

    Attributes:
        reminders_enabled: Whether members see the contribution deadline.
    """

    reminders_enabled: bool = True


__all__ = ["PortalSettings"]
