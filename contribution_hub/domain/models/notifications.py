"""Domain models for manager-to-member notifications."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Notification:
    """Message addressed to one account or broadcast to all."""

    id: str
    recipient_id: str
    body: str
    sent_at: datetime


__all__ = ["Notification"]
