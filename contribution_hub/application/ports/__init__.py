"""Application ports package."""

from .blob_store import BlobStorePort
from .collections import (
    AccountsRepositoryPort,
    NotificationsRepositoryPort,
    PaymentsRepositoryPort,
    SettingsRepositoryPort,
)
from .credentials import CredentialHasherPort
from .database import DatabaseEnginePort

__all__ = [
    "BlobStorePort",
    "AccountsRepositoryPort",
    "NotificationsRepositoryPort",
    "PaymentsRepositoryPort",
    "SettingsRepositoryPort",
    "CredentialHasherPort",
    "DatabaseEnginePort",
]
