"""Collection repositories serialising domain records into the blob store."""

from collections.abc import Callable
from datetime import datetime
from decimal import InvalidOperation
import json
from typing import Any, Generic, TypeVar

from contribution_hub.application.ports.blob_store import BlobStorePort
from contribution_hub.application.ports.collections import (
    AccountsRepositoryPort,
    NotificationsRepositoryPort,
    PaymentsRepositoryPort,
    SettingsRepositoryPort,
)
from contribution_hub.application.ports.credentials import (
    CredentialHasherPort,
)
from contribution_hub.domain.constants import (
    BOOTSTRAP_MANAGER_EMAIL,
    BOOTSTRAP_MANAGER_ID,
    BOOTSTRAP_MANAGER_MEMBERSHIP_ID,
    BOOTSTRAP_MANAGER_NAME,
    DEFAULT_MANAGER_SECRET,
)
from contribution_hub.domain.errors import StorageFailure
from contribution_hub.domain.models import (
    Account,
    AccountRole,
    AccountStatus,
    Notification,
    Payment,
    PortalSettings,
)
from contribution_hub.infrastructure.logging.logger import get_app_logger
from contribution_hub.infrastructure.serialization import (
    account_from_record,
    account_to_record,
    notification_from_record,
    notification_to_record,
    payment_from_record,
    payment_to_record,
    settings_from_record,
    settings_to_record,
)
from contribution_hub.utils.clock import utc_now


ACCOUNTS_KEY = "hub_users"
PAYMENTS_KEY = "hub_payments"
NOTIFICATIONS_KEY = "hub_notifications"
SETTINGS_KEY = "hub_settings"

RecordT = TypeVar("RecordT")


def _decode(key: str, payload: str) -> Any:
    try:
        return json.loads(payload)
    except json.JSONDecodeError as exc:
        raise StorageFailure(f"Corrupt payload stored under {key}") from exc


class _JsonCollectionRepository(Generic[RecordT]):
    """Whole-collection repository storing a JSON array under one key."""

    def __init__(
        self,
        blob_store: BlobStorePort,
        key: str,
        to_record: Callable[[RecordT], dict[str, Any]],
        from_record: Callable[[dict[str, Any]], RecordT],
    ) -> None:
        self._blob_store = blob_store
        self._key = key
        self._to_record = to_record
        self._from_record = from_record

    def get(self) -> list[RecordT]:
        """Return every stored record, empty when nothing was written."""
        payload = self._blob_store.load(self._key)
        if payload is None:
            return self._initial_records()
        rows = _decode(self._key, payload)
        try:
            return [self._from_record(row) for row in rows]
        except (KeyError, TypeError, ValueError, InvalidOperation) as exc:
            raise StorageFailure(
                f"Invalid record stored under {self._key}: {exc}"
            ) from exc

    def replace(self, records: list[RecordT]) -> None:
        """Overwrite the stored collection."""
        payload = json.dumps([self._to_record(record) for record in records])
        self._blob_store.save(self._key, payload)

    def _initial_records(self) -> list[RecordT]:
        return []


class BlobAccountsRepository(
    _JsonCollectionRepository[Account],
    AccountsRepositoryPort,
):
    """Accounts collection, seeded with the bootstrap manager on first read."""

    def __init__(
        self,
        blob_store: BlobStorePort,
        credential_hasher: CredentialHasherPort,
        bootstrap_secret: str = DEFAULT_MANAGER_SECRET,
        clock: Callable[[], datetime] | None = None,
        logger=None,
    ) -> None:
        """Initialize the repository.

        Args:
            blob_store: Port storing serialized collections.
            credential_hasher: Port hashing the bootstrap manager secret.
            bootstrap_secret: Secret given to the seeded manager.
            clock: Optional callable returning the current timestamp.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        super().__init__(
            blob_store,
            ACCOUNTS_KEY,
            account_to_record,
            account_from_record,
        )
        self._credential_hasher = credential_hasher
        self._bootstrap_secret = bootstrap_secret
        self._clock = clock or utc_now
        self._logger = logger or get_app_logger()

    def _initial_records(self) -> list[Account]:
        manager = Account(
            id=BOOTSTRAP_MANAGER_ID,
            name=BOOTSTRAP_MANAGER_NAME,
            email=BOOTSTRAP_MANAGER_EMAIL,
            role=AccountRole.MANAGER,
            status=AccountStatus.APPROVED,
            registered_at=self._clock(),
            membership_id=BOOTSTRAP_MANAGER_MEMBERSHIP_ID,
            credential_hash=self._credential_hasher.hash_secret(
                self._bootstrap_secret
            ),
            requires_credential_reset=False,
        )
        self.replace([manager])
        self._logger.info(
            f"Seeded bootstrap manager {BOOTSTRAP_MANAGER_MEMBERSHIP_ID}"
        )
        return [manager]


class BlobPaymentsRepository(
    _JsonCollectionRepository[Payment],
    PaymentsRepositoryPort,
):
    """Payments collection."""

    def __init__(self, blob_store: BlobStorePort) -> None:
        super().__init__(
            blob_store,
            PAYMENTS_KEY,
            payment_to_record,
            payment_from_record,
        )


class BlobNotificationsRepository(
    _JsonCollectionRepository[Notification],
    NotificationsRepositoryPort,
):
    """Notifications collection."""

    def __init__(self, blob_store: BlobStorePort) -> None:
        super().__init__(
            blob_store,
            NOTIFICATIONS_KEY,
            notification_to_record,
            notification_from_record,
        )


class BlobSettingsRepository(SettingsRepositoryPort):
    """Single settings record, defaulted until first written."""

    def __init__(self, blob_store: BlobStorePort) -> None:
        self._blob_store = blob_store

    def get(self) -> PortalSettings:
        payload = self._blob_store.load(SETTINGS_KEY)
        if payload is None:
            return PortalSettings()
        record = _decode(SETTINGS_KEY, payload)
        if not isinstance(record, dict):
            raise StorageFailure(f"Invalid record stored under {SETTINGS_KEY}")
        try:
            return settings_from_record(record)
        except ValueError as exc:
            raise StorageFailure(
                f"Invalid record stored under {SETTINGS_KEY}: {exc}"
            ) from exc

    def replace(self, settings: PortalSettings) -> None:
        self._blob_store.save(
            SETTINGS_KEY,
            json.dumps(settings_to_record(settings)),
        )


__all__ = [
    "ACCOUNTS_KEY",
    "PAYMENTS_KEY",
    "NOTIFICATIONS_KEY",
    "SETTINGS_KEY",
    "BlobAccountsRepository",
    "BlobPaymentsRepository",
    "BlobNotificationsRepository",
    "BlobSettingsRepository",
]
