"""Composition root for wiring infrastructure adapters."""

from dataclasses import dataclass

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
from contribution_hub.application.ports.database import DatabaseEnginePort
from contribution_hub.infrastructure.blob_store import SqlAlchemyBlobStore
from contribution_hub.infrastructure.collections_repository import (
    BlobAccountsRepository,
    BlobNotificationsRepository,
    BlobPaymentsRepository,
    BlobSettingsRepository,
)
from contribution_hub.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from contribution_hub.infrastructure.logging.logger import get_app_logger
from contribution_hub.infrastructure.security import BcryptCredentialHasher
from contribution_hub.infrastructure.settings import HubSettings


@dataclass(frozen=True)
class HubRepositories:
    """The four collection repositories sharing one blob store."""

    accounts: AccountsRepositoryPort
    payments: PaymentsRepositoryPort
    notifications: NotificationsRepositoryPort
    settings: SettingsRepositoryPort


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_blob_store(
    db_port: DatabaseEnginePort | None = None,
) -> BlobStorePort:
    """Return the SQLAlchemy-backed blob store."""
    return SqlAlchemyBlobStore(db_port or build_database_adapter())


def build_credential_hasher(
    settings: HubSettings | None = None,
) -> CredentialHasherPort:
    """Return the bcrypt hasher configured from the environment."""
    resolved = settings or HubSettings.from_env()
    return BcryptCredentialHasher(rounds=resolved.bcrypt_rounds)


def build_repositories(
    blob_store: BlobStorePort | None = None,
    credential_hasher: CredentialHasherPort | None = None,
    settings: HubSettings | None = None,
) -> HubRepositories:
    """Return the collection repositories.

    Args:
        blob_store: Optional store override, defaults to the database store.
        credential_hasher: Optional hasher used to seed the manager.
        settings: Optional settings override.

    Returns:
        HubRepositories: Repositories for every collection.
    """
    resolved_settings = settings or HubSettings.from_env()
    store = blob_store or build_blob_store()
    hasher = credential_hasher or build_credential_hasher(resolved_settings)
    return HubRepositories(
        accounts=BlobAccountsRepository(
            store,
            hasher,
            bootstrap_secret=resolved_settings.admin_secret,
            logger=get_app_logger(),
        ),
        payments=BlobPaymentsRepository(store),
        notifications=BlobNotificationsRepository(store),
        settings=BlobSettingsRepository(store),
    )


__all__ = [
    "HubRepositories",
    "build_database_adapter",
    "build_blob_store",
    "build_credential_hasher",
    "build_repositories",
]
