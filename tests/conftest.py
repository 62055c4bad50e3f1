"""Shared fixtures: fake repositories, record factories and a SQLite store."""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from unittest.mock import MagicMock

import pytest
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from contribution_hub.domain.models import (
    Account,
    AccountRole,
    AccountStatus,
    Payment,
    PaymentCategory,
    PaymentStatus,
    PortalSettings,
)
from contribution_hub.infrastructure.blob_store import SqlAlchemyBlobStore
from contribution_hub.infrastructure.db import SqlAlchemyDatabaseEngineAdapter


class InMemoryCollection:
    """Whole-collection repository keeping records in a list."""

    def __init__(self, records=None) -> None:
        self.records = list(records or [])
        self.replace_calls = 0

    def get(self):
        return list(self.records)

    def replace(self, records) -> None:
        self.replace_calls += 1
        self.records = list(records)


class InMemorySettings:
    """Settings repository keeping one record."""

    def __init__(self, settings: PortalSettings | None = None) -> None:
        self.settings = settings or PortalSettings()

    def get(self) -> PortalSettings:
        return self.settings

    def replace(self, settings: PortalSettings) -> None:
        self.settings = settings


class FakeHasher:
    """Reversible stand-in for bcrypt so tests stay fast."""

    def hash_secret(self, secret: str) -> str:
        return f"hashed:{secret}"

    def verify_secret(self, secret: str, secret_hash: str) -> bool:
        return secret_hash == f"hashed:{secret}"


class FakeClock:
    """Clock advancing one minute per call."""

    def __init__(self, start: datetime) -> None:
        self.current = start

    def __call__(self) -> datetime:
        self.current += timedelta(minutes=1)
        return self.current


@dataclass
class Repositories:
    accounts: InMemoryCollection
    payments: InMemoryCollection
    notifications: InMemoryCollection
    settings: InMemorySettings


BASE_TIME = datetime(2024, 3, 1, 9, 0, tzinfo=timezone.utc)


def make_account(
    account_id: str,
    name: str = "Member",
    *,
    status: AccountStatus = AccountStatus.APPROVED,
    role: AccountRole = AccountRole.CLIENT,
    membership_id: str | None = None,
    credential_hash: str | None = None,
    requires_credential_reset: bool = False,
) -> Account:
    """Build an account with sensible defaults for tests."""
    return Account(
        id=account_id,
        name=name,
        email=f"{account_id}@example.com",
        role=role,
        status=status,
        registered_at=BASE_TIME,
        membership_id=membership_id,
        credential_hash=credential_hash,
        requires_credential_reset=requires_credential_reset,
    )


def make_payment(
    payment_id: str,
    owner_id: str,
    amount: str,
    category: PaymentCategory = PaymentCategory.CONTRIBUTION,
    status: PaymentStatus = PaymentStatus.APPROVED,
    minutes: int = 0,
) -> Payment:
    """Build a payment with sensible defaults for tests."""
    return Payment(
        id=payment_id,
        owner_account_id=owner_id,
        owner_display_name=f"Owner {owner_id}",
        amount=Decimal(amount),
        category=category,
        submitted_at=BASE_TIME + timedelta(minutes=minutes),
        receipt_reference=f"{payment_id}.png",
        status=status,
    )


@pytest.fixture
def repositories() -> Repositories:
    return Repositories(
        accounts=InMemoryCollection(),
        payments=InMemoryCollection(),
        notifications=InMemoryCollection(),
        settings=InMemorySettings(),
    )


@pytest.fixture
def hasher() -> FakeHasher:
    return FakeHasher()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock(BASE_TIME)


@pytest.fixture
def logger() -> MagicMock:
    return MagicMock()


@pytest.fixture
def sqlite_engine():
    engine = create_engine(
        "sqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    yield engine
    engine.dispose()


@pytest.fixture
def blob_store(sqlite_engine) -> SqlAlchemyBlobStore:
    """Blob store on a private in-memory SQLite database."""
    return SqlAlchemyBlobStore(SqlAlchemyDatabaseEngineAdapter(sqlite_engine))
