"""Tests for the JSON collection repositories."""

from dataclasses import replace
from datetime import timedelta
from decimal import Decimal

import pytest
from conftest import BASE_TIME, FakeClock, FakeHasher, make_payment

from contribution_hub.domain.errors import StorageFailure
from contribution_hub.domain.models import (
    AccountRole,
    AccountStatus,
    Notification,
    PaymentCategory,
    PortalSettings,
)
from contribution_hub.infrastructure.collections_repository import (
    ACCOUNTS_KEY,
    PAYMENTS_KEY,
    SETTINGS_KEY,
    BlobAccountsRepository,
    BlobNotificationsRepository,
    BlobPaymentsRepository,
    BlobSettingsRepository,
)


@pytest.fixture
def accounts(blob_store, logger) -> BlobAccountsRepository:
    return BlobAccountsRepository(
        blob_store,
        FakeHasher(),
        bootstrap_secret="letmein",
        clock=FakeClock(BASE_TIME),
        logger=logger,
    )


def test_first_read_seeds_exactly_one_manager(accounts, blob_store) -> None:
    [manager] = accounts.get()

    assert manager.id == "mgr-001"
    assert manager.membership_id == "ADMIN"
    assert manager.role is AccountRole.MANAGER
    assert manager.status is AccountStatus.APPROVED
    assert manager.credential_hash == "hashed:letmein"
    assert blob_store.load(ACCOUNTS_KEY) is not None
    assert accounts.get() == [manager]


def test_accounts_round_trip(accounts) -> None:
    [manager] = accounts.get()
    signed_in = replace(
        manager,
        last_authenticated_at=BASE_TIME + timedelta(days=1),
    )

    accounts.replace([signed_in])

    assert accounts.get() == [signed_in]


def test_empty_account_list_is_not_reseeded(accounts) -> None:
    accounts.replace([])

    assert accounts.get() == []


def test_payments_round_trip_keeps_decimal_precision(blob_store) -> None:
    repository = BlobPaymentsRepository(blob_store)
    payments = [
        make_payment("p1", "u1", "100.10"),
        make_payment("p2", "u1", "0.05", PaymentCategory.DIAMOND_SAVING),
    ]

    assert repository.get() == []
    repository.replace(payments)

    stored = repository.get()
    assert stored == payments
    assert stored[0].amount == Decimal("100.10")


def test_notifications_round_trip(blob_store) -> None:
    repository = BlobNotificationsRepository(blob_store)
    notifications = [Notification("n1", "ALL", "Dues are due", BASE_TIME)]

    repository.replace(notifications)

    assert repository.get() == notifications


def test_settings_default_and_round_trip(blob_store) -> None:
    repository = BlobSettingsRepository(blob_store)

    assert repository.get() == PortalSettings(reminders_enabled=True)
    repository.replace(PortalSettings(reminders_enabled=False))
    assert repository.get() == PortalSettings(reminders_enabled=False)


BAD_AMOUNT_PAYMENT = (
    '[{"id": "p1", "owner_account_id": "u1", "owner_display_name": "Jane",'
    ' "amount": "abc", "category": "Saving",'
    ' "submitted_at": "2024-03-01T09:00:00+00:00",'
    ' "receipt_reference": "", "status": "APPROVED"}]'
)


@pytest.mark.parametrize(
    "payload", ["{not json", '[{"id": "p1"}]', BAD_AMOUNT_PAYMENT]
)
def test_corrupt_payload_is_a_storage_failure(blob_store, payload) -> None:
    blob_store.save(PAYMENTS_KEY, payload)

    with pytest.raises(StorageFailure):
        BlobPaymentsRepository(blob_store).get()


@pytest.mark.parametrize(
    "payload", ["[]", '{"reminders_enabled": "false"}']
)
def test_corrupt_settings_is_a_storage_failure(blob_store, payload) -> None:
    blob_store.save(SETTINGS_KEY, payload)

    with pytest.raises(StorageFailure):
        BlobSettingsRepository(blob_store).get()
