"""Tests for account deletion and credential changes."""

import pytest
from conftest import make_account, make_payment

from contribution_hub.application.use_cases import (
    DeleteAccountUseCase,
    GetLedgerUseCase,
    ResetCredentialUseCase,
    SetCredentialUseCase,
)
from contribution_hub.domain.errors import NotFoundError, ValidationError
from contribution_hub.domain.models import AccountStatus, PaymentStatus


def test_delete_account_cascades_to_owned_payments(
    repositories, logger
) -> None:
    repositories.accounts.replace([make_account("u1"), make_account("u2")])
    repositories.payments.replace(
        [
            make_payment("p1", "u1", "10"),
            make_payment("p2", "u2", "20"),
            make_payment("p3", "u1", "30", status=PaymentStatus.PENDING),
        ]
    )
    use_case = DeleteAccountUseCase(
        repositories.accounts, repositories.payments, logger=logger
    )

    result = use_case.execute("u1")

    assert result.account_id == "u1"
    assert result.removed_payment_count == 2
    assert [a.id for a in repositories.accounts.get()] == ["u2"]
    assert [p.id for p in repositories.payments.get()] == ["p2"]


def test_deleted_account_disappears_from_ledger(repositories, logger) -> None:
    repositories.accounts.replace([make_account("u1"), make_account("u2")])
    repositories.payments.replace(
        [make_payment("p1", "u1", "10"), make_payment("p2", "u2", "20")]
    )

    DeleteAccountUseCase(
        repositories.accounts, repositories.payments, logger=logger
    ).execute("u1")
    report = GetLedgerUseCase(
        repositories.accounts, repositories.payments, logger=logger
    ).execute()

    assert [entry.account.id for entry in report.entries] == ["u2"]
    assert report.totals.grand_total == 20


def test_delete_unknown_account_is_not_found(repositories, logger) -> None:
    use_case = DeleteAccountUseCase(
        repositories.accounts, repositories.payments, logger=logger
    )

    with pytest.raises(NotFoundError):
        use_case.execute("missing")
    assert repositories.payments.replace_calls == 0


def test_set_credential_clears_reset_flag(
    repositories, hasher, logger
) -> None:
    repositories.accounts.replace(
        [make_account("u1", requires_credential_reset=True)]
    )

    updated = SetCredentialUseCase(
        repositories.accounts, hasher, logger=logger
    ).execute("u1", "mine1")

    assert updated.credential_hash == "hashed:mine1"
    assert updated.requires_credential_reset is False
    assert repositories.accounts.get() == [updated]


def test_reset_credential_forces_a_new_reset(
    repositories, hasher, logger
) -> None:
    repositories.accounts.replace([make_account("u1")])

    updated = ResetCredentialUseCase(
        repositories.accounts, hasher, logger=logger
    ).execute("u1", "temp")

    assert updated.credential_hash == "hashed:temp"
    assert updated.requires_credential_reset is True


def test_credential_changes_validate_input_and_status(
    repositories, hasher, logger
) -> None:
    repositories.accounts.replace(
        [make_account("u1", status=AccountStatus.PENDING)]
    )
    use_case = SetCredentialUseCase(repositories.accounts, hasher, logger=logger)

    with pytest.raises(ValidationError):
        use_case.execute("u1", "abc")
    with pytest.raises(ValidationError):
        use_case.execute("u1", "long-enough")
    with pytest.raises(NotFoundError):
        use_case.execute("missing", "long-enough")
