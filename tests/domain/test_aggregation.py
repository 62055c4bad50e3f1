"""Tests for the payment aggregation services."""

from dataclasses import replace
from decimal import Decimal

from conftest import make_account, make_payment

from contribution_hub.domain.models import (
    AccountRole,
    AccountStatus,
    PaymentCategory,
    PaymentStatus,
)
from contribution_hub.domain.services.aggregation import (
    grand_total,
    per_account_ledger,
    summarize_payments,
    totals_by_category,
)


def test_totals_by_category_has_zero_for_every_category_when_empty() -> None:
    """Every category is reported, even without approved payments."""
    totals = totals_by_category([])

    assert list(totals) == [
        PaymentCategory.CONTRIBUTION,
        PaymentCategory.SAVING,
        PaymentCategory.DIAMOND_SAVING,
    ]
    assert all(amount == Decimal("0") for amount in totals.values())
    assert grand_total([]) == Decimal("0")


def test_totals_only_count_approved_payments() -> None:
    """Pending and rejected payments are excluded from totals."""
    payments = [
        make_payment("p1", "u1", "100"),
        make_payment("p2", "u1", "200"),
        make_payment("p3", "u1", "50", PaymentCategory.SAVING),
        make_payment("p4", "u1", "999", status=PaymentStatus.PENDING),
        make_payment(
            "p5",
            "u1",
            "777",
            PaymentCategory.DIAMOND_SAVING,
            status=PaymentStatus.REJECTED,
        ),
    ]

    totals = totals_by_category(payments)

    assert totals[PaymentCategory.CONTRIBUTION] == Decimal("300")
    assert totals[PaymentCategory.SAVING] == Decimal("50")
    assert totals[PaymentCategory.DIAMOND_SAVING] == Decimal("0")
    assert grand_total(payments) == Decimal("350")


def test_grand_total_matches_sum_of_category_totals() -> None:
    """Both formulations of the grand total agree."""
    payments = [
        make_payment("p1", "u1", "10.50"),
        make_payment("p2", "u2", "4.25", PaymentCategory.SAVING),
        make_payment("p3", "u2", "1.25", PaymentCategory.DIAMOND_SAVING),
        make_payment("p4", "u3", "8", status=PaymentStatus.PENDING),
    ]

    summary = summarize_payments(payments)

    assert grand_total(payments) == sum(
        totals_by_category(payments).values(),
        Decimal("0"),
    )
    assert summary.grand_total == Decimal("16.00")
    assert summary.amount_for(PaymentCategory.SAVING) == Decimal("4.25")


def test_changing_unapproved_amounts_does_not_change_totals() -> None:
    """Unapproved payments are filtered out, not zeroed."""
    pending = make_payment("p1", "u1", "100", status=PaymentStatus.PENDING)
    rejected = make_payment("p2", "u1", "100", status=PaymentStatus.REJECTED)
    approved = make_payment("p3", "u1", "40")

    before = totals_by_category([pending, rejected, approved])
    after = totals_by_category(
        [
            replace(pending, amount=Decimal("123456")),
            replace(rejected, amount=Decimal("654321")),
            approved,
        ]
    )

    assert before == after


def test_per_account_ledger_lists_approved_clients_in_input_order() -> None:
    """Managers, pending and rejected accounts are left out."""
    accounts = [
        make_account("u2", "Zed"),
        make_account("mgr", "Boss", role=AccountRole.MANAGER),
        make_account("u1", "Amy"),
        make_account("u3", "Pending", status=AccountStatus.PENDING),
        make_account("u4", "Gone", status=AccountStatus.REJECTED),
    ]
    payments = [
        make_payment("p1", "u1", "100"),
        make_payment("p2", "u2", "30", PaymentCategory.SAVING),
        make_payment("p3", "mgr", "500"),
        make_payment("p4", "u3", "75"),
    ]

    ledger = per_account_ledger(accounts, payments)

    assert [entry.account.id for entry in ledger] == ["u2", "u1"]
    assert ledger[0].totals.amount_for(PaymentCategory.SAVING) == Decimal("30")
    assert ledger[0].grand_total == Decimal("30")
    assert ledger[1].grand_total == Decimal("100")


def test_per_account_ledger_gives_zero_totals_without_payments() -> None:
    """Members without payments still appear with zero totals."""
    ledger = per_account_ledger([make_account("u1")], [])

    assert len(ledger) == 1
    assert ledger[0].grand_total == Decimal("0")
    assert per_account_ledger([], []) == []


def test_aggregation_does_not_mutate_inputs() -> None:
    """Inputs are read only."""
    accounts = [make_account("u1")]
    payments = [make_payment("p1", "u1", "10")]
    snapshot = (list(accounts), list(payments))

    per_account_ledger(accounts, payments)
    totals_by_category(payments)

    assert (accounts, payments) == snapshot
