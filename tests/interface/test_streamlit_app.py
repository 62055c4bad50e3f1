"""Tests for the Streamlit app module."""

from contextlib import nullcontext
from datetime import datetime, timezone
from decimal import Decimal
from unittest.mock import MagicMock

from conftest import (
    FakeHasher,
    InMemoryCollection,
    InMemorySettings,
    Repositories,
    make_account,
    make_payment,
)

from contribution_hub.adapters.interface.streamlit import app
from contribution_hub.application.use_cases import authenticate
from contribution_hub.domain.models import CategoryTotals, PaymentCategory
from contribution_hub.domain.services import (
    per_account_ledger,
    summarize_payments,
)


def test_build_services_wires_container(monkeypatch):
    """_build_services should share one hasher with the repositories."""
    hasher = FakeHasher()
    captured = {}

    def _fake_build_repositories(credential_hasher):
        captured["hasher"] = credential_hasher
        return "repositories"

    monkeypatch.setattr(app, "build_credential_hasher", lambda: hasher)
    monkeypatch.setattr(app, "build_repositories", _fake_build_repositories)

    services = app._build_services()

    assert services.repositories == "repositories"
    assert services.credential_hasher is hasher
    assert captured["hasher"] is hasher


def test_format_helpers():
    assert app._format_currency(Decimal("1234.5")) == "₦1,234.50"
    assert app._format_timestamp(None) == "—"
    assert app._format_timestamp(
        datetime(2024, 3, 1, 9, 5, tzinfo=timezone.utc)
    ) == "2024-03-01 09:05"


def test_describe_deadline_reports_time_left():
    deadline = datetime(2024, 3, 12, 23, 59, 59, tzinfo=timezone.utc)
    now = datetime(2024, 3, 10, 20, 0, tzinfo=timezone.utc)

    text = app._describe_deadline(deadline, now)

    assert "March 12th" in text
    assert "2 days 3 hours left" in text


def test_category_chart_data_lists_every_category():
    totals = summarize_payments(
        [make_payment("p1", "u1", "250", PaymentCategory.SAVING)]
    )

    rows = app._category_chart_data(totals)

    assert [row["category"] for row in rows] == [
        "Contribution",
        "Saving",
        "Diamond Saving",
    ]
    assert rows[1]["amount"] == 250.0
    assert rows[1]["amount_label"] == "₦250.00"
    assert rows[0]["amount"] == 0.0


def test_row_builders():
    account = make_account("u1", "Jane Doe", membership_id="T-01")
    payment = make_payment("p1", "u1", "10")

    [payment_row] = app._payment_rows([payment])
    [ledger_row] = app._ledger_rows(per_account_ledger([account], [payment]))
    [account_row] = app._account_rows([make_account("u2", "No Id")])

    assert payment_row["Member"] == "Owner u1"
    assert payment_row["Status"] == "APPROVED"
    assert ledger_row["ID"] == "T-01"
    assert ledger_row["Contribution"] == "₦10.00"
    assert ledger_row["Balance"] == "₦10.00"
    assert account_row["ID"] == "N/A"


class _Rerun(Exception):
    pass


class _FakeStreamlit:
    """Just enough of the streamlit API for the signed-out pages."""

    def __init__(self, page: str, inputs: dict, submitted: bool) -> None:
        self.page = page
        self.inputs = inputs
        self.submitted = submitted
        self.session_state = {}
        self.errors: list[str] = []
        self.successes: list[str] = []
        self.sidebar = self

    def set_page_config(self, **kwargs):
        self.config_kwargs = kwargs

    def title(self, text: str):
        self.title_text = text

    def subheader(self, text: str):
        pass

    def selectbox(self, label, options):
        return self.page

    def form(self, _key):
        return nullcontext()

    def text_input(self, label, **_kwargs):
        return self.inputs.get(label, "")

    def form_submit_button(self, _label):
        return self.submitted

    def error(self, text: str):
        self.errors.append(text)

    def success(self, text: str):
        self.successes.append(text)

    def rerun(self):
        raise _Rerun()


def _services():
    repositories = Repositories(
        accounts=InMemoryCollection(
            [
                make_account(
                    "u1",
                    "Jane Doe",
                    membership_id="T-01",
                    credential_hash="hashed:secret",
                )
            ]
        ),
        payments=InMemoryCollection(),
        notifications=InMemoryCollection(),
        settings=InMemorySettings(),
    )
    return app.PortalServices(
        repositories=repositories,
        credential_hasher=FakeHasher(),
    )


def _install(monkeypatch, fake_st, services):
    monkeypatch.setattr(app, "st", fake_st)
    monkeypatch.setattr(app, "_load_services", lambda: services)
    monkeypatch.setattr(app, "get_usage_logger", MagicMock)
    monkeypatch.setattr(authenticate, "get_app_logger", MagicMock)


def test_main_shows_sign_in_errors(monkeypatch):
    fake_st = _FakeStreamlit(
        "Sign in",
        {"Membership ID": "t-01", "Password": "wrong"},
        submitted=True,
    )
    _install(monkeypatch, fake_st, _services())

    app.main()

    assert fake_st.title_text == "Contribution Hub"
    assert fake_st.errors == ["Incorrect password."]
    assert fake_st.session_state == {}


def test_main_signs_in_and_stores_session(monkeypatch):
    fake_st = _FakeStreamlit(
        "Sign in",
        {"Membership ID": "t-01", "Password": "secret"},
        submitted=True,
    )
    _install(monkeypatch, fake_st, _services())

    try:
        app.main()
    except _Rerun:
        pass

    assert fake_st.session_state == {app.SESSION_ACCOUNT_KEY: "u1"}


def test_main_registers_new_member(monkeypatch):
    fake_st = _FakeStreamlit(
        "Register",
        {"Full name": "John Roe", "Email": "john@x.com"},
        submitted=True,
    )
    services = _services()
    _install(monkeypatch, fake_st, services)
    monkeypatch.setattr(
        "contribution_hub.application.use_cases.register_account."
        "get_app_logger",
        MagicMock,
    )

    app.main()

    assert fake_st.successes
    assert [a.name for a in services.repositories.accounts.get()] == [
        "Jane Doe",
        "John Roe",
    ]


def test_current_account_clears_stale_session(monkeypatch):
    fake_st = _FakeStreamlit("Sign in", {}, submitted=False)
    fake_st.session_state[app.SESSION_ACCOUNT_KEY] = "gone"
    monkeypatch.setattr(app, "st", fake_st)

    assert app._current_account(_services()) is None
    assert fake_st.session_state == {}


def test_chart_rows_for_zero_totals():
    empty = CategoryTotals(
        by_category={c: Decimal("0") for c in PaymentCategory},
        grand_total=Decimal("0"),
    )

    assert all(row["amount"] == 0.0 for row in app._category_chart_data(empty))
