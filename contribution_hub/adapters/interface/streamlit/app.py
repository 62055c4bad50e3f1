"""Streamlit portal entry point.

Run with ``streamlit run contribution_hub/adapters/interface/streamlit/app.py``
"""

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

import altair as alt
import streamlit as st

from contribution_hub.application.ports.credentials import (
    CredentialHasherPort,
)
from contribution_hub.application.use_cases import (
    ApproveAccountUseCase,
    AuthenticateUseCase,
    DeleteAccountUseCase,
    GetClientDashboardUseCase,
    GetManagerDashboardUseCase,
    RegisterAccountUseCase,
    RejectAccountUseCase,
    ResetCredentialUseCase,
    ReviewPaymentUseCase,
    SendNotificationUseCase,
    SetCredentialUseCase,
    SubmitPaymentUseCase,
    ToggleRemindersUseCase,
)
from contribution_hub.domain.constants import BROADCAST_RECIPIENT
from contribution_hub.domain.errors import ContributionHubError
from contribution_hub.domain.models import (
    PAYMENT_CATEGORIES,
    Account,
    AccountRole,
    CategoryTotals,
    LedgerEntry,
    Payment,
    PaymentStatus,
)
from contribution_hub.infrastructure.container import (
    HubRepositories,
    build_credential_hasher,
    build_repositories,
)
from contribution_hub.infrastructure.logging.logger import get_usage_logger
from contribution_hub.utils.clock import utc_now


CURRENCY_SYMBOL = "₦"
SESSION_ACCOUNT_KEY = "account"
STATUS_FILTERS = {
    "Pending": PaymentStatus.PENDING,
    "Approved": PaymentStatus.APPROVED,
    "Rejected": PaymentStatus.REJECTED,
    "All": None,
}
HISTORY_FILTERS = ["All", "Pending", "Approved", "Rejected"]


@dataclass(frozen=True)
class PortalServices:
    """Repositories and hasher shared by every Streamlit session."""

    repositories: HubRepositories
    credential_hasher: CredentialHasherPort


def _build_services() -> PortalServices:
    """Wire repositories and the credential hasher."""
    hasher = build_credential_hasher()
    return PortalServices(
        repositories=build_repositories(credential_hasher=hasher),
        credential_hasher=hasher,
    )


@st.cache_resource(show_spinner=False)
def _load_services() -> PortalServices:
    """Cached wrapper around _build_services for Streamlit sessions."""
    return _build_services()


def _format_currency(value: Decimal) -> str:
    """Format amounts for display."""
    return f"{CURRENCY_SYMBOL}{value:,.2f}"


def _format_timestamp(value: datetime | None) -> str:
    if value is None:
        return "—"
    return value.strftime("%Y-%m-%d %H:%M")


def _describe_deadline(deadline: datetime, now: datetime) -> str:
    """Return a short "time left" caption for the contribution deadline."""
    remaining = deadline - now
    days = remaining.days
    hours = remaining.seconds // 3600
    return (
        f"Next contribution deadline: {deadline:%B} {deadline.day}th, "
        f"11:59PM ({days} days {hours} hours left)"
    )


def _category_chart_data(totals: CategoryTotals) -> list[dict[str, object]]:
    """Prepare Altair-ready rows, one per category."""
    return [
        {
            "category": category.value,
            "amount": float(totals.amount_for(category)),
            "amount_label": _format_currency(totals.amount_for(category)),
        }
        for category in PAYMENT_CATEGORIES
    ]


def _payment_rows(payments: Sequence[Payment]) -> list[dict[str, str]]:
    return [
        {
            "Date": _format_timestamp(payment.submitted_at),
            "Member": payment.owner_display_name,
            "Category": payment.category.value,
            "Amount": _format_currency(payment.amount),
            "Receipt": payment.receipt_reference or "—",
            "Status": payment.status.value,
        }
        for payment in payments
    ]


def _ledger_rows(entries: Sequence[LedgerEntry]) -> list[dict[str, str]]:
    rows = []
    for entry in entries:
        row = {
            "Member": entry.account.name,
            "ID": entry.account.membership_id or "N/A",
        }
        for category in PAYMENT_CATEGORIES:
            row[category.value] = _format_currency(
                entry.totals.amount_for(category)
            )
        row["Balance"] = _format_currency(entry.grand_total)
        rows.append(row)
    return rows


def _account_rows(accounts: Sequence[Account]) -> list[dict[str, str]]:
    return [
        {
            "Name": account.name,
            "Email": account.email,
            "ID": account.membership_id or "N/A",
            "Role": account.role.value,
            "Status": account.status.value,
            "Joined": _format_timestamp(account.registered_at),
        }
        for account in accounts
    ]


def _render_totals(totals: CategoryTotals, title: str) -> None:
    """Render metrics and a bar chart of approved totals."""
    st.subheader(title)
    st.metric("Total", _format_currency(totals.grand_total))
    columns = st.columns(len(PAYMENT_CATEGORIES))
    for column, category in zip(columns, PAYMENT_CATEGORIES):
        column.metric(
            category.value,
            _format_currency(totals.amount_for(category)),
        )
    chart = alt.Chart(alt.Data(values=_category_chart_data(totals))).mark_bar(
        cornerRadiusTopLeft=6,
        cornerRadiusTopRight=6,
    ).encode(
        x=alt.X("category:N", title=None, sort=None),
        y=alt.Y("amount:Q", title="Approved amount"),
        color=alt.Color("category:N", legend=None),
        tooltip=[
            alt.Tooltip("category:N"),
            alt.Tooltip("amount_label:N"),
        ],
    )
    st.altair_chart(chart, width="stretch")


def _render_login(services: PortalServices) -> None:
    st.subheader("Sign in")
    with st.form("login"):
        membership_id = st.text_input("Membership ID")
        credential = st.text_input("Password", type="password")
        submitted = st.form_submit_button("Sign in")
    if not submitted:
        return
    use_case = AuthenticateUseCase(
        services.repositories.accounts,
        services.credential_hasher,
    )
    try:
        account = use_case.execute(membership_id, credential)
    except ContributionHubError as exc:
        st.error(str(exc))
        return
    get_usage_logger().info(f"Sign-in: {account.id}")
    st.session_state[SESSION_ACCOUNT_KEY] = account.id
    st.rerun()


def _render_register(services: PortalServices) -> None:
    st.subheader("Register")
    with st.form("register"):
        name = st.text_input("Full name")
        email = st.text_input("Email")
        submitted = st.form_submit_button("Request membership")
    if not submitted:
        return
    try:
        RegisterAccountUseCase(services.repositories.accounts).execute(
            name,
            email,
        )
    except ContributionHubError as exc:
        st.error(str(exc))
        return
    st.success("Registration received. A manager will review it shortly.")


def _render_change_password(
    services: PortalServices,
    account: Account,
) -> None:
    st.subheader("Secure your account")
    st.caption("Please update your temporary password to continue.")
    with st.form("change_password"):
        secret = st.text_input("New password", type="password")
        confirm = st.text_input("Confirm password", type="password")
        submitted = st.form_submit_button("Update password")
    if not submitted:
        return
    if secret != confirm:
        st.error("Passwords do not match.")
        return
    use_case = SetCredentialUseCase(
        services.repositories.accounts,
        services.credential_hasher,
    )
    try:
        use_case.execute(account.id, secret)
    except ContributionHubError as exc:
        st.error(str(exc))
        return
    st.rerun()


def _render_client_dashboard(
    services: PortalServices,
    account: Account,
) -> None:
    repos = services.repositories
    status_label = st.selectbox("History filter", HISTORY_FILTERS)
    dashboard = GetClientDashboardUseCase(
        repos.accounts,
        repos.payments,
        repos.notifications,
        repos.settings,
    ).execute(account.id, STATUS_FILTERS[status_label])

    if dashboard.next_deadline is not None:
        st.info(_describe_deadline(dashboard.next_deadline, utc_now()))
    _render_totals(dashboard.totals, "My approved savings")

    st.subheader("Submit a payment")
    with st.form("submit_payment", clear_on_submit=True):
        amount = st.number_input("Amount", min_value=0.0, step=100.0)
        category = st.selectbox(
            "Category",
            [c.value for c in PAYMENT_CATEGORIES],
        )
        receipt = st.file_uploader(
            "Receipt",
            type=["png", "jpg", "jpeg", "pdf"],
        )
        submitted = st.form_submit_button("Submit")
    if submitted:
        if receipt is None:
            st.error("Please attach a receipt.")
        else:
            try:
                SubmitPaymentUseCase(repos.accounts, repos.payments).execute(
                    account.id,
                    str(amount),
                    category,
                    receipt.name,
                )
            except ContributionHubError as exc:
                st.error(str(exc))
            else:
                st.success("Payment submitted for review.")

    st.subheader("History")
    st.dataframe(_payment_rows(dashboard.payments), hide_index=True)

    st.subheader("Notifications")
    if not dashboard.notifications:
        st.caption("No notifications yet.")
    for notification in dashboard.notifications:
        st.markdown(
            f"**{_format_timestamp(notification.sent_at)}** "
            f"{notification.body}"
        )


def _render_approvals(
    services: PortalServices,
    pending: Sequence[Account],
) -> None:
    if not pending:
        st.caption("All pending requests have been processed.")
    repos = services.repositories
    for account in pending:
        with st.form(f"approve_{account.id}"):
            st.markdown(f"**{account.name}** ({account.email})")
            membership_id = st.text_input("Assign membership ID")
            credential = st.text_input("Assign temporary password")
            approve_clicked = st.form_submit_button("Approve")
            reject_clicked = st.form_submit_button("Reject")
        try:
            if approve_clicked:
                ApproveAccountUseCase(
                    repos.accounts,
                    repos.notifications,
                    services.credential_hasher,
                ).execute(account.id, membership_id, credential)
                st.rerun()
            if reject_clicked:
                RejectAccountUseCase(repos.accounts).execute(account.id)
                st.rerun()
        except ContributionHubError as exc:
            st.error(str(exc))


def _render_payment_review(
    services: PortalServices,
    payments: Sequence[Payment],
) -> None:
    st.dataframe(_payment_rows(payments), hide_index=True)
    use_case = ReviewPaymentUseCase(services.repositories.payments)
    for payment in payments:
        columns = st.columns([4, 1, 1, 1])
        columns[0].write(
            f"{payment.owner_display_name}: "
            f"{_format_currency(payment.amount)} {payment.category.value}"
        )
        for column, status in zip(columns[1:], PaymentStatus):
            label = status.value.title()
            if column.button(label, key=f"{payment.id}_{status.value}"):
                use_case.execute(payment.id, status)
                st.rerun()


def _render_team(
    services: PortalServices,
    accounts: Sequence[Account],
) -> None:
    st.dataframe(_account_rows(accounts), hide_index=True)
    repos = services.repositories
    members = [a for a in accounts if a.role is not AccountRole.MANAGER]
    if not members:
        return
    labels = {
        f"{a.name} ({a.membership_id or a.status.value})": a
        for a in members
    }
    selected = labels[st.selectbox("Member", list(labels))]
    new_secret = st.text_input("New temporary password", type="password")
    reset_col, delete_col = st.columns(2)
    try:
        if reset_col.button("Reset password"):
            ResetCredentialUseCase(
                repos.accounts,
                services.credential_hasher,
            ).execute(selected.id, new_secret)
            st.success("Password reset. User must change it upon next login.")
        if delete_col.button("Delete member"):
            DeleteAccountUseCase(repos.accounts, repos.payments).execute(
                selected.id
            )
            st.rerun()
    except ContributionHubError as exc:
        st.error(str(exc))


def _render_manager_dashboard(services: PortalServices) -> None:
    repos = services.repositories
    status_label = st.sidebar.selectbox("Payments", list(STATUS_FILTERS))
    search_term = st.sidebar.text_input("Search name or ID")
    dashboard = GetManagerDashboardUseCase(
        repos.accounts,
        repos.payments,
        repos.settings,
    ).execute(STATUS_FILTERS[status_label], search_term)

    _render_totals(dashboard.totals, "Organisation totals")
    approvals, payments, ledger, team, messaging, settings = st.tabs(
        ["Approvals", "Payments", "Ledger", "Team", "Messaging", "Settings"]
    )
    with approvals:
        _render_approvals(services, dashboard.pending_accounts)
    with payments:
        _render_payment_review(services, dashboard.payments)
    with ledger:
        st.dataframe(_ledger_rows(dashboard.ledger), hide_index=True)
    with team:
        _render_team(services, dashboard.accounts)
    with messaging:
        recipients = {"Broadcast to all members": BROADCAST_RECIPIENT}
        recipients.update(
            {
                f"{c.name} ({c.membership_id})": c.id
                for c in dashboard.active_clients
            }
        )
        target = st.selectbox("Recipient", list(recipients))
        body = st.text_area("Message")
        if st.button("Send"):
            try:
                SendNotificationUseCase(
                    repos.accounts,
                    repos.notifications,
                ).execute(recipients[target], body)
            except ContributionHubError as exc:
                st.error(str(exc))
            else:
                st.success("Notification sent.")
    with settings:
        enabled = dashboard.settings.reminders_enabled
        state = "on" if enabled else "off"
        st.write(f"Automated payment reminders are {state}.")
        if st.button("Turn off reminders" if enabled else "Turn on reminders"):
            ToggleRemindersUseCase(repos.settings).execute()
            st.rerun()


def _current_account(services: PortalServices) -> Account | None:
    """Return the signed-in account, clearing stale sessions."""
    account_id = st.session_state.get(SESSION_ACCOUNT_KEY)
    if account_id is None:
        return None
    for account in services.repositories.accounts.get():
        if account.id == account_id:
            return account
    st.session_state.pop(SESSION_ACCOUNT_KEY, None)
    return None


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Contribution Hub", layout="wide")
    st.title("Contribution Hub")

    try:
        services = _load_services()
        account = _current_account(services)
    except ContributionHubError as exc:
        st.error(f"Storage unavailable: {exc}")
        return

    if account is None:
        page = st.sidebar.selectbox("Page", ["Sign in", "Register"])
        if page == "Sign in":
            _render_login(services)
        else:
            _render_register(services)
        return

    st.sidebar.write(f"Signed in as {account.name}")
    if st.sidebar.button("Sign out"):
        st.session_state.pop(SESSION_ACCOUNT_KEY, None)
        st.rerun()

    try:
        if account.requires_credential_reset:
            _render_change_password(services, account)
        elif account.role is AccountRole.MANAGER:
            _render_manager_dashboard(services)
        else:
            _render_client_dashboard(services, account)
    except ContributionHubError as exc:
        st.error(str(exc))


if __name__ == "__main__":  # pragma: no cover
    main()
