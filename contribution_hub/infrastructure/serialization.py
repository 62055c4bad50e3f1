"""JSON-ready conversions between domain models and stored records.

Decimals are written as strings and timestamps as ISO-8601 strings so a
record read back compares equal to the one written.
"""

from datetime import datetime
from decimal import Decimal
from typing import Any

from contribution_hub.domain.models import (
    Account,
    AccountRole,
    AccountStatus,
    Notification,
    Payment,
    PaymentCategory,
    PaymentStatus,
    PortalSettings,
)


def _format_timestamp(value: datetime | None) -> str | None:
    return value.isoformat() if value is not None else None


def _parse_timestamp(value: str | None) -> datetime | None:
    return datetime.fromisoformat(value) if value else None


def account_to_record(account: Account) -> dict[str, Any]:
    """Convert an account into a JSON-ready mapping."""
    return {
        "id": account.id,
        "name": account.name,
        "email": account.email,
        "role": account.role.value,
        "status": account.status.value,
        "registered_at": _format_timestamp(account.registered_at),
        "membership_id": account.membership_id,
        "credential_hash": account.credential_hash,
        "requires_credential_reset": account.requires_credential_reset,
        "last_authenticated_at": _format_timestamp(
            account.last_authenticated_at
        ),
    }


def account_from_record(record: dict[str, Any]) -> Account:
    """Rebuild an account from a stored mapping."""
    return Account(
        id=record["id"],
        name=record["name"],
        email=record["email"],
        role=AccountRole(record["role"]),
        status=AccountStatus(record["status"]),
        registered_at=_parse_timestamp(record["registered_at"]),
        membership_id=record.get("membership_id"),
        credential_hash=record.get("credential_hash"),
        requires_credential_reset=bool(
            record.get("requires_credential_reset", True)
        ),
        last_authenticated_at=_parse_timestamp(
            record.get("last_authenticated_at")
        ),
    )


def payment_to_record(payment: Payment) -> dict[str, Any]:
    """Convert a payment into a JSON-ready mapping."""
    return {
        "id": payment.id,
        "owner_account_id": payment.owner_account_id,
        "owner_display_name": payment.owner_display_name,
        "amount": str(payment.amount),
        "category": payment.category.value,
        "submitted_at": _format_timestamp(payment.submitted_at),
        "receipt_reference": payment.receipt_reference,
        "status": payment.status.value,
    }


def payment_from_record(record: dict[str, Any]) -> Payment:
    """Rebuild a payment from a stored mapping."""
    return Payment(
        id=record["id"],
        owner_account_id=record["owner_account_id"],
        owner_display_name=record["owner_display_name"],
        amount=Decimal(record["amount"]),
        category=PaymentCategory(record["category"]),
        submitted_at=_parse_timestamp(record["submitted_at"]),
        receipt_reference=record.get("receipt_reference") or "",
        status=PaymentStatus(record["status"]),
    )


def notification_to_record(notification: Notification) -> dict[str, Any]:
    """Convert a notification into a JSON-ready mapping."""
    return {
        "id": notification.id,
        "recipient_id": notification.recipient_id,
        "body": notification.body,
        "sent_at": _format_timestamp(notification.sent_at),
    }


def notification_from_record(record: dict[str, Any]) -> Notification:
    """Rebuild a notification from a stored mapping."""
    return Notification(
        id=record["id"],
        recipient_id=record["recipient_id"],
        body=record["body"],
        sent_at=_parse_timestamp(record["sent_at"]),
    )


def settings_to_record(settings: PortalSettings) -> dict[str, Any]:
    """Convert the settings into a JSON-ready mapping."""
    return {"reminders_enabled": settings.reminders_enabled}


def settings_from_record(record: dict[str, Any]) -> PortalSettings:
    """Rebuild the settings, defaulting missing fields.

    Raises:
        ValueError: If a stored flag is not a boolean.
    """
    reminders_enabled = record.get("reminders_enabled", True)
    if not isinstance(reminders_enabled, bool):
        raise ValueError(
            f"reminders_enabled must be a boolean: {reminders_enabled!r}"
        )
    return PortalSettings(reminders_enabled=reminders_enabled)


__all__ = [
    "account_to_record",
    "account_from_record",
    "payment_to_record",
    "payment_from_record",
    "notification_to_record",
    "notification_from_record",
    "settings_to_record",
    "settings_from_record",
]
