"""Domain models for payment submissions."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum


class PaymentCategory(str, Enum):
    """Closed, ordered set of payment purposes."""

    CONTRIBUTION = "Contribution"
    SAVING = "Saving"
    DIAMOND_SAVING = "Diamond Saving"


class PaymentStatus(str, Enum):
    """Review state of a payment."""

    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"


PAYMENT_CATEGORIES: tuple[PaymentCategory, ...] = tuple(PaymentCategory)


@dataclass(frozen=True)
class Payment:
    """One contribution or saving submission.

    ``owner_display_name`` is copied from the account when the payment is
    submitted and is not refreshed if the account is renamed later.
    """

    id: str
    owner_account_id: str
    owner_display_name: str
    amount: Decimal
    category: PaymentCategory
    submitted_at: datetime
    receipt_reference: str
    status: PaymentStatus = PaymentStatus.PENDING


__all__ = [
    "Payment",
    "PaymentCategory",
    "PaymentStatus",
    "PAYMENT_CATEGORIES",
]
