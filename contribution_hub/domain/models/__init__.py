"""Domain models package."""

from .accounts import Account, AccountRole, AccountStatus
from .ledger import CategoryTotals, LedgerEntry
from .notifications import Notification
from .payments import (
    PAYMENT_CATEGORIES,
    Payment,
    PaymentCategory,
    PaymentStatus,
)
from .settings import PortalSettings

__all__ = [
    "Account",
    "AccountRole",
    "AccountStatus",
    "CategoryTotals",
    "LedgerEntry",
    "Notification",
    "Payment",
    "PaymentCategory",
    "PaymentStatus",
    "PAYMENT_CATEGORIES",
    "PortalSettings",
]
