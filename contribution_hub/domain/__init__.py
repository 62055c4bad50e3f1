"""Domain package for business rules and core models."""

from .constants import BROADCAST_RECIPIENT
from .errors import (
    AccountDeactivatedError,
    AccountPendingError,
    ContributionHubError,
    InvalidCredentialError,
    NotFoundError,
    StorageFailure,
    ValidationError,
)
from .models import (
    PAYMENT_CATEGORIES,
    Account,
    AccountRole,
    AccountStatus,
    CategoryTotals,
    LedgerEntry,
    Notification,
    Payment,
    PaymentCategory,
    PaymentStatus,
    PortalSettings,
)
from .services import (
    grand_total,
    per_account_ledger,
    sort_most_recent_first,
    summarize_payments,
    totals_by_category,
    visible_to,
)

__all__ = [
    "BROADCAST_RECIPIENT",
    "AccountDeactivatedError",
    "AccountPendingError",
    "ContributionHubError",
    "InvalidCredentialError",
    "NotFoundError",
    "StorageFailure",
    "ValidationError",
    "PAYMENT_CATEGORIES",
    "Account",
    "AccountRole",
    "AccountStatus",
    "CategoryTotals",
    "LedgerEntry",
    "Notification",
    "Payment",
    "PaymentCategory",
    "PaymentStatus",
    "PortalSettings",
    "grand_total",
    "per_account_ledger",
    "sort_most_recent_first",
    "summarize_payments",
    "totals_by_category",
    "visible_to",
]
