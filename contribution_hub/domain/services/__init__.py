"""Domain services package."""

from .aggregation import (
    grand_total,
    per_account_ledger,
    summarize_payments,
    totals_by_category,
)
from .deadlines import next_contribution_deadline
from .filters import filter_payments, matches_search, search_accounts
from .normalization import membership_key, normalize_text
from .notifications import is_visible_to, sort_most_recent_first, visible_to
from .validation import (
    require_text,
    resolve_category,
    resolve_payment_status,
    validate_amount,
    validate_new_credential,
)

__all__ = [
    "grand_total",
    "per_account_ledger",
    "summarize_payments",
    "totals_by_category",
    "next_contribution_deadline",
    "filter_payments",
    "matches_search",
    "search_accounts",
    "membership_key",
    "normalize_text",
    "is_visible_to",
    "sort_most_recent_first",
    "visible_to",
    "require_text",
    "resolve_category",
    "resolve_payment_status",
    "validate_amount",
    "validate_new_credential",
]
