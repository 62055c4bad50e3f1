"""Domain validation helpers raising ValidationError on bad input."""

from decimal import Decimal

from contribution_hub.domain.constants import MIN_CREDENTIAL_LENGTH
from contribution_hub.domain.errors import ValidationError
from contribution_hub.domain.models import PaymentCategory, PaymentStatus
from contribution_hub.domain.services.normalization import normalize_text
from contribution_hub.utils.decimal_utils import coerce_decimal


def require_text(value: str | None, field: str) -> str:
    """Return the stripped value or raise when it is empty.

    Args:
        value: Raw text input.
        field: Field name used in the error message.

    Returns:
        str: Stripped, non-empty value.
    """
    cleaned = normalize_text(value)
    if not cleaned:
        raise ValidationError(f"{field} is required.")
    return cleaned


def validate_amount(value) -> Decimal:
    """Return a finite, non-negative Decimal amount.

    Args:
        value: Raw amount (Decimal, int, float or numeric string).

    Returns:
        Decimal: Normalized amount.
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValidationError("Amount is required.")
    try:
        amount = coerce_decimal(value)
    except ValueError as exc:
        raise ValidationError(str(exc)) from exc
    if not amount.is_finite():
        raise ValidationError(f"Amount must be a finite number: {value!r}")
    if amount < 0:
        raise ValidationError(f"Amount cannot be negative: {amount}")
    return amount


def resolve_category(value: PaymentCategory | str) -> PaymentCategory:
    """Resolve a category from an enum member or its display value."""
    try:
        return PaymentCategory(value)
    except ValueError as exc:
        raise ValidationError(f"Unknown payment category: {value!r}") from exc


def resolve_payment_status(value: PaymentStatus | str) -> PaymentStatus:
    """Resolve a review decision from an enum member or its value."""
    try:
        return PaymentStatus(value)
    except ValueError as exc:
        raise ValidationError(f"Unknown payment status: {value!r}") from exc


def validate_new_credential(secret: str | None) -> str:
    """Check a new secret chosen by a member or a manager.

    Args:
        secret: Proposed secret, used verbatim.

    Returns:
        str: The unchanged secret.
    """
    if not secret or len(secret) < MIN_CREDENTIAL_LENGTH:
        raise ValidationError(
            f"Password must be at least {MIN_CREDENTIAL_LENGTH} characters."
        )
    return secret


__all__ = [
    "require_text",
    "validate_amount",
    "resolve_category",
    "resolve_payment_status",
    "validate_new_credential",
]
