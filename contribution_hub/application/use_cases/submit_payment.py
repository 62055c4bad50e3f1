"""Use case recording a payment submission."""

from collections.abc import Callable
from datetime import datetime

from contribution_hub.application.ports.collections import (
    AccountsRepositoryPort,
    PaymentsRepositoryPort,
)
from contribution_hub.application.use_cases.lookups import find_account
from contribution_hub.domain.models import (
    Payment,
    PaymentCategory,
    PaymentStatus,
)
from contribution_hub.domain.services.validation import (
    resolve_category,
    validate_amount,
)
from contribution_hub.infrastructure.logging.logger import get_app_logger
from contribution_hub.utils.clock import utc_now
from contribution_hub.utils.identifiers import new_id


class SubmitPaymentUseCase:
    """Store a pending payment against a member account."""

    def __init__(
        self,
        accounts_repository: AccountsRepositoryPort,
        payments_repository: PaymentsRepositoryPort,
        logger=None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        """Initialize the use case.

        Args:
            accounts_repository: Port used to resolve the submitter.
            payments_repository: Port storing the payments collection.
            logger: Optional logger compatible with logging.Logger-like API.
            clock: Optional callable returning the current timestamp.
        """
        self._accounts_repository = accounts_repository
        self._payments_repository = payments_repository
        self._logger = logger or get_app_logger()
        self._clock = clock or utc_now

    def execute(
        self,
        owner_account_id: str,
        amount,
        category: PaymentCategory | str,
        receipt_reference: str = "",
    ) -> Payment:
        """Submit a payment for review.

        Args:
            owner_account_id: Id of the submitting account.
            amount: Non-negative amount; numeric strings are accepted.
            category: Payment category or its display value.
            receipt_reference: Opaque handle to the receipt, may be empty.

        Returns:
            Payment: The stored PENDING payment.
        """
        checked_amount = validate_amount(amount)
        checked_category = resolve_category(category)
        owner = find_account(self._accounts_repository.get(), owner_account_id)

        payment = Payment(
            id=new_id("p"),
            owner_account_id=owner.id,
            owner_display_name=owner.name,
            amount=checked_amount,
            category=checked_category,
            submitted_at=self._clock(),
            receipt_reference=receipt_reference or "",
            status=PaymentStatus.PENDING,
        )
        payments = self._payments_repository.get()
        self._payments_repository.replace([*payments, payment])
        self._logger.info(
            f"Payment {payment.id} submitted by {owner.id}: "
            f"{checked_amount} {checked_category.value}"
        )
        return payment


__all__ = ["SubmitPaymentUseCase"]
