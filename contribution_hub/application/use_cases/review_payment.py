"""Use case recording a manager decision on a payment."""

from dataclasses import replace

from contribution_hub.application.ports.collections import (
    PaymentsRepositoryPort,
)
from contribution_hub.application.use_cases.lookups import (
    find_payment,
    replace_record,
)
from contribution_hub.domain.models import Payment, PaymentStatus
from contribution_hub.domain.services.validation import (
    resolve_payment_status,
)
from contribution_hub.infrastructure.logging.logger import get_app_logger


class ReviewPaymentUseCase:
    """Set the status of a payment.

    Any status may follow any other, so a decided payment can be reset to
    PENDING and reviewed again. No notification is sent to the owner.
    """

    def __init__(
        self,
        payments_repository: PaymentsRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            payments_repository: Port storing the payments collection.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._payments_repository = payments_repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        payment_id: str,
        decision: PaymentStatus | str,
    ) -> Payment:
        """Apply the decision and return the updated payment.

        Args:
            payment_id: Id of the payment to review.
            decision: APPROVED, REJECTED or PENDING.

        Returns:
            Payment: Payment with only its status changed.
        """
        status = resolve_payment_status(decision)
        payments = self._payments_repository.get()
        reviewed = replace(find_payment(payments, payment_id), status=status)
        self._payments_repository.replace(replace_record(payments, reviewed))
        self._logger.info(f"Payment {payment_id} marked {status.value}")
        return reviewed


__all__ = ["ReviewPaymentUseCase"]
