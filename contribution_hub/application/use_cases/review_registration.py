"""Use cases for approving or rejecting pending registrations."""

from collections.abc import Callable
from datetime import datetime

from contribution_hub.application.ports.collections import (
    AccountsRepositoryPort,
    NotificationsRepositoryPort,
)
from contribution_hub.application.ports.credentials import (
    CredentialHasherPort,
)
from contribution_hub.application.use_cases.lookups import (
    find_account,
    find_account_by_membership_id,
    replace_record,
)
from contribution_hub.application.use_cases.notifications import (
    SendNotificationUseCase,
)
from contribution_hub.domain.errors import ValidationError
from contribution_hub.domain.models import Account
from contribution_hub.domain.policies import approve, reject
from contribution_hub.domain.services.validation import require_text
from contribution_hub.infrastructure.logging.logger import get_app_logger


APPROVAL_MESSAGE = "Approved! ID: {membership_id}. Login and update password."


class ApproveAccountUseCase:
    """Approve a pending account and notify its holder.

    The account write and the notification write are two separate steps:
    the approval stays in place even if sending the notification fails.
    """

    def __init__(
        self,
        accounts_repository: AccountsRepositoryPort,
        notifications_repository: NotificationsRepositoryPort,
        credential_hasher: CredentialHasherPort,
        logger=None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        """Initialize the use case.

        Args:
            accounts_repository: Port storing the accounts collection.
            notifications_repository: Port storing notifications.
            credential_hasher: Port hashing the temporary secret.
            logger: Optional logger compatible with logging.Logger-like API.
            clock: Optional callable returning the current timestamp.
        """
        self._accounts_repository = accounts_repository
        self._credential_hasher = credential_hasher
        self._logger = logger or get_app_logger()
        self._send_notification = SendNotificationUseCase(
            accounts_repository,
            notifications_repository,
            logger=self._logger,
            clock=clock,
        )

    def execute(
        self,
        account_id: str,
        membership_id: str,
        credential: str,
    ) -> Account:
        """Approve the account.

        Args:
            account_id: Id of the pending account.
            membership_id: Login handle to assign, unique ignoring case.
            credential: Temporary secret the holder must change.

        Returns:
            Account: The approved account.
        """
        membership_id = require_text(membership_id, "Membership id")
        require_text(credential, "Temporary password")

        accounts = self._accounts_repository.get()
        account = find_account(accounts, account_id)
        holder = find_account_by_membership_id(accounts, membership_id)
        if holder is not None and holder.id != account.id:
            raise ValidationError(
                f"Membership id {membership_id} is already assigned."
            )

        approved = approve(
            account,
            membership_id,
            self._credential_hasher.hash_secret(credential),
        )
        self._accounts_repository.replace(replace_record(accounts, approved))
        self._logger.info(
            f"Approved account {account_id} as {membership_id}"
        )

        self._send_notification.execute(
            account_id,
            APPROVAL_MESSAGE.format(membership_id=membership_id),
        )
        return approved


class RejectAccountUseCase:
    """Reject a pending registration, keeping the record as REJECTED."""

    def __init__(
        self,
        accounts_repository: AccountsRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            accounts_repository: Port storing the accounts collection.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._accounts_repository = accounts_repository
        self._logger = logger or get_app_logger()

    def execute(self, account_id: str) -> Account:
        """Reject the account and return the updated record."""
        accounts = self._accounts_repository.get()
        rejected = reject(find_account(accounts, account_id))
        self._accounts_repository.replace(replace_record(accounts, rejected))
        self._logger.info(f"Rejected account {account_id}")
        return rejected


__all__ = [
    "APPROVAL_MESSAGE",
    "ApproveAccountUseCase",
    "RejectAccountUseCase",
]
