"""Use cases for account administration and credential changes."""

from dataclasses import dataclass

from contribution_hub.application.ports.collections import (
    AccountsRepositoryPort,
    PaymentsRepositoryPort,
)
from contribution_hub.application.ports.credentials import (
    CredentialHasherPort,
)
from contribution_hub.application.use_cases.lookups import (
    find_account,
    replace_record,
)
from contribution_hub.domain.models import Account
from contribution_hub.domain.policies import change_credential
from contribution_hub.domain.services.validation import (
    validate_new_credential,
)
from contribution_hub.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class DeleteAccountResult:
    """Result of an account deletion.

    Attributes:
        account_id: Id of the removed account.
        removed_payment_count: Number of payments deleted with it.
    """

    account_id: str
    removed_payment_count: int


class DeleteAccountUseCase:
    """Remove an account and every payment it owns."""

    def __init__(
        self,
        accounts_repository: AccountsRepositoryPort,
        payments_repository: PaymentsRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            accounts_repository: Port storing the accounts collection.
            payments_repository: Port storing the payments collection.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._accounts_repository = accounts_repository
        self._payments_repository = payments_repository
        self._logger = logger or get_app_logger()

    def execute(self, account_id: str) -> DeleteAccountResult:
        """Delete the account, then cascade to its payments.

        Args:
            account_id: Id of the account to remove.

        Returns:
            DeleteAccountResult: Summary of what was removed.
        """
        accounts = self._accounts_repository.get()
        find_account(accounts, account_id)
        self._accounts_repository.replace(
            [account for account in accounts if account.id != account_id]
        )

        payments = self._payments_repository.get()
        kept = [p for p in payments if p.owner_account_id != account_id]
        self._payments_repository.replace(kept)

        removed = len(payments) - len(kept)
        self._logger.info(
            f"Deleted account {account_id} and {removed} payments"
        )
        return DeleteAccountResult(
            account_id=account_id,
            removed_payment_count=removed,
        )


class _CredentialUseCase:
    """Shared wiring for credential changes."""

    _requires_reset = False
    _action = "changed"

    def __init__(
        self,
        accounts_repository: AccountsRepositoryPort,
        credential_hasher: CredentialHasherPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            accounts_repository: Port storing the accounts collection.
            credential_hasher: Port hashing the new secret.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._accounts_repository = accounts_repository
        self._credential_hasher = credential_hasher
        self._logger = logger or get_app_logger()

    def execute(self, account_id: str, new_secret: str) -> Account:
        """Store a new secret for an approved account.

        Args:
            account_id: Id of the account.
            new_secret: Secret of at least four characters.

        Returns:
            Account: Updated account.
        """
        validate_new_credential(new_secret)
        accounts = self._accounts_repository.get()
        updated = change_credential(
            find_account(accounts, account_id),
            self._credential_hasher.hash_secret(new_secret),
            requires_reset=self._requires_reset,
        )
        self._accounts_repository.replace(replace_record(accounts, updated))
        self._logger.info(f"Password {self._action} for account {account_id}")
        return updated


class SetCredentialUseCase(_CredentialUseCase):
    """Let an account holder choose their own secret."""

    _requires_reset = False
    _action = "changed"


class ResetCredentialUseCase(_CredentialUseCase):
    """Let a manager set a temporary secret, forcing a reset at sign-in."""

    _requires_reset = True
    _action = "reset by a manager"


__all__ = [
    "DeleteAccountResult",
    "DeleteAccountUseCase",
    "SetCredentialUseCase",
    "ResetCredentialUseCase",
]
