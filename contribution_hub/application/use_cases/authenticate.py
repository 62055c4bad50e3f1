"""Use case authenticating a member by membership id and secret."""

from collections.abc import Callable
from dataclasses import replace
from datetime import datetime

from contribution_hub.application.ports.collections import (
    AccountsRepositoryPort,
)
from contribution_hub.application.ports.credentials import (
    CredentialHasherPort,
)
from contribution_hub.application.use_cases.lookups import (
    find_account_by_membership_id,
    replace_record,
)
from contribution_hub.domain.errors import (
    InvalidCredentialError,
    NotFoundError,
)
from contribution_hub.domain.models import Account
from contribution_hub.domain.policies import ensure_can_authenticate
from contribution_hub.infrastructure.logging.logger import get_app_logger
from contribution_hub.utils.clock import utc_now


class AuthenticateUseCase:
    """Sign an account in and record the authentication time.

    Checks run in a fixed order: unknown membership id, then account status
    (pending or deactivated), then the secret. A pending account therefore
    reports ``AccountPending`` even when the secret is wrong.
    """

    def __init__(
        self,
        accounts_repository: AccountsRepositoryPort,
        credential_hasher: CredentialHasherPort,
        logger=None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        """Initialize the use case.

        Args:
            accounts_repository: Port storing the accounts collection.
            credential_hasher: Port verifying secrets against stored hashes.
            logger: Optional logger compatible with logging.Logger-like API.
            clock: Optional callable returning the current timestamp.
        """
        self._accounts_repository = accounts_repository
        self._credential_hasher = credential_hasher
        self._logger = logger or get_app_logger()
        self._clock = clock or utc_now

    def execute(self, membership_id: str, credential: str) -> Account:
        """Authenticate and return the refreshed account record.

        Args:
            membership_id: Login handle, matched case-insensitively.
            credential: Secret submitted by the user.

        Returns:
            Account: Account with ``last_authenticated_at`` updated.
        """
        accounts = self._accounts_repository.get()
        account = find_account_by_membership_id(accounts, membership_id)
        if account is None:
            self._logger.warning(
                f"Sign-in refused: unknown membership id {membership_id!r}"
            )
            raise NotFoundError("User not found.")
        ensure_can_authenticate(account)
        if not account.credential_hash or not credential or not (
            self._credential_hasher.verify_secret(
                credential,
                account.credential_hash,
            )
        ):
            self._logger.warning(
                f"Sign-in refused: wrong password for account {account.id}"
            )
            raise InvalidCredentialError("Incorrect password.")

        authenticated = replace(account, last_authenticated_at=self._clock())
        self._accounts_repository.replace(
            replace_record(accounts, authenticated)
        )
        self._logger.info(f"Account {account.id} signed in")
        return authenticated


__all__ = ["AuthenticateUseCase"]
