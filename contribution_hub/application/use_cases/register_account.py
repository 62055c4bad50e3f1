"""Use case registering a new member account."""

from collections.abc import Callable
from datetime import datetime

from contribution_hub.application.ports.collections import (
    AccountsRepositoryPort,
)
from contribution_hub.domain.models import Account
from contribution_hub.domain.policies import new_registration
from contribution_hub.domain.services.validation import require_text
from contribution_hub.infrastructure.logging.logger import get_app_logger
from contribution_hub.utils.clock import utc_now
from contribution_hub.utils.identifiers import new_id


class RegisterAccountUseCase:
    """Create a pending member account awaiting manager approval."""

    def __init__(
        self,
        accounts_repository: AccountsRepositoryPort,
        logger=None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        """Initialize the use case.

        Args:
            accounts_repository: Port storing the accounts collection.
            logger: Optional logger compatible with logging.Logger-like API.
            clock: Optional callable returning the current timestamp.
        """
        self._accounts_repository = accounts_repository
        self._logger = logger or get_app_logger()
        self._clock = clock or utc_now

    def execute(self, name: str, email: str) -> Account:
        """Register a new account.

        Args:
            name: Display name of the registrant.
            email: Contact address of the registrant.

        Returns:
            Account: The stored PENDING account.
        """
        account = new_registration(
            new_id("u"),
            require_text(name, "Name"),
            require_text(email, "Email"),
            self._clock(),
        )
        accounts = self._accounts_repository.get()
        self._accounts_repository.replace([*accounts, account])
        self._logger.info(f"Registered account {account.id} (pending)")
        return account


__all__ = ["RegisterAccountUseCase"]
