"""CLI adapter preparing the collection store.

Reading the accounts collection once seeds the bootstrap manager on a fresh
store, so this command is safe to run repeatedly.
"""

from contribution_hub.domain.errors import ContributionHubError
from contribution_hub.infrastructure.container import build_repositories
from contribution_hub.infrastructure.logging.logger import get_app_logger


def main() -> int:
    """Seed the store and report the stored collection sizes."""
    logger = get_app_logger()
    try:
        repositories = build_repositories()
        accounts = repositories.accounts.get()
        payments = repositories.payments.get()
        settings = repositories.settings.get()
    except ContributionHubError as exc:
        logger.error(f"Store initialization failed: {exc}")
        print(f"Error: {exc}")
        return 1

    print(
        f"Store ready: {len(accounts)} accounts, {len(payments)} payments, "
        f"reminders {'on' if settings.reminders_enabled else 'off'}."
    )
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
