"""CLI adapter printing the consolidated member ledger."""

from decimal import Decimal

from contribution_hub.application.use_cases.get_ledger import (
    GetLedgerUseCase,
    LedgerReport,
)
from contribution_hub.domain.errors import ContributionHubError
from contribution_hub.domain.models import PAYMENT_CATEGORIES
from contribution_hub.infrastructure.container import build_repositories
from contribution_hub.infrastructure.logging.logger import get_app_logger


def _format_amount(value: Decimal) -> str:
    return f"{value:,.2f}"


def render_ledger(report: LedgerReport) -> list[str]:
    """Return the ledger as printable lines.

    Args:
        report: Ledger computed by GetLedgerUseCase.

    Returns:
        list[str]: Header, one line per member, and an organisation total.
    """
    header = ["Member", "ID", *[c.value for c in PAYMENT_CATEGORIES], "Total"]
    lines = [" | ".join(header)]
    for entry in report.entries:
        cells = [
            entry.account.name,
            entry.account.membership_id or "N/A",
            *[
                _format_amount(entry.totals.amount_for(category))
                for category in PAYMENT_CATEGORIES
            ],
            _format_amount(entry.grand_total),
        ]
        lines.append(" | ".join(cells))
    totals = [
        "All members",
        "",
        *[
            _format_amount(report.totals.amount_for(category))
            for category in PAYMENT_CATEGORIES
        ],
        _format_amount(report.totals.grand_total),
    ]
    lines.append(" | ".join(totals))
    return lines


def main() -> int:
    """Run the ledger use case and print the result."""
    logger = get_app_logger()
    try:
        repositories = build_repositories()
        use_case = GetLedgerUseCase(
            accounts_repository=repositories.accounts,
            payments_repository=repositories.payments,
            logger=logger,
        )
        report = use_case.execute()
    except ContributionHubError as exc:
        logger.error(f"Ledger failed: {exc}")
        print(f"Error: {exc}")
        return 1

    for line in render_ledger(report):
        print(line)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
