"""Domain constants for the contribution hub."""

BROADCAST_RECIPIENT = "ALL"

BOOTSTRAP_MANAGER_ID = "mgr-001"
BOOTSTRAP_MANAGER_NAME = "Admin Manager"
BOOTSTRAP_MANAGER_EMAIL = "admin@contributionteam.com"
BOOTSTRAP_MANAGER_MEMBERSHIP_ID = "ADMIN"
DEFAULT_MANAGER_SECRET = "admin"

MIN_CREDENTIAL_LENGTH = 4

# Contributions are due on this day of every month, at 23:59:59.
CONTRIBUTION_DEADLINE_DAY = 12


__all__ = [
    "BROADCAST_RECIPIENT",
    "BOOTSTRAP_MANAGER_ID",
    "BOOTSTRAP_MANAGER_NAME",
    "BOOTSTRAP_MANAGER_EMAIL",
    "BOOTSTRAP_MANAGER_MEMBERSHIP_ID",
    "DEFAULT_MANAGER_SECRET",
    "MIN_CREDENTIAL_LENGTH",
    "CONTRIBUTION_DEADLINE_DAY",
]
