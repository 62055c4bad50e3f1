"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os

import dotenv

from contribution_hub.domain.constants import DEFAULT_MANAGER_SECRET
from contribution_hub.infrastructure.logging.logger import get_app_logger
from contribution_hub.utils.utils import get_project_root


DEFAULT_BCRYPT_ROUNDS = 12


@dataclass(frozen=True)
class HubSettings:
    """Runtime configuration for the contribution hub.

    Attributes:
        db_url: SQLAlchemy URL of the collection store.
        admin_secret: Secret given to the bootstrap manager on first run.
        bcrypt_rounds: Cost factor used when hashing secrets.
    """

    db_url: str
    admin_secret: str = DEFAULT_MANAGER_SECRET
    bcrypt_rounds: int = DEFAULT_BCRYPT_ROUNDS

    @classmethod
    def from_env(cls) -> "HubSettings":
        """Build settings from environment variables and a ``.env`` file.

        Returns:
            HubSettings: Settings sourced from the environment.
        """
        dotenv.load_dotenv()
        db_url = os.getenv("CONTRIBUTION_HUB_DB_URL") or cls._default_db_url()
        admin_secret = (
            os.getenv("CONTRIBUTION_HUB_ADMIN_SECRET") or DEFAULT_MANAGER_SECRET
        )
        rounds = cls._parse_rounds(os.getenv("CONTRIBUTION_HUB_BCRYPT_ROUNDS"))
        return cls(
            db_url=db_url,
            admin_secret=admin_secret,
            bcrypt_rounds=rounds,
        )

    @staticmethod
    def _default_db_url() -> str:
        """Return a SQLite URL inside the project ``data/`` directory."""
        data_dir = get_project_root() / "data"
        data_dir.mkdir(parents=True, exist_ok=True)
        return f"sqlite:///{data_dir / 'contribution_hub.db'}"

    @staticmethod
    def _parse_rounds(raw_value: str | None) -> int:
        """Parse the bcrypt cost factor, falling back to the default.

        Args:
            raw_value: Raw environment value.

        Returns:
            int: Cost factor between 4 and 31.
        """
        if not raw_value:
            return DEFAULT_BCRYPT_ROUNDS
        try:
            rounds = int(raw_value)
        except ValueError:
            rounds = 0
        if not 4 <= rounds <= 31:
            get_app_logger().warning(
                f"Invalid CONTRIBUTION_HUB_BCRYPT_ROUNDS={raw_value!r}; "
                f"using {DEFAULT_BCRYPT_ROUNDS}"
            )
            return DEFAULT_BCRYPT_ROUNDS
        return rounds


__all__ = ["HubSettings", "DEFAULT_BCRYPT_ROUNDS"]
