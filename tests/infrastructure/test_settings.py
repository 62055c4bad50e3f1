"""Tests for infrastructure settings."""

from unittest.mock import MagicMock

import pytest

from contribution_hub.infrastructure import settings as settings_module
from contribution_hub.infrastructure.settings import (
    DEFAULT_BCRYPT_ROUNDS,
    HubSettings,
)


@pytest.fixture(autouse=True)
def _no_dotenv(monkeypatch):
    monkeypatch.setattr(settings_module.dotenv, "load_dotenv", lambda: None)
    for name in (
        "CONTRIBUTION_HUB_DB_URL",
        "CONTRIBUTION_HUB_ADMIN_SECRET",
        "CONTRIBUTION_HUB_BCRYPT_ROUNDS",
    ):
        monkeypatch.delenv(name, raising=False)


def test_from_env_reads_variables(monkeypatch) -> None:
    monkeypatch.setenv("CONTRIBUTION_HUB_DB_URL", "postgresql://u:p@h/hub")
    monkeypatch.setenv("CONTRIBUTION_HUB_ADMIN_SECRET", "s3cret")
    monkeypatch.setenv("CONTRIBUTION_HUB_BCRYPT_ROUNDS", "6")

    settings = HubSettings.from_env()

    assert settings == HubSettings(
        db_url="postgresql://u:p@h/hub",
        admin_secret="s3cret",
        bcrypt_rounds=6,
    )


def test_from_env_defaults_to_sqlite_in_data_dir(monkeypatch, tmp_path):
    monkeypatch.setattr(settings_module, "get_project_root", lambda: tmp_path)

    settings = HubSettings.from_env()

    assert settings.db_url == (
        f"sqlite:///{tmp_path / 'data' / 'contribution_hub.db'}"
    )
    assert (tmp_path / "data").is_dir()
    assert settings.admin_secret == "admin"
    assert settings.bcrypt_rounds == DEFAULT_BCRYPT_ROUNDS


@pytest.mark.parametrize("raw", ["many", "2", "40"])
def test_invalid_rounds_fall_back_to_default(monkeypatch, raw) -> None:
    fake_logger = MagicMock()
    monkeypatch.setattr(settings_module, "get_app_logger", lambda: fake_logger)
    monkeypatch.setenv("CONTRIBUTION_HUB_DB_URL", "sqlite://")
    monkeypatch.setenv("CONTRIBUTION_HUB_BCRYPT_ROUNDS", raw)

    assert HubSettings.from_env().bcrypt_rounds == DEFAULT_BCRYPT_ROUNDS
    fake_logger.warning.assert_called_once()
