"""Unit tests for application settings."""

import pytest
from pydantic import ValidationError

from friggsys_config import clear_settings_cache, get_settings
from friggsys_config.settings import Settings


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self):
        settings = Settings(_env_file=None)

        assert settings.bcrypt_rounds == 12
        assert settings.log_level == "INFO"
        assert settings.database_url_override is None

    def test_database_url_from_components(self):
        settings = Settings(
            _env_file=None,
            postgres_host="db",
            postgres_port=6543,
            postgres_user="frigg",
            postgres_password="s3cret",
            postgres_db="accounts",
        )

        assert settings.database_url == (
            "postgresql+asyncpg://frigg:s3cret@db:6543/accounts"
        )

    def test_password_hidden_in_repr(self):
        settings = Settings(_env_file=None, postgres_password="s3cret")

        assert "s3cret" not in repr(settings.postgres_password)

    def test_database_url_override(self):
        settings = Settings(
            _env_file=None,
            database_url_override="sqlite+aiosqlite:///:memory:",
        )

        assert settings.database_url == "sqlite+aiosqlite:///:memory:"

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("BCRYPT_ROUNDS", "5")
        monkeypatch.setenv("LOG_LEVEL", "debug")

        settings = Settings(_env_file=None)

        assert settings.bcrypt_rounds == 5
        assert settings.log_level == "debug"

    @pytest.mark.parametrize("rounds", ["3", "32"])
    def test_bcrypt_rounds_out_of_range(self, monkeypatch, rounds):
        monkeypatch.setenv("BCRYPT_ROUNDS", rounds)

        with pytest.raises(ValidationError):
            Settings(_env_file=None)


class TestGetSettings:
    """Tests for the cached accessor."""

    def test_cached_until_cleared(self):
        clear_settings_cache()
        first = get_settings()

        assert get_settings() is first

        clear_settings_cache()
        assert get_settings() is not first
