"""Tests for settings and logging configuration."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from domain_privileges.config import LoggingConfig, PrivilegeSettings
from domain_privileges.config.constants import PERM, PRIV
from domain_privileges.config.logging_config import get_log_level_from_verbosity


class TestPrivilegeSettings:
    """PrivilegeSettings"""

    def test_defaults(self):
        settings = PrivilegeSettings(_env_file=None)

        assert settings.default_privilege == PRIV.PRIV_DEFAULT
        assert settings.aggregation_concurrency == 16
        assert settings.qualified(settings.users_table) == "public.users"

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("DOMAIN_PRIVILEGES_DEFAULT_PRIVILEGE", str(1 << 70))
        monkeypatch.setenv("DOMAIN_PRIVILEGES_DB_SCHEMA", "judge")

        settings = PrivilegeSettings(_env_file=None)

        assert settings.default_privilege == 1 << 70
        assert settings.qualified("domains") == "judge.domains"

    def test_rejects_bad_identifier(self):
        with pytest.raises(PydanticValidationError):
            PrivilegeSettings(_env_file=None, users_table="users; drop table users")

    def test_rejects_zero_concurrency(self):
        with pytest.raises(PydanticValidationError):
            PrivilegeSettings(_env_file=None, aggregation_concurrency=0)


class TestConstants:
    """Bit layout"""

    def test_all_is_every_bit(self):
        assert PRIV.PRIV_ALL & (1 << 500) == 1 << 500
        assert PERM.PERM_ALL & PERM.PERM_MANAGE_GROUP == PERM.PERM_MANAGE_GROUP

    def test_domain_bits_beyond_64(self):
        assert PERM.PERM_MANAGE_GROUP.bit_length() > 64


class TestLoggingConfig:
    """LoggingConfig.build"""

    @pytest.mark.parametrize("verbosity, level", [
        ("quiet", "ERROR"),
        ("NORMAL", "WARNING"),
        ("verbose", "INFO"),
        ("debug", "DEBUG"),
        ("unknown", "WARNING"),
    ])
    def test_verbosity_mapping(self, verbosity, level):
        assert get_log_level_from_verbosity(verbosity) == level

    def test_explicit_level_wins(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "debug")
        monkeypatch.setenv("LOG_VERBOSITY", "QUIET")

        config = LoggingConfig.build()

        assert config["loggers"]["domain_privileges"]["level"] == "DEBUG"
        assert config["loggers"]["asyncpg"]["level"] == "ERROR"

    def test_unknown_format_falls_back(self, monkeypatch):
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        monkeypatch.setenv("LOG_FORMAT", "xml")

        config = LoggingConfig.build()

        assert config["formatters"]["default"]["format"].startswith("%(asctime)s - %(levelname)s")
