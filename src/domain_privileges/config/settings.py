"""
Runtime settings for domain-privileges.

Values come from environment variables prefixed with ``DOMAIN_PRIVILEGES_``
or from an optional ``.env`` file.
"""
from functools import lru_cache
from typing import Union

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import PRIV


class PrivilegeSettings(BaseSettings):
    """Settings consumed by the aggregator, the admin service and the stores."""

    model_config = SettingsConfigDict(
        env_prefix="DOMAIN_PRIVILEGES_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Privilege restored by unban
    default_privilege: int = Field(default=PRIV.PRIV_DEFAULT)
    ban_reason: str = Field(default="Banned by administrator")

    # Upper bound on concurrent per-tenant lookups during aggregation
    aggregation_concurrency: int = Field(default=16, ge=1)

    password_min_length: int = Field(default=6, ge=1)
    password_hash_iterations: int = Field(default=100000, ge=1000)

    # Host schema
    db_schema: str = Field(default="public")
    users_table: str = Field(default="users")
    domains_table: str = Field(default="domains")
    domain_users_table: str = Field(default="domain_users")

    @field_validator("default_privilege", mode="before")
    @classmethod
    def _parse_privilege(cls, value: Union[int, str]) -> int:
        # Wide masks arrive as decimal strings from the environment
        if isinstance(value, str):
            return int(value.strip(), 0)
        return value

    @field_validator("db_schema", "users_table", "domains_table", "domain_users_table")
    @classmethod
    def _validate_identifier(cls, value: str) -> str:
        if not value.replace("_", "").isalnum():
            raise ValueError(f"Invalid SQL identifier: {value}")
        return value

    def qualified(self, table: str) -> str:
        """Return ``schema.table`` for one of the configured tables."""
        return f"{self.db_schema}.{table}"


@lru_cache()
def get_settings() -> PrivilegeSettings:
    """Get cached settings instance."""
    return PrivilegeSettings()
