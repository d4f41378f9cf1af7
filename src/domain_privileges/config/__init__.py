"""Configuration for domain-privileges: constants, settings and logging."""

from .constants import PRIV, PERM, BuiltinRole
from .settings import PrivilegeSettings, get_settings
from .logging_config import (
    setup_logging,
    get_logger,
    LoggingConfig,
    LogFormat,
    LogLevel,
    LogVerbosity,
)

__all__ = [
    "PRIV",
    "PERM",
    "BuiltinRole",
    "PrivilegeSettings",
    "get_settings",
    "setup_logging",
    "get_logger",
    "LoggingConfig",
    "LogFormat",
    "LogLevel",
    "LogVerbosity",
]
