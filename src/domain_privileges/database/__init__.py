"""Database access for the asyncpg store adapters."""

from .connection import DatabaseManager, DATABASE_ERRORS, affected_rows

__all__ = ["DatabaseManager", "DATABASE_ERRORS", "affected_rows"]
