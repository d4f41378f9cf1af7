"""User store implementations."""

from .asyncpg_user_store import AsyncPGUserStore
from .password_hashing import hash_password, verify_password

__all__ = ["AsyncPGUserStore", "hash_password", "verify_password"]
