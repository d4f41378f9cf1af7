"""Users feature for domain-privileges.

- entities/: user records, actors and the user store protocol
- services/: admin write paths and the user detail view
- repositories/: asyncpg user store and password hashing
"""

from .entities import UserRecord, Actor, UserStore
from .services import UserAdminService, UserDetail
from .repositories import AsyncPGUserStore

__all__ = [
    "UserRecord",
    "Actor",
    "UserStore",
    "UserAdminService",
    "UserDetail",
    "AsyncPGUserStore",
]
