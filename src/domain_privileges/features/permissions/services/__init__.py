"""Permission services: role resolution and privilege guarding."""

from .role_resolver import RoleResolver
from .privilege_guard import (
    PrivilegeGuard,
    is_super_admin,
    MODIFY_SUPER_ADMIN,
    GRANT_SUPER_ADMIN,
    BAN_SUPER_ADMIN,
    RESET_SUPER_ADMIN,
)

__all__ = [
    "RoleResolver",
    "PrivilegeGuard",
    "is_super_admin",
    "MODIFY_SUPER_ADMIN",
    "GRANT_SUPER_ADMIN",
    "BAN_SUPER_ADMIN",
    "RESET_SUPER_ADMIN",
]
