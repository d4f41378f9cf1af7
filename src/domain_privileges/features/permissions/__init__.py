"""Permissions feature for domain-privileges.

- entities/: permission bits, catalogs, built-in roles, guard decisions
- services/: role resolution and privilege guarding
"""

from .entities import (
    PermissionBit, PermissionCatalog, GuardDecision, coerce_mask,
    SYSTEM_PRIVILEGES, DOMAIN_PERMISSIONS, BUILTIN_ROLES,
)
from .services import RoleResolver, PrivilegeGuard, is_super_admin

__all__ = [
    "PermissionBit",
    "PermissionCatalog",
    "GuardDecision",
    "coerce_mask",
    "SYSTEM_PRIVILEGES",
    "DOMAIN_PERMISSIONS",
    "BUILTIN_ROLES",
    "RoleResolver",
    "PrivilegeGuard",
    "is_super_admin",
]
