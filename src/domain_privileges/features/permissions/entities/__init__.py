"""Permission entities: bits, catalogs, built-in roles and guard decisions."""

from ....core.masks import coerce_mask
from .permission_bit import PermissionBit
from .catalog import PermissionCatalog
from .catalogs import SYSTEM_PRIVILEGES, DOMAIN_PERMISSIONS, BUILTIN_ROLES
from .guard_decision import GuardDecision

__all__ = [
    "PermissionBit",
    "coerce_mask",
    "PermissionCatalog",
    "SYSTEM_PRIVILEGES",
    "DOMAIN_PERMISSIONS",
    "BUILTIN_ROLES",
    "GuardDecision",
]
