"""Role to permission-mask resolution for a tenant.

Lookup precedence: the tenant's custom role map, the built-in role table,
the built-in ``default`` role, then an empty mask. Resolution never fails;
a stale or removed role assignment degrades to the default mask.
"""

import logging
from typing import TYPE_CHECKING, Callable, Mapping, Optional, Tuple

from ....config.constants import PERM, BuiltinRole
from ....core.exceptions import ValidationError
from ..entities import BUILTIN_ROLES, coerce_mask

if TYPE_CHECKING:
    from ...tenants.entities import TenantRecord


logger = logging.getLogger(__name__)

RoleLookup = Callable[[Optional["TenantRecord"], str], Optional[int]]


class RoleResolver:
    """Resolves a role name inside a tenant into a permission mask."""

    def __init__(
        self,
        builtin_roles: Mapping[str, int] = BUILTIN_ROLES,
        default_role: str = BuiltinRole.DEFAULT
    ):
        self.builtin_roles = builtin_roles
        self.default_role = default_role
        self._lookups: Tuple[RoleLookup, ...] = (
            self._from_tenant,
            self._from_builtin,
            self._from_default,
        )

    def resolve_mask(self, tenant: Optional["TenantRecord"], role_name: Optional[str]) -> int:
        """Resolve the permission mask of ``role_name`` in ``tenant``.

        ``tenant`` may be None when the tenant record no longer exists.
        """
        role_name = role_name or self.default_role
        for lookup in self._lookups:
            mask = lookup(tenant, role_name)
            if mask is not None:
                return mask
        return PERM.PERM_NONE

    def _from_tenant(self, tenant: Optional["TenantRecord"], role_name: str) -> Optional[int]:
        if tenant is None or role_name not in tenant.custom_roles:
            return None
        raw = tenant.custom_roles[role_name]
        if raw is None:
            return None
        try:
            return coerce_mask(raw, field="role")
        except ValidationError as e:
            logger.warning(f"Ignoring malformed role {role_name} in tenant {tenant.tenant_id}: {e.message}")
            return None

    def _from_builtin(self, tenant: Optional["TenantRecord"], role_name: str) -> Optional[int]:
        return self.builtin_roles.get(role_name)

    def _from_default(self, tenant: Optional["TenantRecord"], role_name: str) -> Optional[int]:
        return self.builtin_roles.get(self.default_role)
