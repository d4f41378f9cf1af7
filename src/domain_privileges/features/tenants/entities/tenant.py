"""Tenant domain entities.

TenantRecord and TenantMembership are read from the host tenant store;
DomainPermissionEntry and AggregationResult are computed per call and never
persisted.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ....config.constants import BuiltinRole


@dataclass(frozen=True)
class TenantRecord:
    """Tenant ("domain") with its custom role definitions.

    ``custom_roles`` values may be ints or decimal strings; they are coerced
    when resolved.
    """

    tenant_id: str
    name: str
    custom_roles: Dict[str, Any] = field(default_factory=dict)

    @property
    def display_name(self) -> str:
        return self.name or self.tenant_id


@dataclass(frozen=True)
class TenantMembership:
    """A user's role assignment inside one tenant."""

    user_id: int
    tenant_id: str
    role: Optional[str] = None
    joined: bool = False

    @property
    def role_name(self) -> str:
        """Assigned role, ``default`` when unset."""
        return self.role or BuiltinRole.DEFAULT


@dataclass(frozen=True)
class DomainPermissionEntry:
    """Effective permissions of one user in one tenant."""

    tenant_id: str
    tenant_name: str
    role: str
    permission_mask: int
    capabilities: List[str]
    joined: bool = False
    tenant_missing: bool = False

    @property
    def sort_key(self):
        # Case-sensitive code-point order, tenant id breaks ties
        return (self.tenant_name, self.tenant_id)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize for a response body; the mask is a string to survive JSON."""
        return {
            "tenant_id": self.tenant_id,
            "tenant_name": self.tenant_name,
            "role": self.role,
            "permission_mask": str(self.permission_mask),
            "capabilities": list(self.capabilities),
            "joined": self.joined,
            "tenant_missing": self.tenant_missing,
        }


@dataclass(frozen=True)
class AggregationResult:
    """Ordered entries plus the number of memberships dropped by store errors."""

    entries: List[DomainPermissionEntry]
    omitted: int = 0

    @property
    def is_partial(self) -> bool:
        return self.omitted > 0

    def __iter__(self):
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)
