"""Protocol interfaces for the tenant store collaborator."""

from abc import abstractmethod
from typing import List, Optional, Protocol, runtime_checkable

from .tenant import TenantMembership, TenantRecord


@runtime_checkable
class TenantStore(Protocol):
    """Protocol for tenant and membership lookup.

    ``get_tenant`` returns None for a tenant that no longer exists. Any
    backend failure is raised as StoreError.
    """

    @abstractmethod
    async def list_memberships_for_user(self, user_id: int) -> List[TenantMembership]:
        """List every tenant membership of a user."""
        ...

    @abstractmethod
    async def get_tenant(self, tenant_id: str) -> Optional[TenantRecord]:
        """Get a tenant with its custom role map."""
        ...
