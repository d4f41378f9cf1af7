"""Per-tenant permission aggregation for one user.

Fans out one tenant lookup per membership, bounded by a semaphore, and fans
back in before sorting. Branches share no mutable state; a cancelled caller
abandons in-flight lookups, which are read-only.
"""

import asyncio
import logging
from typing import List, Optional

from ....config.settings import get_settings
from ....core.exceptions import StoreError, TenantNotFoundError
from ...permissions.entities import DOMAIN_PERMISSIONS, PermissionCatalog
from ...permissions.services import RoleResolver
from ..entities import (
    AggregationResult, DomainPermissionEntry, TenantMembership, TenantStore
)


logger = logging.getLogger(__name__)


class DomainPermissionAggregator:
    """Computes a user's effective permissions in every tenant they belong to."""

    def __init__(
        self,
        tenant_store: TenantStore,
        role_resolver: Optional[RoleResolver] = None,
        catalog: PermissionCatalog = DOMAIN_PERMISSIONS,
        concurrency: Optional[int] = None
    ):
        self.tenant_store = tenant_store
        self.role_resolver = role_resolver or RoleResolver()
        self.catalog = catalog
        self.concurrency = concurrency if concurrency is not None else get_settings().aggregation_concurrency
        if self.concurrency < 1:
            raise ValueError(f"concurrency must be positive, got: {self.concurrency}")

    async def aggregate(self, user_id: int) -> List[DomainPermissionEntry]:
        """Ordered entries for every tenant the user belongs to."""
        result = await self.aggregate_report(user_id)
        return result.entries

    async def aggregate_report(self, user_id: int) -> AggregationResult:
        """Ordered entries plus the count of memberships omitted by store errors.

        A failure listing the memberships propagates; a failure looking up
        one tenant only drops that tenant's entry.
        """
        memberships = await self.tenant_store.list_memberships_for_user(user_id)
        if not memberships:
            return AggregationResult(entries=[])

        semaphore = asyncio.Semaphore(self.concurrency)
        resolved = await asyncio.gather(
            *(self._resolve_entry(membership, semaphore) for membership in memberships)
        )

        entries = sorted(
            (entry for entry in resolved if entry is not None),
            key=lambda entry: entry.sort_key
        )
        omitted = len(resolved) - len(entries)
        if omitted:
            logger.warning(f"Omitted {omitted} of {len(resolved)} domain entries for user {user_id}")

        return AggregationResult(entries=entries, omitted=omitted)

    async def _resolve_entry(
        self,
        membership: TenantMembership,
        semaphore: asyncio.Semaphore
    ) -> Optional[DomainPermissionEntry]:
        async with semaphore:
            try:
                tenant = await self.tenant_store.get_tenant(membership.tenant_id)
            except TenantNotFoundError:
                tenant = None
            except StoreError as e:
                logger.warning(f"Tenant lookup failed for {membership.tenant_id}: {e.message}")
                return None

        role = membership.role_name
        mask = self.role_resolver.resolve_mask(tenant, role)

        # A missing tenant is reported, not dropped
        return DomainPermissionEntry(
            tenant_id=membership.tenant_id,
            tenant_name=tenant.display_name if tenant else membership.tenant_id,
            role=role,
            permission_mask=mask,
            capabilities=self.catalog.decode(mask),
            joined=membership.joined,
            tenant_missing=tenant is None,
        )
