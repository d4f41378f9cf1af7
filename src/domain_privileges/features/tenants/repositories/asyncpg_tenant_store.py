"""AsyncPG-based tenant store.

Read-only adapter over the host's domain and domain-membership tables.
"""

import json
import logging
from typing import Any, Dict, List, Optional

from ....config.settings import PrivilegeSettings, get_settings
from ....core.exceptions import StoreError
from ....database import DATABASE_ERRORS
from ..entities import TenantMembership, TenantRecord


logger = logging.getLogger(__name__)


class AsyncPGTenantStore:
    """AsyncPG implementation of the TenantStore protocol."""

    def __init__(self, database, settings: Optional[PrivilegeSettings] = None):
        """Initialize with a DatabaseManager (or anything with fetch/fetchrow)."""
        self.database = database
        self.settings = settings or get_settings()

    @staticmethod
    def _load_roles(raw: Any) -> Dict[str, Any]:
        if raw is None:
            return {}
        if isinstance(raw, str):
            raw = json.loads(raw)
        return dict(raw)

    def _build_tenant_from_row(self, row) -> TenantRecord:
        return TenantRecord(
            tenant_id=row['id'],
            name=row['name'] or '',
            custom_roles=self._load_roles(row['roles']),
        )

    async def list_memberships_for_user(self, user_id: int) -> List[TenantMembership]:
        """List every domain membership of a user."""
        query = f"""
            SELECT domain_id, role, joined
            FROM {self.settings.qualified(self.settings.domain_users_table)}
            WHERE uid = $1
            ORDER BY domain_id
        """
        try:
            rows = await self.database.fetch(query, user_id)
        except DATABASE_ERRORS as e:
            logger.error(f"Failed to list memberships for user {user_id}: {e}")
            raise StoreError(f"Failed to list memberships: {e}")

        return [
            TenantMembership(
                user_id=user_id,
                tenant_id=row['domain_id'],
                role=row['role'],
                joined=bool(row['joined']),
            )
            for row in rows
        ]

    async def get_tenant(self, tenant_id: str) -> Optional[TenantRecord]:
        """Get a domain with its custom role map; None when it no longer exists."""
        query = f"""
            SELECT id, name, roles
            FROM {self.settings.qualified(self.settings.domains_table)}
            WHERE id = $1
        """
        try:
            row = await self.database.fetchrow(query, tenant_id)
        except DATABASE_ERRORS as e:
            logger.error(f"Failed to get tenant {tenant_id}: {e}")
            raise StoreError(f"Failed to retrieve tenant: {e}", details={"tenant_id": tenant_id})

        if row is None:
            return None
        try:
            return self._build_tenant_from_row(row)
        except (TypeError, ValueError) as e:
            raise StoreError(f"Malformed role map for tenant {tenant_id}: {e}", details={"tenant_id": tenant_id})
