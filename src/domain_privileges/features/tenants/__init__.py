"""Tenants feature for domain-privileges.

- entities/: tenant records, memberships, aggregated permission entries
- services/: domain permission aggregation
- repositories/: asyncpg tenant store
"""

from .entities import (
    TenantRecord, TenantMembership, DomainPermissionEntry, AggregationResult, TenantStore
)
from .services import DomainPermissionAggregator
from .repositories import AsyncPGTenantStore

__all__ = [
    "TenantRecord",
    "TenantMembership",
    "DomainPermissionEntry",
    "AggregationResult",
    "TenantStore",
    "DomainPermissionAggregator",
    "AsyncPGTenantStore",
]
