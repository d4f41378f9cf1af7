"""Tenant entities and store protocol."""

from .tenant import TenantRecord, TenantMembership, DomainPermissionEntry, AggregationResult
from .protocols import TenantStore

__all__ = [
    "TenantRecord",
    "TenantMembership",
    "DomainPermissionEntry",
    "AggregationResult",
    "TenantStore",
]
