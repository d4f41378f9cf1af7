"""Tenant store implementations."""

from .asyncpg_tenant_store import AsyncPGTenantStore

__all__ = ["AsyncPGTenantStore"]
