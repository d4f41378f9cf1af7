"""Tenant services."""

from .domain_permission_aggregator import DomainPermissionAggregator

__all__ = ["DomainPermissionAggregator"]
