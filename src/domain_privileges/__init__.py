"""domain-privileges - domain-scoped permission resolution for multi-tenant platforms.

Computes a user's effective permission mask in every tenant ("domain") from
role assignments, renders masks as capability labels, and adjudicates
super-admin precedence when administrators mutate another user's global
privileges or credentials.
"""

from .__version__ import __version__

from .config import (
    PRIV,
    PERM,
    BuiltinRole,
    PrivilegeSettings,
    get_settings,
    setup_logging,
)

from .core.exceptions import (
    DomainPrivilegesError,
    NotFoundError,
    UserNotFoundError,
    TenantNotFoundError,
    AuthorizationError,
    PrivilegeDeniedError,
    ValidationError,
    CatalogError,
    StoreError,
    get_http_status_code,
    create_error_response,
)

from .features.permissions import (
    PermissionBit,
    PermissionCatalog,
    GuardDecision,
    SYSTEM_PRIVILEGES,
    DOMAIN_PERMISSIONS,
    BUILTIN_ROLES,
    RoleResolver,
    PrivilegeGuard,
    is_super_admin,
)

from .features.tenants import (
    TenantRecord,
    TenantMembership,
    DomainPermissionEntry,
    AggregationResult,
    TenantStore,
    DomainPermissionAggregator,
    AsyncPGTenantStore,
)

from .features.users import (
    UserRecord,
    Actor,
    UserStore,
    UserAdminService,
    UserDetail,
    AsyncPGUserStore,
)

from .database import DatabaseManager

__all__ = [
    "__version__",

    # Configuration
    "PRIV",
    "PERM",
    "BuiltinRole",
    "PrivilegeSettings",
    "get_settings",
    "setup_logging",

    # Exceptions
    "DomainPrivilegesError",
    "NotFoundError",
    "UserNotFoundError",
    "TenantNotFoundError",
    "AuthorizationError",
    "PrivilegeDeniedError",
    "ValidationError",
    "CatalogError",
    "StoreError",
    "get_http_status_code",
    "create_error_response",

    # Permissions
    "PermissionBit",
    "PermissionCatalog",
    "GuardDecision",
    "SYSTEM_PRIVILEGES",
    "DOMAIN_PERMISSIONS",
    "BUILTIN_ROLES",
    "RoleResolver",
    "PrivilegeGuard",
    "is_super_admin",

    # Tenants
    "TenantRecord",
    "TenantMembership",
    "DomainPermissionEntry",
    "AggregationResult",
    "TenantStore",
    "DomainPermissionAggregator",
    "AsyncPGTenantStore",

    # Users
    "UserRecord",
    "Actor",
    "UserStore",
    "UserAdminService",
    "UserDetail",
    "AsyncPGUserStore",

    # Database
    "DatabaseManager",
]
