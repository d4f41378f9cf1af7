"""Domain-specific exceptions for domain-privileges.

Not-found, authorization, validation and store failures as seen by the
permission core and the admin write paths.
"""

from typing import Any, Dict, Optional

from .base import DomainPrivilegesError


# Lookup Errors
class NotFoundError(DomainPrivilegesError):
    """Raised when a target entity is absent."""
    pass


class UserNotFoundError(NotFoundError):
    """Raised when the target user does not exist."""

    def __init__(self, user_key: Any, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            f"User not found: {user_key}",
            details={"user": str(user_key), **(details or {})},
        )
        self.user_key = user_key


class TenantNotFoundError(NotFoundError):
    """Raised when a tenant record does not exist."""

    def __init__(self, tenant_id: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            f"Tenant not found: {tenant_id}",
            details={"tenant_id": tenant_id, **(details or {})},
        )
        self.tenant_id = tenant_id


# Authorization Errors
class AuthorizationError(DomainPrivilegesError):
    """Base class for authorization-related errors."""
    pass


class PrivilegeDeniedError(AuthorizationError):
    """Raised when a privilege guard refuses a mutation.

    The reason string is the guard's own and is surfaced verbatim.
    """

    def __init__(self, reason: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(reason, details=details)
        self.reason = reason


# Validation Errors
class ValidationError(DomainPrivilegesError):
    """Raised for malformed input that cannot be normalized away."""

    def __init__(self, field: str, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details={"field": field, **(details or {})})
        self.field = field


class CatalogError(DomainPrivilegesError, ValueError):
    """Raised when a permission catalog definition is inconsistent."""
    pass


# Store Errors
class StoreError(DomainPrivilegesError):
    """Raised when an external user or tenant store call fails."""
    pass
