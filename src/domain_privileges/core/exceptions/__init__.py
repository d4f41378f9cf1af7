"""Exception hierarchy for domain-privileges."""

from .base import DomainPrivilegesError, create_error_response

from .domain import (
    NotFoundError,
    UserNotFoundError,
    TenantNotFoundError,
    AuthorizationError,
    PrivilegeDeniedError,
    ValidationError,
    CatalogError,
    StoreError,
)

from .http_mapping import HTTP_STATUS_MAP, get_http_status_code

__all__ = [
    "DomainPrivilegesError",
    "get_http_status_code",
    "create_error_response",
    "NotFoundError",
    "UserNotFoundError",
    "TenantNotFoundError",
    "AuthorizationError",
    "PrivilegeDeniedError",
    "ValidationError",
    "CatalogError",
    "StoreError",
    "HTTP_STATUS_MAP",
]
