"""HTTP status code mapping for exceptions.

Request handlers translate library errors into responses with this table.
Lookup walks the exception's MRO so subclasses inherit their parent's code.
"""

from typing import Dict, Type

from .base import DomainPrivilegesError
from .domain import (
    AuthorizationError,
    CatalogError,
    NotFoundError,
    PrivilegeDeniedError,
    StoreError,
    TenantNotFoundError,
    UserNotFoundError,
    ValidationError,
)


HTTP_STATUS_MAP: Dict[Type[Exception], int] = {
    # 400 Bad Request
    ValidationError: 400,

    # 403 Forbidden
    AuthorizationError: 403,
    PrivilegeDeniedError: 403,

    # 404 Not Found
    NotFoundError: 404,
    UserNotFoundError: 404,
    TenantNotFoundError: 404,

    # 500 Internal Server Error
    StoreError: 500,
    CatalogError: 500,
    DomainPrivilegesError: 500,
}


def get_http_status_code(exception: Exception) -> int:
    """Get HTTP status code for an exception, defaulting to 500."""
    for klass in type(exception).__mro__:
        if klass in HTTP_STATUS_MAP:
            return HTTP_STATUS_MAP[klass]
    return 500
