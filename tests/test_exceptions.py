"""Tests for the exception hierarchy and its HTTP mapping."""

import pytest

from domain_privileges.core.exceptions import (
    CatalogError, DomainPrivilegesError, PrivilegeDeniedError, StoreError,
    TenantNotFoundError, UserNotFoundError, ValidationError,
    create_error_response, get_http_status_code,
)


@pytest.mark.parametrize("exception, status", [
    (ValidationError("priv", "bad mask"), 400),
    (PrivilegeDeniedError("Cannot ban super admin"), 403),
    (UserNotFoundError(5), 404),
    (TenantNotFoundError("t1"), 404),
    (StoreError("down"), 500),
    (CatalogError("duplicate key"), 500),
    (RuntimeError("unrelated"), 500),
])
def test_http_status_codes(exception, status):
    assert get_http_status_code(exception) == status


def test_error_response_shape():
    response = create_error_response(ValidationError("password", "too short"))

    assert response == {
        "error": {
            "code": "ValidationError",
            "message": "too short",
            "details": {"field": "password"},
            "type": "ValidationError",
        }
    }


def test_not_found_details():
    error = UserNotFoundError(42)

    assert error.details == {"user": "42"}
    assert isinstance(error, DomainPrivilegesError)


def test_catalog_error_is_value_error():
    assert issubclass(CatalogError, ValueError)


def test_custom_error_code():
    error = StoreError("down", error_code="STORE_UNAVAILABLE", details={"table": "users"})

    assert error.to_dict()["code"] == "STORE_UNAVAILABLE"
    assert str(error) == "down"
