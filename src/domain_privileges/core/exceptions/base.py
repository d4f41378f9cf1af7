"""Root of the domain-privileges exception hierarchy."""

from typing import Any, Dict, Optional


class DomainPrivilegesError(Exception):
    """Base exception; ``error_code`` defaults to the class name."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or type(self).__name__
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Error body for a request handler response."""
        return {
            "code": self.error_code,
            "message": self.message,
            "details": dict(self.details),
            "type": type(self).__name__,
        }


def create_error_response(exception: DomainPrivilegesError) -> Dict[str, Any]:
    """Wrap ``exception.to_dict()`` under an ``error`` key."""
    return {"error": exception.to_dict()}
