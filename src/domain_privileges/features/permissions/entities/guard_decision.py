"""Outcome of a privilege guard evaluation."""

from dataclasses import dataclass
from typing import Optional

from ....core.exceptions import PrivilegeDeniedError


@dataclass(frozen=True)
class GuardDecision:
    """Either ok (optionally with the mask to persist) or denied with a reason."""

    allowed: bool
    reason: Optional[str] = None
    mask: Optional[int] = None

    @classmethod
    def ok(cls, mask: Optional[int] = None) -> "GuardDecision":
        return cls(allowed=True, mask=mask)

    @classmethod
    def denied(cls, reason: str) -> "GuardDecision":
        return cls(allowed=False, reason=reason)

    def __bool__(self) -> bool:
        return self.allowed

    def ensure(self) -> "GuardDecision":
        """Raise PrivilegeDeniedError carrying the reason when denied."""
        if not self.allowed:
            raise PrivilegeDeniedError(self.reason or "Denied")
        return self
