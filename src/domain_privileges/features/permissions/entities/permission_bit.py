"""Permission bit value object for the permissions feature.

A PermissionBit names one capability flag (or a named composite of flags)
inside a catalog.
"""

from dataclasses import dataclass

from ....core.exceptions import CatalogError


@dataclass(frozen=True)
class PermissionBit:
    """Immutable catalog entry: symbolic key, bit value and label."""

    key: str
    value: int
    description: str
    reserved: bool = False

    def __post_init__(self):
        """Validate key and value types."""
        if not self.key:
            raise CatalogError("Permission key cannot be empty")
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise CatalogError(f"Permission value for {self.key} must be an int, got: {type(self.value).__name__}")

    @property
    def is_single_bit(self) -> bool:
        """True when exactly one bit is set."""
        return self.value > 0 and self.value & (self.value - 1) == 0

    def is_granted_by(self, mask: int) -> bool:
        """Check full containment of this bit in ``mask``."""
        return mask & self.value == self.value

    def __str__(self) -> str:
        return self.key
