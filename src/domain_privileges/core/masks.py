"""Mask coercion shared by entities, stores and resolvers.

Masks are plain Python ints so they are not limited to a machine word.
"""

from decimal import Decimal
from typing import Any

from .exceptions import ValidationError


def coerce_mask(value: Any, field: str = "mask") -> int:
    """Convert a stored mask into an int.

    Hosts persist wide masks as decimal strings or NUMERIC columns, so
    ``int``, ``str`` and integral ``Decimal`` values are accepted.
    """
    if isinstance(value, bool):
        raise ValidationError(field, f"Mask must be an integer, got bool: {value}")
    if isinstance(value, int):
        return value
    if isinstance(value, Decimal):
        if not value.is_finite() or value != value.to_integral_value():
            raise ValidationError(field, f"Mask must be integral, got: {value}")
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            raise ValidationError(field, f"Mask must be a decimal integer, got: {value!r}")
    raise ValidationError(field, f"Unsupported mask type: {type(value).__name__}")
