"""Permission catalog for the permissions feature.

A catalog is an ordered, immutable registry of PermissionBit entries. It
turns masks into labels, and filters requested bit sets down to the bits an
administrator is allowed to edit.
"""

import logging
from typing import Dict, FrozenSet, Iterable, Iterator, List, Optional, Tuple, Union

from ....core.exceptions import CatalogError
from ....core.masks import coerce_mask
from .permission_bit import PermissionBit


logger = logging.getLogger(__name__)

MaskRequest = Union[int, str, Iterable[Union[int, str]]]


class PermissionCatalog:
    """Ordered registry of named permission bits.

    Reserved entries (all/none/default/never) are named values with a
    platform-wide meaning; they are never decoded as capabilities and never
    editable.
    """

    def __init__(self, name: str, entries: Iterable[PermissionBit]):
        self.name = name
        self._entries: Tuple[PermissionBit, ...] = tuple(entries)
        self._by_key: Dict[str, PermissionBit] = {}

        reserved_values = {e.value for e in self._entries if e.reserved}
        seen_values: Dict[int, str] = {}

        for entry in self._entries:
            if entry.key in self._by_key:
                raise CatalogError(f"Duplicate permission key in {name}: {entry.key}")
            self._by_key[entry.key] = entry

            if entry.reserved:
                continue
            if entry.value <= 0:
                raise CatalogError(f"Permission {entry.key} in {name} must have a positive value")
            if entry.value in reserved_values:
                raise CatalogError(f"Permission {entry.key} in {name} collides with a reserved value")
            if entry.value in seen_values:
                raise CatalogError(
                    f"Permission {entry.key} in {name} shares value with {seen_values[entry.value]}"
                )
            seen_values[entry.value] = entry.key

        self._capabilities: Tuple[PermissionBit, ...] = tuple(e for e in self._entries if not e.reserved)
        self._editable: FrozenSet[PermissionBit] = frozenset(self._capabilities)
        self._editable_values: FrozenSet[int] = frozenset(seen_values)

    def __iter__(self) -> Iterator[PermissionBit]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: str) -> bool:
        return key in self._by_key

    def get(self, key: str) -> Optional[PermissionBit]:
        """Get an entry by key."""
        return self._by_key.get(key)

    def value_of(self, key: str) -> int:
        """Get the value of an entry by key; unknown keys raise KeyError."""
        return self._by_key[key].value

    def contains(self, mask: int, key: str) -> bool:
        """Check whether ``mask`` fully grants the entry named ``key``."""
        return self._by_key[key].is_granted_by(coerce_mask(mask))

    def capabilities(self, mask: int) -> List[PermissionBit]:
        """Non-reserved entries fully contained in ``mask``, in declaration order."""
        mask = coerce_mask(mask)
        return [entry for entry in self._capabilities if entry.is_granted_by(mask)]

    def decode(self, mask: int) -> List[str]:
        """Render a mask as the descriptions of its granted capabilities."""
        return [entry.description for entry in self.capabilities(mask)]

    def describe(self, mask: int) -> List[Tuple[str, str]]:
        """Like decode, but as ``(key, description)`` pairs."""
        return [(entry.key, entry.description) for entry in self.capabilities(mask)]

    def editable_bits(self) -> FrozenSet[PermissionBit]:
        """Entries an administrator may set, i.e. everything not reserved."""
        return self._editable

    def normalize(self, requested: MaskRequest) -> int:
        """Reduce a requested bit set to a mask of editable bits.

        ``requested`` is either one mask, decomposed into the editable bits
        it fully contains, or a sequence of values, each kept only if it is
        exactly an editable bit. Well-formed values that are unknown or
        reserved are dropped without error; a value that is not a mask at
        all raises ValidationError in either form.
        """
        if isinstance(requested, (int, str)):
            return self._mask_of(self.capabilities(requested))

        kept = 0
        for raw in requested:
            value = coerce_mask(raw, field="priv")
            if value in self._editable_values:
                kept |= value
            else:
                logger.debug(f"Dropping non-editable value from {self.name} request: {value}")
        return kept

    @staticmethod
    def _mask_of(entries: Iterable[PermissionBit]) -> int:
        mask = 0
        for entry in entries:
            mask |= entry.value
        return mask

    def __repr__(self) -> str:
        return f"PermissionCatalog({self.name}, entries={len(self._entries)}, editable={len(self._editable)})"
