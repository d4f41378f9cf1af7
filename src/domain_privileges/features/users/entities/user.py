"""User domain entities.

UserRecord mirrors what the host user store returns; Actor is the
already-authenticated caller on whose behalf a mutation is adjudicated.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from ....config.constants import PRIV
from ....core.masks import coerce_mask


@dataclass
class UserRecord:
    """User as read from the host user store."""

    user_id: int
    uname: str
    mail: str
    priv: int = PRIV.PRIV_DEFAULT
    fields: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        self.priv = coerce_mask(self.priv, field="priv")

    @property
    def is_super_admin(self) -> bool:
        return self.priv == PRIV.PRIV_ALL

    @property
    def is_banned(self) -> bool:
        return self.priv == PRIV.PRIV_NONE

    def get_field(self, name: str, default: Optional[Any] = None) -> Any:
        """Get a free-form profile field (school, bio, homepage, ...)."""
        return self.fields.get(name, default)

    def __str__(self) -> str:
        return f"User({self.user_id}, {self.uname})"


@dataclass(frozen=True)
class Actor:
    """Caller identity with its resolved system privilege."""

    user_id: int
    priv: int

    @classmethod
    def from_user(cls, user: UserRecord) -> "Actor":
        return cls(user_id=user.user_id, priv=user.priv)

    @property
    def is_super_admin(self) -> bool:
        return self.priv == PRIV.PRIV_ALL
