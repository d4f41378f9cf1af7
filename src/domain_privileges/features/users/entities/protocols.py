"""Protocol interfaces for the user store collaborator.

The host platform owns user storage; this library only reads users and
performs single-field writes through this contract.
"""

from abc import abstractmethod
from typing import Any, Dict, Iterable, Optional, Protocol, runtime_checkable

from .user import UserRecord


@runtime_checkable
class UserStore(Protocol):
    """Protocol for user lookup and mutation.

    Lookups return None for absent users. Any backend failure is raised as
    StoreError.
    """

    @abstractmethod
    async def get_by_id(self, tenant_id: str, user_id: int) -> Optional[UserRecord]:
        """Get user by numeric id."""
        ...

    @abstractmethod
    async def get_by_name(self, tenant_id: str, uname: str) -> Optional[UserRecord]:
        """Get user by username."""
        ...

    @abstractmethod
    async def get_by_email(self, tenant_id: str, mail: str) -> Optional[UserRecord]:
        """Get user by email address."""
        ...

    @abstractmethod
    async def set_priv(self, user_id: int, priv: int) -> None:
        """Persist a user's global system privilege mask."""
        ...

    @abstractmethod
    async def set_password(self, user_id: int, password: str) -> None:
        """Replace a user's credential."""
        ...

    @abstractmethod
    async def set_fields(self, user_id: int, set_map: Dict[str, Any], unset_keys: Iterable[str] = ()) -> None:
        """Set and unset profile fields in one write."""
        ...
