"""User entities and store protocol."""

from .user import UserRecord, Actor
from .protocols import UserStore

__all__ = ["UserRecord", "Actor", "UserStore"]
