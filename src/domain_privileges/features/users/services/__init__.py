"""User services."""

from .user_admin_service import UserAdminService, UserDetail

__all__ = ["UserAdminService", "UserDetail"]
