"""User administration service.

Write and detail paths of the admin panel. Every write re-reads the target,
asks PrivilegeGuard, then performs a single store call; a store failure on a
write propagates as StoreError.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from ....config.constants import PRIV
from ....config.settings import PrivilegeSettings, get_settings
from ....core.exceptions import UserNotFoundError, ValidationError
from ...permissions.entities import SYSTEM_PRIVILEGES, PermissionCatalog
from ...permissions.entities.catalog import MaskRequest
from ...permissions.services import PrivilegeGuard
from ...tenants.entities import AggregationResult
from ...tenants.services import DomainPermissionAggregator
from ..entities import Actor, UserRecord, UserStore


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UserDetail:
    """Everything the admin detail view shows about one user."""

    user: UserRecord
    privileges: List[str]
    domains: AggregationResult

    def to_dict(self) -> Dict[str, Any]:
        return {
            "user": {
                "user_id": self.user.user_id,
                "uname": self.user.uname,
                "mail": self.user.mail,
                "priv": str(self.user.priv),
                "fields": dict(self.user.fields),
            },
            "privileges": list(self.privileges),
            "domains": [entry.to_dict() for entry in self.domains.entries],
            "omitted_domains": self.domains.omitted,
        }


class UserAdminService:
    """Administrative operations on another user's account."""

    def __init__(
        self,
        user_store: UserStore,
        aggregator: DomainPermissionAggregator,
        guard: Optional[PrivilegeGuard] = None,
        catalog: PermissionCatalog = SYSTEM_PRIVILEGES,
        settings: Optional[PrivilegeSettings] = None
    ):
        self.user_store = user_store
        self.aggregator = aggregator
        self.guard = guard or PrivilegeGuard(catalog)
        self.catalog = catalog
        self.settings = settings or get_settings()

    async def get_user(self, tenant_id: str, user_id: int) -> UserRecord:
        """Get a user by id or raise UserNotFoundError."""
        user = await self.user_store.get_by_id(tenant_id, user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user

    async def resolve_user(self, tenant_id: str, key: str) -> UserRecord:
        """Find a user from a free-form key: numeric id, email or username."""
        identifier = key.strip()
        if not identifier:
            raise UserNotFoundError(key)

        if identifier.isdigit():
            user = await self.user_store.get_by_id(tenant_id, int(identifier))
        elif "@" in identifier:
            user = await self.user_store.get_by_email(tenant_id, identifier)
        else:
            user = await self.user_store.get_by_name(tenant_id, identifier)

        if user is None:
            raise UserNotFoundError(identifier)
        return user

    async def get_user_detail(self, tenant_id: str, user_id: int) -> UserDetail:
        """User record, decoded system privileges and per-domain permissions."""
        user = await self.get_user(tenant_id, user_id)
        domains = await self.aggregator.aggregate_report(user.user_id)
        return UserDetail(
            user=user,
            privileges=self.catalog.decode(user.priv),
            domains=domains,
        )

    async def set_privilege(
        self,
        actor: Actor,
        tenant_id: str,
        user_id: int,
        requested: MaskRequest
    ) -> int:
        """Change a user's system privilege; returns the mask persisted."""
        target = await self.get_user(tenant_id, user_id)
        decision = self.guard.authorize_system_privilege_change(actor, target, requested).ensure()

        await self.user_store.set_priv(target.user_id, decision.mask)
        logger.info(f"User {actor.user_id} set privilege of {target.user_id} to {decision.mask}")
        return decision.mask

    async def ban(self, actor: Actor, tenant_id: str, user_id: int, reason: Optional[str] = None) -> None:
        """Strip every privilege from a user and record why."""
        target = await self.get_user(tenant_id, user_id)
        self.guard.authorize_ban(actor, target).ensure()

        # Privilege last: a failed reason write leaves the account untouched
        await self.user_store.set_fields(target.user_id, {"ban_reason": reason or self.settings.ban_reason})
        await self.user_store.set_priv(target.user_id, PRIV.PRIV_NONE)
        logger.info(f"User {actor.user_id} banned {target.user_id}")

    async def unban(self, actor: Actor, tenant_id: str, user_id: int) -> int:
        """Restore the configured default privilege; returns the mask persisted.

        Goes through the privilege-change rules, so unbanning cannot demote a
        super admin on behalf of a regular administrator.
        """
        target = await self.get_user(tenant_id, user_id)
        default_priv = self.settings.default_privilege
        self.guard.authorize_system_privilege_change(actor, target, default_priv).ensure()

        # Reserved composite, persisted verbatim; the reason is cleared after it
        await self.user_store.set_priv(target.user_id, default_priv)
        await self.user_store.set_fields(target.user_id, {}, ["ban_reason"])
        logger.info(f"User {actor.user_id} unbanned {target.user_id}")
        return default_priv

    async def reset_password(self, actor: Actor, tenant_id: str, user_id: int, password: str) -> None:
        """Replace a user's password."""
        if not password or len(password) < self.settings.password_min_length:
            raise ValidationError(
                "password",
                f"Password must be at least {self.settings.password_min_length} characters"
            )

        target = await self.get_user(tenant_id, user_id)
        self.guard.authorize_credential_reset(actor, target).ensure()

        await self.user_store.set_password(target.user_id, password)
        logger.info(f"User {actor.user_id} reset password of {target.user_id}")

    async def edit_profile(
        self,
        tenant_id: str,
        user_id: int,
        mail: Optional[str] = None,
        uname: Optional[str] = None,
        school: Optional[str] = None,
        bio: Optional[str] = None,
        homepage: Optional[str] = None
    ) -> bool:
        """Update profile fields; returns whether anything was written.

        A changed email or username that belongs to another user is a hard
        ValidationError. An empty homepage removes the field.
        """
        target = await self.get_user(tenant_id, user_id)

        set_map: Dict[str, Any] = {}
        unset_keys: List[str] = []

        if mail and mail != target.mail:
            existing = await self.user_store.get_by_email(tenant_id, mail)
            if existing is not None and existing.user_id != target.user_id:
                raise ValidationError("mail", "Email already in use")
            set_map["mail"] = mail

        if uname and uname != target.uname:
            existing = await self.user_store.get_by_name(tenant_id, uname)
            if existing is not None and existing.user_id != target.user_id:
                raise ValidationError("uname", "Username already in use")
            set_map["uname"] = uname

        if school is not None:
            set_map["school"] = school
        if bio is not None:
            set_map["bio"] = bio
        if homepage is not None:
            if homepage.strip():
                set_map["homepage"] = homepage.strip()
            else:
                unset_keys.append("homepage")

        if not set_map and not unset_keys:
            return False

        await self.user_store.set_fields(target.user_id, set_map, unset_keys)
        logger.info(f"Updated profile of user {target.user_id}: {sorted(set_map) + unset_keys}")
        return True
