"""AsyncPG-based user store.

Adapter over the host's user table: lookups plus single-row updates of the
privilege mask, the password hash and profile fields. Privilege masks are
stored as NUMERIC so they keep full precision.
"""

import json
import logging
from typing import Any, Dict, Iterable, List, Optional

from ....config.settings import PrivilegeSettings, get_settings
from ....core.exceptions import StoreError, UserNotFoundError
from ....core.masks import coerce_mask
from ....database import DATABASE_ERRORS, affected_rows
from ..entities import UserRecord
from .password_hashing import hash_password


logger = logging.getLogger(__name__)

# Keys of set_fields that live in their own column rather than in ``fields``
COLUMN_FIELDS = ("uname", "mail")


class AsyncPGUserStore:
    """AsyncPG implementation of the UserStore protocol.

    Users are global; ``tenant_id`` is accepted for contract compatibility
    but does not scope the lookup.
    """

    def __init__(self, database, settings: Optional[PrivilegeSettings] = None):
        """Initialize with a DatabaseManager (or anything with fetchrow/execute)."""
        self.database = database
        self.settings = settings or get_settings()

    @property
    def _table(self) -> str:
        return self.settings.qualified(self.settings.users_table)

    def _build_user_from_row(self, row) -> UserRecord:
        fields = row['fields']
        if isinstance(fields, str):
            fields = json.loads(fields)
        return UserRecord(
            user_id=row['id'],
            uname=row['uname'],
            mail=row['mail'],
            priv=coerce_mask(row['priv'], field="priv"),
            fields=dict(fields or {}),
        )

    async def _get_one(self, where: str, value: Any) -> Optional[UserRecord]:
        query = f"""
            SELECT id, uname, mail, priv, fields
            FROM {self._table}
            WHERE {where}
        """
        try:
            row = await self.database.fetchrow(query, value)
        except DATABASE_ERRORS as e:
            logger.error(f"Failed to get user where {where} [{value}]: {e}")
            raise StoreError(f"Failed to retrieve user: {e}")
        return self._build_user_from_row(row) if row else None

    async def get_by_id(self, tenant_id: str, user_id: int) -> Optional[UserRecord]:
        """Get user by numeric id."""
        return await self._get_one("id = $1", user_id)

    async def get_by_name(self, tenant_id: str, uname: str) -> Optional[UserRecord]:
        """Get user by username, case-insensitively."""
        return await self._get_one("lower(uname) = lower($1)", uname)

    async def get_by_email(self, tenant_id: str, mail: str) -> Optional[UserRecord]:
        """Get user by email, case-insensitively."""
        return await self._get_one("lower(mail) = lower($1)", mail)

    async def _update(self, user_id: int, assignments: str, *args) -> None:
        query = f"UPDATE {self._table} SET {assignments} WHERE id = $1"
        try:
            status = await self.database.execute(query, user_id, *args)
        except DATABASE_ERRORS as e:
            logger.error(f"Failed to update user {user_id}: {e}")
            raise StoreError(f"Failed to update user: {e}", details={"user_id": user_id})

        if affected_rows(status) == 0:
            raise UserNotFoundError(user_id)

    async def set_priv(self, user_id: int, priv: int) -> None:
        """Persist a user's global system privilege mask."""
        # Passed as text: asyncpg's int codec is limited to 64 bits
        await self._update(user_id, "priv = $2::numeric", str(priv))
        logger.info(f"Set privilege of user {user_id} to {priv}")

    async def set_password(self, user_id: int, password: str) -> None:
        """Store a salted hash of ``password``."""
        encoded = hash_password(password, self.settings.password_hash_iterations)
        await self._update(user_id, "password_hash = $2", encoded)
        logger.info(f"Reset password of user {user_id}")

    async def set_fields(self, user_id: int, set_map: Dict[str, Any], unset_keys: Iterable[str] = ()) -> None:
        """Set and unset profile fields; ``uname`` and ``mail`` update their columns."""
        unset_keys = [key for key in unset_keys if key not in COLUMN_FIELDS]
        field_updates = {k: v for k, v in set_map.items() if k not in COLUMN_FIELDS}

        assignments: List[str] = []
        args: List[Any] = []
        for column in COLUMN_FIELDS:
            if column in set_map:
                args.append(set_map[column])
                assignments.append(f"{column} = ${len(args) + 1}")

        if field_updates or unset_keys:
            args.append(json.dumps(field_updates))
            merge_param = len(args) + 1
            args.append(unset_keys)
            unset_param = len(args) + 1
            assignments.append(
                f"fields = (COALESCE(fields, '{{}}'::jsonb) || ${merge_param}::jsonb) - ${unset_param}::text[]"
            )

        if not assignments:
            return
        await self._update(user_id, ", ".join(assignments), *args)
