"""Override precedence rules for privilege mutations.

Every check is a pure function over already-fetched records: no I/O, no
side effects. Callers re-read the target immediately before asking.

Two concurrent requests may both pass a guard before either write lands;
no transaction spans the read and the write.
"""

import logging
from typing import TYPE_CHECKING, Union

from ....config.constants import PRIV
from ....core.exceptions import ValidationError
from ..entities import GuardDecision, PermissionCatalog, SYSTEM_PRIVILEGES, coerce_mask
from ..entities.catalog import MaskRequest

if TYPE_CHECKING:
    from ...users.entities import Actor, UserRecord


logger = logging.getLogger(__name__)

# Anything carrying ``user_id`` and ``priv``
Principal = Union["Actor", "UserRecord"]

MODIFY_SUPER_ADMIN = "Cannot modify super admin privileges unless you are a super admin"
GRANT_SUPER_ADMIN = "Cannot grant super admin privileges unless you are a super admin"
BAN_SUPER_ADMIN = "Cannot ban super admin"
RESET_SUPER_ADMIN = "Cannot reset super admin password"


def is_super_admin(priv: int) -> bool:
    """Check for the reserved all-privilege value."""
    return priv == PRIV.PRIV_ALL


class PrivilegeGuard:
    """Decides whether an actor may mutate a target user's privileges or credentials."""

    def __init__(self, catalog: PermissionCatalog = SYSTEM_PRIVILEGES):
        self.catalog = catalog

    def authorize_system_privilege_change(
        self,
        actor: Principal,
        target: Principal,
        requested_mask: MaskRequest
    ) -> GuardDecision:
        """Check a global privilege change and compute the mask to persist.

        Denied when the target is a super admin, or the request grants the
        all-privilege value, and the actor is not a super admin itself. A
        request holding a value that is not a mask raises ValidationError.
        """
        if not isinstance(requested_mask, (int, str)):
            # Iterated by both checks below
            requested_mask = tuple(requested_mask)
        requests_all = self._requests_all(requested_mask)

        if is_super_admin(target.priv) and not is_super_admin(actor.priv):
            return self._deny(MODIFY_SUPER_ADMIN, actor, target)
        if requests_all and not is_super_admin(actor.priv):
            return self._deny(GRANT_SUPER_ADMIN, actor, target)

        # The reserved value itself would be stripped by normalization
        if requests_all:
            return GuardDecision.ok(mask=PRIV.PRIV_ALL)
        return GuardDecision.ok(mask=self.catalog.normalize(requested_mask))

    def authorize_ban(self, actor: Principal, target: Principal) -> GuardDecision:
        """Super admins can never be banned through this path."""
        if is_super_admin(target.priv):
            return self._deny(BAN_SUPER_ADMIN, actor, target)
        return GuardDecision.ok()

    def authorize_credential_reset(self, actor: Principal, target: Principal) -> GuardDecision:
        """Super admin credentials can never be reset through this path."""
        if is_super_admin(target.priv):
            return self._deny(RESET_SUPER_ADMIN, actor, target)
        return GuardDecision.ok()

    @staticmethod
    def _requests_all(requested_mask: MaskRequest) -> bool:
        values = [requested_mask] if isinstance(requested_mask, (int, str)) else requested_mask
        for raw in values:
            try:
                if is_super_admin(coerce_mask(raw, field="priv")):
                    return True
            except ValidationError:
                continue
        return False

    @staticmethod
    def _deny(reason: str, actor: Principal, target: Principal) -> GuardDecision:
        logger.info(
            f"Denied privilege mutation by {getattr(actor, 'user_id', '?')} "
            f"on {getattr(target, 'user_id', '?')}: {reason}"
        )
        return GuardDecision.denied(reason)
