"""Pytest configuration and fixtures for domain-privileges tests."""

from typing import Any, Dict, Iterable, List, Optional
from unittest.mock import AsyncMock

import pytest

from domain_privileges.config.constants import PRIV, PERM
from domain_privileges.config.settings import PrivilegeSettings
from domain_privileges.core.exceptions import StoreError, UserNotFoundError
from domain_privileges.features.permissions.entities import PermissionBit, PermissionCatalog
from domain_privileges.features.permissions.services import PrivilegeGuard, RoleResolver
from domain_privileges.features.tenants.entities import TenantMembership, TenantRecord
from domain_privileges.features.tenants.services import DomainPermissionAggregator
from domain_privileges.features.users.entities import Actor, UserRecord
from domain_privileges.features.users.services import UserAdminService


class InMemoryTenantStore:
    """Tenant store double; ``failing`` tenant ids raise StoreError."""

    def __init__(self):
        self.tenants: Dict[str, TenantRecord] = {}
        self.memberships: List[TenantMembership] = []
        self.failing: set = set()
        self.lookups: List[str] = []

    def add_tenant(self, tenant_id: str, name: str, custom_roles: Optional[Dict[str, Any]] = None):
        self.tenants[tenant_id] = TenantRecord(tenant_id=tenant_id, name=name, custom_roles=custom_roles or {})

    def join(self, user_id: int, tenant_id: str, role: Optional[str] = None, joined: bool = True):
        self.memberships.append(TenantMembership(user_id=user_id, tenant_id=tenant_id, role=role, joined=joined))

    async def list_memberships_for_user(self, user_id: int) -> List[TenantMembership]:
        return [m for m in self.memberships if m.user_id == user_id]

    async def get_tenant(self, tenant_id: str) -> Optional[TenantRecord]:
        self.lookups.append(tenant_id)
        if tenant_id in self.failing:
            raise StoreError(f"Lookup failed: {tenant_id}")
        return self.tenants.get(tenant_id)


class InMemoryUserStore:
    """User store double recording every write."""

    def __init__(self):
        self.users: Dict[int, UserRecord] = {}
        self.passwords: Dict[int, str] = {}
        self.writes: List[tuple] = []

    def add(self, user: UserRecord) -> UserRecord:
        self.users[user.user_id] = user
        return user

    async def get_by_id(self, tenant_id: str, user_id: int) -> Optional[UserRecord]:
        return self.users.get(user_id)

    async def get_by_name(self, tenant_id: str, uname: str) -> Optional[UserRecord]:
        return next((u for u in self.users.values() if u.uname.lower() == uname.lower()), None)

    async def get_by_email(self, tenant_id: str, mail: str) -> Optional[UserRecord]:
        return next((u for u in self.users.values() if u.mail.lower() == mail.lower()), None)

    def _require(self, user_id: int) -> UserRecord:
        if user_id not in self.users:
            raise UserNotFoundError(user_id)
        return self.users[user_id]

    async def set_priv(self, user_id: int, priv: int) -> None:
        self._require(user_id).priv = priv
        self.writes.append(("set_priv", user_id, priv))

    async def set_password(self, user_id: int, password: str) -> None:
        self._require(user_id)
        self.passwords[user_id] = password
        self.writes.append(("set_password", user_id))

    async def set_fields(self, user_id: int, set_map: Dict[str, Any], unset_keys: Iterable[str] = ()) -> None:
        user = self._require(user_id)
        unset_keys = list(unset_keys)
        for key, value in set_map.items():
            if key in ("uname", "mail"):
                setattr(user, key, value)
            else:
                user.fields[key] = value
        for key in unset_keys:
            user.fields.pop(key, None)
        self.writes.append(("set_fields", user_id, dict(set_map), unset_keys))


@pytest.fixture
def settings():
    """Settings isolated from the environment."""
    return PrivilegeSettings(_env_file=None, aggregation_concurrency=4, password_hash_iterations=1000)


@pytest.fixture
def small_catalog():
    """Three-bit catalog used by the end-to-end scenarios."""
    return PermissionCatalog("test", [
        PermissionBit("READ", 0b001, "Read"),
        PermissionBit("WRITE", 0b010, "Write"),
        PermissionBit("MANAGE", 0b100, "Manage"),
        PermissionBit("NONE", 0, "Nothing", reserved=True),
        PermissionBit("ALL", -1, "Everything", reserved=True),
    ])


@pytest.fixture
def small_roles():
    """Built-in roles matching ``small_catalog``."""
    return {"guest": 0b001, "default": 0b011}


@pytest.fixture
def tenant_store():
    return InMemoryTenantStore()


@pytest.fixture
def user_store():
    return InMemoryUserStore()


@pytest.fixture
def aggregator(tenant_store, settings):
    return DomainPermissionAggregator(tenant_store, concurrency=settings.aggregation_concurrency)


@pytest.fixture
def guard():
    return PrivilegeGuard()


@pytest.fixture
def admin_service(user_store, aggregator, guard, settings):
    return UserAdminService(user_store, aggregator, guard=guard, settings=settings)


@pytest.fixture
def super_admin():
    return Actor(user_id=1, priv=PRIV.PRIV_ALL)


@pytest.fixture
def system_admin():
    """Administrator with system-edit rights but not a super admin."""
    return Actor(user_id=2, priv=PRIV.PRIV_DEFAULT | PRIV.PRIV_EDIT_SYSTEM | PRIV.PRIV_SET_PERM)


@pytest.fixture
def super_admin_user():
    return UserRecord(user_id=10, uname="root", mail="root@example.com", priv=PRIV.PRIV_ALL)


@pytest.fixture
def regular_user():
    return UserRecord(user_id=20, uname="alice", mail="alice@example.com", priv=PRIV.PRIV_DEFAULT)


@pytest.fixture
def mock_database():
    """Mock DatabaseManager for store adapter tests."""
    mock_db = AsyncMock()
    mock_db.fetchrow = AsyncMock()
    mock_db.fetch = AsyncMock()
    mock_db.execute = AsyncMock(return_value="UPDATE 1")
    return mock_db
