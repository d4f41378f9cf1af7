"""Tests for UserAdminService write and detail paths."""

import pytest

from domain_privileges.config.constants import PRIV
from domain_privileges.core.exceptions import (
    PrivilegeDeniedError, StoreError, UserNotFoundError, ValidationError
)
from domain_privileges.features.permissions.services import (
    BAN_SUPER_ADMIN, MODIFY_SUPER_ADMIN, RESET_SUPER_ADMIN
)
from domain_privileges.features.users.entities import UserRecord


@pytest.fixture
def users(user_store, super_admin_user, regular_user):
    user_store.add(super_admin_user)
    user_store.add(regular_user)
    user_store.add(UserRecord(user_id=30, uname="bob", mail="bob@example.com"))
    return user_store


class TestLookups:
    """get_user, resolve_user and get_user_detail"""

    @pytest.mark.asyncio
    async def test_get_user_not_found(self, admin_service, users):
        with pytest.raises(UserNotFoundError):
            await admin_service.get_user("system", 404)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("key, expected_id", [
        ("20", 20),
        (" ALICE@example.com ", 20),
        ("Bob", 30),
    ])
    async def test_resolve_user(self, admin_service, users, key, expected_id):
        user = await admin_service.resolve_user("system", key)

        assert user.user_id == expected_id

    @pytest.mark.asyncio
    async def test_resolve_blank_key(self, admin_service, users):
        with pytest.raises(UserNotFoundError):
            await admin_service.resolve_user("system", "   ")

    @pytest.mark.asyncio
    async def test_detail_includes_privileges_and_domains(self, admin_service, users, tenant_store):
        tenant_store.add_tenant("t1", "One")
        tenant_store.join(20, "t1", role="guest")

        detail = await admin_service.get_user_detail("system", 20)
        body = detail.to_dict()

        assert "Send messages" in detail.privileges
        assert [d["tenant_id"] for d in body["domains"]] == ["t1"]
        assert body["user"]["priv"] == str(PRIV.PRIV_DEFAULT)
        assert body["omitted_domains"] == 0


class TestSetPrivilege:
    """set_privilege"""

    @pytest.mark.asyncio
    async def test_super_admin_demotes_super_admin(self, admin_service, users, super_admin):
        persisted = await admin_service.set_privilege(super_admin, "system", 10, PRIV.PRIV_DEFAULT)

        assert persisted == PRIV.PRIV_DEFAULT
        assert users.users[10].priv == PRIV.PRIV_DEFAULT

    @pytest.mark.asyncio
    async def test_regular_admin_cannot_demote_super_admin(self, admin_service, users, system_admin):
        with pytest.raises(PrivilegeDeniedError) as exc_info:
            await admin_service.set_privilege(system_admin, "system", 10, PRIV.PRIV_DEFAULT)

        assert exc_info.value.reason == MODIFY_SUPER_ADMIN
        assert users.writes == []

    @pytest.mark.asyncio
    async def test_unknown_bits_dropped_before_persisting(self, admin_service, users, system_admin):
        requested = [PRIV.PRIV_JUDGE, PRIV.PRIV_REJUDGE, PRIV.PRIV_NEVER, 1 << 99]

        persisted = await admin_service.set_privilege(system_admin, "system", 20, requested)

        assert persisted == PRIV.PRIV_JUDGE | PRIV.PRIV_REJUDGE
        assert users.writes == [("set_priv", 20, persisted)]

    @pytest.mark.asyncio
    async def test_missing_target(self, admin_service, users, super_admin):
        with pytest.raises(UserNotFoundError):
            await admin_service.set_privilege(super_admin, "system", 404, 0)


class TestBanAndUnban:
    """ban and unban"""

    @pytest.mark.asyncio
    async def test_ban_clears_privileges_and_records_reason(self, admin_service, users, system_admin, settings):
        await admin_service.ban(system_admin, "system", 20)

        assert users.users[20].priv == PRIV.PRIV_NONE
        assert users.users[20].get_field("ban_reason") == settings.ban_reason

    @pytest.mark.asyncio
    async def test_ban_super_admin_denied_even_for_super_admin(self, admin_service, users, super_admin):
        with pytest.raises(PrivilegeDeniedError) as exc_info:
            await admin_service.ban(super_admin, "system", 10)

        assert exc_info.value.reason == BAN_SUPER_ADMIN
        assert users.users[10].priv == PRIV.PRIV_ALL

    @pytest.mark.asyncio
    async def test_unban_restores_default(self, admin_service, users, system_admin):
        await admin_service.ban(system_admin, "system", 20, reason="spam")

        restored = await admin_service.unban(system_admin, "system", 20)

        assert restored == PRIV.PRIV_DEFAULT
        assert users.users[20].priv == PRIV.PRIV_DEFAULT
        assert users.users[20].get_field("ban_reason") is None

    @pytest.mark.asyncio
    async def test_failed_reason_write_leaves_account_untouched(self, admin_service, users, system_admin, monkeypatch):
        async def broken(*args, **kwargs):
            raise StoreError("write failed")

        monkeypatch.setattr(users, "set_fields", broken)

        with pytest.raises(StoreError):
            await admin_service.ban(system_admin, "system", 20)

        assert users.users[20].priv == PRIV.PRIV_DEFAULT
        assert users.writes == []

    @pytest.mark.asyncio
    async def test_unban_restores_privilege_before_clearing_reason(self, admin_service, users, system_admin):
        await admin_service.ban(system_admin, "system", 20, reason="spam")
        users.writes.clear()

        await admin_service.unban(system_admin, "system", 20)

        assert [write[0] for write in users.writes] == ["set_priv", "set_fields"]

    @pytest.mark.asyncio
    async def test_unban_cannot_demote_super_admin(self, admin_service, users, system_admin):
        with pytest.raises(PrivilegeDeniedError):
            await admin_service.unban(system_admin, "system", 10)


class TestResetPassword:
    """reset_password"""

    @pytest.mark.asyncio
    async def test_short_password_rejected_before_lookup(self, admin_service, users, super_admin):
        with pytest.raises(ValidationError) as exc_info:
            await admin_service.reset_password(super_admin, "system", 404, "abc")

        assert exc_info.value.field == "password"

    @pytest.mark.asyncio
    async def test_super_admin_password_cannot_be_reset(self, admin_service, users, super_admin):
        with pytest.raises(PrivilegeDeniedError) as exc_info:
            await admin_service.reset_password(super_admin, "system", 10, "long-enough")

        assert exc_info.value.reason == RESET_SUPER_ADMIN
        assert users.passwords == {}

    @pytest.mark.asyncio
    async def test_reset_regular_user(self, admin_service, users, system_admin):
        await admin_service.reset_password(system_admin, "system", 20, "long-enough")

        assert users.passwords[20] == "long-enough"


class TestEditProfile:
    """edit_profile"""

    @pytest.mark.asyncio
    async def test_duplicate_email_rejected(self, admin_service, users):
        with pytest.raises(ValidationError) as exc_info:
            await admin_service.edit_profile("system", 20, mail="bob@example.com")

        assert exc_info.value.field == "mail"

    @pytest.mark.asyncio
    async def test_duplicate_username_rejected(self, admin_service, users):
        with pytest.raises(ValidationError) as exc_info:
            await admin_service.edit_profile("system", 20, uname="bob")

        assert exc_info.value.field == "uname"

    @pytest.mark.asyncio
    async def test_updates_fields_and_unsets_empty_homepage(self, admin_service, users):
        users.users[20].fields["homepage"] = "https://old.example.com"

        changed = await admin_service.edit_profile(
            "system", 20, mail="alice@new.example.com", school="MIT", homepage="  "
        )

        user = users.users[20]
        assert changed
        assert user.mail == "alice@new.example.com"
        assert user.get_field("school") == "MIT"
        assert user.get_field("homepage") is None

    @pytest.mark.asyncio
    async def test_nothing_to_change(self, admin_service, users):
        assert not await admin_service.edit_profile("system", 20, mail="alice@example.com", uname="alice")
        assert users.writes == []
