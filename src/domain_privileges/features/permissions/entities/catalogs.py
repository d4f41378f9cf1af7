"""Process-wide permission catalogs and built-in roles.

Defined once at import time and never mutated.
"""

from types import MappingProxyType
from typing import Mapping

from ....config.constants import PRIV, PERM, BuiltinRole
from .catalog import PermissionCatalog
from .permission_bit import PermissionBit


SYSTEM_PRIVILEGES = PermissionCatalog("system", [
    PermissionBit("PRIV_EDIT_SYSTEM", PRIV.PRIV_EDIT_SYSTEM, "Edit system settings"),
    PermissionBit("PRIV_SET_PERM", PRIV.PRIV_SET_PERM, "Set user privileges"),
    PermissionBit("PRIV_USER_PROFILE", PRIV.PRIV_USER_PROFILE, "Own a user profile"),
    PermissionBit("PRIV_REGISTER_USER", PRIV.PRIV_REGISTER_USER, "Register new users"),
    PermissionBit("PRIV_READ_PROBLEM_DATA", PRIV.PRIV_READ_PROBLEM_DATA, "Read data of every problem"),
    PermissionBit("PRIV_READ_RECORD_CODE", PRIV.PRIV_READ_RECORD_CODE, "Read code of every record"),
    PermissionBit("PRIV_VIEW_HIDDEN_RECORD", PRIV.PRIV_VIEW_HIDDEN_RECORD, "View hidden records"),
    PermissionBit("PRIV_JUDGE", PRIV.PRIV_JUDGE, "Act as a judge"),
    PermissionBit("PRIV_CREATE_DOMAIN", PRIV.PRIV_CREATE_DOMAIN, "Create domains"),
    PermissionBit("PRIV_VIEW_ALL_DOMAIN", PRIV.PRIV_VIEW_ALL_DOMAIN, "View all domains"),
    PermissionBit("PRIV_MANAGE_ALL_DOMAIN", PRIV.PRIV_MANAGE_ALL_DOMAIN, "Manage all domains"),
    PermissionBit("PRIV_REJUDGE", PRIV.PRIV_REJUDGE, "Rejudge records in any domain"),
    PermissionBit("PRIV_VIEW_USER_SECRET", PRIV.PRIV_VIEW_USER_SECRET, "View user secrets"),
    PermissionBit("PRIV_VIEW_JUDGE_STATISTICS", PRIV.PRIV_VIEW_JUDGE_STATISTICS, "View judge statistics"),
    PermissionBit("PRIV_CREATE_FILE", PRIV.PRIV_CREATE_FILE, "Upload files"),
    PermissionBit("PRIV_UNLIMITED_QUOTA", PRIV.PRIV_UNLIMITED_QUOTA, "Unlimited file quota"),
    PermissionBit("PRIV_DELETE_FILE", PRIV.PRIV_DELETE_FILE, "Delete files"),
    PermissionBit("PRIV_UNLIMITED_ACCESS", PRIV.PRIV_UNLIMITED_ACCESS, "Bypass rate limits"),
    PermissionBit("PRIV_VIEW_SYSTEM_NOTIFICATION", PRIV.PRIV_VIEW_SYSTEM_NOTIFICATION, "View system notifications"),
    PermissionBit("PRIV_SEND_MESSAGE", PRIV.PRIV_SEND_MESSAGE, "Send messages"),
    PermissionBit("PRIV_MOD_BADGE", PRIV.PRIV_MOD_BADGE, "Show moderator badge"),

    PermissionBit("PRIV_NONE", PRIV.PRIV_NONE, "No privilege", reserved=True),
    PermissionBit("PRIV_NEVER", PRIV.PRIV_NEVER, "Never granted", reserved=True),
    PermissionBit("PRIV_DEFAULT", PRIV.PRIV_DEFAULT, "Default privileges", reserved=True),
    PermissionBit("PRIV_ALL", PRIV.PRIV_ALL, "All privileges", reserved=True),
])


DOMAIN_PERMISSIONS = PermissionCatalog("domain", [
    PermissionBit("PERM_VIEW", PERM.PERM_VIEW, "View this domain"),
    PermissionBit("PERM_EDIT_DOMAIN", PERM.PERM_EDIT_DOMAIN, "Edit domain settings"),
    PermissionBit("PERM_MOD_BADGE", PERM.PERM_MOD_BADGE, "Show moderator badge"),
    PermissionBit("PERM_VIEW_DISPLAYNAME", PERM.PERM_VIEW_DISPLAYNAME, "View display names"),
    PermissionBit("PERM_VIEW_USER_PRIVATE_INFO", PERM.PERM_VIEW_USER_PRIVATE_INFO, "View private user info"),
    PermissionBit("PERM_MANAGE_GROUP", PERM.PERM_MANAGE_GROUP, "Manage groups"),
    PermissionBit("PERM_CREATE_PROBLEM", PERM.PERM_CREATE_PROBLEM, "Create problems"),
    PermissionBit("PERM_EDIT_PROBLEM", PERM.PERM_EDIT_PROBLEM, "Edit problems"),
    PermissionBit("PERM_EDIT_PROBLEM_SELF", PERM.PERM_EDIT_PROBLEM_SELF, "Edit own problems"),
    PermissionBit("PERM_VIEW_PROBLEM", PERM.PERM_VIEW_PROBLEM, "View problems"),
    PermissionBit("PERM_VIEW_PROBLEM_HIDDEN", PERM.PERM_VIEW_PROBLEM_HIDDEN, "View hidden problems"),
    PermissionBit("PERM_SUBMIT_PROBLEM", PERM.PERM_SUBMIT_PROBLEM, "Submit problems"),
    PermissionBit("PERM_READ_PROBLEM_DATA", PERM.PERM_READ_PROBLEM_DATA, "Read data of problems"),
    PermissionBit("PERM_READ_RECORD_CODE", PERM.PERM_READ_RECORD_CODE, "Read record codes"),
    PermissionBit("PERM_REJUDGE_PROBLEM", PERM.PERM_REJUDGE_PROBLEM, "Rejudge problems"),
    PermissionBit("PERM_REJUDGE", PERM.PERM_REJUDGE, "Rejudge records"),
    PermissionBit("PERM_VIEW_DISCUSSION", PERM.PERM_VIEW_DISCUSSION, "View discussions"),
    PermissionBit("PERM_CREATE_DISCUSSION", PERM.PERM_CREATE_DISCUSSION, "Create discussions"),
    PermissionBit("PERM_HIGHLIGHT_DISCUSSION", PERM.PERM_HIGHLIGHT_DISCUSSION, "Highlight discussions"),
    PermissionBit("PERM_EDIT_DISCUSSION", PERM.PERM_EDIT_DISCUSSION, "Edit discussions"),
    PermissionBit("PERM_DELETE_DISCUSSION", PERM.PERM_DELETE_DISCUSSION, "Delete discussions"),
    PermissionBit("PERM_VIEW_CONTEST", PERM.PERM_VIEW_CONTEST, "View contests"),
    PermissionBit("PERM_VIEW_CONTEST_SCOREBOARD", PERM.PERM_VIEW_CONTEST_SCOREBOARD, "View contest scoreboard"),
    PermissionBit("PERM_ATTEND_CONTEST", PERM.PERM_ATTEND_CONTEST, "Attend contests"),
    PermissionBit("PERM_CREATE_CONTEST", PERM.PERM_CREATE_CONTEST, "Create contests"),
    PermissionBit("PERM_EDIT_CONTEST", PERM.PERM_EDIT_CONTEST, "Edit contests"),
    PermissionBit("PERM_VIEW_HOMEWORK", PERM.PERM_VIEW_HOMEWORK, "View homework"),
    PermissionBit("PERM_ATTEND_HOMEWORK", PERM.PERM_ATTEND_HOMEWORK, "Claim homework"),
    PermissionBit("PERM_CREATE_HOMEWORK", PERM.PERM_CREATE_HOMEWORK, "Create homework"),
    PermissionBit("PERM_EDIT_HOMEWORK", PERM.PERM_EDIT_HOMEWORK, "Edit homework"),
    PermissionBit("PERM_VIEW_TRAINING", PERM.PERM_VIEW_TRAINING, "View training plans"),
    PermissionBit("PERM_CREATE_TRAINING", PERM.PERM_CREATE_TRAINING, "Create training plans"),
    PermissionBit("PERM_EDIT_TRAINING", PERM.PERM_EDIT_TRAINING, "Edit training plans"),
    PermissionBit("PERM_VIEW_RANKING", PERM.PERM_VIEW_RANKING, "View ranking"),

    PermissionBit("PERM_NONE", PERM.PERM_NONE, "No permission", reserved=True),
    PermissionBit("PERM_BASIC", PERM.PERM_BASIC, "Basic permissions", reserved=True),
    PermissionBit("PERM_DEFAULT", PERM.PERM_DEFAULT, "Default permissions", reserved=True),
    PermissionBit("PERM_ALL", PERM.PERM_ALL, "All permissions", reserved=True),
])


BUILTIN_ROLES: Mapping[str, int] = MappingProxyType({
    BuiltinRole.ROOT: PERM.PERM_ALL,
    BuiltinRole.DEFAULT: PERM.PERM_DEFAULT,
    BuiltinRole.GUEST: PERM.PERM_BASIC,
})
