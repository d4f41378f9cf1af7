"""Constants for domain-privileges.

Bit values of the global system privileges and of the per-domain
permissions, plus the built-in role names. Values are Python ints so masks
can grow past 64 bits; descriptions live in the permission catalogs.
"""

from typing import Final


class PRIV:
    """Global system privilege bits."""

    PRIV_NONE: Final[int] = 0
    PRIV_EDIT_SYSTEM: Final[int] = 1 << 0
    PRIV_SET_PERM: Final[int] = 1 << 1
    PRIV_USER_PROFILE: Final[int] = 1 << 2
    PRIV_REGISTER_USER: Final[int] = 1 << 3
    PRIV_READ_PROBLEM_DATA: Final[int] = 1 << 4
    PRIV_READ_RECORD_CODE: Final[int] = 1 << 7
    PRIV_VIEW_HIDDEN_RECORD: Final[int] = 1 << 8
    PRIV_JUDGE: Final[int] = 1 << 9
    PRIV_CREATE_DOMAIN: Final[int] = 1 << 10
    PRIV_VIEW_ALL_DOMAIN: Final[int] = 1 << 11
    PRIV_MANAGE_ALL_DOMAIN: Final[int] = 1 << 12
    PRIV_REJUDGE: Final[int] = 1 << 13
    PRIV_VIEW_USER_SECRET: Final[int] = 1 << 14
    PRIV_VIEW_JUDGE_STATISTICS: Final[int] = 1 << 15
    PRIV_CREATE_FILE: Final[int] = 1 << 16
    PRIV_UNLIMITED_QUOTA: Final[int] = 1 << 17
    PRIV_DELETE_FILE: Final[int] = 1 << 18
    PRIV_NEVER: Final[int] = 1 << 20
    PRIV_UNLIMITED_ACCESS: Final[int] = 1 << 22
    PRIV_VIEW_SYSTEM_NOTIFICATION: Final[int] = 1 << 23
    PRIV_SEND_MESSAGE: Final[int] = 1 << 24
    PRIV_MOD_BADGE: Final[int] = 1 << 25

    PRIV_DEFAULT: Final[int] = (
        PRIV_USER_PROFILE
        | PRIV_CREATE_FILE
        | PRIV_VIEW_SYSTEM_NOTIFICATION
        | PRIV_SEND_MESSAGE
    )
    # Every bit set in two's complement: contains any mask
    PRIV_ALL: Final[int] = -1


class PERM:
    """Per-domain permission bits."""

    PERM_NONE: Final[int] = 0

    # Domain
    PERM_VIEW: Final[int] = 1 << 0
    PERM_EDIT_DOMAIN: Final[int] = 1 << 1
    PERM_MOD_BADGE: Final[int] = 1 << 2
    PERM_VIEW_DISPLAYNAME: Final[int] = 1 << 67
    PERM_VIEW_USER_PRIVATE_INFO: Final[int] = 1 << 68
    PERM_MANAGE_GROUP: Final[int] = 1 << 69

    # Problems
    PERM_CREATE_PROBLEM: Final[int] = 1 << 4
    PERM_EDIT_PROBLEM: Final[int] = 1 << 5
    PERM_EDIT_PROBLEM_SELF: Final[int] = 1 << 6
    PERM_VIEW_PROBLEM: Final[int] = 1 << 7
    PERM_VIEW_PROBLEM_HIDDEN: Final[int] = 1 << 8
    PERM_SUBMIT_PROBLEM: Final[int] = 1 << 9
    PERM_READ_PROBLEM_DATA: Final[int] = 1 << 10

    # Records
    PERM_READ_RECORD_CODE: Final[int] = 1 << 12
    PERM_REJUDGE_PROBLEM: Final[int] = 1 << 13
    PERM_REJUDGE: Final[int] = 1 << 14

    # Discussions
    PERM_VIEW_DISCUSSION: Final[int] = 1 << 16
    PERM_CREATE_DISCUSSION: Final[int] = 1 << 17
    PERM_HIGHLIGHT_DISCUSSION: Final[int] = 1 << 18
    PERM_EDIT_DISCUSSION: Final[int] = 1 << 19
    PERM_DELETE_DISCUSSION: Final[int] = 1 << 21

    # Contests
    PERM_VIEW_CONTEST: Final[int] = 1 << 26
    PERM_VIEW_CONTEST_SCOREBOARD: Final[int] = 1 << 27
    PERM_ATTEND_CONTEST: Final[int] = 1 << 28
    PERM_CREATE_CONTEST: Final[int] = 1 << 29
    PERM_EDIT_CONTEST: Final[int] = 1 << 30

    # Homework
    PERM_VIEW_HOMEWORK: Final[int] = 1 << 40
    PERM_ATTEND_HOMEWORK: Final[int] = 1 << 41
    PERM_CREATE_HOMEWORK: Final[int] = 1 << 42
    PERM_EDIT_HOMEWORK: Final[int] = 1 << 43

    # Trainings
    PERM_VIEW_TRAINING: Final[int] = 1 << 48
    PERM_CREATE_TRAINING: Final[int] = 1 << 49
    PERM_EDIT_TRAINING: Final[int] = 1 << 50

    # Ranking
    PERM_VIEW_RANKING: Final[int] = 1 << 59

    PERM_BASIC: Final[int] = (
        PERM_VIEW
        | PERM_VIEW_PROBLEM
        | PERM_VIEW_DISCUSSION
        | PERM_VIEW_CONTEST
        | PERM_VIEW_CONTEST_SCOREBOARD
        | PERM_VIEW_HOMEWORK
        | PERM_VIEW_TRAINING
        | PERM_VIEW_RANKING
        | PERM_VIEW_DISPLAYNAME
    )
    PERM_DEFAULT: Final[int] = (
        PERM_BASIC
        | PERM_EDIT_PROBLEM_SELF
        | PERM_SUBMIT_PROBLEM
        | PERM_CREATE_DISCUSSION
        | PERM_ATTEND_CONTEST
        | PERM_ATTEND_HOMEWORK
    )
    PERM_ALL: Final[int] = -1


class BuiltinRole:
    """Names of the roles every domain has without configuration."""

    ROOT: Final[str] = "root"
    DEFAULT: Final[str] = "default"
    GUEST: Final[str] = "guest"
