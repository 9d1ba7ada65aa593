"""User and group lookup, and rendering of a file's owner."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol

from longlist.cell import Style, TextCell

try:
    import grp
    import pwd
except ImportError:  # platforms without a user database
    grp = None
    pwd = None


class UserFormat(Enum):
    """Whether to show user and group IDs or names."""

    NUMERIC = "numeric"
    NAME = "name"


@dataclass(frozen=True)
class User:
    uid: int
    name: str
    primary_group: int


@dataclass(frozen=True)
class Group:
    gid: int
    name: str
    members: tuple[str, ...] = ()


class UsersSource(Protocol):
    def get_user_by_uid(self, uid: int) -> User | None: ...

    def get_group_by_gid(self, gid: int) -> Group | None: ...

    def get_current_uid(self) -> int: ...


@dataclass
class SystemUsers:
    """Looks users and groups up in the system database, caching results."""

    _users: dict[int, User | None] = field(default_factory=dict)
    _groups: dict[int, Group | None] = field(default_factory=dict)

    def get_user_by_uid(self, uid: int) -> User | None:
        if uid not in self._users:
            self._users[uid] = self._lookup_user(uid)
        return self._users[uid]

    def get_group_by_gid(self, gid: int) -> Group | None:
        if gid not in self._groups:
            self._groups[gid] = self._lookup_group(gid)
        return self._groups[gid]

    def get_current_uid(self) -> int:
        getuid = getattr(os, "getuid", None)
        return getuid() if getuid is not None else 0

    @staticmethod
    def _lookup_user(uid: int) -> User | None:
        if pwd is None:
            return None
        try:
            entry = pwd.getpwuid(uid)
        except (KeyError, OverflowError):
            return None
        return User(entry.pw_uid, entry.pw_name, entry.pw_gid)

    @staticmethod
    def _lookup_group(gid: int) -> Group | None:
        if grp is None:
            return None
        try:
            entry = grp.getgrgid(gid)
        except (KeyError, OverflowError):
            return None
        return Group(entry.gr_gid, entry.gr_name, tuple(entry.gr_mem))


class UserColours(Protocol):
    def you(self) -> Style: ...

    def someone_else(self) -> Style: ...


def render_user(
    uid: int, colours: UserColours, users: UsersSource, user_format: UserFormat
) -> TextCell:
    """Render a file owner's name or ID, highlighted when it is the current user."""
    user = users.get_user_by_uid(uid)
    if user is None or user_format is UserFormat.NUMERIC:
        user_name = str(uid)
    else:
        user_name = user.name

    style = colours.you() if users.get_current_uid() == uid else colours.someone_else()
    return TextCell.paint(style, user_name)