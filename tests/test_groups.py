from __future__ import annotations

from dataclasses import dataclass, field

from longlist.cell import TextCell, fixed
from longlist.groups import render_group
from longlist.users import Group, User, UserFormat


class _TestColours:
    def yours(self):
        return fixed(80).normal()

    def not_yours(self):
        return fixed(81).normal()


@dataclass
class _MockUsers:
    current_uid: int
    users: dict[int, User] = field(default_factory=dict)
    groups: dict[int, Group] = field(default_factory=dict)

    def add_user(self, user: User) -> None:
        self.users[user.uid] = user

    def add_group(self, group: Group) -> None:
        self.groups[group.gid] = group

    def get_user_by_uid(self, uid):
        return self.users.get(uid)

    def get_group_by_gid(self, gid):
        return self.groups.get(gid)

    def get_current_uid(self):
        return self.current_uid


COLOURS = _TestColours()


def test_named():
    users = _MockUsers(1000)
    users.add_group(Group(100, "folk"))

    expected = TextCell.paint(fixed(81).normal(), "folk")
    assert render_group(100, COLOURS, users, UserFormat.NAME) == expected

    expected = TextCell.paint(fixed(81).normal(), "100")
    assert render_group(100, COLOURS, users, UserFormat.NUMERIC) == expected


def test_unnamed():
    users = _MockUsers(1000)

    expected = TextCell.paint(fixed(81).normal(), "100")
    assert render_group(100, COLOURS, users, UserFormat.NAME) == expected
    assert render_group(100, COLOURS, users, UserFormat.NUMERIC) == expected


def test_primary():
    users = _MockUsers(2)
    users.add_user(User(2, "eve", 100))
    users.add_group(Group(100, "folk"))

    expected = TextCell.paint(fixed(80).normal(), "folk")
    assert render_group(100, COLOURS, users, UserFormat.NAME) == expected


def test_secondary():
    users = _MockUsers(2)
    users.add_user(User(2, "eve", 666))
    users.add_group(Group(100, "folk", ("eve",)))

    expected = TextCell.paint(fixed(80).normal(), "folk")
    assert render_group(100, COLOURS, users, UserFormat.NAME) == expected


def test_overflow():
    expected = TextCell.paint(fixed(81).normal(), "2147483648")
    result = render_group(2_147_483_648, COLOURS, _MockUsers(0), UserFormat.NUMERIC)
    assert result == expected