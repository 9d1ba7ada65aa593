import os

from longlist.cell import BLUE, RED, TextCell
from longlist.users import Group, SystemUsers, User, UserFormat, render_user


class TestColours:
    def you(self):
        return RED.bold()

    def someone_else(self):
        return BLUE.underline()


class MockUsers:
    def __init__(self, current_uid):
        self.current_uid = current_uid
        self.users = {}
        self.groups = {}

    def add_user(self, user):
        self.users[user.uid] = user

    def add_group(self, group):
        self.groups[group.gid] = group

    def get_user_by_uid(self, uid):
        return self.users.get(uid)

    def get_group_by_gid(self, gid):
        return self.groups.get(gid)

    def get_current_uid(self):
        return self.current_uid


def test_named():
    users = MockUsers(1000)
    users.add_user(User(1000, "enoch", 100))

    expected = TextCell.paint(RED.bold(), "enoch")
    assert render_user(1000, TestColours(), users, UserFormat.NAME) == expected

    expected = TextCell.paint(RED.bold(), "1000")
    assert render_user(1000, TestColours(), users, UserFormat.NUMERIC) == expected


def test_unnamed():
    users = MockUsers(1000)
    expected = TextCell.paint(RED.bold(), "1000")
    assert render_user(1000, TestColours(), users, UserFormat.NAME) == expected
    assert render_user(1000, TestColours(), users, UserFormat.NUMERIC) == expected


def test_different_named():
    users = MockUsers(0)
    users.add_user(User(1000, "enoch", 100))
    expected = TextCell.paint(BLUE.underline(), "enoch")
    assert render_user(1000, TestColours(), users, UserFormat.NAME) == expected


def test_different_unnamed():
    expected = TextCell.paint(BLUE.underline(), "1000")
    assert render_user(1000, TestColours(), MockUsers(0), UserFormat.NUMERIC) == expected


def test_overflow():
    expected = TextCell.paint(BLUE.underline(), "2147483648")
    assert (
        render_user(2_147_483_648, TestColours(), MockUsers(0), UserFormat.NUMERIC)
        == expected
    )


def test_group_members_default_empty():
    assert Group(100, "folk").members == ()


def test_system_current_uid():
    assert SystemUsers().get_current_uid() == os.getuid()


def test_system_unknown_user_is_none():
    users = SystemUsers()
    assert users.get_user_by_uid(2_147_483_000) is None
    assert users.get_group_by_gid(2_147_483_000) is None