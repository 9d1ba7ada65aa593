"""Rendering of a file's group."""

from __future__ import annotations

from typing import Protocol

from longlist.cell import Style, TextCell
from longlist.users import UserFormat, UsersSource


class GroupColours(Protocol):
    def yours(self) -> Style: ...

    def not_yours(self) -> Style: ...


def render_group(
    gid: int, colours: GroupColours, users: UsersSource, user_format: UserFormat
) -> TextCell:
    """Render a file's group, highlighted when the current user belongs to it."""
    style = colours.not_yours()

    group = users.get_group_by_gid(gid)
    if group is None:
        return TextCell.paint(style, str(gid))

    current_user = users.get_user_by_uid(users.get_current_uid())
    if current_user is not None and (
        current_user.primary_group == group.gid or current_user.name in group.members
    ):
        style = colours.yours()

    if user_format is UserFormat.NAME:
        group_name = group.name
    else:
        group_name = str(group.gid)

    return TextCell.paint(style, group_name)