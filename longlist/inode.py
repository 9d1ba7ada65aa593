"""Rendering of a file's inode number."""

from __future__ import annotations

from longlist.cell import Style, TextCell


def render_inode(inode: int, style: Style) -> TextCell:
    return TextCell.paint(style, str(inode))