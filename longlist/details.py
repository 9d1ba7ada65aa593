"""Rows of the details view and their rendering into text cells."""

from __future__ import annotations

from dataclasses import dataclass
from os import PathLike
from typing import Iterable, Iterator

from longlist.cell import Style, TextCell
from longlist.table import Table
from longlist.tree import TreeParams, TreeTrunk

# Each tree part is counted as four columns wide when laid out.
_TREE_PART_WIDTH = 4


@dataclass
class Row:
    """One line of the details view.

    ``cells`` holds the table cells of a file's metadata; it is ``None`` for
    rows that show an extended attribute or an error.
    """

    cells: list[TextCell] | None
    name: TextCell
    tree: TreeParams


def render_header(header: list[TextCell], style: Style) -> Row:
    """The header row: the column headings followed by "Name"."""
    return Row(
        cells=header,
        name=TextCell.paint(style, "Name"),
        tree=TreeParams(0, False),
    )


def render_error(
    message: str,
    style: Style,
    tree: TreeParams,
    path: str | PathLike[str] | None = None,
) -> Row:
    """A row describing an error, optionally naming the path it concerns."""
    if path is not None:
        text = f"<{path}: {message}>"
    else:
        text = f"<{message}>"
    return Row(cells=None, name=TextCell.paint(style, text), tree=tree)


def render_xattr(name: str, size: int, style: Style, tree: TreeParams) -> Row:
    """A row describing one extended attribute and its length."""
    return Row(cells=None, name=TextCell.paint(style, f"{name} (len {size})"), tree=tree)


def _finish(cell: TextCell, row: Row, trunk: TreeTrunk, tree_style: Style) -> TextCell:
    for part in trunk.new_row(row.tree):
        cell.push(tree_style.paint(part.ascii_art()), _TREE_PART_WIDTH)

    # A space after any tree characters makes the output easier to read.
    if not row.tree.is_at_root():
        cell.add_spaces(1)

    cell.append(row.name)
    return cell


def iterate(rows: Iterable[Row], tree_style: Style) -> Iterator[TextCell]:
    """Render rows that have no table, prefixing each with its tree parts."""
    trunk = TreeTrunk()
    for row in rows:
        yield _finish(TextCell(), row, trunk, tree_style)


def iterate_with_table(
    table: Table, rows: Iterable[Row], tree_style: Style
) -> Iterator[TextCell]:
    """Render rows through the table, padding rows without cells to its width."""
    trunk = TreeTrunk()
    total_width = table.widths.total()
    for row in rows:
        if row.cells is not None:
            cell = table.render(row.cells)
        else:
            cell = TextCell()
            cell.add_spaces(total_width)
        yield _finish(cell, row, trunk, tree_style)