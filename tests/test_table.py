from __future__ import annotations

import pytest

from longlist.cell import Style, TextCell, fixed
from longlist.table import (
    Alignment,
    Column,
    Columns,
    Table,
    TableWidths,
    TimeType,
    TimeTypes,
)


def _text(cell: TextCell) -> str:
    return "".join(part.text for part in cell)


def test_default_columns():
    assert Columns().collect(True) == [
        Column.PERMISSIONS,
        Column.FILE_SIZE,
        Column.USER,
        Column.TIMESTAMP_MODIFIED,
    ]


def test_git_column_needs_git_enabled():
    columns = Columns(git=True)
    assert Column.GIT_STATUS in columns.collect(True)
    assert Column.GIT_STATUS not in columns.collect(False)


def test_all_columns_order():
    columns = Columns(
        time_types=TimeTypes(modified=True, changed=True, accessed=True, created=True),
        inode=True,
        links=True,
        blocks=True,
        group=True,
        git=True,
        octal=True,
    )
    assert columns.collect(True) == [
        Column.INODE,
        Column.OCTAL,
        Column.PERMISSIONS,
        Column.HARD_LINKS,
        Column.FILE_SIZE,
        Column.BLOCKS,
        Column.USER,
        Column.GROUP,
        Column.TIMESTAMP_MODIFIED,
        Column.TIMESTAMP_CHANGED,
        Column.TIMESTAMP_CREATED,
        Column.TIMESTAMP_ACCESSED,
        Column.GIT_STATUS,
    ]


def test_time_type_headers():
    assert TimeType.MODIFIED.header() == "Date Modified"
    assert TimeType.CHANGED.header() == "Date Changed"
    assert TimeType.ACCESSED.header() == "Date Accessed"
    assert TimeType.CREATED.header() == "Date Created"


def test_column_headers():
    assert Column.PERMISSIONS.header() == "Permissions"
    assert Column.FILE_SIZE.header() == "Size"
    assert Column.INODE.header() == "inode"
    assert Column.HARD_LINKS.header() == "Links"
    assert Column.timestamp(TimeType.CREATED).header() == "Date Created"


@pytest.mark.parametrize(
    "column",
    [Column.FILE_SIZE, Column.HARD_LINKS, Column.INODE, Column.BLOCKS, Column.GIT_STATUS],
)
def test_right_aligned(column):
    assert column.alignment() is Alignment.RIGHT


@pytest.mark.parametrize(
    "column",
    [Column.PERMISSIONS, Column.USER, Column.GROUP, Column.OCTAL, Column.TIMESTAMP_MODIFIED],
)
def test_left_aligned(column):
    assert column.alignment() is Alignment.LEFT


def test_widths_grow_to_widest():
    widths = TableWidths.zero(2)
    widths.add_widths([TextCell.paint(Style(), "abc"), TextCell.paint(Style(), "d")])
    widths.add_widths([TextCell.paint(Style(), "a"), TextCell.paint(Style(), "defg")])
    assert list(widths) == [3, 4]
    assert widths.total() == 3 + 4 + 2


def test_zero_widths_total_is_column_count():
    assert TableWidths.zero(3).total() == 3


def test_header_row():
    style = fixed(5).underline()
    table = Table([Column.PERMISSIONS, Column.FILE_SIZE])
    assert table.header_row(style) == [
        TextCell.paint(style, "Permissions"),
        TextCell.paint(style, "Size"),
    ]


def test_render_pads_by_alignment():
    table = Table([Column.PERMISSIONS, Column.FILE_SIZE])
    first = [TextCell.paint(Style(), "ab"), TextCell.paint(Style(), "1")]
    second = [TextCell.paint(Style(), "a"), TextCell.paint(Style(), "123")]
    table.add_widths(first)
    table.add_widths(second)

    rendered = table.render(second)
    assert _text(rendered) == "a  123 "
    assert rendered.width == table.widths.total()


def test_rendered_rows_share_width():
    table = Table([Column.USER, Column.INODE])
    rows = [
        [TextCell.paint(Style(), "root"), TextCell.paint(Style(), "7")],
        [TextCell.paint(Style(), "me"), TextCell.paint(Style(), "123456")],
    ]
    for row in rows:
        table.add_widths(row)
    rendered = [table.render(row) for row in rows]
    assert {cell.width for cell in rendered} == {table.widths.total()}
    assert {len(_text(cell)) for cell in rendered} == {table.widths.total()}


def test_render_rejects_cell_wider_than_column():
    table = Table([Column.USER])
    with pytest.raises(ValueError):
        table.render([TextCell.paint(Style(), "wide")])