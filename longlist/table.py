"""Columns, widths and row rendering for the details table."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator

from longlist.cell import Style, TextCell


class TimeType(Enum):
    """Which of a file's timestamps a column shows."""

    MODIFIED = "modified"
    CHANGED = "changed"
    ACCESSED = "accessed"
    CREATED = "created"

    def header(self) -> str:
        return _TIME_HEADERS[self]


_TIME_HEADERS = {
    TimeType.MODIFIED: "Date Modified",
    TimeType.CHANGED: "Date Changed",
    TimeType.ACCESSED: "Date Accessed",
    TimeType.CREATED: "Date Created",
}


@dataclass(frozen=True)
class TimeTypes:
    """Which timestamps to show; by default just the modified time."""

    modified: bool = True
    changed: bool = False
    accessed: bool = False
    created: bool = False


class Alignment(Enum):
    LEFT = "left"
    RIGHT = "right"


class Column(Enum):
    """A column of the details table."""

    PERMISSIONS = "permissions"
    FILE_SIZE = "file_size"
    TIMESTAMP_MODIFIED = "timestamp_modified"
    TIMESTAMP_CHANGED = "timestamp_changed"
    TIMESTAMP_ACCESSED = "timestamp_accessed"
    TIMESTAMP_CREATED = "timestamp_created"
    BLOCKS = "blocks"
    USER = "user"
    GROUP = "group"
    HARD_LINKS = "hard_links"
    INODE = "inode"
    GIT_STATUS = "git_status"
    OCTAL = "octal"

    @classmethod
    def timestamp(cls, time_type: TimeType) -> Column:
        return _TIMESTAMP_COLUMNS[time_type]

    @property
    def time_type(self) -> TimeType | None:
        return _COLUMN_TIME_TYPES.get(self)

    def alignment(self) -> Alignment:
        """Numbers are right-aligned; everything else is left-aligned."""
        if self in _RIGHT_ALIGNED:
            return Alignment.RIGHT
        return Alignment.LEFT

    def header(self) -> str:
        """The text shown for this column in the header row."""
        time_type = self.time_type
        if time_type is not None:
            return time_type.header()
        return _HEADERS[self]


_TIMESTAMP_COLUMNS = {
    TimeType.MODIFIED: Column.TIMESTAMP_MODIFIED,
    TimeType.CHANGED: Column.TIMESTAMP_CHANGED,
    TimeType.ACCESSED: Column.TIMESTAMP_ACCESSED,
    TimeType.CREATED: Column.TIMESTAMP_CREATED,
}
_COLUMN_TIME_TYPES = {column: tt for tt, column in _TIMESTAMP_COLUMNS.items()}

_RIGHT_ALIGNED = frozenset(
    {Column.FILE_SIZE, Column.HARD_LINKS, Column.INODE, Column.BLOCKS, Column.GIT_STATUS}
)

_HEADERS = {
    Column.PERMISSIONS: "Permissions",
    Column.FILE_SIZE: "Size",
    Column.BLOCKS: "Blocks",
    Column.USER: "User",
    Column.GROUP: "Group",
    Column.HARD_LINKS: "Links",
    Column.INODE: "inode",
    Column.GIT_STATUS: "Git",
    Column.OCTAL: "Octal",
}


@dataclass(frozen=True)
class Columns:
    """Which columns to show in the table."""

    time_types: TimeTypes = field(default_factory=TimeTypes)
    inode: bool = False
    links: bool = False
    blocks: bool = False
    group: bool = False
    git: bool = False
    octal: bool = False
    permissions: bool = True
    filesize: bool = True
    user: bool = True

    def collect(self, actually_enable_git: bool) -> list[Column]:
        """The enabled columns, in display order."""
        wanted = [
            (self.inode, Column.INODE),
            (self.octal, Column.OCTAL),
            (self.permissions, Column.PERMISSIONS),
            (self.links, Column.HARD_LINKS),
            (self.filesize, Column.FILE_SIZE),
            (self.blocks, Column.BLOCKS),
            (self.user, Column.USER),
            (self.group, Column.GROUP),
            (self.time_types.modified, Column.TIMESTAMP_MODIFIED),
            (self.time_types.changed, Column.TIMESTAMP_CHANGED),
            (self.time_types.created, Column.TIMESTAMP_CREATED),
            (self.time_types.accessed, Column.TIMESTAMP_ACCESSED),
            (self.git and actually_enable_git, Column.GIT_STATUS),
        ]
        return [column for enabled, column in wanted if enabled]


class TableWidths:
    """The widest cell seen so far in each column."""

    def __init__(self, count: int = 0) -> None:
        self._widths = [0] * count

    @classmethod
    def zero(cls, count: int) -> TableWidths:
        return cls(count)

    def __iter__(self) -> Iterator[int]:
        return iter(self._widths)

    def __len__(self) -> int:
        return len(self._widths)

    def __getitem__(self, index: int) -> int:
        return self._widths[index]

    def add_widths(self, row: list[TextCell]) -> None:
        """Widen each column to fit the matching cell of the row."""
        self._widths = [
            max(old, cell.width) for old, cell in zip(self._widths, row)
        ] + self._widths[len(row):]

    def total(self) -> int:
        """The full width of a rendered row, including one space per column."""
        return len(self._widths) + sum(self._widths)


@dataclass
class Table:
    """A set of columns whose widths grow to fit the rows added to it."""

    columns: list[Column]
    widths: TableWidths = field(init=False)

    def __post_init__(self) -> None:
        self.widths = TableWidths.zero(len(self.columns))

    def header_row(self, style: Style) -> list[TextCell]:
        return [TextCell.paint(style, column.header()) for column in self.columns]

    def add_widths(self, row: list[TextCell]) -> None:
        self.widths.add_widths(row)

    def render(self, row: list[TextCell]) -> TextCell:
        """Join the row's cells, padding each to its column's width."""
        cell = TextCell()
        for column, this_cell, width in zip(self.columns, row, self.widths):
            padding = width - this_cell.width
            if padding < 0:
                raise ValueError(
                    f"cell of width {this_cell.width} is wider than its column ({width})"
                )
            if column.alignment() is Alignment.LEFT:
                cell.append(this_cell)
                cell.add_spaces(padding)
            else:
                cell.add_spaces(padding)
                cell.append(this_cell)
            cell.add_spaces(1)
        return cell