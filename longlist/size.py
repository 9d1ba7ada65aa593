"""Rendering of file sizes and device IDs."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Protocol

from longlist.cell import Style, TextCell, TextCellContents, display_width
from longlist.links import NumericLocale


class SizeFormat(Enum):
    """How to format a file size."""

    DECIMAL_BYTES = "decimal"
    BINARY_BYTES = "binary"
    JUST_BYTES = "bytes"


class Prefix(Enum):
    """A decimal or binary unit prefix."""

    KILO = "k"
    MEGA = "M"
    GIGA = "G"
    TERA = "T"
    PETA = "P"
    EXA = "E"
    ZETTA = "Z"
    YOTTA = "Y"
    KIBI = "Ki"
    MEBI = "Mi"
    GIBI = "Gi"
    TEBI = "Ti"
    PEBI = "Pi"
    EXBI = "Ei"
    ZEBI = "Zi"
    YOBI = "Yi"

    def symbol(self) -> str:
        return self.value


_DECIMAL_PREFIXES = (
    Prefix.KILO, Prefix.MEGA, Prefix.GIGA, Prefix.TERA,
    Prefix.PETA, Prefix.EXA, Prefix.ZETTA, Prefix.YOTTA,
)
_BINARY_PREFIXES = (
    Prefix.KIBI, Prefix.MEBI, Prefix.GIBI, Prefix.TEBI,
    Prefix.PEBI, Prefix.EXBI, Prefix.ZEBI, Prefix.YOBI,
)


def _with_prefix(
    amount: float, kilo: float, prefixes: tuple[Prefix, ...]
) -> tuple[Prefix | None, float]:
    if amount < kilo:
        return None, amount
    level = 0
    while amount >= kilo and level < len(prefixes):
        amount /= kilo
        level += 1
    return prefixes[level - 1], amount


def _decimal(size: int) -> tuple[Prefix | None, float]:
    return _with_prefix(float(size), 1000.0, _DECIMAL_PREFIXES)


def _binary(size: int) -> tuple[Prefix | None, float]:
    return _with_prefix(float(size), 1024.0, _BINARY_PREFIXES)


class SizeColours(Protocol):
    def size(self, prefix: Prefix | None) -> Style: ...

    def unit(self, prefix: Prefix | None) -> Style: ...

    def no_size(self) -> Style: ...

    def major(self) -> Style: ...

    def comma(self) -> Style: ...

    def minor(self) -> Style: ...


@dataclass(frozen=True)
class DeviceIDs:
    """The major and minor numbers of a device file."""

    major: int
    minor: int

    def render(self, colours: SizeColours) -> TextCell:
        major = str(self.major)
        minor = str(self.minor)
        return TextCell(
            TextCellContents(
                [
                    colours.major().paint(major),
                    colours.comma().paint(","),
                    colours.minor().paint(minor),
                ]
            ),
            len(major) + 1 + len(minor),
        )


def render_size(
    size: int | DeviceIDs | None,
    colours: SizeColours,
    size_format: SizeFormat,
    numeric: NumericLocale,
) -> TextCell:
    """Render a file size, a device's IDs, or a blank when there is no size."""
    if size is None:
        return TextCell.blank(colours.no_size())
    if isinstance(size, DeviceIDs):
        return size.render(colours)

    if size_format is SizeFormat.JUST_BYTES:
        # The binary prefix picks the style; the number is shown in full.
        prefix, _ = _binary(size)
        return TextCell.paint(colours.size(prefix), numeric.format_int(size))

    if size_format is SizeFormat.DECIMAL_BYTES:
        prefix, amount = _decimal(size)
    else:
        prefix, amount = _binary(size)

    if prefix is None:
        return TextCell.paint(colours.size(None), numeric.format_int(size))

    symbol = prefix.symbol()
    if amount < 10:
        number = numeric.format_float(amount, 1)
    else:
        number = numeric.format_int(math.floor(amount + 0.5))

    return TextCell(
        TextCellContents(
            [colours.size(prefix).paint(number), colours.unit(prefix).paint(symbol)]
        ),
        display_width(number) + len(symbol),
    )