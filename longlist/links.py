"""Rendering of a file's hard link count, and locale-aware numbers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from longlist.cell import Style, TextCell


@dataclass(frozen=True)
class NumericLocale:
    """Separators used to format numbers."""

    decimal_sep: str = "."
    thousands_sep: str = ","

    @classmethod
    def english(cls) -> NumericLocale:
        return cls(".", ",")

    def _localise(self, formatted: str) -> str:
        return formatted.translate(
            str.maketrans({",": self.thousands_sep, ".": self.decimal_sep})
        )

    def format_int(self, value: int) -> str:
        """Format an integer with thousands separators."""
        return self._localise(f"{int(value):,}")

    def format_float(self, value: float, decimals: int) -> str:
        """Format a number with thousands separators and fixed decimals."""
        return self._localise(f"{value:,.{decimals}f}")


class LinksColours(Protocol):
    def normal(self) -> Style: ...

    def multi_link_file(self) -> Style: ...


@dataclass(frozen=True)
class Links:
    """A file's hard link count, and whether it is a file with several."""

    count: int
    multiple: bool

    def render(self, colours: LinksColours, numeric: NumericLocale) -> TextCell:
        style = colours.multi_link_file() if self.multiple else colours.normal()
        return TextCell.paint(style, numeric.format_int(self.count))