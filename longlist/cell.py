"""Styled text cells for table and grid output."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Iterable, Iterator

from wcwidth import wcwidth

_RESET = "\x1b[0m"


@dataclass(frozen=True)
class Colour:
    """A terminal colour usable as a foreground or a background."""

    name: str
    foreground_code: str
    background_code: str

    def normal(self) -> Style:
        return Style(foreground=self)

    def bold(self) -> Style:
        return Style(foreground=self, is_bold=True)

    def italic(self) -> Style:
        return Style(foreground=self, is_italic=True)

    def underline(self) -> Style:
        return Style(foreground=self, is_underline=True)

    def blink(self) -> Style:
        return Style(foreground=self, is_blink=True)

    def on(self, background: Colour) -> Style:
        return Style(foreground=self, background=background)

    def paint(self, text: str) -> ANSIString:
        return self.normal().paint(text)

    def __repr__(self) -> str:
        return self.name


BLACK = Colour("Black", "30", "40")
RED = Colour("Red", "31", "41")
GREEN = Colour("Green", "32", "42")
YELLOW = Colour("Yellow", "33", "43")
BLUE = Colour("Blue", "34", "44")
PURPLE = Colour("Purple", "35", "45")
CYAN = Colour("Cyan", "36", "46")
WHITE = Colour("White", "37", "47")


def fixed(n: int) -> Colour:
    """Return one of the 256 indexed terminal colours."""
    if not 0 <= n <= 255:
        raise ValueError(f"fixed colour index out of range: {n}")
    return Colour(f"Fixed({n})", f"38;5;{n}", f"48;5;{n}")


@dataclass(frozen=True)
class Style:
    """Foreground, background and text attributes for a piece of text."""

    foreground: Colour | None = None
    background: Colour | None = None
    is_bold: bool = False
    is_italic: bool = False
    is_underline: bool = False
    is_blink: bool = False

    def _is_plain(self) -> bool:
        return self == Style()

    def _with(self, **changes: object) -> Style:
        return replace(self, **changes)

    def paint(self, text: str) -> ANSIString:
        return ANSIString(self, text)

    def prefix(self) -> str:
        """The escape sequence that switches the terminal into this style."""
        if self._is_plain():
            return ""
        codes = []
        if self.is_bold:
            codes.append("1")
        if self.is_italic:
            codes.append("3")
        if self.is_underline:
            codes.append("4")
        if self.is_blink:
            codes.append("5")
        if self.background is not None:
            codes.append(self.background.background_code)
        if self.foreground is not None:
            codes.append(self.foreground.foreground_code)
        return "\x1b[" + ";".join(codes) + "m"


@dataclass(frozen=True)
class ANSIString:
    """A piece of text coupled with the style to print it in."""

    style: Style
    text: str

    def __str__(self) -> str:
        if self.style._is_plain():
            return self.text
        return f"{self.style.prefix()}{self.text}{_RESET}"


def display_width(text: str) -> int:
    """The number of terminal columns the text occupies."""
    return sum(max(wcwidth(ch), 0) for ch in text)


def render_strings(strings: Iterable[ANSIString]) -> str:
    """Render styled strings as one terminal-formatted string."""
    return "".join(str(s) for s in strings)


@dataclass
class TextCellContents:
    """The styled strings of a cell, without a cached width."""

    parts: list[ANSIString] = field(default_factory=list)

    def __iter__(self) -> Iterator[ANSIString]:
        return iter(self.parts)

    def __len__(self) -> int:
        return len(self.parts)

    def __getitem__(self, index: int) -> ANSIString:
        return self.parts[index]

    def strings(self) -> str:
        return render_strings(self.parts)

    def width(self) -> int:
        return sum(display_width(part.text) for part in self.parts)

    def promote(self) -> TextCell:
        return TextCell(contents=self, width=self.width())


@dataclass
class TextCell:
    """Styled strings together with their combined display width."""

    contents: TextCellContents = field(default_factory=TextCellContents)
    width: int = 0

    @classmethod
    def paint(cls, style: Style, text: str) -> TextCell:
        return cls(TextCellContents([style.paint(text)]), display_width(text))

    @classmethod
    def blank(cls, style: Style) -> TextCell:
        """A cell holding a single hyphen, used in place of empty cells."""
        return cls(TextCellContents([style.paint("-")]), 1)

    def __iter__(self) -> Iterator[ANSIString]:
        return iter(self.contents)

    def __len__(self) -> int:
        return len(self.contents)

    def add_spaces(self, count: int) -> None:
        self.width += count
        self.contents.parts.append(Style().paint(" " * count))

    def push(self, string: ANSIString, extra_width: int) -> None:
        self.contents.parts.append(string)
        self.width += extra_width

    def append(self, other: TextCell) -> None:
        self.width += other.width
        self.contents.parts.extend(other.contents.parts)

    def strings(self) -> str:
        return self.contents.strings()