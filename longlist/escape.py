"""Escaping of control characters in file names."""

from __future__ import annotations

from longlist.cell import ANSIString, Style

_NAMED_ESCAPES = {"\t": "\\t", "\r": "\\r", "\n": "\\n"}


def _printable(ch: str) -> bool:
    return ch >= " " and ch != "\x7f"


def _escape_char(ch: str) -> str:
    return _NAMED_ESCAPES.get(ch, f"\\u{{{ord(ch):x}}}")


def escape(text: str, good: Style, bad: Style) -> list[ANSIString]:
    """Split text into styled pieces, escaping control characters in the bad style."""
    if all(_printable(ch) for ch in text):
        return [good.paint(text)]
    return [
        good.paint(ch) if _printable(ch) else bad.paint(_escape_char(ch))
        for ch in text
    ]