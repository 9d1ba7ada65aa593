"""Timestamp formatting."""

from __future__ import annotations

import math
from datetime import datetime, timedelta, timezone, tzinfo
from enum import Enum

from longlist.cell import display_width

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_NANOS = 1_000_000_000

_MONTH_NAMES = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

_MAXIMUM_MONTH_WIDTH = max(display_width(name) for name in _MONTH_NAMES[:11])


def _split(time: float) -> tuple[int, int]:
    """Whole seconds since the epoch (rounded down) and the nanoseconds past them."""
    secs = math.floor(time)
    nanos = int(round((time - secs) * _NANOS))
    if nanos >= _NANOS:
        secs += 1
        nanos -= _NANOS
    return int(secs), nanos


def _current_year() -> int:
    return datetime.now(timezone.utc).year


def _is_recent(date: datetime) -> bool:
    return date.year == _current_year()


def _default(date: datetime) -> str:
    month = _MONTH_NAMES[date.month - 1]
    if _MAXIMUM_MONTH_WIDTH in (4, 5):
        month = month.ljust(_MAXIMUM_MONTH_WIDTH)
    if _is_recent(date):
        return f"{date.day:>2} {month} {date.hour:02}:{date.minute:02}"
    return f"{date.day:>2} {month} {date.year:>5}"


def _iso(date: datetime) -> str:
    if _is_recent(date):
        return f"{date.month:02}-{date.day:02} {date.hour:02}:{date.minute:02}"
    return f"{date.year:04}-{date.month:02}-{date.day:02}"


def _long(date: datetime) -> str:
    return (
        f"{date.year:04}-{date.month:02}-{date.day:02} "
        f"{date.hour:02}:{date.minute:02}"
    )


def _full(date: datetime, nanos: int) -> str:
    return (
        f"{date.year:04}-{date.month:02}-{date.day:02} "
        f"{date.hour:02}:{date.minute:02}:{date.second:02}.{nanos:09}"
    )


def _offset_suffix(date: datetime) -> str:
    offset = date.utcoffset() or timedelta(0)
    seconds = int(offset.total_seconds())
    sign = -1 if seconds < 0 else 1
    hours = sign * (abs(seconds) // 3600)
    minutes = (abs(seconds) // 60) % 60
    return f"{hours:+03d}{minutes:02d}"


class TimeFormat(Enum):
    """How to render a timestamp."""

    DEFAULT_FORMAT = "default"
    ISO_FORMAT = "iso"
    LONG_ISO = "long-iso"
    FULL_ISO = "full-iso"

    def format_local(self, time: float) -> str:
        """Format seconds since the epoch without any time zone adjustment."""
        secs, nanos = _split(time)
        date = _EPOCH + timedelta(seconds=secs)
        return self._format(date, nanos, with_offset=False)

    def format_zoned(self, time: float, zone: tzinfo) -> str:
        """Format seconds since the epoch in the given time zone."""
        secs, nanos = _split(time)
        date = (_EPOCH + timedelta(seconds=secs)).astimezone(zone)
        return self._format(date, nanos, with_offset=True)

    def _format(self, date: datetime, nanos: int, with_offset: bool) -> str:
        if self is TimeFormat.DEFAULT_FORMAT:
            return _default(date)
        if self is TimeFormat.ISO_FORMAT:
            return _iso(date)
        if self is TimeFormat.LONG_ISO:
            return _long(date)
        full = _full(date, nanos)
        if with_offset:
            return f"{full} {_offset_suffix(date)}"
        return full