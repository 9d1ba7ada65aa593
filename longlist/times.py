"""Rendering of a file's timestamps."""

from __future__ import annotations

from datetime import tzinfo

from longlist.cell import Style, TextCell
from longlist.time import TimeFormat


def render_time(
    time: float | None, style: Style, zone: tzinfo | None, time_format: TimeFormat
) -> TextCell:
    """Render a timestamp, in the zone if one is known, or a dash if there is none."""
    if time is None:
        datestamp = "-"
    elif zone is not None:
        datestamp = time_format.format_zoned(time, zone)
    else:
        datestamp = time_format.format_local(time)
    return TextCell.paint(style, datestamp)