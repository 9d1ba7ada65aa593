"""How wide the output may be."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass


@dataclass(frozen=True)
class TerminalWidth:
    """The terminal width the user asked for.

    A ``width`` of ``None`` means the width is looked up at run time.
    """

    width: int | None = None

    @classmethod
    def automatic(cls) -> TerminalWidth:
        return cls(None)

    def actual_terminal_width(self) -> int | None:
        """The width to use, or ``None`` when stdout is not a terminal."""
        if self.width is not None:
            return self.width
        # Only stdout matters, because that is where the output goes.
        try:
            fd = sys.stdout.fileno()
            size = os.get_terminal_size(fd)
        except (OSError, ValueError, AttributeError):
            return None
        return size.columns