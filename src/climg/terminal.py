"""Query the size of the attached terminal."""

from __future__ import annotations

import os
from dataclasses import dataclass

FALLBACK_COLUMNS = 80
FALLBACK_LINES = 24


@dataclass(frozen=True)
class TerminalBounds:
    """Terminal dimensions in character cells."""
    width: int
    height: int


def get_terminal_size(reserve_lines: int = 1) -> TerminalBounds:
    """
    Get current terminal dimensions.

    The height is reduced by reserve_lines so the shell prompt does not
    scroll the top of the image away. Queried fresh on every call.
    """
    try:
        size = os.get_terminal_size()
        columns, lines = size.columns, size.lines
    except OSError:
        columns, lines = FALLBACK_COLUMNS, FALLBACK_LINES
    return TerminalBounds(width=columns, height=max(1, lines - reserve_lines))
