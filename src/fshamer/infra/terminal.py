from __future__ import annotations

"""
Terminal Geometry.

Resolves how many directory rows the viewport may use.
"""

import logging
import shutil

from fshamer.domain.constants import DEFAULT_PRINT_N, TERMINAL_RESERVED_ROWS

logger = logging.getLogger(__name__)


def resolve_line_count(requested: int, default_max: int = DEFAULT_PRINT_N) -> int:
    """
    Compute the number of directory rows to display.

    A positive request is honored as-is. 0 means auto-detect: the terminal
    height minus the rows kept for the counter and the shell prompt,
    capped at 'default_max'.

    Args:
        requested: Row count asked for by the user, 0 for auto.
        default_max: Upper bound for the auto-detected value.

    Returns:
        int: Number of rows (K), never negative.
    """
    if requested > 0:
        return requested

    # Fallback applies when stdout is not a terminal (pipes, CI)
    rows = shutil.get_terminal_size(fallback=(80, default_max + TERMINAL_RESERVED_ROWS)).lines
    if rows > default_max:
        return default_max

    lines = max(rows - TERMINAL_RESERVED_ROWS, 0)
    logger.debug(f"Terminal has {rows} rows, using {lines} viewport lines")
    return lines
