from __future__ import annotations

"""
Live Terminal Renderer.

Owns a fixed-height block of terminal lines and repaints it in place:
the cursor goes back to the top of the block, every line is cleared and
rewritten, and unused rows are padded so each repaint writes exactly the
same number of lines. Output above the block is never scrolled away.
"""

import sys
from typing import Callable, Optional, Sequence, TextIO

from fshamer.domain.constants import CARRIAGE_RETURN, CLEAR_LINE, COUNT_LABEL
from fshamer.domain.scan_models import TopEntry
from fshamer.utils.format import display_path, format_count, format_size_column


def cursor_up(n: int) -> str:
    """ANSI sequence moving the cursor up 'n' lines (empty for n <= 0)."""
    return f"\x1b[{n}A" if n > 0 else ""


class LiveRenderer:
    """
    Fixed-viewport writer for the counter row and the top-K rows.

    Attributes:
        nb_line: Number of directory rows (K).
        height: Total viewport rows, K plus the counter row.
        render_count: Number of completed repaints.
    """

    def __init__(
            self,
            nb_line: int,
            stream: Optional[TextIO] = None,
            size_formatter: Callable[[int], str] = format_size_column,
            count_formatter: Callable[[int], str] = format_count,
    ):
        if nb_line < 0:
            raise ValueError(f"nb_line must be >= 0, got {nb_line}")
        self.nb_line = nb_line
        self.height = nb_line + 1
        self._stream = stream if stream is not None else sys.stdout
        self._size_fmt = size_formatter
        self._count_fmt = count_formatter
        self._initialized = False
        self.render_count = 0

    def init_viewport(self) -> None:
        """Reserve the viewport by writing 'height' blank lines."""
        self._stream.write("\n" * self.height)
        self._stream.flush()
        self._initialized = True

    def render(self, total_count: int, top: Sequence[TopEntry]) -> None:
        """
        Repaint the viewport.

        Args:
            total_count: Number of entries processed so far.
            top: Rows to display; anything past 'nb_line' is ignored.

        Raises:
            RuntimeError: If init_viewport() was never called.
        """
        if not self._initialized:
            raise RuntimeError("init_viewport() must be called before render().")

        rows = list(top[:self.nb_line])
        parts = [cursor_up(self.height)]
        parts.append(f"{CARRIAGE_RETURN}{CLEAR_LINE}{COUNT_LABEL}{self._count_fmt(total_count)}\n")
        for entry in rows:
            parts.append(f"{CLEAR_LINE}{self._size_fmt(entry.size)} {display_path(entry.path)}\n")
        parts.extend(f"{CLEAR_LINE}\n" for _ in range(self.nb_line - len(rows)))

        self._stream.write("".join(parts))
        self._stream.flush()
        self.render_count += 1
