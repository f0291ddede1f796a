from __future__ import annotations

"""
Unit tests for terminal geometry resolution.
"""

import os
from unittest.mock import patch

from fshamer.infra.terminal import resolve_line_count


def _terminal(lines: int) -> os.terminal_size:
    return os.terminal_size((80, lines))


def test_explicit_request_is_honored() -> None:
    assert resolve_line_count(50) == 50


def test_tall_terminal_is_capped() -> None:
    with patch("fshamer.infra.terminal.shutil.get_terminal_size", return_value=_terminal(100)):
        assert resolve_line_count(0) == 28


def test_short_terminal_keeps_two_rows_free() -> None:
    with patch("fshamer.infra.terminal.shutil.get_terminal_size", return_value=_terminal(12)):
        assert resolve_line_count(0) == 10


def test_tiny_terminal_never_negative() -> None:
    with patch("fshamer.infra.terminal.shutil.get_terminal_size", return_value=_terminal(1)):
        assert resolve_line_count(0) == 0


def test_custom_maximum() -> None:
    with patch("fshamer.infra.terminal.shutil.get_terminal_size", return_value=_terminal(40)):
        assert resolve_line_count(0, default_max=5) == 5
