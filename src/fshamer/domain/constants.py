from __future__ import annotations

"""
Domain Constants.

Centralizes defaults shared by the CLI, the validator and the terminal
viewport.
"""

from typing import List

APP_NAME = "fshamer"

# Upper bound for the auto-detected number of viewport rows
DEFAULT_PRINT_N = 28

# Rows left free under the viewport when the line count is auto-detected
TERMINAL_RESERVED_ROWS = 2

DEFAULT_INTERVAL_MS = 200
DEFAULT_ROOT_PATH = "."

COUNT_LABEL = "Total file count: "

# Decimal prefixes used for the entry counter (1 k = 1000)
COUNT_SUFFIXES: List[str] = ["", "k", "M", "G", "T", "P", "E", "Z", "Y"]

# ANSI control sequences
CLEAR_LINE = "\x1b[2K"
CARRIAGE_RETURN = "\r"
