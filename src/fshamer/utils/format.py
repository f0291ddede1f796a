from __future__ import annotations

"""
Human-Readable Number Formatting.

Thin wrappers over rich.filesize producing the decimal (powers of 1000)
labels used by the viewport.
"""

from rich.filesize import decimal, pick_unit_and_suffix

from fshamer.domain.constants import COUNT_SUFFIXES

SIZE_COLUMN_WIDTH = 10


def format_size(size: int) -> str:
    """
    Render a byte count with decimal units.

    Args:
        size: Number of bytes.

    Returns:
        str: Label such as '512 bytes' or '1.50 kB'.
    """
    return decimal(size, precision=2)


def format_count(count: int) -> str:
    """
    Render an entry count with decimal prefixes.

    Args:
        count: Number of entries.

    Returns:
        str: Label such as '999' or '12.50 k'.
    """
    unit, suffix = pick_unit_and_suffix(count, COUNT_SUFFIXES, 1000)
    if unit == 1:
        return str(count)
    return f"{count / unit:.2f} {suffix}"


def format_size_column(size: int) -> str:
    """Right-align a size label to the viewport's size column."""
    return format_size(size).rjust(SIZE_COLUMN_WIDTH)


def display_path(path: str) -> str:
    """
    Escape non-printable characters of a path for single-line display.

    A newline or other control character in a file name would otherwise
    split the row and shift every following line of the viewport.

    Args:
        path: Raw path, possibly holding surrogate-escaped bytes.

    Returns:
        str: The path with control characters written as '\\n', '\\x1b', ...
    """
    if path.isprintable():
        return path
    return "".join(
        c if c.isprintable() else c.encode("unicode_escape").decode("ascii")
        for c in path
    )
