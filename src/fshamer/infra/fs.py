from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Path normalization and pre-flight checks on the scan root.
"""

import os
from typing import Optional


def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a directory path string into an absolute filesystem path.

    Handles environment variable expansion ($VAR) and user home shortcuts
    (~/). Reverts to fallback if the input is empty.

    Args:
        path: Raw input path string.
        fallback: Default path to use if the input is empty.

    Returns:
        str: Normalized absolute path.
    """
    p = (path or "").strip()
    if not p:
        p = fallback
    p = os.path.expandvars(os.path.expanduser(p))
    return os.path.abspath(p)


def check_scan_root(path: str) -> Optional[str]:
    """
    Verify that a path can be used as the scan root.

    Args:
        path: Absolute path to inspect.

    Returns:
        Optional[str]: A description of the problem, or None if usable.
    """
    if not os.path.exists(path):
        return f"Path does not exist: {path}"
    if not os.path.isdir(path):
        return f"Path is not a directory: {path}"
    if not os.access(path, os.R_OK | os.X_OK):
        return f"Path is not readable: {path}"
    return None
