from __future__ import annotations

"""
Path Ancestry Helpers.

Compares paths as sequences of components instead of raw strings, so that
'/foo' is never mistaken for an ancestor of '/foobar'.
"""

import os
from typing import Tuple

PathParts = Tuple[str, ...]


def path_parts(path: str) -> PathParts:
    """
    Split a path into its normalized components.

    The leading separator of an absolute path is kept as its own component
    so that '/a' and 'a' do not compare equal.

    Args:
        path: Path string to decompose.

    Returns:
        PathParts: Tuple of components.
    """
    norm = os.path.normpath(path)
    drive, tail = os.path.splitdrive(norm)
    head: PathParts = ()
    if drive or tail.startswith(os.sep):
        head = (drive + os.sep,) if tail.startswith(os.sep) else (drive,)
    rest = tuple(p for p in tail.split(os.sep) if p and p != os.curdir)
    return head + rest


def is_strict_ancestor_parts(ancestor: PathParts, descendant: PathParts) -> bool:
    """Return True if 'descendant' starts with every component of 'ancestor' and is longer."""
    return len(ancestor) < len(descendant) and descendant[:len(ancestor)] == ancestor


def is_strict_ancestor(ancestor: str, descendant: str) -> bool:
    """
    Check whether one path is a strict ancestor of another.

    Args:
        ancestor: Candidate parent path.
        descendant: Candidate child path.

    Returns:
        bool: True if 'ancestor' contains 'descendant' and they differ.
    """
    return is_strict_ancestor_parts(path_parts(ancestor), path_parts(descendant))
