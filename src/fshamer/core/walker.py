from __future__ import annotations

"""
Filesystem Walker.

Yields every entry below a root directory in pre-order (a directory always
comes before its contents), without following symbolic links and without
leaving the root's filesystem. Entries that cannot be read are dropped
from the stream and only logged at DEBUG level.
"""

import logging
import os
import stat
from typing import Iterator, List, Optional, Tuple

from fshamer.domain.scan_models import ScanSetupError, WalkEntry

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def walk_entries(
        root_path: str,
        max_depth: Optional[int] = None,
        count_dir_sizes: bool = False,
) -> Iterator[WalkEntry]:
    """
    Traverse a directory tree depth-first and yield its entries.

    Children are visited in name order. Only regular files contribute
    their size; directories contribute their own metadata size when
    'count_dir_sizes' is set, everything else contributes 0.

    Args:
        root_path: Directory to traverse. Yielded paths are joined from it.
        max_depth: Deepest level to yield (root = 0), None for unlimited.
        count_dir_sizes: Report directories' own st_size instead of 0.

    Yields:
        WalkEntry: The root first, then every reachable entry.

    Raises:
        ScanSetupError: If the root itself cannot be inspected.
    """
    try:
        root_st = os.stat(root_path)
    except OSError as e:
        raise ScanSetupError(f"Cannot access '{root_path}': {e}") from e

    if not stat.S_ISDIR(root_st.st_mode):
        raise ScanSetupError(f"'{root_path}' is not a directory.")

    root_dev = root_st.st_dev
    yield WalkEntry(
        path=root_path,
        size=root_st.st_size if count_dir_sizes else 0,
        is_dir=True,
        depth=0,
    )

    if max_depth is not None and max_depth < 1:
        return

    # Stack of pending children per open directory; iterative to avoid recursion limits
    stack: List[Tuple[Iterator[os.DirEntry], int]] = []
    children = _list_dir(root_path)
    if children:
        stack.append((iter(children), 1))

    while stack:
        pending, depth = stack[-1]
        entry = next(pending, None)
        if entry is None:
            stack.pop()
            continue

        resolved = _inspect(entry, root_dev, count_dir_sizes)
        if resolved is None:
            continue

        size, is_dir = resolved
        yield WalkEntry(path=entry.path, size=size, is_dir=is_dir, depth=depth)

        if is_dir and (max_depth is None or depth < max_depth):
            sub = _list_dir(entry.path)
            if sub:
                stack.append((iter(sub), depth + 1))


# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _list_dir(path: str) -> List[os.DirEntry]:
    """Read and sort the entries of a directory, empty on failure."""
    try:
        with os.scandir(path) as it:
            entries = list(it)
    except OSError as e:
        logger.debug(f"Skipping unreadable directory '{path}': {e}")
        return []
    entries.sort(key=lambda e: e.name)
    return entries


def _inspect(entry: os.DirEntry, root_dev: int, count_dir_sizes: bool) -> Optional[Tuple[int, bool]]:
    """
    Resolve the contribution of a directory entry.

    Returns:
        Optional[Tuple[int, bool]]: (size, is_dir), or None if the entry
                                    must be dropped.
    """
    try:
        st = entry.stat(follow_symlinks=False)
    except OSError as e:
        logger.debug(f"Skipping unreadable entry '{entry.path}': {e}")
        return None

    if stat.S_ISDIR(st.st_mode):
        if st.st_dev != root_dev:
            logger.debug(f"Not crossing filesystem boundary at '{entry.path}'")
            return None
        return (st.st_size if count_dir_sizes else 0), True

    if stat.S_ISREG(st.st_mode):
        return st.st_size, False

    # Symlinks, sockets, devices
    return 0, False
