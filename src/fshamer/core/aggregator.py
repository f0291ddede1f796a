from __future__ import annotations

"""
Incremental Size Aggregation Engine.

Maps every directory discovered under the scan root to its cumulative size.
Nodes live in a flat arena and reference their parent by index; a path index
gives O(1) lookup by key. Recording an entry walks the parent links upward,
creating any ancestor that has not been seen yet, so totals are correct
whatever order the walker yields entries in.
"""

import logging
import os
from typing import Dict, List, Optional

from fshamer.domain.scan_models import DirNode, WalkEntry

logger = logging.getLogger(__name__)


class SizeAggregator:
    """
    Owner of the path -> cumulative size state of one scan.

    The root node exists with size 0 as soon as the aggregator is built.
    Sizes only ever grow and nodes are never removed.
    """

    def __init__(self, root_path: str):
        """
        Initialize the arena with the root node.

        Args:
            root_path: Canonical path of the scan root. Every recorded path
                       must be this path or live below it.
        """
        self._root = root_path
        self._nodes: List[DirNode] = [DirNode(path=root_path, cumulative_size=0, parent=None)]
        self._index: Dict[str, int] = {root_path: 0}

    # -------------------------------------------------------------------------
    # RECORDING
    # -------------------------------------------------------------------------

    def record_entry(self, path: str, size: int, is_dir: bool) -> None:
        """
        Fold one walker entry into the totals.

        The entry's size is added to every ancestor directory, and to the
        entry itself when it is a directory. A directory that is new to the
        aggregator starts at 0 before its own size is applied, so that size
        is counted exactly once.

        Args:
            path: Path of the entry.
            size: Bytes contributed by the entry itself.
            is_dir: Whether the entry is a directory.

        Raises:
            ValueError: If the path is not the root or below it.
        """
        if is_dir:
            start = self._ensure_node(path)
        elif path == self._root:
            start = 0
        else:
            start = self._ensure_node(os.path.dirname(path))

        if size:
            self._propagate(start, size)

    def record(self, entry: WalkEntry) -> None:
        """Convenience wrapper around record_entry() for walker entries."""
        self.record_entry(entry.path, entry.size, entry.is_dir)

    # -------------------------------------------------------------------------
    # QUERIES
    # -------------------------------------------------------------------------

    def size_of(self, path: str) -> Optional[int]:
        """Return the cumulative size of a known directory, None if unknown."""
        idx = self._index.get(path)
        if idx is None:
            return None
        return self._nodes[idx].cumulative_size

    def snapshot(self) -> Dict[str, int]:
        """
        Copy the current totals.

        Returns:
            Dict[str, int]: Mapping of directory path to cumulative size,
                            detached from further updates.
        """
        return {node.path: node.cumulative_size for node in self._nodes}

    def __contains__(self, path: object) -> bool:
        return path in self._index

    def __len__(self) -> int:
        return len(self._nodes)

    # -------------------------------------------------------------------------
    # PRIVATE HELPERS
    # -------------------------------------------------------------------------

    def _ensure_node(self, path: str) -> int:
        """
        Return the arena index of a directory, creating it and any missing
        ancestors on the way up to a known node.
        """
        idx = self._index.get(path)
        if idx is not None:
            return idx

        missing: List[str] = []
        current = path
        while current not in self._index:
            parent = os.path.dirname(current)
            if not parent or parent == current:
                raise ValueError(f"Path '{path}' is outside the scan root '{self._root}'.")
            missing.append(current)
            current = parent

        if len(missing) > 1:
            logger.debug(f"Creating {len(missing) - 1} ancestor node(s) ahead of '{path}'")

        idx = self._index[current]
        for p in reversed(missing):
            self._nodes.append(DirNode(path=p, cumulative_size=0, parent=idx))
            idx = len(self._nodes) - 1
            self._index[p] = idx
        return idx

    def _propagate(self, start: int, size: int) -> None:
        """Add 'size' to a node and every ancestor up to the root."""
        idx: Optional[int] = start
        while idx is not None:
            node = self._nodes[idx]
            node.cumulative_size += size
            idx = node.parent
