from __future__ import annotations

"""
Scan Domain Data Models.

Defines the structures exchanged between the walker, the aggregator, the
selector and the interface layers.
"""

from dataclasses import dataclass, field
from typing import List, Optional

# -----------------------------------------------------------------------------
# TRAVERSAL MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class WalkEntry:
    """
    One filesystem entry produced by the walker.

    Attributes:
        path: Path of the entry, joined from the scan root.
        size: Bytes contributed by the entry itself.
        is_dir: Whether the entry is a directory.
        depth: Distance from the scan root (root = 0).
    """
    path: str
    size: int
    is_dir: bool
    depth: int = 0


@dataclass
class DirNode:
    """
    A directory known to the aggregator.

    Attributes:
        path: Canonical key of the node.
        cumulative_size: Bytes of the directory and everything recorded below it.
        parent: Arena index of the parent node, None for the scan root.
    """
    path: str
    cumulative_size: int = 0
    parent: Optional[int] = None


@dataclass(frozen=True)
class TopEntry:
    """A (path, size) row of the top-K list."""
    path: str
    size: int

# -----------------------------------------------------------------------------
# CONFIGURATION & RESULT MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class ScanConfig:
    """
    Validated, immutable scan parameters.

    Attributes:
        root_path: Absolute path of the directory to scan.
        interval_ms: Milliseconds between live refreshes, 0 disables them.
        nb_line: Number of directory rows in the viewport (K).
        no_parent: Hide directories that are ancestors of another listed one.
        max_depth: Maximum traversal depth, None for unlimited.
        count_dir_sizes: Add each directory's own metadata size to the totals.
    """
    root_path: str
    interval_ms: int
    nb_line: int
    no_parent: bool = False
    max_depth: Optional[int] = None
    count_dir_sizes: bool = False

    @property
    def live(self) -> bool:
        return self.interval_ms > 0

    @property
    def viewport_height(self) -> int:
        return self.nb_line + 1


@dataclass(frozen=True)
class ScanResult:
    """
    Outcome of a completed scan.

    Attributes:
        root_path: Directory that was scanned.
        total_count: Number of entries yielded by the walker.
        total_size: Cumulative size of the root node.
        render_count: Number of viewport repaints, final one included.
        elapsed: Wall-clock duration of the scan in seconds.
        top: The final top-K list.
    """
    root_path: str
    total_count: int
    total_size: int
    render_count: int
    elapsed: float
    top: List[TopEntry] = field(default_factory=list)


class ScanSetupError(Exception):
    """Raised when the scan cannot start (unusable root path)."""
