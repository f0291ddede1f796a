from __future__ import annotations

"""
Top-K Directory Selection.

Turns an aggregator snapshot into the ordered list shown in the viewport.
Ordering is size descending with ties broken by path ascending, so repeated
selections over the same snapshot are identical.
"""

from typing import Iterable, List, Mapping, Tuple, Union

from fshamer.core.ancestry import PathParts, is_strict_ancestor_parts, path_parts
from fshamer.domain.scan_models import TopEntry

Snapshot = Union[Mapping[str, int], Iterable[Tuple[str, int]]]


def select_top(snapshot: Snapshot, k: int, suppress_ancestors: bool = False) -> List[TopEntry]:
    """
    Select the K largest directories of a snapshot.

    Args:
        snapshot: Mapping (or iterable of pairs) of path to cumulative size.
        k: Maximum number of entries to return.
        suppress_ancestors: When True, a directory is dropped from the result
                            as soon as one of its descendants is selected.

    Returns:
        List[TopEntry]: At most k entries, largest first.
    """
    if k <= 0:
        return []

    items = snapshot.items() if isinstance(snapshot, Mapping) else snapshot
    ordered = sorted(items, key=_sort_key)

    if not suppress_ancestors:
        return [TopEntry(path=p, size=s) for p, s in ordered[:k]]

    kept: List[Tuple[PathParts, TopEntry]] = []
    for path, size in ordered:
        parts = path_parts(path)

        # A larger descendant already represents this branch
        if any(is_strict_ancestor_parts(parts, other) for other, _ in kept):
            continue

        kept = [(other, e) for other, e in kept if not is_strict_ancestor_parts(other, parts)]
        kept.append((parts, TopEntry(path=path, size=size)))
        if len(kept) >= k:
            break

    return [e for _, e in kept]


def _sort_key(item: Tuple[str, int]) -> Tuple[int, str]:
    path, size = item
    return -size, path
