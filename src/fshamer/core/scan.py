from __future__ import annotations

"""
Scan Driver.

Pulls entries from the walker one at a time, folds them into the
aggregator and repaints the viewport whenever the refresh ticker fires.
A final repaint always happens once traversal ends. Everything runs on
the calling thread.
"""

import logging
import time
from typing import Callable, Iterable, Optional

from fshamer.core.aggregator import SizeAggregator
from fshamer.core.selector import select_top
from fshamer.core.ticker import Clock, RefreshTicker
from fshamer.core.walker import walk_entries
from fshamer.domain.scan_models import ScanConfig, ScanResult, WalkEntry
from fshamer.interface.terminal.renderer import LiveRenderer

logger = logging.getLogger(__name__)

Walker = Callable[[ScanConfig], Iterable[WalkEntry]]


def default_walker(config: ScanConfig) -> Iterable[WalkEntry]:
    return walk_entries(
        config.root_path,
        max_depth=config.max_depth,
        count_dir_sizes=config.count_dir_sizes,
    )


def run_scan(
        config: ScanConfig,
        renderer: LiveRenderer,
        *,
        walker: Walker = default_walker,
        clock: Optional[Clock] = None,
) -> ScanResult:
    """
    Execute a full scan and drive the live viewport.

    With live refresh enabled the viewport is reserved before the first
    entry; with interval 0 it is reserved and painted exactly once, after
    traversal.

    Args:
        config: Validated scan parameters.
        renderer: Viewport to paint; its nb_line should match config.nb_line.
        walker: Entry source, defaults to the filesystem walker.
        clock: Monotonic time source in seconds.

    Returns:
        ScanResult: Totals and the final top-K list.

    Raises:
        ScanSetupError: If the root cannot be traversed.
    """
    clock = clock or time.monotonic
    started = clock()

    aggregator = SizeAggregator(config.root_path)
    ticker = RefreshTicker(config.interval_ms, clock=clock)
    total_count = 0

    def refresh() -> None:
        top = select_top(aggregator.snapshot(), config.nb_line, config.no_parent)
        renderer.render(total_count, top)

    logger.info(f"Scanning '{config.root_path}'")

    if ticker.enabled:
        renderer.init_viewport()

    for entry in walker(config):
        total_count += 1
        aggregator.record(entry)
        if ticker.due():
            refresh()

    if not ticker.enabled:
        renderer.init_viewport()

    top = select_top(aggregator.snapshot(), config.nb_line, config.no_parent)
    renderer.render(total_count, top)

    elapsed = clock() - started
    total_size = aggregator.size_of(config.root_path) or 0
    logger.info(
        f"Scan finished: {total_count} entries, {len(aggregator)} directories, "
        f"{total_size} bytes in {elapsed:.2f}s"
    )

    return ScanResult(
        root_path=config.root_path,
        total_count=total_count,
        total_size=total_size,
        render_count=renderer.render_count,
        elapsed=elapsed,
        top=top,
    )
