from __future__ import annotations

"""
Configuration Domain Defaults.

Provides the baseline configuration dictionary that CLI overrides are merged
into before validation. Nothing is persisted between runs.
"""

from typing import Any, Dict

from fshamer.domain.constants import DEFAULT_INTERVAL_MS, DEFAULT_ROOT_PATH


def get_default_config() -> Dict[str, Any]:
    """
    Return a fresh dictionary with the default scan configuration.

    Returns:
        Dict[str, Any]: Default values for every known configuration key.
    """
    return {
        "root_path": DEFAULT_ROOT_PATH,
        "interval_ms": DEFAULT_INTERVAL_MS,
        # 0 means auto-detect from the terminal height
        "nb_line": 0,
        "no_parent": False,
        "max_depth": None,
        "count_dir_sizes": False,
    }
