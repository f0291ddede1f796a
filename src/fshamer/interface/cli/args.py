from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line interface schema and translates the parsed
argparse namespace into configuration overrides.
"""

import argparse
from typing import Any, Dict

from fshamer.domain.constants import APP_NAME, DEFAULT_INTERVAL_MS, DEFAULT_PRINT_N

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the fshamer CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog=APP_NAME,
        description="Finds largest directories.",
    )

    # --- Scan Target ---
    p.add_argument(
        "-p", "--path",
        dest="root_path",
        default=None,
        help="Root directory to scan (default: current directory).",
    )
    p.add_argument(
        "-d", "--depth",
        dest="max_depth",
        type=non_negative_int,
        default=None,
        help="Maximum traversal depth below the root (default: unlimited).",
    )
    p.add_argument(
        "--count-dirs",
        dest="count_dir_sizes",
        action="store_true",
        help="Also count the metadata size of directories themselves.",
    )

    # --- Display ---
    p.add_argument(
        "-i", "--interval",
        dest="interval_ms",
        type=non_negative_int,
        default=None,
        help=f"Milliseconds between refreshes during the scan, 0 disables them "
             f"(default: {DEFAULT_INTERVAL_MS}).",
    )
    p.add_argument(
        "-n", "--nb-line", "--lines",
        dest="nb_line",
        type=non_negative_int,
        default=None,
        help=f"Number of directories to show, 0 fits the terminal height "
             f"up to {DEFAULT_PRINT_N} (default: 0).",
    )
    p.add_argument(
        "-s", "--no-parent",
        dest="no_parent",
        action="store_true",
        help="Do not show parents of the largest directories.",
    )

    # --- Diagnostics ---
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write logs to this file (rotated).",
    )

    return p


def non_negative_int(value: str) -> int:
    """argparse type accepting integers >= 0."""
    try:
        parsed = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}")
    if parsed < 0:
        raise argparse.ArgumentTypeError(f"invalid value {parsed}: must be >= 0")
    return parsed

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into a configuration dictionary.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides; None means "keep default".
    """
    overrides: Dict[str, Any] = {
        "root_path": args.root_path,
        "interval_ms": args.interval_ms,
        "nb_line": args.nb_line,
        "max_depth": args.max_depth,
    }

    if args.no_parent:
        overrides["no_parent"] = True
    if args.count_dir_sizes:
        overrides["count_dir_sizes"] = True

    return overrides
