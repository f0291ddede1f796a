from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, merging of CLI overrides
over the defaults, validation, pre-flight checks on the root directory and
execution of the scan with its live viewport.
"""

import sys
from typing import Any, Dict, List, Optional, TextIO

from fshamer.core.scan import run_scan
from fshamer.core.validator import validate_config
from fshamer.domain.config import get_default_config
from fshamer.domain.scan_models import ScanSetupError
from fshamer.infra.fs import check_scan_root
from fshamer.infra.logging import LoggingConfig, configure_logging, get_logger
from fshamer.interface.cli import args as cli_args
from fshamer.interface.terminal.renderer import LiveRenderer

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None, stdout: Optional[TextIO] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.
        stdout: Stream for the viewport. Defaults to sys.stdout.

    Returns:
        int: Process exit code (0 success, 1 scan failure, 2 unusable root,
             130 interrupted).
    """
    # 1. Argument parsing phase (invalid numbers exit here with status 2)
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Logging bootstrap
    configure_logging(LoggingConfig.for_cli(args.debug, args.log_file))

    logger.debug("CLI execution initiated. Resolving configuration...")

    # 3. Merge and validate
    raw_conf = _merge_config(get_default_config(), cli_args.args_to_overrides(args))
    config, warnings = validate_config(raw_conf, strict=False)
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    # 4. Pre-flight root verification
    problem = check_scan_root(config.root_path)
    if problem:
        logger.error(problem)
        print(f"ERROR: {problem}", file=sys.stderr)
        return 2

    # 5. Scan phase
    renderer = LiveRenderer(config.nb_line, stream=stdout)
    try:
        result = run_scan(config, renderer)
    except ScanSetupError as e:
        logger.error(str(e))
        print(f"ERROR: {e}", file=sys.stderr)
        return 2
    except KeyboardInterrupt:
        logger.warning("Scan interrupted by user.")
        print("Interrupted.", file=sys.stderr)
        return 130

    logger.debug(f"Rendered {result.render_count} time(s) in {result.elapsed:.2f}s")
    return 0

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Shallow merge of override values into the base configuration.

    Only known keys are merged and None overrides are ignored.

    Args:
        base: The default configuration dictionary.
        overrides: New values to inject.

    Returns:
        Dict[str, Any]: The merged configuration.
    """
    out = dict(base)
    for k in base:
        if k in overrides and overrides[k] is not None:
            out[k] = overrides[k]
    return out


if __name__ == "__main__":
    sys.exit(main())
