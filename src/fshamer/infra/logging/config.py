from __future__ import annotations

"""
Logging Configuration Models.

Settings for the scan's diagnostics. The viewport owns stdout, so console
records go to stderr and stay at WARNING unless --debug is given.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional

# stderr lines are prefixed with the program name so they stand out above the viewport
CONSOLE_FORMAT = "fshamer: %(levelname)s: %(message)s"
FILE_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)-7s %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_LEVEL_MAP: Dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


@dataclass(frozen=True)
class LoggingConfig:
    """
    Immutable settings for the logging subsystem.

    Attributes:
        level: Minimum severity level to capture.
        console: Send records to stderr.
        log_file: Optional path of a rotating log file (--log-file).
        max_bytes: Size of one log file segment before rotation.
        backup_count: Rotated segments kept next to the active file.
    """
    level: str = "WARNING"
    console: bool = True
    log_file: Optional[str] = None

    # A --debug run over a large tree logs every dropped entry
    max_bytes: int = 1024 * 1024
    backup_count: int = 1

    @classmethod
    def for_cli(cls, debug: bool, log_file: Optional[str] = None) -> LoggingConfig:
        """Build the settings matching the --debug and --log-file flags."""
        return cls(level="DEBUG" if debug else "WARNING", console=True, log_file=log_file)
