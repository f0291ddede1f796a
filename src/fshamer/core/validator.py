from __future__ import annotations

"""
Configuration Validation Service.

Converts a raw configuration dictionary (CLI overrides merged over the
defaults) into an immutable ScanConfig. Handles type coercion, path
normalization and auto-detection of the viewport size.
"""

import logging
from typing import Any, Dict, List, Optional, Tuple

from fshamer.domain.config import get_default_config
from fshamer.domain.constants import DEFAULT_ROOT_PATH
from fshamer.domain.scan_models import ScanConfig
from fshamer.infra.fs import normalize_path
from fshamer.infra.terminal import resolve_line_count

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[ScanConfig, List[str]]:
    """
    Validate and normalize a configuration dictionary.

    Missing keys take their default values. In lenient mode invalid values
    fall back to the default and a warning is collected; in strict mode
    they raise.

    Args:
        config: Raw configuration data (usually a dictionary).
        strict: If True, raise on invalid values instead of coercing.

    Returns:
        Tuple[ScanConfig, List[str]]: The validated configuration and the
                                      warnings collected on the way.

    Raises:
        TypeError: In strict mode, on a value of the wrong type.
        ValueError: In strict mode, on a negative numeric value.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using defaults.")
        logger.warning(msg)
        config = {}

    merged: Dict[str, Any] = dict(defaults)
    merged.update(config)

    interval_ms = _as_non_negative_int(
        merged.get("interval_ms"), defaults["interval_ms"], "interval_ms", warnings, strict
    )
    nb_line = _as_non_negative_int(
        merged.get("nb_line"), defaults["nb_line"], "nb_line", warnings, strict
    )
    max_depth = _as_optional_depth(merged.get("max_depth"), warnings, strict)

    root_raw = merged.get("root_path")
    if root_raw is not None and not isinstance(root_raw, str):
        msg = f"Invalid field 'root_path': expected str, received {type(root_raw).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using fallback.")
        root_raw = None

    clean = ScanConfig(
        root_path=normalize_path(root_raw, DEFAULT_ROOT_PATH),
        interval_ms=interval_ms,
        nb_line=resolve_line_count(nb_line),
        no_parent=_as_bool(merged.get("no_parent"), "no_parent", warnings, strict),
        max_depth=max_depth,
        count_dir_sizes=_as_bool(merged.get("count_dir_sizes"), "count_dir_sizes", warnings, strict),
    )
    return clean, warnings


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _as_non_negative_int(
        value: Any,
        fallback: Optional[int],
        field: str,
        warnings: List[str],
        strict: bool,
) -> Optional[int]:
    """Validate integers that must be >= 0, accepting numeric strings."""
    if value is None:
        return fallback

    parsed = _parse_int(value)
    if parsed is None:
        msg = f"Invalid field '{field}': expected int, received {value!r}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using fallback.")
        return fallback

    if parsed < 0:
        msg = f"Invalid field '{field}': must be >= 0, received {parsed}."
        if strict:
            raise ValueError(msg)
        warnings.append(f"{msg} Using fallback.")
        return fallback

    return parsed


def _as_optional_depth(value: Any, warnings: List[str], strict: bool) -> Optional[int]:
    """Validate the optional traversal depth; None means unlimited."""
    if value is None:
        return None
    return _as_non_negative_int(value, None, "max_depth", warnings, strict)


def _as_bool(value: Any, field: str, warnings: List[str], strict: bool) -> bool:
    """Validate boolean flags."""
    if value is None:
        return False
    if isinstance(value, bool):
        return value

    msg = f"Invalid field '{field}': expected bool, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return False


def _parse_int(value: Any) -> Optional[int]:
    """Return an int for ints and numeric strings, None otherwise."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None
