from __future__ import annotations

"""
Unit tests for the Configuration Validation Service.

Verifies default injection, type coercion in lenient mode, exceptions in
strict mode and resolution of the auto line count.
"""

import os
from unittest.mock import patch

import pytest

from fshamer.core.validator import validate_config
from fshamer.domain.constants import DEFAULT_INTERVAL_MS, DEFAULT_PRINT_N
from fshamer.domain.scan_models import ScanConfig


def test_defaults_are_applied() -> None:
    with patch("fshamer.core.validator.resolve_line_count", return_value=DEFAULT_PRINT_N):
        config, warnings = validate_config({})

    assert warnings == []
    assert isinstance(config, ScanConfig)
    assert config.root_path == os.path.abspath(".")
    assert config.interval_ms == DEFAULT_INTERVAL_MS
    assert config.nb_line == DEFAULT_PRINT_N
    assert config.no_parent is False
    assert config.max_depth is None
    assert config.live is True
    assert config.viewport_height == DEFAULT_PRINT_N + 1


def test_explicit_values_are_kept(tmp_path) -> None:
    raw = {
        "root_path": str(tmp_path),
        "interval_ms": 0,
        "nb_line": 5,
        "no_parent": True,
        "max_depth": 2,
        "count_dir_sizes": True,
    }

    config, warnings = validate_config(raw)

    assert warnings == []
    assert config.root_path == str(tmp_path)
    assert config.interval_ms == 0
    assert config.live is False
    assert config.nb_line == 5
    assert config.no_parent is True
    assert config.max_depth == 2
    assert config.count_dir_sizes is True


def test_numeric_strings_are_coerced() -> None:
    config, warnings = validate_config({"interval_ms": " 300 ", "nb_line": "4"})

    assert warnings == []
    assert config.interval_ms == 300
    assert config.nb_line == 4


def test_lenient_mode_falls_back_with_warnings() -> None:
    config, warnings = validate_config(
        {"interval_ms": "abc", "nb_line": 3, "max_depth": -1, "no_parent": "yes"}
    )

    assert config.interval_ms == DEFAULT_INTERVAL_MS
    assert config.max_depth is None
    assert config.no_parent is False
    assert len(warnings) == 3


def test_non_dict_config_uses_defaults() -> None:
    config, warnings = validate_config(["not", "a", "dict"])

    assert config.interval_ms == DEFAULT_INTERVAL_MS
    assert any("Invalid config type" in w for w in warnings)


def test_strict_mode_raises() -> None:
    with pytest.raises(TypeError):
        validate_config({"interval_ms": "abc"}, strict=True)
    with pytest.raises(ValueError):
        validate_config({"nb_line": -2}, strict=True)
    with pytest.raises(TypeError):
        validate_config({"no_parent": 1}, strict=True)


def test_root_path_expands_user() -> None:
    config, _ = validate_config({"root_path": "~", "nb_line": 1})
    assert config.root_path == os.path.abspath(os.path.expanduser("~"))
