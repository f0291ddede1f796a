from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared fixtures: a deterministic directory tree and a manual clock.
"""

import os
import sys
from pathlib import Path

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
class ManualClock:
    """Monotonic clock advanced explicitly by the test."""

    def __init__(self, start: float = 100.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def manual_clock() -> ManualClock:
    return ManualClock()


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """
    Create the reference tree.

    Structure:
    /root
      /a
        file1   (100 bytes)
        /b
          file2 (200 bytes)
      /c
        file3   (50 bytes)
    """
    root = tmp_path / "root"
    (root / "a" / "b").mkdir(parents=True)
    (root / "c").mkdir()
    (root / "a" / "file1").write_bytes(b"x" * 100)
    (root / "a" / "b" / "file2").write_bytes(b"x" * 200)
    (root / "c" / "file3").write_bytes(b"x" * 50)
    return root
