from __future__ import annotations

"""
Integration tests for Logging Infrastructure.

Verifies the QueueListener architecture, idempotency of configuration,
file output and rotation.
"""

import logging
import time
from logging.handlers import QueueListener
from pathlib import Path

import pytest

from fshamer.infra.logging import (
    _CONFIGURED_FLAG_ATTR,
    _HANDLER_TAG_ATTR,
    _QUEUE_LISTENER_ATTR,
    LoggingConfig,
    configure_logging,
    shutdown_logging,
)


@pytest.fixture(autouse=True)
def reset_logging() -> None:
    """Clean up root logger handlers before and after each test."""
    _reset()
    yield
    _reset()


def _reset() -> None:
    root = logging.getLogger()

    listener = getattr(root, _QUEUE_LISTENER_ATTR, None)
    if listener and isinstance(listener, QueueListener):
        shutdown_logging()

    for h in list(root.handlers):
        if getattr(h, _HANDLER_TAG_ATTR, False):
            root.removeHandler(h)
            h.close()

    if hasattr(root, _CONFIGURED_FLAG_ATTR):
        delattr(root, _CONFIGURED_FLAG_ATTR)


def test_logging_idempotency() -> None:
    """Multiple config calls do not duplicate handlers."""
    cfg = LoggingConfig(level="INFO", console=True)

    configure_logging(cfg)
    root = logging.getLogger()
    initial_handler_count = len(root.handlers)

    configure_logging(cfg)
    assert len(root.handlers) == initial_handler_count, "Handlers were duplicated."


def test_force_reconfigures_level() -> None:
    configure_logging(LoggingConfig(level="WARNING"))
    configure_logging(LoggingConfig(level="DEBUG"), force=True)

    assert logging.getLogger().level == logging.DEBUG


def test_unknown_level_defaults_to_warning() -> None:
    configure_logging(LoggingConfig(level="chatty"))
    assert logging.getLogger().level == logging.WARNING


def test_file_output(tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "scan.log"
    configure_logging(LoggingConfig(level="DEBUG", console=False, log_file=str(log_file)))

    logging.getLogger("fshamer.test").debug("walker detail")
    shutdown_logging()

    content = log_file.read_text(encoding="utf-8")
    assert "walker detail" in content
    assert "fshamer.test" in content


def test_log_rotation(tmp_path: Path) -> None:
    """File rotation when the size limit is exceeded."""
    log_file = tmp_path / "test_rotate.log"
    cfg = LoggingConfig(
        level="DEBUG",
        console=False,
        log_file=str(log_file),
        max_bytes=100,
        backup_count=1,
    )

    configure_logging(cfg)
    logger = logging.getLogger("test_rotate")

    for _ in range(10):
        logger.debug("This is a long log message to trigger rotation." * 5)

    # Give time for the QueueListener to process
    time.sleep(0.5)

    backup_file = tmp_path / "test_rotate.log.1"
    assert log_file.exists()
    assert backup_file.exists(), "Rotation backup file was not created."


def test_queue_listener_architecture() -> None:
    """The root logger uses a QueueHandler-based architecture."""
    configure_logging(LoggingConfig(level="INFO", console=True))

    root = logging.getLogger()
    queue_handlers = [h for h in root.handlers if getattr(h, _HANDLER_TAG_ATTR, False)]

    assert len(queue_handlers) > 0
    assert getattr(root, _QUEUE_LISTENER_ATTR) is not None


def test_shutdown_detaches_handlers_and_allows_reconfigure() -> None:
    configure_logging(LoggingConfig(level="INFO", console=True))
    shutdown_logging()

    root = logging.getLogger()
    assert not [h for h in root.handlers if getattr(h, _HANDLER_TAG_ATTR, False)]
    assert getattr(root, _QUEUE_LISTENER_ATTR) is None
    assert not getattr(root, _CONFIGURED_FLAG_ATTR)

    # No force needed: the subsystem is configurable again
    configure_logging(LoggingConfig(level="INFO", console=True))
    assert len([h for h in root.handlers if getattr(h, _HANDLER_TAG_ATTR, False)]) == 1
    assert getattr(root, _QUEUE_LISTENER_ATTR) is not None


def test_shutdown_twice_is_harmless() -> None:
    configure_logging(LoggingConfig(level="INFO", console=True))
    shutdown_logging()
    shutdown_logging()

    assert getattr(logging.getLogger(), _QUEUE_LISTENER_ATTR) is None


@pytest.mark.parametrize("debug, level", [(False, "WARNING"), (True, "DEBUG")])
def test_cli_settings(debug: bool, level: str) -> None:
    cfg = LoggingConfig.for_cli(debug, "/tmp/fshamer.log")

    assert cfg.level == level
    assert cfg.console is True
    assert cfg.log_file == "/tmp/fshamer.log"


def test_console_records_are_prefixed(capsys: pytest.CaptureFixture[str]) -> None:
    configure_logging(LoggingConfig(level="WARNING", console=True))

    logging.getLogger("fshamer.test").warning("cannot read entry")
    shutdown_logging()

    assert "fshamer: WARNING: cannot read entry" in capsys.readouterr().err
