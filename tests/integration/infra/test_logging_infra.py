from __future__ import annotations

"""
Integration tests for Logging Infrastructure.

Verifies the QueueListener architecture, idempotency of configuration,
and log file rotation logic.
"""

import logging
import time
from pathlib import Path
from logging.handlers import QueueListener

import pytest

from filereq.infra.logging import (
    LoggingConfig,
    _CONFIGURED_FLAG_ATTR,
    _HANDLER_TAG_ATTR,
    _QUEUE_LISTENER_ATTR,
    configure_logging,
    logging_config_from,
)


@pytest.fixture(autouse=True)
def reset_logging() -> None:
    """Clean up root logger handlers before and after each test."""
    _reset_root()
    yield
    _reset_root()


def _reset_root() -> None:
    root = logging.getLogger()

    listener = getattr(root, _QUEUE_LISTENER_ATTR, None)
    if listener and isinstance(listener, QueueListener):
        if getattr(listener, "_thread", None) is not None:
            listener.stop()
        setattr(root, _QUEUE_LISTENER_ATTR, None)

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
    configure_logging(LoggingConfig(level="INFO"))
    configure_logging(LoggingConfig(level="DEBUG"), force=True)

    assert logging.getLogger().level == logging.DEBUG


def test_log_rotation(tmp_path: Path) -> None:
    """File rotation happens when the size limit is exceeded."""
    log_file = tmp_path / "logs" / "filereq.log"
    cfg = LoggingConfig(
        level="DEBUG",
        console=False,
        log_file=str(log_file),
        max_bytes=100,
        backup_count=1
    )

    configure_logging(cfg)
    logger = logging.getLogger("filereq.test_rotate")

    for _ in range(10):
        logger.debug("Probing a long list of index files to trigger rotation." * 5)

    # Give time for the QueueListener to process
    time.sleep(0.5)

    assert log_file.exists()
    assert (tmp_path / "logs" / "filereq.log.1").exists(), "Rotation backup file was not created."


def test_queue_listener_architecture() -> None:
    """The root logger uses a tagged QueueHandler feeding a listener."""
    configure_logging(LoggingConfig(level="INFO", console=True))

    root = logging.getLogger()
    tagged = [h for h in root.handlers if getattr(h, _HANDLER_TAG_ATTR, False)]

    assert len(tagged) == 1
    assert getattr(root, _QUEUE_LISTENER_ATTR) is not None


def test_no_handlers_leaves_root_unconfigured() -> None:
    configure_logging(LoggingConfig(console=False, log_file=None))

    root = logging.getLogger()
    assert not any(getattr(h, _HANDLER_TAG_ATTR, False) for h in root.handlers)
    assert not getattr(root, _CONFIGURED_FLAG_ATTR, False)


def test_logging_config_from_validated_config(tmp_path: Path) -> None:
    log_file = tmp_path / "filereq.log"

    cfg = logging_config_from({"log_level": "DEBUG", "log_file": str(log_file)})
    assert cfg.level == "DEBUG"
    assert cfg.log_file == str(log_file)
    assert cfg.console is True

    assert logging_config_from({"log_level": "INFO", "log_file": None}).log_file is None
