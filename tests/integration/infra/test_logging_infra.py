from __future__ import annotations

"""
Integration tests for Logging Infrastructure.

Verifies the QueueListener architecture, idempotency of configuration,
log file rotation and shutdown.
"""

import logging
import time
from logging.handlers import QueueListener
from pathlib import Path
from unittest.mock import patch

import pytest

from docsindex.infra.logging import (
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
    root = logging.getLogger()

    def _reset() -> None:
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

    _reset()
    yield
    _reset()


def _our_handlers() -> list:
    return [h for h in logging.getLogger().handlers if getattr(h, _HANDLER_TAG_ATTR, False)]


def test_logging_idempotency() -> None:
    """Multiple config calls must not duplicate handlers."""
    cfg = LoggingConfig(level="INFO", console=True)

    configure_logging(cfg)
    initial_handler_count = len(_our_handlers())
    configure_logging(cfg)

    assert len(_our_handlers()) == initial_handler_count == 1


def test_force_reconfigures_level() -> None:
    configure_logging(LoggingConfig(level="INFO", console=True))
    configure_logging(LoggingConfig(level="DEBUG", console=True), force=True)

    assert logging.getLogger().level == logging.DEBUG
    assert len(_our_handlers()) == 1


def test_log_rotation(tmp_path: Path) -> None:
    """File rotation happens once the size limit is exceeded."""
    log_file = tmp_path / "logs" / "docsindex.log"
    cfg = LoggingConfig(level="DEBUG", console=False, log_file=str(log_file))

    with patch("docsindex.infra.logging.core.LOG_MAX_BYTES", 100), \
            patch("docsindex.infra.logging.core.LOG_BACKUP_COUNT", 1):
        configure_logging(cfg)
    logger = logging.getLogger("docsindex.test_rotate")
    for _ in range(10):
        logger.debug("Indexed a rather long documentation path for rotation." * 3)

    # Give the QueueListener time to drain
    time.sleep(0.5)

    assert log_file.exists()
    assert (tmp_path / "logs" / "docsindex.log.1").exists(), "Rotation backup file was not created."


def test_queue_listener_architecture() -> None:
    configure_logging(LoggingConfig(level="INFO", console=True))

    root = logging.getLogger()
    assert len(_our_handlers()) > 0
    assert getattr(root, _QUEUE_LISTENER_ATTR) is not None
    assert getattr(root, _CONFIGURED_FLAG_ATTR) is True


def test_shutdown_detaches_handlers(tmp_path: Path) -> None:
    log_file = tmp_path / "run.log"
    configure_logging(LoggingConfig(level="INFO", console=False, log_file=str(log_file)))
    logging.getLogger("docsindex.test").info("Wrote index")

    shutdown_logging()

    root = logging.getLogger()
    assert _our_handlers() == []
    assert not hasattr(root, _CONFIGURED_FLAG_ATTR)
    assert "Wrote index" in log_file.read_text(encoding="utf-8")
