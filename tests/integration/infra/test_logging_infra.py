from __future__ import annotations

"""
Integration tests for Logging Infrastructure.

Verifies the QueueListener architecture, idempotency of configuration,
log file rotation and clean shutdown.
"""

import logging
import time
from logging.handlers import QueueHandler, QueueListener
from pathlib import Path

import pytest

from dirtree.infra.logging import LoggingConfig, configure_logging, shutdown_logging
from dirtree.infra.logging.core import _CONFIGURED_FLAG_ATTR, _QUEUE_LISTENER_ATTR
from dirtree.infra.logging.handlers import _HANDLER_TAG_ATTR


@pytest.fixture(autouse=True)
def reset_logging():
    """Remove handlers installed by this package before and after each test."""
    shutdown_logging()
    yield
    shutdown_logging()


def _our_handlers():
    return [h for h in logging.getLogger().handlers if getattr(h, _HANDLER_TAG_ATTR, False)]


def test_logging_idempotency() -> None:
    cfg = LoggingConfig(level="INFO", console=True)

    configure_logging(cfg)
    first = _our_handlers()
    configure_logging(cfg)

    assert _our_handlers() == first
    assert len(first) == 1
    assert isinstance(first[0], QueueHandler)


def test_force_reconfigures_level() -> None:
    configure_logging(LoggingConfig(level="WARNING"))
    configure_logging(LoggingConfig(level="DEBUG"), force=True)

    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert len(_our_handlers()) == 1


def test_foreign_handlers_are_preserved() -> None:
    root = logging.getLogger()
    foreign = logging.NullHandler()
    root.addHandler(foreign)
    try:
        configure_logging(LoggingConfig())
        shutdown_logging()
        assert foreign in root.handlers
    finally:
        root.removeHandler(foreign)


def test_log_file_receives_records(tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "dirtree.log"
    configure_logging(LoggingConfig(level="INFO", console=False, log_file=str(log_file)))

    logging.getLogger("dirtree.test").info("walker finished")
    shutdown_logging()

    content = log_file.read_text(encoding="utf-8")
    assert "walker finished" in content
    assert "dirtree.test" in content


def test_log_rotation(tmp_path: Path) -> None:
    log_file = tmp_path / "rotate.log"
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

    # Give the QueueListener time to drain, then flush it
    time.sleep(0.2)
    shutdown_logging()

    assert log_file.exists()
    assert (tmp_path / "rotate.log.1").exists()


def test_shutdown_stops_listener() -> None:
    configure_logging(LoggingConfig())
    root = logging.getLogger()
    listener = getattr(root, _QUEUE_LISTENER_ATTR)
    assert isinstance(listener, QueueListener)

    shutdown_logging()

    assert getattr(root, _QUEUE_LISTENER_ATTR) is None
    assert getattr(root, _CONFIGURED_FLAG_ATTR) is False
    assert _our_handlers() == []


def test_no_handlers_requested() -> None:
    configure_logging(LoggingConfig(console=False, log_file=None))
    assert _our_handlers() == []


def test_package_exposes_only_public_names() -> None:
    import dirtree.infra.logging as logging_pkg

    exported = [name for name in vars(logging_pkg) if name.endswith("_ATTR")]
    assert exported == []
    assert all(not name.startswith("_") for name in logging_pkg.__all__)
