from __future__ import annotations

"""
Logging Core Orchestrator.

Maintains the idempotent lifecycle of the logging subsystem. Records are
routed through a QueueHandler so that console and file I/O happen on the
listener thread, away from the traversal.
"""

import atexit
import logging
import queue
import sys
from logging.handlers import QueueHandler, QueueListener
from typing import List, Optional

from dirtree.infra.logging.config import _LEVEL_MAP, LoggingConfig
from dirtree.infra.logging.handlers import (
    _create_rotating_file_handler,
    _is_our_handler,
    _tag_handler,
)

_CONFIGURED_FLAG_ATTR: str = "_dirtree_configured"
_QUEUE_LISTENER_ATTR: str = "_dirtree_queue_listener"


# ==============================================================================
# PUBLIC API
# ==============================================================================

def configure_logging(cfg: LoggingConfig, *, force: bool = False) -> logging.Logger:
    """
    Configure the root logger once, using a queue listener for I/O.

    Repeated calls are no-ops unless force is set, in which case the
    handlers installed by a previous call are replaced. Handlers installed
    by other code are left alone.

    Args:
        cfg: Structural configuration for the logging system.
        force: If True, re-initialize handlers even if already configured.

    Returns:
        logging.Logger: The root logger.
    """
    root = logging.getLogger()

    already_configured = bool(getattr(root, _CONFIGURED_FLAG_ATTR, False))
    if already_configured and not force:
        return root

    level_int = _parse_level(cfg.level)
    root.setLevel(level_int)

    _remove_our_handlers(root)
    _stop_existing_listener(root)

    handlers_list: List[logging.Handler] = []

    if cfg.console:
        sh = logging.StreamHandler(sys.stderr)
        sh.setLevel(level_int)
        sh.setFormatter(logging.Formatter(cfg.console_fmt))
        _tag_handler(sh)
        handlers_list.append(sh)

    if cfg.log_file:
        fh = _create_rotating_file_handler(
            cfg.log_file,
            level_int,
            logging.Formatter(cfg.file_fmt, datefmt=cfg.datefmt),
            cfg.max_bytes,
            cfg.backup_count,
        )
        if fh:
            handlers_list.append(fh)

    if not handlers_list:
        return root

    log_queue: queue.Queue[logging.LogRecord] = queue.Queue(-1)

    queue_handler = QueueHandler(log_queue)
    _tag_handler(queue_handler)

    listener = QueueListener(log_queue, *handlers_list, respect_handler_level=True)
    listener.start()

    root.addHandler(queue_handler)

    setattr(root, _QUEUE_LISTENER_ATTR, listener)
    setattr(root, _CONFIGURED_FLAG_ATTR, True)

    # Flush pending records on interpreter shutdown
    atexit.register(_safe_stop_listener, listener)

    return root


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def shutdown_logging() -> None:
    """Flush queued records and detach every handler installed here."""
    root = logging.getLogger()
    _stop_existing_listener(root)
    _remove_our_handlers(root)
    setattr(root, _CONFIGURED_FLAG_ATTR, False)


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _parse_level(level: str) -> int:
    if not level:
        return logging.INFO
    return _LEVEL_MAP.get(str(level).strip().upper(), logging.INFO)


def _remove_our_handlers(root: logging.Logger) -> None:
    for h in list(root.handlers):
        if _is_our_handler(h):
            root.removeHandler(h)
            h.close()


def _stop_existing_listener(root: logging.Logger) -> None:
    listener = getattr(root, _QUEUE_LISTENER_ATTR, None)
    if listener:
        _safe_stop_listener(listener)
        for h in listener.handlers:
            h.close()
        setattr(root, _QUEUE_LISTENER_ATTR, None)


def _safe_stop_listener(listener: Optional[QueueListener]) -> None:
    """Stop a QueueListener, tolerating listeners that were already stopped."""
    if not listener:
        return
    if getattr(listener, "_thread", None) is not None:
        listener.stop()
