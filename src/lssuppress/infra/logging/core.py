from __future__ import annotations

"""
Logging Core Orchestrator.

Maintains the idempotent lifecycle of the logging subsystem. Records go
through a QueueHandler on the root logger and are written by a
QueueListener thread, so a slow log file never delays the hook's reply to
its host. `shutdown_logging` drains the queue on demand; the hook runner
calls it before exiting so diagnostics reach stderr while the host still
listens.
"""

import atexit
import logging
import os
import queue
import sys
from logging.handlers import QueueHandler, QueueListener, RotatingFileHandler
from typing import List, Optional

from lssuppress.infra.logging.config import _LEVEL_MAP, LoggingConfig

# Markers stored on the root logger and on our handlers
_CONFIGURED_FLAG_ATTR: str = "_lssuppress_configured"
_QUEUE_LISTENER_ATTR: str = "_lssuppress_queue_listener"
_HANDLER_TAG_ATTR: str = "_lssuppress_handler"

_FALLBACK_FMT = "CRITICAL FALLBACK | %(levelname)s | %(message)s"


# ==============================================================================
# PUBLIC API
# ==============================================================================

def configure_logging(cfg: LoggingConfig, *, force: bool = False) -> logging.Logger:
    """
    Install the queue-based handlers on the root logger, once.

    Args:
        cfg: Structural configuration for the logging system.
        force: If True, tear down the current setup and rebuild it.

    Returns:
        logging.Logger: The root logger.
    """
    root = logging.getLogger()
    if getattr(root, _CONFIGURED_FLAG_ATTR, False) and not force:
        return root

    try:
        level_int = _parse_level(cfg.level)
        root.setLevel(level_int)
        _teardown(root)

        sinks = _build_sinks(cfg, level_int)
        if not sinks:
            return root

        log_queue: queue.Queue[logging.LogRecord] = queue.Queue(-1)
        queue_handler = QueueHandler(log_queue)
        _tag_handler(queue_handler)

        listener = QueueListener(log_queue, *sinks, respect_handler_level=True)
        listener.start()
        root.addHandler(queue_handler)

        setattr(root, _QUEUE_LISTENER_ATTR, listener)
        setattr(root, _CONFIGURED_FLAG_ATTR, True)
        atexit.register(_safe_stop_listener, listener)
        return root

    except Exception:
        return _install_emergency_console(root)


def shutdown_logging() -> None:
    """
    Drain pending records and detach our handlers.

    Safe to call when logging was never configured, and more than once.
    """
    root = logging.getLogger()
    _teardown(root)
    if hasattr(root, _CONFIGURED_FLAG_ATTR):
        delattr(root, _CONFIGURED_FLAG_ATTR)


def get_logger(name: str) -> logging.Logger:
    """
    Acquire a named logger instance compliant with the global configuration.

    Args:
        name: Hierarchical name for the logger (usually __name__).

    Returns:
        logging.Logger: The requested logger instance.
    """
    return logging.getLogger(name)


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _build_sinks(cfg: LoggingConfig, level_int: int) -> List[logging.Handler]:
    """Create the handlers the listener thread writes to."""
    sinks: List[logging.Handler] = []

    if cfg.console:
        sh = logging.StreamHandler(sys.stderr)
        sh.setLevel(level_int)
        sh.setFormatter(logging.Formatter(cfg.console_fmt))
        _tag_handler(sh)
        sinks.append(sh)

    if cfg.log_file:
        fh = _open_log_file(cfg)
        if fh:
            fh.setLevel(level_int)
            fh.setFormatter(logging.Formatter(cfg.file_fmt, datefmt=cfg.datefmt))
            _tag_handler(fh)
            sinks.append(fh)

    return sinks


def _open_log_file(cfg: LoggingConfig) -> Optional[RotatingFileHandler]:
    """Open the rotating log file, or report on stderr and return None."""
    try:
        os.makedirs(os.path.dirname(os.path.abspath(cfg.log_file)), exist_ok=True)
        return RotatingFileHandler(
            cfg.log_file,
            maxBytes=int(cfg.max_bytes),
            backupCount=int(cfg.backup_count),
            encoding="utf-8",
        )
    except OSError as e:
        sys.stderr.write(f"WARNING: Cannot open log file '{cfg.log_file}': {e}\n")
        return None


def _tag_handler(handler: logging.Handler) -> None:
    setattr(handler, _HANDLER_TAG_ATTR, True)


def _is_our_handler(handler: logging.Handler) -> bool:
    return bool(getattr(handler, _HANDLER_TAG_ATTR, False))


def _install_emergency_console(root: logging.Logger) -> logging.Logger:
    """Replace our handlers with a direct stderr handler."""
    root.setLevel(logging.INFO)
    _remove_our_handlers(root)

    sh = logging.StreamHandler(sys.stderr)
    sh.setFormatter(logging.Formatter(_FALLBACK_FMT))
    _tag_handler(sh)
    root.addHandler(sh)

    root.warning("Logging infrastructure failed. Switched to emergency console.")
    return root


def _parse_level(level: str) -> int:
    """Convert a level name to its numeric constant (INFO when unknown)."""
    if not level:
        return logging.INFO
    return _LEVEL_MAP.get(str(level).strip().upper(), logging.INFO)


def _teardown(root: logging.Logger) -> None:
    # Listener first, so queued records are written before handlers close
    _stop_existing_listener(root)
    _remove_our_handlers(root)


def _remove_our_handlers(root: logging.Logger) -> None:
    """Detach and close every internally-managed handler on the root."""
    for h in list(root.handlers):
        if _is_our_handler(h):
            root.removeHandler(h)
            h.close()


def _stop_existing_listener(root: logging.Logger) -> None:
    listener = getattr(root, _QUEUE_LISTENER_ATTR, None)
    if listener:
        _safe_stop_listener(listener)
        for sink in listener.handlers:
            sink.close()
        setattr(root, _QUEUE_LISTENER_ATTR, None)


def _safe_stop_listener(listener: Optional[QueueListener]) -> None:
    """
    Stop a QueueListener, tolerating double-stop calls.

    atexit, `shutdown_logging` and test resets may all reach a listener
    whose thread has already been joined.
    """
    if not listener:
        return
    if getattr(listener, "_thread", None) is not None:
        listener.stop()
