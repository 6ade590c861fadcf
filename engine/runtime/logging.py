"""Engine logging implementation."""

from __future__ import annotations

import logging
import queue
from logging.handlers import QueueHandler, QueueListener
from pathlib import Path

from engine.api.logging import EngineLoggingConfig, JsonFormatter

_TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_QUEUE_LISTENER: QueueListener | None = None


def configure_engine_logging(config: EngineLoggingConfig) -> None:
    """Route root logging to the console and, when configured, a log file.

    The file handler sits behind a queue listener so frame ticks never block
    on disk writes. Reconfiguring stops any previous listener first.
    """
    global _QUEUE_LISTENER

    shutdown_engine_logging()
    console, file_handler = _build_handlers(config)

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(getattr(logging, config.level_name.upper(), logging.INFO))

    if file_handler is None:
        root.addHandler(console)
        return

    log_queue: queue.SimpleQueue[logging.LogRecord] = queue.SimpleQueue()
    root.addHandler(QueueHandler(log_queue))
    _QUEUE_LISTENER = QueueListener(log_queue, console, file_handler, respect_handler_level=True)
    _QUEUE_LISTENER.start()


def shutdown_engine_logging() -> None:
    """Flush and stop the background listener if one is running."""
    global _QUEUE_LISTENER

    if _QUEUE_LISTENER is None:
        return
    listener, _QUEUE_LISTENER = _QUEUE_LISTENER, None
    listener.stop()
    for handler in listener.handlers:
        handler.close()


def _build_handlers(config: EngineLoggingConfig) -> tuple[logging.Handler, logging.Handler | None]:
    console = logging.StreamHandler()
    console.setFormatter(_resolve_formatter(config.console_format))
    if not config.file_path:
        return console, None
    path = Path(config.file_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    file_handler = logging.FileHandler(path, mode="a", encoding="utf-8", delay=True)
    file_handler.setFormatter(_resolve_formatter(config.file_format))
    return console, file_handler


def _resolve_formatter(kind: str) -> logging.Formatter:
    if kind.strip().lower() == "json":
        return JsonFormatter()
    return logging.Formatter(_TEXT_FORMAT)
