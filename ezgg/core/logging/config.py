from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler, QueueHandler, QueueListener
from queue import Queue
from pathlib import Path
from typing import Iterable, Optional

from .levels import register_levels, to_level
from .formatter import ConsoleFormatter, ContextFilter, JSONFormatter, RedactingFilter

_listener: QueueListener | None = None


def bootstrap_logging(
    *,
    service: str = "ezgg",
    level: str | int | None = None,
    log_dir: Optional[Path] = None,
    log_file_name: str = "ezgg.jsonl",
    secrets: Iterable[str] = (),
    max_bytes: int = 5_000_000,
    backup_count: int = 5,
) -> None:
    """Configure the root logger once per process.

    Console output is opt-in (``LOG_CONSOLE=true``). The JSON-lines file is
    written from a background QueueListener.
    """
    global _listener
    shutdown_logging()
    register_levels()
    root = logging.getLogger()
    root.handlers.clear()
    lvl = to_level(level or os.getenv("LOG_LEVEL", "INFO"))
    root.setLevel(lvl)

    redact = RedactingFilter(secrets)
    capture = ContextFilter()

    if os.getenv("LOG_CONSOLE", "false").strip().lower() == "true":
        console = logging.StreamHandler()
        console_level = os.getenv("LOG_CONSOLE_LEVEL", "")
        console.setLevel(to_level(console_level) if console_level else lvl)
        console.setFormatter(ConsoleFormatter())
        console.addFilter(redact)
        console.addFilter(capture)
        root.addHandler(console)

    if log_dir:
        log_dir.mkdir(parents=True, exist_ok=True)
        json_handler = RotatingFileHandler(str(log_dir / log_file_name), maxBytes=max_bytes, backupCount=backup_count)
        json_handler.setLevel(lvl)
        json_handler.setFormatter(JSONFormatter())
        q: Queue[logging.LogRecord] = Queue(-1)
        qh = QueueHandler(q)
        # Redact and capture context before the record crosses the queue.
        qh.addFilter(redact)
        qh.addFilter(capture)
        root.addHandler(qh)
        _listener = QueueListener(q, json_handler, respect_handler_level=True)
        _listener.start()

    logging.getLogger("httpx").setLevel(max(lvl, logging.WARNING))
    logging.getLogger(__name__).debug("logging ready service=%s level=%s", service, logging.getLevelName(lvl))


def shutdown_logging() -> None:
    global _listener
    if _listener:
        _listener.stop()
        _listener = None
