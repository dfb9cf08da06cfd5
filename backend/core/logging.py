"""core/logging.py — Structured JSON logging with optional rotating file output.

Call configure_logging() once at application startup (lifespan in api/main.py).
After that, use standard logging.getLogger(__name__) throughout the app.

Output:
  - Console — JSON lines to stdout
  - File    — JSON lines, rotated at 10 MB, 5 backups kept
              Written to logs/app.log relative to the project root.
              Disabled with LOG_TO_FILE=false (tests, containers).
"""

from __future__ import annotations

import logging
import logging.handlers
import os
import sys

from pythonjsonlogger.json import JsonFormatter


_LOG_DIR = os.path.join(os.path.dirname(__file__), "..", "..", "logs")
_LOG_FILE = os.path.join(_LOG_DIR, "app.log")
_MAX_BYTES = 10 * 1024 * 1024   # 10 MB per file
_BACKUP_COUNT = 5                # keep 5 rotated files

# Chatty third-party loggers that drown out request logs at DEBUG
_QUIET_LOGGERS = ("sqlalchemy.engine", "httpx", "multipart")


def configure_logging(log_level: str = "DEBUG", log_to_file: bool = True) -> None:
    """Configure the root logger with a JSON console handler and, optionally,
    a rotating JSON file handler.

    Args:
        log_level:   One of DEBUG, INFO, WARNING, ERROR, CRITICAL.
                     Passed from settings.log_level at startup.
        log_to_file: Also write to logs/app.log when True.
    """
    level = getattr(logging, log_level.upper(), logging.DEBUG)
    formatter = JsonFormatter("%(asctime)s %(name)s %(levelname)s %(message)s")

    handlers: list[logging.Handler] = []

    # ── Console handler ────────────────────────────────────────────────────────
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    console_handler.setLevel(level)
    handlers.append(console_handler)

    # ── Rotating file handler ──────────────────────────────────────────────────
    if log_to_file:
        os.makedirs(_LOG_DIR, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            _LOG_FILE,
            maxBytes=_MAX_BYTES,
            backupCount=_BACKUP_COUNT,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        file_handler.setLevel(level)
        handlers.append(file_handler)

    # ── Root logger ────────────────────────────────────────────────────────────
    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()
    for handler in handlers:
        root.addHandler(handler)

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

    logging.getLogger(__name__).debug(
        "Logging configured",
        extra={
            "log_level": log_level,
            "log_file": os.path.abspath(_LOG_FILE) if log_to_file else None,
        },
    )
