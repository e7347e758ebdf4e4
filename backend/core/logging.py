"""core/logging.py — Structured JSON logging.

Call configure_logging() once at application startup (lifespan in api/main.py).
After that, use standard logging.getLogger(__name__) throughout the app.

Output:
  - Console — JSON lines to stdout
  - File    — only when LOG_DIR is set; JSON lines, rotated at 10 MB,
              5 backups kept, written to <LOG_DIR>/app.log
"""

from __future__ import annotations

import logging
import logging.handlers
import os
import sys
from typing import Optional

from pythonjsonlogger.json import JsonFormatter


_LOG_FILENAME = "app.log"
_MAX_BYTES = 10 * 1024 * 1024   # 10 MB per file
_BACKUP_COUNT = 5                # keep 5 rotated files
_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def configure_logging(log_level: str = "INFO", log_dir: Optional[str] = None) -> None:
    """Configure the root logger with a JSON console handler.

    Args:
        log_level: One of DEBUG, INFO, WARNING, ERROR, CRITICAL.
                   Passed from settings.log_level at startup.
        log_dir:   Directory for the rotating log file. No file handler
                   is installed when this is None.
    """
    level = getattr(logging, log_level.upper(), logging.INFO)
    formatter = JsonFormatter(_FORMAT)

    handlers: list[logging.Handler] = []

    # ── Console handler ────────────────────────────────────────────────────────
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    console_handler.setLevel(level)
    handlers.append(console_handler)

    # ── Rotating file handler ──────────────────────────────────────────────────
    log_file: Optional[str] = None
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
        log_file = os.path.abspath(os.path.join(log_dir, _LOG_FILENAME))
        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
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

    # pymongo is chatty at DEBUG (heartbeats, pool events)
    logging.getLogger("pymongo").setLevel(max(level, logging.INFO))

    logging.getLogger(__name__).debug(
        "Logging configured",
        extra={"log_level": log_level, "log_file": log_file},
    )
