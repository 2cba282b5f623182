"""
Logging setup shared by the engine, the console and the API.

Modules grab a logger with ``get_logger(__name__)`` at import time; the
entry point calls ``configure_logging`` once. Until then, records go
nowhere (the library stays quiet when embedded).
"""

from __future__ import annotations

import json as _json
import logging
import sys
import time
from pathlib import Path
from typing import Any, Dict, Optional

from .paths import LOG_DIR, STORAGE_DIR

__all__ = ["STORAGE_DIR", "LOG_DIR", "JsonFormatter", "configure_logging", "get_logger"]

_ROOT_LOGGER_NAME = "paintball"


class JsonFormatter(logging.Formatter):
    """Render each record as a single JSON line."""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "ts": self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return _json.dumps(payload, ensure_ascii=False)


def configure_logging(
    level: str = "INFO",
    json: bool = True,
    log_file: Optional[Path] = None,
    console: bool = True,
) -> None:
    """
    Configure console and file logging.

    Args:
        level: Log level name (e.g. "INFO", "DEBUG")
        json: Emit JSON lines instead of plain text
        log_file: Path of the log file. Defaults to
            storage/logs/paintball_<timestamp>.log
        console: Also log to stderr
    """
    root = logging.getLogger(_ROOT_LOGGER_NAME)
    root.setLevel(level.upper())
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()

    formatter: logging.Formatter
    if json:
        formatter = JsonFormatter()
    else:
        formatter = logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")

    if console:
        stream_handler = logging.StreamHandler(sys.stderr)
        stream_handler.setFormatter(formatter)
        root.addHandler(stream_handler)

    if log_file is None:
        LOG_DIR.mkdir(parents=True, exist_ok=True)
        log_file = LOG_DIR / f"paintball_{time.strftime('%Y%m%d_%H%M%S')}.log"
    else:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setFormatter(formatter)
    root.addHandler(file_handler)

    root.propagate = False


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger under the project's logger hierarchy.

    Module names outside the ``paintball`` package (``api.app``,
    ``console``) are nested under it so one configuration covers them.
    """
    if name != _ROOT_LOGGER_NAME and not name.startswith(_ROOT_LOGGER_NAME + "."):
        name = f"{_ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


logging.getLogger(_ROOT_LOGGER_NAME).addHandler(logging.NullHandler())
