"""Logging setup for the cyrlat package and CLI."""

import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any


PACKAGE_LOGGER = "cyrlat"

CONSOLE_FORMAT = "%(asctime)s [%(levelname)8s] %(name)s: %(message)s"
CONSOLE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class JSONFormatter(logging.Formatter):
    """One JSON object per record; context passed to log_with_context is inlined."""

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created, tz=timezone.utc)
        entry: dict[str, Any] = {
            "timestamp": timestamp.isoformat(timespec="milliseconds").replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **getattr(record, "context", {}),
        }
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        # Cyrillic text stays readable in log files
        return json.dumps(entry, ensure_ascii=False, default=str)


def setup_logging(
    level: str = "INFO",
    format_type: str = "pretty",
    log_file: Path | None = None,
) -> logging.Logger:
    """
    Configure the package logger used by the CLI.

    Handlers are attached to the ``cyrlat`` logger rather than the root
    logger, and write to stderr so stdout carries only transliterated text.
    Calling it again replaces the previous handlers.

    Args:
        level: Log level name
        format_type: "pretty" or "json" for the console handler
        log_file: Optional path for an additional JSON-lines log

    Returns:
        The ``cyrlat`` logger
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level.upper())
    logger.propagate = False
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler(sys.stderr)
    if format_type == "json":
        console.setFormatter(JSONFormatter())
    else:
        console.setFormatter(logging.Formatter(CONSOLE_FORMAT, CONSOLE_DATE_FORMAT))
    logger.addHandler(console)

    if log_file is not None:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(JSONFormatter())
        logger.addHandler(file_handler)

    return logger


def log_with_context(logger: logging.Logger, level: str, message: str, **context: Any) -> None:
    """Log ``message`` with extra fields that JSONFormatter writes as top-level keys."""
    logger.log(logging.getLevelName(level.upper()), message, extra={"context": context})
