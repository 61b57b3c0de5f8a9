"""Logging configuration for camp-grocery."""

import json
import logging
import os
import sys
from datetime import datetime, timezone
from typing import Any


class JsonFormatter(logging.Formatter):
    """One JSON object per line, for piping into other tools."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data)


class ConsoleFormatter(logging.Formatter):
    """Human-readable formatter for terminal use."""

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.now().strftime("%H:%M:%S")
        level = record.levelname.ljust(8)
        formatted = f"{timestamp} | {level} | {record.name} | {record.getMessage()}"

        if record.exc_info:
            formatted += "\n" + self.formatException(record.exc_info)

        return formatted


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given module name."""
    return logging.getLogger(name)


def configure_logging(log_level: str = "WARNING", json_format: bool | None = None) -> None:
    """
    Configure logging for the CLI.

    Args:
        log_level: Minimum log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_format: Emit JSON lines. If None, read LOG_FORMAT from the environment.
    """
    if json_format is None:
        json_format = os.getenv("LOG_FORMAT", "").lower() == "json"

    level = getattr(logging, log_level.upper(), logging.WARNING)
    formatter: logging.Formatter = JsonFormatter() if json_format else ConsoleFormatter()

    # Log to stderr so exported lists on stdout stay clean
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)
    handler.setLevel(level)

    package_logger = logging.getLogger("camp_grocery")
    for existing in package_logger.handlers[:]:
        package_logger.removeHandler(existing)
    package_logger.addHandler(handler)
    package_logger.setLevel(level)

    # Keep third-party HTTP chatter down
    for module_name in ("httpx", "httpcore"):
        logging.getLogger(module_name).setLevel(logging.WARNING)

    get_logger(__name__).debug(
        f"Logging configured: level={log_level.upper()}, format={'json' if json_format else 'text'}"
    )
