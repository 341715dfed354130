"""Structured logging utilities."""

import json
import logging
import sys
from dataclasses import asdict, is_dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any


PACKAGE_LOGGER = "karen_latin"


class JSONFormatter(logging.Formatter):
    """Format log records as JSON lines."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if hasattr(record, "extra_fields"):
            log_data.update(record.extra_fields)

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, ensure_ascii=False, default=str)


class PrettyFormatter(logging.Formatter):
    """Format log records in human-readable format."""

    def __init__(self) -> None:
        super().__init__(
            fmt="%(asctime)s [%(levelname)8s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        extra = getattr(record, "extra_fields", None)
        if extra:
            fields = " ".join(f"{key}={value}" for key, value in extra.items())
            message = f"{message} ({fields})"
        return message


def setup_logging(
    level: str = "INFO",
    format_type: str = "pretty",
    log_file: Path | None = None,
) -> logging.Logger:
    """
    Setup structured logging for the package logger.

    Console output goes to stderr so transliterated text on stdout
    stays clean.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_type: Format type ("json" or "pretty")
        log_file: Optional log file path

    Returns:
        Configured package logger
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(getattr(logging, level.upper()))

    logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    if format_type == "json":
        console_handler.setFormatter(JSONFormatter())
    else:
        console_handler.setFormatter(PrettyFormatter())
    logger.addHandler(console_handler)

    if log_file:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(JSONFormatter())  # Always use JSON for file logs
        logger.addHandler(file_handler)

    return logger


def log_with_context(
    logger: logging.Logger,
    level: str,
    message: str,
    **context: Any,
) -> None:
    """
    Log a message with structured context.

    Args:
        logger: Logger instance
        level: Log level
        message: Log message
        **context: Additional context fields
    """
    processed_context = {}
    for key, value in context.items():
        if is_dataclass(value) and not isinstance(value, type):
            processed_context[key] = asdict(value)
        else:
            processed_context[key] = value

    log_func = getattr(logger, level.lower())
    log_func(message, extra={"extra_fields": processed_context})
