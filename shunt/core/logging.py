"""
Structured logging configuration.

The API logs JSON records by default; the CLI logs plain text to stderr.
Structured fields are passed as ``extra_data`` through ``get_logger``.
"""

import sys
import logging
from typing import Any, Dict, Optional
from datetime import datetime, timezone
import json
from pathlib import Path

from .config import settings


class StructuredFormatter(logging.Formatter):
    """JSON structured log formatter"""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as one JSON object"""
        log_data: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        log_data.update(getattr(record, "extra_data", {}))

        # Evaluation results may be inf or nan
        return json.dumps(log_data, default=str)


class TextFormatter(logging.Formatter):
    """Human-readable formatter; structured fields are appended as key=value"""

    def __init__(self):
        super().__init__(fmt="%(levelname)s %(name)s: %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        text = super().format(record)
        extra_data = getattr(record, "extra_data", {})
        if extra_data:
            text += " " + " ".join(f"{key}={value!r}" for key, value in extra_data.items())
        return text


def _build_formatter(log_format: str) -> logging.Formatter:
    if log_format == "json":
        return StructuredFormatter()
    if log_format == "text":
        return TextFormatter()
    raise ValueError(f"Unknown log format '{log_format}', expected 'json' or 'text'")


def setup_logging(level: Optional[str] = None, log_format: Optional[str] = None) -> None:
    """
    Configure the root logger.

    Args:
        level: Level name; defaults to ``settings.LOG_LEVEL``
        log_format: ``json`` or ``text``; defaults to ``settings.LOG_FORMAT``
    """
    log_level = getattr(logging, (level or settings.LOG_LEVEL).upper(), logging.INFO)
    formatter = _build_formatter(log_format or settings.LOG_FORMAT)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    handlers = [console_handler]

    if settings.LOG_FILE:
        log_path = Path(settings.LOG_FILE)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path)
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    logging.basicConfig(level=log_level, handlers=handlers, force=True)

    # Request lines duplicate the API's own request logging
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


class LoggerAdapter(logging.LoggerAdapter):
    """Logger accepting structured fields as ``extra_data``"""

    def process(self, msg: str, kwargs: Dict[str, Any]) -> tuple:
        extra_data = kwargs.pop("extra_data", {})
        kwargs.setdefault("extra", {})["extra_data"] = {**self.extra, **extra_data}
        return msg, kwargs


def get_logger(name: str) -> LoggerAdapter:
    """Get logger instance accepting ``extra_data``"""
    return LoggerAdapter(logging.getLogger(name), {})
