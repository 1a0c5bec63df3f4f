"""Structured JSON logging, one JSON line per record."""
import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any

from member_capacity.config import get_settings

ROOT_LOGGER = "member_capacity"


class JSONFormatter(logging.Formatter):
    """Emit every log record as a single JSON line."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info and record.exc_info[1]:
            log_data["error"] = str(record.exc_info[1])
            log_data["error_type"] = type(record.exc_info[1]).__name__
        return json.dumps(log_data)


def configure_logging(level: str | None = None) -> logging.Logger:
    """Attach the JSON handler to the package logger once and return it."""
    logger = logging.getLogger(ROOT_LOGGER)
    level_name = (level or get_settings().log_level).upper()
    logger.setLevel(getattr(logging, level_name, logging.INFO))
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(JSONFormatter())
        logger.addHandler(handler)
        logger.propagate = False
    return logger
