"""Structured logging setup for the Rolodex service."""

import json
import logging
import sys
from datetime import datetime, timezone


class StructuredFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "service": "rolodex",
            "component": record.name,
            "message": record.getMessage(),
        }

        # extra={"fields": {...}} on the logging call
        fields = getattr(record, "fields", None)
        if fields:
            log_data.update(fields)

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, default=str)


def setup_logging(log_level: str = "INFO") -> logging.Logger:
    """
    Setup structured logging for the service.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)

    Returns:
        The configured "rolodex" logger; module loggers are its children.
    """
    level = getattr(logging, log_level.upper(), logging.INFO)

    logger = logging.getLogger("rolodex")
    logger.setLevel(level)
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(StructuredFormatter())
    logger.addHandler(handler)

    logger.propagate = False
    return logger
