"""Logging and telemetry configuration."""
import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional, TextIO

from ..config import get_settings

logger = logging.getLogger("rawsync")

_RESERVED = set(vars(logging.LogRecord("", 0, "", 0, "", (), None))) | {"message", "asctime"}


def setup_logging(level: Optional[str] = None, fmt: Optional[str] = None, stream: Optional[TextIO] = None) -> None:
    """Configure the ``rawsync`` logger. Missing arguments fall back to settings."""
    if level is None or fmt is None:
        settings = get_settings()
        level = level or settings.log_level
        fmt = fmt or settings.log_format

    handler = logging.StreamHandler(stream or sys.stderr)
    if fmt == "json":
        handler.setFormatter(StructuredFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))

    for existing in list(logger.handlers):
        logger.removeHandler(existing)
    logger.addHandler(handler)
    logger.setLevel(level.upper())
    logger.propagate = False


class StructuredFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        payload: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key, value in record.__dict__.items():
            if key not in _RESERVED and not key.startswith("_"):
                payload[key] = value
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def log_timing(operation: str, duration_ms: float, metadata: Optional[Dict[str, Any]] = None) -> None:
    """Log operation timing metrics."""
    extra = {"operation": operation, "duration_ms": round(duration_ms, 2)}
    extra.update(metadata or {})
    logger.info("%s took %.2f ms", operation, duration_ms, extra=extra)


def log_error(error: Exception, context: Optional[Dict[str, Any]] = None) -> None:
    """Log error with context."""
    extra = {"error_type": type(error).__name__}
    extra.update(context or {})
    logger.warning("%s", error, extra=extra)
