"""
Logging utilities for the Migration Planner estimation service.

Provides structured logging with JSON formatting. Every record emitted
while a request is being handled carries that request's correlation ID.
"""

import logging
import sys
from typing import Any, Dict, Optional
from datetime import datetime, timezone
from pythonjsonlogger.json import JsonFormatter

from migration_planner import requestid
from migration_planner.utils.config import config

# Maximum characters logged per parameter value
_MAX_PREVIEW = 200


class CustomJsonFormatter(JsonFormatter):
    """Custom JSON formatter with timestamp and request ID"""

    def add_fields(self, log_record, record, message_dict):
        super(CustomJsonFormatter, self).add_fields(log_record, record, message_dict)
        log_record['timestamp'] = datetime.now(timezone.utc).isoformat()
        log_record['level'] = record.levelname
        log_record['logger'] = record.name
        request_id = requestid.from_context()
        if request_id:
            log_record['request_id'] = request_id


class RequestIDFilter(logging.Filter):
    """Expose the current request ID to plain-text formatters."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = requestid.from_context() or "-"
        return True


def setup_logger(
    name: str,
    level: str = "INFO",
    json_format: bool = True
) -> logging.Logger:
    """
    Set up a logger with appropriate formatting.

    Args:
        name: Logger name
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_format: Use JSON formatting if True

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, level.upper()))

    # Remove existing handlers
    logger.handlers = []

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(getattr(logging, level.upper()))

    if json_format:
        formatter = CustomJsonFormatter(
            '%(timestamp)s %(level)s %(name)s %(message)s'
        )
    else:
        handler.addFilter(RequestIDFilter())
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - [%(request_id)s] %(message)s'
        )

    handler.setFormatter(formatter)
    logger.addHandler(handler)

    return logger


# Create default logger
logger = setup_logger(
    "migration_planner",
    level=config.app.log_level,
    json_format=config.app.log_json,
)


def _summarise(values: Optional[Dict[str, Any]]) -> Dict[str, str]:
    return {k: str(v)[:_MAX_PREVIEW] for k, v in (values or {}).items()}


def log_estimation(
    calculator: str,
    status: str,
    duration_ms: Optional[float] = None,
    params: Optional[Dict[str, Any]] = None,
    result_minutes: Optional[float] = None,
    logger_instance: Optional[logging.Logger] = None,
) -> None:
    """Log a calculator invocation with its inputs, outcome and latency."""
    log = logger_instance or logger
    extra = {
        "event_type": "estimation",
        "calculator": calculator,
        "status": status,
        "params": _summarise(params),
    }
    if duration_ms is not None:
        extra["duration_ms"] = round(duration_ms, 3)
    if result_minutes is not None:
        extra["result_minutes"] = round(result_minutes, 2)

    log.info(f"[ESTIMATE:{calculator}] {status}", extra=extra)


def log_request(
    method: str,
    path: str,
    status_code: int,
    duration_ms: Optional[float] = None,
    logger_instance: Optional[logging.Logger] = None,
) -> None:
    """Log a completed HTTP request"""
    log = logger_instance or logger
    dur = f" [{duration_ms:.0f}ms]" if duration_ms is not None else ""
    log.info(
        f"{method} {path} {status_code}{dur}",
        extra={
            "event_type": "http_request",
            "method": method,
            "path": path,
            "status_code": status_code,
            "duration_ms": round(duration_ms, 1) if duration_ms is not None else None,
        },
    )


def log_error(
    error_type: str,
    error_message: str,
    calculator: Optional[str] = None,
    key: Optional[str] = None,
    logger_instance: Optional[logging.Logger] = None
):
    """Log error event"""
    log = logger_instance or logger
    extra = {
        "error_type": error_type,
        "error_message": error_message,
        "event_type": "error"
    }
    if calculator:
        extra["calculator"] = calculator
    if key:
        extra["key"] = key

    log.error("Error occurred", extra=extra)
