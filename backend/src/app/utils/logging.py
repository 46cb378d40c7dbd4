"""Structured logging utilities for the person API Lambda.

This module provides JSON-formatted logging with request context,
suitable for CloudWatch Logs Insights queries.

SECURITY NOTES:
- Person records are PII: log body sizes, never body contents, at INFO
- Use hash_for_correlation() for caller identities
"""

from __future__ import annotations

import hashlib
import json
import logging
import os
import sys
import traceback
from contextvars import ContextVar
from datetime import datetime
from datetime import timezone
from typing import Any
from typing import Mapping
from typing import MutableMapping
from typing import Optional


def hash_for_correlation(value: str) -> str:
    """Generate a short hash for log correlation without exposing PII.

    Args:
        value: The value to hash (e.g., a Cognito subject).

    Returns:
        A short hash suitable for log correlation.
    """
    return hashlib.sha256(value.encode()).hexdigest()[:12]


# Context variables for request tracking
request_id: ContextVar[str] = ContextVar("request_id", default="")
correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


class StructuredLogFormatter(logging.Formatter):
    """JSON formatter for structured logging.

    Produces log entries compatible with CloudWatch Logs Insights,
    including request context and exception details.
    """

    def format(self, record: logging.LogRecord) -> str:
        """Format a log record as JSON."""
        log_data: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        req_id = request_id.get()
        if req_id:
            log_data["request_id"] = req_id

        corr_id = correlation_id.get()
        if corr_id:
            log_data["correlation_id"] = corr_id

        if record.levelno >= logging.WARNING:
            log_data["source"] = {
                "file": record.filename,
                "line": record.lineno,
                "function": record.funcName,
            }

        if record.exc_info:
            log_data["exception"] = {
                "type": record.exc_info[0].__name__ if record.exc_info[0] else None,
                "message": str(record.exc_info[1]) if record.exc_info[1] else None,
                "traceback": traceback.format_exception(*record.exc_info),
            }

        extra = getattr(record, "extra", None)
        if isinstance(extra, dict) and extra:
            log_data["extra"] = extra

        return json.dumps(log_data, default=str)


class ContextLogger(logging.LoggerAdapter):
    """Logger adapter that nests caller and adapter context under ``extra``."""

    def process(
        self,
        msg: str,
        kwargs: MutableMapping[str, Any],
    ) -> tuple[str, MutableMapping[str, Any]]:
        """Merge adapter context into the record's ``extra`` payload."""
        extra = dict(kwargs.get("extra") or {})
        if self.extra:
            extra.update(self.extra)
        kwargs["extra"] = {"extra": extra}
        return msg, kwargs


def configure_logging(level: Optional[str] = None) -> None:
    """Configure structured logging for Lambda execution.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR). Defaults to
               LOG_LEVEL environment variable or INFO.
    """
    log_level: str = (level or os.getenv("LOG_LEVEL") or "INFO").upper()

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # The Lambda runtime installs its own handler; replace it.
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(StructuredLogFormatter())
    root_logger.addHandler(handler)

    # Reduce noise from libraries
    logging.getLogger("boto3").setLevel(logging.WARNING)
    logging.getLogger("botocore").setLevel(logging.WARNING)
    logging.getLogger("urllib3").setLevel(logging.WARNING)


def get_logger(name: str, **extra: Any) -> ContextLogger:
    """Get a context-aware logger.

    Args:
        name: Logger name (typically __name__).
        **extra: Additional context to include in all log messages.

    Returns:
        A ContextLogger instance.
    """
    logger = logging.getLogger(name)
    return ContextLogger(logger, extra)


def set_request_context(
    req_id: Optional[str] = None,
    corr_id: Optional[str] = None,
) -> None:
    """Set request context for logging.

    Call this at the start of each Lambda invocation to set
    context that will be included in all log messages.

    Args:
        req_id: API Gateway or Lambda request ID.
        corr_id: Correlation ID for distributed tracing.
    """
    if req_id:
        request_id.set(req_id)
    if corr_id:
        correlation_id.set(corr_id)


def clear_request_context() -> None:
    """Clear request context after Lambda invocation."""
    request_id.set("")
    correlation_id.set("")


def caller_fingerprint(event: Mapping[str, Any]) -> Optional[str]:
    """Return a correlation hash of the Cognito subject, if any."""
    claims = (
        (event.get("requestContext") or {}).get("authorizer") or {}
    ).get("claims") or {}
    subject = claims.get("sub")
    if not subject:
        return None
    return hash_for_correlation(str(subject))


def log_lambda_event(
    logger: ContextLogger,
    event: Mapping[str, Any],
) -> None:
    """Log the inbound event trace.

    The routing summary is logged at INFO; the complete event, which may
    carry PII in its body, only at DEBUG.

    Args:
        logger: The logger to use.
        event: The Lambda event dictionary.
    """
    body = event.get("body")
    log_data: dict[str, Any] = {
        "http_method": event.get("httpMethod"),
        "path": event.get("path"),
        "query_params": event.get("queryStringParameters"),
        "body_length": len(body) if isinstance(body, str) else 0,
    }

    caller = caller_fingerprint(event)
    if caller:
        log_data["caller"] = caller

    logger.info("Lambda event received", extra={"event": log_data})
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Full Lambda event", extra={"raw_event": dict(event)})


def log_response(
    logger: ContextLogger,
    status_code: int,
    duration_ms: Optional[float] = None,
) -> None:
    """Log Lambda response details.

    Args:
        logger: The logger to use.
        status_code: HTTP status code of the response.
        duration_ms: Request duration in milliseconds.
    """
    log_data: dict[str, Any] = {"status_code": status_code}
    if duration_ms is not None:
        log_data["duration_ms"] = round(duration_ms, 2)

    level = logging.INFO if status_code < 400 else logging.WARNING
    logger.log(level, "Lambda response", extra={"response": log_data})
