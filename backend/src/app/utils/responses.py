"""Shared response utilities for the person API Lambda."""

from __future__ import annotations

import json
from dataclasses import asdict
from decimal import Decimal
from typing import Any
from typing import Optional

from pydantic import BaseModel

ALLOWED_METHODS = "GET, POST, PUT, DELETE, OPTIONS"
ALLOWED_HEADERS = (
    "Content-Type, Authorization, Content-Length, X-Requested-With, "
    "X-Amz-Date, X-Api-Key, X-Amz-Security-Token"
)


def get_security_headers() -> dict[str, str]:
    """Get security headers for all responses.

    SECURITY: These headers protect against common web vulnerabilities:
    - X-Content-Type-Options: Prevents MIME type sniffing
    - X-Frame-Options: Prevents clickjacking
    - Cache-Control: Prevents caching of person records by the CDN

    Returns:
        Dictionary of security headers.
    """
    return {
        "X-Content-Type-Options": "nosniff",
        "X-Frame-Options": "DENY",
        "Cache-Control": "no-store, no-cache, must-revalidate",
        "Pragma": "no-cache",
    }


def get_cors_headers() -> dict[str, str]:
    """Get the fixed CORS headers sent with every response.

    The API is consumed through the CDN by any origin, so the origin is
    a wildcard rather than an allow-list.
    """
    return {
        "Access-Control-Allow-Origin": "*",
        "Access-Control-Allow-Credentials": "true",
        "Access-Control-Allow-Methods": ALLOWED_METHODS,
        "Access-Control-Allow-Headers": ALLOWED_HEADERS,
    }


def json_response(
    status_code: int,
    body: Any,
    headers: Optional[dict[str, str]] = None,
) -> dict[str, Any]:
    """Create a JSON API Gateway proxy response.

    Args:
        status_code: HTTP status code.
        body: Response body (dict, Pydantic model, or dataclass).
        headers: Optional additional headers to include.

    Returns:
        API Gateway response dictionary.
    """
    response_headers = {
        "Content-Type": "application/json",
    }
    response_headers.update(get_security_headers())
    response_headers.update(get_cors_headers())

    if headers:
        response_headers.update(headers)

    payload = _serialize_body(body)

    return {
        "statusCode": status_code,
        "headers": response_headers,
        "body": json.dumps(payload, default=_json_default),
    }


def _serialize_body(body: Any) -> Any:
    """Serialize response body to JSON-compatible format.

    Args:
        body: The body to serialize.

    Returns:
        JSON-serializable representation of the body.
    """
    if isinstance(body, BaseModel):
        return body.model_dump(exclude_none=True)

    if hasattr(body, "__dataclass_fields__"):
        return asdict(body)

    return body


def _json_default(value: Any) -> Any:
    """Render values json cannot encode natively.

    DynamoDB returns every number as Decimal; integral values go back out
    as JSON integers.
    """
    if isinstance(value, Decimal):
        if value == value.to_integral_value():
            return int(value)
        return float(value)
    if isinstance(value, (set, frozenset)):
        return sorted(value, key=str)
    return str(value)


def error_response(
    status_code: int,
    message: str,
    detail: Optional[str] = None,
) -> dict[str, Any]:
    """Create an error response.

    Args:
        status_code: HTTP status code.
        message: Error message, returned under the stable ``error`` key.
        detail: Optional additional detail.

    Returns:
        API Gateway response dictionary.
    """
    body: dict[str, Any] = {"error": message}
    if detail:
        body["detail"] = detail

    return json_response(status_code, body)
