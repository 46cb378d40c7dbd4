"""Shared parsing utilities for request handling."""

from __future__ import annotations

import base64
import json
from decimal import Decimal
from typing import Any
from typing import Mapping
from typing import Optional


def parse_json_body(event: Mapping[str, Any]) -> dict[str, Any]:
    """Parse the JSON object carried in an API Gateway event body.

    Floats are parsed as Decimal so the result can be written to DynamoDB
    as-is.

    Args:
        event: The API Gateway event dictionary.

    Returns:
        The parsed object. An absent or empty body, or a JSON value that is
        not an object, yields an empty dict.

    Raises:
        ValueError: If the body is not valid JSON (json.JSONDecodeError)
            or not valid base64 when flagged as encoded.
    """
    raw = event.get("body")
    if raw is None or raw == "":
        return {}
    if event.get("isBase64Encoded"):
        raw = base64.b64decode(raw).decode("utf-8")

    parsed = json.loads(raw, parse_float=Decimal)
    if not isinstance(parsed, dict):
        return {}
    return parsed


def collect_query_params(event: Mapping[str, Any]) -> dict[str, list[str]]:
    """Collect query parameters from API Gateway events.

    Handles both single and multi-value query string parameters.

    Args:
        event: The API Gateway event dictionary.

    Returns:
        Dictionary mapping parameter names to lists of values.
    """
    params: dict[str, list[str]] = {}
    single = event.get("queryStringParameters") or {}
    multi = event.get("multiValueQueryStringParameters") or {}

    for key, value in single.items():
        if value is None:
            continue
        params.setdefault(key, []).append(value)

    for key, values in multi.items():
        if not values:
            continue
        for value in values:
            if value is None or value in params.get(key, []):
                continue
            params.setdefault(key, []).append(value)

    return params


def first_param(params: dict[str, list[str]], key: str) -> Optional[str]:
    """Return the first query parameter value for a key.

    Args:
        params: Dictionary of parameter name to list of values.
        key: The parameter name to look up.

    Returns:
        The first value for the key, or None if not present.
    """
    values = params.get(key, [])
    return values[0] if values else None
