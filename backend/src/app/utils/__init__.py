"""Utility modules for the backend application."""

from app.utils.parsers import (
    collect_query_params,
    first_param,
    parse_json_body,
)
from app.utils.responses import error_response, json_response
from app.utils.logging import (
    configure_logging,
    get_logger,
    hash_for_correlation,
    set_request_context,
    clear_request_context,
)

__all__ = [
    "clear_request_context",
    "collect_query_params",
    "configure_logging",
    "error_response",
    "first_param",
    "get_logger",
    "hash_for_correlation",
    "json_response",
    "parse_json_body",
    "set_request_context",
]
