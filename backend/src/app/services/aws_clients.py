"""Shared boto3 resource factory with caching."""

from __future__ import annotations

from typing import Any

import boto3

_RESOURCE_CACHE: dict[tuple[str, str | None], Any] = {}


def get_resource(service: str, region_name: str | None = None) -> Any:
    """Return a cached boto3 resource for the given service."""
    cache_key = (service, region_name)
    if cache_key in _RESOURCE_CACHE:
        return _RESOURCE_CACHE[cache_key]
    resource = boto3.resource(  # type: ignore[call-overload]
        service,
        region_name=region_name,
    )
    _RESOURCE_CACHE[cache_key] = resource
    return resource


def clear_resource_cache() -> None:
    """Clear cached boto3 resources (useful in tests)."""
    _RESOURCE_CACHE.clear()


def get_dynamodb_table(table_name: str, region_name: str | None = None) -> Any:
    return get_resource("dynamodb", region_name=region_name).Table(table_name)
