"""Pytest configuration and fixtures for backend tests.

This module provides shared fixtures for testing the person API,
including an in-memory table, settings, and API Gateway events.
"""

from __future__ import annotations

import copy
import sys
from pathlib import Path
from typing import Any
from typing import Callable
from typing import Optional
from uuid import uuid4

import pytest

# Add backend source to path for imports
sys.path.insert(0, str(Path(__file__).resolve().parents[1] / 'backend' / 'src'))


class FakeTable:
    """In-memory stand-in for a boto3 ``dynamodb.Table``.

    Records every call so tests can assert how many reads and writes
    a request performed.
    """

    def __init__(self) -> None:
        self.items: dict[str, dict[str, Any]] = {}
        self.put_calls: list[dict[str, Any]] = []
        self.get_calls: list[dict[str, Any]] = []

    def put_item(self, Item: dict[str, Any]) -> dict[str, Any]:
        self.put_calls.append(Item)
        self.items[Item['id']] = copy.deepcopy(Item)
        return {}

    def get_item(self, Key: dict[str, Any]) -> dict[str, Any]:
        self.get_calls.append(Key)
        item = self.items.get(Key['id'])
        if item is None:
            return {}
        return {'Item': copy.deepcopy(item)}


# --- Storage Fixtures ---


@pytest.fixture
def fake_table() -> FakeTable:
    """Empty in-memory persons table."""
    return FakeTable()


@pytest.fixture
def person_repository(fake_table):
    """Repository bound to the in-memory table."""
    from app.db.repositories import PersonRepository

    return PersonRepository(fake_table)


@pytest.fixture
def settings():
    """Default settings for the persons table."""
    from app.config import Settings

    return Settings(persons_table='persons-test')


@pytest.fixture(autouse=True)
def _clear_caches():
    """Drop cached boto3 resources and repositories between tests."""
    from app.db.repositories import clear_repository_cache
    from app.services.aws_clients import clear_resource_cache

    yield
    clear_repository_cache()
    clear_resource_cache()


# --- API Event Fixtures ---


@pytest.fixture
def api_gateway_event() -> dict:
    """Base API Gateway event structure."""
    return {
        'httpMethod': 'GET',
        'path': '/api/person',
        'resource': '/{proxy+}',
        'queryStringParameters': None,
        'multiValueQueryStringParameters': None,
        'headers': {'Content-Type': 'application/json'},
        'requestContext': {
            'requestId': str(uuid4()),
            'authorizer': {
                'claims': {'sub': str(uuid4())},
            },
        },
        'body': None,
        'isBase64Encoded': False,
    }


@pytest.fixture
def make_event(api_gateway_event) -> Callable[..., dict]:
    """Factory for API Gateway events with a given method, path and payload."""
    import json

    def _make(
        method: str,
        path: str = '/api/person',
        body: Any = None,
        query: Optional[dict[str, str]] = None,
    ) -> dict:
        event = copy.deepcopy(api_gateway_event)
        event['httpMethod'] = method
        event['path'] = path
        event['queryStringParameters'] = query
        if body is not None:
            event['body'] = body if isinstance(body, str) else json.dumps(body)
        return event

    return _make
