"""Tests for API Gateway response helpers."""

from __future__ import annotations

import json
import sys
from dataclasses import dataclass
from decimal import Decimal
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[1] / 'backend' / 'src'))

from app.api.schemas import CreatePersonResponseSchema  # noqa: E402
from app.utils.responses import error_response  # noqa: E402
from app.utils.responses import get_cors_headers  # noqa: E402
from app.utils.responses import json_response  # noqa: E402


def test_cors_headers_are_fixed() -> None:
    """Ensure the CORS headers match what the gateway advertises."""

    assert get_cors_headers() == {
        'Access-Control-Allow-Origin': '*',
        'Access-Control-Allow-Credentials': 'true',
        'Access-Control-Allow-Methods': 'GET, POST, PUT, DELETE, OPTIONS',
        'Access-Control-Allow-Headers': (
            'Content-Type, Authorization, Content-Length, X-Requested-With, '
            'X-Amz-Date, X-Api-Key, X-Amz-Security-Token'
        ),
    }


def test_json_response_envelope() -> None:
    response = json_response(200, {'id': '1'})
    assert response['statusCode'] == 200
    assert response['headers']['Content-Type'] == 'application/json'
    assert response['headers']['X-Content-Type-Options'] == 'nosniff'
    assert json.loads(response['body']) == {'id': '1'}


def test_json_response_extra_headers() -> None:
    response = json_response(200, {}, headers={'X-Trace': 'abc'})
    assert response['headers']['X-Trace'] == 'abc'
    assert response['headers']['Access-Control-Allow-Origin'] == '*'


def test_json_response_renders_decimals() -> None:
    """Ensure DynamoDB numbers come back as JSON numbers."""

    response = json_response(
        200, {'age': Decimal('30'), 'height': Decimal('1.65')}
    )
    body = json.loads(response['body'])
    assert body == {'age': 30, 'height': 1.65}
    assert isinstance(body['age'], int)


def test_json_response_renders_sets() -> None:
    response = json_response(200, {'tags': {'b', 'a'}})
    assert json.loads(response['body']) == {'tags': ['a', 'b']}


def test_json_response_serializes_pydantic_without_nones() -> None:
    response = json_response(201, CreatePersonResponseSchema())
    assert json.loads(response['body']) == {
        'message': 'Person created successfully'
    }


def test_json_response_serializes_dataclass() -> None:
    @dataclass
    class Payload:
        name: str

    response = json_response(200, Payload(name='Ada'))
    assert json.loads(response['body']) == {'name': 'Ada'}


def test_error_response_body() -> None:
    response = error_response(404, 'Not Found')
    assert response['statusCode'] == 404
    assert json.loads(response['body']) == {'error': 'Not Found'}


def test_error_response_with_detail() -> None:
    response = error_response(400, 'Invalid', detail='Field: age')
    assert json.loads(response['body']) == {
        'error': 'Invalid',
        'detail': 'Field: age',
    }
