"""Lambda handler for the person API.

Routes ``POST /api/person`` and ``GET /api/person`` to the create and get
handlers. Every other method/path pair is answered with 404. The table
handle and settings are resolved once per process and passed to the
handlers explicitly.
"""

from __future__ import annotations

import time
from datetime import datetime
from datetime import timezone
from typing import Any
from typing import Callable
from typing import Mapping
from typing import Optional

from app.api.schemas import CreatePersonResponseSchema
from app.config import Settings
from app.config import load_settings
from app.db.repositories import PersonRepository
from app.db.repositories import get_person_repository
from app.exceptions import AppError
from app.exceptions import ConfigurationError
from app.exceptions import DatabaseError
from app.exceptions import NotFoundError
from app.exceptions import ValidationError
from app.utils import collect_query_params
from app.utils import error_response
from app.utils import first_param
from app.utils import json_response
from app.utils import parse_json_body
from app.utils.logging import clear_request_context
from app.utils.logging import configure_logging
from app.utils.logging import get_logger
from app.utils.logging import log_lambda_event
from app.utils.logging import log_response
from app.utils.logging import set_request_context

# Configure logging on module load
configure_logging()
logger = get_logger(__name__)

PERSON_PATH = "/api/person"
REQUIRED_FIELDS = ("id", "name", "age")

RouteHandler = Callable[
    [Mapping[str, Any], PersonRepository, Settings],
    dict[str, Any],
]


def lambda_handler(event: Mapping[str, Any], context: Any) -> dict[str, Any]:
    """Handle an API Gateway proxy request for the person API."""

    # Set request context for logging
    request_id = (event.get("requestContext") or {}).get("requestId") or getattr(
        context, "aws_request_id", None
    )
    set_request_context(req_id=request_id)
    start_time = time.perf_counter()

    try:
        log_lambda_event(logger, event)
        response = handle_request(event)
        log_response(
            logger,
            response["statusCode"],
            duration_ms=(time.perf_counter() - start_time) * 1000,
        )
        return response
    finally:
        clear_request_context()


def handle_request(
    event: Mapping[str, Any],
    repository: Optional[PersonRepository] = None,
    settings: Optional[Settings] = None,
) -> dict[str, Any]:
    """Route a request inside the top-level error boundary.

    Failures raised as ``AppError`` already carry their status code and
    message. Anything else becomes a generic 500.

    Args:
        event: API Gateway proxy event.
        repository: Person repository; the shared one is used when omitted.
        settings: Settings; loaded from the environment when omitted.

    Returns:
        API Gateway response.
    """
    method = event.get("httpMethod") or ""
    path = event.get("path") or ""

    try:
        if resolve_route(method, path) is None:
            return error_response(404, "Not Found")
        if settings is None:
            settings = load_settings()
        if repository is None:
            repository = get_person_repository(settings)
        return route(method, path, event, repository, settings)
    except ConfigurationError:
        logger.exception("Person API is misconfigured")
        return error_response(500, "Internal Server Error")
    except AppError as exc:
        if exc.status_code >= 500:
            logger.error(f"Request failed: {exc.message}")
        else:
            logger.warning(f"Request rejected: {exc.message}")
        return error_response(exc.status_code, exc.message)
    except Exception:
        logger.exception("Unexpected error in person API")
        return error_response(500, "Internal Server Error")


def resolve_route(method: str, path: str) -> Optional[RouteHandler]:
    """Return the handler registered for an exact method/path pair."""
    return _ROUTES.get((method, path))


def route(
    method: str,
    path: str,
    event: Mapping[str, Any],
    repository: PersonRepository,
    settings: Settings,
) -> dict[str, Any]:
    """Dispatch to the matching handler, or answer 404."""
    handler = resolve_route(method, path)
    if handler is None:
        return error_response(404, "Not Found")
    return handler(event, repository, settings)


# --- Handlers ---


def create_person(
    event: Mapping[str, Any],
    repository: PersonRepository,
    settings: Settings,
) -> dict[str, Any]:
    """Create a person record from the JSON request body.

    The client must send ``id``, ``name`` and ``age``. The stored record
    gets a server-generated ``id`` that replaces the client one.

    Raises:
        ValidationError: If a required field is missing or empty.
        AppError: If the write fails.
    """
    body = parse_json_body(event)
    if not all(body.get(field) for field in REQUIRED_FIELDS):
        raise ValidationError("Missing required fields")

    item = build_person_record(body, _utcnow())

    try:
        repository.put(item)
    except DatabaseError as exc:
        logger.exception("Failed to create person")
        raise AppError("Could not create person") from exc

    logger.info("Person created", extra={"person_id": item["id"]})

    response = CreatePersonResponseSchema(
        id=item["id"] if settings.return_generated_id else None,
    )
    return json_response(201, response)


def get_person(
    event: Mapping[str, Any],
    repository: PersonRepository,
    settings: Settings,
) -> dict[str, Any]:
    """Return the stored record named by the ``id`` query parameter.

    Raises:
        ValidationError: If the ``id`` query parameter is missing.
        NotFoundError: If no record has that id.
        AppError: If the read fails.
    """
    person_id = first_param(collect_query_params(event), "id")
    if not person_id:
        raise ValidationError("Missing person ID")

    try:
        item = repository.get_by_id(person_id)
    except DatabaseError as exc:
        logger.exception("Failed to retrieve person")
        raise AppError("Could not retrieve person") from exc

    if item is None:
        raise NotFoundError("Person", person_id)
    return json_response(200, item)


_ROUTES: dict[tuple[str, str], RouteHandler] = {
    ("POST", PERSON_PATH): create_person,
    ("GET", PERSON_PATH): get_person,
}


# --- Record construction ---


def build_person_record(body: Mapping[str, Any], now: datetime) -> dict[str, Any]:
    """Merge the request body with the server-owned fields.

    Server values win over anything the client sent under the same keys.
    """
    timestamp = format_timestamp(now)
    record = dict(body)
    record["id"] = generate_person_id(now)
    record["createdAt"] = timestamp
    record["updatedAt"] = timestamp
    return record


def generate_person_id(now: datetime) -> str:
    """Render ``now`` as epoch milliseconds."""
    return str(int(now.timestamp()) * 1000 + now.microsecond // 1000)


def format_timestamp(now: datetime) -> str:
    """Format ``now`` as ISO-8601 UTC with millisecond precision."""
    utc = now.astimezone(timezone.utc)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)
