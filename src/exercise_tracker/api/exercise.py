"""Exercise tracker API endpoints."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING, TypeVar

from fastapi import APIRouter, Request

from exercise_tracker.domain.models import ExerciseLogQuery, UserRecord
from exercise_tracker.exceptions import ValidationError
from exercise_tracker.parsing import (
    format_date,
    parse_date,
    parse_identifier,
    parse_int,
)

if TYPE_CHECKING:
    from exercise_tracker.containers import AppContainer

router = APIRouter(prefix="/api/exercise", tags=["exercise"])

T = TypeVar("T")


@router.post("/new-user")
async def new_user(request: Request) -> dict[str, str]:
    """Register a username, returning the existing user if already taken."""
    container: AppContainer = request.app.state.container
    fields = await _read_body(request)
    errors: dict[str, str] = {}
    username = _required(fields, "username", errors)
    if errors:
        raise ValidationError(errors)
    user = container.user_service.create_user(username)
    return _user_payload(user)


@router.get("/users")
async def list_users(request: Request) -> list[dict[str, str]]:
    """Return every registered user."""
    container: AppContainer = request.app.state.container
    return [_user_payload(user) for user in container.user_service.list_users()]


@router.post("/add")
async def add_exercise(request: Request) -> dict[str, object]:
    """Log an exercise for a user and echo it back."""
    container: AppContainer = request.app.state.container
    fields = await _read_body(request)
    errors: dict[str, str] = {}
    raw_user_id = _required(fields, "userId", errors)
    description = _required(fields, "description", errors)
    duration = _parse(
        _required(fields, "duration", errors),
        "duration",
        parse_int,
        "duration must be an integer",
        errors,
    )
    date = _parse(
        fields.get("date", "").strip(),
        "date",
        parse_date,
        "date must be an ISO 8601 date",
        errors,
    )
    if errors:
        raise ValidationError(errors)

    user, record = container.exercise_service.add_exercise(
        user_id=parse_identifier(raw_user_id),
        description=description,
        duration=duration,
        date=date,
    )
    return {
        "username": user.username,
        "_id": str(user.id),
        "description": record.description,
        "duration": record.duration,
        "date": format_date(record.date),
    }


@router.get("/log")
async def exercise_log(request: Request) -> dict[str, object]:
    """Return a user's exercise history, optionally filtered."""
    container: AppContainer = request.app.state.container
    params = request.query_params
    errors: dict[str, str] = {}
    raw_user_id = _required(params, "userId", errors)
    from_date = _parse(
        params.get("from", "").strip(),
        "from",
        parse_date,
        "from must be an ISO 8601 date",
        errors,
    )
    to_date = _parse(
        params.get("to", "").strip(),
        "to",
        parse_date,
        "to must be an ISO 8601 date",
        errors,
    )
    limit = _parse(
        params.get("limit", "").strip(),
        "limit",
        parse_int,
        "limit must be an integer",
        errors,
    )
    if errors:
        raise ValidationError(errors)

    log = container.exercise_service.get_exercise_log(
        ExerciseLogQuery(
            user_id=parse_identifier(raw_user_id),
            from_date=from_date,
            to_date=to_date,
            limit=limit,
        )
    )
    return {
        "_id": str(log.user.id),
        "username": log.user.username,
        "count": log.count,
        "log": [
            {
                "description": entry.description,
                "duration": entry.duration,
                "date": format_date(entry.date),
            }
            for entry in log.entries
        ],
    }


async def _read_body(request: Request) -> dict[str, str]:
    """Read a url-encoded, multipart or JSON body as a flat string mapping."""
    content_type = request.headers.get("content-type", "")
    if content_type.startswith("application/json"):
        try:
            payload = await request.json()
        except ValueError as exc:
            raise ValidationError({"body": "request body is not valid JSON"}) from exc
        if not isinstance(payload, dict):
            raise ValidationError({"body": "request body must be a JSON object"})
        return {
            str(key): str(value) for key, value in payload.items() if value is not None
        }
    form = await request.form()
    return {key: value for key, value in form.items() if isinstance(value, str)}


def _required(fields: Mapping[str, str], name: str, errors: dict[str, str]) -> str:
    value = (fields.get(name) or "").strip()
    if not value:
        errors[name] = f"{name} is required"
    return value


def _parse(
    raw: str,
    name: str,
    parser: Callable[[str], T],
    message: str,
    errors: dict[str, str],
) -> T | None:
    if not raw:
        return None
    try:
        return parser(raw)
    except ValueError:
        errors[name] = message
        return None


def _user_payload(user: UserRecord) -> dict[str, str]:
    return {"_id": str(user.id), "username": user.username}
