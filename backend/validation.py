"""
Request body validators, one per entity kind.

Each validator returns the parsed model or raises ``ValidationFailed``
carrying every failing field, so a client sees all problems at once.
"""
from typing import Any, Dict

from pydantic import ValidationError

from errors import ValidationFailed, field_errors
from schemas import (
    ContentItemCreate,
    ContentItemUpdate,
    ProjectRequestCreate,
    ProjectRequestUpdate,
)


def _parse(model, payload: Any, message: str):
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        raise ValidationFailed(message, field_errors(exc.errors()))


def validate_content_item(payload: Any) -> ContentItemCreate:
    return _parse(ContentItemCreate, payload, "Invalid content data")


def validate_content_update(payload: Any) -> Dict[str, Any]:
    """Return only the fields the client actually sent."""
    update = _parse(ContentItemUpdate, payload, "Invalid content data")
    return update.model_dump(exclude_unset=True)


def validate_project_request(payload: Any) -> ProjectRequestCreate:
    return _parse(ProjectRequestCreate, payload, "Invalid project request data")


def validate_project_request_update(payload: Any) -> Dict[str, Any]:
    update = _parse(ProjectRequestUpdate, payload, "Invalid project request data")
    return update.model_dump(exclude_unset=True)
