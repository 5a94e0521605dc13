"""Payload validation helpers shared by the services."""

from collections.abc import Mapping
from typing import TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from photo_marketplace.adapters.field_mapping import COLUMN_MAPS
from photo_marketplace.errors import ValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)


def validate_payload(
    model: type[ModelT], payload: Mapping[str, object], entity: str | None = None
) -> ModelT:
    """Validate a column payload, raising a 400-class error on failure."""
    try:
        return model.model_validate(dict(payload))
    except PydanticValidationError as exc:
        raise ValidationError(format_validation_error(exc, entity)) from exc


def format_validation_error(
    exc: PydanticValidationError, entity: str | None = None
) -> str:
    """Render pydantic errors with API field names."""
    columns = COLUMN_MAPS.get(entity, {}) if entity else {}
    parts = []
    for error in exc.errors():
        location = ".".join(
            columns.get(str(part), str(part)) for part in error.get("loc", ())
        )
        message = error.get("msg", "invalid value")
        parts.append(f"{location}: {message}" if location else message)
    return "Validation error: " + "; ".join(parts)
