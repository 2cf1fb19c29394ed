"""Boundary Validation — turns pydantic errors into RequestValidationFailed.

Invariants:
    - Field paths are dotted strings ("body.email" style, no location prefix here)
    - Every error entry carries field, message, type
"""

from collections.abc import Iterable, Mapping
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from showroom.core.errors import RequestValidationFailed

ModelT = TypeVar("ModelT", bound=BaseModel)


def format_validation_errors(errors: Iterable[Mapping[str, Any]]) -> list[dict]:
    """Flatten pydantic/FastAPI error dicts into the envelope's details list."""
    return [
        {
            "field": ".".join(str(loc) for loc in e["loc"]),
            "message": e["msg"],
            "type": e["type"],
        }
        for e in errors
    ]


def validate_input(model: type[ModelT], data: Any, message: str) -> ModelT:
    """Validate data against model or raise RequestValidationFailed(message)."""
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise RequestValidationFailed(
            message, format_validation_errors(e.errors()),
        ) from e
