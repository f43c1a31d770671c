"""
Boundary Validation
===================

Converts raw payloads into DTOs, translating Pydantic errors into
ValidationException so out-of-domain enum values never reach the core.
"""

from typing import Any, Mapping, Type, TypeVar

from pydantic import BaseModel, ValidationError

from ticket_engine.core.exceptions import ValidationException

ModelT = TypeVar("ModelT", bound=BaseModel)


def parse_payload(model: Type[ModelT], payload: Mapping[str, Any]) -> ModelT:
    """
    Validate ``payload`` against ``model``.

    Raises:
        ValidationException: carrying the first offending field name and
            the full error list in ``details``
    """
    try:
        return model.model_validate(payload)
    except ValidationError as e:
        errors = e.errors(include_url=False)
        first = errors[0] if errors else {}
        field = ".".join(str(part) for part in first.get("loc", ())) or None
        raise ValidationException(
            f"Invalid {model.__name__}: {first.get('msg', 'validation failed')}",
            field=field,
            details={"field": field, "errors": errors},
        ) from e
