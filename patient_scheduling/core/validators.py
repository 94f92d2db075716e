"""
Request validation helpers.

``validate_date`` and ``validate_time`` are the syntax checks applied to
appointment slots. They never raise: anything that is not a correctly
formatted string is simply rejected.

``validate_request`` runs a pydantic request schema over a raw JSON body and
returns a ``ValidationOutcome`` instead of raising, so callers can decide
where in their own sequence of checks a failed body is reported.
"""
from typing import Any, NamedTuple, Optional, Type, TypeVar
import re

from pydantic import BaseModel, ValidationError
from pydantic_core import PydanticCustomError

DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)
TIME_PATTERN = re.compile(r"([01]\d|2[0-3]):[0-5]\d", re.ASCII)

ModelT = TypeVar("ModelT", bound=BaseModel)

def validate_date(value: Any) -> bool:
    """True for ``YYYY-MM-DD`` strings. The calendar itself is not checked."""
    return isinstance(value, str) and DATE_PATTERN.fullmatch(value) is not None

def validate_time(value: Any) -> bool:
    """True for 24-hour ``HH:MM`` strings."""
    return isinstance(value, str) and TIME_PATTERN.fullmatch(value) is not None

def field_error(field: str, message: str) -> PydanticCustomError:
    """Build a schema error that remembers which request field failed."""
    return PydanticCustomError("invalid_field", message, {"field": field})

class ValidationOutcome(NamedTuple):
    value: Optional[BaseModel] = None
    field: Optional[str] = None
    message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.value is not None

def validate_request(schema: Type[ModelT], payload: Any) -> ValidationOutcome:
    """Validate a JSON body against ``schema``.

    A missing body is treated as an empty object. Only the first failure is
    reported; schema fields are validated in declaration order, so the order
    of the fields is the order of the checks.
    """
    if payload is None:
        payload = {}
    if not isinstance(payload, dict):
        return ValidationOutcome(message="Request body must be a JSON object")

    try:
        return ValidationOutcome(value=schema.model_validate(payload))
    except ValidationError as exc:
        error = exc.errors()[0]
        context = error.get("ctx") or {}
        field = context.get("field") or ".".join(str(part) for part in error["loc"]) or None
        return ValidationOutcome(field=field, message=error["msg"])
