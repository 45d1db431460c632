"""
Base Schemas.

Request bodies sent to the booking service. Attributes are snake_case,
the wire format is camelCase. Command-line arguments arrive as strings
and are coerced here, so a malformed number is rejected before any
request is made.
"""

import math
from typing import Annotated, Any, TypeVar

from pydantic import BaseModel, BeforeValidator, ConfigDict
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from ntc_booking.core.exceptions import ValidationError


def split_stops(value: Any) -> Any:
    """Split a comma-separated stop list, keeping every segment as given."""
    if isinstance(value, str):
        return value.split(",")
    return value


def parse_flag(value: Any) -> Any:
    """Only the literal string "true" is true; every other string is false."""
    if isinstance(value, str):
        return value == "true"
    return value


def parse_number(value: Any) -> Any:
    """
    Coerce an argument to an int, or to a float when it has a fractional part.

    Raises:
        ValueError: If the value is not a finite number (nan and inf included)
    """
    if isinstance(value, bool):
        raise ValueError("Input should be a finite number")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            pass
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValueError("Input should be a finite number") from None
    if not math.isfinite(number):
        raise ValueError("Input should be a finite number")
    return number


Number = Annotated[int | float, BeforeValidator(parse_number)]
"""Integers stay integers on the wire, decimals become floats."""

Stops = Annotated[list[str], BeforeValidator(split_stops)]

Flag = Annotated[bool, BeforeValidator(parse_flag)]


class RequestModel(BaseModel):
    """Base for every request body or query sent to the booking service."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
    )

    def to_payload(self) -> dict[str, Any]:
        """Serialize with camelCase keys, ready for JSON encoding."""
        return self.model_dump(by_alias=True, mode="json")


ModelT = TypeVar("ModelT", bound=RequestModel)


def field_label(model_cls: type[BaseModel], loc: tuple[Any, ...]) -> str:
    """
    Render an error location with wire (camelCase) field names.

    Segments that do not name a field, such as list indexes or union
    member tags, are left out.
    """
    parts: list[str] = []
    current: type[BaseModel] | None = model_cls
    for segment in loc:
        if current is None:
            break
        fields = current.model_fields
        name = segment if segment in fields else next(
            (key for key, info in fields.items() if info.alias == segment),
            None,
        )
        if name is None:
            continue
        info = fields[name]
        parts.append(info.alias or name)
        annotation = info.annotation
        if isinstance(annotation, type) and issubclass(annotation, BaseModel):
            current = annotation
        else:
            current = None
    return ".".join(parts) or ".".join(str(segment) for segment in loc)


def build_request(model_cls: type[ModelT], **fields: Any) -> ModelT:
    """
    Construct a request model from raw command arguments.

    Args:
        model_cls: Request schema to build
        **fields: Field values keyed by attribute name

    Returns:
        Validated request model

    Raises:
        ValidationError: If any argument cannot be coerced
    """
    try:
        return model_cls(**fields)
    except PydanticValidationError as e:
        errors = e.errors()
        first = errors[0]
        raise ValidationError(
            f"Invalid {field_label(model_cls, first['loc'])}: {first['msg']}",
            details={
                field_label(model_cls, error["loc"]): error["msg"]
                for error in errors
            },
        ) from e
