"""Base model classes and shared field types for all domain models."""

from datetime import UTC, datetime
from typing import Annotated, ClassVar

from pydantic import (
    AfterValidator,
    BaseModel,
    ConfigDict,
    PlainSerializer,
    model_validator,
)
from pydantic.alias_generators import to_camel


def to_utc(value: datetime) -> datetime:
    """Normalize a datetime to UTC, treating naive values as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def format_timestamp(value: datetime) -> str:
    """Render a timestamp as ISO-8601 UTC with milliseconds.

    Example: 2024-06-01T10:00:00.000Z
    """
    value = to_utc(value)
    return f"{value:%Y-%m-%dT%H:%M:%S}.{value.microsecond // 1000:03d}Z"


Timestamp = Annotated[
    datetime,
    AfterValidator(to_utc),
    PlainSerializer(format_timestamp, return_type=str, when_used="json"),
]


class ApiModel(BaseModel):
    """Base class for every model that crosses the HTTP boundary.

    Provides:
    - camelCase JSON field names (snake_case accepted on input too)
    - Whitespace stripping on strings
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
        from_attributes=True,
    )


class PartialModel(ApiModel):
    """Base class for PATCH bodies.

    Every field is optional so that only the fields present in the request
    are applied. Fields named in ``non_nullable`` may be omitted but must not
    be sent as an explicit null.
    """

    model_config = ConfigDict(extra="forbid")

    non_nullable: ClassVar[frozenset[str]] = frozenset()

    @model_validator(mode="after")
    def reject_explicit_nulls(self) -> "PartialModel":
        for name in self.model_fields_set & self.non_nullable:
            if getattr(self, name) is None:
                raise ValueError(f"{to_camel(name)} cannot be null")
        return self

    def changes(self) -> dict:
        """Return only the fields explicitly set in the request."""
        return {name: getattr(self, name) for name in self.model_fields_set}
