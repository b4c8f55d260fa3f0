"""Meeting type reference data."""

from pydantic import Field

from meetdesk.models.base import ApiModel


class MeetingTypeCreate(ApiModel):
    """Fields for a new meeting type."""

    label: str = Field(min_length=1, description="Human readable label")
    value: str = Field(min_length=1, description="Unique key used by meetings")


class MeetingType(MeetingTypeCreate):
    """A stored meeting type."""

    id: int = Field(description="Sequential meeting type identifier")
