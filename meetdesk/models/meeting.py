"""Meeting model representing a scheduled client meeting."""

from datetime import UTC, datetime
from enum import Enum

from pydantic import Field

from meetdesk.models.base import ApiModel, PartialModel, Timestamp
from meetdesk.models.client import Client


class MeetingStatus(str, Enum):
    """Lifecycle status of a meeting."""

    SCHEDULED = "scheduled"
    CONFIRMED = "confirmed"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    RESCHEDULED = "rescheduled"


class FollowUpStatus(str, Enum):
    """Post-meeting follow-up urgency.

    Independent of the meeting's own status. For OVERDUE, ``follow_up_days``
    holds how many days the follow-up is overdue.
    """

    NONE = "none"
    DUE_SOON = "due-soon"
    OVERDUE = "overdue"
    COMPLETED = "completed"
    NOT_REQUIRED = "not-required"


class Participant(ApiModel):
    """A meeting attendee."""

    name: str = Field(min_length=1, description="Attendee name")
    email: str = Field(default="", description="Attendee email address")


class MeetingCreate(ApiModel):
    """Fields accepted when scheduling a meeting."""

    client_id: int = Field(description="Owning client")
    title: str = Field(min_length=1, max_length=500, description="Meeting title")
    type: str = Field(min_length=1, description="Meeting type value key")
    start_time: Timestamp = Field(description="When the meeting starts")
    end_time: Timestamp = Field(description="When the meeting ends")
    location: str = Field(
        min_length=1,
        description="Platform or place (zoom, teams, in-person, ...)",
    )
    status: MeetingStatus = Field(
        default=MeetingStatus.SCHEDULED,
        description="Lifecycle status",
    )
    participants: list[Participant] = Field(
        default_factory=list,
        description="Meeting attendees",
    )
    agenda: str | None = Field(default=None, description="Planned agenda")
    notes: str | None = Field(default=None, description="Meeting notes")


class Meeting(MeetingCreate):
    """A stored meeting. Holds only the client foreign key."""

    id: int = Field(description="Sequential meeting identifier")
    follow_up_status: FollowUpStatus = Field(
        default=FollowUpStatus.NONE,
        description="Follow-up urgency",
    )
    follow_up_days: int | None = Field(
        default=None,
        description="Days overdue when follow_up_status is overdue",
    )
    synced_with_crm: bool = Field(
        default=False,
        description="Whether the meeting was pushed to a CRM",
    )
    created_at: Timestamp = Field(
        default_factory=lambda: datetime.now(UTC),
        description="When the meeting was created",
    )


class EnrichedMeeting(Meeting):
    """A meeting joined with the current state of its client."""

    client: Client = Field(description="Owning client at read time")


class MeetingUpdate(PartialModel):
    """Partial meeting for PATCH requests."""

    non_nullable = frozenset(
        {
            "client_id",
            "title",
            "type",
            "start_time",
            "end_time",
            "location",
            "status",
            "participants",
            "follow_up_status",
            "synced_with_crm",
        }
    )

    client_id: int | None = None
    title: str | None = Field(default=None, min_length=1, max_length=500)
    type: str | None = Field(default=None, min_length=1)
    start_time: Timestamp | None = None
    end_time: Timestamp | None = None
    location: str | None = Field(default=None, min_length=1)
    status: MeetingStatus | None = None
    participants: list[Participant] | None = None
    agenda: str | None = None
    notes: str | None = None
    follow_up_status: FollowUpStatus | None = None
    follow_up_days: int | None = None
    synced_with_crm: bool | None = None
