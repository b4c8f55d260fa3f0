"""Client model representing a customer account and its contacts."""

from datetime import UTC, datetime
from enum import Enum

from pydantic import Field

from meetdesk.models.base import ApiModel, PartialModel, Timestamp


class ClientStatus(str, Enum):
    """Relationship status of a client."""

    ACTIVE = "active"
    INACTIVE = "inactive"
    POTENTIAL = "potential"


class Contact(ApiModel):
    """A person at the client's company."""

    name: str = Field(description="Contact full name")
    title: str = Field(default="", description="Job title")
    email: str = Field(default="", description="Contact email address")
    phone: str = Field(default="", description="Contact phone number")


class ClientCreate(ApiModel):
    """Fields accepted when creating a client."""

    name: str = Field(min_length=1, max_length=200, description="Display name")
    company: str = Field(min_length=1, max_length=200, description="Company name")
    email: str = Field(min_length=1, max_length=320, description="Primary email")
    phone: str | None = Field(default=None, description="Primary phone number")
    status: ClientStatus = Field(
        default=ClientStatus.ACTIVE,
        description="Relationship status",
    )
    avatar_bg: str | None = Field(default=None, description="Avatar background hint")
    avatar_color: str | None = Field(default=None, description="Avatar text color hint")
    notes: str | None = Field(default=None, description="Free-text notes")
    contacts: list[Contact] = Field(
        default_factory=list,
        description="People at the client, in display order",
    )


class Client(ClientCreate):
    """A stored client.

    ``last_meeting`` is denormalized: it tracks the latest meeting start
    seen when meetings for this client are created.
    """

    id: int = Field(description="Sequential client identifier")
    last_meeting: Timestamp | None = Field(
        default=None,
        description="Start time of the client's latest meeting",
    )
    created_at: Timestamp = Field(
        default_factory=lambda: datetime.now(UTC),
        description="When the client was created",
    )


class ClientUpdate(PartialModel):
    """Partial client for PATCH requests."""

    non_nullable = frozenset({"name", "company", "email", "status", "contacts"})

    name: str | None = Field(default=None, min_length=1, max_length=200)
    company: str | None = Field(default=None, min_length=1, max_length=200)
    email: str | None = Field(default=None, min_length=1, max_length=320)
    phone: str | None = None
    status: ClientStatus | None = None
    avatar_bg: str | None = None
    avatar_color: str | None = None
    notes: str | None = None
    contacts: list[Contact] | None = None
    last_meeting: Timestamp | None = None
