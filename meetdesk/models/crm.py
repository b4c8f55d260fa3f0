"""CRM integration model. Connections are simulated; no network calls occur."""

from datetime import UTC, datetime
from enum import Enum
from typing import Any

from pydantic import Field

from meetdesk.models.base import ApiModel, PartialModel, Timestamp


class CrmType(str, Enum):
    """Supported CRM providers."""

    SALESFORCE = "salesforce"
    MICROSOFT = "microsoft"
    GOOGLE = "google"
    HUBSPOT = "hubspot"
    OTHER = "other"


class CrmStatus(str, Enum):
    """Connection state of an integration."""

    CONNECTED = "connected"
    PENDING = "pending"
    DISCONNECTED = "disconnected"


class CrmIntegrationCreate(ApiModel):
    """Fields accepted when connecting a CRM."""

    name: str = Field(min_length=1, description="Display name")
    type: CrmType = Field(description="CRM provider")
    status: CrmStatus = Field(
        default=CrmStatus.DISCONNECTED,
        description="Connection state",
    )
    config: dict[str, Any] = Field(
        default_factory=dict,
        description="Opaque provider configuration",
    )


class CrmIntegration(CrmIntegrationCreate):
    """A stored CRM integration."""

    id: int = Field(description="Sequential integration identifier")
    last_sync: Timestamp | None = Field(
        default=None,
        description="When the integration last synced",
    )
    created_at: Timestamp = Field(
        default_factory=lambda: datetime.now(UTC),
        description="When the integration was created",
    )


class CrmIntegrationUpdate(PartialModel):
    """Partial integration for PATCH requests."""

    non_nullable = frozenset({"name", "type", "status", "config"})

    name: str | None = Field(default=None, min_length=1)
    type: CrmType | None = None
    status: CrmStatus | None = None
    config: dict[str, Any] | None = None
    last_sync: Timestamp | None = None
