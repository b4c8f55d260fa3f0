"""Schemas for dashboard statistics."""

from pydantic import Field

from meetdesk.models.base import ApiModel


class StatCard(ApiModel):
    """One dashboard summary card."""

    count: int = Field(description="Headline number")
    change: str = Field(description="Short change label, e.g. '+2 today'")
    description: str = Field(description="Supporting sentence")


class CrmSyncStatus(ApiModel):
    """Summary of simulated CRM synchronization."""

    status: str = Field(description="Not Connected, Connected or Synced")
    description: str = Field(description="Human readable sync age")
    connected_services: str | None = Field(
        default=None,
        description="Comma-joined names of connected integrations",
    )


class DashboardStats(ApiModel):
    """Derived dashboard metrics. Computed per request, never stored."""

    upcoming_meetings: StatCard
    followups: StatCard
    monthly_meetings: StatCard
    crm_sync: CrmSyncStatus
