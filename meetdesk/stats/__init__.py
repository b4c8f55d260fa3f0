"""Meeting classification and dashboard statistics.

Provides upcoming/history partitioning, summary card computation,
CRM sync status and the analytics report fixture.
"""

from meetdesk.stats.aggregator import (
    compute_stats,
    crm_sync_status,
    followups_card,
    monthly_card,
    percent_change,
    time_since,
    time_until,
    upcoming_card,
)
from meetdesk.stats.classifier import history, is_same_day, is_upcoming, upcoming
from meetdesk.stats.reports import DEFAULT_TIME_RANGE, ReportData, build_report
from meetdesk.stats.schemas import CrmSyncStatus, DashboardStats, StatCard

__all__ = [
    "DEFAULT_TIME_RANGE",
    "CrmSyncStatus",
    "DashboardStats",
    "ReportData",
    "StatCard",
    "build_report",
    "compute_stats",
    "crm_sync_status",
    "followups_card",
    "history",
    "is_same_day",
    "is_upcoming",
    "monthly_card",
    "percent_change",
    "time_since",
    "time_until",
    "upcoming",
    "upcoming_card",
]
