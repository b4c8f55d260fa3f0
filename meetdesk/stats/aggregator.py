"""Dashboard statistics derived from classified meetings and CRM state.

All functions take an explicit ``now`` so results are reproducible.
"""

import math
from collections.abc import Sequence
from datetime import datetime

import structlog

from meetdesk.models.crm import CrmIntegration, CrmStatus
from meetdesk.models.meeting import FollowUpStatus, Meeting
from meetdesk.stats.classifier import (
    ensure_aware,
    history,
    is_same_day,
    start_of_month,
    upcoming,
)
from meetdesk.stats.schemas import CrmSyncStatus, DashboardStats, StatCard

logger = structlog.get_logger()

DEFAULT_GOAL_OFFSET = 5


def _whole_minutes(later: datetime, earlier: datetime) -> int:
    return math.floor((later - earlier).total_seconds() / 60)


def _hours_phrase(minutes: int) -> str:
    hours = minutes // 60
    return f"{hours} {'hour' if hours == 1 else 'hours'}"


def time_until(start_time: datetime, now: datetime) -> str:
    """Describe how long until ``start_time``.

    Returns "in progress" once the start has passed, minutes under an
    hour, whole hours otherwise.
    """
    if start_time < now:
        return "in progress"
    minutes = _whole_minutes(start_time, now)
    if minutes < 60:
        return f"{minutes} minutes"
    return _hours_phrase(minutes)


def time_since(moment: datetime, now: datetime) -> str:
    """Describe how long ago ``moment`` was, e.g. "10 min ago"."""
    minutes = max(_whole_minutes(now, moment), 0)
    if minutes < 60:
        return f"{minutes} min ago"
    return f"{_hours_phrase(minutes)} ago"


def month_day(value: datetime, now: datetime) -> str:
    """Format as abbreviated month and day in ``now``'s timezone, e.g. "Jun 1"."""
    local = value.astimezone(now.tzinfo)
    return f"{local:%b} {local.day}"


def percent_change(current: int, previous: int) -> int:
    """Rounded percentage change; 100 when there is no baseline."""
    if previous == 0:
        return 100
    # Round half up
    return math.floor((current - previous) / previous * 100 + 0.5)


def upcoming_card(meetings: Sequence[Meeting], now: datetime) -> StatCard:
    """Card for meetings from today onward."""
    soon = upcoming(meetings, now)
    today = [m for m in soon if is_same_day(m.start_time, now)]

    if soon:
        description = f"Next in {time_until(soon[0].start_time, now)}"
    else:
        description = "No upcoming meetings"

    return StatCard(
        count=len(soon),
        change=f"+{len(today)} today" if today else "None today",
        description=description,
    )


def followups_card(meetings: Sequence[Meeting], now: datetime) -> StatCard:
    """Card for past meetings whose follow-up is overdue."""
    overdue = [
        m
        for m in history(meetings, now)
        if m.follow_up_status == FollowUpStatus.OVERDUE
    ]

    if overdue:
        oldest = min(overdue, key=lambda m: m.start_time)
        description = f"Oldest from {month_day(oldest.start_time, now)}"
    else:
        description = "No follow-ups needed"

    return StatCard(
        count=len(overdue),
        change=f"{len(overdue)} overdue" if overdue else "",
        description=description,
    )


def monthly_card(
    meetings: Sequence[Meeting],
    now: datetime,
    goal_offset: int = DEFAULT_GOAL_OFFSET,
) -> StatCard:
    """Card comparing this calendar month's meetings with last month's.

    This month counts every meeting from the first of the month onward,
    including later months. Last month is the whole preceding calendar month.
    """
    this_month = start_of_month(now)
    last_month = start_of_month(now, months_back=1)

    current = sum(1 for m in meetings if m.start_time >= this_month)
    previous = sum(1 for m in meetings if last_month <= m.start_time < this_month)

    delta = percent_change(current, previous)
    sign = "+" if delta > 0 else ""

    return StatCard(
        count=current,
        change=f"{sign}{delta}% vs last month",
        description=f"Goal: {current + goal_offset}",
    )


def crm_sync_status(
    integrations: Sequence[CrmIntegration], now: datetime
) -> CrmSyncStatus:
    """Summarize connected integrations by their most recent sync."""
    connected = [i for i in integrations if i.status == CrmStatus.CONNECTED]
    if not connected:
        return CrmSyncStatus(status="Not Connected", description="No CRM integrations")

    synced = [i for i in connected if i.last_sync is not None]
    if not synced:
        return CrmSyncStatus(status="Connected", description="No sync yet")

    # max() keeps the first of equal timestamps
    latest = max(synced, key=lambda i: i.last_sync)
    return CrmSyncStatus(
        status="Synced",
        description=time_since(latest.last_sync, now),
        connected_services=", ".join(i.name for i in connected),
    )


def compute_stats(
    meetings: Sequence[Meeting],
    integrations: Sequence[CrmIntegration],
    now: datetime,
    goal_offset: int = DEFAULT_GOAL_OFFSET,
) -> DashboardStats:
    """Build the full dashboard summary."""
    now = ensure_aware(now)
    stats = DashboardStats(
        upcoming_meetings=upcoming_card(meetings, now),
        followups=followups_card(meetings, now),
        monthly_meetings=monthly_card(meetings, now, goal_offset),
        crm_sync=crm_sync_status(integrations, now),
    )
    logger.debug(
        "dashboard stats computed",
        meetings=len(meetings),
        integrations=len(integrations),
        upcoming=stats.upcoming_meetings.count,
        overdue=stats.followups.count,
    )
    return stats
