"""Temporal classification of meetings relative to a reference time.

Calendar days and months are taken in the timezone of ``now``. A meeting
earlier today is upcoming, never history, so today's finished morning
meeting still shows with the rest of the day.
"""

from collections.abc import Iterable
from datetime import UTC, datetime
from typing import TypeVar

from meetdesk.models.meeting import Meeting

M = TypeVar("M", bound=Meeting)


def ensure_aware(now: datetime) -> datetime:
    """Treat a naive reference time as UTC."""
    if now.tzinfo is None:
        return now.replace(tzinfo=UTC)
    return now


def is_same_day(value: datetime, now: datetime) -> bool:
    """Check whether ``value`` falls on the same local calendar day as ``now``."""
    now = ensure_aware(now)
    return value.astimezone(now.tzinfo).date() == now.date()


def is_upcoming(start_time: datetime, now: datetime) -> bool:
    """Upcoming means starting at or after now, or anywhere on today's date."""
    now = ensure_aware(now)
    return start_time >= now or is_same_day(start_time, now)


def upcoming(meetings: Iterable[M], now: datetime) -> list[M]:
    """Meetings from today onward, soonest first."""
    selected = [m for m in meetings if is_upcoming(m.start_time, now)]
    return sorted(selected, key=lambda m: m.start_time)


def history(meetings: Iterable[M], now: datetime) -> list[M]:
    """Meetings before today, most recent first."""
    selected = [m for m in meetings if not is_upcoming(m.start_time, now)]
    return sorted(selected, key=lambda m: m.start_time, reverse=True)


def start_of_month(now: datetime, months_back: int = 0) -> datetime:
    """Midnight on the first day of the month ``months_back`` before ``now``'s."""
    now = ensure_aware(now)
    month_index = now.year * 12 + (now.month - 1) - months_back
    year, month = divmod(month_index, 12)
    return now.replace(
        year=year,
        month=month + 1,
        day=1,
        hour=0,
        minute=0,
        second=0,
        microsecond=0,
    )
