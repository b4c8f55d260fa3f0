"""Analytics report served to the reports page.

The figures are a fixed fixture; they do not depend on stored meetings
or on the requested time range.
"""

from pydantic import Field

from meetdesk.models.base import ApiModel


DEFAULT_TIME_RANGE = "month"


class ReportSummary(ApiModel):
    """Headline report figures with their change vs. the previous period."""

    total_meetings: int
    total_meetings_change: int
    average_duration: int = Field(description="Average meeting length in minutes")
    average_duration_change: int
    completion_rate: int = Field(description="Completed meetings, in percent")
    completion_rate_change: int


class TimeBucket(ApiModel):
    """Scheduled vs. completed meetings for one period bucket."""

    name: str
    scheduled: int
    completed: int


class ChartSlice(ApiModel):
    """One slice of a breakdown chart."""

    name: str
    value: int
    color: str


class ReportData(ApiModel):
    """Full analytics report."""

    time_range: str = Field(description="Requested report window, echoed as given")
    summary: ReportSummary
    by_time: list[TimeBucket]
    by_client: list[ChartSlice]
    by_type: list[ChartSlice]


_SUMMARY = {
    "total_meetings": 32,
    "total_meetings_change": 12,
    "average_duration": 45,
    "average_duration_change": 5,
    "completion_rate": 92,
    "completion_rate_change": 3,
}

_BY_TIME = [
    ("Week 1", 10, 9),
    ("Week 2", 8, 7),
    ("Week 3", 12, 11),
    ("Week 4", 6, 5),
]

_BY_CLIENT = [
    ("Acme Corp", 12, "#4f46e5"),
    ("TechStart", 8, "#22c55e"),
    ("Global Shipping", 6, "#f59e0b"),
    ("Nova Ventures", 4, "#ef4444"),
    ("Others", 2, "#94a3b8"),
]

_BY_TYPE = [
    ("Strategy Review", 10, "#4f46e5"),
    ("Contract Discussion", 8, "#22c55e"),
    ("Partnership", 7, "#f59e0b"),
    ("Product Demo", 5, "#ef4444"),
    ("Introduction", 2, "#94a3b8"),
]


def build_report(time_range: str = DEFAULT_TIME_RANGE) -> ReportData:
    """Return the analytics fixture, tagged with the requested range."""
    return ReportData(
        time_range=time_range,
        summary=ReportSummary(**_SUMMARY),
        by_time=[
            TimeBucket(name=name, scheduled=scheduled, completed=completed)
            for name, scheduled, completed in _BY_TIME
        ],
        by_client=[
            ChartSlice(name=name, value=value, color=color)
            for name, value, color in _BY_CLIENT
        ],
        by_type=[
            ChartSlice(name=name, value=value, color=color)
            for name, value, color in _BY_TYPE
        ],
    )
