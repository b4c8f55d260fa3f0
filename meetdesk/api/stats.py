"""Dashboard statistics and analytics report endpoints."""

from datetime import datetime

import structlog
from fastapi import APIRouter, Depends, HTTPException, Query

from meetdesk.api.deps import get_now, get_store
from meetdesk.stats.reports import DEFAULT_TIME_RANGE, ReportData, build_report
from meetdesk.stats.schemas import DashboardStats
from meetdesk.store.memory_store import MemoryStore

logger = structlog.get_logger()
router = APIRouter(tags=["stats"])


@router.get("/stats", response_model=DashboardStats, response_model_exclude_none=True)
async def get_stats(
    store: MemoryStore = Depends(get_store),
    now: datetime = Depends(get_now),
) -> DashboardStats:
    """Summary cards for the dashboard."""
    try:
        return await store.get_stats(now)
    except Exception:
        logger.exception("failed to compute stats")
        raise HTTPException(status_code=500, detail="Failed to retrieve stats")


@router.get("/reports", response_model=ReportData)
async def get_reports(
    time_range: str = Query(
        default=DEFAULT_TIME_RANGE,
        alias="timeRange",
        description="Report window",
    ),
) -> ReportData:
    """Analytics report for the reports page."""
    return build_report(time_range)
