"""API router aggregation."""

from fastapi import APIRouter

from meetdesk.api.clients import router as clients_router
from meetdesk.api.crm import router as crm_router
from meetdesk.api.meeting_types import router as meeting_types_router
from meetdesk.api.meetings import router as meetings_router
from meetdesk.api.stats import router as stats_router

api_router = APIRouter()
api_router.include_router(clients_router)
api_router.include_router(meetings_router)
api_router.include_router(meeting_types_router)
api_router.include_router(crm_router)
# Dashboard summary and analytics report
api_router.include_router(stats_router)
