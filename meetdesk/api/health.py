"""Health check endpoints for monitoring and orchestration.

Mounted at the application root, outside the resource prefix.
"""

from datetime import UTC, datetime

from fastapi import APIRouter, Request
from pydantic import BaseModel

from meetdesk.config import Settings, settings

router = APIRouter(prefix="/health", tags=["health"])


class ServiceHealth(BaseModel):
    """Service identity and uptime marker."""

    status: str
    service: str
    version: str
    environment: str
    timestamp: datetime
    timezone: str


class LivenessResponse(BaseModel):
    """Response model for liveness probe."""

    status: str


class StoreReadiness(BaseModel):
    """Readiness of the API and the in-memory store."""

    status: str
    checks: dict[str, str]
    records: dict[str, int] | None = None


def _app_settings(request: Request) -> Settings:
    return getattr(request.app.state, "settings", settings)


@router.get("/", response_model=ServiceHealth)
async def health_check(request: Request) -> ServiceHealth:
    """Report the running service, its version and its calendar zone."""
    config = _app_settings(request)
    return ServiceHealth(
        status="healthy",
        service=config.app_name,
        version=config.app_version,
        environment=config.app_env,
        timestamp=datetime.now(UTC),
        timezone=config.timezone,
    )


@router.get("/live", response_model=LivenessResponse)
async def liveness() -> LivenessResponse:
    return LivenessResponse(status="alive")


@router.get("/ready", response_model=StoreReadiness)
async def readiness(request: Request) -> StoreReadiness:
    """Ready once a store is attached.

    The store check also reports how many records of each kind it holds,
    so an unseeded store is visible from the probe.
    """
    checks: dict[str, str] = {"api": "ok"}
    store = getattr(request.app.state, "store", None)
    if store is None:
        checks["store"] = "not_configured"
        return StoreReadiness(status="not_ready", checks=checks)

    records = await store.count_records()
    checks["store"] = "ok"
    checks["seed"] = "loaded" if records["meeting_types"] else "empty"
    return StoreReadiness(status="ready", checks=checks, records=records)
