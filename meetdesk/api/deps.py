"""Shared FastAPI dependencies for the resource routers."""

from datetime import datetime

from fastapi import HTTPException, Request

from meetdesk.config import settings
from meetdesk.store.memory_store import MemoryStore


def get_store(request: Request) -> MemoryStore:
    """Get MemoryStore from app state."""
    if not hasattr(request.app.state, "store"):
        raise HTTPException(status_code=500, detail="Store not initialized")
    return request.app.state.store


def get_now(request: Request) -> datetime:
    """Current time in the app's configured timezone.

    Overridden in tests to pin the reference time.
    """
    config = getattr(request.app.state, "settings", settings)
    return datetime.now(config.tzinfo)


def parse_id(raw: str, label: str) -> int:
    """Parse a numeric path id.

    Raises:
        HTTPException: 400 if ``raw`` is not a plain decimal integer.
    """
    if not (raw.isascii() and raw.removeprefix("-").isdigit()):
        raise HTTPException(status_code=400, detail=f"Invalid {label} ID")
    return int(raw)
