"""Meeting type reference data endpoint."""

import structlog
from fastapi import APIRouter, Depends, HTTPException

from meetdesk.api.deps import get_store
from meetdesk.models.meeting_type import MeetingType
from meetdesk.store.memory_store import MemoryStore

logger = structlog.get_logger()
router = APIRouter(prefix="/meeting-types", tags=["meeting-types"])


@router.get("", response_model=list[MeetingType])
async def list_meeting_types(
    store: MemoryStore = Depends(get_store),
) -> list[MeetingType]:
    """List the available meeting types."""
    try:
        return await store.get_meeting_types()
    except Exception:
        logger.exception("failed to list meeting types")
        raise HTTPException(status_code=500, detail="Failed to retrieve meeting types")
