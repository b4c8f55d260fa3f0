"""Meeting API endpoints.

Every meeting in a response is joined with its client's current record.
"""

from datetime import datetime

import structlog
from fastapi import APIRouter, Depends, HTTPException

from meetdesk.api.deps import get_now, get_store, parse_id
from meetdesk.api.errors import PayloadValidationError
from meetdesk.models.meeting import EnrichedMeeting, MeetingCreate, MeetingUpdate
from meetdesk.store.errors import MissingClientError
from meetdesk.store.memory_store import MemoryStore

logger = structlog.get_logger()
router = APIRouter(prefix="/meetings", tags=["meetings"])


@router.get("", response_model=list[EnrichedMeeting])
async def list_meetings(store: MemoryStore = Depends(get_store)) -> list[EnrichedMeeting]:
    """List all meetings."""
    try:
        return await store.get_meetings()
    except Exception:
        logger.exception("failed to list meetings")
        raise HTTPException(status_code=500, detail="Failed to retrieve meetings")


@router.get("/upcoming", response_model=list[EnrichedMeeting])
async def list_upcoming_meetings(
    store: MemoryStore = Depends(get_store),
    now: datetime = Depends(get_now),
) -> list[EnrichedMeeting]:
    """Meetings from today onward, soonest first."""
    try:
        return await store.get_upcoming_meetings(now)
    except Exception:
        logger.exception("failed to list upcoming meetings")
        raise HTTPException(
            status_code=500, detail="Failed to retrieve upcoming meetings"
        )


@router.get("/history", response_model=list[EnrichedMeeting])
async def list_meeting_history(
    store: MemoryStore = Depends(get_store),
    now: datetime = Depends(get_now),
) -> list[EnrichedMeeting]:
    """Meetings before today, most recent first."""
    try:
        return await store.get_meeting_history(now)
    except Exception:
        logger.exception("failed to list meeting history")
        raise HTTPException(status_code=500, detail="Failed to retrieve meeting history")


@router.get("/calendar", response_model=list[EnrichedMeeting])
async def list_calendar_meetings(
    store: MemoryStore = Depends(get_store),
) -> list[EnrichedMeeting]:
    """All meetings, for the calendar view to lay out."""
    try:
        return await store.get_meetings()
    except Exception:
        logger.exception("failed to list calendar meetings")
        raise HTTPException(
            status_code=500, detail="Failed to retrieve calendar meetings"
        )


@router.get("/{meeting_id}", response_model=EnrichedMeeting)
async def get_meeting(
    meeting_id: str, store: MemoryStore = Depends(get_store)
) -> EnrichedMeeting:
    """Get one meeting by id."""
    entity_id = parse_id(meeting_id, "meeting")
    try:
        meeting = await store.get_meeting(entity_id)
    except Exception:
        logger.exception("failed to get meeting", meeting_id=entity_id)
        raise HTTPException(status_code=500, detail="Failed to retrieve meeting")
    if meeting is None:
        raise HTTPException(status_code=404, detail="Meeting not found")
    return meeting


@router.post("", response_model=EnrichedMeeting, status_code=201)
async def create_meeting(
    body: MeetingCreate, store: MemoryStore = Depends(get_store)
) -> EnrichedMeeting:
    """Schedule a meeting for an existing client."""
    try:
        return await store.create_meeting(body)
    except MissingClientError as e:
        raise PayloadValidationError(str(e))
    except Exception:
        logger.exception("failed to create meeting", client_id=body.client_id)
        raise HTTPException(status_code=500, detail="Failed to create meeting")


@router.patch("/{meeting_id}", response_model=EnrichedMeeting)
async def update_meeting(
    meeting_id: str, body: MeetingUpdate, store: MemoryStore = Depends(get_store)
) -> EnrichedMeeting:
    """Apply a partial update to a meeting."""
    entity_id = parse_id(meeting_id, "meeting")
    changes = body.changes()
    try:
        meeting = await store.update_meeting(entity_id, changes)
    except MissingClientError as e:
        if "client_id" not in changes:
            logger.exception("meeting references missing client", meeting_id=entity_id)
            raise HTTPException(status_code=500, detail="Failed to update meeting")
        raise PayloadValidationError(str(e))
    except Exception:
        logger.exception("failed to update meeting", meeting_id=entity_id)
        raise HTTPException(status_code=500, detail="Failed to update meeting")
    if meeting is None:
        raise HTTPException(status_code=404, detail="Meeting not found")
    return meeting
