"""Client API endpoints."""

import structlog
from fastapi import APIRouter, Depends, HTTPException

from meetdesk.api.deps import get_store, parse_id
from meetdesk.models.client import Client, ClientCreate, ClientUpdate
from meetdesk.models.meeting import EnrichedMeeting
from meetdesk.store.memory_store import MemoryStore

logger = structlog.get_logger()
router = APIRouter(prefix="/clients", tags=["clients"])


@router.get("", response_model=list[Client])
async def list_clients(store: MemoryStore = Depends(get_store)) -> list[Client]:
    """List all clients."""
    try:
        return await store.get_clients()
    except Exception:
        logger.exception("failed to list clients")
        raise HTTPException(status_code=500, detail="Failed to retrieve clients")


@router.get("/{client_id}", response_model=Client)
async def get_client(client_id: str, store: MemoryStore = Depends(get_store)) -> Client:
    """Get one client by id."""
    entity_id = parse_id(client_id, "client")
    try:
        client = await store.get_client(entity_id)
    except Exception:
        logger.exception("failed to get client", client_id=entity_id)
        raise HTTPException(status_code=500, detail="Failed to retrieve client")
    if client is None:
        raise HTTPException(status_code=404, detail="Client not found")
    return client


@router.get("/{client_id}/meetings", response_model=list[EnrichedMeeting])
async def list_client_meetings(
    client_id: str, store: MemoryStore = Depends(get_store)
) -> list[EnrichedMeeting]:
    """List one client's meetings, soonest first."""
    entity_id = parse_id(client_id, "client")
    try:
        client = await store.get_client(entity_id)
        meetings = await store.get_meetings_by_client(entity_id) if client else []
    except Exception:
        logger.exception("failed to list client meetings", client_id=entity_id)
        raise HTTPException(status_code=500, detail="Failed to retrieve meetings")
    if client is None:
        raise HTTPException(status_code=404, detail="Client not found")
    return meetings


@router.post("", response_model=Client, status_code=201)
async def create_client(
    body: ClientCreate, store: MemoryStore = Depends(get_store)
) -> Client:
    """Create a client."""
    try:
        return await store.create_client(body)
    except Exception:
        logger.exception("failed to create client")
        raise HTTPException(status_code=500, detail="Failed to create client")


@router.patch("/{client_id}", response_model=Client)
async def update_client(
    client_id: str, body: ClientUpdate, store: MemoryStore = Depends(get_store)
) -> Client:
    """Apply a partial update to a client."""
    entity_id = parse_id(client_id, "client")
    try:
        client = await store.update_client(entity_id, body.changes())
    except Exception:
        logger.exception("failed to update client", client_id=entity_id)
        raise HTTPException(status_code=500, detail="Failed to update client")
    if client is None:
        raise HTTPException(status_code=404, detail="Client not found")
    return client
