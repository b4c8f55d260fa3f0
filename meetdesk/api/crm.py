"""CRM integration endpoints.

Integrations are simulated: connecting one only records it.
"""

import structlog
from fastapi import APIRouter, Depends, HTTPException

from meetdesk.api.deps import get_store, parse_id
from meetdesk.models.crm import CrmIntegration, CrmIntegrationCreate, CrmIntegrationUpdate
from meetdesk.store.memory_store import MemoryStore

logger = structlog.get_logger()
router = APIRouter(prefix="/crm", tags=["crm"])


@router.get("/status", response_model=list[CrmIntegration])
async def list_integrations(
    store: MemoryStore = Depends(get_store),
) -> list[CrmIntegration]:
    """List all CRM integrations with their connection state."""
    try:
        return await store.get_crm_integrations()
    except Exception:
        logger.exception("failed to list crm integrations")
        raise HTTPException(
            status_code=500, detail="Failed to retrieve CRM integrations"
        )


@router.post("/connect", response_model=CrmIntegration, status_code=201)
async def connect_integration(
    body: CrmIntegrationCreate, store: MemoryStore = Depends(get_store)
) -> CrmIntegration:
    """Register a CRM integration."""
    try:
        return await store.create_crm_integration(body)
    except Exception:
        logger.exception("failed to create crm integration", type=body.type.value)
        raise HTTPException(status_code=500, detail="Failed to create CRM integration")


@router.patch("/{integration_id}", response_model=CrmIntegration)
async def update_integration(
    integration_id: str,
    body: CrmIntegrationUpdate,
    store: MemoryStore = Depends(get_store),
) -> CrmIntegration:
    """Apply a partial update to an integration."""
    entity_id = parse_id(integration_id, "integration")
    try:
        integration = await store.update_crm_integration(entity_id, body.changes())
    except Exception:
        logger.exception("failed to update crm integration", integration_id=entity_id)
        raise HTTPException(status_code=500, detail="Failed to update CRM integration")
    if integration is None:
        raise HTTPException(status_code=404, detail="Integration not found")
    return integration
