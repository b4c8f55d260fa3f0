"""In-memory storage layer.

Provides the entity store, the client/meeting join helpers and the
integrity errors they raise.
"""

from meetdesk.store.collection import EntityCollection
from meetdesk.store.enrichment import advance_last_meeting, enrich_meeting, enrich_meetings
from meetdesk.store.errors import DuplicateKeyError, MissingClientError, StoreIntegrityError
from meetdesk.store.memory_store import MemoryStore

__all__ = [
    "DuplicateKeyError",
    "EntityCollection",
    "MemoryStore",
    "MissingClientError",
    "StoreIntegrityError",
    "advance_last_meeting",
    "enrich_meeting",
    "enrich_meetings",
]
