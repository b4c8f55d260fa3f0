"""In-memory entity store for clients, meetings, meeting types and CRM integrations.

State lives for the lifetime of the store object. One instance is built at
application startup and handed to the HTTP layer through app state, so each
test can build its own isolated store.
"""

import asyncio
from datetime import UTC, datetime

import structlog

from meetdesk.models.client import Client, ClientCreate
from meetdesk.models.crm import CrmIntegration, CrmIntegrationCreate
from meetdesk.models.meeting import EnrichedMeeting, FollowUpStatus, Meeting, MeetingCreate
from meetdesk.models.meeting_type import MeetingType, MeetingTypeCreate
from meetdesk.stats.aggregator import DEFAULT_GOAL_OFFSET, compute_stats
from meetdesk.stats.classifier import history, upcoming
from meetdesk.stats.schemas import DashboardStats
from meetdesk.store.collection import EntityCollection
from meetdesk.store.enrichment import advance_last_meeting, enrich_meeting, enrich_meetings
from meetdesk.store.errors import DuplicateKeyError, MissingClientError

logger = structlog.get_logger()


class MemoryStore:
    """Volatile store with per-kind sequential ids.

    Features:
    - Create / get / list / partial update per entity kind (no delete)
    - Unknown ids return None instead of raising
    - Meetings are returned joined with their current client
    - All mutations serialized by a single lock
    """

    def __init__(self, goal_offset: int = DEFAULT_GOAL_OFFSET):
        """Initialize empty collections.

        Args:
            goal_offset: Offset added to the monthly count for the stats goal
        """
        self._clients: EntityCollection[Client] = EntityCollection("client")
        self._meetings: EntityCollection[Meeting] = EntityCollection("meeting")
        self._meeting_types: EntityCollection[MeetingType] = EntityCollection(
            "meeting_type"
        )
        self._crm: EntityCollection[CrmIntegration] = EntityCollection("crm_integration")
        self._goal_offset = goal_offset
        self._lock = asyncio.Lock()

    # Clients

    async def get_clients(self) -> list[Client]:
        return list(self._clients.values())

    async def get_client(self, client_id: int) -> Client | None:
        return self._clients.get(client_id)

    async def create_client(self, data: ClientCreate) -> Client:
        async with self._lock:
            client = Client(
                **dict(data),
                id=self._clients.allocate_id(),
                last_meeting=None,
                created_at=datetime.now(UTC),
            )
            self._clients.put(client)
        logger.info("client created", client_id=client.id, name=client.name)
        return client

    async def update_client(self, client_id: int, changes: dict) -> Client | None:
        async with self._lock:
            client = self._clients.merge(client_id, changes)
        if client is not None:
            logger.info("client updated", client_id=client_id, fields=sorted(changes))
        return client

    # Meetings

    async def get_meetings(self) -> list[EnrichedMeeting]:
        return enrich_meetings(self._meetings.values(), self._clients)

    async def get_meeting(self, meeting_id: int) -> EnrichedMeeting | None:
        meeting = self._meetings.get(meeting_id)
        if meeting is None:
            return None
        return enrich_meeting(meeting, self._clients)

    async def get_meetings_by_client(self, client_id: int) -> list[EnrichedMeeting]:
        """Meetings of one client, soonest first."""
        owned = [m for m in self._meetings.values() if m.client_id == client_id]
        owned.sort(key=lambda m: m.start_time)
        return enrich_meetings(owned, self._clients)

    async def get_upcoming_meetings(self, now: datetime) -> list[EnrichedMeeting]:
        return enrich_meetings(upcoming(self._meetings.values(), now), self._clients)

    async def get_meeting_history(self, now: datetime) -> list[EnrichedMeeting]:
        return enrich_meetings(history(self._meetings.values(), now), self._clients)

    async def create_meeting(
        self,
        data: MeetingCreate,
        *,
        follow_up_status: FollowUpStatus = FollowUpStatus.NONE,
        follow_up_days: int | None = None,
        created_at: datetime | None = None,
    ) -> EnrichedMeeting:
        """Insert a meeting and ratchet its client's ``last_meeting``.

        New meetings always start with no follow-up and unsynced. The
        keyword overrides exist for loading fixture data.

        Raises:
            MissingClientError: If ``data.client_id`` is not stored. Nothing
                is inserted in that case.
        """
        async with self._lock:
            client = self._clients.get(data.client_id)
            if client is None:
                raise MissingClientError(data.client_id)

            meeting = Meeting(
                **dict(data),
                id=self._meetings.allocate_id(),
                follow_up_status=follow_up_status,
                follow_up_days=follow_up_days,
                synced_with_crm=False,
                created_at=created_at or datetime.now(UTC),
            )
            self._meetings.put(meeting)
            self._clients.put(advance_last_meeting(client, meeting.start_time))
            enriched = enrich_meeting(meeting, self._clients)

        logger.info(
            "meeting created",
            meeting_id=meeting.id,
            client_id=meeting.client_id,
            start_time=meeting.start_time.isoformat(),
        )
        return enriched

    async def update_meeting(
        self, meeting_id: int, changes: dict
    ) -> EnrichedMeeting | None:
        """Shallow-merge ``changes`` onto a meeting.

        Does not touch the client's ``last_meeting``, even if the start
        time changes.

        Raises:
            MissingClientError: If ``changes`` moves the meeting to a client
                that is not stored. Nothing is changed in that case.
        """
        async with self._lock:
            if meeting_id not in self._meetings:
                return None
            client_id = changes.get("client_id")
            if client_id is not None and client_id not in self._clients:
                raise MissingClientError(client_id)
            meeting = self._meetings.merge(meeting_id, changes)
            enriched = enrich_meeting(meeting, self._clients)

        logger.info("meeting updated", meeting_id=meeting_id, fields=sorted(changes))
        return enriched

    # Meeting types

    async def get_meeting_types(self) -> list[MeetingType]:
        return list(self._meeting_types.values())

    async def create_meeting_type(self, data: MeetingTypeCreate) -> MeetingType:
        """Add a meeting type.

        Raises:
            DuplicateKeyError: If another type already uses ``data.value``.
        """
        async with self._lock:
            if any(t.value == data.value for t in self._meeting_types.values()):
                raise DuplicateKeyError("meeting type", data.value)
            meeting_type = MeetingType(**dict(data), id=self._meeting_types.allocate_id())
            self._meeting_types.put(meeting_type)
        logger.debug("meeting type created", value=meeting_type.value)
        return meeting_type

    # CRM integrations

    async def get_crm_integrations(self) -> list[CrmIntegration]:
        return list(self._crm.values())

    async def get_crm_integration(self, integration_id: int) -> CrmIntegration | None:
        return self._crm.get(integration_id)

    async def create_crm_integration(
        self,
        data: CrmIntegrationCreate,
        *,
        last_sync: datetime | None = None,
    ) -> CrmIntegration:
        """Register an integration. New integrations have never synced."""
        async with self._lock:
            integration = CrmIntegration(
                **dict(data),
                id=self._crm.allocate_id(),
                last_sync=last_sync,
                created_at=datetime.now(UTC),
            )
            self._crm.put(integration)
        logger.info(
            "crm integration created",
            integration_id=integration.id,
            type=integration.type.value,
            status=integration.status.value,
        )
        return integration

    async def update_crm_integration(
        self, integration_id: int, changes: dict
    ) -> CrmIntegration | None:
        async with self._lock:
            integration = self._crm.merge(integration_id, changes)
        if integration is not None:
            logger.info(
                "crm integration updated",
                integration_id=integration_id,
                fields=sorted(changes),
            )
        return integration

    async def count_records(self) -> dict[str, int]:
        """Number of stored records per entity kind."""
        return {
            "clients": len(self._clients),
            "meetings": len(self._meetings),
            "meeting_types": len(self._meeting_types),
            "crm_integrations": len(self._crm),
        }

    # Stats

    async def get_stats(self, now: datetime) -> DashboardStats:
        """Compute dashboard statistics as of ``now``.

        Raises:
            MissingClientError: If any meeting references a missing client.
        """
        meetings = await self.get_meetings()
        integrations = await self.get_crm_integrations()
        return compute_stats(meetings, integrations, now, self._goal_offset)
