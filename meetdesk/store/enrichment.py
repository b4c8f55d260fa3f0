"""Client/meeting relationship helpers.

Meetings store only ``client_id``. Reads join the current client record
on every call; nothing is cached. Creating a meeting moves the client's
``last_meeting`` forward, never backward.
"""

from collections.abc import Iterable, Mapping
from datetime import datetime

from meetdesk.models.client import Client
from meetdesk.models.meeting import EnrichedMeeting, Meeting
from meetdesk.store.errors import MissingClientError


def enrich_meeting(meeting: Meeting, clients: Mapping[int, Client]) -> EnrichedMeeting:
    """Attach the current client record to a meeting.

    Raises:
        MissingClientError: If the meeting's client is not stored.
    """
    client = clients.get(meeting.client_id)
    if client is None:
        raise MissingClientError(meeting.client_id, meeting_id=meeting.id)
    return EnrichedMeeting.model_construct(
        _fields_set=meeting.model_fields_set | {"client"},
        **dict(meeting),
        client=client,
    )


def enrich_meetings(
    meetings: Iterable[Meeting], clients: Mapping[int, Client]
) -> list[EnrichedMeeting]:
    """Enrich a batch of meetings, preserving their order."""
    return [enrich_meeting(meeting, clients) for meeting in meetings]


def advance_last_meeting(client: Client, start_time: datetime) -> Client:
    """Return ``client`` with ``last_meeting`` ratcheted to ``start_time``.

    The client is returned unchanged unless it has no last meeting yet or
    ``start_time`` is strictly later than the stored one.
    """
    if client.last_meeting is not None and start_time <= client.last_meeting:
        return client
    return client.model_copy(update={"last_meeting": start_time})
