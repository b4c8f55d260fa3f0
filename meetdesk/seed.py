"""Fixture data loaded into a fresh store at startup.

Meeting times are anchored on ``now``: three meetings later today (local
time) and four in the past, so every dashboard card has something to show.
"""

from datetime import datetime, time, timedelta

import structlog

from meetdesk.models.client import ClientCreate, ClientStatus, Contact
from meetdesk.models.crm import CrmIntegrationCreate, CrmStatus, CrmType
from meetdesk.models.meeting import FollowUpStatus, MeetingCreate, MeetingStatus, Participant
from meetdesk.models.meeting_type import MeetingTypeCreate
from meetdesk.store.memory_store import MemoryStore

logger = structlog.get_logger()

OWNER = Participant(name="Sarah Johnson", email="sarah.johnson@yourdomain.com")

MEETING_TYPES = [
    ("Strategy Review", "strategy-review"),
    ("Sales Pitch", "sales-pitch"),
    ("Contract Discussion", "contract-discussion"),
    ("Introduction", "introduction"),
    ("Partnership Discussion", "partnership-discussion"),
    ("Product Demo", "product-demo"),
    ("Investment Opportunity", "investment-opportunity"),
]

CLIENTS = [
    ClientCreate(
        name="Acme Corporation",
        company="Acme Inc.",
        email="john.smith@acme.com",
        phone="555-123-4567",
        status=ClientStatus.ACTIVE,
        avatar_bg="bg-indigo-100",
        avatar_color="text-accent",
        notes="Major client, interested in a full platform license",
        contacts=[
            Contact(name="John Smith", title="CEO", email="john.smith@acme.com", phone="555-123-4567"),
            Contact(name="Emily Davis", title="CTO", email="emily.davis@acme.com", phone="555-987-6543"),
        ],
    ),
    ClientCreate(
        name="TechStart Inc.",
        company="TechStart",
        email="michael.johnson@techstart.com",
        phone="555-222-3333",
        status=ClientStatus.ACTIVE,
        avatar_bg="bg-blue-100",
        avatar_color="text-blue-600",
        notes="Startup looking for enterprise tools",
        contacts=[
            Contact(
                name="Michael Johnson",
                title="Product Manager",
                email="michael.johnson@techstart.com",
                phone="555-222-3333",
            ),
        ],
    ),
    ClientCreate(
        name="Global Shipping",
        company="Global Shipping Partners",
        email="robert.chen@globalshipping.com",
        phone="555-444-5555",
        status=ClientStatus.ACTIVE,
        avatar_bg="bg-green-100",
        avatar_color="text-green-600",
        notes="Interested in logistics optimization",
        contacts=[
            Contact(
                name="Robert Chen",
                title="VP Operations",
                email="robert.chen@globalshipping.com",
                phone="555-444-5555",
            ),
        ],
    ),
    ClientCreate(
        name="Nova Ventures",
        company="Nova Ventures LLC",
        email="sarah.kim@novaventures.com",
        phone="555-666-7777",
        status=ClientStatus.POTENTIAL,
        avatar_bg="bg-purple-100",
        avatar_color="text-purple-600",
        notes="Looking for investment opportunities in tech",
        contacts=[
            Contact(
                name="Sarah Kim",
                title="Managing Partner",
                email="sarah.kim@novaventures.com",
                phone="555-666-7777",
            ),
        ],
    ),
]


def _crm_fixture() -> list[tuple[CrmIntegrationCreate, timedelta | None]]:
    """Integrations paired with how long ago they last synced."""
    return [
        (
            CrmIntegrationCreate(name="Salesforce", type=CrmType.SALESFORCE, status=CrmStatus.CONNECTED),
            timedelta(minutes=15),
        ),
        (
            CrmIntegrationCreate(name="Microsoft Dynamics", type=CrmType.MICROSOFT, status=CrmStatus.PENDING),
            None,
        ),
        (
            CrmIntegrationCreate(name="Google Calendar", type=CrmType.GOOGLE, status=CrmStatus.CONNECTED),
            timedelta(minutes=15),
        ),
        (
            CrmIntegrationCreate(name="HubSpot", type=CrmType.HUBSPOT, status=CrmStatus.DISCONNECTED),
            None,
        ),
    ]


def _meeting_fixture(now: datetime) -> list[tuple[MeetingCreate, FollowUpStatus, int | None]]:
    """Meetings paired with their follow-up status and days."""

    def today_at(hour: int, minute: int = 0) -> datetime:
        return datetime.combine(now.date(), time(hour, minute), tzinfo=now.tzinfo)

    def days_ago(days: int) -> datetime:
        return now - timedelta(days=days)

    return [
        (
            MeetingCreate(
                client_id=1,
                title="Acme Corp Strategy Review",
                type="strategy-review",
                start_time=today_at(11),
                end_time=today_at(12),
                location="teams",
                status=MeetingStatus.CONFIRMED,
                participants=[
                    Participant(name="John Smith", email="john.smith@acme.com"),
                    Participant(name="Emily Davis", email="emily.davis@acme.com"),
                    OWNER,
                ],
                agenda="Review Q3 strategy and discuss expansion plans",
            ),
            FollowUpStatus.NONE,
            None,
        ),
        (
            MeetingCreate(
                client_id=2,
                title="TechStart Product Demo",
                type="product-demo",
                start_time=today_at(13, 30),
                end_time=today_at(14, 30),
                location="zoom",
                participants=[
                    Participant(name="Michael Johnson", email="michael.johnson@techstart.com"),
                    OWNER,
                ],
                agenda="Demonstrate new features of the platform",
            ),
            FollowUpStatus.NONE,
            None,
        ),
        (
            MeetingCreate(
                client_id=3,
                title="Global Shipping Partners",
                type="partnership-discussion",
                start_time=today_at(15),
                end_time=today_at(16),
                location="in-person",
                participants=[
                    Participant(name="Robert Chen", email="robert.chen@globalshipping.com"),
                    OWNER,
                ],
                agenda="Discuss logistics partnership opportunities",
            ),
            FollowUpStatus.NONE,
            None,
        ),
        (
            MeetingCreate(
                client_id=1,
                title="Acme Corporation Strategy Review",
                type="strategy-review",
                start_time=days_ago(4),
                end_time=days_ago(4) + timedelta(hours=1),
                location="teams",
                status=MeetingStatus.COMPLETED,
                participants=[
                    Participant(name="John Smith", email="john.smith@acme.com"),
                    OWNER,
                ],
                agenda="Initial review of strategy for Q3",
                notes="Client interested in expanding partnership. Follow up needed on pricing details.",
            ),
            FollowUpStatus.DUE_SOON,
            1,
        ),
        (
            MeetingCreate(
                client_id=2,
                title="TechStart Inc. Contract Negotiation",
                type="contract-discussion",
                start_time=days_ago(6),
                end_time=days_ago(6) + timedelta(minutes=90),
                location="zoom",
                status=MeetingStatus.COMPLETED,
                participants=[
                    Participant(name="Michael Johnson", email="michael.johnson@techstart.com"),
                    OWNER,
                ],
                agenda="Review contract terms and negotiate pricing",
                notes="Need to follow up with revised proposal",
            ),
            FollowUpStatus.OVERDUE,
            2,
        ),
        (
            MeetingCreate(
                client_id=3,
                title="Global Shipping Partnership Discussion",
                type="partnership-discussion",
                start_time=days_ago(9),
                end_time=days_ago(9) + timedelta(minutes=45),
                location="in-person",
                status=MeetingStatus.COMPLETED,
                participants=[
                    Participant(name="Robert Chen", email="robert.chen@globalshipping.com"),
                    OWNER,
                ],
                agenda="Initial partnership discussion",
                notes="Successful meeting, all follow-ups completed",
            ),
            FollowUpStatus.COMPLETED,
            None,
        ),
        (
            MeetingCreate(
                client_id=4,
                title="Nova Ventures Investment Opportunity",
                type="investment-opportunity",
                start_time=days_ago(12),
                end_time=days_ago(12) + timedelta(hours=1),
                location="google-meet",
                status=MeetingStatus.RESCHEDULED,
                participants=[
                    Participant(name="Sarah Kim", email="sarah.kim@novaventures.com"),
                    OWNER,
                ],
                agenda="Present investment opportunity",
                notes="Rescheduled due to client emergency",
            ),
            FollowUpStatus.NOT_REQUIRED,
            None,
        ),
    ]


async def seed_store(store: MemoryStore, now: datetime) -> None:
    """Populate ``store`` with the fixture, anchored on ``now``.

    Expects an empty store so the fixture's client ids line up.
    """
    for label, value in MEETING_TYPES:
        await store.create_meeting_type(MeetingTypeCreate(label=label, value=value))

    for data, synced_ago in _crm_fixture():
        last_sync = now - synced_ago if synced_ago is not None else None
        await store.create_crm_integration(data, last_sync=last_sync)

    for data in CLIENTS:
        await store.create_client(data)

    meetings = _meeting_fixture(now)
    for data, follow_up_status, follow_up_days in meetings:
        await store.create_meeting(
            data,
            follow_up_status=follow_up_status,
            follow_up_days=follow_up_days,
            created_at=data.start_time - timedelta(days=7),
        )

    logger.info(
        "store seeded",
        meeting_types=len(MEETING_TYPES),
        clients=len(CLIENTS),
        meetings=len(meetings),
    )
