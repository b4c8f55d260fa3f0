"""Integration tests for the stats and reports endpoints."""

from datetime import UTC, datetime, timedelta

from httpx import AsyncClient

from meetdesk.models.crm import CrmIntegrationCreate, CrmStatus, CrmType
from meetdesk.models.meeting import FollowUpStatus
from meetdesk.store.memory_store import MemoryStore

NOW = datetime(2024, 6, 15, 14, 0, tzinfo=UTC)


class TestStats:
    """Tests for GET /api/stats."""

    async def test_synced_crm(self, client: AsyncClient, store: MemoryStore):
        await store.create_crm_integration(
            CrmIntegrationCreate(
                name="Salesforce", type=CrmType.SALESFORCE, status=CrmStatus.CONNECTED
            ),
            last_sync=NOW - timedelta(minutes=10),
        )
        await store.create_crm_integration(
            CrmIntegrationCreate(
                name="HubSpot", type=CrmType.HUBSPOT, status=CrmStatus.DISCONNECTED
            ),
        )

        response = await client.get("/api/stats")

        assert response.status_code == 200
        assert response.json()["crmSync"] == {
            "status": "Synced",
            "description": "10 min ago",
            "connectedServices": "Salesforce",
        }

    async def test_no_connected_crm(self, client: AsyncClient):
        response = await client.get("/api/stats")

        assert response.json()["crmSync"] == {
            "status": "Not Connected",
            "description": "No CRM integrations",
        }

    async def test_meeting_cards(self, client: AsyncClient, add_client, add_meeting):
        acme = await add_client("Acme")
        await add_meeting(acme.id, NOW + timedelta(minutes=30))
        await add_meeting(
            acme.id,
            datetime(2024, 5, 20, 10, tzinfo=UTC),
            follow_up_status=FollowUpStatus.OVERDUE,
            follow_up_days=4,
        )

        data = (await client.get("/api/stats")).json()

        assert data["upcomingMeetings"] == {
            "count": 1,
            "change": "+1 today",
            "description": "Next in 30 minutes",
        }
        assert data["followups"] == {
            "count": 1,
            "change": "1 overdue",
            "description": "Oldest from May 20",
        }
        assert data["monthlyMeetings"] == {
            "count": 1,
            "change": "0% vs last month",
            "description": "Goal: 6",
        }

    async def test_inconsistent_store_returns_500(
        self, client: AsyncClient, store: MemoryStore, add_client, add_meeting
    ):
        acme = await add_client("Acme")
        await add_meeting(acme.id, NOW)
        del store._clients._records[acme.id]

        response = await client.get("/api/stats")

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to retrieve stats"}


class TestReports:
    """Tests for GET /api/reports."""

    async def test_default_range(self, client: AsyncClient):
        response = await client.get("/api/reports")

        assert response.status_code == 200
        data = response.json()
        assert data["timeRange"] == "month"
        assert data["summary"]["totalMeetings"] == 32
        assert data["summary"]["completionRate"] == 92
        assert [b["name"] for b in data["byTime"]] == ["Week 1", "Week 2", "Week 3", "Week 4"]
        assert data["byClient"][0] == {"name": "Acme Corp", "value": 12, "color": "#4f46e5"}
        assert len(data["byType"]) == 5

    async def test_figures_do_not_depend_on_range(self, client: AsyncClient):
        week = (await client.get("/api/reports", params={"timeRange": "week"})).json()
        year = (await client.get("/api/reports", params={"timeRange": "year"})).json()

        assert week["timeRange"] == "week"
        assert week["summary"] == year["summary"]
        assert week["byClient"] == year["byClient"]

    async def test_unrecognised_range_is_echoed(self, client: AsyncClient):
        default = (await client.get("/api/reports")).json()
        response = await client.get("/api/reports", params={"timeRange": "all"})

        assert response.status_code == 200
        data = response.json()
        assert data["timeRange"] == "all"
        assert data["summary"] == default["summary"]
        assert data["byTime"] == default["byTime"]
        assert data["byType"] == default["byType"]
