"""Integration tests for client API endpoints."""

from datetime import UTC, datetime
from unittest.mock import AsyncMock

import pytest
from httpx import AsyncClient

from meetdesk.store.memory_store import MemoryStore

ACME = {"name": "Acme", "company": "Acme Inc.", "email": "john@acme.com"}


class TestCreateClient:
    """Tests for POST /api/clients."""

    async def test_create_returns_201(self, client: AsyncClient):
        response = await client.post("/api/clients", json=ACME)

        assert response.status_code == 201
        data = response.json()
        assert data["id"] == 1
        assert data["name"] == "Acme"
        assert data["status"] == "active"
        assert data["lastMeeting"] is None
        assert data["contacts"] == []
        assert data["createdAt"].endswith("Z")

    async def test_ids_increase(self, client: AsyncClient):
        first = await client.post("/api/clients", json=ACME)
        second = await client.post("/api/clients", json={**ACME, "name": "Globex"})

        assert second.json()["id"] > first.json()["id"]

    async def test_missing_field_is_validation_error(
        self, client: AsyncClient, store: MemoryStore
    ):
        response = await client.post("/api/clients", json={"name": "Acme"})

        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "Validation error"
        assert "company" in body["details"]
        assert await store.get_clients() == []

    async def test_contacts_round_trip(self, client: AsyncClient):
        contacts = [
            {"name": "John Smith", "title": "CEO", "email": "john@acme.com", "phone": "555"},
        ]

        response = await client.post("/api/clients", json={**ACME, "contacts": contacts})

        assert response.json()["contacts"] == contacts


class TestGetClient:
    """Tests for GET /api/clients and /api/clients/{id}."""

    async def test_list(self, client: AsyncClient, add_client):
        await add_client("Acme")
        await add_client("Globex")

        response = await client.get("/api/clients")

        assert response.status_code == 200
        assert [c["name"] for c in response.json()] == ["Acme", "Globex"]

    async def test_get_by_id(self, client: AsyncClient, add_client):
        created = await add_client("Acme")

        response = await client.get(f"/api/clients/{created.id}")

        assert response.status_code == 200
        assert response.json()["name"] == "Acme"

    async def test_non_numeric_id_returns_400_without_store_access(
        self, client: AsyncClient, store: MemoryStore
    ):
        store.get_client = AsyncMock()  # type: ignore[method-assign]

        response = await client.get("/api/clients/abc")

        assert response.status_code == 400
        assert response.json() == {"error": "Invalid client ID"}
        store.get_client.assert_not_called()

    @pytest.mark.parametrize("raw_id", ["0_1", "%201%20", "1.0", "+1", "--1"])
    async def test_loosely_numeric_id_returns_400(
        self, client: AsyncClient, add_client, raw_id: str
    ):
        await add_client("Acme")

        response = await client.get(f"/api/clients/{raw_id}")

        assert response.status_code == 400
        assert response.json() == {"error": "Invalid client ID"}

    async def test_unknown_id_returns_404(self, client: AsyncClient):
        response = await client.get("/api/clients/42")

        assert response.status_code == 404
        assert response.json() == {"error": "Client not found"}

    async def test_store_failure_returns_500(self, client: AsyncClient, store: MemoryStore):
        store.get_clients = AsyncMock(side_effect=RuntimeError("boom"))  # type: ignore[method-assign]

        response = await client.get("/api/clients")

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to retrieve clients"}


class TestUpdateClient:
    """Tests for PATCH /api/clients/{id}."""

    async def test_partial_update(self, client: AsyncClient, add_client):
        created = await add_client("Acme", phone="555-0100")

        response = await client.patch(
            f"/api/clients/{created.id}", json={"notes": "Renewal in Q3"}
        )

        assert response.status_code == 200
        data = response.json()
        assert data["notes"] == "Renewal in Q3"
        assert data["phone"] == "555-0100"

    async def test_repeated_patch_is_idempotent(self, client: AsyncClient, add_client):
        created = await add_client("Acme")
        body = {"status": "inactive", "avatarColor": "text-blue-600"}

        first = await client.patch(f"/api/clients/{created.id}", json=body)
        second = await client.patch(f"/api/clients/{created.id}", json=body)

        assert first.json() == second.json()

    async def test_unknown_id_returns_404(self, client: AsyncClient):
        response = await client.patch("/api/clients/9", json={"notes": "x"})

        assert response.status_code == 404

    async def test_invalid_id_returns_400(self, client: AsyncClient):
        response = await client.patch("/api/clients/x1", json={"notes": "x"})

        assert response.status_code == 400
        assert response.json()["error"] == "Invalid client ID"

    async def test_invalid_body_returns_400(self, client: AsyncClient, add_client):
        created = await add_client("Acme")

        response = await client.patch(f"/api/clients/{created.id}", json={"status": "vip"})

        assert response.status_code == 400
        assert response.json()["error"] == "Validation error"


class TestClientMeetings:
    """Tests for GET /api/clients/{id}/meetings."""

    async def test_lists_client_meetings(self, client: AsyncClient, add_client, add_meeting):
        acme = await add_client("Acme")
        globex = await add_client("Globex")
        await add_meeting(acme.id, datetime(2024, 6, 20, 10, tzinfo=UTC))
        await add_meeting(globex.id, datetime(2024, 6, 21, 10, tzinfo=UTC))

        response = await client.get(f"/api/clients/{acme.id}/meetings")

        assert response.status_code == 200
        data = response.json()
        assert len(data) == 1
        assert data[0]["client"]["name"] == "Acme"

    async def test_unknown_client_returns_404(self, client: AsyncClient):
        response = await client.get("/api/clients/5/meetings")

        assert response.status_code == 404
