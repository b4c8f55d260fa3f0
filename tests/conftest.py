"""Pytest configuration and fixtures."""

from collections.abc import AsyncIterator
from datetime import UTC, datetime, timedelta

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from meetdesk.api.deps import get_now
from meetdesk.main import create_app
from meetdesk.models.client import ClientCreate
from meetdesk.models.meeting import MeetingCreate
from meetdesk.store.memory_store import MemoryStore

# Saturday afternoon, mid-month
NOW = datetime(2024, 6, 15, 14, 0, tzinfo=UTC)


@pytest.fixture
def now() -> datetime:
    """Fixed reference time for classification and stats."""
    return NOW


@pytest.fixture
def store() -> MemoryStore:
    """Fresh, empty store."""
    return MemoryStore()


def _client_payload(name: str = "Acme", **overrides) -> ClientCreate:
    """Build a valid client payload."""
    fields = {
        "name": name,
        "company": f"{name} Inc.",
        "email": f"contact@{name.lower()}.com",
    }
    fields.update(overrides)
    return ClientCreate(**fields)


def _meeting_payload(client_id: int, start_time: datetime, **overrides) -> MeetingCreate:
    """Build a valid one-hour meeting payload."""
    fields = {
        "client_id": client_id,
        "title": "Quarterly review",
        "type": "strategy-review",
        "start_time": start_time,
        "end_time": start_time + timedelta(hours=1),
        "location": "zoom",
    }
    fields.update(overrides)
    return MeetingCreate(**fields)


@pytest.fixture
def app(store: MemoryStore, now: datetime) -> FastAPI:
    """Application wired to the test store with a pinned clock."""
    test_app = create_app(store=store)
    test_app.dependency_overrides[get_now] = lambda: now
    return test_app


@pytest.fixture
async def client(app: FastAPI) -> AsyncIterator[AsyncClient]:
    """Create async test client for the app."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def add_client(store: MemoryStore):
    """Factory that creates a client in the test store."""

    async def _add(name: str = "Acme", **overrides):
        return await store.create_client(_client_payload(name, **overrides))

    return _add


@pytest.fixture
def add_meeting(store: MemoryStore):
    """Factory that creates a meeting in the test store."""

    async def _add(client_id: int, start_time: datetime, **kwargs):
        follow_up = {
            key: kwargs.pop(key)
            for key in ("follow_up_status", "follow_up_days")
            if key in kwargs
        }
        payload = _meeting_payload(client_id, start_time, **kwargs)
        return await store.create_meeting(payload, **follow_up)

    return _add
