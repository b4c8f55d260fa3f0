"""Tests for domain models."""

from datetime import UTC, datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from meetdesk.models.base import format_timestamp
from meetdesk.models.client import Client, ClientCreate, ClientStatus, ClientUpdate
from meetdesk.models.crm import CrmIntegrationCreate, CrmStatus
from meetdesk.models.meeting import MeetingCreate, MeetingStatus, MeetingUpdate


class TestTimestamps:
    """Tests for timestamp normalization and rendering."""

    def test_format_has_milliseconds_and_z(self):
        value = datetime(2024, 6, 1, 10, 0, 0, 123456, tzinfo=UTC)

        assert format_timestamp(value) == "2024-06-01T10:00:00.123Z"

    def test_offset_converted_to_utc(self):
        plus_two = timezone(timedelta(hours=2))

        assert format_timestamp(datetime(2024, 6, 1, 12, tzinfo=plus_two)) == (
            "2024-06-01T10:00:00.000Z"
        )

    def test_naive_input_taken_as_utc(self):
        meeting = MeetingCreate(
            client_id=1,
            title="Kickoff",
            type="introduction",
            start_time="2024-06-01T10:00:00",
            end_time="2024-06-01T11:00:00",
            location="zoom",
        )

        assert meeting.start_time == datetime(2024, 6, 1, 10, tzinfo=UTC)

    def test_json_dump_uses_camel_case(self):
        client = Client(
            id=1,
            name="Acme",
            company="Acme Inc.",
            email="a@acme.com",
            last_meeting=datetime(2024, 6, 1, 10, tzinfo=UTC),
        )

        data = client.model_dump(mode="json", by_alias=True)

        assert data["lastMeeting"] == "2024-06-01T10:00:00.000Z"
        assert "avatarBg" in data
        assert "createdAt" in data


class TestClientCreate:
    """Tests for ClientCreate validation."""

    def test_requires_name_company_email(self):
        with pytest.raises(ValidationError):
            ClientCreate(name="Acme", company="Acme Inc.")

    def test_rejects_blank_name(self):
        with pytest.raises(ValidationError):
            ClientCreate(name="   ", company="Acme Inc.", email="a@acme.com")

    def test_accepts_camel_case(self):
        client = ClientCreate.model_validate(
            {
                "name": "Acme",
                "company": "Acme Inc.",
                "email": "a@acme.com",
                "avatarBg": "bg-indigo-100",
                "status": "potential",
            }
        )

        assert client.avatar_bg == "bg-indigo-100"
        assert client.status == ClientStatus.POTENTIAL

    def test_rejects_unknown_status(self):
        with pytest.raises(ValidationError):
            ClientCreate(name="Acme", company="Acme", email="a@acme.com", status="vip")


class TestPartialUpdates:
    """Tests for PATCH body models."""

    def test_changes_only_includes_sent_fields(self):
        update = ClientUpdate.model_validate({"notes": "Call back", "phone": None})

        assert update.changes() == {"notes": "Call back", "phone": None}

    def test_rejects_null_for_required_field(self):
        with pytest.raises(ValidationError):
            ClientUpdate.model_validate({"name": None})

    def test_rejects_unknown_field(self):
        with pytest.raises(ValidationError):
            MeetingUpdate.model_validate({"colour": "red"})

    def test_meeting_update_parses_enums(self):
        update = MeetingUpdate.model_validate(
            {"status": "completed", "followUpStatus": "overdue", "followUpDays": 2}
        )

        assert update.status == MeetingStatus.COMPLETED
        assert set(update.changes()) == {"status", "follow_up_status", "follow_up_days"}


class TestCrmIntegrationCreate:
    """Tests for CrmIntegrationCreate."""

    def test_defaults_to_disconnected(self):
        integration = CrmIntegrationCreate(name="HubSpot", type="hubspot")

        assert integration.status == CrmStatus.DISCONNECTED

    def test_rejects_unknown_type(self):
        with pytest.raises(ValidationError):
            CrmIntegrationCreate(name="Zoho", type="zoho")
