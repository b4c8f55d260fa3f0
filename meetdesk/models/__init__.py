"""Canonical data models for Meeting Desk.

This module exports all domain models used throughout the application:
- ApiModel / PartialModel: camelCase base classes
- Client: Customer accounts and their contacts
- Meeting: Scheduled meetings, enriched with their client on read
- MeetingType: Reference data for meeting categories
- CrmIntegration: Simulated CRM connections
"""

from meetdesk.models.base import ApiModel, PartialModel, Timestamp, format_timestamp
from meetdesk.models.client import Client, ClientCreate, ClientStatus, ClientUpdate, Contact
from meetdesk.models.crm import (
    CrmIntegration,
    CrmIntegrationCreate,
    CrmIntegrationUpdate,
    CrmStatus,
    CrmType,
)
from meetdesk.models.meeting import (
    EnrichedMeeting,
    FollowUpStatus,
    Meeting,
    MeetingCreate,
    MeetingStatus,
    MeetingUpdate,
    Participant,
)
from meetdesk.models.meeting_type import MeetingType, MeetingTypeCreate

__all__ = [
    # Base
    "ApiModel",
    "PartialModel",
    "Timestamp",
    "format_timestamp",
    # Client
    "Client",
    "ClientCreate",
    "ClientStatus",
    "ClientUpdate",
    "Contact",
    # Meeting
    "EnrichedMeeting",
    "FollowUpStatus",
    "Meeting",
    "MeetingCreate",
    "MeetingStatus",
    "MeetingUpdate",
    "Participant",
    # Meeting type
    "MeetingType",
    "MeetingTypeCreate",
    # CRM
    "CrmIntegration",
    "CrmIntegrationCreate",
    "CrmIntegrationUpdate",
    "CrmStatus",
    "CrmType",
]
