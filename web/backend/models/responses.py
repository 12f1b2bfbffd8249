#!/usr/bin/env python3
"""
Response models for API endpoints.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional, Dict, Any, Union


class EventSummary(BaseModel):
    """An event as returned by the events and matching APIs."""
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "event_id": "6ba7b810-9dad-11d1-80b4-00c04fd430c8",
                "name": "Community Food Drive",
                "description": "Help collect and sort food donations for local families.",
                "date": "2032-04-23T00:00:00",
                "location": "Houston, TX",
                "required_skills": ["Teamwork", "Communication"],
                "urgency": "high",
                "registered_count": 2,
                "created_at": "2032-01-01T12:00:00+00:00"
            }
        }
    )

    event_id: str
    name: str
    description: str
    date: Optional[str]
    location: str
    required_skills: List[str]
    urgency: str
    registered_count: int = Field(default=0, ge=0)
    created_at: Optional[str] = None


class VolunteerSummary(BaseModel):
    """Public view of a volunteer profile."""
    volunteer_id: str
    full_name: str
    email: Optional[str] = None
    address1: str = ""
    address2: str = ""
    city: str
    state: str
    zip_code: str = ""
    skills: List[str]
    preferences: str = ""
    availability: Optional[Union[Dict[str, Any], List[Any]]] = None
    profile_completed: bool = False


class CandidateSummary(BaseModel):
    """A volunteer suggested for an event."""
    volunteer_id: str
    full_name: str
    city: str
    state: str
    skills: List[str]
    score: int = Field(gt=0)
    matching_skills: List[str]
    location_compatible: bool
    date_compatible: bool


class EventRankingSummary(BaseModel):
    """An event ranked for a volunteer."""
    event: EventSummary
    matchable: bool
    skill_match_count: int = Field(ge=0)
    matching_skills: List[str]
    location_compatible: bool
    date_compatible: bool
    score: int = Field(ge=0)


class RegistrationSummary(BaseModel):
    """A volunteer's registration for an event."""
    volunteer_id: str
    event_id: str
    status: str
    registered_at: Optional[str]


class HistoryEntry(BaseModel):
    """One past or upcoming participation of a volunteer."""
    event_id: str
    event_name: str
    description: str
    location: str
    date: Optional[str]
    required_skills: List[str]
    urgency: str
    status: str
    registered_at: Optional[str]


class EventsResponse(BaseModel):
    """Response for event list."""
    success: bool = True
    count: int
    events: List[EventSummary]


class EventResponse(BaseModel):
    """Response for a single event."""
    success: bool = True
    event: EventSummary


class VolunteersResponse(BaseModel):
    """Response for volunteer list."""
    success: bool = True
    count: int
    volunteers: List[VolunteerSummary]


class VolunteerResponse(BaseModel):
    """Response for a single volunteer profile."""
    success: bool = True
    volunteer: VolunteerSummary


class CandidatesResponse(BaseModel):
    """Response for volunteer suggestions for an event."""
    success: bool = True
    event_id: str
    count: int
    candidates: List[CandidateSummary]


class EventRankingsResponse(BaseModel):
    """Response for events ranked for a volunteer."""
    success: bool = True
    volunteer_id: str
    count: int
    events: List[EventRankingSummary]


class EventMatchesResponse(BaseModel):
    """Response for volunteers registered to an event."""
    success: bool = True
    event_id: str
    count: int
    volunteers: List[VolunteerSummary]


class RegistrationResponse(BaseModel):
    """Response for a committed match."""
    success: bool = True
    message: str
    registration: RegistrationSummary
    notifications_sent: int = 0


class HistoryResponse(BaseModel):
    """Response for a volunteer's participation history."""
    success: bool = True
    volunteer_id: str
    count: int
    history: List[HistoryEntry]


class MessageResponse(BaseModel):
    """Generic success response."""
    success: bool = True
    message: str
