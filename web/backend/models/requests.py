#!/usr/bin/env python3
"""
Request models for API endpoints.

Field limits follow the volunteer portal forms: anything the form would
refuse is refused here too, so the API never stores a record the UI could
not have produced.
"""

from datetime import datetime
from typing import Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from core.matcher.availability import TIME_BUCKETS, WEEKDAYS, to_date
from core.matcher.models import SKILLS, URGENCY_LEVELS
from ..config import get_config


def _check_skills(value: List[str]) -> List[str]:
    unknown = [s for s in value if s not in SKILLS]
    if unknown:
        raise ValueError(f"Unknown skill(s): {', '.join(unknown)}")
    # Keep first occurrence order
    return list(dict.fromkeys(value))


def _always_available_tokens() -> set:
    """Sentinels accepted in a date-list availability, as configured for scoring."""
    tokens = get_config().matching.scoring.always_available_tokens
    return {t.strip().lower() for t in tokens}


class EventCreate(BaseModel):
    """Request to create or replace an event."""
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Community Food Drive",
                "description": "Help collect and sort food donations for local families.",
                "date": "2032-04-23",
                "location": "Houston, TX",
                "required_skills": ["Teamwork", "Communication"],
                "urgency": "high"
            }
        }
    )

    name: str = Field(..., min_length=1, max_length=100, description="Event name")
    description: str = Field(..., min_length=10, max_length=2000, description="Event description")
    date: datetime = Field(..., description="Event date (must be in the future)")
    location: str = Field(..., min_length=1, max_length=200, description="Event location, e.g. 'Houston, TX'")
    required_skills: List[str] = Field(..., min_length=1, description="Skills the event needs")
    urgency: str = Field(..., description="Urgency: low, medium or high")

    @field_validator('name', 'description', 'location', mode='before')
    @classmethod
    def strip_text(cls, v):
        return v.strip() if isinstance(v, str) else v

    @field_validator('date')
    @classmethod
    def date_in_future(cls, v: datetime) -> datetime:
        now = datetime.now(v.tzinfo) if v.tzinfo else datetime.now()
        if v <= now:
            raise ValueError("Event date must be in the future")
        # Stored as wall-clock time at the venue
        return v.replace(tzinfo=None)

    @field_validator('required_skills')
    @classmethod
    def known_skills(cls, v: List[str]) -> List[str]:
        return _check_skills(v)

    @field_validator('urgency')
    @classmethod
    def known_urgency(cls, v: str) -> str:
        level = v.strip().lower()
        if level not in URGENCY_LEVELS:
            raise ValueError(f"Urgency must be one of: {', '.join(URGENCY_LEVELS)}")
        return level


class EventUpdate(EventCreate):
    """Request to update an event (full replacement)."""
    pass


AvailabilityPayload = Union[Dict[str, Union[bool, List[str]]], List[str]]


class VolunteerProfileRequest(BaseModel):
    """Request to create or update a volunteer profile."""
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "full_name": "Alex Volunteer",
                "email": "alex@example.org",
                "address1": "123 Main St",
                "city": "Houston",
                "state": "TX",
                "zip_code": "77001",
                "skills": ["Communication", "Teamwork"],
                "preferences": "Weekend mornings",
                "availability": {"saturday": ["morning"], "sunday": True}
            }
        }
    )

    full_name: str = Field(..., min_length=2, max_length=50)
    email: Optional[str] = Field(None, max_length=254)
    address1: str = Field(..., min_length=1, max_length=100)
    address2: str = Field(default="", max_length=100)
    city: str = Field(..., min_length=1, max_length=100)
    state: str = Field(..., min_length=2, max_length=2, description="Two-letter state code")
    zip_code: str = Field(..., pattern=r"^\d{5}(-\d{4})?$")
    skills: List[str] = Field(..., min_length=1)
    preferences: str = Field(default="", max_length=500)
    availability: AvailabilityPayload = Field(
        ..., description="Weekday map or list of ISO dates / 'any'"
    )

    @field_validator('full_name', 'address1', 'address2', 'city', 'preferences', mode='before')
    @classmethod
    def strip_text(cls, v):
        return v.strip() if isinstance(v, str) else v

    @field_validator('state')
    @classmethod
    def upper_state(cls, v: str) -> str:
        if not v.isalpha():
            raise ValueError("State must be a two-letter code")
        return v.upper()

    @field_validator('skills')
    @classmethod
    def known_skills(cls, v: List[str]) -> List[str]:
        return _check_skills(v)

    @field_validator('availability')
    @classmethod
    def check_availability(cls, v: AvailabilityPayload) -> AvailabilityPayload:
        if not v:
            raise ValueError("At least one availability entry is required")

        if isinstance(v, dict):
            normalized = {}
            for day, slot in v.items():
                key = day.strip().lower()
                if key not in WEEKDAYS:
                    raise ValueError(f"Unknown weekday: {day}")
                if isinstance(slot, list):
                    bad = [b for b in slot if b not in TIME_BUCKETS]
                    if bad:
                        raise ValueError(f"Unknown time bucket(s) for {key}: {', '.join(bad)}")
                normalized[key] = slot
            if not any(normalized.values()):
                raise ValueError("At least one available day is required")
            return normalized

        always_tokens = _always_available_tokens()
        entries = []
        for entry in v:
            token = entry.strip()
            if token.lower() in always_tokens:
                entries.append(token.lower())
            elif to_date(token) is not None:
                entries.append(to_date(token).isoformat())
            else:
                raise ValueError(f"Invalid availability date: {entry}")
        return entries


class MatchRequest(BaseModel):
    """Request to register (or unregister) a volunteer for an event."""
    volunteer_id: str = Field(..., min_length=1, description="Volunteer profile ID")
    event_id: str = Field(..., min_length=1, description="Event ID")
