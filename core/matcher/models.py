#!/usr/bin/env python3
"""
Matcher Models - Data structures for volunteer/event matching.

Volunteer and Event are plain snapshots handed to the engine by the
directories; MatchCandidate and EventRanking are computed per call and
never persisted by the matcher itself.
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import List, Optional, Set, Union

from core.matcher.availability import Availability, WeekdayAvailability


# Fixed skill vocabulary shared by volunteer profiles and event requirements
SKILLS = (
    'Communication',
    'Teamwork',
    'Leadership',
    'Event Planning',
    'Fundraising',
    'Public Speaking',
    'Teaching/Tutoring',
    'Childcare',
    'Elderly Support',
    'Community Outreach',
)

URGENCY_LEVELS = ('low', 'medium', 'high')

EventDate = Union[date, datetime]


@dataclass
class Volunteer:
    """Volunteer profile as seen by the matcher."""
    id: str
    skills: Set[str] = field(default_factory=set)
    city: str = ""
    region: str = ""
    availability: Availability = field(default_factory=WeekdayAvailability)
    full_name: str = ""
    email: Optional[str] = None


@dataclass
class Event:
    """Event record as seen by the matcher."""
    id: str
    required_skills: List[str] = field(default_factory=list)
    location: str = ""
    date: Optional[EventDate] = None
    registered_volunteer_ids: Set[str] = field(default_factory=set)
    name: str = ""
    description: str = ""
    urgency: Optional[str] = None
    status: str = "active"


@dataclass
class CompatibilityScore:
    """Score for one (volunteer, event) pair with its sub-signals."""
    score: int
    matching_skills: List[str]
    location_compatible: bool
    date_compatible: bool
    skill_score: int = 0
    location_score: int = 0
    availability_score: int = 0

    @property
    def matchable(self) -> bool:
        """Location and date both compatible; skills play no part."""
        return self.location_compatible and self.date_compatible

    def to_dict(self):
        return {
            "score": self.score,
            "breakdown": {
                "skills": self.skill_score,
                "location": self.location_score,
                "availability": self.availability_score,
            },
            "matching_skills": list(self.matching_skills),
            "location_compatible": self.location_compatible,
            "date_compatible": self.date_compatible,
        }


@dataclass
class MatchCandidate:
    """Volunteer suggested for an event (event -> volunteers direction)."""
    volunteer_id: str
    event_id: str
    score: int
    matching_skills: List[str]
    location_compatible: bool
    date_compatible: bool
    volunteer: Optional[Volunteer] = None


@dataclass
class EventRanking:
    """Event ranked for a volunteer (volunteer -> events direction)."""
    event: Event
    matchable: bool
    skill_match_count: int
    matching_skills: List[str] = field(default_factory=list)
    location_compatible: bool = False
    date_compatible: bool = False
    score: int = 0


@dataclass
class Registration:
    """Accepted (volunteer, event) pairing owned by the ledger."""
    volunteer_id: str
    event_id: str
    registered_at: Optional[datetime] = None
    status: str = "registered"
