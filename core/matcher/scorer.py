#!/usr/bin/env python3
"""
Compatibility Scorer - points for one (volunteer, event) pair.

Three independent components are summed:
- skills: ``skill_points`` per required skill the volunteer holds
- location: ``location_points`` if the volunteer's city/region fits the event location
- availability: ``availability_points`` if the volunteer is available on the event date

Missing or malformed fields contribute zero; scoring never raises.
"""

from typing import Iterable, List, Optional, Tuple
import logging
import re

from core.config_loader import ScoringConfig
from core.matcher.availability import Availability, parse_availability, to_date
from core.matcher.models import CompatibilityScore, Event, Volunteer

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s+")


def normalize_location(text: Optional[str]) -> str:
    """Lower-case and collapse whitespace for location comparison."""
    if not text or not isinstance(text, str):
        return ""
    return _WHITESPACE.sub(" ", text).strip().lower()


def match_skills(volunteer_skills: Optional[Iterable[str]], required_skills: Optional[Iterable[str]]) -> List[str]:
    """
    Required skills also held by the volunteer, in required-skill order.

    Duplicates in the requirement list are counted once.
    """
    held = set(s for s in (volunteer_skills or ()) if isinstance(s, str))
    matched: List[str] = []
    for skill in required_skills or ():
        if skill in held and skill not in matched:
            matched.append(skill)
    return matched


def is_location_compatible(city: Optional[str], region: Optional[str], event_location: Optional[str]) -> bool:
    """
    Check whether a volunteer's city/region fits an event location.

    Compatible if the normalized ``"city, region"`` equals the event
    location, or the event location contains the city or the region.
    Blank components never match by containment.
    """
    event_loc = normalize_location(event_location)
    if not event_loc:
        return False

    norm_city = normalize_location(city)
    norm_region = normalize_location(region)
    if not norm_city and not norm_region:
        return False

    volunteer_loc = normalize_location(f"{city or ''}, {region or ''}")
    if volunteer_loc == event_loc:
        return True
    if norm_city and norm_city in event_loc:
        return True
    if norm_region and norm_region in event_loc:
        return True
    return False


def is_date_compatible(availability: Availability, event_date) -> bool:
    """Check whether the availability covers the event's calendar day."""
    day = to_date(event_date)
    if day is None:
        return False
    return availability.is_available_on(day)


class CompatibilityScorer:
    """Scores volunteer/event pairs using configured point values."""

    def __init__(self, config: Optional[ScoringConfig] = None):
        self.config = config or ScoringConfig()

    def score(self, volunteer: Volunteer, event: Event) -> CompatibilityScore:
        """
        Score a single pair.

        Args:
            volunteer: Volunteer snapshot
            event: Event snapshot

        Returns:
            CompatibilityScore with total and per-component breakdown
        """
        cfg = self.config

        matching = match_skills(volunteer.skills, event.required_skills)
        skill_score = len(matching) * cfg.skill_points

        location_ok = is_location_compatible(volunteer.city, volunteer.region, event.location)
        location_score = cfg.location_points if location_ok else 0

        availability = parse_availability(volunteer.availability, cfg.always_available_tokens)
        date_ok = is_date_compatible(availability, event.date)
        availability_score = cfg.availability_points if date_ok else 0

        return CompatibilityScore(
            score=skill_score + location_score + availability_score,
            matching_skills=matching,
            location_compatible=location_ok,
            date_compatible=date_ok,
            skill_score=skill_score,
            location_score=location_score,
            availability_score=availability_score,
        )

    def score_volunteers(self, volunteers: List[Volunteer], event: Event) -> List[Tuple[Volunteer, CompatibilityScore]]:
        """Score every volunteer against one event, keeping input order."""
        return [(v, self.score(v, event)) for v in volunteers]

    def score_events(self, volunteer: Volunteer, events: List[Event]) -> List[Tuple[Event, CompatibilityScore]]:
        """Score one volunteer against every event, keeping input order."""
        return [(e, self.score(volunteer, e)) for e in events]
