"""Matcher Module - volunteer/event compatibility scoring and ranking."""
from core.matcher.availability import (
    Availability, DateSetAvailability, WeekdayAvailability,
    parse_availability, weekday_name, WEEKDAYS, TIME_BUCKETS
)
from core.matcher.models import (
    Volunteer, Event, CompatibilityScore, MatchCandidate, EventRanking,
    Registration, SKILLS, URGENCY_LEVELS
)
from core.matcher.exceptions import MatchingError, NotFound, DuplicateRegistration
from core.matcher.interfaces import VolunteerDirectory, EventRegistry, RegistrationLedger
from core.matcher.eligibility import filter_eligible
from core.matcher.scorer import CompatibilityScorer
from core.matcher.ranking import rank_unconstrained, rank_strict
from core.matcher.service import MatchingEngine

__all__ = [
    'MatchingEngine', 'CompatibilityScorer',
    'filter_eligible', 'rank_unconstrained', 'rank_strict',
    'VolunteerDirectory', 'EventRegistry', 'RegistrationLedger',
    'MatchingError', 'NotFound', 'DuplicateRegistration',
    'Volunteer', 'Event', 'CompatibilityScore', 'MatchCandidate',
    'EventRanking', 'Registration', 'SKILLS', 'URGENCY_LEVELS',
    'Availability', 'DateSetAvailability', 'WeekdayAvailability',
    'parse_availability', 'weekday_name', 'WEEKDAYS', 'TIME_BUCKETS',
]
