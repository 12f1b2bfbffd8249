"""Business logic services."""

from .event_service import EventService
from .volunteer_service import VolunteerService
from .matching_service import MatchingService
