"""
Collaborator Interfaces - Abstract sources the matching engine reads from.

The engine never owns storage. It is handed one implementation of each
interface (SQLAlchemy repositories in production, in-memory fakes in tests)
and re-reads them on every call.
"""
from abc import ABC, abstractmethod
from typing import List, Optional, Set

from core.matcher.models import Event, Registration, Volunteer


class VolunteerDirectory(ABC):
    """
    Read-only source of volunteer profiles.
    """

    @abstractmethod
    def list_volunteers(self) -> List[Volunteer]:
        """Return every volunteer in stable directory order."""
        pass

    @abstractmethod
    def get_volunteer(self, volunteer_id: str) -> Optional[Volunteer]:
        """Return the volunteer or None if unknown."""
        pass


class EventRegistry(ABC):
    """
    Read-only source of event records.
    """

    @abstractmethod
    def list_events(self) -> List[Event]:
        """Return every event in stable registry order."""
        pass

    @abstractmethod
    def get_event(self, event_id: str) -> Optional[Event]:
        """Return the event or None if unknown."""
        pass


class RegistrationLedger(ABC):
    """
    Authoritative store of accepted (volunteer, event) pairings.
    """

    @abstractmethod
    def list_registrations(self, event_id: str) -> Set[str]:
        """Return the ids of volunteers registered for ``event_id``."""
        pass

    @abstractmethod
    def list_registrations_for_volunteer(self, volunteer_id: str) -> List[Registration]:
        """Return every registration held by ``volunteer_id``."""
        pass

    @abstractmethod
    def create_registration(self, volunteer_id: str, event_id: str) -> Registration:
        """
        Record a new registration.

        Raises:
            DuplicateRegistration: If the pair is already registered.
        """
        pass

    @abstractmethod
    def delete_registration(self, volunteer_id: str, event_id: str) -> bool:
        """Remove a registration. Returns False if it did not exist."""
        pass
