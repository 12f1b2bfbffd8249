#!/usr/bin/env python3
"""
Test Mock Implementations - in-memory collaborators for the matching engine.

These fakes implement the directory/registry/ledger interfaces over plain
Python containers so engine behaviour can be tested without a database.
"""
from datetime import datetime, timezone
from typing import Dict, List, Optional, Set, Tuple

from core.matcher.exceptions import DuplicateRegistration
from core.matcher.interfaces import EventRegistry, RegistrationLedger, VolunteerDirectory
from core.matcher.models import Event, Registration, Volunteer


class InMemoryVolunteerDirectory(VolunteerDirectory):
    """Volunteer directory backed by a list; iteration order is insertion order."""

    def __init__(self, volunteers: Optional[List[Volunteer]] = None):
        self.volunteers = list(volunteers or [])

    def add(self, volunteer: Volunteer) -> Volunteer:
        self.volunteers.append(volunteer)
        return volunteer

    def list_volunteers(self) -> List[Volunteer]:
        return list(self.volunteers)

    def get_volunteer(self, volunteer_id: str) -> Optional[Volunteer]:
        for volunteer in self.volunteers:
            if volunteer.id == volunteer_id:
                return volunteer
        return None


class InMemoryEventRegistry(EventRegistry):
    """Event registry backed by a list."""

    def __init__(self, events: Optional[List[Event]] = None):
        self.events = list(events or [])

    def add(self, event: Event) -> Event:
        self.events.append(event)
        return event

    def list_events(self) -> List[Event]:
        return list(self.events)

    def get_event(self, event_id: str) -> Optional[Event]:
        for event in self.events:
            if event.id == event_id:
                return event
        return None


class InMemoryRegistrationLedger(RegistrationLedger):
    """
    Registration ledger backed by a dict keyed on (volunteer_id, event_id).

    Counts reads so tests can assert the engine re-reads on every call.
    """

    def __init__(self):
        self.registrations: Dict[Tuple[str, str], Registration] = {}
        self.read_count = 0

    def list_registrations(self, event_id: str) -> Set[str]:
        self.read_count += 1
        return {vid for (vid, eid) in self.registrations if eid == event_id}

    def list_registrations_for_volunteer(self, volunteer_id: str) -> List[Registration]:
        return [r for (vid, _), r in self.registrations.items() if vid == volunteer_id]

    def create_registration(self, volunteer_id: str, event_id: str) -> Registration:
        key = (volunteer_id, event_id)
        if key in self.registrations:
            raise DuplicateRegistration(volunteer_id, event_id)
        registration = Registration(
            volunteer_id=volunteer_id,
            event_id=event_id,
            registered_at=datetime.now(timezone.utc),
        )
        self.registrations[key] = registration
        return registration

    def delete_registration(self, volunteer_id: str, event_id: str) -> bool:
        return self.registrations.pop((volunteer_id, event_id), None) is not None
