#!/usr/bin/env python3
"""
Event service - business logic for event administration.
"""

import logging
from typing import List

from sqlalchemy.orm import Session

from database.models import Event
from database.repositories import EventRepository
from ..models.requests import EventCreate, EventUpdate
from ..models.responses import EventSummary
from ..utils import safe_list, safe_str, safe_datetime_iso
from ..exceptions import EventNotFoundException

logger = logging.getLogger(__name__)


class EventService:
    """Service for managing events."""

    def __init__(self, db: Session):
        self.db = db
        self.repo = EventRepository(db)

    def list_events(self) -> List[EventSummary]:
        """
        List active events, soonest first.

        Returns:
            List of event summaries.
        """
        rows = self.repo.list_active()
        registered = self.repo.registered_ids([row.id for row in rows])
        return [to_event_summary(row, len(registered.get(row.id, ()))) for row in rows]

    def get_event(self, event_id: str) -> EventSummary:
        """
        Get a single event.

        Raises:
            EventNotFoundException: If the event does not exist.
        """
        row = self._require(event_id)
        return to_event_summary(row, len(self.repo.registered_ids([event_id]).get(event_id, ())))

    def create_event(self, request: EventCreate, created_by: str = None) -> EventSummary:
        """
        Create a new event.

        Args:
            request: Validated event payload.
            created_by: Optional administrator identifier.

        Returns:
            The created event.
        """
        fields = self._to_fields(request)
        fields['created_by'] = created_by
        try:
            row = self.repo.create(fields)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(row)
        return to_event_summary(row, 0)

    def update_event(self, event_id: str, request: EventUpdate) -> EventSummary:
        """
        Replace an event's editable fields.

        Raises:
            EventNotFoundException: If the event does not exist.
        """
        self._require(event_id)
        try:
            row = self.repo.update(event_id, self._to_fields(request))
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(row)
        logger.info(f"Updated event {event_id}")
        return self.get_event(event_id)

    def delete_event(self, event_id: str) -> None:
        """
        Delete an event together with its registrations.

        Raises:
            EventNotFoundException: If the event does not exist.
        """
        self._require(event_id)
        try:
            self.repo.delete(event_id)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

    # Private helper methods

    def _require(self, event_id: str) -> Event:
        row = self.repo.get_active(event_id)
        if not row:
            raise EventNotFoundException(f"Event {event_id} not found")
        return row

    @staticmethod
    def _to_fields(request: EventCreate) -> dict:
        return {
            'name': request.name,
            'description': request.description,
            'location': request.location,
            'required_skills': list(request.required_skills),
            'urgency': request.urgency,
            'event_date': request.date,
        }


def to_event_summary(row: Event, registered_count: int = 0) -> EventSummary:
    """Convert an ORM event to its API representation."""
    return EventSummary(
        event_id=str(row.id),
        name=safe_str(row.name),
        description=safe_str(row.description),
        date=safe_datetime_iso(row.event_date),
        location=safe_str(row.location),
        required_skills=safe_list(row.required_skills),
        urgency=safe_str(row.urgency, 'medium'),
        registered_count=registered_count,
        created_at=safe_datetime_iso(row.created_at),
    )
