import logging
from typing import Any, Dict, List, Optional, Set

from sqlalchemy import select

from core.matcher.interfaces import EventRegistry
from core.matcher.models import Event as EventRecord
from database.models import Event, Registration
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


def to_event_record(row: Event, registered_ids: Set[str]) -> EventRecord:
    """Convert an ORM event into the matcher's snapshot type."""
    return EventRecord(
        id=row.id,
        required_skills=[s for s in (row.required_skills or []) if isinstance(s, str)],
        location=row.location or '',
        date=row.event_date,
        registered_volunteer_ids=set(registered_ids),
        name=row.name or '',
        description=row.description or '',
        urgency=row.urgency,
        status=row.status or 'active',
    )


class EventRepository(BaseRepository, EventRegistry):
    def list_events(self) -> List[EventRecord]:
        rows = self.list_active()
        registered = self.registered_ids([row.id for row in rows])
        return [to_event_record(row, registered.get(row.id, set())) for row in rows]

    def get_event(self, event_id: str) -> Optional[EventRecord]:
        row = self.get_active(event_id)
        if not row:
            return None
        return to_event_record(row, self.registered_ids([event_id]).get(event_id, set()))

    def list_active(self) -> List[Event]:
        stmt = select(Event).where(
            Event.status != 'deleted'
        ).order_by(Event.event_date.asc().nulls_last(), Event.created_at.asc(), Event.id.asc())
        return self.db.execute(stmt).scalars().all()

    def get_active(self, event_id: str) -> Optional[Event]:
        row = self.db.get(Event, event_id)
        if row is None or row.status == 'deleted':
            return None
        return row

    def create(self, fields: Dict[str, Any]) -> Event:
        row = Event(**fields)
        self.db.add(row)
        self.db.flush()
        logger.info(f"Created event {row.id}: {row.name}")
        return row

    def update(self, event_id: str, fields: Dict[str, Any]) -> Optional[Event]:
        row = self.get_active(event_id)
        if not row:
            return None
        for key, value in fields.items():
            setattr(row, key, value)
        self.db.flush()
        return row

    def delete(self, event_id: str) -> bool:
        """Delete an event; its registrations go with it via cascade."""
        row = self.get_active(event_id)
        if not row:
            return False
        self.db.expire(row, ["registrations"])
        removed = len(row.registrations)
        self.db.delete(row)
        self.db.flush()
        logger.info(f"Deleted event {event_id} and {removed} registration(s)")
        return True

    def registered_ids(self, event_ids: List[str]) -> Dict[str, Set[str]]:
        if not event_ids:
            return {}
        stmt = select(Registration.event_id, Registration.volunteer_id).where(
            Registration.event_id.in_(event_ids)
        )
        registered: Dict[str, Set[str]] = {}
        for event_id, volunteer_id in self.db.execute(stmt).all():
            registered.setdefault(event_id, set()).add(volunteer_id)
        return registered
