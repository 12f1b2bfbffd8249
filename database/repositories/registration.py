import logging
from typing import List, Optional, Set, Tuple

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from core.matcher.exceptions import DuplicateRegistration
from core.matcher.interfaces import RegistrationLedger
from core.matcher.models import Registration as RegistrationRecord
from database.models import Event, Registration
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


def to_registration_record(row: Registration) -> RegistrationRecord:
    return RegistrationRecord(
        volunteer_id=row.volunteer_id,
        event_id=row.event_id,
        registered_at=row.registered_at,
        status=row.status or 'registered',
    )


class RegistrationRepository(BaseRepository, RegistrationLedger):
    def get_registration(self, volunteer_id: str, event_id: str) -> Optional[Registration]:
        stmt = select(Registration).where(
            Registration.volunteer_id == volunteer_id,
            Registration.event_id == event_id
        )
        return self.db.execute(stmt).scalar_one_or_none()

    def list_registrations(self, event_id: str) -> Set[str]:
        stmt = select(Registration.volunteer_id).where(Registration.event_id == event_id)
        return set(self.db.execute(stmt).scalars().all())

    def list_registrations_for_volunteer(self, volunteer_id: str) -> List[RegistrationRecord]:
        return [to_registration_record(reg) for reg, _ in self.get_history(volunteer_id)]

    def get_history(self, volunteer_id: str) -> List[Tuple[Registration, Event]]:
        """Registrations of a volunteer joined with their events, newest first."""
        stmt = select(Registration, Event).join(
            Event, Registration.event_id == Event.id
        ).where(
            Registration.volunteer_id == volunteer_id
        ).order_by(Registration.registered_at.desc(), Registration.id.desc())
        return [(reg, event) for reg, event in self.db.execute(stmt).all()]

    def create_registration(self, volunteer_id: str, event_id: str) -> RegistrationRecord:
        if self.get_registration(volunteer_id, event_id) is not None:
            raise DuplicateRegistration(volunteer_id, event_id)

        row = Registration(volunteer_id=volunteer_id, event_id=event_id, status='registered')
        self.db.add(row)
        try:
            self.db.flush()
        except IntegrityError as e:
            # Lost a race with a concurrent commit of the same pair
            self.db.rollback()
            logger.warning(f"Concurrent registration for {volunteer_id}/{event_id}: {e.orig}")
            raise DuplicateRegistration(volunteer_id, event_id) from e

        self.db.refresh(row)
        return to_registration_record(row)

    def delete_registration(self, volunteer_id: str, event_id: str) -> bool:
        row = self.get_registration(volunteer_id, event_id)
        if row is None:
            return False
        self.db.delete(row)
        self.db.flush()
        return True
