import logging
from typing import Any, Dict, List, Optional

from sqlalchemy import select

from core.matcher.availability import parse_availability
from core.matcher.interfaces import VolunteerDirectory
from core.matcher.models import Volunteer as VolunteerRecord
from database.models import Volunteer
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


def to_volunteer_record(row: Volunteer) -> VolunteerRecord:
    """Convert an ORM volunteer into the matcher's snapshot type."""
    return VolunteerRecord(
        id=row.id,
        skills=set(s for s in (row.skills or []) if isinstance(s, str)),
        city=row.city or '',
        region=row.state or '',
        availability=parse_availability(row.availability),
        full_name=row.full_name or '',
        email=row.email,
    )


class VolunteerRepository(BaseRepository, VolunteerDirectory):
    def list_volunteers(self) -> List[VolunteerRecord]:
        return [to_volunteer_record(row) for row in self.list_profiles()]

    def get_volunteer(self, volunteer_id: str) -> Optional[VolunteerRecord]:
        row = self.get_profile(volunteer_id)
        return to_volunteer_record(row) if row else None

    def list_profiles(self) -> List[Volunteer]:
        stmt = select(Volunteer).order_by(Volunteer.full_name.asc(), Volunteer.id.asc())
        return self.db.execute(stmt).scalars().all()

    def get_profile(self, volunteer_id: str) -> Optional[Volunteer]:
        return self.db.get(Volunteer, volunteer_id)

    def create_profile(self, fields: Dict[str, Any], volunteer_id: Optional[str] = None) -> Volunteer:
        row = Volunteer(**fields)
        if volunteer_id:
            row.id = volunteer_id
        self.db.add(row)
        self.db.flush()
        logger.info(f"Created volunteer profile {row.id}")
        return row

    def update_profile(self, volunteer_id: str, fields: Dict[str, Any]) -> Optional[Volunteer]:
        row = self.get_profile(volunteer_id)
        if not row:
            return None
        for key, value in fields.items():
            setattr(row, key, value)
        self.db.flush()
        return row
