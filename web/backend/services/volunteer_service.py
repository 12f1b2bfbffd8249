#!/usr/bin/env python3
"""
Volunteer service - profile management and participation history.
"""

import logging
from typing import List

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from database.models import Volunteer
from database.repositories import RegistrationRepository, VolunteerRepository
from ..models.requests import VolunteerProfileRequest
from ..models.responses import HistoryEntry, VolunteerSummary
from ..utils import safe_list, safe_str, safe_datetime_iso
from ..exceptions import ValidationException, VolunteerNotFoundException

logger = logging.getLogger(__name__)


class VolunteerService:
    """Service for managing volunteer profiles."""

    def __init__(self, db: Session):
        self.db = db
        self.repo = VolunteerRepository(db)
        self.registrations = RegistrationRepository(db)

    def list_volunteers(self) -> List[VolunteerSummary]:
        return [to_volunteer_summary(row) for row in self.repo.list_profiles()]

    def get_volunteer(self, volunteer_id: str) -> VolunteerSummary:
        return to_volunteer_summary(self._require(volunteer_id))

    def create_volunteer(self, request: VolunteerProfileRequest) -> VolunteerSummary:
        """
        Create a volunteer profile.

        Raises:
            ValidationException: If the email is already used by another profile.
        """
        fields = self._to_fields(request)
        try:
            row = self.repo.create_profile(fields)
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            logger.info(f"Rejected volunteer profile: {e.orig}")
            raise ValidationException(f"A profile with email {request.email} already exists") from e
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(row)
        return to_volunteer_summary(row)

    def update_volunteer(self, volunteer_id: str, request: VolunteerProfileRequest) -> VolunteerSummary:
        """
        Replace a volunteer's profile fields.

        Raises:
            VolunteerNotFoundException: If the profile does not exist.
            ValidationException: If the email is already used by another profile.
        """
        self._require(volunteer_id)
        try:
            row = self.repo.update_profile(volunteer_id, self._to_fields(request))
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            logger.info(f"Rejected update to volunteer {volunteer_id}: {e.orig}")
            raise ValidationException(f"A profile with email {request.email} already exists") from e
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(row)
        logger.info(f"Updated volunteer profile {volunteer_id}")
        return to_volunteer_summary(row)

    def get_history(self, volunteer_id: str) -> List[HistoryEntry]:
        """
        Registrations of a volunteer joined with their events, newest first.

        Raises:
            VolunteerNotFoundException: If the profile does not exist.
        """
        self._require(volunteer_id)
        return [
            HistoryEntry(
                event_id=str(event.id),
                event_name=safe_str(event.name),
                description=safe_str(event.description),
                location=safe_str(event.location),
                date=safe_datetime_iso(event.event_date),
                required_skills=safe_list(event.required_skills),
                urgency=safe_str(event.urgency, 'medium'),
                status=safe_str(reg.status, 'registered'),
                registered_at=safe_datetime_iso(reg.registered_at),
            )
            for reg, event in self.registrations.get_history(volunteer_id)
        ]

    # Private helper methods

    def _require(self, volunteer_id: str) -> Volunteer:
        row = self.repo.get_profile(volunteer_id)
        if not row:
            raise VolunteerNotFoundException(f"Volunteer {volunteer_id} not found")
        return row

    @staticmethod
    def _to_fields(request: VolunteerProfileRequest) -> dict:
        fields = request.model_dump()
        fields['skills'] = list(request.skills)
        fields['profile_completed'] = True
        return fields


def to_volunteer_summary(row: Volunteer) -> VolunteerSummary:
    """Convert an ORM volunteer profile to its API representation."""
    return VolunteerSummary(
        volunteer_id=str(row.id),
        full_name=safe_str(row.full_name),
        email=row.email,
        address1=safe_str(row.address1),
        address2=safe_str(row.address2),
        city=safe_str(row.city),
        state=safe_str(row.state),
        zip_code=safe_str(row.zip_code),
        skills=safe_list(row.skills),
        preferences=safe_str(row.preferences),
        availability=row.availability,
        profile_completed=bool(row.profile_completed),
    )
