#!/usr/bin/env python3
"""
Matching service - wires the matching engine to the database and notifications.

The engine itself is storage-agnostic; this service builds one per request
from the SQLAlchemy repositories, owns the transaction boundary and sends
the volunteer notification once a registration change is committed.
"""

import logging
from typing import List, Optional, Tuple

from sqlalchemy.orm import Session

from core.config_loader import MatchingConfig
from core.matcher import MatchingEngine
from core.matcher.models import Event, EventRanking, MatchCandidate, Registration
from database.repositories import EventRepository, RegistrationRepository, VolunteerRepository
from notification.service import NotificationService
from ..models.responses import (
    CandidateSummary,
    EventRankingSummary,
    EventSummary,
    RegistrationSummary,
    VolunteerSummary,
)
from ..utils import safe_datetime_iso
from .volunteer_service import to_volunteer_summary

logger = logging.getLogger(__name__)


class MatchingService:
    """Service for suggesting, committing and removing volunteer matches."""

    def __init__(
        self,
        db: Session,
        config: Optional[MatchingConfig] = None,
        notifier: Optional[NotificationService] = None
    ):
        self.db = db
        self.volunteers = VolunteerRepository(db)
        self.events = EventRepository(db)
        self.ledger = RegistrationRepository(db)
        self.notifier = notifier or NotificationService()
        self.engine = MatchingEngine(self.volunteers, self.events, self.ledger, config)

    def get_candidates(self, event_id: str, top_k: Optional[int] = None) -> List[CandidateSummary]:
        """
        Suggest unregistered volunteers for an event, best first.

        Raises:
            NotFound: If the event does not exist.
        """
        return [self._to_candidate(c) for c in self.engine.rank_volunteers_for_event(event_id, top_k)]

    def get_event_rankings(self, volunteer_id: str) -> List[EventRankingSummary]:
        """
        Rank every active event for a volunteer.

        Raises:
            NotFound: If the volunteer does not exist.
        """
        return [self._to_ranking(r) for r in self.engine.rank_events_for_volunteer(volunteer_id)]

    def get_event_matches(self, event_id: str) -> List[VolunteerSummary]:
        """
        Volunteers currently registered for an event.

        Raises:
            NotFound: If the event does not exist.
        """
        records = self.engine.list_event_matches(event_id)
        rows = [self.volunteers.get_profile(v.id) for v in records]
        return [to_volunteer_summary(row) for row in rows if row is not None]

    def commit_match(self, volunteer_id: str, event_id: str) -> Tuple[RegistrationSummary, int]:
        """
        Register a volunteer for an event and notify them.

        Returns:
            The registration and the number of notifications sent.

        Raises:
            NotFound: If the volunteer or event does not exist.
            DuplicateRegistration: If the volunteer is already registered.
        """
        try:
            registration = self.engine.commit_match(volunteer_id, event_id)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

        sent = self._notify(self.notifier.notify_assignment, volunteer_id, event_id)
        return self._to_registration(registration), sent

    def remove_match(self, volunteer_id: str, event_id: str) -> int:
        """
        Remove a volunteer's registration and notify them.

        Returns:
            Number of notifications sent.

        Raises:
            NotFound: If the volunteer, event or registration does not exist.
        """
        try:
            self.engine.remove_match(volunteer_id, event_id)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

        return self._notify(self.notifier.notify_removal, volunteer_id, event_id)

    # Private helper methods

    def _notify(self, send, volunteer_id: str, event_id: str) -> int:
        # The registration change is already committed; a failed notification must not undo it
        try:
            return send(volunteer_id, event_id, self.events.get_event(event_id))
        except Exception as e:
            logger.warning(f"Notification for volunteer {volunteer_id} / event {event_id} failed: {e}")
            return 0

    @staticmethod
    def _to_event(event: Event) -> EventSummary:
        return EventSummary(
            event_id=event.id,
            name=event.name,
            description=event.description,
            date=safe_datetime_iso(event.date),
            location=event.location,
            required_skills=list(event.required_skills),
            urgency=event.urgency or 'medium',
            registered_count=len(event.registered_volunteer_ids),
        )

    @staticmethod
    def _to_candidate(candidate: MatchCandidate) -> CandidateSummary:
        volunteer = candidate.volunteer
        return CandidateSummary(
            volunteer_id=candidate.volunteer_id,
            full_name=volunteer.full_name if volunteer else '',
            city=volunteer.city if volunteer else '',
            state=volunteer.region if volunteer else '',
            skills=sorted(volunteer.skills) if volunteer else [],
            score=candidate.score,
            matching_skills=list(candidate.matching_skills),
            location_compatible=candidate.location_compatible,
            date_compatible=candidate.date_compatible,
        )

    @classmethod
    def _to_ranking(cls, ranking: EventRanking) -> EventRankingSummary:
        return EventRankingSummary(
            event=cls._to_event(ranking.event),
            matchable=ranking.matchable,
            skill_match_count=ranking.skill_match_count,
            matching_skills=list(ranking.matching_skills),
            location_compatible=ranking.location_compatible,
            date_compatible=ranking.date_compatible,
            score=ranking.score,
        )

    @staticmethod
    def _to_registration(registration: Registration) -> RegistrationSummary:
        return RegistrationSummary(
            volunteer_id=registration.volunteer_id,
            event_id=registration.event_id,
            status=registration.status,
            registered_at=safe_datetime_iso(registration.registered_at),
        )
