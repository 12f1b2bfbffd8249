#!/usr/bin/env python3
"""
Matching Engine - ranks volunteers for events and events for volunteers.

Flow per call:
1. Read a fresh snapshot from the volunteer directory / event registry
2. Read the ledger's current registration set (no caching between calls)
3. Filter, score and rank

Commits and removals are delegated to the ledger, which is the single
source of truth for exclusion and the serialization point for concurrent
commits.
"""
from typing import List, Optional
import logging

from core.config_loader import MatchingConfig
from core.matcher.eligibility import filter_eligible
from core.matcher.exceptions import NotFound
from core.matcher.interfaces import EventRegistry, RegistrationLedger, VolunteerDirectory
from core.matcher.models import Event, EventRanking, MatchCandidate, Registration, Volunteer
from core.matcher.ranking import rank_strict, rank_unconstrained
from core.matcher.scorer import CompatibilityScorer

logger = logging.getLogger(__name__)


class MatchingEngine:
    """
    Matching core over injected collaborators.

    Holds no state of its own beyond configuration, so one instance may be
    shared or created per request.
    """

    def __init__(
        self,
        volunteers: VolunteerDirectory,
        events: EventRegistry,
        ledger: RegistrationLedger,
        config: Optional[MatchingConfig] = None,
        scorer: Optional[CompatibilityScorer] = None
    ):
        """
        Initialize the engine with its collaborators.

        Args:
            volunteers: Volunteer directory
            events: Event registry
            ledger: Registration ledger
            config: Matching configuration (defaults if omitted)
            scorer: Scorer override, mostly for tests
        """
        self.volunteers = volunteers
        self.events = events
        self.ledger = ledger
        self.config = config or MatchingConfig()
        self.scorer = scorer or CompatibilityScorer(self.config.scoring)

    def rank_volunteers_for_event(self, event_id: str, top_k: Optional[int] = None) -> List[MatchCandidate]:
        """
        Suggest unregistered volunteers for an event, best score first.

        Args:
            event_id: Event identifier
            top_k: Optional override of the configured result limit

        Returns:
            Match candidates with score > 0

        Raises:
            NotFound: If the event does not exist
        """
        event = self._require_event(event_id)

        excluded = set(self.ledger.list_registrations(event_id))
        excluded.update(event.registered_volunteer_ids or ())

        candidates = filter_eligible(self.volunteers.list_volunteers(), excluded)
        scored = self.scorer.score_volunteers(candidates, event)

        ranked = rank_unconstrained(
            event,
            scored,
            min_score=self.config.min_score,
            top_k=top_k if top_k is not None else self.config.top_k,
        )

        logger.info(
            f"Ranked {len(ranked)} volunteer(s) for event {event_id} "
            f"({len(excluded)} already registered)"
        )
        return ranked

    def rank_events_for_volunteer(self, volunteer_id: str) -> List[EventRanking]:
        """
        Rank every event for a volunteer, matchable events first.

        Args:
            volunteer_id: Volunteer identifier

        Returns:
            One entry per event in the registry

        Raises:
            NotFound: If the volunteer does not exist
        """
        volunteer = self._require_volunteer(volunteer_id)
        events = self.events.list_events()

        ranked = rank_strict(volunteer, self.scorer.score_events(volunteer, events))

        logger.info(
            f"Ranked {len(ranked)} event(s) for volunteer {volunteer_id} "
            f"({sum(1 for r in ranked if r.matchable)} matchable)"
        )
        return ranked

    def commit_match(self, volunteer_id: str, event_id: str) -> Registration:
        """
        Register a volunteer for an event.

        Raises:
            NotFound: If the volunteer or event does not exist
            DuplicateRegistration: If the pair is already registered
        """
        self._require_volunteer(volunteer_id)
        self._require_event(event_id)

        registration = self.ledger.create_registration(volunteer_id, event_id)
        logger.info(f"Registered volunteer {volunteer_id} for event {event_id}")
        return registration

    def remove_match(self, volunteer_id: str, event_id: str) -> None:
        """
        Remove a volunteer's registration for an event.

        Raises:
            NotFound: If the volunteer, event or registration does not exist
        """
        self._require_volunteer(volunteer_id)
        self._require_event(event_id)

        if not self.ledger.delete_registration(volunteer_id, event_id):
            raise NotFound(
                "registration",
                f"{volunteer_id}/{event_id}",
                f"Volunteer {volunteer_id} is not registered for event {event_id}",
            )
        logger.info(f"Removed volunteer {volunteer_id} from event {event_id}")

    def list_event_matches(self, event_id: str) -> List[Volunteer]:
        """
        Volunteers currently registered for an event.

        Raises:
            NotFound: If the event does not exist
        """
        self._require_event(event_id)
        registered = self.ledger.list_registrations(event_id)
        return [v for v in self.volunteers.list_volunteers() if v.id in registered]

    # Private helper methods

    def _require_event(self, event_id: str) -> Event:
        event = self.events.get_event(event_id)
        if event is None:
            raise NotFound("event", event_id)
        return event

    def _require_volunteer(self, volunteer_id: str) -> Volunteer:
        volunteer = self.volunteers.get_volunteer(volunteer_id)
        if volunteer is None:
            raise NotFound("volunteer", volunteer_id)
        return volunteer
