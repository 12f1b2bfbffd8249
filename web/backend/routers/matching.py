#!/usr/bin/env python3
"""
Matching endpoints - suggest, commit and remove volunteer/event matches.
"""

import logging
from typing import Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from core.config_loader import MatchingConfig
from notification.service import NotificationService
from ..dependencies import get_db, get_matching_config, get_notification_service
from ..services.matching_service import MatchingService
from ..models.requests import MatchRequest
from ..models.responses import (
    CandidatesResponse,
    EventRankingsResponse,
    EventMatchesResponse,
    RegistrationResponse,
    MessageResponse
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/matching", tags=["matching"])


def get_matching_service(
    db: Session = Depends(get_db),
    config: MatchingConfig = Depends(get_matching_config),
    notifier: NotificationService = Depends(get_notification_service)
) -> MatchingService:
    return MatchingService(db, config, notifier)


@router.get("/events/{event_id}/candidates", response_model=CandidatesResponse)
def get_candidates(
    event_id: str,
    top_k: Optional[int] = Query(default=None, ge=1, le=500, description="Maximum candidates to return"),
    service: MatchingService = Depends(get_matching_service)
):
    """
    Suggest volunteers for an event.

    Volunteers already registered are excluded; everyone else with a
    positive score is returned, highest score first. Ties keep directory
    order.
    """
    candidates = service.get_candidates(event_id, top_k)
    return CandidatesResponse(success=True, event_id=event_id, count=len(candidates), candidates=candidates)


@router.get("/volunteers/{volunteer_id}/events", response_model=EventRankingsResponse)
def get_event_rankings(
    volunteer_id: str,
    service: MatchingService = Depends(get_matching_service)
):
    """
    Rank every event for a volunteer.

    Events where location and date both fit come first, ordered by the
    number of matching skills; the rest follow in registry order.
    """
    events = service.get_event_rankings(volunteer_id)
    return EventRankingsResponse(success=True, volunteer_id=volunteer_id, count=len(events), events=events)


@router.get("/events/{event_id}/matches", response_model=EventMatchesResponse)
def get_event_matches(
    event_id: str,
    service: MatchingService = Depends(get_matching_service)
):
    """Volunteers currently registered for an event."""
    volunteers = service.get_event_matches(event_id)
    return EventMatchesResponse(success=True, event_id=event_id, count=len(volunteers), volunteers=volunteers)


@router.post("", response_model=RegistrationResponse, status_code=201)
def commit_match(
    request: MatchRequest,
    service: MatchingService = Depends(get_matching_service)
):
    """
    Register a volunteer for an event.

    Returns 409 if the volunteer is already registered. The volunteer is
    notified after the registration is stored.
    """
    registration, sent = service.commit_match(request.volunteer_id, request.event_id)
    return RegistrationResponse(
        success=True,
        message="Volunteer matched to event successfully",
        registration=registration,
        notifications_sent=sent
    )


@router.delete("", response_model=MessageResponse)
def remove_match(
    request: MatchRequest,
    service: MatchingService = Depends(get_matching_service)
):
    """Remove a volunteer from an event and notify them."""
    service.remove_match(request.volunteer_id, request.event_id)
    return MessageResponse(success=True, message="Volunteer removed from event successfully")
