#!/usr/bin/env python3
"""
Volunteer endpoints - profiles and participation history.
"""

import logging
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..dependencies import get_db
from ..services.volunteer_service import VolunteerService
from ..models.requests import VolunteerProfileRequest
from ..models.responses import VolunteersResponse, VolunteerResponse, HistoryResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/volunteers", tags=["volunteers"])


@router.get("", response_model=VolunteersResponse)
def list_volunteers(db: Session = Depends(get_db)):
    """List volunteer profiles ordered by name."""
    volunteers = VolunteerService(db).list_volunteers()
    return VolunteersResponse(success=True, count=len(volunteers), volunteers=volunteers)


@router.get("/{volunteer_id}", response_model=VolunteerResponse)
def get_volunteer(volunteer_id: str, db: Session = Depends(get_db)):
    """Get a volunteer profile."""
    return VolunteerResponse(success=True, volunteer=VolunteerService(db).get_volunteer(volunteer_id))


@router.post("", response_model=VolunteerResponse, status_code=201)
def create_volunteer(request: VolunteerProfileRequest, db: Session = Depends(get_db)):
    """
    Create a volunteer profile.

    Availability is either a weekday map (``{"saturday": ["morning"]}``) or
    a list of ISO dates, optionally containing ``"any"``.
    """
    volunteer = VolunteerService(db).create_volunteer(request)
    logger.info(f"Volunteer profile created via API: {volunteer.volunteer_id}")
    return VolunteerResponse(success=True, volunteer=volunteer)


@router.put("/{volunteer_id}", response_model=VolunteerResponse)
def update_volunteer(volunteer_id: str, request: VolunteerProfileRequest, db: Session = Depends(get_db)):
    """Replace a volunteer's profile."""
    return VolunteerResponse(
        success=True,
        volunteer=VolunteerService(db).update_volunteer(volunteer_id, request)
    )


@router.get("/{volunteer_id}/history", response_model=HistoryResponse)
def get_history(volunteer_id: str, db: Session = Depends(get_db)):
    """Events the volunteer is registered for, most recent registration first."""
    history = VolunteerService(db).get_history(volunteer_id)
    return HistoryResponse(success=True, volunteer_id=volunteer_id, count=len(history), history=history)
