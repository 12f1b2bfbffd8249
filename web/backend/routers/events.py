#!/usr/bin/env python3
"""
Event endpoints - administrator event management.
"""

import logging
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..dependencies import get_db
from ..services.event_service import EventService
from ..models.requests import EventCreate, EventUpdate
from ..models.responses import EventsResponse, EventResponse, MessageResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/events", tags=["events"])


@router.get("", response_model=EventsResponse)
def list_events(db: Session = Depends(get_db)):
    """
    List active events ordered by date (soonest first).
    """
    events = EventService(db).list_events()
    return EventsResponse(success=True, count=len(events), events=events)


@router.get("/{event_id}", response_model=EventResponse)
def get_event(event_id: str, db: Session = Depends(get_db)):
    """Get a single event."""
    return EventResponse(success=True, event=EventService(db).get_event(event_id))


@router.post("", response_model=EventResponse, status_code=201)
def create_event(request: EventCreate, db: Session = Depends(get_db)):
    """
    Create an event.

    The date must be in the future and every required skill must come
    from the shared skill vocabulary.
    """
    event = EventService(db).create_event(request)
    logger.info(f"Event created via API: {event.event_id}")
    return EventResponse(success=True, event=event)


@router.put("/{event_id}", response_model=EventResponse)
def update_event(event_id: str, request: EventUpdate, db: Session = Depends(get_db)):
    """Replace an event's details."""
    return EventResponse(success=True, event=EventService(db).update_event(event_id, request))


@router.delete("/{event_id}", response_model=MessageResponse)
def delete_event(event_id: str, db: Session = Depends(get_db)):
    """Delete an event and every registration for it."""
    EventService(db).delete_event(event_id)
    return MessageResponse(success=True, message=f"Event {event_id} deleted")
