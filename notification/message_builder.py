from typing import Optional
from pydantic import BaseModel

from core.matcher.models import Event


class NotificationMessage(BaseModel):
    subject: str
    body: str
    event_type: str
    volunteer_id: str
    event_id: str
    link: Optional[str] = None


class NotificationMessageBuilder:
    ASSIGNMENT = "event_assignment"
    REMOVAL = "event_removal"

    @staticmethod
    def event_label(event: Optional[Event], event_id: str) -> str:
        """Event name if known, otherwise its id."""
        if event is not None and event.name:
            return event.name
        return event_id

    @staticmethod
    def build_link(base_url: Optional[str], event_id: str) -> Optional[str]:
        if not base_url:
            return None
        return f"{base_url.rstrip('/')}/events/{event_id}"

    @classmethod
    def build_assignment(
        cls,
        volunteer_id: str,
        event_id: str,
        event: Optional[Event] = None,
        base_url: Optional[str] = None
    ) -> NotificationMessage:
        label = cls.event_label(event, event_id)
        body = f"You have been assigned to the event: {label}"
        if event is not None and event.date is not None:
            body += f" on {event.date.strftime('%A, %B %d, %Y')}"
        if event is not None and event.location:
            body += f" at {event.location}"
        return NotificationMessage(
            subject="New Event Assignment",
            body=body,
            event_type=cls.ASSIGNMENT,
            volunteer_id=volunteer_id,
            event_id=event_id,
            link=cls.build_link(base_url, event_id),
        )

    @classmethod
    def build_removal(
        cls,
        volunteer_id: str,
        event_id: str,
        event: Optional[Event] = None,
        base_url: Optional[str] = None
    ) -> NotificationMessage:
        label = cls.event_label(event, event_id)
        return NotificationMessage(
            subject="You have been removed from an event",
            body=(
                f"You have been removed from event: {label}. "
                "If you have questions, please contact the coordinator."
            ),
            event_type=cls.REMOVAL,
            volunteer_id=volunteer_id,
            event_id=event_id,
            link=cls.build_link(base_url, event_id),
        )
