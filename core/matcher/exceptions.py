"""
Matcher exceptions.

Only two conditions surface from the matching core: an unknown identifier
and a duplicate registration. Everything else is absorbed into scoring.
"""


class MatchingError(Exception):
    """Base exception for matching core errors."""
    pass


class NotFound(MatchingError):
    """Raised when a referenced event, volunteer or registration does not exist."""

    def __init__(self, kind: str, identifier: str, message: str = None):
        self.kind = kind
        self.identifier = identifier
        super().__init__(message or f"{kind.capitalize()} {identifier} not found")


class DuplicateRegistration(MatchingError):
    """Raised when a (volunteer, event) registration already exists."""

    def __init__(self, volunteer_id: str, event_id: str):
        self.volunteer_id = volunteer_id
        self.event_id = event_id
        super().__init__(
            f"Volunteer {volunteer_id} is already registered for event {event_id}"
        )
