from .base import Base
from .volunteer import Volunteer
from .event import Event
from .registration import Registration

__all__ = [
    'Base',
    'Volunteer',
    'Event',
    'Registration',
]
