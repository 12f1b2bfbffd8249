from database.repositories.base import BaseRepository
from database.repositories.volunteer import VolunteerRepository
from database.repositories.event import EventRepository
from database.repositories.registration import RegistrationRepository

__all__ = [
    'BaseRepository',
    'VolunteerRepository',
    'EventRepository',
    'RegistrationRepository',
]
