import uuid

from sqlalchemy import Column, Text, TIMESTAMP, ForeignKey, UniqueConstraint, Index, func
from sqlalchemy.orm import relationship

from .base import Base


class Registration(Base):
    """
    Accepted volunteer/event pairing.

    The unique constraint on (volunteer_id, event_id) is what rejects
    duplicate registrations under concurrent commits.
    """
    __tablename__ = 'event_registration'

    id = Column(Text, primary_key=True, default=lambda: str(uuid.uuid4()))
    volunteer_id = Column(Text, ForeignKey('volunteer_profile.id', ondelete='CASCADE'), nullable=False)
    event_id = Column(Text, ForeignKey('event.id', ondelete='CASCADE'), nullable=False)

    status = Column(Text, nullable=False, default='registered')
    registered_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())

    volunteer = relationship("Volunteer", back_populates="registrations")
    event = relationship("Event", back_populates="registrations")

    __table_args__ = (
        UniqueConstraint('volunteer_id', 'event_id', name='uq_registration_volunteer_event'),
        Index('idx_registration_event', 'event_id'),
        Index('idx_registration_volunteer', 'volunteer_id'),
    )
