import uuid

from sqlalchemy import Column, Text, DateTime, TIMESTAMP, Index, func
from sqlalchemy.orm import relationship

from .base import Base
from .volunteer import JSONType


class Event(Base):
    """
    Volunteer event created by an administrator.
    """
    __tablename__ = 'event'

    id = Column(Text, primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(Text, nullable=False)
    description = Column(Text, nullable=False, default='')
    location = Column(Text, nullable=False, default='')
    required_skills = Column(JSONType, nullable=False, default=list)
    urgency = Column(Text, nullable=False, default='medium')  # low|medium|high
    # Wall-clock date/time at the venue; no timezone so the calendar day never shifts
    event_date = Column(DateTime, nullable=True)

    created_by = Column(Text, nullable=True)
    status = Column(Text, nullable=False, default='active')  # active|deleted
    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())

    registrations = relationship("Registration", back_populates="event", cascade="all")

    __table_args__ = (
        Index('idx_event_date', 'event_date'),
        Index('idx_event_status', 'status'),
    )
