import uuid

from sqlalchemy import Column, Text, Boolean, TIMESTAMP, JSON, Index, func
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import relationship

from .base import Base

# JSONB on PostgreSQL, plain JSON elsewhere (SQLite in tests)
JSONType = JSON().with_variant(JSONB(), 'postgresql')


class Volunteer(Base):
    """
    Volunteer profile.

    Availability is stored exactly as submitted: either a list of ISO dates
    (optionally with an "always available" token) or a weekday map.
    """
    __tablename__ = 'volunteer_profile'

    id = Column(Text, primary_key=True, default=lambda: str(uuid.uuid4()))
    email = Column(Text, nullable=True, unique=True)
    full_name = Column(Text, nullable=False, default='')

    # Address
    address1 = Column(Text, nullable=False, default='')
    address2 = Column(Text, nullable=False, default='')
    city = Column(Text, nullable=False, default='')
    state = Column(Text, nullable=False, default='')
    zip_code = Column(Text, nullable=False, default='')

    # Matching inputs
    skills = Column(JSONType, nullable=False, default=list)
    availability = Column(JSONType, nullable=True)
    preferences = Column(Text, nullable=False, default='')

    profile_completed = Column(Boolean, nullable=False, default=False)
    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())

    registrations = relationship("Registration", back_populates="volunteer", cascade="all")

    __table_args__ = (
        Index('idx_volunteer_full_name', 'full_name'),
        Index('idx_volunteer_city', 'city'),
    )
