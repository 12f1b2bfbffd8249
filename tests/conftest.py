"""
Pytest configuration and fixtures.

This file provides pytest-specific configuration and fixtures.
For standard test utilities, see tests/__init__.py
"""

from datetime import date

import pytest

from core.matcher.availability import WeekdayAvailability
from core.matcher.models import Event, Volunteer
from tests import create_test_engine, create_test_session_factory, next_weekday
from tests.mocks.matcher_mocks import (
    InMemoryEventRegistry,
    InMemoryRegistrationLedger,
    InMemoryVolunteerDirectory,
)


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "db: marks tests as requiring database (deselect with '-m \"not db\"')"
    )


@pytest.fixture
def next_monday() -> date:
    return next_weekday(0)


@pytest.fixture
def houston_event(next_monday) -> Event:
    """Monday event in Houston needing Teamwork."""
    return Event(
        id="E1",
        name="Food Bank Shift",
        required_skills=["Teamwork"],
        location="Houston, TX",
        date=next_monday,
    )


@pytest.fixture
def volunteer_v1() -> Volunteer:
    return Volunteer(
        id="V1",
        full_name="Valerie One",
        skills={"Teamwork", "Communication"},
        city="Houston",
        region="",
        availability=WeekdayAvailability(days={"monday": True}),
    )


@pytest.fixture
def volunteer_v2() -> Volunteer:
    return Volunteer(
        id="V2",
        full_name="Victor Two",
        skills={"Fundraising"},
        city="Dallas",
        region="",
        availability=WeekdayAvailability(days={"tuesday": True}),
    )


@pytest.fixture
def directories(houston_event, volunteer_v1, volunteer_v2):
    """In-memory directory, registry and ledger seeded with V1, V2 and E1."""
    return (
        InMemoryVolunteerDirectory([volunteer_v1, volunteer_v2]),
        InMemoryEventRegistry([houston_event]),
        InMemoryRegistrationLedger(),
    )


@pytest.fixture
def db_engine():
    engine = create_test_engine()
    yield engine
    engine.dispose()


@pytest.fixture
def db_session(db_engine):
    session = create_test_session_factory(db_engine)()
    try:
        yield session
    finally:
        session.close()
