#!/usr/bin/env python3
"""
Test suite configuration and utilities.

All tests run against in-memory fakes or an in-memory SQLite database,
so no external services are needed:

    # Run all tests
    python -m pytest tests/ -v

    # Skip the SQLite-backed repository and API tests
    python -m pytest tests/ -v -m "not db"

    # Using unittest
    python -m unittest discover tests -v
"""

from datetime import date, timedelta

from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from database.models import Base

SQLITE_URL = "sqlite://"


def create_test_engine():
    """
    In-memory SQLite engine shared across threads.

    StaticPool keeps a single connection so FastAPI's threadpool sees the
    same database as the test body.
    """
    engine = create_engine(
        SQLITE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    @event.listens_for(engine, "connect")
    def _enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    Base.metadata.create_all(engine)
    return engine


def create_test_session_factory(engine=None):
    """Session factory bound to a fresh (or given) test engine."""
    return sessionmaker(autocommit=False, autoflush=False, bind=engine or create_test_engine())


def next_weekday(weekday: int, start: date = None) -> date:
    """First date strictly after ``start`` (default today) falling on ``weekday`` (Monday == 0)."""
    start = start or date.today()
    days_ahead = (weekday - start.weekday() - 1) % 7 + 1
    return start + timedelta(days=days_ahead)
