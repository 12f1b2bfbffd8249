#!/usr/bin/env python3
"""
FastAPI dependencies for dependency injection.
"""

from typing import Generator, Optional
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from core.config_loader import MatchingConfig
from notification.service import NotificationService
from .config import get_config


class DatabaseManager:
    """Manages database connections and sessions."""

    def __init__(self, url: Optional[str] = None):
        self.url = url or get_config().database.url
        self._engine = None
        self._session_factory = None

    @property
    def engine(self):
        # Created on first use so importing the app never opens a connection pool
        if self._engine is None:
            self._engine = create_engine(
                self.url,
                pool_pre_ping=True,  # Verify connections before using
            )
        return self._engine

    @property
    def SessionLocal(self) -> sessionmaker:
        if self._session_factory is None:
            self._session_factory = sessionmaker(
                autocommit=False,
                autoflush=False,
                bind=self.engine
            )
        return self._session_factory

    def get_session(self) -> Generator[Session, None, None]:
        """
        Get a database session.

        Yields:
            Session: SQLAlchemy database session.
        """
        session = self.SessionLocal()
        try:
            yield session
        finally:
            session.close()


# Global database manager instance
_db_manager = DatabaseManager()


def get_db() -> Generator[Session, None, None]:
    """
    FastAPI dependency that yields a database session.

    Usage:
        @app.get("/endpoint")
        def my_endpoint(db: Session = Depends(get_db)):
            ...

    Yields:
        Session: Database session that will be automatically closed.
    """
    yield from _db_manager.get_session()


def get_matching_config() -> MatchingConfig:
    """FastAPI dependency returning the matching configuration."""
    return get_config().matching


def get_notification_service() -> NotificationService:
    """FastAPI dependency returning a notification service bound to current config."""
    return NotificationService(get_config().notifications)
