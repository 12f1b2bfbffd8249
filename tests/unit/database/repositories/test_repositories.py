#!/usr/bin/env python3
"""
Repository tests against in-memory SQLite.

Covers the SQLAlchemy-backed volunteer directory, event registry and
registration ledger, including the duplicate guard and cascade delete.
"""

from datetime import datetime, timedelta, timezone
from unittest.mock import patch

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from core.matcher import DuplicateRegistration, MatchingEngine
from core.matcher.availability import DateSetAvailability, WeekdayAvailability
from database.models import Base, Event, Registration
from database.repositories import EventRepository, RegistrationRepository, VolunteerRepository

pytestmark = pytest.mark.db


@pytest.fixture
def volunteers(db_session):
    return VolunteerRepository(db_session)


@pytest.fixture
def events(db_session):
    return EventRepository(db_session)


@pytest.fixture
def ledger(db_session):
    return RegistrationRepository(db_session)


@pytest.fixture
def seeded(db_session, volunteers, events, next_monday):
    """Two volunteers and one Monday event in Houston."""
    v1 = volunteers.create_profile({
        'full_name': 'Valerie One',
        'email': 'v1@example.org',
        'city': 'Houston',
        'state': 'TX',
        'skills': ['Teamwork', 'Communication'],
        'availability': {'monday': True},
    }, volunteer_id='V1')
    v2 = volunteers.create_profile({
        'full_name': 'Victor Two',
        'email': 'v2@example.org',
        'city': 'Tulsa',
        'state': 'OK',
        'skills': ['Fundraising'],
        'availability': ['2031-01-01'],
    }, volunteer_id='V2')
    event = events.create({
        'id': 'E1',
        'name': 'Food Bank Shift',
        'description': 'Sort donations for families.',
        'location': 'Houston, TX',
        'required_skills': ['Teamwork'],
        'urgency': 'high',
        'event_date': datetime.combine(next_monday, datetime.min.time()).replace(hour=9),
    })
    db_session.commit()
    return v1, v2, event


class TestVolunteerRepository:

    def test_records_map_state_to_region_and_parse_availability(self, seeded, volunteers):
        v1 = volunteers.get_volunteer('V1')
        assert v1.region == 'TX'
        assert v1.skills == {'Teamwork', 'Communication'}
        assert isinstance(v1.availability, WeekdayAvailability)

        v2 = volunteers.get_volunteer('V2')
        assert isinstance(v2.availability, DateSetAvailability)

    def test_list_ordered_by_name(self, seeded, volunteers):
        assert [v.id for v in volunteers.list_volunteers()] == ['V1', 'V2']

    def test_missing_volunteer(self, volunteers):
        assert volunteers.get_volunteer('nope') is None
        assert volunteers.update_profile('nope', {'city': 'Austin'}) is None

    def test_update_profile(self, seeded, volunteers, db_session):
        volunteers.update_profile('V2', {'city': 'Houston'})
        db_session.commit()
        assert volunteers.get_volunteer('V2').city == 'Houston'


class TestEventRepository:

    def test_event_record(self, seeded, events):
        record = events.get_event('E1')
        assert record.required_skills == ['Teamwork']
        assert record.date.weekday() == 0
        assert record.registered_volunteer_ids == set()

    def test_list_ordered_by_date_and_excludes_deleted(self, seeded, events, db_session):
        later = events.create({
            'name': 'Later', 'location': 'Austin, TX',
            'event_date': datetime.now() + timedelta(days=60),
        })
        sooner = events.create({
            'name': 'Sooner', 'location': 'Austin, TX',
            'event_date': datetime.now() - timedelta(days=1),
        })
        gone = events.create({'name': 'Gone', 'status': 'deleted'})
        db_session.commit()

        ids = [e.id for e in events.list_events()]
        assert ids == [sooner.id, 'E1', later.id]
        assert events.get_event(gone.id) is None

    def test_registered_ids_reflect_ledger(self, seeded, events, ledger, db_session):
        ledger.create_registration('V2', 'E1')
        db_session.commit()
        assert events.get_event('E1').registered_volunteer_ids == {'V2'}

    def test_delete_cascades_registrations(self, seeded, events, ledger, db_session):
        ledger.create_registration('V1', 'E1')
        db_session.commit()

        assert events.delete('E1')
        db_session.commit()

        assert db_session.get(Event, 'E1') is None
        assert db_session.query(Registration).count() == 0
        assert events.delete('E1') is False


class TestRegistrationRepository:

    def test_create_and_list(self, seeded, ledger, db_session):
        record = ledger.create_registration('V1', 'E1')
        db_session.commit()

        assert record.volunteer_id == 'V1'
        assert record.status == 'registered'
        assert record.registered_at is not None
        assert ledger.list_registrations('E1') == {'V1'}
        assert [r.event_id for r in ledger.list_registrations_for_volunteer('V1')] == ['E1']

    def test_duplicate_rejected(self, seeded, ledger, db_session):
        ledger.create_registration('V1', 'E1')
        db_session.commit()

        with pytest.raises(DuplicateRegistration):
            ledger.create_registration('V1', 'E1')
        assert ledger.list_registrations('E1') == {'V1'}

    def test_delete_registration(self, seeded, ledger, db_session):
        ledger.create_registration('V1', 'E1')
        db_session.commit()

        assert ledger.delete_registration('V1', 'E1') is True
        assert ledger.delete_registration('V1', 'E1') is False
        assert ledger.list_registrations('E1') == set()

    def test_history_newest_first(self, seeded, ledger, events, db_session):
        second = events.create({'id': 'E2', 'name': 'Park Cleanup', 'location': 'Houston, TX'})
        ledger.create_registration('V1', 'E1')
        ledger.create_registration('V1', second.id)
        db_session.commit()

        old = ledger.get_registration('V1', 'E1')
        old.registered_at = datetime.now(timezone.utc) - timedelta(days=3)
        db_session.commit()

        history = ledger.get_history('V1')
        assert [event.id for _, event in history] == ['E2', 'E1']


class TestEngineOverRepositories:

    def test_engine_end_to_end(self, seeded, volunteers, events, ledger, db_session):
        engine = MatchingEngine(volunteers, events, ledger)

        ranked = engine.rank_volunteers_for_event('E1')
        assert [(c.volunteer_id, c.score) for c in ranked] == [('V1', 45)]

        engine.commit_match('V1', 'E1')
        db_session.commit()
        assert engine.rank_volunteers_for_event('E1') == []

        engine.remove_match('V1', 'E1')
        db_session.commit()
        assert [c.volunteer_id for c in engine.rank_volunteers_for_event('E1')] == ['V1']


class TestConcurrentRegistration:
    """Two sessions on one database racing to register the same pair."""

    @pytest.fixture
    def file_engine(self, tmp_path):
        engine = create_engine(f"sqlite:///{tmp_path / 'ledger.db'}")
        Base.metadata.create_all(engine)
        yield engine
        engine.dispose()

    def test_lost_race_raises_duplicate(self, file_engine):
        factory = sessionmaker(autocommit=False, autoflush=False, bind=file_engine)
        session_a, session_b = factory(), factory()
        try:
            VolunteerRepository(session_b).create_profile({'full_name': 'Valerie One'}, volunteer_id='V1')
            EventRepository(session_b).create({'id': 'E1', 'name': 'Food Bank Shift'})
            session_b.commit()

            ledger_a = RegistrationRepository(session_a)
            # Session A checked before B committed, so its pre-check saw nothing
            with patch.object(ledger_a, 'get_registration', return_value=None):
                RegistrationRepository(session_b).create_registration('V1', 'E1')
                session_b.commit()

                with pytest.raises(DuplicateRegistration):
                    ledger_a.create_registration('V1', 'E1')

            assert session_b.query(Registration).count() == 1
            assert RegistrationRepository(session_a).list_registrations('E1') == {'V1'}
        finally:
            session_a.close()
            session_b.close()
