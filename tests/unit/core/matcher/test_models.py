#!/usr/bin/env python3
"""
Unit tests for matcher data structures and exceptions.
"""

import unittest

from core.matcher.exceptions import DuplicateRegistration, MatchingError, NotFound
from core.matcher.models import SKILLS, URGENCY_LEVELS, CompatibilityScore, Event, Volunteer


class TestCompatibilityScore(unittest.TestCase):

    def test_matchable_requires_location_and_date(self):
        self.assertTrue(CompatibilityScore(0, [], True, True).matchable)
        self.assertFalse(CompatibilityScore(50, ["Teamwork"], True, False).matchable)
        self.assertFalse(CompatibilityScore(50, ["Teamwork"], False, True).matchable)


class TestRecords(unittest.TestCase):

    def test_defaults_are_independent(self):
        a, b = Volunteer(id="a"), Volunteer(id="b")
        a.skills.add("Teamwork")
        self.assertEqual(b.skills, set())

        e = Event(id="e")
        self.assertEqual(e.registered_volunteer_ids, set())
        self.assertEqual(e.status, "active")

    def test_vocabulary(self):
        self.assertEqual(len(SKILLS), 10)
        self.assertIn("Teaching/Tutoring", SKILLS)
        self.assertEqual(URGENCY_LEVELS, ("low", "medium", "high"))


class TestExceptions(unittest.TestCase):

    def test_not_found_default_message(self):
        exc = NotFound("event", "E1")
        self.assertIsInstance(exc, MatchingError)
        self.assertEqual(str(exc), "Event E1 not found")
        self.assertEqual(exc.identifier, "E1")

    def test_duplicate_registration(self):
        exc = DuplicateRegistration("V1", "E1")
        self.assertIsInstance(exc, MatchingError)
        self.assertIn("already registered", str(exc))
        self.assertEqual((exc.volunteer_id, exc.event_id), ("V1", "E1"))


if __name__ == '__main__':
    unittest.main()
