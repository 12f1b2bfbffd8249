#!/usr/bin/env python3
"""
Unit tests for request model validation that depends on configuration.
"""

import unittest
from unittest.mock import patch

from pydantic import ValidationError

from web.backend.config import AppConfig
from web.backend.models.requests import VolunteerProfileRequest


def _profile(**overrides):
    payload = {
        "full_name": "Valerie One",
        "address1": "1 Main St",
        "city": "Houston",
        "state": "TX",
        "zip_code": "77001",
        "skills": ["Teamwork"],
        "availability": ["2031-05-04"],
    }
    payload.update(overrides)
    return payload


class TestAvailabilitySentinels(unittest.TestCase):

    def _config(self, tokens):
        return AppConfig(matching={"scoring": {"always_available_tokens": tokens}})

    def test_configured_sentinel_accepted(self):
        with patch("web.backend.models.requests.get_config", return_value=self._config(["Whenever"])):
            request = VolunteerProfileRequest(**_profile(availability=["whenever", "2031-05-04"]))
        self.assertEqual(request.availability, ["whenever", "2031-05-04"])

    def test_default_sentinel_rejected_when_not_configured(self):
        with patch("web.backend.models.requests.get_config", return_value=self._config(["whenever"])):
            with self.assertRaises(ValidationError):
                VolunteerProfileRequest(**_profile(availability=["any"]))

    def test_no_sentinels_configured(self):
        with patch("web.backend.models.requests.get_config", return_value=self._config([])):
            with self.assertRaises(ValidationError):
                VolunteerProfileRequest(**_profile(availability=["any"]))
            request = VolunteerProfileRequest(**_profile())
        self.assertEqual(request.availability, ["2031-05-04"])


if __name__ == '__main__':
    unittest.main()
