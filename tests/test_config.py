"""Unit tests for app.core.config.Settings validation."""

import os
import unittest
from unittest.mock import patch

from pydantic import ValidationError

from app.core.config import Settings

GOOD_SECRET = "a-real-signing-secret-0123456789abcdef"


class TestJwtSecret(unittest.TestCase):
    def test_required(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            with self.assertRaises(ValidationError):
                Settings(_env_file=None)

    def test_placeholder_rejected(self) -> None:
        for value in ("change_this_secret", "change-me-in-production", "  "):
            with self.subTest(value=value), self.assertRaises(ValidationError):
                Settings(_env_file=None, JWT_SECRET=value)

    def test_accepts_real_secret(self) -> None:
        s = Settings(_env_file=None, JWT_SECRET=GOOD_SECRET)
        self.assertEqual(s.JWT_SECRET.get_secret_value(), GOOD_SECRET)
        self.assertEqual(s.JWT_ALGORITHM, "HS256")


class TestOtherSettings(unittest.TestCase):
    def test_database_url_must_be_postgres(self) -> None:
        with self.assertRaises(ValidationError):
            Settings(_env_file=None, JWT_SECRET=GOOD_SECRET, DATABASE_URL="mysql://x@localhost/db")

    def test_api_prefix_normalised(self) -> None:
        s = Settings(_env_file=None, JWT_SECRET=GOOD_SECRET, API_V1_PREFIX="/api/v1/")
        self.assertEqual(s.API_V1_PREFIX, "/api/v1")
        with self.assertRaises(ValidationError):
            Settings(_env_file=None, JWT_SECRET=GOOD_SECRET, API_V1_PREFIX="api")

    def test_log_level_upper_cased(self) -> None:
        s = Settings(_env_file=None, JWT_SECRET=GOOD_SECRET, LOG_LEVEL="debug")
        self.assertEqual(s.LOG_LEVEL, "DEBUG")


if __name__ == "__main__":
    unittest.main()
