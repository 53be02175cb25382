"""Unit tests for clubhouse.core.config.Settings validators."""

import unittest

from pydantic import ValidationError

from clubhouse.core.config import Settings


class TestSettingsValidation(unittest.TestCase):
    def test_explicit_values_are_kept(self) -> None:
        s = Settings(DATABASE_URL="sqlite://", SESSION_SECRET="x", PORT=8080, BCRYPT_ROUNDS=12)
        self.assertEqual(s.PORT, 8080)
        self.assertEqual(s.BCRYPT_ROUNDS, 12)
        self.assertEqual(s.SESSION_SECRET.get_secret_value(), "x")

    def test_port_out_of_range(self) -> None:
        with self.assertRaises(ValidationError):
            Settings(PORT=0)
        with self.assertRaises(ValidationError):
            Settings(PORT=70000)

    def test_database_url_scheme(self) -> None:
        with self.assertRaises(ValidationError):
            Settings(DATABASE_URL="mysql://root@localhost/clubhouse")
        s = Settings(DATABASE_URL="  postgresql://u:p@db:5432/clubhouse  ")
        self.assertEqual(s.DATABASE_URL, "postgresql://u:p@db:5432/clubhouse")

    def test_empty_session_secret(self) -> None:
        with self.assertRaises(ValidationError):
            Settings(SESSION_SECRET="   ")

    def test_bcrypt_rounds_bounds(self) -> None:
        with self.assertRaises(ValidationError):
            Settings(BCRYPT_ROUNDS=3)
        with self.assertRaises(ValidationError):
            Settings(BCRYPT_ROUNDS=32)

    def test_session_max_age_bounds(self) -> None:
        with self.assertRaises(ValidationError):
            Settings(SESSION_MAX_AGE=10)


if __name__ == "__main__":
    unittest.main()
