"""Tests for clubhouse.services.registration and the UserStore it writes through."""

import unittest
from unittest.mock import MagicMock

from sqlalchemy.exc import IntegrityError

from clubhouse.models import User
from clubhouse.schemas.auth import SignUpData
from clubhouse.services.registration import DuplicateAccountError, register_user
from clubhouse.services.user_store import UserStore
from tests.support import count_users, make_database


def _data(**overrides: str) -> SignUpData:
    values = {
        "first_name": "Jane",
        "last_name": "Doe",
        "username": "janedoe",
        "email": "jane@example.com",
        "password": "Secret1!",
    }
    values.update(overrides)
    return SignUpData(**values)


class TestDuplicateAttribution(unittest.TestCase):
    """The matched row's email decides which field is reported."""

    def test_matching_email_is_reported_as_email(self) -> None:
        store = MagicMock()
        store.find_duplicate.return_value = User(email="jane@example.com", username="other")
        with self.assertRaises(DuplicateAccountError) as ctx:
            register_user(store, _data())
        self.assertEqual(ctx.exception.field, "email")
        self.assertEqual(ctx.exception.message, "email is already in use")
        store.add.assert_not_called()

    def test_other_match_is_reported_as_username(self) -> None:
        store = MagicMock()
        store.find_duplicate.return_value = User(email="someone@example.com", username="janedoe")
        with self.assertRaises(DuplicateAccountError) as ctx:
            register_user(store, _data())
        self.assertEqual(ctx.exception.field, "username")
        store.add.assert_not_called()

    def test_lookup_uses_email_and_username(self) -> None:
        store = MagicMock()
        store.find_duplicate.return_value = None
        register_user(store, _data(), rounds=4)
        store.find_duplicate.assert_called_once_with("jane@example.com", "janedoe")
        store.add.assert_called_once()


class TestRegisterUserAgainstDatabase(unittest.TestCase):
    def setUp(self) -> None:
        self.engine, self.SessionTesting = make_database()
        self.db = self.SessionTesting()
        self.store = UserStore(self.db)

    def tearDown(self) -> None:
        self.db.close()
        self.engine.dispose()

    def test_stores_hash_not_plaintext(self) -> None:
        user = register_user(self.store, _data(), rounds=4)
        self.assertIsNotNone(user.id)
        self.assertNotEqual(user.password, "Secret1!")
        self.assertEqual(self.store.get_by_username("janedoe").id, user.id)

    def test_second_registration_with_same_username(self) -> None:
        register_user(self.store, _data(), rounds=4)
        with self.assertRaises(DuplicateAccountError) as ctx:
            register_user(self.store, _data(email="other@example.com"), rounds=4)
        self.assertEqual(ctx.exception.field, "username")
        self.assertEqual(count_users(self.SessionTesting), 1)

    def test_second_registration_with_same_email(self) -> None:
        register_user(self.store, _data(), rounds=4)
        with self.assertRaises(DuplicateAccountError) as ctx:
            register_user(self.store, _data(username="jdoe"), rounds=4)
        self.assertEqual(ctx.exception.field, "email")
        self.assertEqual(count_users(self.SessionTesting), 1)

    def test_unique_index_rejects_a_racing_insert(self) -> None:
        register_user(self.store, _data(), rounds=4)
        racer = User(
            first_name="Jane",
            last_name="Doe",
            username="janedoe",
            email="racer@example.com",
            password="x",
        )
        with self.assertRaises(IntegrityError):
            self.store.add(racer)
        # Session was rolled back and is still usable.
        self.assertEqual(self.db.query(User).count(), 1)


if __name__ == "__main__":
    unittest.main()
