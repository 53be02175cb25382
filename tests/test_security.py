"""Unit tests for clubhouse.core.security: bcrypt hashing and verification."""

import unittest

from clubhouse.core.security import hash_password, verify_password


class TestHashPassword(unittest.TestCase):
    def test_hash_is_not_plaintext(self) -> None:
        hashed = hash_password("Secret1!", rounds=4)
        self.assertNotEqual(hashed, "Secret1!")
        self.assertTrue(hashed.startswith("$2"))

    def test_hash_is_salted(self) -> None:
        self.assertNotEqual(hash_password("Secret1!", rounds=4), hash_password("Secret1!", rounds=4))

    def test_rounds_are_encoded_in_hash(self) -> None:
        self.assertIn("$05$", hash_password("Secret1!", rounds=5))


class TestVerifyPassword(unittest.TestCase):
    def setUp(self) -> None:
        self.hashed = hash_password("Secret1!", rounds=4)

    def test_correct_password(self) -> None:
        self.assertTrue(verify_password("Secret1!", self.hashed))

    def test_wrong_password(self) -> None:
        self.assertFalse(verify_password("Secret1?", self.hashed))

    def test_malformed_hash_is_a_mismatch(self) -> None:
        self.assertFalse(verify_password("Secret1!", "not-a-bcrypt-hash"))


if __name__ == "__main__":
    unittest.main()
