"""Tests for the wire and safe view models."""

import unittest

from userauth.auth import SafeUser, User, UserRecord, generate_hash


class TestUserRecord(unittest.TestCase):
    def test_null_fields(self):
        record = UserRecord.model_validate_json(
            '{"username": null, "hash": null, "roles": null}',
        )
        self.assertIsNone(record.username)
        self.assertIsNone(record.password_hash)
        self.assertIsNone(record.roles)

    def test_hash_alias(self):
        record = UserRecord.model_validate(
            {"username": "bob", "hash": "abc", "roles": ["x"]},
        )
        self.assertEqual(record.password_hash, "abc")
        self.assertEqual(
            record.model_dump(by_alias=True),
            {"username": "bob", "hash": "abc", "roles": ["x"]},
        )

    def test_to_wire_from_wire(self):
        user = User(
            "bob", generate_hash("pw"), initial_roles={"writer", "reader"}
        )
        record = user.to_wire()

        self.assertEqual(record.username, "bob")
        self.assertEqual(record.roles, ["reader", "writer"])
        self.assertEqual(User.from_wire(record), user)

    def test_defaults(self):
        record = UserRecord()
        self.assertEqual(record.username, "")
        self.assertEqual(record.password_hash, "")
        self.assertIsNone(record.roles)


class TestSafeUser(unittest.TestCase):
    def test_from_roles_sorts(self):
        safe = SafeUser.from_roles("bob", {"writer", "admin", "reader"})
        self.assertEqual(safe.roles, ["admin", "reader", "writer"])

    def test_no_hash_field(self):
        safe = SafeUser.from_roles("bob", frozenset())
        self.assertEqual(set(safe.model_dump()), {"username", "roles"})
