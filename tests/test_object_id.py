"""Unit tests for the object id helpers and the test teardown utility."""

import unittest
from unittest.mock import MagicMock

from bson import ObjectId

from chat_store.data.repositories.base import InvalidEntry
from chat_store.data.repositories.utils import (delete_all_messages,
                                                is_object_id, to_object_id)


class TestObjectIdHelpers(unittest.TestCase):

	def test_is_object_id(self):
		self.assertTrue(is_object_id("5fe0cce861c8ea54018385af"))
		self.assertTrue(is_object_id(ObjectId()))
		self.assertFalse(is_object_id("5fe0cce861c8ea54018385a"))
		self.assertFalse(is_object_id("zzzzzzzzzzzzzzzzzzzzzzzz"))
		self.assertFalse(is_object_id(None))
		self.assertFalse(is_object_id(1234))

	def test_to_object_id(self):
		self.assertEqual(to_object_id("5fe0cce861c8ea54018385af"), ObjectId("5fe0cce861c8ea54018385af"))
		oid = ObjectId()
		self.assertIs(to_object_id(oid), oid)

	def test_to_object_id_names_the_field(self):
		with self.assertRaises(InvalidEntry) as ctx:
			to_object_id("nope", field="sender_id")
		self.assertIn("sender_id", str(ctx.exception))

	def test_invalid_entry_is_a_value_error(self):
		with self.assertRaises(ValueError):
			to_object_id("")


class TestDeleteAllMessages(unittest.TestCase):

	def test_empties_the_collection(self):
		db = MagicMock()
		db.get_collection.return_value.delete_many.return_value = MagicMock(deleted_count=3)

		self.assertEqual(delete_all_messages(db, "test_chat_messages"), 3)
		db.get_collection.assert_called_once_with("test_chat_messages")
		db.get_collection.return_value.delete_many.assert_called_once_with({})

if __name__ == "__main__":
	unittest.main(verbosity=2)
