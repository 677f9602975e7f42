# data/repositories/utils.py

from typing import Any

from bson import ObjectId
from pymongo import ASCENDING
from pymongo.database import Database

from chat_store.data.repositories.base import InvalidEntry
from chat_store.utils.logger import logger


def is_object_id(value: Any) -> bool:
	"""True for an `ObjectId` or a 24 character hex string."""
	if isinstance(value, ObjectId):
		return True
	return isinstance(value, str) and ObjectId.is_valid(value)

def to_object_id(value: Any, *, field: str = "id") -> ObjectId:
	"""Converts a hex string (or an `ObjectId`) to an `ObjectId`."""
	if isinstance(value, ObjectId):
		return value
	if not is_object_id(value):
		raise InvalidEntry(f"Invalid {field}: '{value}' is not a 24 character hex string")
	return ObjectId(value)

def create_index(database: Database, collection_name: str, field_name: str) -> str:
	"""Creates an ascending index on a single field."""
	return database.get_collection(collection_name).create_index([(field_name, ASCENDING)])

def delete_all_messages(database: Database, collection_name: str) -> int:
	"""
	Removes every document from a message collection.

	Test teardown only. `MessageStore` never deletes documents.
	"""
	result = database.get_collection(collection_name).delete_many({})
	logger().info(f"Removed {result.deleted_count} documents from '{collection_name}'")
	return result.deleted_count
