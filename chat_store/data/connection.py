# data/connection.py
"""
MongoDB connection management.

`MessageStore` takes a `Database` explicitly. The helpers here are for
callers that want a single client shared across the process.
"""

from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.database import Database

from chat_store.config.settings import get_settings
from chat_store.utils.logger import logger

_mongo_client: MongoClient | None = None

def get_client() -> MongoClient:
	"""Returns the shared client, creating it on first use."""
	global _mongo_client
	if _mongo_client is None:
		connection_string = get_settings().MONGO_USER
		try:
			logger().info("Initializing MongoDB connection.")
			_mongo_client = MongoClient(connection_string)
		except Exception as e:
			logger().error(f"Failed to connect to MongoDB: {e}")
			raise
	return _mongo_client

def get_database(db_name: str | None = None) -> Database:
	"""Gets a database from the shared client. Defaults to `MONGO_DB_NAME`."""
	return get_client()[db_name or get_settings().MONGO_DB_NAME]

def get_collection(name: str, /, *, database: Database | None = None) -> Collection:
	"""Retrieves a collection by name. MongoDB creates it on first write."""
	return (database if database is not None else get_database()).get_collection(name)

def close_connection():
	"""Closes the shared client, if one was opened."""
	global _mongo_client
	if _mongo_client:
		logger().info("Closing MongoDB connection.")
		_mongo_client.close()
		_mongo_client = None
