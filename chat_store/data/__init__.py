# data/__init__.py
"""
Data layer for MongoDB operations.
"""

from .connection import close_connection, get_collection, get_database
from .repositories import *

__all__ = [
	# Connection
	'get_database',
	'get_collection',
	'close_connection',
	# Errors
	'ActionFailed',
	'EntryNotFound',
	'InvalidEntry',
	'MessageNotFound',
	'TagNotFound',
	# Messages
	'CHAT_MESSAGES_COLLECTION',
	'MessageStore',
	# Utility functions
	'delete_all_messages',
	'is_object_id',
	'to_object_id',
]
