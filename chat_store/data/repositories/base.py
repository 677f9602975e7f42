# data/repositories/base.py

from datetime import datetime, timezone

class ActionFailed(Exception):
	"""Raised when a database write is not acknowledged."""

class EntryNotFound(Exception):
	"""Raised when an entry cannot be found in the database."""

class InvalidEntry(ValueError):
	"""Raised when an identifier or an entry's fields fail validation."""

class MessageNotFound(EntryNotFound):
	"""Raised when no chat message has the requested id."""

	def __init__(self, message_id: str):
		super().__init__(f"Chat message not found: {message_id}")
		self.message_id = message_id

class TagNotFound(EntryNotFound):
	"""Raised when a tag to be updated is not on the message."""

	def __init__(self, message_id: str, tag: str):
		super().__init__(f"Tag '{tag}' not found on chat message {message_id}")
		self.message_id = message_id
		self.tag = tag

def utc_now() -> datetime:
	"""Current UTC time truncated to milliseconds, the precision BSON keeps."""
	now = datetime.now(timezone.utc)
	return now.replace(microsecond=now.microsecond // 1000 * 1000)
