# data/repositories/message.py
"""
Chat message operations for MongoDB.

## Fields
	_id: index
	conversation_id: The conversation the message was posted in
	sender_id: The account that wrote the message
	text: The message body
	tags: Labels attached to the message, in the order they were added
	likes: Ids of the accounts that liked the message
	reactions: List of {reaction, reaction_unicode, user_ids}
	resolved: Whether the message has been marked as resolved
	deleted: Soft delete flag, never cleared once set
	created_at: The timestamp when the message was created
	updated_at: The timestamp when the message was last modified
"""

from contextlib import contextmanager
from typing import Any

from pydantic import ValidationError
from pymongo import ASCENDING, DESCENDING, ReturnDocument
from pymongo.database import Database
from pymongo.errors import PyMongoError

from chat_store.config.settings import get_settings
from chat_store.data.repositories.base import (ActionFailed, InvalidEntry,
                                               MessageNotFound, TagNotFound,
                                               utc_now)
from chat_store.data.repositories.utils import create_index, to_object_id
from chat_store.models.message import ChatMessage, MessageCreate
from chat_store.utils.logger import logger

CHAT_MESSAGES_COLLECTION = "chat_messages"

@contextmanager
def _database_errors(action: str):
	"""Logs a failed database call before letting the pymongo error through."""
	try:
		yield
	except PyMongoError as e:
		logger(tag="MESSAGES").error(f"Failed to {action}: {e}")
		raise

class MessageStore:
	"""Reads and writes chat messages in a single collection."""

	def __init__(
		self,
		database: Database,
		*,
		collection_name: str | None = None
	):
		self.database = database
		self.collection_name = collection_name or get_settings().CHAT_MESSAGES_COLLECTION
		self.collection = database.get_collection(self.collection_name)

	def ensure_indexes(self) -> None:
		"""Indexes the fields used by the conversation and tag queries."""
		with _database_errors(f"create indexes on '{self.collection_name}'"):
			create_index(self.database, self.collection_name, "conversation_id")
			create_index(self.database, self.collection_name, "tags")

	def create(
		self,
		message: MessageCreate | dict[str, Any],
		sender_id: Any
	) -> ChatMessage:
		"""Stores a new message written by `sender_id`."""
		if not isinstance(message, MessageCreate):
			try:
				message = MessageCreate.model_validate(message)
			except ValidationError as e:
				logger(tag="MESSAGES").warning(f"Rejected message: {e}")
				raise InvalidEntry(str(e)) from e
		sender = to_object_id(sender_id, field="sender_id")

		now = utc_now()
		doc = {
			"conversation_id": to_object_id(message.conversation_id, field="conversation_id"),
			"sender_id": sender,
			"text": message.text,
			"tags": list(message.tags),
			"likes": [],
			"reactions": [],
			"resolved": False,
			"deleted": False,
			"created_at": now,
			"updated_at": now
		}
		with _database_errors("create message"):
			result = self.collection.insert_one(doc)
		if not result.acknowledged:
			raise ActionFailed("Insert of chat message was not acknowledged")

		doc["_id"] = result.inserted_id
		logger(tag="MESSAGES").info(f"Created message {result.inserted_id} in conversation {message.conversation_id}")
		return ChatMessage.from_document(doc)

	def get_message(self, message_id: Any) -> ChatMessage:
		object_id = to_object_id(message_id)
		with _database_errors(f"get message {message_id}"):
			doc = self.collection.find_one({"_id": object_id})
		if doc is None:
			logger(tag="MESSAGES").warning(f"Message not found: {message_id}")
			raise MessageNotFound(str(message_id))
		return ChatMessage.from_document(doc)

	def delete(self, message_id: Any) -> ChatMessage:
		"""Marks a message as deleted. The document itself is kept."""
		message = self._update(message_id, {"$set": {"deleted": True}})
		logger(tag="MESSAGES").info(f"Marked message {message_id} as deleted")
		return message

	def resolve(self, message_id: Any) -> ChatMessage:
		return self._update(message_id, {"$set": {"resolved": True}})

	def unresolve(self, message_id: Any) -> ChatMessage:
		return self._update(message_id, {"$set": {"resolved": False}})

	def like(self, message_id: Any, user_id: Any) -> ChatMessage:
		user = to_object_id(user_id, field="user_id")
		return self._update(message_id, {"$addToSet": {"likes": user}})

	def unlike(self, message_id: Any, user_id: Any) -> ChatMessage:
		user = to_object_id(user_id, field="user_id")
		return self._update(message_id, {"$pull": {"likes": user}})

	def add_reaction(
		self,
		message_id: Any,
		user_id: Any,
		reaction: str,
		reaction_unicode: str
	) -> ChatMessage:
		"""
		Adds `user_id` to the users of `reaction`.

		The reaction record is created the first time anyone uses it.
		"""
		object_id = to_object_id(message_id)
		user = to_object_id(user_id, field="user_id")
		with _database_errors(f"add reaction to message {message_id}"):
			doc = self.collection.find_one_and_update(
				{"_id": object_id, "reactions.reaction": reaction},
				{
					"$addToSet": {"reactions.$.user_ids": user},
					"$set": {"updated_at": utc_now()}
				},
				return_document=ReturnDocument.AFTER
			)
			if doc is None:
				doc = self.collection.find_one_and_update(
					{"_id": object_id, "reactions.reaction": {"$ne": reaction}},
					{
						"$push": {"reactions": {
							"reaction": reaction,
							"reaction_unicode": reaction_unicode,
							"user_ids": [user]
						}},
						"$set": {"updated_at": utc_now()}
					},
					return_document=ReturnDocument.AFTER
				)
		if doc is None:
			logger(tag="MESSAGES").warning(f"Message not found: {message_id}")
			raise MessageNotFound(str(message_id))
		return ChatMessage.from_document(doc)

	def remove_reaction(self, message_id: Any, user_id: Any, reaction: str) -> ChatMessage:
		"""Removes `user_id` from `reaction`, dropping reactions nobody uses anymore."""
		object_id = to_object_id(message_id)
		user = to_object_id(user_id, field="user_id")
		with _database_errors(f"remove reaction from message {message_id}"):
			self.collection.update_one(
				{"_id": object_id, "reactions.reaction": reaction},
				{"$pull": {"reactions.$.user_ids": user}}
			)
		return self._update(object_id, {"$pull": {"reactions": {"user_ids": {"$size": 0}}}})

	def add_tag(self, message_id: Any, user_id: Any, tag: str) -> ChatMessage:
		message = self._update(message_id, {"$push": {"tags": tag}})
		logger(tag="MESSAGES").info(f"User {user_id} tagged message {message_id} with '{tag}'")
		return message

	def update_tag(
		self,
		message_id: Any,
		user_id: Any,
		old_tag: str,
		new_tag: str
	) -> ChatMessage:
		"""Replaces the first occurrence of `old_tag` with `new_tag`."""
		object_id = to_object_id(message_id)
		with _database_errors(f"update tag on message {message_id}"):
			doc = self.collection.find_one_and_update(
				{"_id": object_id, "tags": old_tag},
				{"$set": {"tags.$": new_tag, "updated_at": utc_now()}},
				return_document=ReturnDocument.AFTER
			)
			exists = doc is not None or self.collection.count_documents({"_id": object_id}, limit=1) > 0
		if not exists:
			logger(tag="MESSAGES").warning(f"Message not found: {message_id}")
			raise MessageNotFound(str(message_id))
		if doc is None:
			logger(tag="MESSAGES").warning(f"Tag '{old_tag}' not found on message {message_id}")
			raise TagNotFound(str(message_id), old_tag)

		logger(tag="MESSAGES").info(f"User {user_id} changed tag '{old_tag}' to '{new_tag}' on message {message_id}")
		return ChatMessage.from_document(doc)

	def remove_tag(self, message_id: Any, user_id: Any, tag: str) -> ChatMessage:
		"""Removes every occurrence of `tag` from the message."""
		message = self._update(message_id, {"$pull": {"tags": tag}})
		logger(tag="MESSAGES").info(f"User {user_id} removed tag '{tag}' from message {message_id}")
		return message

	def get_messages_by_tag(self, tag: str, user_id: Any) -> list[ChatMessage]:
		"""Returns the messages carrying `tag`, oldest first. Deleted messages are skipped."""
		logger(tag="MESSAGES").info(f"User {user_id} listing messages tagged '{tag}'")
		# The cursor only talks to the server once it is iterated
		with _database_errors(f"list messages tagged '{tag}'"):
			cursor = self.collection.find({"tags": tag, "deleted": False}).sort([("created_at", ASCENDING), ("_id", ASCENDING)])
			return [ChatMessage.from_document(doc) for doc in cursor]

	def get_conversation_messages(
		self,
		conversation_id: Any,
		/,
		limit: int | None = None,
		offset: int = 0
	) -> list[ChatMessage]:
		"""Returns one page of a conversation's messages, newest first."""
		if limit is None:
			limit = get_settings().DEFAULT_PAGE_SIZE
		if limit < 1 or offset < 0:
			raise InvalidEntry(f"Invalid page: limit={limit}, offset={offset}")

		query = {
			"conversation_id": to_object_id(conversation_id, field="conversation_id"),
			"deleted": False
		}
		with _database_errors(f"list messages of conversation {conversation_id}"):
			cursor = self.collection.find(query).sort([("created_at", DESCENDING), ("_id", DESCENDING)]).skip(offset).limit(limit)
			return [ChatMessage.from_document(doc) for doc in cursor]

	def _update(self, message_id: Any, update: dict[str, Any]) -> ChatMessage:
		"""Applies `update` to one message and returns the message afterwards."""
		object_id = to_object_id(message_id)
		update = dict(update)
		update["$set"] = {**update.get("$set", {}), "updated_at": utc_now()}
		with _database_errors(f"update message {message_id}"):
			doc = self.collection.find_one_and_update(
				{"_id": object_id},
				update,
				return_document=ReturnDocument.AFTER
			)
		if doc is None:
			logger(tag="MESSAGES").warning(f"Message not found: {message_id}")
			raise MessageNotFound(str(message_id))
		return ChatMessage.from_document(doc)
