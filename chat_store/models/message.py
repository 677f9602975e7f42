# models/message.py
"""
Pydantic models for chat messages.

Identifiers are exposed as 24 character hex strings. The documents in MongoDB
store them as `ObjectId`; `ChatMessage.from_document` does the conversion.
"""

from datetime import datetime, timezone
from typing import Any

from bson import ObjectId
from pydantic import BaseModel, computed_field, field_validator, model_validator


def _hex(value: Any) -> Any:
	return str(value) if isinstance(value, ObjectId) else value

class UserRef(BaseModel):
	id: str

class ConversationRef(BaseModel):
	id: str

class Reaction(BaseModel):
	reaction: str
	reaction_unicode: str
	user_ids: list[str] = []

	@field_validator("user_ids", mode="before")
	@classmethod
	def _stringify_user_ids(cls, value):
		return [_hex(v) for v in value or []]

class MessageCreate(BaseModel):
	"""Input accepted when creating a message."""
	conversation_id: str
	text: str
	tags: list[str] = []

	@field_validator("conversation_id", mode="before")
	@classmethod
	def _check_conversation_id(cls, value):
		value = _hex(value)
		if not isinstance(value, str) or not ObjectId.is_valid(value):
			raise ValueError(f"'{value}' is not a valid object id")
		return value

	@field_validator("text")
	@classmethod
	def _check_text(cls, value: str) -> str:
		if not value.strip():
			raise ValueError("text must not be empty")
		return value

class ChatMessage(BaseModel):
	id: str
	conversation_id: str
	sender_id: str
	text: str
	tags: list[str] = []
	likes: list[str] = []
	reactions: list[Reaction] = []
	resolved: bool = False
	deleted: bool = False
	created_at: datetime | None = None
	updated_at: datetime | None = None

	@model_validator(mode="before")
	@classmethod
	def _stringify_ids(cls, data):
		if isinstance(data, dict):
			data = dict(data)
			for key in ("id", "conversation_id", "sender_id"):
				if key in data:
					data[key] = _hex(data[key])
			if "likes" in data:
				data["likes"] = [_hex(v) for v in data["likes"] or []]
		return data

	@field_validator("created_at", "updated_at")
	@classmethod
	def _assume_utc(cls, value: datetime | None) -> datetime | None:
		# pymongo hands back naive datetimes unless the client is tz aware
		if value is not None and value.tzinfo is None:
			return value.replace(tzinfo=timezone.utc)
		return value

	@computed_field
	@property
	def likes_count(self) -> int:
		return len(self.likes)

	@computed_field
	@property
	def sender(self) -> UserRef:
		return UserRef(id=self.sender_id)

	@computed_field
	@property
	def conversation(self) -> ConversationRef:
		return ConversationRef(id=self.conversation_id)

	@classmethod
	def from_document(cls, doc: dict[str, Any]) -> "ChatMessage":
		"""Builds a message from a raw `chat_messages` document."""
		data = {key: value for key, value in doc.items() if key != "_id"}
		data["id"] = doc["_id"]
		return cls.model_validate(data)
