# data/repositories/__init__.py

from .base import (ActionFailed, EntryNotFound, InvalidEntry, MessageNotFound,
                   TagNotFound)
from .message import CHAT_MESSAGES_COLLECTION, MessageStore
from .utils import delete_all_messages, is_object_id, to_object_id

__all__ = [
	'ActionFailed',
	'EntryNotFound',
	'InvalidEntry',
	'MessageNotFound',
	'TagNotFound',
	'CHAT_MESSAGES_COLLECTION',
	'MessageStore',
	'delete_all_messages',
	'is_object_id',
	'to_object_id',
]
