# models/__init__.py

from .message import (ChatMessage, ConversationRef, MessageCreate, Reaction,
                      UserRef)

__all__ = [
	'ChatMessage',
	'ConversationRef',
	'MessageCreate',
	'Reaction',
	'UserRef',
]
