# chat_store/__init__.py
"""
Chat Message Store

Data layer for chat messages kept in a MongoDB collection.
"""

from .data import MessageStore
from .models import ChatMessage, MessageCreate

__all__ = [
	'MessageStore',
	'ChatMessage',
	'MessageCreate',
]
