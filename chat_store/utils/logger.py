# utils/logger.py
"""
Tagged logging for the chat store.

The message store logs under the `MESSAGES` tag, so an embedding service that
calls `setup_logging()` once at startup sees lines such as

	2025-09-07 22:15:30 | INFO  	[chat_store.data.repositories.message:MESSAGES]  	Created message 6530... in conversation 5fe0...
	2025-09-07 22:15:31 | WARNING  	[chat_store.data.repositories.message:MESSAGES]  	Message not found: 5fe0...
	2025-09-07 22:15:32 | ERROR  	[chat_store.data.repositories.message:MESSAGES]  	Failed to get message 5fe0...: connection refused

pymongo's own records go through the same handler without a tag.
"""

import inspect
import logging
import sys

# Logger name plus an optional tag, e.g. [chat_store.data.repositories.message:MESSAGES]
_DEFAULT_FORMAT = "%(asctime)s | %(levelname)s  \t[%(name)s%(tag)s]  \t%(message)s"
_DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

class TaggedFormatter(logging.Formatter):
	"""
	Formatter that tolerates records without a 'tag' attribute.

	Records created through a plain `logging.getLogger()` (pymongo's own logs,
	for instance) never pass through the adapter returned by `logger()`, so the
	tag is filled with an empty string before formatting.
	"""
	def __init__(
		self,
		fmt=_DEFAULT_FORMAT,
		datefmt=_DEFAULT_DATE_FORMAT,
		**kwargs
	):
		super().__init__(fmt, datefmt, **kwargs)

	def format(self, record: logging.LogRecord) -> str:
		if not hasattr(record, 'tag'):
			record.tag = ""
		return super().format(record)

def setup_logging(
	level: int = logging.INFO,
	stream=sys.stdout
) -> None:
	"""
	Attaches a stream handler using `TaggedFormatter` to the root logger.

	Call once from whatever process embeds the store. Later calls do nothing
	if the root logger already has handlers.

	Args:
		level: The minimum logging level to output.
		stream: Where log lines are written.
	"""
	root_logger = logging.getLogger()
	if root_logger.handlers:
		return

	handler = logging.StreamHandler(stream=stream)
	handler.setFormatter(TaggedFormatter())
	root_logger.addHandler(handler)
	root_logger.setLevel(level)
	root_logger.info("Logger set up")

def logger(
	tag: str | None = None,
	*,
	name: str | None = None
) -> logging.LoggerAdapter:
	"""
	Returns a logger adapter that adds `tag` to every record it emits.

	When `name` is omitted the calling module's name is used, so

	```
		# chat_store/data/repositories/message.py
		logger(tag="MESSAGES").info("Created message 6530...")
	```

	prints `[chat_store.data.repositories.message:MESSAGES]  Created message 6530...`.

	Args:
		tag: Short label shown after the logger name.
		name: The logger name. Defaults to the caller's module name.
	"""
	logger_name = name
	if logger_name is None:
		frame = inspect.stack()[1]
		module = inspect.getmodule(frame[0])
		logger_name = module.__name__ if module else "unknown_module"

	return logging.LoggerAdapter(
		logging.getLogger(logger_name),
		{"tag": f":{tag}" if tag is not None else ""}
	)
