"""Unit tests for the tagged logger."""

import io
import logging
import unittest

from chat_store.utils.logger import TaggedFormatter, logger, setup_logging


class TestTaggedLogger(unittest.TestCase):

	def setUp(self):
		self.stream = io.StringIO()
		self.handler = logging.StreamHandler(self.stream)
		self.handler.setFormatter(TaggedFormatter())
		self.base = logging.getLogger("chat_store.tests.logger")
		self.base.addHandler(self.handler)
		self.base.setLevel(logging.INFO)
		self.base.propagate = False

	def tearDown(self):
		self.base.removeHandler(self.handler)

	def test_tag_is_included(self):
		logger(tag="MESSAGES", name="chat_store.tests.logger").info("Created message")
		self.assertIn("[chat_store.tests.logger:MESSAGES]", self.stream.getvalue())

	def test_untagged_records_format(self):
		self.base.info("plain record")
		self.assertIn("[chat_store.tests.logger]", self.stream.getvalue())

	def test_defaults_to_caller_module(self):
		self.assertEqual(logger().logger.name, __name__)

	def test_setup_logging_installs_one_handler(self):
		root = logging.getLogger()
		saved_handlers, saved_level = root.handlers[:], root.level
		root.handlers.clear()
		try:
			stream = io.StringIO()
			setup_logging(logging.DEBUG, stream=stream)
			setup_logging(logging.DEBUG, stream=stream)
			self.assertEqual(len(root.handlers), 1)
			self.assertIsInstance(root.handlers[0].formatter, TaggedFormatter)
			self.assertIn("Logger set up", stream.getvalue())
		finally:
			root.handlers[:] = saved_handlers
			root.setLevel(saved_level)

if __name__ == "__main__":
	unittest.main(verbosity=2)
