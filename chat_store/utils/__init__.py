# utils/__init__.py
"""
Chat Message Store - Utility Package

This package provides structured logging utilities.
"""

from .logger import logger, setup_logging

__all__ = [
	'logger',
	'setup_logging',
]
