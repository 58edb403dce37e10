"""Logging Audit module.

This module provides logging configuration and ID number redaction.
"""

from .formatters import IDNumberRedactingFormatter
from .logger import configure_logging, get_logger

__all__ = [
    "configure_logging",
    "get_logger",
    "IDNumberRedactingFormatter",
]
