"""Custom log formatters for the SA ID number library.

This module provides specialized formatters for logging, including ID number redaction.
"""

import logging
import re
from typing import List, Optional, Tuple


class IDNumberRedactingFormatter(logging.Formatter):
    """Custom formatter that redacts ID numbers from log messages.

    A South African ID number reveals a person's date of birth, gender and
    citizenship, so full 13-digit numbers and ISO birth dates are masked
    when redaction is enabled.

    Attributes:
        redact_ids: Whether to enable ID number redaction
        patterns: List of (regex_pattern, replacement_text) tuples for redaction

    Example:
        >>> formatter = IDNumberRedactingFormatter(
        ...     fmt='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        ...     redact_ids=True
        ... )
        >>> handler = logging.StreamHandler()
        >>> handler.setFormatter(formatter)
    """

    def __init__(
        self,
        fmt: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt: Optional[str] = None,
        redact_ids: bool = False,
    ) -> None:
        """Initialize the IDNumberRedactingFormatter.

        Args:
            fmt: Log message format string
            datefmt: Date format string (optional)
            redact_ids: Whether to enable ID number redaction
        """
        super().__init__(fmt=fmt, datefmt=datefmt)
        self.redact_ids = redact_ids

        self.patterns: List[Tuple[re.Pattern[str], str]] = [
            # Full ID number: 8107095005083
            (re.compile(r"(?<!\d)\d{13}(?!\d)"), "[ID-REDACTED]"),
            # Decoded birth date: date=1981-07-09
            (re.compile(r"date=\d{4}-\d{2}-\d{2}"), "date=[DOB-REDACTED]"),
        ]

    def format(self, record: logging.LogRecord) -> str:
        """Format the log record with optional ID number redaction.

        Args:
            record: Log record to format

        Returns:
            Formatted log message with ID numbers redacted if enabled
        """
        original = super().format(record)

        if self.redact_ids:
            for pattern, replacement in self.patterns:
                original = pattern.sub(replacement, original)

        return original
