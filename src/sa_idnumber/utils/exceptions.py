"""Custom exception classes for the SA ID number library.

All exceptions inherit from IDNumberError to allow catching all custom exceptions.
"""

from typing import Optional


class IDNumberError(Exception):
    """Base exception for all SA ID number custom exceptions."""

    pass


class ParseError(IDNumberError):
    """Base exception for failures while reading an ID number string.

    Examples:
        - Wrong string length
        - Non-existent birth date
        - Non-numeric fixed-width field
    """

    pass


class LengthError(ParseError):
    """Raised when an ID number string is not exactly 13 characters long."""

    def __init__(self, length: int, expected: int = 13) -> None:
        self.length = length
        self.expected = expected
        super().__init__(
            f"Incorrect ID string length: got {length} characters, expected {expected}"
        )


class DateError(ParseError):
    """Raised when a birth date is malformed or does not exist.

    Examples:
        - "811332" (month 13)
        - set_date(30, 2, 1981) (30 February)
    """

    def __init__(self, value: str, reason: Optional[str] = None) -> None:
        self.value = value
        self.reason = reason
        message = f"Invalid birth date: {value!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class NumericFieldError(ParseError):
    """Raised when a fixed-width field is not a non-negative integer of its width."""

    def __init__(self, field: str, value: str, width: int) -> None:
        self.field = field
        self.value = value
        self.width = width
        super().__init__(
            f"Invalid {field} field: {value!r} is not a {width}-digit number"
        )


class ChecksumMismatchError(IDNumberError):
    """Raised when a supplied checksum digit disagrees with the computed one."""

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Invalid luhn number: checksum digit is {actual}, expected {expected}"
        )


class GenderRangeError(IDNumberError):
    """Raised when a gender code falls outside 0000-9999."""

    def __init__(self, code: int) -> None:
        self.code = code
        super().__init__(
            f"Incorrect gender range: {code} is outside 0-9999"
        )


class CenturyPivotError(IDNumberError):
    """Raised when a century pivot is outside 0-99."""

    def __init__(self, pivot: int) -> None:
        self.pivot = pivot
        super().__init__(f"Century pivot must be 0-99, got {pivot}")


class ConfigurationError(IDNumberError):
    """Raised when configuration loading or validation fails.

    Examples:
        - Invalid configuration file format
        - Configuration value out of range
    """

    pass
