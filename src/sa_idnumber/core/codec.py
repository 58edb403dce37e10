"""Fixed-width codec for the 13-digit South African ID number string.

Wire layout::

    YYMMDD GGGG C 8 L
    |      |    | | +-- Luhn checksum digit
    |      |    | +---- legacy digit, always written as 8, ignored on read
    |      |    +------ citizenship (0 citizen, 1 permanent resident)
    |      +----------- gender code, zero padded
    +------------------ birth date

Parsing only decodes the fields into a Draft. The checksum digit it reads is
validated later by the builder's finalization step.
"""

from datetime import date

from sa_idnumber.logging_audit import get_logger
from sa_idnumber.models.identifier import Draft, IDNumber
from sa_idnumber.utils.exceptions import (
    CenturyPivotError,
    DateError,
    LengthError,
    NumericFieldError,
)


logger = get_logger(__name__)

ID_LENGTH = 13
LEGACY_DIGIT = 8

# (start, end) offsets of each field
DATE_SLICE = (0, 6)
GENDER_SLICE = (6, 10)
CITIZENSHIP_SLICE = (10, 11)
LEGACY_SLICE = (11, 12)
CHECKSUM_SLICE = (12, 13)

# Two-digit years at or above the pivot belong to the 1900s, below it to
# the 2000s. 69 matches Python's own %y directive.
DEFAULT_CENTURY_PIVOT = 69


def check_century_pivot(pivot: int) -> int:
    """Return the pivot unchanged, or raise CenturyPivotError if outside 0-99."""
    if not 0 <= pivot <= 99:
        raise CenturyPivotError(pivot)
    return pivot


def century_window(pivot: int = DEFAULT_CENTURY_PIVOT) -> tuple[int, int]:
    """Return the inclusive range of four-digit years a pivot can represent.

    Years outside the window share their two wire digits with a year inside
    it, so they cannot be read back unchanged.

    Example:
        >>> century_window(69)
        (1969, 2068)
    """
    check_century_pivot(pivot)
    return 1900 + pivot, 1999 + pivot


def expand_two_digit_year(yy: int, pivot: int = DEFAULT_CENTURY_PIVOT) -> int:
    """Expand a two-digit year to four digits using a century pivot.

    Args:
        yy: Year within the century (0-99)
        pivot: First two-digit year that maps to the 1900s

    Returns:
        Four-digit year

    Raises:
        ValueError: If yy is outside 0-99
        CenturyPivotError: If pivot is outside 0-99

    Example:
        >>> expand_two_digit_year(81)
        1981
        >>> expand_two_digit_year(5)
        2005
    """
    if not 0 <= yy <= 99:
        raise ValueError(f"Two-digit year must be 0-99, got {yy}")
    check_century_pivot(pivot)
    return (1900 if yy >= pivot else 2000) + yy


def _is_digits(text: str) -> bool:
    return text.isascii() and text.isdigit()


def _read_field(id_string: str, bounds: tuple[int, int], name: str) -> int:
    start, end = bounds
    text = id_string[start:end]
    if not _is_digits(text):
        raise NumericFieldError(name, text, end - start)
    return int(text)


def _read_date(id_string: str, pivot: int) -> date:
    start, end = DATE_SLICE
    text = id_string[start:end]
    if not _is_digits(text):
        raise DateError(text, "expected YYMMDD digits")

    year = expand_two_digit_year(int(text[0:2]), pivot)
    month = int(text[2:4])
    day = int(text[4:6])
    try:
        return date(year, month, day)
    except ValueError as e:
        raise DateError(text, str(e)) from e


def parse_id_string(id_string: str, pivot: int = DEFAULT_CENTURY_PIVOT) -> Draft:
    """Decode a 13-digit ID number string into a draft.

    The returned draft carries the checksum digit read from the string, so
    finalizing it validates rather than computes the checksum.

    Args:
        id_string: ID number string
        pivot: Century pivot for the two-digit birth year

    Returns:
        Draft populated from every field of the string

    Raises:
        CenturyPivotError: If pivot is outside 0-99
        LengthError: If the string is not exactly 13 characters
        DateError: If the date field is not a real YYMMDD date
        NumericFieldError: If the gender, citizenship, legacy or checksum
            field is not numeric

    Example:
        >>> draft = parse_id_string("8107095005083")
        >>> draft.gender_code
        5005
    """
    check_century_pivot(pivot)
    if len(id_string) != ID_LENGTH:
        raise LengthError(len(id_string), ID_LENGTH)

    birth_date = _read_date(id_string, pivot)
    gender_code = _read_field(id_string, GENDER_SLICE, "gender")
    citizenship_digit = _read_field(id_string, CITIZENSHIP_SLICE, "citizenship")
    _read_field(id_string, LEGACY_SLICE, "legacy")
    checksum_digit = _read_field(id_string, CHECKSUM_SLICE, "checksum")

    logger.debug(
        f"Decoded ID string: date={birth_date.isoformat()} gender={gender_code:04d} "
        f"citizenship={citizenship_digit} checksum={checksum_digit}"
    )
    return Draft(
        birth_date=birth_date,
        gender_code=gender_code,
        citizenship_digit=citizenship_digit,
        checksum_digit=checksum_digit,
    )


def partial_string(birth_date: date, gender_code: int, citizenship_digit: int) -> str:
    """Render the first 12 digits (everything but the checksum).

    Args:
        birth_date: Date of birth
        gender_code: Gender code in 0-9999
        citizenship_digit: Citizenship wire digit

    Returns:
        "YYMMDD" + 4-digit gender + citizenship digit + legacy digit
    """
    return (
        f"{birth_date.year % 100:02d}{birth_date.month:02d}{birth_date.day:02d}"
        f"{gender_code:04d}{citizenship_digit}{LEGACY_DIGIT}"
    )


def partial_number(birth_date: date, gender_code: int, citizenship_digit: int) -> int:
    """Return the 12-digit partial ID number as an integer for the checksum."""
    return int(partial_string(birth_date, gender_code, citizenship_digit))


def format_id_number(id_number: IDNumber) -> str:
    """Render an ID number in its canonical 13-digit form.

    Args:
        id_number: Finalized ID number

    Returns:
        13-character digit string

    Example:
        >>> format_id_number(new_id(9, 7, 1981, 5005, Citizenship.CITIZEN))
        '8107095005083'
    """
    partial = partial_string(
        id_number.birth_date, id_number.gender_code, id_number.citizenship_digit
    )
    return f"{partial}{id_number.checksum_digit}"
