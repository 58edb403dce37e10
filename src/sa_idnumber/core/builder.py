"""Composable construction of ID numbers.

An ID number is built by applying configuration options to a Draft in the
order given, then finalizing the draft. Later options overwrite fields set by
earlier ones. The first option that fails aborts the build, and finalization
is the only place where the checksum is computed or validated.
"""

import random
from datetime import date
from typing import Callable, Optional

from sa_idnumber.core.checksum import compute_check_digit
from sa_idnumber.core.codec import (
    DEFAULT_CENTURY_PIVOT,
    century_window,
    check_century_pivot,
    parse_id_string,
    partial_number,
)
from sa_idnumber.logging_audit import get_logger
from sa_idnumber.models.identifier import (
    MAX_FEMALE,
    MAX_MALE,
    MIN_FEMALE,
    MIN_MALE,
    Citizenship,
    Draft,
    IDNumber,
)
from sa_idnumber.utils.exceptions import (
    ChecksumMismatchError,
    DateError,
    GenderRangeError,
    IDNumberError,
)


logger = get_logger(__name__)

ConfigOption = Callable[[Draft], None]

# OS-backed source: no shared seedable state between callers
system_random = random.SystemRandom()


def random_male_code(rng: Optional[random.Random] = None) -> int:
    """Pick a gender code uniformly from the male range 5000-9999."""
    return (rng or system_random).randint(MIN_MALE, MAX_MALE)


def random_female_code(rng: Optional[random.Random] = None) -> int:
    """Pick a gender code uniformly from the female range 0-4999."""
    return (rng or system_random).randint(MIN_FEMALE, MAX_FEMALE)


def set_date(day: int, month: int, year: int) -> ConfigOption:
    """Set the date of birth.

    Args:
        day: Day of month
        month: Month (1-12)
        year: Four-digit year

    Raises:
        DateError: When the option is applied and the parts are not a real date
    """

    def option(draft: Draft) -> None:
        try:
            draft.birth_date = date(year, month, day)
        except ValueError as e:
            raise DateError(f"{year:04d}-{month:02d}-{day:02d}", str(e)) from e

    return option


def set_gender(gender_code: int) -> ConfigOption:
    """Set a raw gender code. The range is checked at finalization."""

    def option(draft: Draft) -> None:
        draft.gender_code = gender_code

    return option


def set_random_male(rng: Optional[random.Random] = None) -> ConfigOption:
    """Set a gender code drawn from the male range.

    The code is drawn once, when the option is created.
    """
    return set_gender(random_male_code(rng))


def set_random_female(rng: Optional[random.Random] = None) -> ConfigOption:
    """Set a gender code drawn from the female range.

    The code is drawn once, when the option is created.
    """
    return set_gender(random_female_code(rng))


def set_citizenship(citizenship: Citizenship) -> ConfigOption:
    def option(draft: Draft) -> None:
        draft.citizenship_digit = citizenship.value

    return option


def set_citizen() -> ConfigOption:
    """Mark the ID number as belonging to a South African citizen."""
    return set_citizenship(Citizenship.CITIZEN)


def set_resident() -> ConfigOption:
    """Mark the ID number as belonging to a permanent resident."""
    return set_citizenship(Citizenship.PERMANENT_RESIDENT)


def set_from_string(id_string: str, pivot: int = DEFAULT_CENTURY_PIVOT) -> ConfigOption:
    """Populate every field, including the checksum digit, from a string.

    Args:
        id_string: 13-digit ID number string
        pivot: Century pivot for the two-digit birth year

    Raises:
        ParseError: When the option is applied and the string cannot be decoded
    """

    def option(draft: Draft) -> None:
        parsed = parse_id_string(id_string, pivot)
        draft.birth_date = parsed.birth_date
        draft.gender_code = parsed.gender_code
        draft.citizenship_digit = parsed.citizenship_digit
        draft.checksum_digit = parsed.checksum_digit

    return option


def finalize(draft: Draft, pivot: int = DEFAULT_CENTURY_PIVOT) -> IDNumber:
    """Check a draft and compute or validate its checksum digit.

    Args:
        draft: Populated draft
        pivot: Century pivot the finished ID number must be readable under

    Returns:
        Immutable IDNumber

    Raises:
        CenturyPivotError: If pivot is outside 0-99
        DateError: If no birth date was set, or its year falls outside the
            century window of the pivot
        GenderRangeError: If the gender code is outside 0-9999
        ChecksumMismatchError: If a supplied checksum digit is wrong
    """
    first_year, last_year = century_window(pivot)
    if draft.birth_date is None:
        raise DateError("", "birth date was not set")
    if not first_year <= draft.birth_date.year <= last_year:
        raise DateError(
            draft.birth_date.isoformat(),
            f"year must be {first_year}-{last_year} for century pivot {pivot}",
        )
    if not MIN_FEMALE <= draft.gender_code <= MAX_MALE:
        raise GenderRangeError(draft.gender_code)

    expected = compute_check_digit(
        partial_number(draft.birth_date, draft.gender_code, draft.citizenship_digit)
    )
    if draft.checksum_digit is None:
        checksum_digit = expected
    elif draft.checksum_digit != expected:
        logger.warning(
            f"Checksum mismatch: got {draft.checksum_digit}, expected {expected}"
        )
        raise ChecksumMismatchError(expected, draft.checksum_digit)
    else:
        checksum_digit = draft.checksum_digit

    return IDNumber(
        birth_date=draft.birth_date,
        gender_code=draft.gender_code,
        citizenship_digit=draft.citizenship_digit,
        checksum_digit=checksum_digit,
    )


def new_id_number(*options: ConfigOption, pivot: int = DEFAULT_CENTURY_PIVOT) -> IDNumber:
    """Build an ID number from configuration options.

    Options are applied in order to a fresh draft, then the draft is
    finalized. A failing option stops the build immediately.

    Args:
        *options: Configuration options such as set_date(), set_random_male()
        pivot: Century pivot; the birth year must be representable under it

    Returns:
        Finalized IDNumber

    Raises:
        IDNumberError: The first error raised by an option or by finalization

    Example:
        >>> id_number = new_id_number(
        ...     set_date(9, 7, 1981), set_gender(5005), set_citizen()
        ... )
        >>> str(id_number)
        '8107095005083'
    """
    draft = Draft()
    for option in options:
        option(draft)
    id_number = finalize(draft, pivot)
    logger.debug(f"Built ID number {id_number}")
    return id_number


def new_id(
    day: int,
    month: int,
    year: int,
    gender_code: int,
    citizenship: Citizenship,
    pivot: int = DEFAULT_CENTURY_PIVOT,
) -> IDNumber:
    """Build an ID number from explicit fields."""
    return new_id_number(
        set_date(day, month, year),
        set_gender(gender_code),
        set_citizenship(citizenship),
        pivot=pivot,
    )


def from_string(id_string: str, pivot: int = DEFAULT_CENTURY_PIVOT) -> IDNumber:
    """Parse and validate a 13-digit ID number string."""
    return new_id_number(set_from_string(id_string, pivot), pivot=pivot)


def is_valid(id_string: str, pivot: int = DEFAULT_CENTURY_PIVOT) -> bool:
    """Return True if the string parses and its checksum digit is correct.

    Raises:
        CenturyPivotError: If pivot is outside 0-99
    """
    check_century_pivot(pivot)
    try:
        from_string(id_string, pivot)
    except IDNumberError as e:
        logger.debug(f"ID string rejected: {e}")
        return False
    return True
