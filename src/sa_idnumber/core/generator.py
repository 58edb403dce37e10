"""Random ID number generation for test data.

This module generates random but internally consistent ID numbers for
testing and seeding. Pass a seeded random.Random for reproducible output.
"""

import random
from datetime import date, timedelta
from typing import Iterator, Optional

from sa_idnumber.core.builder import (
    new_id_number,
    set_citizen,
    set_date,
    set_random_female,
    set_random_male,
    set_resident,
    system_random,
)
from sa_idnumber.core.codec import DEFAULT_CENTURY_PIVOT
from sa_idnumber.logging_audit import get_logger
from sa_idnumber.models.identifier import IDNumber


logger = get_logger(__name__)

# Inclusive span of generated birth dates, inside century_window(69).
DEFAULT_START_DATE = date(1969, 12, 31)
DEFAULT_END_DATE = date(2068, 12, 31)


def random_birth_date(
    rng: Optional[random.Random] = None,
    start_date: date = DEFAULT_START_DATE,
    end_date: date = DEFAULT_END_DATE,
) -> date:
    """Pick a birth date uniformly from an inclusive date span.

    Args:
        rng: Random source (defaults to the OS-backed source)
        start_date: First possible date
        end_date: Last possible date

    Returns:
        Date between start_date and end_date inclusive

    Raises:
        ValueError: If end_date is before start_date
    """
    if end_date < start_date:
        raise ValueError(
            f"end_date {end_date.isoformat()} is before start_date {start_date.isoformat()}"
        )
    rng = rng or system_random
    span_days = (end_date - start_date).days
    return start_date + timedelta(days=rng.randint(0, span_days))


def random_id_number(
    rng: Optional[random.Random] = None,
    start_date: date = DEFAULT_START_DATE,
    end_date: date = DEFAULT_END_DATE,
    pivot: int = DEFAULT_CENTURY_PIVOT,
) -> IDNumber:
    """Generate one random, valid ID number.

    Gender range and citizenship are each chosen with equal probability.

    Args:
        rng: Random source. When provided, the same seed yields the same
             sequence of ID numbers across runs.
        start_date: First possible birth date
        end_date: Last possible birth date
        pivot: Century pivot the generated ID numbers are read back with

    Returns:
        Finalized IDNumber

    Raises:
        DateError: If the drawn birth year falls outside the century window
            of the pivot

    Example:
        >>> id_number = random_id_number(random.Random(42))
        >>> len(str(id_number))
        13
    """
    rng = rng or system_random
    birth_date = random_birth_date(rng, start_date, end_date)
    gender_option = set_random_male(rng) if rng.random() < 0.5 else set_random_female(rng)
    citizen_option = set_citizen() if rng.random() < 0.5 else set_resident()

    id_number = new_id_number(
        set_date(birth_date.day, birth_date.month, birth_date.year),
        gender_option,
        citizen_option,
        pivot=pivot,
    )
    logger.debug(f"Generated random ID number {id_number}")
    return id_number


def iter_random_id_numbers(
    rng: Optional[random.Random] = None,
    start_date: date = DEFAULT_START_DATE,
    end_date: date = DEFAULT_END_DATE,
    pivot: int = DEFAULT_CENTURY_PIVOT,
) -> Iterator[IDNumber]:
    """Yield random ID numbers without end.

    Example:
        >>> from itertools import islice
        >>> ids = list(islice(iter_random_id_numbers(random.Random(1)), 5))
    """
    while True:
        yield random_id_number(rng, start_date, end_date, pivot)
