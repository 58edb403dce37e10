"""South African ID number data model.

This module defines the IDNumber dataclass and the Citizenship enumeration
that give meaning to the 13-digit identifier string.
"""

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Optional

# Gender code ranges (inclusive)
MIN_FEMALE = 0
MAX_FEMALE = 4999
MIN_MALE = 5000
MAX_MALE = 9999


class Citizenship(Enum):
    """Citizen status, stored as its single wire digit."""

    CITIZEN = 0
    PERMANENT_RESIDENT = 1

    def __str__(self) -> str:
        return CITIZENSHIP_WORDS[self]


CITIZENSHIP_WORDS = {
    Citizenship.CITIZEN: "citizen",
    Citizenship.PERMANENT_RESIDENT: "permanent resident",
}
UNDEFINED_CITIZENSHIP = "undefined citizenship"


def gender_word(code: int) -> str:
    """Classify a gender code as "female", "male" or "undefined".

    Args:
        code: Gender code, normally 0-9999

    Returns:
        "female" for 0-4999, "male" for 5000-9999, "undefined" otherwise
    """
    if MIN_FEMALE <= code <= MAX_FEMALE:
        return "female"
    if MIN_MALE <= code <= MAX_MALE:
        return "male"
    return "undefined"


@dataclass(frozen=True)
class IDNumber:
    """A finalized South African ID number.

    Instances are produced by the builder's finalization step and are
    immutable afterwards.

    Attributes:
        birth_date: Date of birth (four-digit year)
        gender_code: Gender code in 0-9999 (0-4999 female, 5000-9999 male)
        citizenship_digit: Wire digit for citizenship (0 citizen, 1 permanent
            resident; any other digit read from a string is undefined)
        checksum_digit: Luhn check digit over the first 12 digits
    """

    birth_date: date
    gender_code: int
    citizenship_digit: int
    checksum_digit: int

    @property
    def citizenship(self) -> Optional[Citizenship]:
        """Citizen status, or None when the digit has no defined meaning."""
        try:
            return Citizenship(self.citizenship_digit)
        except ValueError:
            return None

    @property
    def citizenship_word(self) -> str:
        citizenship = self.citizenship
        if citizenship is None:
            return UNDEFINED_CITIZENSHIP
        return str(citizenship)

    @property
    def gender(self) -> str:
        """Gender classification word for the gender code."""
        return gender_word(self.gender_code)

    def explain(self) -> str:
        """Describe what the ID number means.

        Returns:
            Explanation such as
            "Birthdate: 9 July '81 male citizen luhn checksum = 3"
        """
        long_date = f"{self.birth_date.day} {self.birth_date:%B} '{self.birth_date:%y}"
        return (
            f"Birthdate: {long_date} {self.gender} {self.citizenship_word} "
            f"luhn checksum = {self.checksum_digit}"
        )

    def __str__(self) -> str:
        # Imported here to avoid a circular import with the codec
        from sa_idnumber.core.codec import format_id_number

        return format_id_number(self)


@dataclass
class Draft:
    """Mutable ID number under construction by the builder.

    A checksum_digit of None means "compute it during finalization"; any
    digit (including 0) means "validate it during finalization".
    """

    birth_date: Optional[date] = None
    gender_code: int = 0
    citizenship_digit: int = Citizenship.CITIZEN.value
    checksum_digit: Optional[int] = None
