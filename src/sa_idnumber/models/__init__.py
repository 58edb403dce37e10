"""Models module.

This module provides data models and enumerations for the application.
"""

from sa_idnumber.models.identifier import (
    MAX_FEMALE,
    MAX_MALE,
    MIN_FEMALE,
    MIN_MALE,
    Citizenship,
    Draft,
    IDNumber,
    gender_word,
)

__all__ = [
    "Citizenship",
    "Draft",
    "IDNumber",
    "gender_word",
    "MIN_FEMALE",
    "MAX_FEMALE",
    "MIN_MALE",
    "MAX_MALE",
]
