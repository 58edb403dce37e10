"""Core module.

This module provides the ID number codec, builder, checksum and generator.
"""

from sa_idnumber.core.builder import (
    ConfigOption,
    finalize,
    from_string,
    is_valid,
    new_id,
    new_id_number,
    set_citizen,
    set_citizenship,
    set_date,
    set_from_string,
    set_gender,
    set_random_female,
    set_random_male,
    set_resident,
)
from sa_idnumber.core.checksum import compute_check_digit
from sa_idnumber.core.codec import (
    DEFAULT_CENTURY_PIVOT,
    century_window,
    check_century_pivot,
    expand_two_digit_year,
    format_id_number,
    parse_id_string,
)
from sa_idnumber.core.generator import (
    iter_random_id_numbers,
    random_birth_date,
    random_id_number,
)

__all__ = [
    # Builder
    "ConfigOption",
    "new_id_number",
    "new_id",
    "from_string",
    "is_valid",
    "finalize",
    # Configuration options
    "set_date",
    "set_gender",
    "set_random_male",
    "set_random_female",
    "set_citizenship",
    "set_citizen",
    "set_resident",
    "set_from_string",
    # Codec
    "DEFAULT_CENTURY_PIVOT",
    "century_window",
    "check_century_pivot",
    "expand_two_digit_year",
    "format_id_number",
    "parse_id_string",
    # Checksum
    "compute_check_digit",
    # Random generation
    "random_id_number",
    "random_birth_date",
    "iter_random_id_numbers",
]
