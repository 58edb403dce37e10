"""Luhn (mod-10) check digit for ID numbers.

Thin adapter over python-stdnum's luhn module so the rest of the package can
work with integers rather than digit strings.
"""

from stdnum import luhn


def compute_check_digit(number: int) -> int:
    """Compute the Luhn check digit for a non-negative integer.

    Leading zeros do not change a Luhn digit, so the integer form of a
    partial ID number (which loses leading zeros for years 2000-2009)
    yields the same digit as its zero-padded string.

    Args:
        number: Non-negative integer to protect

    Returns:
        Check digit in the range 0-9

    Raises:
        ValueError: If number is negative

    Example:
        >>> compute_check_digit(810709500508)
        3
    """
    if number < 0:
        raise ValueError(f"Luhn check digit requires a non-negative number, got {number}")
    return int(luhn.calc_check_digit(str(number)))
