"""
PetDemo: Input Presence and Integer Checks
==========================================

What:  The only input validation the handlers perform: "is every required
       value present" and "is this integer field really an integer".
How:   Presence uses truthiness, so None, "" and 0 all count as missing.
       Integers arrive as JSON numbers or as form strings and are coerced.
"""

from typing import Any

from petdemo.exceptions import ValidationError

# Bounds of the INTEGER columns (beds_owned, age)
INT_MIN = -(2 ** 31)
INT_MAX = 2 ** 31 - 1


def all_present(*values: Any) -> bool:
    """True when every value is truthy."""
    return all(values)


def coerce_int(value: Any, field: str) -> int:
    """
    Convert a JSON number or a form string into an int.

    Raises:
        ValidationError: value is a bool, a fractional number, a string
            that does not parse as a base-10 integer, or a number outside
            the column range.
    """
    number = _to_int(value, field)
    if not INT_MIN <= number <= INT_MAX:
        raise ValidationError(f"{field} is out of range", field=field)
    return number


def _to_int(value: Any, field: str) -> int:
    if isinstance(value, bool):
        raise ValidationError(f"{field} must be a whole number", field=field)
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            pass
    raise ValidationError(f"{field} must be a whole number", field=field)
