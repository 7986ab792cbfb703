"""
Input guards for the validator setters.

The setters never raise on malformed input; they consult these predicates
and leave their state untouched when a check fails.
"""

from collections.abc import Mapping
from typing import Any

# Raw values a field may hold: web parameters arrive as strings, callers
# building fields by hand may pass numbers.
SCALAR_TYPES = (str, int, float)


def is_field_name(name: Any) -> bool:
    """
    Check that a field name is a non-empty string.

    Examples:
        >>> is_field_name("email")
        True
        >>> is_field_name("")
        False
        >>> is_field_name(3)
        False
    """
    return isinstance(name, str) and name != ""


def is_scalar_value(value: Any) -> bool:
    """
    Check that a raw field value is a flat scalar (or None for "no value").

    Examples:
        >>> is_scalar_value("Joe Bloggs")
        True
        >>> is_scalar_value(13)
        True
        >>> is_scalar_value(["nested"])
        False
    """
    return value is None or isinstance(value, SCALAR_TYPES)


def is_field_mapping(fields: Any) -> bool:
    """Check that every entry of a field mapping has a valid name and scalar value."""
    if not isinstance(fields, Mapping):
        return False

    return all(is_field_name(name) and is_scalar_value(value) for name, value in fields.items())
