"""Validators and regex checks.

Every validator returns a boolean and never raises on malformed input.
"""

import json
import math
import re
from typing import Any

from dxutils.constants import EMAIL_PATTERN

_EMAIL_REGEX = re.compile(EMAIL_PATTERN)

_DECIMAL_LITERAL = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_PREFIXED_INTEGER_LITERAL = re.compile(r"0(?:[xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)")


def _reject_constant(name: str) -> None:
    raise ValueError(f"Non-standard JSON constant: {name}")


def validate_email_address(email_address: Any) -> bool:
    """Validate an email address against a comprehensive regex.

    The pattern is searched for anywhere in the input and is case-sensitive,
    so it approximates RFC 5322 rather than implementing it.

    Args:
        email_address: The email address to validate.

    Returns:
        True if the address matches, False otherwise.
    """
    if not isinstance(email_address, str):
        return False
    return _EMAIL_REGEX.search(email_address) is not None


def is_json_string(value: Any = "") -> bool:
    """Determine whether a string is valid JSON.

    NaN, Infinity and -Infinity are rejected.
    """
    if not isinstance(value, (str, bytes, bytearray)):
        return False
    try:
        json.loads(value, parse_constant=_reject_constant)
    except ValueError:
        return False
    return True


def is_numeric(value: Any) -> bool:
    """Check whether a value is a finite number or a numeric string.

    Accepted strings hold a decimal literal ("12", "-1.5e3", " 4 ") or a
    prefixed integer literal ("0x1f", "0o17", "0b101").
    """
    if isinstance(value, bool):
        return False

    if isinstance(value, (int, float)):
        return math.isfinite(value)

    if not isinstance(value, str):
        return False

    text = value.strip()
    if _PREFIXED_INTEGER_LITERAL.fullmatch(text):
        return True
    if _DECIMAL_LITERAL.fullmatch(text):
        return math.isfinite(float(text))
    return False


def is_valid_object(value: Any = None, check_not_empty: bool = False) -> bool:
    """Check whether a value is a plain dict.

    Args:
        value: Input value to validate.
        check_not_empty: Additionally require at least one entry.

    Returns:
        True if conditions are met, False otherwise.
    """
    if not isinstance(value, dict):
        return False
    if check_not_empty:
        return len(value) > 0
    return True


def is_empty_object(value: Any = None) -> bool:
    """Check whether a value is a dict with no entries."""
    return is_valid_object(value) and len(value) == 0


def _contains(values: Any, item: Any) -> bool:
    # True == 1 in Python; keep booleans apart from numbers
    return any(
        isinstance(other, bool) == isinstance(item, bool) and other == item
        for other in values
    )


def are_primitive_arrays_equal(a: Any, b: Any) -> bool:
    """Check whether two sequences hold the same values, irrespective of order.

    Only meaningful for primitive values: each element of one sequence must
    be contained in the other, and both must have the same length. Booleans
    never match numbers, while 1 and 1.0 are the same value.
    """
    return (
        isinstance(a, (list, tuple))
        and isinstance(b, (list, tuple))
        and len(a) == len(b)
        and all(_contains(b, item) for item in a)
        and all(_contains(a, item) for item in b)
    )
