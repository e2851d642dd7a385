# clparam Command Line Parameters — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Contains value coercion utilities for clparam parameter dispatch and defaults.

This module converts the value text of an input token into the Python value
of a parameter's declared `ValueKind`, and checks that a registered default
value already has the declared kind.

Functions:
- coerce_bool: Convert a string to a boolean.
- coerce_int: Convert a string to a (possibly range-checked) integer.
- coerce_float: Convert a string to a float.
- coerce_value: Convert a string to any supported value kind.
- normalize_default: Check a default value against a value kind.
"""
import math
import re
from typing import Any

from clparam.parser.value_kind import ValueKind

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


def coerce_bool(value: str) -> bool:
    """
    Convert a string to a boolean.

    Accepts truthy and falsy representations such as 'true', 'yes', '0', 'off'.

    Args:
        value (str): The input string.

    Returns:
        bool: Parsed boolean result.

    Raises:
        ValueError: If the string is not a recognized boolean.
    """
    if isinstance(value, bool):
        return value
    normalized = value.strip().lower()
    if normalized in {"true", "t", "1", "yes", "y", "on"}:
        return True
    elif normalized in {"false", "f", "0", "no", "n", "off"}:
        return False
    raise ValueError(f"'{value}' is not a boolean")


def check_integer_range(value: int, kind: ValueKind) -> int:
    """Raise ValueError if `value` does not fit the integer width of `kind`."""
    bounds = kind.bounds
    if bounds is not None:
        minimum, maximum = bounds
        if not minimum <= value <= maximum:
            raise ValueError(
                f"{value} is out of range for {kind} ({minimum}..{maximum})"
            )
    return value


def coerce_int(value: str, kind: ValueKind = ValueKind.INT) -> int:
    """
    Convert a decimal string to an integer of the given kind.

    Only an optional sign followed by decimal digits is accepted.

    Raises:
        ValueError: If the text is not a decimal integer or is out of range.
    """
    if not _INTEGER_PATTERN.fullmatch(value):
        raise ValueError(f"'{value}' is not an integer")
    return check_integer_range(int(value), kind)


def coerce_float(value: str) -> float:
    """Convert a string to a finite or infinite float; NaN is rejected."""
    try:
        result = float(value)
    except ValueError:
        raise ValueError(f"'{value}' is not a number") from None
    if "_" in value or math.isnan(result):
        raise ValueError(f"'{value}' is not a number")
    return result


def coerce_value(value: str, kind: ValueKind) -> Any:
    """
    Attempt to convert a string to the Python value of the given kind.

    Args:
        value (str): The input string to convert.
        kind (ValueKind): The declared kind of the parameter.

    Returns:
        Any: The coerced value.

    Raises:
        ValueError: If conversion fails or the value is out of range.
    """
    if kind is ValueKind.STR:
        return value
    if kind is ValueKind.BOOL:
        return coerce_bool(value)
    if kind.is_integer:
        return coerce_int(value, kind)
    if kind is ValueKind.FLOAT:
        return coerce_float(value)
    if kind is ValueKind.NONE:
        raise ValueError("Parameter takes no value")
    assert False, f"Unhandled value kind: {kind}"


def normalize_default(value: Any, kind: ValueKind) -> Any:
    """
    Check that a default value has the runtime type of `kind`.

    Integers are accepted for FLOAT parameters and stored as floats. String
    defaults must not contain whitespace.

    Returns:
        Any: The value to store as the default.

    Raises:
        TypeError: If the runtime type does not match the kind.
        ValueError: If the value is out of range or contains whitespace.
    """
    if kind is ValueKind.NONE:
        raise TypeError("a parameter without value cannot have a default value")
    if kind is ValueKind.BOOL:
        if not isinstance(value, bool):
            raise TypeError(f"default value must be bool, got {type(value).__name__}")
        return value
    if kind.is_integer:
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"default value must be int, got {type(value).__name__}")
        return check_integer_range(value, kind)
    if kind is ValueKind.FLOAT:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise TypeError(
                f"default value must be float, got {type(value).__name__}"
            )
        return float(value)
    if kind is ValueKind.STR:
        if not isinstance(value, str):
            raise TypeError(f"default value must be str, got {type(value).__name__}")
        if any(char.isspace() for char in value):
            raise ValueError(f"default value '{value}' must not contain whitespace")
        return value
    assert False, f"Unhandled value kind: {kind}"
