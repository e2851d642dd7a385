# clparam Command Line Parameters — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `ValueKind`, the closed set of value types a parameter can take.

Every registered parameter has exactly one kind, fixed at registration. `NONE`
marks a parameter that takes no value and is bound to a zero-argument callback;
every other member names the type the parameter's value text is converted to
before its callback runs.

Supports alias coercion for config-friendly names and conversion from Python
builtin types.

Exports:
    - ValueKind: Enum of supported parameter value kinds.

Example:
    ValueKind("uint16")  → ValueKind.UINT16
    ValueKind("integer") → ValueKind.INT (via alias)
    ValueKind.from_type(float) → ValueKind.FLOAT
"""
from __future__ import annotations

from enum import Enum
from typing import Any

_INTEGER_BOUNDS: dict[str, tuple[int, int]] = {
    "int8": (-(2**7), 2**7 - 1),
    "int16": (-(2**15), 2**15 - 1),
    "int32": (-(2**31), 2**31 - 1),
    "int64": (-(2**63), 2**63 - 1),
    "uint8": (0, 2**8 - 1),
    "uint16": (0, 2**16 - 1),
    "uint32": (0, 2**32 - 1),
    "uint64": (0, 2**64 - 1),
}


class ValueKind(Enum):
    """
    Defines the value type of a command-line parameter.

    Members:
        NONE: The parameter takes no value.
        BOOL: A boolean (`true`/`false`, `yes`/`no`, `on`/`off`, `1`/`0`).
        INT: A signed integer without width limit.
        INT8, INT16, INT32, INT64: Range-checked signed integers.
        UINT8, UINT16, UINT32, UINT64: Range-checked unsigned integers.
        FLOAT: A floating point number.
        STR: A string, passed through unchanged.

    Aliases:
        - "flag" → "none"
        - "boolean" → "bool"
        - "integer" → "int"
        - "short" → "int16", "long" → "int64"
        - "unsigned" → "uint32"
        - "double" → "float"
        - "string" → "str"
    """

    NONE = "none"
    BOOL = "bool"
    INT = "int"
    INT8 = "int8"
    INT16 = "int16"
    INT32 = "int32"
    INT64 = "int64"
    UINT8 = "uint8"
    UINT16 = "uint16"
    UINT32 = "uint32"
    UINT64 = "uint64"
    FLOAT = "float"
    STR = "str"

    @classmethod
    def choices(cls) -> list[ValueKind]:
        """Return a list of all value kinds."""
        return list(cls)

    @classmethod
    def _get_alias(cls, value: str) -> str:
        aliases = {
            "flag": "none",
            "boolean": "bool",
            "integer": "int",
            "short": "int16",
            "long": "int64",
            "unsigned": "uint32",
            "double": "float",
            "string": "str",
        }
        return aliases.get(value, value)

    @classmethod
    def _missing_(cls, value: object) -> ValueKind:
        if not isinstance(value, str):
            raise ValueError(f"Invalid {cls.__name__}: {value!r}")
        normalized = value.strip().lower()
        alias = cls._get_alias(normalized)
        for member in cls:
            if member.value == alias:
                return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Invalid {cls.__name__}: '{value}'. Must be one of: {valid}")

    @classmethod
    def from_type(cls, value_type: Any) -> ValueKind:
        """
        Resolve a value kind from an enum member, a string or a builtin type.

        Args:
            value_type (Any): A `ValueKind`, one of its names/aliases, `None`,
                or one of `bool`, `int`, `float`, `str`.

        Returns:
            ValueKind: The matching value kind.

        Raises:
            ValueError: If the value cannot be mapped to a kind.
        """
        if isinstance(value_type, ValueKind):
            return value_type
        if value_type is None or value_type is type(None):
            return cls.NONE
        if isinstance(value_type, str):
            return cls(value_type)
        builtin_kinds = {bool: cls.BOOL, int: cls.INT, float: cls.FLOAT, str: cls.STR}
        if isinstance(value_type, type) and value_type in builtin_kinds:
            return builtin_kinds[value_type]
        raise ValueError(f"Unsupported value type: {value_type!r}")

    @property
    def takes_value(self) -> bool:
        return self is not ValueKind.NONE

    @property
    def is_integer(self) -> bool:
        return self is ValueKind.INT or self.value in _INTEGER_BOUNDS

    @property
    def bounds(self) -> tuple[int, int] | None:
        """Inclusive (minimum, maximum) for fixed-width integers, else None."""
        return _INTEGER_BOUNDS.get(self.value)

    def __str__(self) -> str:
        """Return the string representation of the value kind."""
        return self.value
