# clparam Command Line Parameters — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `ValueCell`, the typed holder of a valued parameter's callback and
optional default.

The cell's `kind` is fixed when the parameter is registered. Every value that
reaches the callback goes through the cell: input text is converted with
`convert()`, defaults are checked against the kind by `set_default()` at
registration time, so a default never needs converting at dispatch time.
"""
from dataclasses import dataclass
from typing import Any, Callable

from clparam.parser.utils import coerce_value, normalize_default
from clparam.parser.value_kind import ValueKind


@dataclass
class ValueCell:
    """
    Typed callback slot of a parameter that takes a value.

    Attributes:
        kind (ValueKind): The value kind; never `ValueKind.NONE`.
        callback (Callable[[Any], Any]): Called with the converted value.
        default (Any): The default value, meaningful only if `has_default`.
        has_default (bool): True once a default has been set.
    """

    kind: ValueKind
    callback: Callable[[Any], Any]
    default: Any = None
    has_default: bool = False

    def __post_init__(self) -> None:
        if not self.kind.takes_value:
            raise ValueError("ValueCell requires a kind that takes a value")

    def set_default(self, value: Any) -> None:
        """
        Store `value` as the default after checking it against the kind.

        Raises:
            TypeError: If the runtime type does not match the kind.
            ValueError: If the value is out of range or malformed.
        """
        normalized = normalize_default(value, self.kind)
        self.default = normalized
        self.has_default = True

    def convert(self, text: str) -> Any:
        """Convert input text to the cell's kind; raises ValueError on failure."""
        return coerce_value(text, self.kind)

    def invoke(self, value: Any) -> None:
        self.callback(value)
