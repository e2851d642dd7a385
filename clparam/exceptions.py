# clparam Command Line Parameters — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by clparam.

Registration problems are reported while parameters are being declared, parse
problems while an invocation's tokens are being checked and dispatched. Every
parse-time exception carries the structured details of the failure (the token,
the parameter names, the expected kind, the offending value) in addition to a
readable message.

All exceptions inherit from `ClparamError`, the base exception for the library.

Exception Hierarchy:
- ClparamError
    ├── RegistrationError
    └── ParseError
        ├── AmbiguousTokenError
        ├── UnresolvedPositionalError
        ├── TypeMismatchError
        └── ValidationError
            └── SemanticError

Exceptions raised by user callbacks are never wrapped; they propagate from
`ParameterParser.parse()` unchanged.
"""
from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from clparam.parser.value_kind import ValueKind
    from clparam.semantic import SemanticTag


class ClparamError(Exception):
    """Base exception for clparam."""


class RegistrationError(ClparamError):
    """Exception raised when a parameter declaration is invalid."""


class ParseError(ClparamError):
    """Base exception for failures raised while parsing input tokens."""


class AmbiguousTokenError(ParseError):
    """Exception raised when a token contains the value separator more than once."""

    def __init__(self, token: str, separator: str) -> None:
        self.token = token
        self.separator = separator
        super().__init__(
            f"Name-value separator '{separator}' repeated in parameter '{token}'"
        )


class UnresolvedPositionalError(ParseError):
    """Exception raised when an unnamed token's position has no parameter."""

    def __init__(self, token: str, position: int) -> None:
        self.token = token
        self.position = position
        super().__init__(
            f"Unnamed parameter '{token}' has order number {position}, "
            "but no parameter is registered with that order"
        )


class TypeMismatchError(ParseError):
    """Exception raised when a value cannot be converted to its parameter's kind."""

    def __init__(self, parameter: str, kind: ValueKind, text: str) -> None:
        self.parameter = parameter
        self.kind = kind
        self.text = text
        super().__init__(
            f"Parameter '{parameter}' expects a {kind} value, got '{text}'"
        )


class ValidationCause(Enum):
    """
    The checks of the validation pipeline, in the order they run.

    Members:
        EXISTENCE: Tokens were supplied but no parameter is registered.
        REDUNDANCY: More tokens than registered parameters.
        UNKNOWN_PARAMETER: A token names no registered parameter.
        REPETITION: Two tokens resolve to the same parameter.
        NECESSITY: A necessary parameter is missing.
        VALUE_SHAPE: A value is present where none is allowed, or missing.
        SEMANTIC: A semantic checker rejected a value.
    """

    EXISTENCE = "existence"
    REDUNDANCY = "redundancy"
    UNKNOWN_PARAMETER = "unknown_parameter"
    REPETITION = "repetition"
    NECESSITY = "necessity"
    VALUE_SHAPE = "value_shape"
    SEMANTIC = "semantic"

    def __str__(self) -> str:
        return self.value


class ValidationError(ParseError):
    """Exception raised when the input tokens fail one of the pipeline checks."""

    def __init__(
        self,
        message: str,
        cause: ValidationCause,
        names: Sequence[str] = (),
    ) -> None:
        self.cause = cause
        self.names: list[str] = list(names)
        super().__init__(message)


class SemanticError(ValidationError):
    """Exception raised when a semantic checker rejects a parameter's value."""

    def __init__(
        self, parameter: str, tag: SemanticTag, value: str, reason: str = ""
    ) -> None:
        self.parameter = parameter
        self.tag = tag
        self.value = value
        self.reason = reason
        message = f"Parameter '{parameter}' has invalid {tag} value '{value}'"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message, ValidationCause.SEMANTIC, [parameter])
