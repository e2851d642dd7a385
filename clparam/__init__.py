"""
clparam Command Line Parameters

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging

from .exceptions import (
    AmbiguousTokenError,
    ClparamError,
    ParseError,
    RegistrationError,
    SemanticError,
    TypeMismatchError,
    UnresolvedPositionalError,
    ValidationCause,
    ValidationError,
)
from .parser import ParameterParser, ValueKind
from .semantic import SemanticCheckers, SemanticTag
from .version import __version__

logger = logging.getLogger("clparam")


__all__ = [
    "AmbiguousTokenError",
    "ClparamError",
    "ParameterParser",
    "ParseError",
    "RegistrationError",
    "SemanticCheckers",
    "SemanticError",
    "SemanticTag",
    "TypeMismatchError",
    "UnresolvedPositionalError",
    "ValidationCause",
    "ValidationError",
    "ValueKind",
    "__version__",
]
