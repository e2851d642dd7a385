"""
clparam Command Line Parameters

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .extractor import NameValueExtractor, TokenParts
from .parameter import Parameter, ParameterHandle
from .parameter_parser import ParameterParser
from .parser_types import Invocation, ParsedToken, ParserState
from .registry import ParameterRegistry
from .value_cell import ValueCell
from .value_kind import ValueKind

__all__ = [
    "Invocation",
    "NameValueExtractor",
    "Parameter",
    "ParameterHandle",
    "ParameterParser",
    "ParameterRegistry",
    "ParsedToken",
    "ParserState",
    "TokenParts",
    "ValueCell",
    "ValueKind",
]
