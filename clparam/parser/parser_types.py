# clparam Command Line Parameters — (c) 2025 rtj.dev LLC — MIT Licensed
"""
State models shared by the validation pipeline, the dispatcher and the
`ParameterParser`.

Contents:
- `ParserState`: Lifecycle of a parser (configuring, parsing, finished).
- `ParsedToken`: An input token split into parts and matched to its parameter.
- `Invocation`: One planned callback call with its converted value.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Any

from clparam.parser.extractor import TokenParts
from clparam.parser.parameter import Parameter


class ParserState(Enum):
    """
    Lifecycle state of a `ParameterParser`.

    Registration is accepted only while CONFIGURING. Each `parse()` call moves
    the parser to PARSING and ends in SUCCEEDED or FAILED.
    """

    CONFIGURING = "configuring"
    PARSING = "parsing"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass(frozen=True)
class ParsedToken:
    """An input token with its parts and the parameter it names, if any."""

    parts: TokenParts
    parameter: Parameter | None = None

    @property
    def token(self) -> str:
        return self.parts.token

    @property
    def name(self) -> str:
        return self.parts.name

    @property
    def value(self) -> str | None:
        return self.parts.value


@dataclass(frozen=True)
class Invocation:
    """
    A callback call planned by the dispatcher.

    Attributes:
        parameter (Parameter): The parameter whose callback is called.
        value (Any): The converted value, None for parameters without value.
        from_default (bool): True if the value is the parameter's default.
    """

    parameter: Parameter
    value: Any = None
    from_default: bool = False

    def run(self) -> None:
        if self.parameter.cell is None:
            assert self.parameter.action is not None, "parameter has no callback"
            self.parameter.action()
        else:
            self.parameter.cell.invoke(self.value)
