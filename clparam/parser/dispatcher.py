# clparam Command Line Parameters — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Turns validated tokens into callback invocations.

Dispatch happens in two steps. `plan()` converts every supplied value to its
parameter's kind and adds one default invocation for each optional parameter
that was not supplied and has a default. `execute()` then calls the callbacks
in plan order: supplied tokens in input order, followed by defaults in
registration order. Because all conversions happen in `plan()`, a
`TypeMismatchError` is raised before any callback has run.
"""
from typing import Any, Sequence

from clparam.exceptions import TypeMismatchError
from clparam.logger import logger
from clparam.parser.parser_types import Invocation, ParsedToken
from clparam.parser.registry import ParameterRegistry


class Dispatcher:
    """Converts token values and invokes parameter callbacks."""

    def __init__(self, registry: ParameterRegistry) -> None:
        self.registry = registry

    def plan(self, tokens: Sequence[ParsedToken]) -> list[Invocation]:
        """
        Build the invocation list for validated tokens.

        Raises:
            TypeMismatchError: If a value cannot be converted to its kind.
        """
        invocations: list[Invocation] = []
        supplied: set[str] = set()
        for token in tokens:
            parameter = token.parameter
            assert parameter is not None, "tokens must be validated before dispatch"
            supplied.add(parameter.short_name)
            if parameter.cell is None:
                invocations.append(Invocation(parameter))
                continue
            text = token.value or ""
            try:
                value = parameter.cell.convert(text)
            except ValueError as error:
                raise TypeMismatchError(
                    parameter.short_name, parameter.value_kind, text
                ) from error
            invocations.append(Invocation(parameter, value))

        for parameter in self.registry:
            if parameter.short_name not in supplied and parameter.has_default:
                invocations.append(
                    Invocation(parameter, parameter.default, from_default=True)
                )
        return invocations

    def execute(self, invocations: Sequence[Invocation]) -> dict[str, Any]:
        """Run the planned invocations; returns the dispatched values by short name."""
        dispatched: dict[str, Any] = {}
        for invocation in invocations:
            invocation.run()
            dispatched[invocation.parameter.short_name] = invocation.value
        logger.debug("Dispatched %d callback(s)", len(invocations))
        return dispatched
