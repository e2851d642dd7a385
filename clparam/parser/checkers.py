# clparam Command Line Parameters — (c) 2025 rtj.dev LLC — MIT Licensed
"""
The validation pipeline run over all input tokens before any callback.

Each checker looks at the complete registry and the complete list of parsed
tokens and either passes or raises one `ValidationError`. The checkers run in
a fixed order, cheapest first, and the first failure ends the parse:

1. ExistenceChecker:        tokens supplied but nothing registered
2. RedundancyChecker:       more tokens than registered parameters
3. UnknownParameterChecker: token names that match no parameter (batched)
4. RepetitionChecker:       parameters supplied more than once (batched)
5. NecessityChecker:        necessary parameters not supplied (batched)
6. ValueShapeChecker:       value given to a flag, or missing for a valued parameter
7. SemanticChecker:         semantic checks of supplied values and string defaults

Functions:
- run_checks: Run the pipeline over a registry and parsed tokens.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Sequence

from clparam.exceptions import SemanticError, ValidationCause, ValidationError
from clparam.logger import logger
from clparam.parser.parser_types import ParsedToken
from clparam.parser.registry import ParameterRegistry
from clparam.semantic import SemanticCheckers, SemanticTag


def _quote(names: Sequence[str]) -> str:
    return ", ".join(f"'{name}'" for name in names)


def _batched_message(names: Sequence[str], singular: str, plural: str) -> str:
    if len(names) == 1:
        return f"Parameter {_quote(names)} {singular}"
    return f"Parameters {_quote(names)} {plural}"


@dataclass(frozen=True)
class CheckContext:
    """Everything a checker may look at."""

    registry: ParameterRegistry
    tokens: Sequence[ParsedToken]
    semantic_checkers: SemanticCheckers

    def supplied_names(self) -> set[str]:
        """Short names of all parameters matched by a token."""
        return {
            token.parameter.short_name
            for token in self.tokens
            if token.parameter is not None
        }


class ParameterChecker(ABC):
    """Base class of the pipeline checkers."""

    cause: ValidationCause

    @abstractmethod
    def check(self, context: CheckContext) -> None:
        """Raise ValidationError if the tokens fail this check."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(cause={self.cause})"


class ExistenceChecker(ParameterChecker):
    cause = ValidationCause.EXISTENCE

    def check(self, context: CheckContext) -> None:
        if len(context.registry) == 0 and context.tokens:
            raise ValidationError(
                "Some parameters were supplied, but none are registered",
                self.cause,
            )


class RedundancyChecker(ParameterChecker):
    cause = ValidationCause.REDUNDANCY

    def check(self, context: CheckContext) -> None:
        supplied = len(context.tokens)
        registered = len(context.registry)
        if supplied > registered:
            raise ValidationError(
                f"{supplied} parameters supplied, but only {registered} registered",
                self.cause,
            )


class UnknownParameterChecker(ParameterChecker):
    cause = ValidationCause.UNKNOWN_PARAMETER

    def check(self, context: CheckContext) -> None:
        unknown = [token.name for token in context.tokens if token.parameter is None]
        if unknown:
            raise ValidationError(
                _batched_message(
                    unknown,
                    "is incorrect (no such parameter)",
                    "are incorrect (no such parameters)",
                ),
                self.cause,
                unknown,
            )


class RepetitionChecker(ParameterChecker):
    cause = ValidationCause.REPETITION

    def check(self, context: CheckContext) -> None:
        seen: set[str] = set()
        repeated: list[str] = []
        for token in context.tokens:
            if token.parameter is None:
                continue
            name = token.parameter.short_name
            if name in seen and name not in repeated:
                repeated.append(name)
            seen.add(name)
        if repeated:
            raise ValidationError(
                _batched_message(repeated, "is repeated", "are repeated"),
                self.cause,
                repeated,
            )


class NecessityChecker(ParameterChecker):
    cause = ValidationCause.NECESSITY

    def check(self, context: CheckContext) -> None:
        supplied = context.supplied_names()
        missing = [
            parameter.short_name
            for parameter in context.registry
            if parameter.is_necessary and parameter.short_name not in supplied
        ]
        if missing:
            raise ValidationError(
                _batched_message(
                    missing,
                    "is defined as necessary, but it is missing",
                    "are defined as necessary, but they are missing",
                ),
                self.cause,
                missing,
            )


class ValueShapeChecker(ParameterChecker):
    cause = ValidationCause.VALUE_SHAPE

    def check(self, context: CheckContext) -> None:
        for token in context.tokens:
            parameter = token.parameter
            assert parameter is not None, "unknown parameters are checked earlier"
            name = parameter.short_name
            if not parameter.takes_value and token.value is not None:
                raise ValidationError(
                    f"Parameter '{name}' takes no value, but got '{token.value}'",
                    self.cause,
                    [name],
                )
            if parameter.takes_value and not token.value:
                raise ValidationError(
                    f"Parameter '{name}' requires a value, but it is missing",
                    self.cause,
                    [name],
                )


class SemanticChecker(ParameterChecker):
    cause = ValidationCause.SEMANTIC

    def check(self, context: CheckContext) -> None:
        for token in context.tokens:
            parameter = token.parameter
            assert parameter is not None, "unknown parameters are checked earlier"
            if parameter.semantic_tag is not SemanticTag.NONE:
                assert token.value is not None, "value shape is checked earlier"
                self._check_value(
                    context, parameter.short_name, parameter.semantic_tag, token.value
                )

        supplied = context.supplied_names()
        for parameter in context.registry:
            if (
                parameter.short_name not in supplied
                and parameter.has_default
                and parameter.semantic_tag is not SemanticTag.NONE
                and isinstance(parameter.default, str)
            ):
                self._check_value(
                    context,
                    parameter.short_name,
                    parameter.semantic_tag,
                    parameter.default,
                )

    def _check_value(
        self, context: CheckContext, name: str, tag: SemanticTag, value: str
    ) -> None:
        try:
            context.semantic_checkers.check(tag, value)
        except Exception as error:
            raise SemanticError(name, tag, value, str(error)) from error


DEFAULT_CHECKERS: tuple[ParameterChecker, ...] = (
    ExistenceChecker(),
    RedundancyChecker(),
    UnknownParameterChecker(),
    RepetitionChecker(),
    NecessityChecker(),
    ValueShapeChecker(),
    SemanticChecker(),
)


def run_checks(
    registry: ParameterRegistry,
    tokens: Sequence[ParsedToken],
    semantic_checkers: SemanticCheckers,
    checkers: Sequence[ParameterChecker] = DEFAULT_CHECKERS,
) -> None:
    """
    Run every checker in order over the tokens; the first failure is raised.

    Raises:
        ValidationError: From the first failing checker.
    """
    context = CheckContext(registry, tokens, semantic_checkers)
    for checker in checkers:
        try:
            checker.check(context)
        except ValidationError as error:
            logger.debug("Validation failed at %s: %s", error.cause, error)
            raise
