# clparam Command Line Parameters — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `ParameterParser`, the registration-and-dispatch engine
of clparam.

Parameters are declared up front, each bound to exactly one callback. An
invocation's tokens are then checked as a whole before any callback runs, and
only a fully valid invocation is dispatched: every supplied parameter's
callback is called once with its converted value, and every optional parameter
that was left out is called once with its default.

Key Features:
- Declarative registration via `add_parameter()` with chained configuration
  (`necessary()`, `default_value()`, `check_semantic()`, `order()`)
- Typed values: booleans, range-checked integers, floats and strings
- Value kind inference from callback annotations
- `name=value` tokens with a configurable separator
- Unnamed tokens resolved by position
- Ordered, fail-fast validation pipeline with batched error reports
- Pluggable semantic checks (path, IPv4, IPv6, IP)
- Rich-powered help rendering

Public Interface:
- `add_parameter(...)`: Register a parameter, returns a `ParameterHandle`.
- `set_value_separator(...)`: Change the name-value separator.
- `register_semantic_checker(...)`: Replace the checker of a semantic tag.
- `parse(...)`: Validate and dispatch a token list.
- `render_help()`: Render a rich-styled help listing.

Example Usage:
    parser = ParameterParser(program="app")
    parser.add_parameter("-h", "--help", callback=show_help)
    parser.add_parameter(
        "-c", "--count", callback=set_count, value_kind=int
    ).default_value(5)

    parser.parse(["--count=10"])   # set_count(10)
    parser.parse([])               # set_count(5)
"""
from __future__ import annotations

import sys
from typing import Any, Callable, Sequence

from rich.console import Console
from rich.markup import escape

from clparam.console import console
from clparam.exceptions import ParseError, RegistrationError
from clparam.logger import logger
from clparam.parser.checkers import run_checks
from clparam.parser.dispatcher import Dispatcher
from clparam.parser.extractor import NameValueExtractor
from clparam.parser.parameter import Parameter, ParameterHandle
from clparam.parser.parser_types import ParsedToken, ParserState
from clparam.parser.positional import UnnamedTokenResolver
from clparam.parser.registry import ParameterRegistry
from clparam.parser.signature import accepts_positional_args, infer_value_kind
from clparam.parser.value_cell import ValueCell
from clparam.parser.value_kind import ValueKind
from clparam.semantic import SemanticChecker, SemanticCheckers, SemanticTag


class ParameterParser:
    """
    Registry of command-line parameters and dispatcher of their callbacks.

    A parser starts in the CONFIGURING state, where parameters can be added
    and configured. The first call to `parse()` ends configuration; the
    registry is read-only from then on, and `parse()` may be called again with
    other tokens.

    Features:
    - Short and full names sharing one namespace.
    - Parameters with and without value.
    - Necessary parameters and default values.
    - Semantic checks of string values and string defaults.
    - Positional (unnamed) parameters.
    - Render Help using Rich library.
    """

    def __init__(
        self,
        program: str | None = None,
        help_text: str = "",
        help_epilog: str = "",
        value_separator: str = "=",
        semantic_checkers: SemanticCheckers | None = None,
    ) -> None:
        """Initialize the ParameterParser."""
        self.console: Console = console
        self.program: str | None = program
        self.help_text: str = help_text
        self.help_epilog: str = help_epilog
        self.registry: ParameterRegistry = ParameterRegistry()
        self.semantic_checkers: SemanticCheckers = (
            semantic_checkers if semantic_checkers is not None else SemanticCheckers()
        )
        self._state: ParserState = ParserState.CONFIGURING
        self._extractor: NameValueExtractor = NameValueExtractor()
        self.set_value_separator(value_separator)

    @property
    def state(self) -> ParserState:
        return self._state

    @property
    def value_separator(self) -> str:
        return self._extractor.separator

    def _ensure_configuring(self) -> None:
        if self._state is not ParserState.CONFIGURING:
            raise RegistrationError(
                f"Parameters cannot be changed once parsing has started "
                f"(parser state: {self._state.value})"
            )

    def set_value_separator(self, separator: str) -> None:
        """
        Set the separator between a parameter's name and its value.

        Raises:
            RegistrationError: If the separator is empty, contains whitespace,
                or occurs in a registered parameter name.
        """
        self._ensure_configuring()
        if not isinstance(separator, str) or not separator:
            raise RegistrationError("Value separator must be a non-empty string")
        if any(char.isspace() for char in separator):
            raise RegistrationError("Whitespace cannot be used as value separator")
        clashing = [name for name in self.registry.names if separator in name]
        if clashing:
            raise RegistrationError(
                f"Value separator '{separator}' occurs in parameter name(s): "
                f"{', '.join(clashing)}"
            )
        self._extractor = NameValueExtractor(separator)
        logger.debug("Value separator set to %r", separator)

    def register_semantic_checker(
        self, tag: SemanticTag | str, checker: SemanticChecker
    ) -> None:
        """Replace the checker used for `tag` by this parser."""
        if self._state is ParserState.PARSING:
            raise RegistrationError("Semantic checkers cannot be changed while parsing")
        try:
            self.semantic_checkers.register(tag, checker)
        except (TypeError, ValueError) as error:
            raise RegistrationError(str(error)) from error

    def _validate_names(self, names: tuple[str, ...]) -> tuple[str, str]:
        """Validate the names provided for the parameter."""
        if not names:
            raise RegistrationError("No names provided")
        if len(names) > 2:
            raise RegistrationError(
                f"A parameter has at most two names (short and full), got {len(names)}"
            )
        for name in names:
            if not isinstance(name, str):
                raise RegistrationError(f"Name {name!r} must be a string")
            if not name:
                raise RegistrationError("Parameter names must not be empty")
            if any(char.isspace() for char in name):
                raise RegistrationError(
                    f"Invalid parameter name '{name}': it must not contain whitespace"
                )
            if self.value_separator in name:
                raise RegistrationError(
                    f"Invalid parameter name '{name}': it must not contain "
                    f"the value separator '{self.value_separator}'"
                )
        short_name = names[0]
        full_name = names[1] if len(names) == 2 else ""
        if short_name == full_name:
            raise RegistrationError(
                f"Duplicate names of parameter: '{short_name}', '{full_name}'"
            )
        return short_name, full_name

    def _resolve_value_kind(
        self, short_name: str, callback: Callable[..., Any], value_kind: Any
    ) -> ValueKind:
        try:
            if value_kind is None:
                return infer_value_kind(callback)
            kind = ValueKind.from_type(value_kind)
        except ValueError as error:
            raise RegistrationError(str(error)) from error
        arg_count = 1 if kind.takes_value else 0
        if not accepts_positional_args(callback, arg_count):
            raise RegistrationError(
                f"Callback of parameter '{short_name}' cannot be called with "
                f"{arg_count} argument(s) as required by value kind '{kind}'"
            )
        return kind

    def add_parameter(
        self,
        *names: str,
        callback: Callable[..., Any] | None = None,
        value_kind: ValueKind | type | str | None = None,
        help: str = "",
    ) -> ParameterHandle:
        """
        Register a new parameter.

        Args:
            *names (str): Short name and optional full name (e.g. "-c", "--count").
            callback (Callable): Called with no argument for parameters without
                value, with the converted value otherwise.
            value_kind (ValueKind | type | str | None): The value kind; inferred
                from the callback signature when omitted.
            help (str): Help text for rendering.

        Returns:
            ParameterHandle: Handle to configure the new parameter.

        Raises:
            RegistrationError: If the declaration is invalid; nothing is
                registered in that case.
        """
        self._ensure_configuring()
        short_name, full_name = self._validate_names(names)
        if callback is None or not callable(callback):
            raise RegistrationError(
                f"Callback of parameter '{short_name}' must be callable"
            )
        kind = self._resolve_value_kind(short_name, callback, value_kind)
        self.registry.check_names_available(short_name, full_name)

        if kind.takes_value:
            parameter = Parameter(
                short_name=short_name,
                full_name=full_name,
                cell=ValueCell(kind=kind, callback=callback),
                help=help,
            )
        else:
            parameter = Parameter(
                short_name=short_name,
                full_name=full_name,
                action=callback,
                help=help,
            )
        self.registry.add(parameter)
        logger.debug("Registered %s", parameter)
        return ParameterHandle(parameter, self)

    def get_parameter(self, name: str) -> Parameter | None:
        """Return the parameter registered under the short or full `name`."""
        return self.registry.find(name)

    def _parse_token(self, token: str) -> ParsedToken:
        parts = self._extractor.split(token)
        return ParsedToken(parts=parts, parameter=self.registry.find(parts.name))

    def parse(self, tokens: Sequence[str] | None = None) -> dict[str, Any]:
        """
        Validate the tokens and invoke the parameters' callbacks.

        Args:
            tokens (Sequence[str] | None): Input tokens without the program
                name; `sys.argv[1:]` when omitted.

        Returns:
            dict[str, Any]: The dispatched values by short name (None for
            parameters without value).

        Raises:
            AmbiguousTokenError: If a token contains the separator twice.
            UnresolvedPositionalError: If an unnamed token has no parameter.
            ValidationError: If a pipeline check fails.
            TypeMismatchError: If a value cannot be converted.
        """
        if self._state is ParserState.PARSING:
            raise ParseError("parse() cannot be called from a parameter callback")
        if tokens is None:
            tokens = sys.argv[1:]
        tokens = list(tokens)
        logger.debug("Parsing %d token(s): %s", len(tokens), tokens)

        self._state = ParserState.PARSING
        succeeded = False
        try:
            resolver = UnnamedTokenResolver(self.registry, self._extractor)
            parsed = [self._parse_token(token) for token in resolver.resolve(tokens)]
            run_checks(self.registry, parsed, self.semantic_checkers)
            dispatcher = Dispatcher(self.registry)
            result = dispatcher.execute(dispatcher.plan(parsed))
            succeeded = True
            return result
        finally:
            self._state = ParserState.SUCCEEDED if succeeded else ParserState.FAILED

    def to_definition_list(self) -> list[dict[str, Any]]:
        """
        Convert parameter metadata into a serializable list of dicts.

        Returns:
            List of definitions for use in introspection or documentation.
        """
        defs = []
        for param in self.registry:
            defs.append(
                {
                    "short_name": param.short_name,
                    "full_name": param.full_name,
                    "value_kind": param.value_kind,
                    "necessary": param.is_necessary,
                    "has_default": param.has_default,
                    "default": param.default,
                    "semantic": param.semantic_tag,
                    "order": param.order,
                    "help": param.help,
                }
            )
        return defs

    def get_usage(self, plain_text: bool = False) -> str:
        """
        Render the usage string for this parser.

        Returns:
            str: A usage line listing every parameter.
        """
        parts = [self.program or "program"]
        for param in self.registry:
            text = param.get_value_text(self.value_separator)
            parts.append(text if plain_text else escape(text))
        return " ".join(parts)

    def render_help(self) -> None:
        """
        Print formatted help text for this parser using Rich output.

        Includes usage, description, positional and named parameters, and the
        optional epilog.
        """
        self.console.print(f"[bold]usage: {self.get_usage()}[/bold]\n")

        if self.help_text:
            self.console.print(self.help_text + "\n")

        ordered = sorted(
            (param for param in self.registry if param.order is not None),
            key=lambda param: param.order,
        )
        if ordered:
            self.console.print("[bold]positional:[/bold]")
            for param in ordered:
                label = f"{param.order}. {str(param.value_kind).upper()}"
                self.console.print(f"  {label:<30} -> {escape(param.short_name)}")

        if len(self.registry):
            self.console.print("[bold]options:[/bold]")
            for param in self.registry:
                flags = ", ".join(param.names)
                if param.takes_value:
                    kind_text = str(param.value_kind).upper()
                    flags = f"{flags}{self.value_separator}{kind_text}"
                arg_line = f"  {escape(flags):<30} "
                details = [
                    text
                    for text in (
                        param.help,
                        "(necessary)" if param.is_necessary else "",
                        param.get_default_text(),
                        (
                            f"[{param.semantic_tag}]"
                            if param.semantic_tag is not SemanticTag.NONE
                            else ""
                        ),
                    )
                    if text
                ]
                help_text = escape(" ".join(details))
                if help_text and len(flags) > 30:
                    help_text = f"\n{'':<33}{help_text}"
                self.console.print(f"{arg_line}{help_text}")

        if self.help_epilog:
            self.console.print("\n" + self.help_epilog, style="dim")

    def __str__(self) -> str:
        """Return a human-readable summary of the parser state."""
        necessary = sum(param.is_necessary for param in self.registry)
        defaults = sum(param.has_default for param in self.registry)
        positional = sum(param.order is not None for param in self.registry)
        return (
            f"ParameterParser(parameters={len(self.registry)}, "
            f"names={len(self.registry.names)}, necessary={necessary}, "
            f"defaults={defaults}, positional={positional}, "
            f"separator='{self.value_separator}')"
        )

    def __repr__(self) -> str:
        return str(self)
