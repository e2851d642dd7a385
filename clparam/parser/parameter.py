# clparam Command Line Parameters — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the `Parameter` dataclass used by `ParameterParser` to represent one
declared command-line option, and the `ParameterHandle` returned from
registration to configure it.

Each `Parameter` describes one CLI input: its short and full names, whether it
takes a value (and of which `ValueKind`), its callback, whether it is
necessary or has a default, its semantic check and, optionally, the position
at which it may be given without a name.

Key Attributes:
- `short_name` / `full_name`: e.g. `-c` and `--config`; `full_name` may be empty
- `action`: Zero-argument callback for parameters without value
- `cell`: `ValueCell` holding the typed callback and default for valued parameters
- `is_necessary`: The parameter must appear in every invocation
- `semantic_tag`: `SemanticTag` applied to the value before dispatch
- `order`: 1-based position of the unnamed form of the parameter

Parameters are created with `ParameterParser.add_parameter()` and configured
through the returned handle:

    parser.add_parameter("-c", "--config", callback=load_config).default_value(
        "/etc/app.conf"
    ).check_semantic("path")
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable

from clparam.exceptions import RegistrationError
from clparam.logger import logger
from clparam.parser.value_cell import ValueCell
from clparam.parser.value_kind import ValueKind
from clparam.semantic import SemanticTag

if TYPE_CHECKING:
    from clparam.parser.parameter_parser import ParameterParser


@dataclass(eq=False)
class Parameter:
    """
    Represents a registered command-line parameter.

    Exactly one of `action` and `cell` is set: `action` for parameters that
    take no value, `cell` for parameters that do.

    Attributes:
        short_name (str): Canonical name, used in error messages and results.
        full_name (str): Optional alias; empty for single-name parameters.
        action (Callable[[], Any] | None): Callback of a parameter without value.
        cell (ValueCell | None): Typed callback slot of a valued parameter.
        is_necessary (bool): True if the parameter must be supplied.
        semantic_tag (SemanticTag): Semantic check for string values.
        order (int | None): Position of the unnamed form, if any.
        help (str): Help text for rendering.
    """

    short_name: str
    full_name: str = ""
    action: Callable[[], Any] | None = None
    cell: ValueCell | None = None
    is_necessary: bool = False
    semantic_tag: SemanticTag = SemanticTag.NONE
    order: int | None = None
    help: str = field(default="", compare=False)

    @property
    def names(self) -> tuple[str, ...]:
        """All non-empty names of the parameter, short name first."""
        return tuple(name for name in (self.short_name, self.full_name) if name)

    @property
    def value_kind(self) -> ValueKind:
        return self.cell.kind if self.cell else ValueKind.NONE

    @property
    def takes_value(self) -> bool:
        return self.cell is not None

    @property
    def has_default(self) -> bool:
        return self.cell is not None and self.cell.has_default

    @property
    def default(self) -> Any:
        return self.cell.default if self.has_default else None

    def corresponds(self, name: str) -> bool:
        """Return True if `name` is the short or the full name of this parameter."""
        return bool(name) and name in self.names

    def get_value_text(self, separator: str = "=") -> str:
        """Get the usage text for the parameter (e.g. `-c=UINT16`)."""
        text = self.short_name
        if self.takes_value:
            text = f"{text}{separator}{str(self.value_kind).upper()}"
        if not self.is_necessary:
            text = f"[{text}]"
        return text

    def get_default_text(self) -> str:
        if not self.has_default:
            return ""
        return f"(default: {self.default})"

    def __str__(self) -> str:
        names = ", ".join(self.names)
        return f"Parameter({names}, kind={self.value_kind})"


class ParameterHandle:
    """
    Builder for a registered parameter.

    Every method checks its configuration immediately, raises
    `RegistrationError` without changing the parameter when the configuration
    is invalid, and returns the handle itself for chaining.
    """

    def __init__(self, parameter: Parameter, owner: ParameterParser) -> None:
        self._parameter = parameter
        self._owner = owner

    @property
    def parameter(self) -> Parameter:
        return self._parameter

    def necessary(self) -> ParameterHandle:
        """Mark the parameter as required in every invocation."""
        self._owner._ensure_configuring()
        param = self._parameter
        if param.has_default:
            raise RegistrationError(
                f"Parameter '{param.short_name}' already has a default value, "
                "it cannot be necessary"
            )
        param.is_necessary = True
        logger.debug("Parameter '%s' marked as necessary", param.short_name)
        return self

    def default_value(self, value: Any) -> ParameterHandle:
        """Set the value passed to the callback when the parameter is not supplied."""
        self._owner._ensure_configuring()
        param = self._parameter
        if param.is_necessary:
            raise RegistrationError(
                f"Parameter '{param.short_name}' is necessary, "
                "it cannot have a default value"
            )
        if param.cell is None:
            raise RegistrationError(
                f"Parameter '{param.short_name}' takes no value, "
                "it cannot have a default value"
            )
        try:
            param.cell.set_default(value)
        except (TypeError, ValueError) as error:
            raise RegistrationError(
                f"Invalid default value {value!r} for parameter "
                f"'{param.short_name}' ({param.value_kind}): {error}"
            ) from error
        logger.debug("Parameter '%s' default set to %r", param.short_name, value)
        return self

    def check_semantic(self, tag: SemanticTag | str) -> ParameterHandle:
        """Apply the semantic check `tag` to the parameter's string value."""
        self._owner._ensure_configuring()
        param = self._parameter
        try:
            tag = SemanticTag(tag)
        except ValueError as error:
            raise RegistrationError(str(error)) from error
        if tag is not SemanticTag.NONE and param.value_kind is not ValueKind.STR:
            raise RegistrationError(
                f"Semantic check '{tag}' requires a str parameter, "
                f"'{param.short_name}' is {param.value_kind}"
            )
        param.semantic_tag = tag
        return self

    def order(self, position: int) -> ParameterHandle:
        """Allow the parameter to be given unnamed at `position` (1-based)."""
        self._owner._ensure_configuring()
        param = self._parameter
        if isinstance(position, bool) or not isinstance(position, int) or position < 1:
            raise RegistrationError(
                f"Order of parameter '{param.short_name}' must be a positive "
                f"integer, got {position!r}"
            )
        if not param.takes_value:
            raise RegistrationError(
                f"Parameter '{param.short_name}' takes no value, "
                "it cannot be given unnamed"
            )
        existing = self._owner.registry.find_by_order(position)
        if existing is not None and existing is not param:
            raise RegistrationError(
                f"Order {position} is already used by parameter "
                f"'{existing.short_name}'"
            )
        param.order = position
        return self

    def __repr__(self) -> str:
        return f"ParameterHandle({self._parameter})"
