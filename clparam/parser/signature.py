# clparam Command Line Parameters — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Provides utilities for introspecting parameter callbacks.

When a parameter is registered without an explicit value kind, its callback's
signature decides: a callback without required arguments takes no value, a
callback with one argument takes a value of its annotated type (string when
unannotated).

Functions:
- infer_value_kind: Infer a `ValueKind` from a callback's signature.
- accepts_positional_args: Check that a callback can take a given argument count.
"""
import inspect
from typing import Any, Callable

from clparam.logger import logger
from clparam.parser.value_kind import ValueKind

_POSITIONAL_KINDS = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


def infer_value_kind(func: Callable[..., Any]) -> ValueKind:
    """
    Infer the value kind of a parameter from its callback's signature.

    Args:
        func (Callable): The callback to inspect.

    Returns:
        ValueKind: `ValueKind.NONE` for callbacks that take no required
        argument, otherwise the kind of the first positional argument's
        annotation (`ValueKind.STR` when it is missing or unsupported).

    Raises:
        ValueError: If the callback requires more than one argument.
    """
    try:
        signature = inspect.signature(func)
    except (TypeError, ValueError):
        logger.debug("Cannot inspect signature of %r, assuming a string value", func)
        return ValueKind.STR

    required = [
        param
        for param in signature.parameters.values()
        if param.kind in _POSITIONAL_KINDS and param.default is inspect.Parameter.empty
    ]
    if not required:
        return ValueKind.NONE
    if len(required) > 1:
        raise ValueError(
            f"Callback {getattr(func, '__name__', func)!r} must take at most one "
            f"argument, it requires {len(required)}"
        )

    annotation = required[0].annotation
    if annotation is inspect.Parameter.empty:
        return ValueKind.STR
    if isinstance(annotation, str):
        annotation = {"bool": bool, "int": int, "float": float, "str": str}.get(
            annotation, str
        )
    try:
        kind = ValueKind.from_type(annotation)
    except ValueError:
        logger.debug("Unsupported annotation %r on %r, using str", annotation, func)
        return ValueKind.STR
    return kind if kind.takes_value else ValueKind.STR


def accepts_positional_args(func: Callable[..., Any], count: int) -> bool:
    """
    Return True if `func` can be called with `count` positional arguments.

    Callbacks whose signature cannot be inspected are assumed to fit.
    """
    try:
        signature = inspect.signature(func)
    except (TypeError, ValueError):
        return True
    try:
        signature.bind(*([None] * count))
    except TypeError:
        return False
    return True
