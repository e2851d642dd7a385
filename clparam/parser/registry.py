# clparam Command Line Parameters — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `ParameterRegistry`, the insertion-ordered collection of registered
parameters.

Lookup is by name: short and full names of all parameters share one namespace,
so a name can never refer to two parameters. Iteration follows registration
order, which keeps error messages deterministic.
"""
from typing import Iterator

from clparam.exceptions import RegistrationError
from clparam.parser.parameter import Parameter


class ParameterRegistry:
    """Insertion-ordered, name-indexed collection of `Parameter` objects."""

    def __init__(self) -> None:
        self._parameters: list[Parameter] = []
        self._name_map: dict[str, Parameter] = {}

    def check_names_available(self, *names: str) -> None:
        """Raise RegistrationError if any of `names` is already registered."""
        for name in names:
            if name and name in self._name_map:
                existing = self._name_map[name]
                raise RegistrationError(
                    f"Name '{name}' is already used by parameter "
                    f"'{existing.short_name}'"
                )

    def add(self, parameter: Parameter) -> None:
        self.check_names_available(*parameter.names)
        for name in parameter.names:
            self._name_map[name] = parameter
        self._parameters.append(parameter)

    def find(self, name: str) -> Parameter | None:
        """Return the parameter registered under the short or full `name`."""
        return self._name_map.get(name)

    def find_by_order(self, position: int) -> Parameter | None:
        """Return the parameter whose unnamed form sits at `position`."""
        return next((p for p in self._parameters if p.order == position), None)

    def has_ordered(self) -> bool:
        return any(p.order is not None for p in self._parameters)

    @property
    def names(self) -> list[str]:
        return list(self._name_map)

    def __contains__(self, name: object) -> bool:
        return name in self._name_map

    def __iter__(self) -> Iterator[Parameter]:
        return iter(self._parameters)

    def __len__(self) -> int:
        return len(self._parameters)

    def __repr__(self) -> str:
        return f"ParameterRegistry(parameters={len(self._parameters)})"
