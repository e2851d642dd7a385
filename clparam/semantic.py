# clparam Command Line Parameters — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Semantic value checkers for string parameters.

A parameter marked with `check_semantic(tag)` has its value (or its string
default, when the parameter is not supplied) passed to the checker registered
for that tag before any callback runs. A checker is a plain function that
takes the value text and either raises or returns `False` when the value is
not acceptable; any other return means the value passed.

Included Checkers:
- check_path_existence: The value names an existing filesystem path.
- check_ipv4: The value is a well-formed IPv4 address.
- check_ipv6: The value is a well-formed IPv6 address.
- check_ip: The value is a well-formed IPv4 or IPv6 address.

`SemanticCheckers` maps each `SemanticTag` to its checker. Each parser owns
one, so tests and applications can swap the filesystem and address checks
for their own functions.
"""
from __future__ import annotations

import ipaddress
from enum import Enum
from pathlib import Path
from typing import Callable, Iterator, Mapping

SemanticChecker = Callable[[str], bool | None]


class SemanticTag(Enum):
    """
    Defines the semantic check applied to a string parameter's value.

    Members:
        NONE: No semantic check (default).
        PATH: The value must be an existing filesystem path.
        IPV4: The value must be an IPv4 address.
        IPV6: The value must be an IPv6 address.
        IP: The value must be an IPv4 or an IPv6 address.

    Aliases:
        - "no_semantic" → "none"
        - "file" → "path"
    """

    NONE = "none"
    PATH = "path"
    IPV4 = "ipv4"
    IPV6 = "ipv6"
    IP = "ip"

    @classmethod
    def _get_alias(cls, value: str) -> str:
        aliases = {
            "no_semantic": "none",
            "file": "path",
        }
        return aliases.get(value, value)

    @classmethod
    def _missing_(cls, value: object) -> SemanticTag:
        if not isinstance(value, str):
            raise ValueError(f"Invalid {cls.__name__}: {value!r}")
        normalized = value.strip().lower()
        alias = cls._get_alias(normalized)
        for member in cls:
            if member.value == alias:
                return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Invalid {cls.__name__}: '{value}'. Must be one of: {valid}")

    def __str__(self) -> str:
        """Return the string representation of the semantic tag."""
        return self.value


def check_path_existence(value: str) -> None:
    """Checker for existing filesystem paths."""
    if not value or not Path(value).exists():
        raise ValueError("no such path")


def check_ipv4(value: str) -> None:
    """Checker for IPv4 addresses."""
    try:
        ipaddress.IPv4Address(value)
    except ValueError:
        raise ValueError("not an IPv4 address") from None


def check_ipv6(value: str) -> None:
    """Checker for IPv6 addresses."""
    try:
        ipaddress.IPv6Address(value)
    except ValueError:
        raise ValueError("not an IPv6 address") from None


def check_ip(value: str) -> None:
    """Checker for IPv4 or IPv6 addresses."""
    try:
        check_ipv4(value)
    except ValueError:
        try:
            check_ipv6(value)
        except ValueError:
            raise ValueError("not IPv4, not IPv6") from None


class SemanticCheckers(Mapping[SemanticTag, SemanticChecker]):
    """
    Mapping of semantic tags to checker functions.

    Starts with the built-in checkers; `register()` replaces the checker for a
    tag. `SemanticTag.NONE` never has a checker.
    """

    def __init__(self, checkers: Mapping[SemanticTag, SemanticChecker] | None = None):
        self._checkers: dict[SemanticTag, SemanticChecker] = {
            SemanticTag.PATH: check_path_existence,
            SemanticTag.IPV4: check_ipv4,
            SemanticTag.IPV6: check_ipv6,
            SemanticTag.IP: check_ip,
        }
        if checkers:
            for tag, checker in checkers.items():
                self.register(tag, checker)

    def register(self, tag: SemanticTag | str, checker: SemanticChecker) -> None:
        """Register `checker` for `tag`, replacing any existing checker."""
        tag = SemanticTag(tag)
        if tag is SemanticTag.NONE:
            raise ValueError("Cannot register a checker for SemanticTag.NONE")
        if not callable(checker):
            raise TypeError(f"Semantic checker for '{tag}' must be callable")
        self._checkers[tag] = checker

    def check(self, tag: SemanticTag, value: str) -> None:
        """
        Run the checker for `tag` on `value`.

        Raises:
            ValueError: If the checker returns False.
            Exception: Whatever the checker itself raises.
        """
        if tag is SemanticTag.NONE:
            return
        if self._checkers[tag](value) is False:
            raise ValueError("rejected by checker")

    def __getitem__(self, tag: SemanticTag) -> SemanticChecker:
        return self._checkers[tag]

    def __iter__(self) -> Iterator[SemanticTag]:
        return iter(self._checkers)

    def __len__(self) -> int:
        return len(self._checkers)
