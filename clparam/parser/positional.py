# clparam Command Line Parameters — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Resolves unnamed (positional) tokens to the parameters registered with an order.

Resolution runs only when at least one parameter has an order. A token is
unnamed when it contains no separator and is not the name of a registered
parameter. The n-th unnamed token is rewritten to `<short_name><sep><token>`
for the parameter registered with order n, so the rest of parsing treats it
exactly like a named token.
"""
from typing import Sequence

from clparam.exceptions import UnresolvedPositionalError
from clparam.logger import logger
from clparam.parser.extractor import NameValueExtractor
from clparam.parser.registry import ParameterRegistry


class UnnamedTokenResolver:
    """Rewrites unnamed tokens to named `name<sep>value` form."""

    def __init__(
        self, registry: ParameterRegistry, extractor: NameValueExtractor
    ) -> None:
        self.registry = registry
        self.extractor = extractor

    def is_unnamed(self, token: str) -> bool:
        if self.extractor.contains_separator(token):
            return False
        return token not in self.registry

    def resolve(self, tokens: Sequence[str]) -> list[str]:
        """
        Return `tokens` with every unnamed token rewritten to named form.

        Raises:
            UnresolvedPositionalError: If an unnamed token's position has no
                parameter registered with that order.
        """
        if not self.registry.has_ordered():
            return list(tokens)

        resolved: list[str] = []
        position = 0
        for token in tokens:
            if not self.is_unnamed(token):
                resolved.append(token)
                continue
            position += 1
            parameter = self.registry.find_by_order(position)
            if parameter is None:
                raise UnresolvedPositionalError(token, position)
            rewritten = f"{parameter.short_name}{self.extractor.separator}{token}"
            logger.debug("Unnamed token %r resolved to %r", token, rewritten)
            resolved.append(rewritten)
        return resolved
