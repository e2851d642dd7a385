# clparam Command Line Parameters — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Splits raw input tokens into a name and an optional value.

A token without the separator is a bare name (`-h`). A token with exactly one
separator is a name and a value (`--count=10`); either side may be empty and
the result is still well-defined, leaving the decision to the validation
pipeline. A token with the separator more than once cannot be interpreted at
all and raises `AmbiguousTokenError` immediately.
"""
from dataclasses import dataclass

from clparam.exceptions import AmbiguousTokenError


@dataclass(frozen=True)
class TokenParts:
    """
    The parts of one input token.

    Attributes:
        token (str): The token as supplied.
        name (str): The part before the separator, or the whole token.
        value (str | None): The part after the separator; None if the token
            has no separator.
    """

    token: str
    name: str
    value: str | None = None

    @property
    def has_value(self) -> bool:
        return self.value is not None


class NameValueExtractor:
    """Splits tokens on a fixed name-value separator."""

    def __init__(self, separator: str = "=") -> None:
        self.separator = separator

    def split(self, token: str) -> TokenParts:
        """
        Split `token` into its name and value.

        Raises:
            AmbiguousTokenError: If the separator occurs more than once.
        """
        occurrences = token.count(self.separator)
        if occurrences == 0:
            return TokenParts(token=token, name=token)
        if occurrences > 1:
            raise AmbiguousTokenError(token, self.separator)
        name, _, value = token.partition(self.separator)
        return TokenParts(token=token, name=name, value=value)

    def extract_name_from(self, token: str) -> str:
        return self.split(token).name

    def extract_value_from(self, token: str) -> str | None:
        return self.split(token).value

    def contains_separator(self, token: str) -> bool:
        return self.separator in token
