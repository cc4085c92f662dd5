"""Validated invocation arguments.

Arguments is the bridge between a parsed invocation and a directive's
initialize(). Construction validates every supplied token against the
directive's UsageDefinition, so a directive can read its parameters
without re-checking kinds.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import TypeVar

from wrangler.contracts.errors import DirectiveParseError
from wrangler.contracts.tokens import TOKEN_CLASSES, Token
from wrangler.contracts.usage import UsageDefinition

T = TypeVar("T", bound=Token)


class Arguments(Mapping[str, Token]):
    """Ordered mapping of parameter name to typed token.

    Use the factory methods; the constructor does not validate.
    """

    __slots__ = ("_tokens", "_usage")

    def __init__(self, usage: UsageDefinition, tokens: dict[str, Token]) -> None:
        self._usage = usage
        self._tokens = tokens

    @classmethod
    def from_tokens(cls, usage: UsageDefinition, tokens: Mapping[str, Token]) -> Arguments:
        """Validate tokens against the usage definition.

        Raises:
            DirectiveParseError: If a token is undeclared or of the wrong
                kind, or a required parameter is missing.
        """
        for name, token in tokens.items():
            param = usage.parameter(name)
            if param is None:
                raise DirectiveParseError(f"Unknown argument '{name}' for directive. Usage: {usage}")
            if token.token_type is not param.token_type:
                raise DirectiveParseError(
                    f"Argument '{name}' must be of type {param.token_type}, got {token.token_type}. Usage: {usage}"
                )

        missing = [p.name for p in usage.required if p.name not in tokens]
        if missing:
            raise DirectiveParseError(f"Missing required argument(s): {', '.join(missing)}. Usage: {usage}")

        ordered = {p.name: tokens[p.name] for p in usage.parameters if p.name in tokens}
        return cls(usage, ordered)

    @classmethod
    def from_options(cls, usage: UsageDefinition, options: Mapping[str, str]) -> Arguments:
        """Build arguments from plain option strings (settings files).

        Each value is wrapped in the token class the usage definition
        declares for that parameter.

        Raises:
            DirectiveParseError: If an option is undeclared, not a string,
                or a required option is missing.
        """
        tokens: dict[str, Token] = {}
        for name, raw in options.items():
            param = usage.parameter(name)
            if param is None:
                raise DirectiveParseError(f"Unknown argument '{name}' for directive. Usage: {usage}")
            if not isinstance(raw, str):
                raise DirectiveParseError(f"Argument '{name}' must be a string, got {type(raw).__name__}")
            tokens[name] = TOKEN_CLASSES[param.token_type](raw)
        return cls.from_tokens(usage, tokens)

    @property
    def usage(self) -> UsageDefinition:
        return self._usage

    def value(self, name: str, kind: type[T]) -> T:
        """Return the token for name, narrowed to the expected class.

        Raises:
            KeyError: If the argument was not supplied
            TypeError: If the token is not an instance of kind
        """
        token = self._tokens[name]
        if not isinstance(token, kind):
            raise TypeError(f"Argument '{name}' is {type(token).__name__}, expected {kind.__name__}")
        return token

    def __getitem__(self, name: str) -> Token:
        return self._tokens[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._tokens)

    def __len__(self) -> int:
        return len(self._tokens)

    def __repr__(self) -> str:
        return f"Arguments({self._usage.directive!r}, {self._tokens!r})"
