"""Usage definitions: the declared parameters of a directive.

A directive's define() returns a UsageDefinition listing its named, typed
parameters in positional order. The invocation parser matches caller text
against it and Arguments.from_tokens() validates the result.

Example:
    usage = (
        UsageDefinition.builder("extract-xpath")
        .define("xpath", TokenType.TEXT)
        .define("source", TokenType.COLUMN_NAME)
        .define("target", TokenType.COLUMN_NAME)
        .build()
    )
    str(usage)  # "extract-xpath <xpath> :source :target"
"""

from __future__ import annotations

from dataclasses import dataclass

from wrangler.contracts.enums import TokenType


@dataclass(frozen=True, slots=True)
class ParameterDefinition:
    """One declared parameter of a directive."""

    name: str
    token_type: TokenType
    optional: bool = False

    def render(self) -> str:
        """Render the parameter as it appears in the usage string."""
        if self.token_type is TokenType.COLUMN_NAME:
            rendered = f":{self.name}"
        else:
            rendered = f"<{self.name}>"
        return f"[{rendered}]" if self.optional else rendered


@dataclass(frozen=True, slots=True)
class UsageDefinition:
    """Ordered, immutable declaration of a directive's parameters."""

    directive: str
    parameters: tuple[ParameterDefinition, ...]

    @staticmethod
    def builder(directive: str) -> UsageDefinitionBuilder:
        return UsageDefinitionBuilder(directive)

    def parameter(self, name: str) -> ParameterDefinition | None:
        for param in self.parameters:
            if param.name == name:
                return param
        return None

    @property
    def required(self) -> tuple[ParameterDefinition, ...]:
        return tuple(p for p in self.parameters if not p.optional)

    def __str__(self) -> str:
        return " ".join([self.directive, *(p.render() for p in self.parameters)])


class UsageDefinitionBuilder:
    """Fluent builder for UsageDefinition.

    Raises:
        ValueError: If a parameter name is empty or declared twice, or a
            required parameter follows an optional one.
    """

    def __init__(self, directive: str) -> None:
        if not directive or not directive.strip():
            raise ValueError("directive name cannot be empty")
        self._directive = directive
        self._parameters: list[ParameterDefinition] = []

    def define(self, name: str, token_type: TokenType, *, optional: bool = False) -> UsageDefinitionBuilder:
        if not name or not name.strip():
            raise ValueError("parameter name cannot be empty")
        if any(p.name == name for p in self._parameters):
            raise ValueError(f"Duplicate parameter '{name}' in usage definition for '{self._directive}'")
        if not optional and any(p.optional for p in self._parameters):
            raise ValueError(f"Required parameter '{name}' cannot follow an optional parameter")
        self._parameters.append(ParameterDefinition(name, token_type, optional))
        return self

    def build(self) -> UsageDefinition:
        return UsageDefinition(self._directive, tuple(self._parameters))
