"""Typed argument tokens produced by the invocation parser.

Each token carries its raw string value and a class-level TokenType so that
argument validation can compare declared and supplied kinds without
isinstance chains.
"""

from dataclasses import dataclass
from typing import ClassVar

from wrangler.contracts.enums import TokenType


@dataclass(frozen=True, slots=True)
class Token:
    """Base class for argument tokens."""

    value: str
    token_type: ClassVar[TokenType]


@dataclass(frozen=True, slots=True)
class Text(Token):
    """Opaque string literal, e.g. an XPath expression."""

    token_type: ClassVar[TokenType] = TokenType.TEXT


@dataclass(frozen=True, slots=True)
class ColumnName(Token):
    """Reference to a row field by name."""

    token_type: ClassVar[TokenType] = TokenType.COLUMN_NAME


TOKEN_CLASSES: dict[TokenType, type[Token]] = {
    TokenType.TEXT: Text,
    TokenType.COLUMN_NAME: ColumnName,
}
