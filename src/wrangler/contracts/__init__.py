"""Shared contracts for cross-boundary data types.

This package is a LEAF MODULE with no outbound dependencies to core,
markup, directives or engine.

Import patterns:
    from wrangler.contracts import Row, Arguments, TokenType
"""

from wrangler.contracts.arguments import Arguments
from wrangler.contracts.context import ExecutorContext
from wrangler.contracts.enums import DirectiveState, TokenType
from wrangler.contracts.errors import (
    DirectiveExecutionError,
    DirectiveLifecycleError,
    DirectiveParseError,
    WranglerError,
)
from wrangler.contracts.results import QueryResult
from wrangler.contracts.row import Row
from wrangler.contracts.sentinels import MISSING
from wrangler.contracts.tokens import ColumnName, Text, Token
from wrangler.contracts.usage import ParameterDefinition, UsageDefinition
from wrangler.contracts.values import DocumentValue, FieldValue, OtherValue, TextValue, classify

__all__ = [
    # Arguments
    "Arguments",
    "ColumnName",
    "ParameterDefinition",
    "Text",
    "Token",
    "UsageDefinition",
    # Rows and values
    "MISSING",
    "DocumentValue",
    "FieldValue",
    "OtherValue",
    "Row",
    "TextValue",
    "classify",
    # Results and context
    "ExecutorContext",
    "QueryResult",
    # Enums
    "DirectiveState",
    "TokenType",
    # Errors
    "DirectiveExecutionError",
    "DirectiveLifecycleError",
    "DirectiveParseError",
    "WranglerError",
]
