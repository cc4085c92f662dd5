# src/wrangler/markup/query.py
"""Compiled XPath queries with scalar string results.

An expression is compiled once and evaluated against many documents. Every
evaluation is reduced to a single string the way XPath 1.0's string()
function converts values:

- node-set: string-value of the first node in document order
- boolean: "true" or "false"
- number: "NaN", "Infinity", "-Infinity", integral values without a
  fractional part, everything else in plain decimal notation
- string: unchanged

Compilation rejects syntax errors and unbalanced parentheses or brackets,
then evaluates the expression once against a one-element document. That
trial catches undeclared namespace prefixes, unknown functions and wrong
argument counts wherever it reaches them. Errors that only surface for
some documents (a type error in a predicate that runs only when its step
matches) and empty node-sets are misses, returned as QueryResult.no_match()
rather than raised.
"""

import math
from decimal import Decimal
from typing import Any

from lxml import etree

from wrangler.contracts.results import QueryResult

_OPENERS = {"(": ")", "[": "]"}
_CLOSERS = {")": "(", "]": "["}


class QuerySyntaxError(ValueError):
    """Raised when an expression is not valid XPath."""

    def __init__(self, expression: str, diagnostic: str) -> None:
        self.expression = expression
        self.diagnostic = diagnostic
        super().__init__(f"XPath '{expression}' is not valid xpath expression. {diagnostic}")


def _check_balanced(expression: str) -> None:
    """Reject '(' and '[' left open or closed out of order.

    libxml2 accepts unterminated calls such as "count(" at compile time.
    XPath string literals have no escapes, so a quote runs to the next
    matching quote.
    """
    stack: list[tuple[str, int]] = []
    quote: str | None = None
    for pos, ch in enumerate(expression):
        if quote is not None:
            if ch == quote:
                quote = None
        elif ch in ("'", '"'):
            quote = ch
        elif ch in _OPENERS:
            stack.append((ch, pos))
        elif ch in _CLOSERS:
            if not stack or stack[-1][0] != _CLOSERS[ch]:
                raise QuerySyntaxError(expression, f"Unexpected '{ch}' at position {pos}")
            stack.pop()
    if quote is not None:
        raise QuerySyntaxError(expression, "Unterminated string literal")
    if stack:
        opener, pos = stack[-1]
        raise QuerySyntaxError(expression, f"Unclosed '{opener}' at position {pos}, expected '{_OPENERS[opener]}'")


def compile_query(expression: str) -> "CompiledQuery":
    """Compile an XPath expression.

    The compiled expression is evaluated once against a one-element
    document so that errors which depend only on the expression (undeclared
    prefix, unknown function, wrong argument count) fail here rather than
    on every row.

    Raises:
        QuerySyntaxError: If the expression does not compile
    """
    if not expression.strip():
        raise QuerySyntaxError(expression, "Empty expression")
    try:
        xpath = etree.XPath(expression, smart_strings=False)
    except etree.XPathSyntaxError as e:
        raise QuerySyntaxError(expression, str(e)) from e
    _check_balanced(expression)
    try:
        xpath(etree.ElementTree(etree.Element("_")))
    except etree.XPathError as e:
        raise QuerySyntaxError(expression, str(e)) from e
    return CompiledQuery(expression, xpath)


def format_number(value: float) -> str:
    """Format a number the way XPath 1.0 converts it to a string."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer():
        return str(int(value))
    return format(Decimal(repr(value)), "f")


class CompiledQuery:
    """Reusable compiled XPath expression.

    Not thread-safe: lxml XPath objects must not be evaluated from two
    threads at once. Each directive instance owns its own CompiledQuery.
    """

    __slots__ = ("_expression", "_string_value", "_xpath")

    def __init__(self, expression: str, xpath: etree.XPath) -> None:
        self._expression = expression
        self._xpath = xpath
        self._string_value = etree.XPath("string()", smart_strings=False)

    @property
    def expression(self) -> str:
        return self._expression

    def evaluate(self, document: etree._ElementTree) -> QueryResult:
        """Evaluate against a document and reduce the result to a string."""
        try:
            result = self._xpath(document)
        except etree.XPathError:
            return QueryResult.no_match()
        return self._to_result(result)

    def _to_result(self, result: Any) -> QueryResult:
        if isinstance(result, list):
            if not result:
                return QueryResult.no_match()
            return QueryResult.match(self._node_string(result[0]))
        if isinstance(result, bool):
            return QueryResult.match("true" if result else "false")
        if isinstance(result, float):
            return QueryResult.match(format_number(result))
        return QueryResult.match(str(result))

    def _node_string(self, node: Any) -> str:
        if isinstance(node, etree._Element):
            return str(self._string_value(node))
        if isinstance(node, tuple):
            # Namespace axis nodes come back as (prefix, uri)
            return str(node[1])
        return str(node)

    def __repr__(self) -> str:
        return f"CompiledQuery({self._expression!r})"
