"""XML document parsing and compiled XPath queries (lxml)."""

from wrangler.markup.document import (
    DocumentParser,
    MalformedDocumentError,
    ParserConfigurationError,
    strip_trailing_nul,
)
from wrangler.markup.query import CompiledQuery, QuerySyntaxError, compile_query

__all__ = [
    "CompiledQuery",
    "DocumentParser",
    "MalformedDocumentError",
    "ParserConfigurationError",
    "QuerySyntaxError",
    "compile_query",
    "strip_trailing_nul",
]
