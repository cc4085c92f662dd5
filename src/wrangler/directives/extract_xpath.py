# src/wrangler/directives/extract_xpath.py
"""extract-xpath directive.

XPath is a language for finding information in an XML document: it
navigates elements and attributes the way SQL navigates tables. This
directive evaluates one XPath expression against an XML payload held in a
source column and writes the scalar result into a target column.

Invocation:
    extract-xpath '/bookstore/book/title/text()' :payload :title

Error policy:
- Invalid XPath or an unusable XML parser fails initialize().
- A source string that is not well-formed XML aborts the whole batch.
  Rows earlier in the batch keep the values already written to them.
- A missing source column, or a value that is neither text nor a parsed
  document, leaves the row untouched.
- A query that finds nothing in a document leaves the row untouched.
"""

from lxml import etree

from wrangler.contracts.arguments import Arguments
from wrangler.contracts.context import ExecutorContext
from wrangler.contracts.enums import TokenType
from wrangler.contracts.errors import DirectiveExecutionError, DirectiveParseError
from wrangler.contracts.row import Row
from wrangler.contracts.sentinels import MISSING
from wrangler.contracts.tokens import ColumnName, Text
from wrangler.contracts.usage import UsageDefinition
from wrangler.contracts.values import DocumentValue, OtherValue, TextValue, classify
from wrangler.directives.base import BaseDirective
from wrangler.markup.document import DocumentParser, MalformedDocumentError, ParserConfigurationError
from wrangler.markup.query import CompiledQuery, QuerySyntaxError, compile_query


class XPathExtractor(BaseDirective):
    """Extract a scalar from an XML column with a compiled XPath expression."""

    name = "extract-xpath"
    description = "Extracts XPath from XML Document."

    def __init__(self) -> None:
        super().__init__()
        self._xpath: str | None = None
        self._source: str | None = None
        self._target: str | None = None
        self._query: CompiledQuery | None = None
        self._parser: DocumentParser | None = None

    @classmethod
    def define(cls) -> UsageDefinition:
        return (
            UsageDefinition.builder(cls.name)
            .define("xpath", TokenType.TEXT)
            .define("source", TokenType.COLUMN_NAME)
            .define("target", TokenType.COLUMN_NAME)
            .build()
        )

    def configure(self, arguments: Arguments) -> None:
        xpath = arguments.value("xpath", Text).value
        try:
            query = compile_query(xpath)
        except QuerySyntaxError as e:
            raise DirectiveParseError(str(e)) from e

        source = arguments.value("source", ColumnName).value
        target = arguments.value("target", ColumnName).value

        try:
            parser = DocumentParser()
        except ParserConfigurationError as e:
            raise DirectiveParseError(f"Unable to create a XML document factory. {e}") from e

        # Assign only once everything succeeded
        self._xpath = xpath
        self._query = query
        self._source = source
        self._target = target
        self._parser = parser

    def process(self, rows: list[Row], ctx: ExecutorContext) -> list[Row]:
        # initialize() guarantees these are set before process() is reachable
        assert self._query is not None
        assert self._parser is not None
        assert self._source is not None
        assert self._target is not None

        for row in rows:
            value = row.get(self._source, MISSING)
            if value is MISSING:
                continue

            document: etree._ElementTree
            match classify(value):
                case DocumentValue(document=parsed):
                    document = parsed
                case TextValue(text=text):
                    try:
                        document = self._parser.parse(text)
                    except MalformedDocumentError as e:
                        raise DirectiveExecutionError(self.name, f"Unable to parse XML document. {e}") from e
                case OtherValue():
                    continue

            result = self._query.evaluate(document)
            if result.matched:
                assert result.value is not None
                row.add_or_set(self._target, result.value)

        return rows

    def close(self) -> None:
        self._query = None
        self._parser = None
