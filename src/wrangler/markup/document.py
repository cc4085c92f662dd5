# src/wrangler/markup/document.py
"""Namespace-aware XML document parsing.

Documents are parsed with comments removed and with entity resolution and
network access disabled. Upstream producers sometimes pad strings with a
C-style terminator, so exactly one trailing NUL is stripped before parsing.
Nothing else is trimmed: a second NUL, or a NUL anywhere else, is left in
place and makes the document malformed.
"""

from typing import Final

from lxml import etree

NUL: Final[str] = "\x00"


class ParserConfigurationError(Exception):
    """Raised when the underlying XML parser cannot be constructed."""


class MalformedDocumentError(ValueError):
    """Raised when text is not well-formed XML."""


def strip_trailing_nul(text: str) -> str:
    """Remove a single trailing NUL character, if present."""
    if text.endswith(NUL):
        return text[:-1]
    return text


class DocumentParser:
    """Parses text into lxml document trees.

    One parser instance is reused for every row a directive processes.
    lxml parsers are not safe to share between threads, so each directive
    instance owns its own DocumentParser.

    Raises:
        ParserConfigurationError: If lxml rejects the parser options
    """

    def __init__(self) -> None:
        try:
            self._parser = etree.XMLParser(
                remove_comments=True,
                resolve_entities=False,
                no_network=True,
            )
        except (TypeError, ValueError, etree.LxmlError) as e:
            raise ParserConfigurationError(str(e)) from e

    def parse(self, text: str) -> etree._ElementTree:
        """Sanitize and parse text into a document tree.

        Args:
            text: Raw XML text, optionally ending in one NUL terminator

        Returns:
            The parsed document

        Raises:
            MalformedDocumentError: If the sanitized text is not well-formed
        """
        sanitized = strip_trailing_nul(text)
        try:
            payload = sanitized.encode("utf-8")
        except UnicodeEncodeError as e:
            raise MalformedDocumentError(f"Document is not valid UTF-8 text: {e}") from e

        if not payload.strip():
            raise MalformedDocumentError("Document is empty")

        try:
            root = etree.fromstring(payload, self._parser)
        except etree.XMLSyntaxError as e:
            raise MalformedDocumentError(str(e)) from e
        return root.getroottree()
