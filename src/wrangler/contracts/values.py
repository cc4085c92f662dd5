"""Tagged union over the row field values a directive distinguishes.

Row values are dynamically typed. Directives that treat text, parsed
documents and everything else differently classify the value once and
match on the tag:

    match classify(row.get("payload")):
        case DocumentValue(document=doc):
            ...
        case TextValue(text=text):
            ...
        case OtherValue():
            ...
"""

from dataclasses import dataclass
from typing import Any

from lxml import etree


@dataclass(frozen=True, slots=True)
class TextValue:
    """Raw text, e.g. an unparsed XML payload."""

    text: str


@dataclass(frozen=True, slots=True)
class DocumentValue:
    """An already-parsed document tree."""

    document: etree._ElementTree


@dataclass(frozen=True, slots=True)
class OtherValue:
    """Any value that is neither text nor a document."""

    value: Any


FieldValue = TextValue | DocumentValue | OtherValue


def classify(value: Any) -> FieldValue:
    """Tag a raw row value."""
    if isinstance(value, etree._ElementTree):
        return DocumentValue(value)
    if isinstance(value, str):
        return TextValue(value)
    return OtherValue(value)
