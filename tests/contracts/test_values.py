# tests/contracts/test_values.py
"""Tests for field value classification."""

import pytest
from lxml import etree

from wrangler.contracts import DocumentValue, OtherValue, TextValue, classify


class TestClassify:
    """classify() tags raw row values."""

    def test_string_is_text(self) -> None:
        assert classify("<a/>") == TextValue("<a/>")

    def test_empty_string_is_text(self) -> None:
        assert classify("") == TextValue("")

    def test_element_tree_is_document(self) -> None:
        tree = etree.fromstring(b"<a/>").getroottree()

        tagged = classify(tree)

        assert isinstance(tagged, DocumentValue)
        assert tagged.document is tree

    @pytest.mark.parametrize("value", [42, 4.2, None, b"<a/>", ["<a/>"], {"a": 1}])
    def test_everything_else_is_other(self, value: object) -> None:
        tagged = classify(value)

        assert isinstance(tagged, OtherValue)
        assert tagged.value is value

    def test_bare_element_is_not_a_document(self) -> None:
        element = etree.fromstring(b"<a/>")

        assert isinstance(classify(element), OtherValue)
