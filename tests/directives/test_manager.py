# tests/directives/test_manager.py
"""Tests for the directive registry."""

import pytest

from wrangler.contracts import Arguments, DirectiveParseError, DirectiveState, ExecutorContext, Row, UsageDefinition
from wrangler.directives.base import BaseDirective
from wrangler.directives.extract_xpath import XPathExtractor
from wrangler.directives.hookspecs import hookimpl
from wrangler.directives.manager import DirectiveManager, DirectiveSpec


class _Noop(BaseDirective):
    name = "noop"
    description = "Does nothing."

    @classmethod
    def define(cls) -> UsageDefinition:
        return UsageDefinition.builder(cls.name).build()

    def configure(self, arguments: Arguments) -> None:
        pass

    def process(self, rows: list[Row], ctx: ExecutorContext) -> list[Row]:
        return rows


class _NoopPlugin:
    @hookimpl
    def wrangler_get_directives(self) -> list[type[BaseDirective]]:
        return [_Noop]


class TestDirectiveManager:
    """Registration and lookup."""

    def test_create_manager(self) -> None:
        manager = DirectiveManager()

        assert manager.get_directives() == []

    def test_register_builtin_directives(self) -> None:
        manager = DirectiveManager()

        manager.register_builtin_directives()

        assert manager.get_directive_by_name("extract-xpath") is XPathExtractor

    def test_register_plugin(self) -> None:
        manager = DirectiveManager()
        manager.register_builtin_directives()

        manager.register(_NoopPlugin())

        assert {cls.name for cls in manager.get_directives()} == {"extract-xpath", "noop"}

    def test_unknown_name_lookup_returns_none(self) -> None:
        assert DirectiveManager().get_directive_by_name("nope") is None

    def test_duplicate_name_rejected(self) -> None:
        class _Other(_Noop):
            pass

        class _OtherPlugin:
            @hookimpl
            def wrangler_get_directives(self) -> list[type[BaseDirective]]:
                return [_Other]

        manager = DirectiveManager()
        manager.register(_NoopPlugin())

        with pytest.raises(ValueError, match="Duplicate directive name: 'noop'"):
            manager.register(_OtherPlugin())

        # Failed registration leaves the registry unchanged
        assert manager.get_directives() == [_Noop]

    def test_create_returns_fresh_uninitialized_instances(self) -> None:
        manager = DirectiveManager()
        manager.register_builtin_directives()

        first = manager.create("extract-xpath")
        second = manager.create("extract-xpath")

        assert isinstance(first, XPathExtractor)
        assert first is not second
        assert first.state is DirectiveState.UNINITIALIZED

    def test_create_unknown_raises_parse_error(self) -> None:
        manager = DirectiveManager()
        manager.register_builtin_directives()

        with pytest.raises(DirectiveParseError, match="Unknown directive 'parse-xml'. Available directives: extract-xpath"):
            manager.create("parse-xml")

    def test_specs(self) -> None:
        manager = DirectiveManager()
        manager.register_builtin_directives()
        manager.register(_NoopPlugin())

        assert manager.get_specs() == [
            DirectiveSpec(
                name="extract-xpath",
                description="Extracts XPath from XML Document.",
                usage="extract-xpath <xpath> :source :target",
            ),
            DirectiveSpec(name="noop", description="Does nothing.", usage="noop"),
        ]
