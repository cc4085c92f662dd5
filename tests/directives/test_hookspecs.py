# tests/directives/test_hookspecs.py
"""Tests for pluggy hook specifications."""


class TestHookspecs:
    """pluggy hook specifications."""

    def test_markers_use_project_name(self) -> None:
        from wrangler.directives.hookspecs import PROJECT_NAME, hookimpl, hookspec

        assert PROJECT_NAME == "wrangler"
        assert hookspec.project_name == PROJECT_NAME
        assert hookimpl.project_name == PROJECT_NAME

    def test_directive_hook_defined(self) -> None:
        from wrangler.directives.hookspecs import WranglerDirectiveSpec

        assert hasattr(WranglerDirectiveSpec, "wrangler_get_directives")

    def test_builtin_hookimpl_returns_extractor(self) -> None:
        from wrangler.directives.extract_xpath import XPathExtractor
        from wrangler.directives.hookimpl import BuiltinDirectives

        assert BuiltinDirectives().wrangler_get_directives() == [XPathExtractor]
