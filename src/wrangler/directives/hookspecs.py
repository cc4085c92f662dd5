# src/wrangler/directives/hookspecs.py
"""pluggy hook specifications for wrangler directives.

Directive packages implement these hooks to register themselves.
The DirectiveManager calls them when building its registry.

Usage (implementing a plugin):
    from wrangler.directives.hookspecs import hookimpl

    class MyDirectives:
        @hookimpl  # NOT @hookspec - that's for defining specs
        def wrangler_get_directives(self):
            return [MyDirective]
"""

from typing import TYPE_CHECKING

import pluggy

if TYPE_CHECKING:
    from wrangler.directives.base import BaseDirective

# Project name for pluggy
PROJECT_NAME = "wrangler"

# Hook specification marker
hookspec = pluggy.HookspecMarker(PROJECT_NAME)

# Hook implementation marker (for plugins to use)
hookimpl = pluggy.HookimplMarker(PROJECT_NAME)


class WranglerDirectiveSpec:
    """Hook specifications for directive plugins."""

    @hookspec
    def wrangler_get_directives(self) -> list[type["BaseDirective"]]:  # type: ignore[empty-body]
        """Return directive classes.

        Returns:
            List of directive classes (not instances)
        """
