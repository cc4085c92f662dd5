"""Directive system: base class, registry and built-in directives.

Directives are accessed via DirectiveManager, not direct imports:
    manager = DirectiveManager()
    manager.register_builtin_directives()
    directive = manager.create("extract-xpath")
"""

from wrangler.directives.base import BaseDirective
from wrangler.directives.hookspecs import hookimpl, hookspec
from wrangler.directives.manager import DirectiveManager, DirectiveSpec

__all__ = [
    "BaseDirective",
    "DirectiveManager",
    "DirectiveSpec",
    "hookimpl",
    "hookspec",
]
