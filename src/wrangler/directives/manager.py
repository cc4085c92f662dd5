# src/wrangler/directives/manager.py
"""Directive registry: registration, lookup and instantiation.

Uses pluggy for hook-based registration. Directives are registered
explicitly through hook implementations; nothing is discovered by
scanning modules.
"""

from dataclasses import dataclass

import pluggy

from wrangler.contracts.errors import DirectiveParseError
from wrangler.directives.base import BaseDirective
from wrangler.directives.hookspecs import PROJECT_NAME, WranglerDirectiveSpec


@dataclass(frozen=True)
class DirectiveSpec:
    """Registration record for a directive.

    Frozen for immutability - specs shouldn't change after creation.
    """

    name: str
    description: str
    usage: str

    @classmethod
    def from_directive(cls, directive_cls: type[BaseDirective]) -> "DirectiveSpec":
        return cls(
            name=directive_cls.name,
            description=directive_cls.description,
            usage=str(directive_cls.define()),
        )


class DirectiveManager:
    """Manages directive registration and lookup.

    Usage:
        manager = DirectiveManager()
        manager.register_builtin_directives()

        directive = manager.create("extract-xpath")
    """

    def __init__(self) -> None:
        self._pm = pluggy.PluginManager(PROJECT_NAME)
        self._pm.add_hookspecs(WranglerDirectiveSpec)

        # Cache - map name to directive class for duplicate detection
        self._directives: dict[str, type[BaseDirective]] = {}

    def register_builtin_directives(self) -> None:
        """Register the directives shipped with wrangler."""
        from wrangler.directives.hookimpl import BuiltinDirectives

        self.register(BuiltinDirectives())

    def register(self, plugin: object) -> None:
        """Register a plugin object implementing wrangler hooks.

        Raises:
            ValueError: If two directives share a name
        """
        self._pm.register(plugin)
        try:
            self._refresh_cache()
        except ValueError:
            self._pm.unregister(plugin)
            raise

    def _refresh_cache(self) -> None:
        new_directives: dict[str, type[BaseDirective]] = {}
        for directives in self._pm.hook.wrangler_get_directives():
            for cls in directives:
                name = cls.name
                if name in new_directives:
                    raise ValueError(f"Duplicate directive name: '{name}'. Already registered by {new_directives[name].__name__}")
                new_directives[name] = cls

        # All validated, update cache
        self._directives = new_directives

    # === Getters ===

    def get_directives(self) -> list[type[BaseDirective]]:
        """Get all registered directive classes."""
        return list(self._directives.values())

    def get_directive_by_name(self, name: str) -> type[BaseDirective] | None:
        """Get directive class by name."""
        return self._directives.get(name)

    def get_specs(self) -> list[DirectiveSpec]:
        """Describe every registered directive, sorted by name."""
        return [DirectiveSpec.from_directive(cls) for _, cls in sorted(self._directives.items())]

    def create(self, name: str) -> BaseDirective:
        """Instantiate a registered directive (UNINITIALIZED).

        Raises:
            DirectiveParseError: If no directive has that name
        """
        directive_cls = self._directives.get(name)
        if directive_cls is None:
            available = ", ".join(sorted(self._directives)) or "none"
            raise DirectiveParseError(f"Unknown directive '{name}'. Available directives: {available}")
        return directive_cls()
