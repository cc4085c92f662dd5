"""Hook implementation registering the built-in directives."""

from wrangler.directives.base import BaseDirective
from wrangler.directives.extract_xpath import XPathExtractor
from wrangler.directives.hookspecs import hookimpl


class BuiltinDirectives:
    """Registers directives shipped with wrangler."""

    @hookimpl
    def wrangler_get_directives(self) -> list[type[BaseDirective]]:
        return [XPathExtractor]
