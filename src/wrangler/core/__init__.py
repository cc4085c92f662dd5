"""Core infrastructure: configuration, logging and invocation parsing."""

from wrangler.core.config import (
    DirectiveSettings,
    LoggingSettings,
    RecipeSettings,
    load_settings,
)
from wrangler.core.invocation import parse_invocation, tokenize
from wrangler.core.logging import configure_logging

__all__ = [
    "DirectiveSettings",
    "LoggingSettings",
    "RecipeSettings",
    "configure_logging",
    "load_settings",
    "parse_invocation",
    "tokenize",
]
