# src/wrangler/core/config.py
"""Recipe configuration: Pydantic settings loaded through Dynaconf.

A recipe file lists the directives to run, in order, plus logging options:

    name: books
    logging:
      level: INFO
      json_output: false
    directives:
      - invocation: "extract-xpath '/bookstore/book/title/text()' :payload :title"
      - directive: extract-xpath
        options:
          xpath: /bookstore/book/author/text()
          source: payload
          target: author

Environment variables prefixed WRANGLER_ override file values
(WRANGLER_LOGGING__LEVEL=DEBUG), and ${VAR} / ${VAR:-default} patterns in
string values are expanded from the environment.
"""

import os
import re
from pathlib import Path
from typing import Any, Literal, Self

from pydantic import BaseModel, Field, field_validator, model_validator

# Matches ${VAR} or ${VAR:-default}
_ENV_VAR_PATTERN = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*)(?::-([^}]*))?\}")


class LoggingSettings(BaseModel):
    """Logging output configuration."""

    model_config = {"frozen": True, "extra": "forbid"}

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Root log level",
    )
    json_output: bool = Field(
        default=False,
        description="Render log records as JSON instead of console text",
    )

    @field_validator("level", mode="before")
    @classmethod
    def _normalize_level(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.upper()
        return v


class DirectiveSettings(BaseModel):
    """One directive step of a recipe.

    Exactly one form must be used:
    - invocation: the textual directive line
    - directive + options: the directive name and its arguments by name
    """

    model_config = {"frozen": True, "extra": "forbid"}

    invocation: str | None = Field(
        default=None,
        description="Directive line, e.g. \"extract-xpath '/a/b/text()' :payload :b\"",
    )
    directive: str | None = Field(
        default=None,
        description="Directive name (use with options)",
    )
    options: dict[str, str] = Field(
        default_factory=dict,
        description="Directive arguments by parameter name",
    )

    @model_validator(mode="after")
    def _validate_form(self) -> Self:
        if self.invocation is not None and self.directive is not None:
            raise ValueError("Use either 'invocation' or 'directive' + 'options', not both")
        if self.invocation is None and self.directive is None:
            raise ValueError("A directive step needs 'invocation' or 'directive'")
        if self.invocation is not None and self.options:
            raise ValueError("'options' can only be used together with 'directive'")
        if self.invocation is not None and not self.invocation.strip():
            raise ValueError("invocation cannot be empty")
        if self.directive is not None and not self.directive.strip():
            raise ValueError("directive cannot be empty")
        return self


class RecipeSettings(BaseModel):
    """Top-level recipe configuration.

    All settings are validated and frozen after construction.
    """

    model_config = {"frozen": True, "extra": "forbid"}

    name: str = Field(
        default="recipe",
        description="Recipe name used in log records",
    )
    directives: list[DirectiveSettings] = Field(
        min_length=1,
        description="Ordered list of directive steps",
    )
    logging: LoggingSettings = Field(
        default_factory=LoggingSettings,
        description="Logging configuration",
    )


def _expand_env_vars(config: dict[str, Any]) -> dict[str, Any]:
    """Recursively expand ${VAR} and ${VAR:-default} patterns in config values.

    Args:
        config: Configuration dict (may contain nested structures)

    Returns:
        New dict with environment variables expanded
    """

    def _expand_string(value: str) -> str:
        def replacer(match: re.Match[str]) -> str:
            var_name = match.group(1)
            default = match.group(2)  # None if no default specified
            env_value = os.environ.get(var_name)
            if env_value is not None:
                return env_value
            if default is not None:
                return default
            # No env var and no default - keep original
            return match.group(0)

        return _ENV_VAR_PATTERN.sub(replacer, value)

    def _expand_value(value: Any) -> Any:
        if isinstance(value, str):
            return _expand_string(value)
        elif isinstance(value, dict):
            return {k: _expand_value(v) for k, v in value.items()}
        elif isinstance(value, list):
            return [_expand_value(item) for item in value]
        else:
            return value

    return {k: _expand_value(v) for k, v in config.items()}


def _lower_keys(value: Any) -> Any:
    """Lowercase dict keys recursively, leaving directive options alone."""
    if isinstance(value, dict):
        return {k.lower(): (v if k.lower() == "options" else _lower_keys(v)) for k, v in value.items()}
    if isinstance(value, list):
        return [_lower_keys(item) for item in value]
    return value


def load_settings(config_path: Path) -> RecipeSettings:
    """Load a recipe from YAML with environment variable overrides.

    Uses Dynaconf for multi-source loading with precedence:
    1. Environment variables (WRANGLER_*) - highest priority
    2. Config file (recipe.yaml)
    3. Defaults from Pydantic schema - lowest priority

    Args:
        config_path: Path to YAML recipe file

    Returns:
        Validated RecipeSettings instance

    Raises:
        ValidationError: If configuration fails Pydantic validation
        FileNotFoundError: If config file doesn't exist
    """
    from dynaconf import Dynaconf

    # Explicit check for file existence (Dynaconf silently accepts missing files)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    dynaconf_settings = Dynaconf(
        envvar_prefix="WRANGLER",
        settings_files=[str(config_path)],
        environments=False,  # No [default]/[production] sections
        load_dotenv=False,  # Don't auto-load .env
        merge_enabled=True,  # Deep merge nested dicts
    )

    # Dynaconf returns uppercase keys; convert to lowercase for Pydantic
    # Also filter out internal Dynaconf settings
    internal_keys = {"LOAD_DOTENV", "ENVIRONMENTS", "SETTINGS_FILES"}
    raw_config = {k.lower(): _lower_keys(v) for k, v in dynaconf_settings.as_dict().items() if k not in internal_keys}

    raw_config = _expand_env_vars(raw_config)

    return RecipeSettings(**raw_config)
