# src/wrangler/engine/recipe.py
"""RecipeRunner - drives an ordered list of directives through their lifecycle.

Lifecycle Contract:
    open_recipe() | from_settings() -> [execute(batch, ctx)]* -> close()

- open_recipe loads a recipe file, configures logging from its logging
  section, then calls from_settings.
- from_settings creates and initializes every directive up front. If any
  directive fails to initialize, the ones already created are destroyed
  and the error propagates; no runner is returned.
- execute feeds one batch through each directive in order. A directive that
  aborts the batch aborts the whole call; earlier directives' mutations
  stay on the rows.
- close destroys every directive. It is idempotent.

This is not a scheduler: there is no partitioning, no parallelism and no
persistence. Callers own batching.
"""

from collections.abc import Sequence
from pathlib import Path
from types import TracebackType
from typing import Self

import structlog

from wrangler.contracts.arguments import Arguments
from wrangler.contracts.context import ExecutorContext
from wrangler.contracts.row import Row
from wrangler.core.config import DirectiveSettings, RecipeSettings, load_settings
from wrangler.core.invocation import parse_directive_name, parse_invocation
from wrangler.core.logging import configure_logging
from wrangler.directives.base import BaseDirective
from wrangler.directives.manager import DirectiveManager

logger = structlog.get_logger(__name__)


def build_directive(step: DirectiveSettings, manager: DirectiveManager) -> BaseDirective:
    """Create and initialize the directive for one recipe step.

    Raises:
        DirectiveParseError: If the directive is unknown, its arguments do
            not match its usage definition, or initialize() fails
    """
    if step.invocation is not None:
        directive = manager.create(parse_directive_name(step.invocation))
        arguments = parse_invocation(step.invocation, directive.define())
    else:
        assert step.directive is not None  # enforced by DirectiveSettings
        directive = manager.create(step.directive)
        arguments = Arguments.from_options(directive.define(), step.options)

    directive.initialize(arguments)
    return directive


def open_recipe(config_path: Path, manager: DirectiveManager | None = None) -> "RecipeRunner":
    """Load a recipe file, apply its logging section and build the runner.

    Without a manager, one holding only the built-in directives is used.

    Raises:
        FileNotFoundError: If the recipe file does not exist
        ValidationError: If the recipe fails validation
        DirectiveParseError: If any directive step cannot be initialized
    """
    settings = load_settings(config_path)
    configure_logging(json_output=settings.logging.json_output, level=settings.logging.level)
    if manager is None:
        manager = DirectiveManager()
        manager.register_builtin_directives()
    return RecipeRunner.from_settings(settings, manager)


class RecipeRunner:
    """Runs batches through a fixed sequence of initialized directives.

    Example:
        with open_recipe(Path("recipe.yaml")) as runner:
            rows = runner.execute(rows, ExecutorContext(run_id="run-1"))
    """

    def __init__(self, directives: Sequence[BaseDirective], *, name: str = "recipe") -> None:
        self._directives = list(directives)
        self._name = name
        self._closed = False

    @classmethod
    def from_settings(cls, settings: RecipeSettings, manager: DirectiveManager) -> Self:
        built: list[BaseDirective] = []
        try:
            for step in settings.directives:
                built.append(build_directive(step, manager))
        except Exception:
            for directive in built:
                directive.destroy()
            raise
        logger.info("Recipe initialized", recipe=settings.name, directives=[d.name for d in built])
        return cls(built, name=settings.name)

    @property
    def directives(self) -> list[BaseDirective]:
        return list(self._directives)

    def execute(self, rows: list[Row], ctx: ExecutorContext) -> list[Row]:
        """Run one batch through every directive in order.

        Raises:
            DirectiveExecutionError: If any directive aborts the batch
        """
        for directive in self._directives:
            rows = directive.execute(rows, ctx)
        logger.debug("Batch complete", recipe=self._name, run_id=ctx.run_id, rows=len(rows))
        return rows

    def close(self) -> None:
        if self._closed:
            return
        for directive in self._directives:
            directive.destroy()
        self._closed = True
        logger.info("Recipe closed", recipe=self._name)

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
