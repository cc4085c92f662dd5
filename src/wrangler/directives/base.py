# src/wrangler/directives/base.py
"""Base class for directive implementations.

A directive is one transformation step in a recipe. Every directive
implements the same capability set:

    define()              -> UsageDefinition  (class-level, no state)
    initialize(arguments) -> None             (once; UNINITIALIZED -> READY)
    execute(rows, ctx)    -> list[Row]        (per batch; READY -> EXECUTING -> READY)
    destroy()             -> None             (idempotent; any -> DESTROYED)

BaseDirective owns the lifecycle state machine. Subclasses implement the
hooks it calls:

    configure(arguments)  -- compile queries, build parsers, read arguments
    process(rows, ctx)    -- transform one batch
    close()               -- release resources (optional)

Lifecycle Contract:
- initialize() is the only way into READY and succeeds at most once. If
  configure() raises, the instance stays UNINITIALIZED; it is never left
  half-configured in READY.
- execute() is valid only in READY. Calling it before initialize(), after
  destroy(), or re-entrantly while a batch is running is a caller bug and
  raises DirectiveLifecycleError. The instance returns to READY whether the
  batch succeeds or aborts.
- destroy() never raises. A failing close() hook is logged and the instance
  still ends DESTROYED.
"""

from abc import ABC, abstractmethod
from typing import ClassVar

import structlog

from wrangler.contracts.arguments import Arguments
from wrangler.contracts.context import ExecutorContext
from wrangler.contracts.enums import DirectiveState
from wrangler.contracts.errors import DirectiveLifecycleError
from wrangler.contracts.row import Row
from wrangler.contracts.usage import UsageDefinition

logger = structlog.get_logger(__name__)


class BaseDirective(ABC):
    """Base class for all directives.

    Example:
        class Uppercase(BaseDirective):
            name = "uppercase"
            description = "Uppercases a column."

            @classmethod
            def define(cls) -> UsageDefinition:
                return UsageDefinition.builder(cls.name).define("column", TokenType.COLUMN_NAME).build()

            def configure(self, arguments: Arguments) -> None:
                self._column = arguments.value("column", ColumnName).value

            def process(self, rows: list[Row], ctx: ExecutorContext) -> list[Row]:
                for row in rows:
                    value = row.get(self._column)
                    if isinstance(value, str):
                        row.add_or_set(self._column, value.upper())
                return rows
    """

    name: ClassVar[str]
    description: ClassVar[str] = ""

    def __init__(self) -> None:
        self._state = DirectiveState.UNINITIALIZED

    @property
    def state(self) -> DirectiveState:
        return self._state

    @classmethod
    @abstractmethod
    def define(cls) -> UsageDefinition:
        """Declare the parameters this directive accepts."""

    @abstractmethod
    def configure(self, arguments: Arguments) -> None:
        """Set up the directive from validated arguments.

        Raises:
            DirectiveParseError: If the arguments cannot be used
        """

    @abstractmethod
    def process(self, rows: list[Row], ctx: ExecutorContext) -> list[Row]:
        """Transform one batch and return it.

        Raises:
            DirectiveExecutionError: To abort the batch
        """

    def close(self) -> None:  # noqa: B027 - optional override, not abstract
        """Release resources. Called once by destroy()."""
        pass

    # === Lifecycle ===

    def initialize(self, arguments: Arguments) -> None:
        """Configure the directive and move it to READY.

        Raises:
            DirectiveLifecycleError: If the directive was already initialized
                or has been destroyed
            DirectiveParseError: If configure() rejects the arguments
        """
        if self._state is not DirectiveState.UNINITIALIZED:
            raise DirectiveLifecycleError(f"Directive '{self.name}' cannot be initialized in state '{self._state}'")
        self.configure(arguments)
        self._state = DirectiveState.READY
        logger.debug("Directive initialized", directive=self.name)

    def execute(self, rows: list[Row], ctx: ExecutorContext) -> list[Row]:
        """Run process() for one batch.

        Raises:
            DirectiveLifecycleError: If the directive is not READY
            DirectiveExecutionError: If process() aborts the batch
        """
        if self._state is not DirectiveState.READY:
            raise DirectiveLifecycleError(f"Directive '{self.name}' cannot execute in state '{self._state}'")
        self._state = DirectiveState.EXECUTING
        try:
            return self.process(rows, ctx)
        finally:
            self._state = DirectiveState.READY

    def destroy(self) -> None:
        """Release resources and move to DESTROYED. Never raises."""
        if self._state is DirectiveState.DESTROYED:
            return
        try:
            self.close()
        except Exception as e:
            logger.warning(
                "Directive cleanup hook failed",
                directive=self.name,
                error=str(e),
                error_type=type(e).__name__,
            )
        self._state = DirectiveState.DESTROYED
        logger.debug("Directive destroyed", directive=self.name)
