"""Exception hierarchy for directive setup and execution.

Two tiers are fatal and surface to the caller:

- DirectiveParseError: configuration problems found before any row is
  processed (bad arguments, invalid query, parser factory failure).
- DirectiveExecutionError: a batch could not be processed (malformed input).

DirectiveLifecycleError signals a programming error in the caller, such as
executing a directive that was never initialized.
"""


class WranglerError(Exception):
    """Base class for all wrangler errors."""


class DirectiveParseError(WranglerError):
    """Raised when a directive cannot be configured.

    Covers invocation text that does not match the usage definition,
    missing or wrong-kind arguments, and setup failures inside
    initialize() such as an invalid XPath expression.
    """


class DirectiveExecutionError(WranglerError):
    """Raised when a directive aborts the current batch.

    Attributes:
        directive: Name of the directive that failed
    """

    def __init__(self, directive: str, message: str) -> None:
        self.directive = directive
        super().__init__(f"Error encountered while executing '{directive}': {message}")


class DirectiveLifecycleError(WranglerError):
    """Raised when a lifecycle method is called in the wrong state.

    This is always a caller bug: initialize twice, execute before
    initialize or after destroy, or re-entrant execute on one instance.
    """
