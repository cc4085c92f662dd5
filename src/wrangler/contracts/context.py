"""Execution context handed to directives by the caller.

Directives receive the context on every execute() call. The built-in
directives do not read it; it exists so callers can pass run metadata
through to directives that need it.
"""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class ExecutorContext:
    """Opaque per-run metadata.

    Attributes:
        run_id: Identifier of the current run
        environment: Where the recipe runs (e.g. "testing", "production")
        properties: Free-form key/value metadata
    """

    run_id: str
    environment: str = "production"
    properties: dict[str, Any] = field(default_factory=dict)
