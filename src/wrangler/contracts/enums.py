"""Status codes and kinds used across subsystem boundaries."""

from enum import StrEnum


class TokenType(StrEnum):
    """Kind of a parsed directive argument.

    TEXT is an opaque string literal (quoted in the invocation syntax).
    COLUMN_NAME is a symbolic reference to a row field (written ``:name``).
    """

    TEXT = "text"
    COLUMN_NAME = "column_name"


class DirectiveState(StrEnum):
    """Lifecycle state of a directive instance.

    Transitions:
        UNINITIALIZED -> READY          (initialize, exactly once)
        READY -> EXECUTING -> READY     (execute, once per batch)
        any -> DESTROYED                (destroy, idempotent)
    """

    UNINITIALIZED = "uninitialized"
    READY = "ready"
    EXECUTING = "executing"
    DESTROYED = "destroyed"
