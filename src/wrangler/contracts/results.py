"""Result of evaluating a compiled query against one document.

Evaluation never raises for documents the query does not fit. A miss is
an explicit value so callers branch on it instead of catching exceptions.

The status is a two-value string literal; QueryResult.match() and
QueryResult.no_match() are the only intended constructors.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal


@dataclass(frozen=True, slots=True)
class QueryResult:
    """Outcome of CompiledQuery.evaluate().

    Use the factory methods to create instances.
    """

    status: Literal["match", "no_match"]
    value: str | None = None

    def __post_init__(self) -> None:
        if self.status == "match" and self.value is None:
            raise ValueError("QueryResult with status='match' MUST carry a value")
        if self.status == "no_match" and self.value is not None:
            raise ValueError("QueryResult with status='no_match' cannot carry a value")

    @property
    def matched(self) -> bool:
        return self.status == "match"

    @classmethod
    def match(cls, value: str) -> QueryResult:
        return cls(status="match", value=value)

    @classmethod
    def no_match(cls) -> QueryResult:
        return cls(status="no_match")
