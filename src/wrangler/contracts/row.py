"""Row: an ordered, mutable record flowing through directives.

Rows are owned by the caller's batch for the duration of an execute()
call. Directives mutate them in place with add_or_set(); they never add
or remove rows from the batch.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any

from wrangler.contracts.sentinels import MISSING


class Row:
    """Ordered mapping of field name to dynamically-typed value.

    Field lookup is by exact name. Insertion order is preserved and
    add_or_set() on an existing field keeps its position.
    """

    __slots__ = ("_fields",)

    def __init__(self, fields: Mapping[str, Any] | None = None) -> None:
        self._fields: dict[str, Any] = dict(fields) if fields is not None else {}

    def get(self, name: str, default: Any = MISSING) -> Any:
        return self._fields.get(name, default)

    def add_or_set(self, name: str, value: Any) -> Row:
        """Create the field if absent, else overwrite it in place."""
        self._fields[name] = value
        return self

    def to_dict(self) -> dict[str, Any]:
        return dict(self._fields)

    def copy(self) -> Row:
        """Shallow copy: new field mapping, same value objects."""
        return Row(self._fields)

    @property
    def fields(self) -> list[str]:
        return list(self._fields)

    def __contains__(self, name: object) -> bool:
        return name in self._fields

    def __getitem__(self, name: str) -> Any:
        return self._fields[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Row):
            return NotImplemented
        return list(self._fields.items()) == list(other._fields.items())

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Row({self._fields!r})"
