"""Shared sentinel values.

MISSING distinguishes "field not present" from "field present with value
None" when reading row data.

Example usage:
    value = row.get("payload", MISSING)
    if value is MISSING:
        # Field was not present in the row
        ...
"""

from typing import Final


class MissingSentinel:
    """Sentinel class to distinguish missing fields from None values.

    This is a singleton - use the MISSING instance, not the class directly.
    Comparison should always use `is` identity, never equality.
    """

    __slots__ = ()

    def __repr__(self) -> str:
        return "<MISSING>"


MISSING: Final[MissingSentinel] = MissingSentinel()
