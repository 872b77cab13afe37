"""Selection bounded context: allow-list filtering and nearest-preference snapping."""

from ValueSelection.selection.filtering import reduce_by_allowed
from ValueSelection.selection.nearest import reduce_by_preferred
from ValueSelection.selection.selector import (
    SelectionResult,
    SelectionStage,
    Selector,
    attempt,
)

__all__ = [
    "SelectionResult",
    "SelectionStage",
    "Selector",
    "attempt",
    "reduce_by_allowed",
    "reduce_by_preferred",
]
