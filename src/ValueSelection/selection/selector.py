"""Compose allow-list filtering and preference snapping."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

import numpy as np

from ValueSelection.selection.filtering import reduce_by_allowed
from ValueSelection.selection.nearest import reduce_by_preferred
from ValueSelection.shared.config import SelectorConfig
from ValueSelection.shared.errors import InvalidValueError, UnsortedAvailableError
from ValueSelection.shared.types import I32_MAX, I32_MIN, contains_any

if TYPE_CHECKING:
    from collections.abc import Sequence

    from ValueSelection.shared.types import Value

logger = logging.getLogger(__name__)


class SelectionStage(Enum):
    """Which reduction passes ran for a selection."""

    PASSTHROUGH = "passthrough"
    ALLOWED = "allowed"
    PREFERRED = "preferred"
    ALLOWED_THEN_PREFERRED = "allowed_then_preferred"


@dataclass(frozen=True)
class SelectionResult:
    """Outcome of a single selection."""

    stage: SelectionStage
    available_count: int
    selected: tuple[int, ...]

    @property
    def values(self) -> list[int]:
        return list(self.selected)


class Selector:
    """Selects values from a sorted pool using allowed and preferred lists.

    A list holding ``ANY`` switches its stage off: a wildcard in ``allowed``
    skips filtering, a wildcard in ``preferred`` skips snapping.
    """

    def __init__(self, config: SelectorConfig | None = None) -> None:
        self._config = config or SelectorConfig()

    @property
    def config(self) -> SelectorConfig:
        return self._config

    def select(
        self,
        available: Sequence[int],
        allowed: Sequence[Value],
        preferred: Sequence[Value],
    ) -> SelectionResult:
        self._validate(available)
        any_allowed = contains_any(allowed)
        any_preferred = contains_any(preferred)

        if any_allowed and any_preferred:
            stage = SelectionStage.PASSTHROUGH
            selected = [int(v) for v in available]
        elif any_allowed:
            stage = SelectionStage.PREFERRED
            selected = reduce_by_preferred(available, preferred)
        elif any_preferred:
            stage = SelectionStage.ALLOWED
            selected = reduce_by_allowed(available, allowed)
        else:
            stage = SelectionStage.ALLOWED_THEN_PREFERRED
            # The second pass needs an ascending pool; allowed may be in any order.
            narrowed = sorted(set(reduce_by_allowed(available, allowed)))
            selected = reduce_by_preferred(narrowed, preferred)

        logger.debug(
            "[VALUE-SELECT] stage=%s event=complete available=%d selected=%d",
            stage.value,
            len(available),
            len(selected),
        )
        return SelectionResult(
            stage=stage,
            available_count=len(available),
            selected=tuple(selected),
        )

    def attempt(
        self,
        available: Sequence[int],
        allowed: Sequence[Value],
        preferred: Sequence[Value],
    ) -> list[int]:
        return self.select(available, allowed, preferred).values

    def _validate(self, available: Sequence[int]) -> None:
        if not (self._config.validate_range or self._config.validate_sorted):
            return
        if len(available) == 0:
            return
        pool = np.asarray(available)
        if self._config.validate_range:
            if pool.dtype.kind not in "iu":
                raise InvalidValueError(
                    f"Available values must be integers, got dtype {pool.dtype}"
                )
            low, high = int(pool.min()), int(pool.max())
            if low < I32_MIN or high > I32_MAX:
                raise InvalidValueError(
                    f"Available values span [{low}, {high}], "
                    f"outside 32-bit range [{I32_MIN}, {I32_MAX}]"
                )
        if self._config.validate_sorted:
            steps = np.diff(pool)
            bad = np.flatnonzero(steps < 0)
            if bad.size:
                i = int(bad[0])
                raise UnsortedAvailableError(
                    f"Available values must be ascending: "
                    f"{pool[i]} precedes {pool[i + 1]} at index {i}"
                )


_default_selector = Selector()


def attempt(
    available: Sequence[int],
    allowed: Sequence[Value],
    preferred: Sequence[Value],
) -> list[int]:
    """Select from ``available`` using the default Selector configuration."""
    return _default_selector.attempt(available, allowed, preferred)
