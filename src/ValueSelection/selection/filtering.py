"""Allow-list filtering of available values."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np

from ValueSelection.shared.types import numbers

if TYPE_CHECKING:
    from collections.abc import Sequence

    from ValueSelection.shared.types import Value

logger = logging.getLogger(__name__)


def reduce_by_allowed(available: Sequence[int], allowed: Sequence[Value]) -> list[int]:
    """Return the allowed numbers that also occur in ``available``.

    Order follows ``allowed``. Wildcard entries are skipped, so callers
    decide what ``ANY`` means before getting here.
    """
    candidates = np.asarray(numbers(allowed), dtype=np.int64)
    if candidates.size == 0 or len(available) == 0:
        return []
    mask = np.isin(candidates, np.asarray(available, dtype=np.int64))
    kept = candidates[mask].tolist()
    logger.debug(
        "[VALUE-SELECT] stage=allowed event=complete "
        "available=%d allowed=%d kept=%d",
        len(available),
        candidates.size,
        len(kept),
    )
    return kept
