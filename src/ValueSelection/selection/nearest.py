"""Snap preferred values to their nearest available neighbour."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np

from ValueSelection.shared.types import numbers

if TYPE_CHECKING:
    from collections.abc import Sequence

    from ValueSelection.shared.types import Value

logger = logging.getLogger(__name__)


def reduce_by_preferred(
    available: Sequence[int], preferred: Sequence[Value]
) -> list[int]:
    """Map each preferred number onto ``available``.

    An exact match is kept as is. A miss takes the smallest available value
    above it, or the largest one below it when nothing is above. Repeats
    are dropped, keeping the first occurrence.

    ``available`` must be sorted ascending.
    """
    pool = np.asarray(available, dtype=np.int64)
    targets = np.asarray(numbers(preferred), dtype=np.int64)
    if pool.size == 0 or targets.size == 0:
        return []

    # searchsorted gives the first index with pool[i] >= target; clamping
    # the past-the-end index falls back to the largest value.
    idx = np.searchsorted(pool, targets, side="left")
    np.minimum(idx, pool.size - 1, out=idx)
    snapped = pool[idx].tolist()

    result = list(dict.fromkeys(snapped))
    logger.debug(
        "[VALUE-SELECT] stage=preferred event=complete "
        "available=%d preferred=%d selected=%d",
        pool.size,
        targets.size,
        len(result),
    )
    return result
