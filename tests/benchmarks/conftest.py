"""Fixtures for benchmark tests generating large synthetic value pools."""
from __future__ import annotations

import numpy as np
import pytest

from ValueSelection.shared.types import Number


@pytest.fixture
def make_pool():
    """Factory fixture that generates a sorted, unique integer pool."""

    def _make(n: int, seed: int = 42) -> list[int]:
        rng = np.random.RandomState(seed)
        return np.unique(rng.randint(-(10**6), 10**6, size=n)).tolist()

    return _make


@pytest.fixture
def make_values():
    """Factory fixture that generates Number entries."""

    def _make(n: int, seed: int = 7) -> list[Number]:
        rng = np.random.RandomState(seed)
        return [Number(int(v)) for v in rng.randint(-(10**6), 10**6, size=n)]

    return _make
