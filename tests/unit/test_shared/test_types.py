"""Tests for Value types and helpers."""
from __future__ import annotations

import numpy as np
import pytest

from ValueSelection.shared.errors import InvalidValueError
from ValueSelection.shared.types import (
    ANY,
    I32_MAX,
    I32_MIN,
    AnyValue,
    Number,
    as_values,
    contains_any,
    numbers,
)


class TestNumber:
    def test_accepts_i32_bounds(self) -> None:
        assert Number(I32_MIN).value == I32_MIN
        assert Number(I32_MAX).value == I32_MAX

    @pytest.mark.parametrize("bad", [I32_MAX + 1, I32_MIN - 1])
    def test_rejects_out_of_range(self, bad: int) -> None:
        with pytest.raises(InvalidValueError):
            Number(bad)

    @pytest.mark.parametrize("bad", [1.0, "5", True, None])
    def test_rejects_non_integers(self, bad: object) -> None:
        with pytest.raises(InvalidValueError):
            Number(bad)  # type: ignore[arg-type]

    def test_numpy_integer_normalized_to_int(self) -> None:
        n = Number(np.int32(42))  # type: ignore[arg-type]
        assert type(n.value) is int
        assert n == Number(42)

    def test_equality_and_hash(self) -> None:
        assert Number(5) == Number(5)
        assert len({Number(5), Number(5), Number(6)}) == 2


class TestAny:
    def test_singleton_equality(self) -> None:
        assert AnyValue() == ANY
        assert ANY != Number(0)

    def test_repr(self) -> None:
        assert repr(ANY) == "ANY"


class TestHelpers:
    def test_contains_any(self) -> None:
        assert contains_any([Number(1), ANY])
        assert not contains_any([Number(1), Number(2)])
        assert not contains_any([])

    def test_numbers_skips_wildcards(self) -> None:
        assert numbers([Number(3), ANY, Number(1)]) == [3, 1]

    def test_as_values_coerces_markers(self) -> None:
        result = as_values([240, None, "ANY", " * ", Number(7), ANY])
        assert result == (Number(240), ANY, ANY, ANY, Number(7), ANY)

    def test_as_values_rejects_other_strings(self) -> None:
        with pytest.raises(InvalidValueError):
            as_values(["240"])
