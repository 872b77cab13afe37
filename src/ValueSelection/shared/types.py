from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Union

import numpy as np

from ValueSelection.shared.errors import InvalidValueError

I32_MIN = -(2**31)
I32_MAX = 2**31 - 1

WILDCARD_TOKENS = ("any", "*")


def check_i32(value: object) -> int:
    """Return ``value`` if it is an int in the 32-bit signed range."""
    if isinstance(value, np.integer):
        value = int(value)
    if isinstance(value, bool) or not isinstance(value, int):
        msg = f"Expected an integer, got {type(value).__name__}: {value!r}"
        raise InvalidValueError(msg)
    if not I32_MIN <= value <= I32_MAX:
        msg = f"Value {value} outside 32-bit range [{I32_MIN}, {I32_MAX}]"
        raise InvalidValueError(msg)
    return value


@dataclass(frozen=True)
class AnyValue:
    """Wildcard that disables the stage whose list contains it."""

    def __repr__(self) -> str:
        return "ANY"


@dataclass(frozen=True)
class Number:
    """A concrete candidate value."""

    value: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", check_i32(self.value))


Value = Union[AnyValue, Number]

ANY = AnyValue()


def contains_any(values: Iterable[Value]) -> bool:
    return any(isinstance(v, AnyValue) for v in values)


def numbers(values: Iterable[Value]) -> list[int]:
    """Payloads of the ``Number`` entries, in order; wildcards are skipped."""
    return [v.value for v in values if isinstance(v, Number)]


def as_values(raw: Iterable[object]) -> tuple[Value, ...]:
    """Coerce plain ints and wildcard markers into ``Value`` entries.

    ``None``, ``"any"`` and ``"*"`` (case-insensitive) become ``ANY``;
    existing ``Value`` instances pass through unchanged.
    """
    out: list[Value] = []
    for item in raw:
        if isinstance(item, (AnyValue, Number)):
            out.append(item)
        elif item is None or (
            isinstance(item, str) and item.strip().lower() in WILDCARD_TOKENS
        ):
            out.append(ANY)
        else:
            out.append(Number(check_i32(item)))
    return tuple(out)
