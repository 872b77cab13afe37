from __future__ import annotations

import os
from dataclasses import dataclass

_TRUE = frozenset({"1", "true", "yes", "on"})


def _env_flag(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in _TRUE


@dataclass(frozen=True)
class SelectorConfig:
    """Configuration for a Selector."""

    validate_sorted: bool = False
    validate_range: bool = True

    @classmethod
    def from_env(cls) -> SelectorConfig:
        return cls(
            validate_sorted=_env_flag("VALUE_SELECT_VALIDATE_SORTED", False),
            validate_range=_env_flag("VALUE_SELECT_VALIDATE_RANGE", True),
        )
