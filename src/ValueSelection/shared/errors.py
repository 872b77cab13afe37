"""Custom exception hierarchy for value selection."""
from __future__ import annotations


class ValueSelectionError(Exception):
    """Base exception for value selection."""


class InvalidValueError(ValueSelectionError, ValueError):
    """Raised when a value is not a 32-bit signed integer."""


class UnsortedAvailableError(ValueSelectionError, ValueError):
    """Raised when sorted-input validation finds a descending step."""
