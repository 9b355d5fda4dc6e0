"""Exceptions raised on misuse of the adapters.

Pipeline failures are never raised: they travel as ``Err`` values. These only
signal that something which is not an Outcome reached an adapter.
"""

from __future__ import annotations

__all__ = ['NotAnOutcomeError']


class NotAnOutcomeError(TypeError):
    """Raised when an adapter pulls an element that is neither Ok nor Err."""

    def __init__(self, value: object, where: str) -> None:
        self.value = value
        self.where = where
        super().__init__(
            f"{where} expected Ok or Err, got '{type(value).__name__}': {value!r}"
        )
