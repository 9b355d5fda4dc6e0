"""Pytest configuration and shared fixtures for tryiter tests."""

from __future__ import annotations

from collections.abc import Callable

import pytest
import structlog
from tryiter import Err, Ok, TryIter, clear_log_hooks, safe, try_parse
from tryiter._config import reset


def _to_int(token: str) -> int:
    return int(token)


_parse_int = safe(_to_int, exceptions=(ValueError,))


@pytest.fixture
def parse() -> Callable[[str], Ok[int] | Err[ValueError]]:
    """Integer parser returning Ok(int) or Err(ValueError)."""
    return _parse_int


@pytest.fixture
def parsed() -> Callable[[list[str]], TryIter[int, ValueError]]:
    """Build a lazy fallible sequence by parsing each token."""

    def build(tokens: list[str]) -> TryIter[int, ValueError]:
        return try_parse(_to_int, tokens)

    return build


@pytest.fixture(autouse=True)
def clean_state() -> None:
    """Reset library configuration and logging between tests."""
    reset()
    clear_log_hooks()
    yield
    reset()
    clear_log_hooks()
    structlog.reset_defaults()


class CountingSource:
    """Iterator of Outcomes that records how many times it was pulled."""

    def __init__(self, items: list[Ok[int] | Err[str]]) -> None:
        self._items = list(items)
        self.pulls = 0

    def __iter__(self) -> CountingSource:
        return self

    def __next__(self) -> Ok[int] | Err[str]:
        self.pulls += 1
        if not self._items:
            raise StopIteration
        return self._items.pop(0)


@pytest.fixture
def counting_source() -> type[CountingSource]:
    """Factory for sources that count their pulls."""
    return CountingSource
