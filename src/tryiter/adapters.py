"""Lazy adapters over fallible sequences.

Transform adapters (TryMap, TryFlatMap, TryFilter) yield Outcomes again and
forward errors. Reduction adapters (TakeOk, FilterOk) yield plain success
values and swallow errors: TakeOk treats the first error as end of data,
FilterOk skips errors and keeps going.

Nothing is pulled from the wrapped source until the adapter itself is pulled.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any

from tryiter._config import get_config
from tryiter._logging import get_logger, log_adapter_event
from tryiter.errors import NotAnOutcomeError
from tryiter.outcome import Err, Ok
from tryiter.protocols import TryIterable, TryIterator

__all__ = [
    'FilterOk',
    'TakeOk',
    'TryFilter',
    'TryFlatMap',
    'TryMap',
    'filter_ok',
    'map_and_then',
    'take_ok',
    'try_filter',
    'try_flat_map',
    'try_map',
]

logger = get_logger(__name__)


def _outcome[T, E](value: Any, where: str) -> Ok[T] | Err[E]:
    if isinstance(value, Ok | Err):
        return value
    raise NotAnOutcomeError(value, where)


def _discard(adapter: str, action: str, error: Any, on_err: Callable[[Any], Any] | None) -> None:
    """Report an error an adapter is about to swallow."""
    if get_config().tracing:
        log_adapter_event(logger, adapter, action, error)
    if on_err is not None:
        on_err(error)


# --- Transform adapters ---


class TryMap[T, U, E](TryIterator[U, E]):
    """Apply ``f`` to each success value; errors pass through untouched.

    Output length and error positions match the source exactly.
    """

    __slots__ = ('_f', '_iter')

    def __init__(self, source: TryIterable[T, E], f: Callable[[T], U]) -> None:
        self._iter = iter(source)
        self._f = f

    def __next__(self) -> Ok[U] | Err[E]:
        item = _outcome(next(self._iter), 'try_map')
        if isinstance(item, Ok):
            return Ok(self._f(item.value))
        return item


class TryFlatMap[T, U, F](TryIterator[U, F]):
    """Chain a fallible step ``f`` over each success value.

    The only adapter where the transformation itself can introduce an error.
    Upstream errors skip ``f``. Both upstream errors and errors returned by
    ``f`` go through ``convert`` when one is given.
    """

    __slots__ = ('_convert', '_f', '_iter')

    def __init__(
        self,
        source: TryIterable[T, Any],
        f: Callable[[T], Ok[U] | Err[Any]],
        convert: Callable[[Any], F] | None = None,
    ) -> None:
        self._iter = iter(source)
        self._f = f
        self._convert = convert

    def _widen(self, err: Err[Any]) -> Err[F]:
        if self._convert is None:
            return err
        return Err(self._convert(err.error))

    def __next__(self) -> Ok[U] | Err[F]:
        item = _outcome(next(self._iter), 'map_and_then')
        if isinstance(item, Err):
            return self._widen(item)
        produced = _outcome(self._f(item.value), 'map_and_then callback')
        if isinstance(produced, Err):
            return self._widen(produced)
        return produced


class TryFilter[T, E](TryIterator[T, E]):
    """Skip successes failing ``predicate``.

    Errors are forwarded without consulting the predicate, and iteration may
    continue past them.
    """

    __slots__ = ('_iter', '_predicate')

    def __init__(self, source: TryIterable[T, E], predicate: Callable[[T], bool]) -> None:
        self._iter = iter(source)
        self._predicate = predicate

    def __next__(self) -> Ok[T] | Err[E]:
        for raw in self._iter:
            item = _outcome(raw, 'try_filter')
            if isinstance(item, Err) or self._predicate(item.value):
                return item
        raise StopIteration


# --- Reduction adapters ---


class TakeOk[T, E](Iterator[T]):
    """Yield success values up to the first error, then stop permanently.

    The halting error is dropped, or handed to ``on_err`` if given. The source
    is never pulled again once halted, even if it has more successes.
    """

    __slots__ = ('_halted', '_iter', '_on_err')

    def __init__(
        self,
        source: TryIterable[T, E],
        on_err: Callable[[E], Any] | None = None,
    ) -> None:
        self._iter = iter(source)
        self._on_err = on_err
        self._halted = False

    @property
    def halted(self) -> bool:
        """True once an error has terminated the iterator."""
        return self._halted

    def __next__(self) -> T:
        if self._halted:
            raise StopIteration
        item = _outcome(next(self._iter), 'take_ok')
        if isinstance(item, Ok):
            return item.value
        self._halted = True
        _discard('take_ok', 'halted', item.error, self._on_err)
        raise StopIteration


class FilterOk[T, E](Iterator[T]):
    """Yield every success value, discarding errors along the way."""

    __slots__ = ('_iter', '_on_err')

    def __init__(
        self,
        source: TryIterable[T, E],
        on_err: Callable[[E], Any] | None = None,
    ) -> None:
        self._iter = iter(source)
        self._on_err = on_err

    def __next__(self) -> T:
        for raw in self._iter:
            item = _outcome(raw, 'filter_ok')
            if isinstance(item, Ok):
                return item.value
            _discard('filter_ok', 'discarded', item.error, self._on_err)
        raise StopIteration


# --- Function forms ---


def try_map[T, U, E](source: TryIterable[T, E], f: Callable[[T], U]) -> TryMap[T, U, E]:
    """Lazily map ``f`` over the successes of ``source``.

    Examples:
        >>> list(try_map([Ok(1), Err('x'), Ok(3)], lambda n: n + 1))
        [Ok(value=2), Err(error='x'), Ok(value=4)]
    """
    return TryMap(source, f)


def map_and_then[T, U, F](
    source: TryIterable[T, Any],
    f: Callable[[T], Ok[U] | Err[Any]],
    convert: Callable[[Any], F] | None = None,
) -> TryFlatMap[T, U, F]:
    """Lazily chain the fallible step ``f`` over the successes of ``source``.

    Args:
        source: Iterable of Outcomes.
        f: Step returning an Outcome.
        convert: Optional error conversion applied to every error yielded.

    Examples:
        >>> half = lambda n: Ok(n // 2) if n % 2 == 0 else Err(f'{n} is odd')
        >>> list(map_and_then([Ok(4), Ok(3), Err('bad')], half))
        [Ok(value=2), Err(error='3 is odd'), Err(error='bad')]
    """
    return TryFlatMap(source, f, convert)


try_flat_map = map_and_then


def try_filter[T, E](source: TryIterable[T, E], predicate: Callable[[T], bool]) -> TryFilter[T, E]:
    """Lazily drop successes of ``source`` that fail ``predicate``."""
    return TryFilter(source, predicate)


def take_ok[T, E](
    source: TryIterable[T, E],
    on_err: Callable[[E], Any] | None = None,
) -> TakeOk[T, E]:
    """Yield the successes of ``source`` that precede its first error.

    Examples:
        >>> list(take_ok([Ok(1), Ok(2), Err('x'), Ok(4)]))
        [1, 2]
    """
    return TakeOk(source, on_err)


def filter_ok[T, E](
    source: TryIterable[T, E],
    on_err: Callable[[E], Any] | None = None,
) -> FilterOk[T, E]:
    """Yield every success of ``source``, skipping errors.

    Examples:
        >>> list(filter_ok([Ok(1), Ok(2), Err('x'), Ok(4)]))
        [1, 2, 4]
    """
    return FilterOk(source, on_err)
