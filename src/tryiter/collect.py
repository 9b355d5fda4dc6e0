"""Terminal operations: eagerly drain a fallible sequence.

Both operations fail fast. The first ``Err`` aborts the drain and is returned
as is; whatever had been built so far is dropped, and the source is not pulled
again.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterable, Iterator
from typing import Any

from tryiter._config import get_config
from tryiter._logging import get_logger, log_adapter_event
from tryiter.adapters import _outcome
from tryiter.outcome import Err, Ok
from tryiter.protocols import TryIterable

__all__ = ['Buffer', 'ReversedBuffer', 'try_buffer', 'try_collect']

logger = get_logger(__name__)


class _Shunt[T, E](Iterator[T]):
    """Feed success values to a container builder, parking the first error."""

    __slots__ = ('_iter', '_where', 'residual')

    def __init__(self, source: TryIterable[T, E], where: str) -> None:
        self._iter: Iterator[Any] | None = iter(source)
        self._where = where
        self.residual: Err[E] | None = None

    def __next__(self) -> T:
        if self._iter is None:
            raise StopIteration
        try:
            raw = next(self._iter)
        except StopIteration:
            self._iter = None
            raise
        item = _outcome(raw, self._where)
        if isinstance(item, Ok):
            return item.value
        self.residual = item
        self._iter = None
        raise StopIteration


def _drain[T, E, C](
    source: TryIterable[T, E],
    factory: Callable[[Iterable[T]], C],
    where: str,
) -> Ok[C] | Err[E]:
    shunt: _Shunt[T, E] = _Shunt(source, where)
    container = factory(shunt)
    if shunt.residual is not None:
        if get_config().tracing:
            log_adapter_event(logger, where, 'short_circuit', shunt.residual.error)
        return shunt.residual
    return Ok(container)


def try_collect[T, E, C](
    source: TryIterable[T, E],
    factory: Callable[[Iterable[T]], C] = list,  # type: ignore[assignment]
) -> Ok[C] | Err[E]:
    """Collect the successes of ``source`` into a container.

    ``factory`` builds the container from an ordered iterable of values, so
    the caller picks the target type and its insertion semantics: ``list``,
    ``tuple``, ``set``, ``dict`` (for key/value pairs), ``collections.Counter``,
    ``''.join``, a custom class.

    Args:
        source: Iterable of Outcomes.
        factory: Container builder. Defaults to list.

    Returns:
        Ok(container) if ``source`` holds no error, otherwise its first Err.

    Examples:
        >>> try_collect([Ok(1), Ok(2), Ok(2)], set)
        Ok(value={1, 2})
        >>> try_collect([Ok(1), Err('fail'), Ok(3)])
        Err(error='fail')
    """
    return _drain(source, factory, 'try_collect')


class Buffer[T](Iterator[T]):
    """A finite, fused iterator over values already drained from a source.

    Iterates from the front with ``next()`` and from the back with
    ``next_back()``. ``reversed()`` returns a ReversedBuffer that consumes the
    same remaining window from the tail. ``len()`` is always the exact number
    left on either view.
    Iteration resumes from wherever the previous consumer stopped.

    Examples:
        >>> buf = Buffer([1, 2, 3, 4])
        >>> next(buf), buf.next_back(), len(buf)
        (1, 4, 2)
        >>> list(buf)
        [2, 3]
        >>> list(buf)
        []
    """

    __slots__ = ('_items',)

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: deque[T] = deque(items)

    def __next__(self) -> T:
        if not self._items:
            raise StopIteration
        return self._items.popleft()

    def next_back(self) -> T:
        """Remove and return the last remaining value.

        Raises:
            StopIteration: If the buffer is exhausted.
        """
        if not self._items:
            raise StopIteration
        return self._items.pop()

    def __reversed__(self) -> ReversedBuffer[T]:
        return ReversedBuffer._over(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __length_hint__(self) -> int:
        return len(self._items)

    @classmethod
    def _over(cls, items: deque[T]) -> Buffer[T]:
        buf = cls.__new__(cls)
        buf._items = items
        return buf

    def __copy__(self) -> Buffer[T]:
        """Return an independent Buffer over the values still remaining."""
        return Buffer(self._items)

    def __repr__(self) -> str:
        return f'Buffer({list(self._items)!r})'


class ReversedBuffer[T](Buffer[T]):
    """Tail-first view over a Buffer's remaining values.

    Shares storage with the Buffer it came from: pulling from either one
    consumes from both.
    """

    __slots__ = ()

    def __next__(self) -> T:
        if not self._items:
            raise StopIteration
        return self._items.pop()

    def next_back(self) -> T:
        if not self._items:
            raise StopIteration
        return self._items.popleft()

    def __reversed__(self) -> Buffer[T]:
        return Buffer._over(self._items)

    def __copy__(self) -> ReversedBuffer[T]:
        return ReversedBuffer._over(deque(self._items))

    def __repr__(self) -> str:
        return f'ReversedBuffer({list(reversed(self._items))!r})'


def try_buffer[T, E](source: TryIterable[T, E]) -> Ok[Buffer[T]] | Err[E]:
    """Drain ``source`` into a Buffer.

    Returns:
        Ok(Buffer) if ``source`` holds no error, otherwise its first Err.

    Examples:
        >>> buf = try_buffer([Ok(1), Ok(2), Ok(3)]).unwrap()
        >>> [n + 2 for n in buf]
        [3, 4, 5]
    """
    return _drain(source, Buffer, 'try_buffer')
