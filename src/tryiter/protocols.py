"""The fallible-sequence capability every adapter is built against.

Any iterable of ``Ok``/``Err`` values already satisfies it: pulling the next
Outcome is ``next()``, and exhaustion is ``StopIteration``. ``TryIterator`` adds
the adapters as chainable methods, and ``tryiter()`` lifts an arbitrary source
into one.

Example:
    ```python
    from tryiter import safe, tryiter

    parse = safe(int)
    tryiter(map(parse, ['1', '2', 'x'])).try_map(lambda n: n * 10).filter_ok()
    # yields 10, 20
    ```
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import TYPE_CHECKING, Any

from tryiter.outcome import Err, Ok

if TYPE_CHECKING:
    from tryiter.adapters import FilterOk, TakeOk, TryFilter, TryFlatMap, TryMap
    from tryiter.collect import Buffer

__all__ = ['TryIter', 'TryIterable', 'TryIterator', 'tryiter']

type TryIterable[T, E] = Iterable[Ok[T] | Err[E]]


class TryIterator[T, E](Iterator[Ok[T] | Err[E]]):
    """Base for iterators of Outcomes, exposing every adapter as a method.

    Subclasses implement ``__next__`` only.
    """

    __slots__ = ()

    def try_map[U](self, f: Callable[[T], U]) -> TryMap[T, U, E]:
        """Map ``f`` over success values, forwarding errors unchanged."""
        from tryiter.adapters import TryMap

        return TryMap(self, f)

    def map_and_then[U, F](
        self,
        f: Callable[[T], Ok[U] | Err[Any]],
        convert: Callable[[Any], F] | None = None,
    ) -> TryFlatMap[T, U, F]:
        """Chain a fallible step over success values.

        Args:
            f: Step returning an Outcome for each success value.
            convert: Widens upstream errors and errors produced by ``f`` into
                one error type. Identity when omitted.
        """
        from tryiter.adapters import TryFlatMap

        return TryFlatMap(self, f, convert)

    try_flat_map = map_and_then

    def try_filter(self, predicate: Callable[[T], bool]) -> TryFilter[T, E]:
        """Keep successes matching ``predicate``; errors always pass."""
        from tryiter.adapters import TryFilter

        return TryFilter(self, predicate)

    def take_ok(self, on_err: Callable[[E], Any] | None = None) -> TakeOk[T, E]:
        """Yield plain success values until the first error, then stop for good."""
        from tryiter.adapters import TakeOk

        return TakeOk(self, on_err)

    def filter_ok(self, on_err: Callable[[E], Any] | None = None) -> FilterOk[T, E]:
        """Yield plain success values, skipping every error."""
        from tryiter.adapters import FilterOk

        return FilterOk(self, on_err)

    def try_collect[C](self, factory: Callable[[Iterable[T]], C] = list) -> Ok[C] | Err[E]:  # type: ignore[assignment]
        """Drain into ``factory``'s container, or return the first error."""
        from tryiter.collect import try_collect

        return try_collect(self, factory)

    def try_buffer(self) -> Ok[Buffer[T]] | Err[E]:
        """Drain into a Buffer, or return the first error."""
        from tryiter.collect import try_buffer

        return try_buffer(self)


class TryIter[T, E](TryIterator[T, E]):
    """TryIterator over an arbitrary source of Outcomes."""

    __slots__ = ('_iter',)

    def __init__(self, source: TryIterable[T, E]) -> None:
        self._iter = iter(source)

    def __next__(self) -> Ok[T] | Err[E]:
        return next(self._iter)

    def __repr__(self) -> str:
        return f'TryIter({self._iter!r})'


def tryiter[T, E](source: TryIterable[T, E]) -> TryIterator[T, E]:
    """Lift any iterable of Outcomes into a TryIterator.

    A source that already is a TryIterator is returned as is.
    """
    if isinstance(source, TryIterator):
        return source
    return TryIter(source)
