"""Building fallible sequences from plain input.

``safe`` turns a raising callable into one returning ``Ok``/``Err``, and
``try_parse`` maps such a callable lazily over raw inputs, giving the
``TryIter`` most pipelines start from.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

import wrapt

from tryiter.outcome import Err, Ok
from tryiter.protocols import TryIter

__all__ = ['safe', 'try_parse']


def _catching(catch: tuple[type[BaseException], ...]) -> Any:
    """Build a wrapt decorator turning ``catch`` exceptions into Err payloads."""

    @wrapt.decorator
    def to_outcome(
        wrapped: Callable[..., Any],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Ok[Any] | Err[BaseException]:
        try:
            value = wrapped(*args, **kwargs)
        except catch as exc:
            return Err(exc)
        return Ok(value)

    return to_outcome


def safe(
    func: Callable[..., Any] | None = None,
    /,
    *,
    exceptions: tuple[type[BaseException], ...] = (Exception,),
) -> Any:
    """Make ``func`` report the listed exceptions as Err instead of raising.

    Works bare (``@safe``), with arguments (``@safe(exceptions=...)``), or
    called directly (``safe(int, exceptions=(ValueError,))``). Exceptions
    outside ``exceptions`` still propagate; the Err payload is the exception
    instance itself.

    Example:
        ```python
        parse = safe(int, exceptions=(ValueError,))
        parse('4')    # Ok(value=4)
        parse('four') # Err(error=ValueError(...))
        ```
    """
    decorate = _catching(tuple(exceptions))
    if func is None:
        return decorate
    return decorate(func)


def try_parse[T, E: BaseException](
    parser: Callable[[Any], T],
    inputs: Iterable[Any],
    *,
    exceptions: tuple[type[E], ...] = (ValueError,),  # type: ignore[assignment]
) -> TryIter[T, E]:
    """Lazily parse each input, yielding Ok(parsed) or Err(exception).

    Args:
        parser: Callable applied to each input.
        inputs: Raw values, pulled one at a time.
        exceptions: Exceptions that become Err elements. Others propagate
            from the pull that triggered them.

    Example:
        ```python
        list(try_parse(int, ['1', '2', 'three']).filter_ok())
        # [1, 2]
        ```
    """
    return TryIter(map(safe(parser, exceptions=exceptions), inputs))
