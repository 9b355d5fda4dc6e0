"""Outcome type: Ok[T] | Err[E], the element carried by a fallible sequence."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, NoReturn, TypeIs

import msgspec

__all__ = ['Err', 'Ok', 'Result', 'is_outcome']


class Ok[T](msgspec.Struct, frozen=True, gc=False):
    """Success variant of an Outcome containing a value of type T.

    Examples:
        >>> ok = Ok(42)
        >>> ok.unwrap()
        42
        >>> ok.map(lambda x: x * 2)
        Ok(value=84)
    """

    value: T

    def is_ok(self) -> TypeIs[Ok[T]]:
        """Return True since this is Ok."""
        return True

    def is_err(self) -> TypeIs[Err[Any]]:
        """Return False since this is Ok."""
        return False

    def unwrap(self) -> T:
        """Return the contained value."""
        return self.value

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        """Return the contained value, ignoring the default."""
        return self.value

    def unwrap_err(self) -> NoReturn:
        """Raise since Ok carries no error.

        Raises:
            RuntimeError: Always.
        """
        msg = f'Called unwrap_err on Ok: {self.value!r}'
        raise RuntimeError(msg)

    def expect(self, _msg: str) -> T:
        """Return the contained value, ignoring the message."""
        return self.value

    def map[U](self, f: Callable[[T], U]) -> Ok[U]:
        """Apply ``f`` to the contained value.

        Args:
            f: Function to apply to the Ok value.

        Returns:
            Ok containing the result of applying f to the value.
        """
        return Ok(f(self.value))

    def map_err(self, _f: Callable[[Any], Any]) -> Ok[T]:
        """Return self unchanged since this is Ok."""
        return self

    def and_then[U, E](self, f: Callable[[T], Ok[U] | Err[E]]) -> Ok[U] | Err[E]:
        """Apply a function returning an Outcome to the contained value.

        Also known as flatmap or bind.
        """
        return f(self.value)

    def ok(self) -> T:
        """Return the contained value."""
        return self.value

    def err(self) -> None:
        """Return None since this is Ok."""
        return None


class Err[E](msgspec.Struct, frozen=True, gc=False):
    """Error variant of an Outcome containing an error of type E.

    The error is any caller-chosen value: an exception instance, a string,
    another struct.

    Examples:
        >>> err = Err('bad token')
        >>> err.is_err()
        True
        >>> err.unwrap_or(0)
        0
    """

    error: E

    def is_ok(self) -> TypeIs[Ok[Any]]:
        """Return False since this is Err."""
        return False

    def is_err(self) -> TypeIs[Err[E]]:
        """Return True since this is Err."""
        return True

    def unwrap(self) -> NoReturn:
        """Raise since Err has no value to unwrap.

        Raises:
            RuntimeError: Always, chained from the error when it is an exception.
        """
        msg = f'Called unwrap on Err: {self.error!r}'
        if isinstance(self.error, BaseException):
            raise RuntimeError(msg) from self.error
        raise RuntimeError(msg)

    def unwrap_or[T](self, default: T) -> T:
        """Return the default value since this is Err."""
        return default

    def unwrap_err(self) -> E:
        """Return the contained error."""
        return self.error

    def expect(self, msg: str) -> NoReturn:
        """Raise with a custom message.

        Raises:
            RuntimeError: Always, with the custom message.
        """
        raise RuntimeError(f'{msg}: {self.error!r}')

    def map(self, _f: Callable[[Any], Any]) -> Err[E]:
        """Return self unchanged since this is Err."""
        return self

    def map_err[F](self, f: Callable[[E], F]) -> Err[F]:
        """Apply ``f`` to the contained error."""
        return Err(f(self.error))

    def and_then(self, _f: Callable[[Any], Any]) -> Err[E]:
        """Return self unchanged since this is Err."""
        return self

    def ok(self) -> None:
        """Return None since this is Err."""
        return None

    def err(self) -> E:
        """Return the contained error."""
        return self.error


type Result[T, E = Exception] = Ok[T] | Err[E]


def is_outcome(value: object) -> TypeIs[Ok[Any] | Err[Any]]:
    """Return True if ``value`` is an Ok or an Err."""
    return isinstance(value, Ok | Err)
