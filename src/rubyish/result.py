"""Result type: Ok[T] | Err[E] for lookups that can fail recoverably.

`Hash.fetch` is the one operation in the library that can fail. Instead of
aborting it returns `Err(KeyNotFound(key))`, which callers can inspect, map,
or turn into an exception with `.unwrap_err().to_exception()`.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, NoReturn

import msgspec

if TYPE_CHECKING:
    from typing import TypeIs

    from rubyish.option import Option

__all__ = ['Err', 'Ok', 'Result', 'collect']


class Ok[T](msgspec.Struct, frozen=True):
    """Success variant of Result containing a value of type T.

    Examples:
        >>> Hash({'a': 1}).fetch('a')
        Ok(value=1)
    """

    value: T

    def is_ok(self) -> TypeIs[Ok[T]]:
        """Return True since this is Ok."""
        return True

    def is_err(self) -> TypeIs[Err[object]]:
        """Return False since this is Ok."""
        return False

    def unwrap(self) -> T:
        """Return the contained Ok value."""
        return self.value

    def unwrap_err(self) -> NoReturn:
        """Raise since there is no error to return.

        Raises:
            RuntimeError: Always, since Ok holds a value.
        """
        raise RuntimeError(f'Called unwrap_err on Ok: {self.value!r}')

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        """Return the contained Ok value, ignoring the default."""
        return self.value

    def unwrap_or_else(self, f: Callable[[], T]) -> T:  # noqa: ARG002
        """Return the contained Ok value, ignoring the fallback function."""
        return self.value

    def map[U](self, f: Callable[[T], U]) -> Ok[U]:
        """Apply a function to the contained value."""
        return Ok(f(self.value))

    def map_err[F](self, _f: Callable[[object], F]) -> Ok[T]:
        """Return self unchanged since this is Ok."""
        return self

    def and_then[U, E](self, f: Callable[[T], Ok[U] | Err[E]]) -> Ok[U] | Err[E]:
        """Apply a function that returns a Result to the contained value."""
        return f(self.value)

    def ok(self) -> Option[T]:
        """Convert to Option, returning Some(value)."""
        from rubyish.option import Some

        return Some(self.value)


class Err[E](msgspec.Struct, frozen=True):
    """Error variant of Result containing an error of type E.

    Examples:
        >>> Hash({'a': 1}).fetch('b')
        Err(error=KeyNotFound(key='b'))
        >>> Hash({'a': 1}).fetch('b').unwrap_or(0)
        0
    """

    error: E

    def is_ok(self) -> TypeIs[Ok[object]]:
        """Return False since this is Err."""
        return False

    def is_err(self) -> TypeIs[Err[E]]:
        """Return True since this is Err."""
        return True

    def unwrap(self) -> NoReturn:
        """Raise an exception since this is Err.

        Raises:
            RuntimeError: Always, since Err has no Ok value to unwrap.
        """
        raise RuntimeError(f'Called unwrap on Err: {self.error!r}')

    def unwrap_err(self) -> E:
        """Return the contained error."""
        return self.error

    def unwrap_or[T](self, default: T) -> T:
        """Return the default value since this is Err."""
        return default

    def unwrap_or_else[T](self, f: Callable[[], T]) -> T:
        """Compute and return a default value since this is Err."""
        return f()

    def map[T, U](self, _f: Callable[[T], U]) -> Err[E]:
        """Return self unchanged since this is Err."""
        return self

    def map_err[F](self, f: Callable[[E], F]) -> Err[F]:
        """Apply a function to the contained error."""
        return Err(f(self.error))

    def and_then[T, U](self, _f: Callable[[T], Ok[U] | Err[E]]) -> Err[E]:
        """Return self unchanged since this is Err."""
        return self

    def ok(self) -> Option[object]:
        """Convert to Option, returning Nothing since this is Err."""
        from rubyish.option import Nothing

        return Nothing


type Result[T, E] = Ok[T] | Err[E]


def collect[T, E](results: Iterable[Ok[T] | Err[E]]) -> Ok[list[T]] | Err[E]:
    """Collect an iterable of Results into a Result of list.

    Short-circuits on the first Err encountered, so fetching several keys at
    once reports the first one that is missing.

    Examples:
        >>> h = Hash({'a': 1, 'b': 2})
        >>> collect(h.fetch(k) for k in ('a', 'b'))
        Ok(value=[1, 2])
        >>> collect(h.fetch(k) for k in ('a', 'z', 'b'))
        Err(error=KeyNotFound(key='z'))
    """
    values: list[T] = []
    for result in results:
        if isinstance(result, Err):
            return result
        values.append(result.value)
    return Ok(values)
