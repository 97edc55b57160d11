"""Array: an ordered, immutable sequence with Ruby-style combinators.

Every method returns a new Array (or a plain value) and leaves the receiver
untouched, including the stack/queue style `push`, `pop`, `shift` and
`unshift`. Lookups that may come back empty return `Some`/`Nothing`.

Examples:
    >>> a = Array([3, 1, 2])
    >>> a.sort().map(lambda x: x * 10)
    Array([10, 20, 30])
    >>> a.find(lambda x: x > 5)
    Nothing
    >>> a.pop()
    (Some(value=2), Array([3, 1]))
"""

from __future__ import annotations

import functools
from collections.abc import Callable, Iterator
from typing import TYPE_CHECKING, Any, overload

import msgspec
from msgspec import structs

from rubyish._logging import get_logger
from rubyish.config import get_random
from rubyish.conversions import sort_key, to_s
from rubyish.numeric import Integer
from rubyish.option import Nothing, NothingType, Some

if TYPE_CHECKING:
    from rubyish.hash import Hash
    from rubyish.string import String

__all__ = ['Array']

logger = get_logger(__name__)

_MISSING: Any = object()

# Scalar types whose falsy values count as "zero" for compact()
_ZERO_TYPES: tuple[type, ...] = (bool, int, float, str)


def _is_zero(item: Any) -> bool:
    from rubyish.boolean import Boolean
    from rubyish.string import String

    if item is None:
        return True
    if isinstance(item, (*_ZERO_TYPES, String, Boolean)):
        return not item
    return False


class Array[T](msgspec.Struct, frozen=True):
    """Ordered, 0-indexed sequence.

    `items` is always stored as a tuple; any iterable is accepted on
    construction. Arrays are hashable when their elements are.
    """

    items: tuple[T, ...] = ()

    def __post_init__(self) -> None:
        structs.force_setattr(self, 'items', tuple(self.items))

    @classmethod
    def of(cls, *items: T) -> Array[T]:
        """Build an Array from positional arguments."""
        return cls(items)

    # --- Python protocol ---

    def __repr__(self) -> str:
        return f'Array({list(self.items)!r})'

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[T]:
        return iter(self.items)

    def __contains__(self, value: object) -> bool:
        return value in self.items

    def __bool__(self) -> bool:
        return bool(self.items)

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> Array[T]: ...

    def __getitem__(self, index: int | slice) -> T | Array[T]:
        if isinstance(index, slice):
            return Array(self.items[index])
        return self.items[index]

    def to_list(self) -> list[T]:
        return list(self.items)

    # --- size ---

    def length(self) -> Integer:
        return Integer(len(self.items))

    def size(self) -> Integer:
        return self.length()

    def is_empty(self) -> bool:
        return not self.items

    def count(self, value: Any = _MISSING, *, where: Callable[[T], bool] | None = None) -> Integer:
        """Count elements.

        With no arguments, the total length. With a value, the number of
        elements equal to it. With `where=`, the number of elements the
        predicate accepts.

        Examples:
            >>> a = Array([1, 2, 2, 3])
            >>> a.count(), a.count(2), a.count(where=lambda x: x > 1)
            (4, 2, 3)
        """
        if where is not None:
            return Integer(sum(1 for item in self.items if where(item)))
        if value is _MISSING:
            return Integer(len(self.items))
        return Integer(sum(1 for item in self.items if item == value))

    # --- transforms ---

    def map[U](self, fn: Callable[[T], U]) -> Array[U]:
        return Array([fn(item) for item in self.items])

    def select(self, predicate: Callable[[T], bool]) -> Array[T]:
        """Keep the elements the predicate accepts."""
        return Array([item for item in self.items if predicate(item)])

    def filter(self, predicate: Callable[[T], bool]) -> Array[T]:
        return self.select(predicate)

    def reject(self, predicate: Callable[[T], bool]) -> Array[T]:
        """Drop the elements the predicate accepts."""
        return Array([item for item in self.items if not predicate(item)])

    def reduce[U](self, fn: Callable[[U, T], U], initial: U) -> U:
        return functools.reduce(fn, self.items, initial)

    def partition(self, predicate: Callable[[T], bool]) -> tuple[Array[T], Array[T]]:
        """Split into (accepted, rejected), both in original order."""
        accepted: list[T] = []
        rejected: list[T] = []
        for item in self.items:
            (accepted if predicate(item) else rejected).append(item)
        return Array(accepted), Array(rejected)

    def group_by[K](self, fn: Callable[[T], K]) -> Hash[K, Array[T]]:
        """Group elements by the key fn computes, preserving element order."""
        from rubyish.hash import Hash

        groups: dict[K, list[T]] = {}
        for item in self.items:
            groups.setdefault(fn(item), []).append(item)
        return Hash({key: Array(members) for key, members in groups.items()})

    # --- iteration ---

    def each(self, fn: Callable[[T], Any]) -> None:
        for item in self.items:
            fn(item)

    def each_with_index(self, fn: Callable[[T, Integer], Any]) -> None:
        for index, item in enumerate(self.items):
            fn(item, Integer(index))

    # --- queries ---

    def find(self, predicate: Callable[[T], bool]) -> Some[T] | NothingType:
        for item in self.items:
            if predicate(item):
                return Some(item)
        return Nothing

    def any(self, predicate: Callable[[T], bool] | None = None) -> bool:
        """True if some element satisfies the predicate (or is truthy)."""
        if predicate is None:
            return any(self.items)
        return any(predicate(item) for item in self.items)

    def all(self, predicate: Callable[[T], bool] | None = None) -> bool:
        if predicate is None:
            return all(self.items)
        return all(predicate(item) for item in self.items)

    def none(self, predicate: Callable[[T], bool] | None = None) -> bool:
        return not self.any(predicate)

    def first(self) -> Some[T] | NothingType:
        return Some(self.items[0]) if self.items else Nothing

    def last(self) -> Some[T] | NothingType:
        return Some(self.items[-1]) if self.items else Nothing

    def include(self, value: object) -> bool:
        return value in self.items

    def index(self, value: object) -> Integer:
        """Position of the first element equal to value, -1 if absent."""
        for position, item in enumerate(self.items):
            if item == value:
                return Integer(position)
        return Integer(-1)

    def rindex(self, value: object) -> Integer:
        """Position of the last element equal to value, -1 if absent."""
        for position in range(len(self.items) - 1, -1, -1):
            if self.items[position] == value:
                return Integer(position)
        return Integer(-1)

    def min(self, key: Callable[[T], Any] | None = None) -> Some[T] | NothingType:
        if not self.items:
            return Nothing
        return Some(min(self.items, key=key or sort_key))

    def max(self, key: Callable[[T], Any] | None = None) -> Some[T] | NothingType:
        if not self.items:
            return Nothing
        return Some(max(self.items, key=key or sort_key))

    def sum(self, start: Any = 0) -> Any:
        return sum(self.items, start)

    # --- ordering ---

    def reverse(self) -> Array[T]:
        return Array(self.items[::-1])

    def sort(self, key: Callable[[T], Any] | None = None) -> Array[T]:
        """Ascending sort.

        Without `key`, elements are ordered by the `sort_key` typeclass, so
        element types without an instance raise NoInstanceError.
        """
        return Array(sorted(self.items, key=key or sort_key))

    def uniq(self) -> Array[T]:
        """Drop repeated elements, keeping the first occurrence."""
        seen: set[Any] = set()
        seen_unhashable: list[Any] = []
        result: list[T] = []
        for item in self.items:
            try:
                if item in seen:
                    continue
                seen.add(item)
            except TypeError:
                if item in seen_unhashable:
                    continue
                seen_unhashable.append(item)
            result.append(item)
        return Array(result)

    def compact(self) -> Array[T]:
        """Drop None and zero values ('', 0, 0.0, False)."""
        return Array([item for item in self.items if not _is_zero(item)])

    def shuffle(self) -> Array[T]:
        """Random permutation drawn from the configured random source."""
        shuffled = list(self.items)
        get_random().shuffle(shuffled)
        return Array(shuffled)

    def sample(self) -> Some[T] | NothingType:
        if not self.items:
            return Nothing
        return Some(get_random().choice(self.items))

    def rotate(self, positions: int = 1) -> Array[T]:
        """Rotate left by positions; negative values rotate right.

        Examples:
            >>> Array([1, 2, 3, 4]).rotate(1)
            Array([2, 3, 4, 1])
            >>> Array([1, 2, 3, 4]).rotate(-1)
            Array([4, 1, 2, 3])
        """
        if not self.items:
            return Array()
        shift = positions % len(self.items)
        return Array(self.items[shift:] + self.items[:shift])

    # --- slicing ---

    def take(self, n: int) -> Array[T]:
        """First n elements, n clamped to [0, length]."""
        return Array(self.items[: max(n, 0)])

    def drop(self, n: int) -> Array[T]:
        """All but the first n elements, n clamped to [0, length]."""
        return Array(self.items[max(n, 0) :])

    def chunk(self, size: int) -> Array[Array[T]]:
        """Split into consecutive groups of `size`; the last may be shorter.

        A non-positive size yields no groups.
        """
        if size <= 0:
            logger.debug('chunk size must be positive', size=size)
            return Array()
        return Array([Array(self.items[start : start + size]) for start in range(0, len(self.items), size)])

    def cycle(self, times: int) -> Array[T]:
        """The whole sequence repeated `times` times; empty for times <= 0."""
        if times <= 0:
            logger.debug('cycle count must be positive', times=times)
            return Array()
        return Array(self.items * times)

    def join(self, separator: str | String = '') -> String:
        """Render every element with `to_s` and join them.

        Examples:
            >>> Array([1, 2.5, True, None]).join('-')
            String('1-2.5-true-')
        """
        from rubyish.string import String

        return String(str(separator).join(to_s(item) for item in self.items))

    # --- stack / queue ---

    def push(self, value: T) -> Array[T]:
        return Array((*self.items, value))

    def pop(self) -> tuple[Some[T] | NothingType, Array[T]]:
        """Split off the last element: (Some(last), rest) or (Nothing, empty)."""
        if not self.items:
            return Nothing, Array()
        return Some(self.items[-1]), Array(self.items[:-1])

    def shift(self) -> tuple[Some[T] | NothingType, Array[T]]:
        """Split off the first element: (Some(first), rest) or (Nothing, empty)."""
        if not self.items:
            return Nothing, Array()
        return Some(self.items[0]), Array(self.items[1:])

    def unshift(self, value: T) -> Array[T]:
        return Array((value, *self.items))

    def clear(self) -> Array[T]:
        return Array()

    def fill(self, value: T) -> Array[T]:
        """Same length, every slot set to value."""
        return Array([value] * len(self.items))

    def clone(self) -> Array[T]:
        return Array(self.items)


@to_s.instance(Array)
def _array_to_s(value: Array[Any]) -> str:
    return '[' + ', '.join(to_s(item) for item in value.items) + ']'
