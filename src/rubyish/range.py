"""Range: an interval over ints or floats, walked one unit at a time.

Direction is decided from the endpoints on every call: `Range(1, 5)` walks
up, `Range(5, 1)` walks down. `exclusive` drops the end endpoint.

Examples:
    >>> Range(1, 5).to_array()
    Array([1, 2, 3, 4, 5])
    >>> Range.new_exclusive(1, 5).to_s()
    String('1...5')
    >>> Range(5, 1).to_array()
    Array([5, 4, 3, 2, 1])
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import TYPE_CHECKING, Any

import msgspec

from rubyish._logging import get_logger
from rubyish.array import Array
from rubyish.conversions import to_s
from rubyish.numeric import Integer

if TYPE_CHECKING:
    from rubyish.string import String

__all__ = ['Range']

logger = get_logger(__name__)


class Range[T: (int, float)](msgspec.Struct, frozen=True):
    """Interval from `begin` to `end`.

    Attributes:
        begin: First value produced by iteration.
        end: Last value produced by iteration, unless `exclusive`.
        exclusive: Exclude the end endpoint (Ruby's `...`).
    """

    begin: T
    end: T
    exclusive: bool = False

    @classmethod
    def new(cls, begin: T, end: T) -> Range[T]:
        """Inclusive range, `begin..end`."""
        return cls(begin, end)

    @classmethod
    def new_exclusive(cls, begin: T, end: T) -> Range[T]:
        """Exclusive range, `begin...end`."""
        return cls(begin, end, exclusive=True)

    def _ascending(self) -> bool:
        return self.begin <= self.end

    def _walk(self, step: T | int = 1) -> Iterator[T]:
        kind = type(self.begin)
        current: Any = self.begin
        if self._ascending():
            while current < self.end or (current == self.end and not self.exclusive):
                yield kind(current)
                current += step
        else:
            while current > self.end or (current == self.end and not self.exclusive):
                yield kind(current)
                current -= step

    def __iter__(self) -> Iterator[T]:
        return self._walk()

    def __contains__(self, value: object) -> bool:
        return self.include(value)  # type: ignore[arg-type]

    def __len__(self) -> int:
        return int(self.size())

    # --- iteration ---

    def each(self, fn: Callable[[T], Any]) -> None:
        for value in self._walk():
            fn(value)

    def each_with_index(self, fn: Callable[[T, Integer], Any]) -> None:
        for index, value in enumerate(self._walk()):
            fn(value, Integer(index))

    def step(self, step: T, fn: Callable[[T], Any]) -> None:
        """Walk in increments of step (subtracted on descending ranges).

        A zero or negative step does nothing.

        Examples:
            >>> Range(0, 10).step(5, print)
            0
            5
            10
        """
        if step <= 0:
            logger.debug('range step must be positive', step=step, range=str(self.to_s()))
            return
        for value in self._walk(step):
            fn(value)

    def to_array(self) -> Array[T]:
        return Array(self._walk())

    # --- size ---

    def size(self) -> Integer:
        """Number of values iteration produces, in either direction.

        Integer ranges: `|end - begin| + 1`, minus one when exclusive. Float
        ranges count the walk itself, so rounding in the repeated `+ 1` never
        makes size and iteration disagree.

        Size follows the walk, not `is_empty()`: `Range(5, 1)` is empty in the
        Ruby sense but walks down through five values, so its size is 5.

        Examples:
            >>> Range(1, 5).size(), Range.new_exclusive(1, 5).size(), Range(5, 1).size()
            (5, 4, 5)
        """
        if isinstance(self.begin, int) and isinstance(self.end, int):
            count = abs(self.end - self.begin) + 1
            if self.exclusive:
                count -= 1
            return Integer(count)
        return Integer(sum(1 for _ in self._walk()))

    def length(self) -> Integer:
        return self.size()

    def is_empty(self) -> bool:
        """True iff begin > end, or the range is exclusive and begin == end.

        This is Ruby's notion of emptiness. Descending ranges still iterate
        downward, so `Range(5, 1).is_empty()` is True while `size()` is 5.
        """
        return self.begin > self.end or (self.exclusive and self.begin == self.end)

    # --- membership ---

    def include(self, value: T) -> bool:
        """Direction-aware membership test honoring `exclusive`."""
        if self._ascending():
            if self.exclusive:
                return self.begin <= value < self.end
            return self.begin <= value <= self.end
        if self.exclusive:
            return self.end < value <= self.begin
        return self.end <= value <= self.begin

    def cover(self, value: T) -> bool:
        return self.include(value)

    def overlap(self, other: Range[T]) -> bool:
        """True if the two ranges share a point. Mixed directions never overlap."""
        if self._ascending() and other._ascending():
            return self.begin <= other.end and other.begin <= self.end
        if not self._ascending() and not other._ascending():
            return self.end <= other.begin and other.end <= self.begin
        return False

    def contains(self, other: Range[T]) -> bool:
        """True if other lies entirely inside the receiver. Mixed directions never match."""
        if self._ascending() and other._ascending():
            return self.begin <= other.begin and self.end >= other.end
        if not self._ascending() and not other._ascending():
            return self.begin >= other.begin and self.end <= other.end
        return False

    # --- endpoints ---

    def min(self) -> T:
        return self.begin if self._ascending() else self.end

    def max(self) -> T:
        return self.end if self._ascending() else self.begin

    def first(self) -> T:
        return self.begin

    def last(self) -> T:
        """The end endpoint, or the value one step inside it when exclusive."""
        if not self.exclusive:
            return self.end
        kind = type(self.end)
        if self._ascending():
            return kind(self.end - 1)
        return kind(self.end + 1)

    def begin_value(self) -> T:
        return self.begin

    def end_value(self) -> T:
        return self.end

    def is_exclusive(self) -> bool:
        return self.exclusive

    def is_inclusive(self) -> bool:
        return not self.exclusive

    # --- copies & rendering ---

    def reverse(self) -> Range[T]:
        """Swap the endpoints, keeping `exclusive`."""
        return Range(self.end, self.begin, exclusive=self.exclusive)

    def clone(self) -> Range[T]:
        return Range(self.begin, self.end, exclusive=self.exclusive)

    def to_s(self) -> String:
        from rubyish.string import String

        return String(to_s(self))

    def to_str(self) -> String:
        return self.to_s()


@to_s.instance(Range)
def _range_to_s(value: Range[Any]) -> str:
    dots = '...' if value.exclusive else '..'
    return f'{to_s(value.begin)}{dots}{to_s(value.end)}'
