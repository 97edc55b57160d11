"""Integer and Float wrappers.

Both subclass the builtin numeric types, so they compare, hash and do
arithmetic like plain numbers (arithmetic results are plain `int`/`float`;
wrap them again to keep chaining). The Ruby-style methods return wrapped
values and plain `bool` for predicates.
"""

from __future__ import annotations

import math
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rubyish._logging import get_logger
from rubyish.conversions import format_float

if TYPE_CHECKING:
    from rubyish.array import Array
    from rubyish.string import String

__all__ = ['Float', 'Integer']

logger = get_logger(__name__)


class Integer(int):
    """Ruby-style integer.

    Examples:
        >>> Integer(12).divisors()
        Array([1, 2, 3, 4, 6, 12])
        >>> Integer(5).factorial()
        120
    """

    __slots__ = ()

    # --- predicates ---

    def is_odd(self) -> bool:
        return self % 2 == 1

    def is_even(self) -> bool:
        return self % 2 == 0

    def is_positive(self) -> bool:
        return self > 0

    def is_negative(self) -> bool:
        return self < 0

    def is_zero(self) -> bool:
        return self == 0

    def between(self, lo: int, hi: int) -> bool:
        """Return True if lo <= self <= hi."""
        return lo <= self <= hi

    def is_divisible_by(self, divisor: int) -> bool:
        """Return True if divisor evenly divides self. Always False for 0."""
        if divisor == 0:
            return False
        return self % divisor == 0

    def is_prime(self) -> bool:
        """Trial division primality test."""
        if self < 2:
            return False
        if self < 4:
            return True
        if self % 2 == 0 or self % 3 == 0:
            return False
        candidate = 5
        while candidate * candidate <= self:
            if self % candidate == 0 or self % (candidate + 2) == 0:
                return False
            candidate += 6
        return True

    # --- conversions ---

    def abs(self) -> Integer:
        return Integer(abs(int(self)))

    def to_f(self) -> Float:
        return Float(self)

    def to_i(self) -> Integer:
        return self

    def to_s(self) -> String:
        from rubyish.string import String

        return String(str(int(self)))

    def to_str(self) -> String:
        return self.to_s()

    # --- arithmetic ---

    def power(self, exponent: int) -> Integer:
        """Raise to a non-negative integer power.

        Raises:
            ValueError: If exponent is negative.
        """
        if exponent < 0:
            msg = f'negative exponent {exponent} has no integer result'
            raise ValueError(msg)
        return Integer(int(self) ** exponent)

    def sqrt(self) -> Integer:
        """Integer square root (floor).

        Raises:
            ValueError: If self is negative.
        """
        return Integer(math.isqrt(self))

    def min(self, other: int) -> Integer:
        return Integer(min(int(self), other))

    def max(self, other: int) -> Integer:
        return Integer(max(int(self), other))

    def clamp(self, lo: int, hi: int) -> Integer:
        if self < lo:
            return Integer(lo)
        if self > hi:
            return Integer(hi)
        return self

    def factorial(self) -> Integer:
        """n! for n >= 0; negative receivers yield 0."""
        if self < 0:
            return Integer(0)
        return Integer(math.factorial(self))

    def gcd(self, other: int) -> Integer:
        return Integer(math.gcd(self, other))

    def lcm(self, other: int) -> Integer:
        return Integer(math.lcm(self, other))

    def divisors(self) -> Array[Integer]:
        """Positive divisors of |self| in ascending order, empty for 0."""
        from rubyish.array import Array

        n = abs(int(self))
        if n == 0:
            return Array()
        small: list[Integer] = []
        large: list[Integer] = []
        for candidate in range(1, math.isqrt(n) + 1):
            if n % candidate == 0:
                small.append(Integer(candidate))
                if candidate != n // candidate:
                    large.append(Integer(n // candidate))
        return Array([*small, *reversed(large)])

    def next(self) -> Integer:
        return Integer(self + 1)

    def succ(self) -> Integer:
        return self.next()

    def pred(self) -> Integer:
        return Integer(self - 1)

    # --- iteration ---

    def times(self, fn: Callable[[Integer], Any]) -> None:
        """Call fn with 0, 1, ..., self - 1."""
        for i in range(self):
            fn(Integer(i))

    def upto(self, limit: int, fn: Callable[[Integer], Any]) -> None:
        """Call fn with self, self + 1, ..., limit."""
        for i in range(self, limit + 1):
            fn(Integer(i))

    def downto(self, limit: int, fn: Callable[[Integer], Any]) -> None:
        """Call fn with self, self - 1, ..., limit."""
        for i in range(self, limit - 1, -1):
            fn(Integer(i))

    def step(self, limit: int, step: int, fn: Callable[[Integer], Any]) -> None:
        """Call fn from self towards limit (inclusive) in increments of step.

        A zero step does nothing.
        """
        if step == 0:
            logger.debug('zero step ignored', receiver=int(self), limit=limit)
            return
        stop = limit + 1 if step > 0 else limit - 1
        for i in range(self, stop, step):
            fn(Integer(i))


def _round_half_away(value: float) -> float:
    truncated = math.trunc(value)
    if abs(value - truncated) >= 0.5:
        truncated += math.copysign(1, value)
    return float(truncated)


class Float(float):
    """Ruby-style float.

    Math functions follow IEEE semantics instead of raising: the square root
    of a negative number is NaN and the logarithm of zero is -inf.

    Examples:
        >>> Float(2.5).round()
        3.0
        >>> Float(1234567.0).to_s()
        String('1.234567e+06')
    """

    __slots__ = ()

    # --- predicates ---

    def is_positive(self) -> bool:
        return self > 0

    def is_negative(self) -> bool:
        return self < 0

    def is_zero(self) -> bool:
        return self == 0

    def is_finite(self) -> bool:
        return math.isfinite(self)

    def is_infinite(self) -> bool:
        return math.isinf(self)

    def is_nan(self) -> bool:
        return math.isnan(self)

    def is_integer(self) -> bool:
        return float.is_integer(self)

    def between(self, lo: float, hi: float) -> bool:
        return lo <= self <= hi

    # --- rounding & conversions ---

    def ceil(self) -> Float:
        if not math.isfinite(self):
            return self
        return Float(math.ceil(self))

    def floor(self) -> Float:
        if not math.isfinite(self):
            return self
        return Float(math.floor(self))

    def round(self) -> Float:
        """Round to the nearest whole number, halves away from zero."""
        if not math.isfinite(self):
            return self
        return Float(_round_half_away(self))

    def abs(self) -> Float:
        return Float(math.fabs(self))

    def to_i(self) -> Integer:
        """Truncate towards zero. NaN and the infinities have no integer value and give 0."""
        if not math.isfinite(self):
            return Integer(0)
        return Integer(math.trunc(self))

    def to_f(self) -> Float:
        return self

    def to_s(self) -> String:
        from rubyish.string import String

        return String(format_float(self))

    def to_str(self) -> String:
        return self.to_s()

    # --- math ---

    def power(self, exponent: float) -> Float:
        if self == 0 and exponent < 0:
            return Float(math.inf)
        try:
            return Float(math.pow(self, exponent))
        except OverflowError:
            return Float(math.inf)
        except ValueError:
            return Float(math.nan)

    def sqrt(self) -> Float:
        if self < 0:
            return Float(math.nan)
        return Float(math.sqrt(self))

    def sin(self) -> Float:
        return Float(math.sin(self)) if math.isfinite(self) else Float(math.nan)

    def cos(self) -> Float:
        return Float(math.cos(self)) if math.isfinite(self) else Float(math.nan)

    def tan(self) -> Float:
        return Float(math.tan(self)) if math.isfinite(self) else Float(math.nan)

    def log(self) -> Float:
        return Float(self._log(math.log))

    def log10(self) -> Float:
        return Float(self._log(math.log10))

    def _log(self, fn: Callable[[float], float]) -> float:
        if math.isnan(self) or self < 0:
            return math.nan
        if self == 0:
            return -math.inf
        return fn(self)

    def exp(self) -> Float:
        try:
            return Float(math.exp(self))
        except OverflowError:
            return Float(math.inf)

    def min(self, other: float) -> Float:
        return self if self < other else Float(other)

    def max(self, other: float) -> Float:
        return self if self > other else Float(other)

    def clamp(self, lo: float, hi: float) -> Float:
        if self < lo:
            return Float(lo)
        if self > hi:
            return Float(hi)
        return self
