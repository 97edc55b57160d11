"""String: a mutable text holder with pure transforms and enforce-mutators.

Pure methods (`strip`, `gsub`, ...) return a new String and leave the
receiver alone. Each `enforce_*` method applies the matching transform,
assigns the result back to the receiver and returns the receiver, so the
in-place variant is always the pure one plus an assignment.

Examples:
    >>> s = String('  Hello  ')
    >>> s.strip()
    String('Hello')
    >>> s
    String('  Hello  ')
    >>> s.enforce_strip()
    String('Hello')
    >>> s
    String('Hello')
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from typing import TYPE_CHECKING, Self

from rubyish._text import TextMethods
from rubyish.conversions import sort_key, to_s
from rubyish.numeric import Float, Integer

if TYPE_CHECKING:
    from rubyish.symbol import Symbol

__all__ = ['String']

_LEADING_INT = re.compile(r'\s*([+-]?\d+)')
_LEADING_FLOAT = re.compile(r'\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)')


class String(TextMethods):
    """Ruby-style string.

    Compares equal to plain `str` values with the same text. Being mutable,
    it is not hashable; use `str(s)` or `s.to_sym()` as a dict key.
    """

    __slots__ = ('value',)

    def __init__(self, value: object = '') -> None:
        self.value: str = str(value)

    def _text(self) -> str:
        return self.value

    @classmethod
    def _new(cls, text: str) -> Self:
        return cls(text)

    # --- Python protocol ---

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f'String({self.value!r})'

    def __eq__(self, other: object) -> bool:
        if isinstance(other, String):
            return self.value == other.value
        if isinstance(other, str):
            return self.value == other
        return NotImplemented

    def __lt__(self, other: String | str) -> bool:
        return self.value < str(other)

    __hash__ = None  # type: ignore[assignment]

    def __len__(self) -> int:
        return len(self.value)

    def __bool__(self) -> bool:
        return bool(self.value)

    def __iter__(self) -> Iterator[String]:
        return (String(char) for char in self.value)

    def __contains__(self, substring: object) -> bool:
        return str(substring) in self.value

    def __add__(self, other: String | str) -> String:
        return String(self.value + str(other))

    def __radd__(self, other: str) -> String:
        return String(str(other) + self.value)

    # --- conversions ---

    def to_s(self) -> String:
        return String(self.value)

    def to_sym(self) -> Symbol:
        from rubyish.symbol import Symbol

        return Symbol(self.value)

    def to_i(self) -> Integer:
        """Parse a leading integer, ignoring trailing text. 0 when there is none.

        Examples:
            >>> String('42 apples').to_i()
            42
            >>> String('apples').to_i()
            0
        """
        match = _LEADING_INT.match(self.value)
        if match is None:
            return Integer(0)
        return Integer(int(match.group(1)))

    def to_f(self) -> Float:
        """Parse a leading decimal number, ignoring trailing text. 0.0 when there is none."""
        match = _LEADING_FLOAT.match(self.value)
        if match is None:
            return Float(0.0)
        return Float(float(match.group(1)))

    def title(self) -> String:
        """Capitalize every whitespace-separated word, joining them with single spaces.

        Examples:
            >>> String('hello   WORLD').title()
            String('Hello World')
        """
        return String(' '.join(word[0].upper() + word[1:].lower() for word in self.value.split()))

    def clone(self) -> String:
        return String(self.value)

    # --- enforce-mutators ---

    def _assign(self, result: String) -> String:
        self.value = result.value
        return self

    def enforce_downcase(self) -> String:
        return self._assign(self.downcase())

    def upcase_bang(self) -> None:
        """Upcase in place."""
        self._assign(self.upcase())

    def enforce_capitalize(self) -> String:
        return self._assign(self.capitalize())

    def enforce_strip(self) -> String:
        return self._assign(self.strip())

    def enforce_lstrip(self) -> String:
        return self._assign(self.lstrip())

    def enforce_rstrip(self) -> String:
        return self._assign(self.rstrip())

    def enforce_reverse(self) -> String:
        return self._assign(self.reverse())

    def enforce_swapcase(self) -> String:
        return self._assign(self.swapcase())

    def enforce_title(self) -> String:
        return self._assign(self.title())

    def enforce_gsub(self, pattern: str | TextMethods, replacement: str | TextMethods) -> String:
        return self._assign(self.gsub(pattern, replacement))

    def enforce_sub(self, pattern: str | TextMethods, replacement: str | TextMethods) -> String:
        return self._assign(self.sub(pattern, replacement))


@to_s.instance(String)
def _string_to_s(value: String) -> str:
    return value.value


@sort_key.instance(String)
def _string_key(value: String) -> str:
    return value.value
