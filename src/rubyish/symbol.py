"""Symbol: an immutable, hashable name.

Symbol subclasses `str`, so it works as a dict key and compares equal to the
plain string with the same text. Its numeric conversions are strict: the
whole symbol must be a number, otherwise the result is zero.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Self

from rubyish._text import TextMethods
from rubyish.numeric import Float, Integer

if TYPE_CHECKING:
    from collections.abc import Callable

__all__ = ['Symbol']

_INTEGER = re.compile(r'[+-]?[0-9]+')


def _parse_float(text: str) -> float | None:
    # float() also accepts surrounding whitespace and digit separators
    if not text or text != text.strip() or '_' in text:
        return None
    try:
        return float(text)
    except ValueError:
        return None


class Symbol(TextMethods, str):
    """Ruby-style symbol.

    Examples:
        >>> Symbol('user_id').upcase()
        Symbol('USER_ID')
        >>> Symbol('12a').to_i()
        0
        >>> {Symbol('a'): 1}['a']
        1
    """

    __slots__ = ()

    def _text(self) -> str:
        return str.__str__(self)

    @classmethod
    def _new(cls, text: str) -> Self:
        return cls(text)

    def __repr__(self) -> str:
        return f'Symbol({str.__repr__(self)})'

    # --- conversions ---

    def to_sym(self) -> Symbol:
        return self

    def to_i(self) -> Integer:
        """Parse the whole symbol as a base-10 integer, 0 when it is not one."""
        if _INTEGER.fullmatch(self) is None:
            return Integer(0)
        return Integer(int(self))

    def to_f(self) -> Float:
        """Parse the whole symbol as a float, 0.0 when it is not one."""
        parsed = _parse_float(self._text())
        return Float(0.0 if parsed is None else parsed)

    def clone(self) -> Symbol:
        return self

    def title(self) -> Symbol:
        """Upper-case the first letter of every word, lower-case the rest."""
        return Symbol(self._text().lower().title())

    # --- predicates ---

    def is_present(self) -> bool:
        """Opposite of is_blank."""
        return not self.is_blank()

    def is_numeric(self) -> bool:
        return _parse_float(self._text()) is not None

    def is_float(self) -> bool:
        return self.is_numeric()

    def is_integer(self) -> bool:
        return _INTEGER.fullmatch(self) is not None

    def _all_chars(self, predicate: Callable[[str], bool]) -> bool:
        text = self._text()
        return bool(text) and all(predicate(char) for char in text)

    def is_alpha(self) -> bool:
        return self._all_chars(str.isalpha)

    def is_alphanumeric(self) -> bool:
        return self._all_chars(lambda char: char.isalpha() or char.isdecimal())

    def is_digit(self) -> bool:
        return self._all_chars(str.isdecimal)

    def is_space(self) -> bool:
        return self._all_chars(str.isspace)

    def is_upper(self) -> bool:
        return self._all_chars(str.isupper)

    def is_lower(self) -> bool:
        return self._all_chars(str.islower)

