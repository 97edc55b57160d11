"""Text methods shared by String and Symbol.

Every transform returns a new value of the receiver's own type, and every
splitting method returns an Array of that type. Subclasses provide the raw
text through `_text()` and construction through `_new()`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Self

from rubyish.array import Array
from rubyish.numeric import Integer

if TYPE_CHECKING:
    from rubyish.string import String

__all__ = ['TextMethods']


class TextMethods:
    """Mixin implementing the case, whitespace, search and split methods."""

    __slots__ = ()

    def _text(self) -> str:
        raise NotImplementedError

    @classmethod
    def _new(cls, text: str) -> Self:
        raise NotImplementedError

    # --- conversions ---

    def to_s(self) -> String:
        from rubyish.string import String

        return String(self._text())

    def to_str(self) -> String:
        return self.to_s()

    # --- size ---

    def length(self) -> Integer:
        """Number of characters (code points)."""
        return Integer(len(self._text()))

    def size(self) -> Integer:
        return self.length()

    def is_empty(self) -> bool:
        return not self._text()

    def is_blank(self) -> bool:
        """True for empty or whitespace-only text."""
        return not self._text().strip()

    # --- case ---

    def downcase(self) -> Self:
        return self._new(self._text().lower())

    def upcase(self) -> Self:
        return self._new(self._text().upper())

    def capitalize(self) -> Self:
        """First character upper case, the rest lower case."""
        text = self._text()
        if not text:
            return self._new(text)
        return self._new(text[0].upper() + text[1:].lower())

    def swapcase(self) -> Self:
        return self._new(self._text().swapcase())

    # --- whitespace ---

    def strip(self) -> Self:
        return self._new(self._text().strip())

    def lstrip(self) -> Self:
        return self._new(self._text().lstrip())

    def rstrip(self) -> Self:
        return self._new(self._text().rstrip())

    # --- ordering ---

    def reverse(self) -> Self:
        return self._new(self._text()[::-1])

    # --- search ---

    def start_with(self, prefix: str | TextMethods) -> bool:
        return self._text().startswith(str(prefix))

    def end_with(self, suffix: str | TextMethods) -> bool:
        return self._text().endswith(str(suffix))

    def include(self, substring: str | TextMethods) -> bool:
        return str(substring) in self._text()

    # --- substitution ---

    def gsub(self, pattern: str | TextMethods, replacement: str | TextMethods) -> Self:
        """Replace every literal occurrence of pattern.

        An empty pattern matches between characters, except that an empty
        receiver stays empty.
        """
        text, pattern = self._text(), str(pattern)
        if not text and not pattern:
            return self._new('')
        return self._new(text.replace(pattern, str(replacement)))

    def sub(self, pattern: str | TextMethods, replacement: str | TextMethods) -> Self:
        """Replace the first literal occurrence of pattern."""
        text, pattern = self._text(), str(pattern)
        if not text and not pattern:
            return self._new('')
        return self._new(text.replace(pattern, str(replacement), 1))

    # --- splitting ---

    def chars(self) -> Array[Self]:
        return Array([self._new(char) for char in self._text()])

    def split(self, separator: str | TextMethods) -> Array[Self]:
        """Split on a literal separator; an empty separator splits into chars."""
        separator = str(separator)
        if not separator:
            return self.chars()
        return Array([self._new(part) for part in self._text().split(separator)])

    def lines(self) -> Array[Self]:
        return Array([self._new(line) for line in self._text().split('\n')])

    def words(self) -> Array[Self]:
        """Split on runs of whitespace, dropping empty fields."""
        return Array([self._new(word) for word in self._text().split()])
