"""Boolean wrapper carrying the logical combinators.

Predicates across the library return plain `bool`; wrap one in `Boolean` to
chain logic on it.

Examples:
    >>> Boolean(True).and_(False)
    Boolean(value=False)
    >>> Boolean(False).implies(True).to_s()
    String('true')
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

import msgspec

from rubyish.conversions import sort_key, to_s
from rubyish.numeric import Float, Integer

if TYPE_CHECKING:
    from rubyish.string import String

__all__ = ['Boolean']


class Boolean(msgspec.Struct, frozen=True):
    """Ruby-style boolean."""

    value: bool = False

    def __bool__(self) -> bool:
        return bool(self.value)

    # --- conversions ---

    def to_s(self) -> String:
        from rubyish.string import String

        return String('true' if self.value else 'false')

    def to_str(self) -> String:
        return self.to_s()

    def to_i(self) -> Integer:
        return Integer(1 if self.value else 0)

    def to_f(self) -> Float:
        return Float(1.0 if self.value else 0.0)

    def is_true(self) -> bool:
        return bool(self.value)

    def is_false(self) -> bool:
        return not self.value

    # --- combinators ---

    def and_(self, other: Boolean | bool) -> Boolean:
        return Boolean(bool(self.value) and bool(other))

    def or_(self, other: Boolean | bool) -> Boolean:
        return Boolean(bool(self.value) or bool(other))

    def not_(self) -> Boolean:
        return Boolean(not self.value)

    def xor(self, other: Boolean | bool) -> Boolean:
        return Boolean(bool(self.value) != bool(other))

    def nand(self, other: Boolean | bool) -> Boolean:
        return self.and_(other).not_()

    def nor(self, other: Boolean | bool) -> Boolean:
        return self.or_(other).not_()

    def xnor(self, other: Boolean | bool) -> Boolean:
        return self.xor(other).not_()

    def implies(self, other: Boolean | bool) -> Boolean:
        """Material implication: false only for True -> False."""
        return Boolean(not self.value or bool(other))

    # --- control flow ---

    def if_true(self, fn: Callable[[], Any]) -> None:
        if self.value:
            fn()

    def if_false(self, fn: Callable[[], Any]) -> None:
        if not self.value:
            fn()

    def if_(self, if_true: Callable[[], Any], if_false: Callable[[], Any]) -> None:
        """Run exactly one of the two callbacks."""
        if self.value:
            if_true()
        else:
            if_false()

    def ternary[A, B](self, if_true: A, if_false: B) -> A | B:
        return if_true if self.value else if_false


@to_s.instance(Boolean)
def _boolean_to_s(value: Boolean) -> str:
    return 'true' if value.value else 'false'


@sort_key.instance(Boolean)
def _boolean_key(value: Boolean) -> bool:
    return bool(value.value)
