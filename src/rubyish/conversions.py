"""Element-type capabilities shared by the containers.

`to_s` renders any value the way Ruby's `to_s` would (used by `Array.join`,
`Range.to_s` and the scalar `to_s` methods). `sort_key` is the comparator
capability `Array.sort` requires; element types without an instance cannot be
sorted without an explicit key.

Container and wrapper modules register their own instances next to their
class definitions.
"""

from __future__ import annotations

import math
from typing import Any

from rubyish.typeclass import NoInstanceError, typeclass

__all__ = ['format_float', 'sort_key', 'to_s']


def format_float(value: float) -> str:
    """Render a float with the shortest round-trip digits, `%g` style.

    Exponent notation kicks in below 1e-4 and from 1e6 upwards.

    Examples:
        >>> format_float(3.14)
        '3.14'
        >>> format_float(100.0)
        '100'
        >>> format_float(1234567.0)
        '1.234567e+06'
    """
    if math.isnan(value):
        return 'NaN'
    if math.isinf(value):
        return '+Inf' if value > 0 else '-Inf'
    if value == 0:
        return '-0' if math.copysign(1.0, value) < 0 else '0'

    mantissa = repr(value).split('e')[0]
    digits = mantissa.replace('-', '').replace('.', '').strip('0')
    precision = max(len(digits), 1)

    scientific = f'{value:.{precision - 1}e}'
    exponent = int(scientific.split('e')[1])
    if exponent < -4 or exponent >= 6:
        return scientific
    return f'{value:.{max(precision - 1 - exponent, 0)}f}'


@typeclass
def to_s(value: Any) -> str:
    """Render a value as a plain str."""
    return str(value)


@to_s.instance(type(None))
def _none_to_s(_value: None) -> str:
    return ''


@to_s.instance(bool)
def _bool_to_s(value: bool) -> str:
    return 'true' if value else 'false'


@to_s.instance(int)
def _int_to_s(value: int) -> str:
    return str(int(value))


@to_s.instance(float)
def _float_to_s(value: float) -> str:
    return format_float(value)


@to_s.instance(str)
def _str_to_s(value: str) -> str:
    return str.__str__(value)


@typeclass
def sort_key(value: Any) -> Any:
    """Return the value `Array.sort` orders by."""
    raise NoInstanceError('sort_key', type(value))


@sort_key.instance(int)
def _int_key(value: int) -> int:
    return value


@sort_key.instance(float)
def _float_key(value: float) -> float:
    return value


@sort_key.instance(str)
def _str_key(value: str) -> str:
    return value
