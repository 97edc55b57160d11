"""Hash: a key-value mapping with Ruby-style combinators and in-place mutators.

`set`, `delete`, `clear`, `update`, `enforce_merge`, `replace`, `keep_if` and
`delete_if` change the receiver. Everything else (`merge`, `select`,
`reject`, `map`, `invert`, `clone`, ...) returns a new Hash.

Examples:
    >>> h = Hash({'a': 1, 'b': 2})
    >>> h.select(lambda k, v: v > 1)
    Hash({'b': 2})
    >>> h.fetch('z')
    Err(error=KeyNotFound(key='z'))
    >>> h.delete('a')
    Some(value=1)
    >>> h
    Hash({'b': 2})
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping
from typing import Any

import msgspec

from rubyish._logging import get_logger
from rubyish.array import Array
from rubyish.conversions import to_s
from rubyish.errors import KeyNotFound, KeyNotFoundError
from rubyish.numeric import Integer
from rubyish.option import Nothing, NothingType, Some
from rubyish.result import Err, Ok

__all__ = ['Hash', 'Pair']

logger = get_logger(__name__)


class Pair[K, V](msgspec.Struct, frozen=True):
    """Immutable (key, value) entry produced by `Hash.to_array`.

    Unpacks like a 2-tuple: `key, value = pair`.
    """

    key: K
    value: V

    def __iter__(self) -> Iterator[Any]:
        yield self.key
        yield self.value


def _entries[K, V](other: Hash[K, V] | Mapping[K, V]) -> Mapping[K, V]:
    if isinstance(other, Hash):
        return other.data
    return other


class Hash[K, V](msgspec.Struct):
    """Mapping from unique hashable keys to values.

    Iteration follows insertion order, but callers should not rely on it;
    `invert` in particular keeps an unspecified key when values collide.
    """

    data: dict[K, V] = msgspec.field(default_factory=dict)

    def __post_init__(self) -> None:
        self.data = dict(_entries(self.data))

    # --- Python protocol ---

    def __repr__(self) -> str:
        return f'Hash({self.data!r})'

    def __len__(self) -> int:
        return len(self.data)

    def __iter__(self) -> Iterator[K]:
        return iter(self.data)

    def __contains__(self, key: object) -> bool:
        return key in self.data

    def __bool__(self) -> bool:
        return bool(self.data)

    def __getitem__(self, key: K) -> V:
        """Look up a key, raising KeyNotFoundError (a KeyError) on a miss."""
        try:
            return self.data[key]
        except KeyError:
            raise KeyNotFoundError(key) from None

    def __setitem__(self, key: K, value: V) -> None:
        self.data[key] = value

    def to_dict(self) -> dict[K, V]:
        return dict(self.data)

    # --- lookup ---

    def keys(self) -> Array[K]:
        return Array(self.data.keys())

    def values(self) -> Array[V]:
        return Array(self.data.values())

    def has_key(self, key: object) -> bool:
        return key in self.data

    def has_value(self, value: object) -> bool:
        return any(existing == value for existing in self.data.values())

    def get(self, key: K, default: V | None = None) -> V | None:
        """Value for key, or default on a miss. Never fails."""
        return self.data.get(key, default)

    def fetch(self, key: K) -> Ok[V] | Err[KeyNotFound]:
        """Value for key as Ok, or Err(KeyNotFound(key)) on a miss.

        Examples:
            >>> Hash({'a': 1}).fetch('a').unwrap()
            1
            >>> Hash({'a': 1}).fetch('b').unwrap_or(0)
            0
        """
        if key in self.data:
            return Ok(self.data[key])
        logger.debug('hash fetch missed', key=repr(key))
        return Err(KeyNotFound(key))

    # --- size ---

    def size(self) -> Integer:
        return Integer(len(self.data))

    def length(self) -> Integer:
        return self.size()

    def is_empty(self) -> bool:
        return not self.data

    def count(self, *, where: Callable[[K, V], bool] | None = None) -> Integer:
        """Number of entries, or of entries the predicate accepts."""
        if where is None:
            return self.size()
        return Integer(sum(1 for key, value in self.data.items() if where(key, value)))

    def any(self, predicate: Callable[[K, V], bool]) -> bool:
        return any(predicate(key, value) for key, value in self.data.items())

    # --- in-place mutation ---

    def set(self, key: K, value: V) -> None:
        self.data[key] = value

    def delete(self, key: K) -> Some[V] | NothingType:
        """Remove key, returning Some(old value) or Nothing if it was absent."""
        if key not in self.data:
            return Nothing
        return Some(self.data.pop(key))

    def clear(self) -> None:
        self.data.clear()

    def update(self, other: Hash[K, V] | Mapping[K, V]) -> None:
        """Copy other's entries into the receiver; other's values win."""
        self.data.update(_entries(other))

    def enforce_merge(self, other: Hash[K, V] | Mapping[K, V]) -> None:
        """In-place merge, same conflict policy as `merge`."""
        self.update(other)

    def replace(self, other: Hash[K, V] | Mapping[K, V]) -> None:
        """Make the receiver a copy of other."""
        entries = dict(_entries(other))
        self.data.clear()
        self.data.update(entries)

    def keep_if(self, predicate: Callable[[K, V], bool]) -> None:
        """Delete every entry the predicate rejects."""
        for key in list(self.data):
            if not predicate(key, self.data[key]):
                del self.data[key]

    def delete_if(self, predicate: Callable[[K, V], bool]) -> None:
        """Delete every entry the predicate accepts."""
        for key in list(self.data):
            if predicate(key, self.data[key]):
                del self.data[key]

    # --- combinators ---

    def merge(self, other: Hash[K, V] | Mapping[K, V]) -> Hash[K, V]:
        """New Hash with other's entries layered over the receiver's."""
        return Hash({**self.data, **_entries(other)})

    def select(self, predicate: Callable[[K, V], bool]) -> Hash[K, V]:
        return Hash({key: value for key, value in self.data.items() if predicate(key, value)})

    def reject(self, predicate: Callable[[K, V], bool]) -> Hash[K, V]:
        return Hash({key: value for key, value in self.data.items() if not predicate(key, value)})

    def map[K2, V2](self, fn: Callable[[K, V], tuple[K2, V2]]) -> Hash[K2, V2]:
        """New Hash built from the (key, value) pairs fn returns.

        Later pairs overwrite earlier ones when fn maps two keys to the same key.
        """
        return Hash(dict(fn(key, value) for key, value in self.data.items()))

    def invert(self) -> Hash[V, K]:
        """Swap keys and values. Colliding values keep one of their keys."""
        return Hash({value: key for key, value in self.data.items()})

    def each(self, fn: Callable[[K, V], Any]) -> None:
        for key, value in list(self.data.items()):
            fn(key, value)

    def each_key(self, fn: Callable[[K], Any]) -> None:
        for key in list(self.data):
            fn(key)

    def each_value(self, fn: Callable[[V], Any]) -> None:
        for value in list(self.data.values()):
            fn(value)

    def to_array(self) -> Array[Pair[K, V]]:
        return Array([Pair(key, value) for key, value in self.data.items()])

    def clone(self) -> Hash[K, V]:
        """Shallow copy."""
        return Hash(self.data)


@to_s.instance(Hash)
def _hash_to_s(value: Hash[Any, Any]) -> str:
    return '{' + ', '.join(f'{to_s(key)}=>{to_s(item)}' for key, item in value.data.items()) + '}'


@to_s.instance(Pair)
def _pair_to_s(value: Pair[Any, Any]) -> str:
    return f'[{to_s(value.key)}, {to_s(value.value)}]'
