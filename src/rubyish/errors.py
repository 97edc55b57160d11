"""Error types: dual struct+exception for Result-based and raise-based code."""

from __future__ import annotations

from typing import Any

import msgspec

__all__ = [
    'KeyNotFound',
    'KeyNotFoundError',
    'RubyishError',
]


class RubyishError(Exception):
    """Base exception class for rubyish errors.

    Attributes:
        message (str): A human-readable description of the error.
        code (str | None): An optional error code for programmatic error handling.

    Example:
        ```python
        from rubyish import Hash, RubyishError

        try:
            raise Hash({'a': 1}).fetch('b').unwrap_err().to_exception()
        except RubyishError as e:
            print(f'lookup failed: {e}')
        ```
    """

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message)
        self.message: str = message
        self.code: str | None = code

    def __str__(self) -> str:
        """Return a string representation of the error."""
        if self.code:
            return f'[{self.code}] {self.message}'
        return self.message


# --- Lookup Errors ---


class KeyNotFound(msgspec.Struct, frozen=True):
    """Key is missing from a Hash - struct variant for Result[V, KeyNotFound]."""

    key: Any

    def to_exception(self) -> KeyNotFoundError:
        """Convert to exception for raise-based code."""
        return KeyNotFoundError(self.key)


class KeyNotFoundError(RubyishError, KeyError):
    """Key is missing from a Hash - exception variant, also a KeyError."""

    def __init__(self, key: Any) -> None:
        self.key = key
        super().__init__(f'key not found: {key!r}', code='key_not_found')

    def to_struct(self) -> KeyNotFound:
        """Convert to struct for Result-based code."""
        return KeyNotFound(self.key)
