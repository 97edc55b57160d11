"""@typeclass decorator and dispatch mechanism.

Provides Haskell-style typeclasses with runtime dispatch on the type of the
first argument. rubyish uses them for capabilities that depend on the element
type of a container, such as rendering (`to_s`) and ordering (`sort_key`).
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Generic, TypeVar

import wrapt

__all__ = ['NoInstanceError', 'TypeClass', 'typeclass']

F = TypeVar('F', bound=Callable[..., Any])


class NoInstanceError(TypeError):
    """Raised when no typeclass instance is registered for a type."""

    def __init__(self, typeclass_name: str, value_type: type) -> None:
        self.typeclass_name = typeclass_name
        self.value_type = value_type
        super().__init__(f"No instance of '{typeclass_name}' for type '{value_type.__name__}'")


class TypeClass(wrapt.ObjectProxy, Generic[F]):
    """A typeclass with registered type instances.

    Dispatch order is: exact type, then the first registered base class in
    the MRO, then the decorated function itself as the fallback.

    Attributes:
        _self_name: The name of the typeclass function.
        _self_default: The fallback implementation (the decorated function).
        _self_instances: Dictionary mapping types to their instance implementations.

    Example:
        ```python
        @typeclass
        def describe(value) -> str:
            return 'something'

        @describe.instance(int)
        def describe_int(value: int) -> str:
            return 'a number'

        describe(Integer(3))
        # 'a number'  (Integer subclasses int)
        describe([1])
        # 'something'
        ```
    """

    def __init__(self, default_fn: F) -> None:
        super().__init__(default_fn)
        self._self_name = default_fn.__name__
        self._self_default: F = default_fn
        self._self_instances: dict[type, Callable[..., Any]] = {}

    def instance(self, type_: type) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
        """Register an instance implementation for a specific type.

        Args:
            type_: The type to register the instance for.

        Returns:
            A decorator that registers the implementation.
        """

        def decorator(fn: Callable[..., Any]) -> Callable[..., Any]:
            self._self_instances[type_] = fn
            return fn

        return decorator

    def _find_instance(self, value: Any) -> Callable[..., Any] | None:
        """Find the best matching instance for a value."""
        value_type = type(value)

        if value_type in self._self_instances:
            return self._self_instances[value_type]

        # MRO lookup for inheritance (Integer -> int, Symbol -> str, ...)
        for base in value_type.__mro__[1:]:
            if base in self._self_instances:
                return self._self_instances[base]

        return None

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        """Dispatch to the appropriate instance based on first argument."""
        if not args:
            raise TypeError(f'{self._self_name}() requires at least one argument')

        instance_fn = self._find_instance(args[0])
        if instance_fn is not None:
            return instance_fn(*args, **kwargs)
        return self._self_default(*args, **kwargs)

    def __repr__(self) -> str:
        return f'<typeclass {self._self_name} with {len(self._self_instances)} instances>'


def typeclass(fn: F) -> TypeClass[F]:
    """Decorator to create a typeclass from a fallback implementation.

    The decorated function runs for values whose type has no registered
    instance. Raise `NoInstanceError` from it to make the capability
    mandatory.

    Example:
        ```python
        @typeclass
        def sort_key(value):
            raise NoInstanceError('sort_key', type(value))

        @sort_key.instance(int)
        def _int_key(value: int) -> int:
            return value
        ```
    """
    return TypeClass(fn)
