"""Typeclass utilities for ad-hoc polymorphism."""

from rubyish.typeclass.core import NoInstanceError, TypeClass, typeclass

__all__ = [
    'NoInstanceError',
    'TypeClass',
    'typeclass',
]
