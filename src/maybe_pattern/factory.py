"""
Constructors for `Maybe` values.

Python makes no distinction between reference and value types, so
`present_value` and `absent_value` build the same `Just` and `Nothing`
as `present` and `absent`. Use them where the wrapped type is a value
type (ints, frozen dataclasses, named tuples) to say so at the call site.
"""
from typing import Optional, Type, TypeVar

from .maybe import Maybe, Nothing, from_optional

A = TypeVar('A')


def present(value: Optional[A], type_: Optional[Type[A]] = None) -> Maybe[A]:
    """
    Wrap ``value``

    Example:
        >>> present('value')
        Just('value')
        >>> present(None, str)
        Nothing(str)

    Args:
        value: value to wrap, may be None
        type_: type tag, ``type(value)`` if omitted
    Return:
        `Just` wrapping ``value``, or `Nothing` if ``value`` is None
    """
    return from_optional(value, type_)


def absent(type_: Type[A] = object) -> Maybe[A]:  # type: ignore
    """
    Get an absent value of type ``type_``

    Example:
        >>> absent(str)
        Nothing(str)

    Args:
        type_: type tag
    Return:
        `Nothing` tagged with ``type_``
    """
    return Nothing(type_)


def present_value(value: Optional[A],
                  type_: Optional[Type[A]] = None) -> Maybe[A]:
    return present(value, type_)


def absent_value(type_: Type[A] = object) -> Maybe[A]:  # type: ignore
    return absent(type_)


__all__ = ['present', 'absent', 'present_value', 'absent_value']
