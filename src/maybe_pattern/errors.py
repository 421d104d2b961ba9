from typing import Any, Callable, Optional, TypeVar

A = TypeVar('A')
F = TypeVar('F', bound=Callable[..., Any])


class MaybeError(Exception):
    """
    Base class for errors raised by `maybe_pattern`
    """
    pass


class InvalidArgument(MaybeError, TypeError):
    """
    Raised when an argument is missing or has the wrong shape,
    e.g when ``None`` is passed where a callable is required

    Attributes:
        name: name of the offending argument
    """
    def __init__(self, name: str, message: Optional[str] = None):
        self.name = name
        super().__init__(message or f'argument "{name}" may not be None')


class InvalidState(MaybeError, ValueError):
    """
    Raised when a value is requested from an absent `Maybe`
    """
    pass


def check_callable(f: F, name: str) -> F:
    """
    Assert that ``f`` is callable

    Example:
        >>> check_callable(print, 'on_present')
        <built-in function print>
        >>> check_callable(None, 'on_present')
        InvalidArgument: argument "on_present" may not be None

    Args:
        f: the argument to check
        name: argument name used in the error
    Return:
        ``f``
    """
    if f is None:
        raise InvalidArgument(name)
    if not callable(f):
        raise InvalidArgument(
            name, f'argument "{name}" must be callable, got {f!r}'
        )
    return f


def check_present(
    value: Optional[A], label: str, extra_message: str = ''
) -> A:
    if value is None:
        message = f'({label}) may not be absent.'
        if extra_message:
            message = f'{message} {extra_message}'
        raise InvalidState(message)
    return value


__all__ = [
    'MaybeError',
    'InvalidArgument',
    'InvalidState',
    'check_callable',
    'check_present'
]
