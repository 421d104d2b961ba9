from typing import Any, Callable, TypeVar

from typing_extensions import Protocol, runtime_checkable

from .none_case import NoneCase

A = TypeVar('A', covariant=True)


@runtime_checkable
class SupportsMaybe(Protocol[A]):
    """
    Read-only view of a `Maybe`. Covariant in ``A``, so a
    ``Maybe[Derived]`` can be passed where a ``SupportsMaybe[Base]``
    is expected.
    """
    @property
    def has_value(self) -> bool:
        pass

    def inspect(self, on_present: Callable[[A], Any]) -> NoneCase:
        pass

    def value_or_fail(self, label: str = '', extra_message: str = '') -> A:
        pass


__all__ = ['SupportsMaybe']
