from dataclasses import dataclass


class Immutable:
    """
    Super class that turns subclasses into frozen dataclasses.
    Both `Just`/`Nothing` and `NoneCase` are built on it, so none of
    them can change after ``__init__`` returns.

    Example:
        >>> class Point(Immutable):
        ...     x: int
        ...     y: int
        >>> p = Point(1, 2)
        >>> p.x = 3
        FrozenInstanceError: cannot assign to field 'x'

    Methods defined in the class body (``__eq__``, ``__hash__``,
    ``__repr__``) take precedence over the generated ones.

    """
    def __init_subclass__(cls,
                          init: bool = True,
                          repr: bool = True,
                          eq: bool = True,
                          order: bool = False,
                          unsafe_hash: bool = False,
                          **kwargs) -> None:
        super().__init_subclass__(**kwargs)
        dataclass(
            frozen=True,
            init=init,
            repr=repr,
            eq=eq,
            order=order,
            unsafe_hash=unsafe_hash
        )(cls)


__all__ = ['Immutable']
