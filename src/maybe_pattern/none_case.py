from typing import Any, Callable

from .errors import check_callable
from .immutable import Immutable


class NoneCase(Immutable):
    """
    Result of `Maybe.inspect`. Remembers whether the inspected
    `Maybe` was absent, so that an "else" branch can be chained:

    Example:
        >>> present(1).inspect(print).if_absent(lambda: print('none'))
        1
        >>> absent(int).inspect(print).if_absent(lambda: print('none'))
        none

    Two instances are equal iff their ``is_none`` flags are equal.
    """
    is_none: bool

    def if_absent(self, on_absent: Callable[[], Any]) -> None:
        """
        Call ``on_absent`` if the inspected `Maybe` was absent

        Args:
            on_absent: function of no arguments
        """
        check_callable(on_absent, 'on_absent')
        if self.is_none:
            on_absent()


__all__ = ['NoneCase']
