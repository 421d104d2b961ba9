from typing import Any, Callable, Tuple, TypeVar, Union

from . import maybe
from .none_case import NoneCase

try:
    from hypothesis.strategies import (
        SearchStrategy,
        booleans,
        builds,
        composite,
        floats,
        integers,
        one_of,
        sampled_from,
        text
    )
except ImportError:
    raise ImportError(
        'Could not import hypothesis. To use '
        'maybe_pattern.hypothesis_strategies, '
        'install maybe-pattern with \n\n\tpip install maybe-pattern[test]'
    )

A = TypeVar('A')


def _everything(allow_nan: bool = False) -> Tuple[SearchStrategy[int],
                                                  SearchStrategy[bool],
                                                  SearchStrategy[str],
                                                  SearchStrategy[float]]:
    return integers(), booleans(), text(), floats(allow_nan=allow_nan)


def anything(allow_nan: bool = False
             ) -> SearchStrategy[Union[int, bool, str, float]]:
    """
    Create a search strategy that produces one of int, bool, str or floats.

    Args:
        allow_nan: whether to allow nan values
    Return:
        Search strategy that produces ints, bools, str or floats
    """
    return one_of(*_everything(allow_nan))


def unaries(return_strategy: SearchStrategy[A]
            ) -> SearchStrategy[Callable[[object], A]]:
    """
    Create a search strategy that produces functions of 1 argument

    Example:
        >>> f = unaries(integers()).example()
        >>> f(None)
        2
    Args:
        return_strategy: strategy used to draw return values
    Return:
        Search strategy that produces callables of 1 argument
    """
    @composite
    def _(draw):
        a: A = draw(return_strategy)
        return lambda _: a

    return _()


def type_tags() -> SearchStrategy[type]:
    """
    Create a search strategy that produces type tags for `Nothing`
    """
    return sampled_from([object, int, bool, str, float])


def justs(value_strategy: SearchStrategy[A]
          ) -> SearchStrategy['maybe.Just[A]']:
    """
    Create a search strategy that produces `maybe_pattern.maybe.Just` values
    tagged with the type of the drawn value

    Args:
        value_strategy: search strategy to draw values from
    Return:
        search strategy that produces `maybe_pattern.maybe.Just` values
    """
    return builds(maybe.Just, value_strategy)


def nothings() -> SearchStrategy[maybe.Nothing]:
    """
    Create a search strategy that produces `maybe_pattern.maybe.Nothing`
    values with various type tags
    """
    return builds(maybe.Nothing, type_tags())


def maybes(value_strategy: SearchStrategy[A]
           ) -> SearchStrategy[Any]:
    """
    Create a search strategy that produces `maybe_pattern.maybe.Maybe` values

    Example:
        >>> maybes(integers()).example()
        Just(1)
    Args:
        value_strategy: search strategy to draw values from
    Return:
        search strategy that produces `maybe_pattern.maybe.Maybe` values
    """
    return one_of(justs(value_strategy), nothings())


def none_cases() -> SearchStrategy[NoneCase]:
    """
    Create a search strategy that produces `NoneCase` values
    """
    return builds(NoneCase, booleans())


__all__ = [
    'anything',
    'unaries',
    'type_tags',
    'justs',
    'nothings',
    'maybes',
    'none_cases'
]
