import inspect as inspect_
import types
from abc import ABC, abstractmethod
from typing import (Any, Callable, Generic, Iterable, Mapping, MutableMapping,
                    Optional, Tuple, TypeVar, Union, get_type_hints)

from typing_extensions import get_args, get_origin

from .errors import InvalidArgument, check_callable, check_present
from .immutable import Immutable
from .none_case import NoneCase

A = TypeVar('A', covariant=True)
B = TypeVar('B')

VALUE_KEY = 'value'
TYPE_KEY = 'type'

_UNION_TYPES = {Union, getattr(types, 'UnionType', Union)}


class Maybe_(Immutable, ABC):
    """
    Abstract super class for values that may be absent.
    Should not be instantiated directly.
    Use `Just` and `Nothing` (or `present` and `absent`) instead.

    Every instance carries a type tag, ``type_``, which takes part
    in equality: ``Nothing(Base) != Nothing(Derived)``.

    """
    @property
    @abstractmethod
    def has_value(self) -> bool:
        """
        Whether this is a `Just`

        Example:
            >>> Just(1).has_value
            True
            >>> Nothing(int).has_value
            False

        """
        raise NotImplementedError()

    @abstractmethod
    def inspect(self, on_present: Callable) -> NoneCase:
        """
        Call ``on_present`` with the wrapped value if there is one

        Example:
            >>> Just(1).inspect(print)
            1
            NoneCase(is_none=False)
            >>> Nothing(int).inspect(print)
            NoneCase(is_none=True)

        Args:
            on_present: function to call with the wrapped value
        Return:
            `NoneCase` that can be used to handle the absent case \
            with `NoneCase.if_absent`

        """
        raise NotImplementedError()

    @abstractmethod
    def map(self, project: Callable, type_: Optional[type] = None) -> Any:
        """
        Project the wrapped value with ``project``. If ``project``
        returns ``None`` the result is `Nothing`, and if it returns
        a `Maybe` the result is that `Maybe` (no nesting).

        Example:
            >>> Just(2).map(str)
            Just('2')
            >>> Just({}).map(lambda d: d.get('key'), str)
            Nothing(str)
            >>> Just(2).map(lambda i: Just(i + 1))
            Just(3)
            >>> Nothing(int).map(str)
            Nothing()

        Args:
            project: function to apply to the wrapped value
            type_: type tag of the result. Taken from the return \
                annotation of ``project``, or the result itself, if omitted
                (the tag of this instance is not carried over, so \
                ``m.map(identity, m.type_) == m``)
        Return:
            `Just` wrapping the projected value, `Nothing` otherwise

        """
        raise NotImplementedError()

    @abstractmethod
    def value_or_default(self, default: B) -> Any:
        """
        Get the wrapped value, or ``default`` if there is none

        Example:
            >>> Just(1).value_or_default(2)
            1
            >>> Nothing(int).value_or_default(2)
            2

        Args:
            default: value to return if this is `Nothing`
        Return:
            the wrapped value if this is a `Just`, ``default`` otherwise

        """
        raise NotImplementedError()

    @abstractmethod
    def value_or_fail(self, label: str = '', extra_message: str = '') -> Any:
        """
        Get the wrapped value, or raise `InvalidState` if there is none

        Example:
            >>> Just(1).value_or_fail()
            1
            >>> Nothing(int).value_or_fail('count', 'Was the file parsed?')
            InvalidState: (count) may not be absent. Was the file parsed?

        Args:
            label: name used in the error message, defaults to the \
                name of the type tag
            extra_message: appended to the error message
        Return:
            the wrapped value

        """
        raise NotImplementedError()

    @abstractmethod
    def __bool__(self) -> bool:
        raise NotImplementedError()

    def write_state(self, state: MutableMapping[str, Any]) -> None:
        """
        Write the wrapped value and type tag to ``state``
        under `VALUE_KEY` and `TYPE_KEY`.
        The inverse of `from_state`.

        Args:
            state: mapping to write to
        """
        if state is None:
            raise InvalidArgument('state')
        state[VALUE_KEY] = self.value_or_default(None)
        state[TYPE_KEY] = self.type_

    def __reduce__(self):
        state: dict = {}
        self.write_state(state)
        return from_state, (state, )


def _check_type(type_: Any) -> type:
    if not isinstance(type_, type):
        raise InvalidArgument('type_', f'type tag must be a class, got {type_!r}')
    return type_


def _return_class(f: Callable) -> Optional[type]:
    # Only plain classes (or Optional of one) are used as tags
    if not (inspect_.isfunction(f) or inspect_.ismethod(f)):
        return None
    try:
        annotation = get_type_hints(f).get('return')
    except (NameError, TypeError):
        return None
    if get_origin(annotation) in _UNION_TYPES:
        args = [a for a in get_args(annotation) if a is not type(None)]
        if len(args) == 1:
            annotation = args[0]
    if annotation is type(None) or not isinstance(annotation, type):
        return None
    if getattr(annotation, '_is_protocol', False):
        return None
    return annotation


def _result_class(f: Callable, result: Any) -> Optional[type]:
    # The annotation tags only results that are instances of it;
    # an int returned under "-> float" is tagged int
    annotation = _return_class(f)
    if annotation is None or result is None or isinstance(result, Maybe_):
        return annotation
    try:
        return annotation if isinstance(result, annotation) else None
    except TypeError:
        return None


class Just(Maybe_, Generic[A]):
    """
    Represents a present value

    """
    get: A
    """
    The wrapped value
    """
    type_: type = None  # type: ignore
    """
    The type tag, ``type(get)`` unless given
    """

    def __post_init__(self):
        if self.get is None:
            raise InvalidArgument(
                'get', 'Just cannot wrap None, use Nothing instead'
            )
        if self.type_ is None:
            object.__setattr__(self, 'type_', type(self.get))
        _check_type(self.type_)
        if not isinstance(self.get, self.type_):
            raise InvalidArgument(
                'get',
                f'{self.get!r} is not an instance of {self.type_.__name__}'
            )

    @property
    def has_value(self) -> bool:
        return True

    def inspect(self, on_present: Callable[[A], Any]) -> NoneCase:
        check_callable(on_present, 'on_present')
        on_present(self.get)
        return NoneCase(False)

    def map(self,
            project: Callable[[A], Union[B, None, 'Maybe[B]']],
            type_: Optional[type] = None) -> 'Maybe[B]':
        check_callable(project, 'project')
        result = project(self.get)
        return _to_maybe(result, type_ or _result_class(project, result))

    def value_or_default(self, default: B) -> Union[A, B]:
        return self.get

    def value_or_fail(self, label: str = '', extra_message: str = '') -> A:
        return check_present(
            self.get, label or self.type_.__name__, extra_message
        )

    def __eq__(self, other: Any) -> bool:
        """
        Test if other is a ``Just`` with the same type tag

        Args:
            other: Value to compare with
        Return:
            True if other is a ``Just`` with the same type tag and its \
            wrapped value equals the wrapped value of this instance

        """
        if not isinstance(other, Just):
            return False
        return other.type_ is self.type_ and other.get == self.get

    def __hash__(self) -> int:
        return hash(self.get)

    def __str__(self) -> str:
        return str(self.get)

    def __repr__(self) -> str:
        if self.type_ is type(self.get):
            return f'Just({self.get!r})'
        return f'Just({self.get!r}, {self.type_.__name__})'

    def __bool__(self) -> bool:
        return True


class Nothing(Maybe_):
    """
    Represents an absent value

    """
    type_: type = object

    def __post_init__(self):
        _check_type(self.type_)

    @property
    def has_value(self) -> bool:
        return False

    def inspect(self, on_present: Callable[[Any], Any]) -> NoneCase:
        check_callable(on_present, 'on_present')
        return NoneCase(True)

    def map(self,
            project: Callable[[Any], Any],
            type_: Optional[type] = None) -> 'Nothing':
        check_callable(project, 'project')
        return Nothing(type_ or _return_class(project) or object)

    def value_or_default(self, default: B) -> B:
        return default

    def value_or_fail(self, label: str = '', extra_message: str = '') -> Any:
        return check_present(
            None, label or self.type_.__name__, extra_message
        )

    def __eq__(self, other: Any) -> bool:
        """
        Test if other is a ``Nothing`` with the same type tag

        Args:
            other: Value to compare with
        Return:
            True if other is a ``Nothing`` with the same type tag, \
            False otherwise

        """
        return isinstance(other, Nothing) and other.type_ is self.type_

    def __hash__(self) -> int:
        return hash((Nothing, self.type_))

    def __str__(self) -> str:
        return ''

    def __repr__(self) -> str:
        if self.type_ is object:
            return 'Nothing()'
        return f'Nothing({self.type_.__name__})'

    def __bool__(self) -> bool:
        return False


Maybe = Union[Nothing, Just[A]]
"""
Type-alias for `Union[Nothing, Just[TypeVar('A')]]`
"""


def from_optional(optional: Optional[B],
                  type_: Optional[type] = None) -> Maybe[B]:
    """
    Convert a possible None value to `Maybe`

    Example:
        >>> from_optional('value')
        Just('value')
        >>> from_optional(None, str)
        Nothing(str)

    Args:
        optional: optional value to convert to `Maybe`
        type_: type tag, ``type(optional)`` or ``object`` if omitted
    Return:
        `Just(optional)` if `optional` is not `None`, `Nothing` otherwise
    """
    if optional is None:
        return Nothing(type_ or object)
    return Just(optional, type_)


def _to_maybe(result: Any, type_: Optional[type]) -> Maybe:
    if isinstance(result, Maybe_):
        if type_ is None or result.type_ is type_:
            return result  # type: ignore
        return from_optional(result.value_or_default(None), type_)
    return from_optional(result, type_)


def from_state(state: Mapping[str, Any]) -> Maybe:
    """
    Rebuild a `Maybe` from a mapping written by `Maybe_.write_state`.
    A missing value entry gives `Nothing`

    Example:
        >>> from_state({'value': 1, 'type': int})
        Just(1)
        >>> from_state({'type': int})
        Nothing(int)

    Args:
        state: mapping to read from
    Return:
        `Just` if ``state`` holds a value, `Nothing` otherwise
    """
    if state is None:
        raise InvalidArgument('state')
    return from_optional(state.get(VALUE_KEY), state.get(TYPE_KEY) or object)


def flatten(maybes: Iterable[Maybe[B]]) -> Tuple[B, ...]:
    """
    Extract value from each `Maybe`, ignoring
    elements that are `Nothing`

    Example:
        >>> flatten([Just(1), Nothing(), Just(2)])
        (1, 2)

    Args:
        maybes: Iterable of `Maybe`
    Return:
        tuple of unwrapped values
    """
    return tuple(m.get for m in maybes if isinstance(m, Just))


__all__ = [
    'Maybe',
    'Maybe_',
    'Just',
    'Nothing',
    'VALUE_KEY',
    'TYPE_KEY',
    'from_optional',
    'from_state',
    'flatten'
]
