from .errors import InvalidArgument, InvalidState, MaybeError  # noqa
from .factory import *  # noqa
from .immutable import Immutable  # noqa
from .maybe import Just, Maybe, Nothing, flatten, from_optional  # noqa
from .none_case import NoneCase  # noqa
from .protocols import SupportsMaybe  # noqa
