"""
Binary serialization of `Maybe` values (and anything containing them).

`Just` and `Nothing` pickle through `Maybe_.write_state` and
`maybe.from_state`, so any pickle-protocol serializer round trips them.
The helpers here use ``dill``, which also handles lambdas and classes
defined in ``__main__``.
"""
import io
import logging
from typing import Any, BinaryIO, Optional

import dill

logger = logging.getLogger(__name__)


def dumps(obj: Any, protocol: Optional[int] = None) -> bytes:
    """
    Serialize ``obj`` to bytes

    Example:
        >>> loads(dumps(Just(1)))
        Just(1)

    Args:
        obj: object to serialize
        protocol: pickle protocol, ``dill.settings['protocol']`` if omitted
    Return:
        serialized ``obj``
    """
    data = dill.dumps(obj, protocol=protocol)
    logger.debug('serialized %s to %d bytes', type(obj).__name__, len(data))
    return data


def loads(data: bytes) -> Any:
    """
    Deserialize an object serialized with `dumps`

    Args:
        data: serialized object
    Return:
        the deserialized object
    """
    obj = dill.loads(data)
    logger.debug('deserialized %s from %d bytes', type(obj).__name__, len(data))
    return obj


def dump(obj: Any, file: BinaryIO, protocol: Optional[int] = None) -> None:
    """
    Serialize ``obj`` to a binary file object

    Args:
        obj: object to serialize
        file: file object opened for binary writing
        protocol: pickle protocol, ``dill.settings['protocol']`` if omitted
    """
    file.write(dumps(obj, protocol=protocol))


def load(file: BinaryIO) -> Any:
    """
    Deserialize one object from a binary file object, leaving the
    stream positioned after it. A seekable stream that is at its end
    is rewound first, so a stream written by `dump` can be passed
    straight back, and objects written by consecutive `dump` calls
    are read back by consecutive `load` calls.

    Example:
        >>> stream = io.BytesIO()
        >>> dump(Nothing(int), stream)
        >>> load(stream)
        Nothing(int)

    Args:
        file: file object opened for binary reading
    Return:
        the deserialized object
    """
    if file.seekable():
        position = file.tell()
        end = file.seek(0, io.SEEK_END)
        file.seek(0 if position == end else position, io.SEEK_SET)
    obj = dill.load(file)
    logger.debug('deserialized %s from stream', type(obj).__name__)
    return obj


__all__ = ['dumps', 'loads', 'dump', 'load']
