import pytest

from maybe_pattern import InvalidArgument, InvalidState, MaybeError
from maybe_pattern.errors import check_callable, check_present


def test_check_callable_returns_argument():
    assert check_callable(print, 'f') is print


def test_check_callable_raises_on_none():
    with pytest.raises(InvalidArgument) as e:
        check_callable(None, 'f')
    assert e.value.name == 'f'
    assert 'f' in str(e.value)


def test_check_callable_raises_on_non_callable():
    with pytest.raises(TypeError):
        check_callable(1, 'f')


def test_check_present():
    assert check_present(0, 'count') == 0
    with pytest.raises(InvalidState, match=r'\(count\) may not be absent\.'):
        check_present(None, 'count')


def test_errors_share_base_class():
    assert issubclass(InvalidArgument, MaybeError)
    assert issubclass(InvalidState, MaybeError)
