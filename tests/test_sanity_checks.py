from types import SimpleNamespace

import pytest

from rmwcore.errors import ReturnCode, RmwError
from rmwcore.sanity_checks import check_zero_string_array


def test_none_is_error():
    with pytest.raises(RmwError) as info:
        check_zero_string_array(None)
    assert info.value.code == ReturnCode.ERROR
    assert "null" in str(info.value)


def test_empty_list_is_zero():
    assert check_zero_string_array([]) is None


def test_non_empty_list_is_error():
    with pytest.raises(RmwError, match="size is not zero"):
        check_zero_string_array(["topic"])


def test_struct_like_zero():
    assert check_zero_string_array(SimpleNamespace(size=0, data=None)) is None


def test_struct_like_nonzero_size():
    with pytest.raises(RmwError, match="array size is not zero"):
        check_zero_string_array(SimpleNamespace(size=1, data=None))


def test_struct_like_data_not_null():
    with pytest.raises(RmwError, match="array data is not null"):
        check_zero_string_array(SimpleNamespace(size=0, data=[]))


def test_unsized_object_is_error():
    with pytest.raises(RmwError):
        check_zero_string_array(object())