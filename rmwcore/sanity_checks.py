"""Checks that containers are in their zero-initialized state."""

from __future__ import annotations

from typing import Any

from rmwcore.errors import RmwError

__all__ = ["check_zero_string_array"]


def check_zero_string_array(array: Any) -> None:
    """Ensure a string array is zero initialized.

    ``array`` is either a sized sequence of strings, which must be empty, or
    an object with ``size`` and ``data`` attributes, where ``size`` must be
    zero and ``data`` must be None. Raises RmwError otherwise.
    """
    if array is None:
        raise RmwError("array is null")
    if hasattr(array, "size") and hasattr(array, "data"):
        if array.size != 0:
            raise RmwError("array size is not zero")
        if array.data is not None:
            raise RmwError("array data is not null")
        return
    try:
        size = len(array)
    except TypeError as exc:
        raise RmwError("array is not a string array") from exc
    if size != 0:
        raise RmwError("array size is not zero")