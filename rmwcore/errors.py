"""Return codes of the middleware layer and the exceptions that carry them."""

from __future__ import annotations

import enum


class ReturnCode(enum.IntEnum):
    """Numeric result codes reported by middleware operations."""

    OK = 0
    ERROR = 1
    TIMEOUT = 2
    UNSUPPORTED = 3
    BAD_ALLOC = 10
    INVALID_ARGUMENT = 11
    INCORRECT_RMW_IMPLEMENTATION = 12
    NODE_NAME_NON_EXISTENT = 203


class RmwError(Exception):
    """Generic failure: the operation could not complete successfully."""

    code: int = ReturnCode.ERROR

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self.message = message


class RmwTimeoutError(RmwError):
    """The operation was halted early because it exceeded its timeout."""

    code = ReturnCode.TIMEOUT


class RmwUnsupportedError(RmwError):
    """The operation or event handling is not supported."""

    code = ReturnCode.UNSUPPORTED


class RmwBadAllocError(RmwError, MemoryError):
    """Memory could not be allocated."""

    code = ReturnCode.BAD_ALLOC


class RmwInvalidArgumentError(RmwError, ValueError):
    """An argument given to the operation was invalid."""

    code = ReturnCode.INVALID_ARGUMENT


class RmwIncorrectImplementationError(RmwError):
    """An entity belongs to a different middleware implementation."""

    code = ReturnCode.INCORRECT_RMW_IMPLEMENTATION


class RmwNodeNameNonExistentError(RmwError):
    """The requested node name could not be found."""

    code = ReturnCode.NODE_NAME_NON_EXISTENT


_ERRORS_BY_CODE: dict[int, type[RmwError]] = {
    cls.code: cls
    for cls in (
        RmwError,
        RmwTimeoutError,
        RmwUnsupportedError,
        RmwBadAllocError,
        RmwInvalidArgumentError,
        RmwIncorrectImplementationError,
        RmwNodeNameNonExistentError,
    )
}


def error_for_code(code: int, message: str = "") -> RmwError:
    """Build the exception that matches a return code.

    Codes without a dedicated exception give a generic ``RmwError`` that
    keeps the code. ``ReturnCode.OK`` is not an error and raises ValueError.
    """
    code = int(code)
    if code == ReturnCode.OK:
        raise ValueError("return code OK does not describe an error")
    cls = _ERRORS_BY_CODE.get(code)
    if cls is not None:
        return cls(message)
    error = RmwError(message)
    error.code = code
    return error