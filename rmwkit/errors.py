"""Return codes of the middleware layer and the exceptions that stand for them."""

from __future__ import annotations

from enum import IntEnum


class ReturnCode(IntEnum):
    """Numeric result codes used by the middleware interface."""

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

    code: ReturnCode = ReturnCode.ERROR

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self.message = message


class InvalidArgumentError(RmwError, ValueError):
    """An argument given to a function was invalid."""

    code = ReturnCode.INVALID_ARGUMENT


class BadAllocError(RmwError):
    """Memory or another resource could not be allocated."""

    code = ReturnCode.BAD_ALLOC


class RmwTimeoutError(RmwError, TimeoutError):
    """The operation was halted early because it exceeded its timeout."""

    code = ReturnCode.TIMEOUT


class UnsupportedError(RmwError):
    """The operation or event handling is not supported."""

    code = ReturnCode.UNSUPPORTED


class IncorrectImplementationError(RmwError):
    """An entity belongs to a different middleware implementation."""

    code = ReturnCode.INCORRECT_RMW_IMPLEMENTATION


class NodeNameNonExistentError(RmwError):
    """No node with the requested name exists."""

    code = ReturnCode.NODE_NAME_NON_EXISTENT


_ERRORS_BY_CODE: dict[ReturnCode, type[RmwError]] = {
    cls.code: cls
    for cls in (
        RmwError,
        InvalidArgumentError,
        BadAllocError,
        RmwTimeoutError,
        UnsupportedError,
        IncorrectImplementationError,
        NodeNameNonExistentError,
    )
}


def error_for_code(code: int, message: str) -> RmwError:
    """Return the exception instance that stands for a failing return code.

    Raises ValueError for ``OK`` and for codes that are not known.
    """
    try:
        return_code = ReturnCode(code)
    except ValueError:
        raise ValueError(f"unknown return code {code!r}") from None
    if return_code is ReturnCode.OK:
        raise ValueError("return code OK does not describe an error")
    return _ERRORS_BY_CODE[return_code](message)