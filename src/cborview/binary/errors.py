from __future__ import annotations
from enum import IntEnum


class ErrorCode(IntEnum):
    END_OF_ARRAY = -1
    ILLEGAL_VALUE = -2
    MALFORMED_VALUE = -3
    NOT_IMPLEMENTED = -4
    UNEXPECTED = -5
    MEMORY = -6


class CborError(ValueError):
    """
    Raised by every decode step that fails.
    `code` is one of ErrorCode; `offset` is the cursor position where the
    failure was detected, when known.
    """

    def __init__(self, code: ErrorCode, msg: str = "", offset: int | None = None):
        super().__init__(msg or code.name.lower())
        self.code = code
        self.offset = offset


def malformed(msg: str, offset: int | None = None) -> CborError:
    return CborError(ErrorCode.MALFORMED_VALUE, msg, offset)


def illegal(msg: str, offset: int | None = None) -> CborError:
    return CborError(ErrorCode.ILLEGAL_VALUE, msg, offset)
