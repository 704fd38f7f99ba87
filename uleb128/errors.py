# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""Decode errors."""

from enum import IntEnum

from .width import Width


class ErrorKind(IntEnum):
    """Reason a decode failed."""
    UNEXPECTED_END_OF_INPUT = 0
    OVERFLOW = 1
    NON_CANONICAL = 2

    def __str__(self) -> str:
        return self.name


class DecodeError(ValueError):
    """Base exception for decode errors."""

    kind: ErrorKind

    def __init__(self, message: str, consumed: int):
        super().__init__(message)
        self.consumed = consumed


class UnexpectedEndOfInput(DecodeError):
    """Input ended before a byte with the continuation bit clear."""

    kind = ErrorKind.UNEXPECTED_END_OF_INPUT

    def __init__(self, consumed: int):
        super().__init__(
            f"uleb128 decode: unexpected end of data after {consumed} bytes",
            consumed,
        )


class Overflow(DecodeError):
    """Encoded value does not fit in the target width."""

    kind = ErrorKind.OVERFLOW

    def __init__(self, width: Width, consumed: int):
        if consumed > width.max_length:
            message = f"uleb128 decode: can not read more than {width.max_length} bytes"
        else:
            message = f"uleb128 decode: value too large for {width.value} bits"
        super().__init__(message, consumed)
        self.width = width
        self.max_length = width.max_length


class NonCanonical(DecodeError):
    """Encoding is padded with redundant zero groups (strict mode only)."""

    kind = ErrorKind.NON_CANONICAL

    def __init__(self, consumed: int):
        super().__init__(
            f"uleb128 decode: non-canonical encoding of {consumed} bytes",
            consumed,
        )
