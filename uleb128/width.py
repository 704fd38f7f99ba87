# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Fixed integer widths supported by the codec.

Every encode/decode call targets one of these widths, which bounds the
largest representable value and the longest valid encoding.
"""

import struct
from enum import IntEnum
from typing import Union

# Bits carried by each encoded byte
GROUP_BITS = 7


class Width(IntEnum):
    """Unsigned integer bit widths."""
    U8 = 8
    U16 = 16
    U32 = 32
    U64 = 64
    USIZE = struct.calcsize("P") * 8

    def __str__(self) -> str:
        return self.name

    @property
    def max_value(self) -> int:
        """Largest value representable in this width."""
        return (1 << self.value) - 1

    @property
    def max_length(self) -> int:
        """Longest encoding of a value of this width, in bytes."""
        return -(-self.value // GROUP_BITS)


WidthLike = Union[Width, int]


def as_width(width: WidthLike) -> Width:
    """
    Coerce a bit count to a Width.

    Raises:
        ValueError: If width is not one of 8, 16, 32 or 64
    """
    if isinstance(width, Width):
        return width
    try:
        return Width(width)
    except ValueError:
        raise ValueError(f"Unsupported width: {width!r} bits") from None


def check_value(value: int, width: WidthLike) -> None:
    """
    Check that value is an unsigned integer that fits in width.

    Raises:
        TypeError: If value is not an int
        ValueError: If value is negative or too large for width
    """
    width = as_width(width)
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"Expected int, got {type(value).__name__}")
    if value < 0:
        raise ValueError("Cannot encode negative value as uleb128")
    if value > width.max_value:
        raise ValueError(f"Value {value} does not fit in {width.value} bits")


def encoded_length(value: int, width: WidthLike = Width.U64) -> int:
    """
    Return the length in bytes of the canonical encoding of value.

    Args:
        value: Unsigned integer
        width: Width the value belongs to (default 64 bits)

    Returns:
        Number of bytes encode() produces for value
    """
    check_value(value, width)
    return -(-max(1, value.bit_length()) // GROUP_BITS)
