# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Unsigned LEB128 encoding/decoding.

Each byte carries 7 bits of the value, least significant group first.
Bit 7 is set on every byte except the last.
"""

from typing import BinaryIO, Iterable, Iterator, Optional, Tuple, Union

from .errors import NonCanonical, Overflow, UnexpectedEndOfInput
from .width import GROUP_BITS, Width, WidthLike, as_width, check_value

VALUE_MASK = 0x7F
CONTINUATION_BIT = 0x80

Buffer = Union[bytes, bytearray, memoryview]
Source = Union[Buffer, BinaryIO, Iterable[int]]


def encode(value: int, width: WidthLike = Width.U64) -> bytes:
    """
    Encode an unsigned integer as uleb128.

    Args:
        value: Non-negative integer that fits in width
        width: Integer width in bits (default 64)

    Returns:
        Encoded bytes, minimal length

    Raises:
        ValueError: If value is negative or does not fit in width
    """
    check_value(value, width)

    result = []
    while value >= CONTINUATION_BIT:
        result.append((value & VALUE_MASK) | CONTINUATION_BIT)
        value >>= GROUP_BITS
    result.append(value)
    return bytes(result)


def encode_into(value: int, sink, width: WidthLike = Width.U64) -> int:
    """
    Append the uleb128 encoding of value to sink.

    Args:
        value: Non-negative integer that fits in width
        sink: bytearray, or a binary stream with a write() method
        width: Integer width in bits (default 64)

    Returns:
        Number of bytes written
    """
    data = encode(value, width)
    if hasattr(sink, "write"):
        sink.write(data)
    else:
        sink.extend(data)
    return len(data)


def decode(
    source: Source,
    width: WidthLike = Width.U64,
    offset: int = 0,
    strict: bool = False,
) -> Tuple[int, int]:
    """
    Decode one uleb128 value.

    Bytes are pulled one at a time and nothing past the terminating byte
    is read, so streams and iterators are left positioned right after it.

    Args:
        source: Buffer, binary stream (with read()) or iterable of byte values
        width: Integer width in bits (default 64)
        offset: Starting offset, buffers only
        strict: Reject encodings padded with trailing zero groups

    Returns:
        Tuple of (decoded value, number of bytes consumed)

    Raises:
        UnexpectedEndOfInput: If input ends before the last byte
        Overflow: If the value does not fit in width
        NonCanonical: If strict and the encoding is not minimal
    """
    width = as_width(width)
    if offset < 0:
        raise ValueError(f"Negative offset: {offset}")

    if isinstance(source, (bytes, bytearray, memoryview)):
        data = _iter_buffer(source, offset)
    elif offset:
        raise ValueError("offset is only supported for buffers")
    elif hasattr(source, "read"):
        data = _iter_stream(source)
    else:
        data = _iter_ints(source)

    return _decode(data, width, strict)


def _decode(data: Iterator[int], width: Width, strict: bool) -> Tuple[int, int]:
    value = 0
    shift = 0
    consumed = 0

    while True:
        byte: Optional[int] = next(data, None)
        if byte is None:
            raise UnexpectedEndOfInput(consumed)
        consumed += 1

        group = byte & VALUE_MASK
        if shift >= width or (shift + GROUP_BITS > width and group >> (width - shift)):
            raise Overflow(width, consumed)
        value |= group << shift
        shift += GROUP_BITS

        if not (byte & CONTINUATION_BIT):
            break

    if strict and consumed > 1 and group == 0:
        raise NonCanonical(consumed)

    return value, consumed


def _iter_buffer(data: Buffer, offset: int) -> Iterator[int]:
    for i in range(offset, len(data)):
        yield data[i]


def _iter_stream(stream: BinaryIO) -> Iterator[int]:
    while True:
        chunk = stream.read(1)
        if not chunk:
            return
        yield chunk[0]


def _iter_ints(values: Iterable[int]) -> Iterator[int]:
    for byte in values:
        if not 0 <= byte <= 0xFF:
            raise ValueError(f"Invalid byte value: {byte}")
        yield byte
