# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Stream reader and writer for uleb128 values.

Wraps any binary file object (io.BytesIO, an open file, a serial port):
    reader = Reader(io.BytesIO(b"\\x7f\\x80\\x01"))
    reader.read_u32()  # 127
    reader.read_u32()  # 128
"""

from typing import BinaryIO, Iterator, Optional

from .codec import decode, encode
from .errors import DecodeError, ErrorKind
from .width import Width, WidthLike


class _CountingStream:
    """Counts bytes read through it, including reads that end in an error."""

    def __init__(self, stream: BinaryIO):
        self._stream = stream
        self.count = 0

    def read(self, size: int) -> bytes:
        data = self._stream.read(size)
        self.count += len(data)
        return data


class Reader:
    """Reads uleb128 values from a binary stream."""

    def __init__(self, stream: BinaryIO, strict: bool = False):
        """
        Args:
            stream: Binary stream with a read() method
            strict: Reject non-canonical (padded) encodings
        """
        self._stream = _CountingStream(stream)
        self.strict = strict

    @property
    def bytes_read(self) -> int:
        """Total bytes pulled from the stream, failed reads included."""
        return self._stream.count

    def read(self, width: WidthLike = Width.U64) -> int:
        """
        Read one value.

        Raises:
            DecodeError: If the encoding is truncated, too long or
                non-canonical in strict mode
            OSError: If the underlying stream fails
        """
        value, _ = decode(self._stream, width, strict=self.strict)
        return value

    def read_u8(self) -> int:
        return self.read(Width.U8)

    def read_u16(self) -> int:
        return self.read(Width.U16)

    def read_u32(self) -> int:
        return self.read(Width.U32)

    def read_u64(self) -> int:
        return self.read(Width.U64)

    def read_usize(self) -> int:
        return self.read(Width.USIZE)

    def iter_values(
        self,
        width: WidthLike = Width.U64,
        count: Optional[int] = None,
    ) -> Iterator[int]:
        """
        Yield values until the stream ends or count values were read.

        Ending cleanly between two values stops iteration; ending in the
        middle of a value raises UnexpectedEndOfInput.
        """
        produced = 0
        while count is None or produced < count:
            try:
                value = self.read(width)
            except DecodeError as e:
                if e.kind == ErrorKind.UNEXPECTED_END_OF_INPUT and e.consumed == 0:
                    return
                raise
            yield value
            produced += 1


class Writer:
    """Writes uleb128 values to a binary stream."""

    def __init__(self, stream: BinaryIO):
        self._stream = stream
        self.bytes_written = 0

    def write(self, value: int, width: WidthLike = Width.U64) -> int:
        """
        Write one value.

        Returns:
            Number of bytes written

        Raises:
            ValueError: If value is negative or does not fit in width
        """
        data = encode(value, width)
        self._stream.write(data)
        self.bytes_written += len(data)
        return len(data)

    def write_u8(self, value: int) -> int:
        return self.write(value, Width.U8)

    def write_u16(self, value: int) -> int:
        return self.write(value, Width.U16)

    def write_u32(self, value: int) -> int:
        return self.write(value, Width.U32)

    def write_u64(self, value: int) -> int:
        return self.write(value, Width.U64)

    def write_usize(self, value: int) -> int:
        return self.write(value, Width.USIZE)
