# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Unsigned LEB128 - Python encoder/decoder.

This package reads and writes unsigned integers in LEB128 variable-length
encoding, as used by DWARF, WebAssembly and postcard.

Example usage:
    from uleb128 import Width, encode, decode, DecodeError

    data = encode(624485)               # b"\\xe5\\x8e\\x26"
    value, size = decode(data, Width.U32)

    try:
        decode(b"\\x80", Width.U8)
    except DecodeError as e:
        print(f"{e.kind.name}: {e}")    # UNEXPECTED_END_OF_INPUT: ...
"""

from .codec import encode, encode_into, decode
from .errors import (
    ErrorKind,
    DecodeError,
    UnexpectedEndOfInput,
    Overflow,
    NonCanonical,
)
from .stream import Reader, Writer
from .width import Width, as_width, check_value, encoded_length

__version__ = "0.1.0"

__all__ = [
    # Codec
    "encode",
    "encode_into",
    "decode",
    # Errors
    "ErrorKind",
    "DecodeError",
    "UnexpectedEndOfInput",
    "Overflow",
    "NonCanonical",
    # Streams
    "Reader",
    "Writer",
    # Widths
    "Width",
    "as_width",
    "check_value",
    "encoded_length",
]
