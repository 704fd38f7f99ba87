#!/usr/bin/env python3
# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Command-line tool for unsigned LEB128 values.

Usage:
    python uleb128_tool.py encode 624485 128 --width 32
    python uleb128_tool.py decode e58e26 --width 32
    python uleb128_tool.py decode --file values.bin --strict
    python uleb128_tool.py dump --port /dev/ttyACM0 --count 10

Requirements:
    pip install pyserial
"""

import argparse
import io
import sys
from pathlib import Path
from typing import BinaryIO, List, Optional

import serial

from uleb128 import DecodeError, Reader, Width, encode


def cmd_encode(values: List[str], width: Width):
    """Encode integers and print them as hex."""
    for text in values:
        value = int(text, 0)
        data = encode(value, width)
        print(f"{value}: {data.hex()} ({len(data)} bytes)")


def cmd_decode(stream: BinaryIO, width: Width, strict: bool):
    """Decode consecutive values from a stream and print them."""
    reader = Reader(stream, strict=strict)
    count = 0
    offset = 0
    try:
        for value in reader.iter_values(width):
            size = reader.bytes_read - offset
            print(f"{value} ({size} bytes at offset {offset})")
            offset = reader.bytes_read
            count += 1
    except DecodeError as e:
        print(f"Error at offset {offset}: {e.kind.name}: {e}")
        return False

    print(f"Decoded {count} values from {reader.bytes_read} bytes")
    return True


def cmd_dump(port: serial.Serial, width: Width, strict: bool, count: Optional[int]):
    """Print values read from a serial port until timeout or count."""
    print(f"Reading {width.value}-bit values from {port.port}...")
    reader = Reader(port, strict=strict)
    received = 0
    try:
        for value in reader.iter_values(width, count):
            print(value)
            received += 1
    except DecodeError as e:
        print(f"Error after {reader.bytes_read} bytes: {e.kind.name}: {e}")
        return False

    print(f"Received {received} values ({reader.bytes_read} bytes)")
    return True


def add_codec_args(parser: argparse.ArgumentParser, strict: bool = True):
    parser.add_argument("--width", "-w", type=int, default=64,
                        choices=[int(w) for w in Width],
                        help="Integer width in bits (default 64)")
    if strict:
        parser.add_argument("--strict", action="store_true",
                            help="Reject non-canonical (padded) encodings")


def main(argv: Optional[List[str]] = None):
    parser = argparse.ArgumentParser(
        description="Encode and decode unsigned LEB128 values"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    # encode command
    encode_parser = subparsers.add_parser("encode", help="Encode integers")
    encode_parser.add_argument("values", nargs="+",
                               help="Integers to encode (0x prefix for hex)")
    add_codec_args(encode_parser, strict=False)

    # decode command
    decode_parser = subparsers.add_parser("decode", help="Decode hex or a binary file")
    decode_source = decode_parser.add_mutually_exclusive_group(required=True)
    decode_source.add_argument("hex", nargs="?", help="Hex-encoded bytes")
    decode_source.add_argument("--file", "-f", type=Path, help="Binary file")
    add_codec_args(decode_parser)

    # dump command
    dump_parser = subparsers.add_parser("dump", help="Decode values from a serial port")
    dump_parser.add_argument("--port", "-p", required=True,
                             help="Serial port (e.g., /dev/ttyACM0)")
    dump_parser.add_argument("--baudrate", "-b", type=int, default=115200,
                             help="Baud rate (default 115200)")
    dump_parser.add_argument("--timeout", "-t", type=float, default=1.0,
                             help="Read timeout in seconds (default 1.0)")
    dump_parser.add_argument("--count", "-n", type=int, default=None,
                             help="Stop after this many values")
    add_codec_args(dump_parser)

    args = parser.parse_args(argv)
    width = Width(args.width)

    if args.command == "encode":
        try:
            cmd_encode(args.values, width)
        except (TypeError, ValueError) as e:
            print(f"Error: {e}")
            sys.exit(1)

    elif args.command == "decode":
        if args.file is not None:
            if not args.file.exists():
                print(f"Error: File not found: {args.file}")
                sys.exit(1)
            stream = io.BytesIO(args.file.read_bytes())
        else:
            try:
                stream = io.BytesIO(bytes.fromhex(args.hex))
            except ValueError as e:
                print(f"Error: Invalid hex: {e}")
                sys.exit(1)
        if not cmd_decode(stream, width, args.strict):
            sys.exit(1)

    elif args.command == "dump":
        try:
            port = serial.Serial(args.port, args.baudrate, timeout=args.timeout)
        except serial.SerialException as e:
            print(f"Error opening {args.port}: {e}")
            sys.exit(1)

        try:
            if not cmd_dump(port, width, args.strict, args.count):
                sys.exit(1)
        except serial.SerialException as e:
            print(f"Error: {e}")
            sys.exit(1)
        finally:
            port.close()


if __name__ == "__main__":
    main()
