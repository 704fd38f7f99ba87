# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""Tests for the uleb128 command-line tool."""

import pytest
import serial
from unittest.mock import Mock, patch

import uleb128_tool


class TestEncodeCommand:
    """Tests for the encode subcommand."""

    def test_encode(self, capsys):
        """Prints hex for each value."""
        uleb128_tool.main(["encode", "624485", "0x80"])
        out = capsys.readouterr().out
        assert "624485: e58e26 (3 bytes)" in out
        assert "128: 8001 (2 bytes)" in out

    def test_encode_out_of_range(self, capsys):
        """Values too large for the width exit with an error."""
        with pytest.raises(SystemExit) as exc:
            uleb128_tool.main(["encode", "256", "--width", "8"])
        assert exc.value.code == 1
        assert "does not fit in 8 bits" in capsys.readouterr().out

    def test_encode_invalid_int(self, capsys):
        """Non-numeric values exit with an error."""
        with pytest.raises(SystemExit):
            uleb128_tool.main(["encode", "abc"])
        assert "Error:" in capsys.readouterr().out

    def test_unsupported_width(self):
        """argparse rejects widths outside the closed set."""
        with pytest.raises(SystemExit) as exc:
            uleb128_tool.main(["encode", "1", "--width", "12"])
        assert exc.value.code == 2


class TestDecodeCommand:
    """Tests for the decode subcommand."""

    def test_decode_hex(self, capsys):
        """Prints each decoded value with its size and offset."""
        uleb128_tool.main(["decode", "e58e267f", "--width", "32"])
        out = capsys.readouterr().out
        assert "624485 (3 bytes at offset 0)" in out
        assert "127 (1 bytes at offset 3)" in out
        assert "Decoded 2 values from 4 bytes" in out

    def test_decode_truncated(self, capsys):
        """Truncated input exits with the error kind."""
        with pytest.raises(SystemExit) as exc:
            uleb128_tool.main(["decode", "0180"])
        assert exc.value.code == 1
        assert "Error at offset 1: UNEXPECTED_END_OF_INPUT" in capsys.readouterr().out

    def test_decode_overflow(self, capsys):
        """Overflowing input exits with the error kind."""
        with pytest.raises(SystemExit):
            uleb128_tool.main(["decode", "808001", "--width", "8"])
        assert "OVERFLOW" in capsys.readouterr().out

    def test_decode_strict(self, capsys):
        """--strict rejects padded encodings."""
        uleb128_tool.main(["decode", "808000"])
        assert "0 (3 bytes at offset 0)" in capsys.readouterr().out

        with pytest.raises(SystemExit):
            uleb128_tool.main(["decode", "808000", "--strict"])
        assert "NON_CANONICAL" in capsys.readouterr().out

    def test_decode_invalid_hex(self, capsys):
        """Malformed hex exits with an error."""
        with pytest.raises(SystemExit) as exc:
            uleb128_tool.main(["decode", "zz"])
        assert exc.value.code == 1
        assert "Invalid hex" in capsys.readouterr().out

    def test_decode_file(self, tmp_path, capsys):
        """Reads values from a binary file."""
        path = tmp_path / "values.bin"
        path.write_bytes(b"\x00\x80\x01")
        uleb128_tool.main(["decode", "--file", str(path)])
        out = capsys.readouterr().out
        assert "128 (2 bytes at offset 1)" in out
        assert "Decoded 2 values from 3 bytes" in out

    def test_decode_missing_file(self, tmp_path, capsys):
        """Missing file exits with an error."""
        with pytest.raises(SystemExit) as exc:
            uleb128_tool.main(["decode", "--file", str(tmp_path / "missing.bin")])
        assert exc.value.code == 1
        assert "File not found" in capsys.readouterr().out


class TestDumpCommand:
    """Tests for the dump subcommand."""

    @patch('uleb128_tool.serial.Serial')
    def test_opens_port(self, mock_serial_class, mock_serial, capsys):
        """Opens the port with the requested settings."""
        port = mock_serial(b"")
        mock_serial_class.return_value = port

        uleb128_tool.main(["dump", "--port", "/dev/ttyACM0", "-b", "9600", "-t", "0.5"])

        mock_serial_class.assert_called_once_with("/dev/ttyACM0", 9600, timeout=0.5)
        assert not port.is_open
        assert "Received 0 values" in capsys.readouterr().out

    @patch('uleb128_tool.serial.Serial')
    def test_reads_until_timeout(self, mock_serial_class, mock_serial, capsys):
        """Prints values until the port times out."""
        mock_serial_class.return_value = mock_serial(b"\x2A\xE5\x8E\x26")

        uleb128_tool.main(["dump", "--port", "/dev/ttyACM0", "--width", "32"])

        out = capsys.readouterr().out
        assert "42\n624485\n" in out
        assert "Received 2 values (4 bytes)" in out

    @patch('uleb128_tool.serial.Serial')
    def test_count(self, mock_serial_class, mock_serial, capsys):
        """Stops after --count values."""
        port = mock_serial(b"\x01\x02\x03")
        mock_serial_class.return_value = port

        uleb128_tool.main(["dump", "--port", "/dev/ttyACM0", "--count", "1"])

        assert "Received 1 values (1 bytes)" in capsys.readouterr().out
        assert port.offset == 1

    @patch('uleb128_tool.serial.Serial')
    def test_timeout_mid_value(self, mock_serial_class, mock_serial, capsys):
        """Timing out in the middle of a value is an error."""
        port = mock_serial(b"\x05\xFF")
        mock_serial_class.return_value = port

        with pytest.raises(SystemExit) as exc:
            uleb128_tool.main(["dump", "--port", "/dev/ttyACM0"])

        assert exc.value.code == 1
        assert "UNEXPECTED_END_OF_INPUT" in capsys.readouterr().out
        assert not port.is_open

    @patch('uleb128_tool.serial.Serial')
    def test_open_failure(self, mock_serial_class, capsys):
        """Port open errors exit with a message."""
        mock_serial_class.side_effect = serial.SerialException("no such device")

        with pytest.raises(SystemExit) as exc:
            uleb128_tool.main(["dump", "--port", "/dev/ttyNONE"])

        assert exc.value.code == 1
        assert "Error opening /dev/ttyNONE: no such device" in capsys.readouterr().out

    @patch('uleb128_tool.serial.Serial')
    def test_read_failure(self, mock_serial_class, capsys):
        """Serial errors while reading exit and close the port."""
        port = Mock()
        port.port = "/dev/ttyACM0"
        port.read.side_effect = serial.SerialException("device disconnected")
        mock_serial_class.return_value = port

        with pytest.raises(SystemExit):
            uleb128_tool.main(["dump", "--port", "/dev/ttyACM0"])

        assert "Error: device disconnected" in capsys.readouterr().out
        port.close.assert_called_once()
