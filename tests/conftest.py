# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""Pytest configuration and shared fixtures."""

import pytest

from uleb128 import Width


class MockSerial:
    """Mock serial port returning queued bytes one at a time, then timing out."""

    def __init__(self, data: bytes = b"", port: str = "/dev/ttyTEST"):
        self.data = data
        self.offset = 0
        self.is_open = True
        self.port = port

    def read(self, size: int = 1) -> bytes:
        """Read up to size bytes; b"" once the queue is drained (timeout)."""
        chunk = self.data[self.offset:self.offset + size]
        self.offset += len(chunk)
        return chunk

    def close(self):
        self.is_open = False


@pytest.fixture(params=[Width.U8, Width.U16, Width.U32, Width.U64], ids=str)
def width(request):
    """Each supported integer width."""
    return request.param


@pytest.fixture
def mock_serial():
    """Factory for MockSerial instances."""
    return MockSerial
