"""Tests for cursor module."""

import io

import pytest

from pehead.cursor import ByteCursor
from pehead.exceptions import IOFailureError, SeekOutOfRangeError, TruncatedError


class FailingStream(io.BytesIO):
    """Stream whose reads fail like a closed device."""

    def read(self, size=-1):
        raise OSError("device gone")


class TestBinaryReading:
    """Tests for fixed-width little-endian reads."""

    def test_read_u8(self):
        cursor = ByteCursor.from_bytes(b"\xab\xcd")
        assert cursor.read_u8() == 0xAB
        assert cursor.position == 1

    def test_read_u16(self):
        """Test 16-bit little-endian reading."""
        cursor = ByteCursor.from_bytes(b"\x4d\x5a")  # MZ signature
        assert cursor.read_u16() == 0x5A4D

    def test_read_u32(self):
        """Test 32-bit little-endian reading."""
        cursor = ByteCursor.from_bytes(b"\x00\x78\x56\x34\x12")
        cursor.read_u8()
        assert cursor.read_u32() == 0x12345678
        assert cursor.position == 5

    def test_read_exact(self):
        cursor = ByteCursor.from_bytes(b"PE\x00\x00rest")
        assert cursor.read_exact(4) == b"PE\x00\x00"
        assert cursor.read_exact(0) == b""
        assert cursor.tell() == 4

    def test_short_read_not_padded(self):
        """Test partial reads raise instead of returning fewer bytes."""
        cursor = ByteCursor.from_bytes(b"\x01\x02\x03")
        cursor.read_u8()

        with pytest.raises(TruncatedError) as exc_info:
            cursor.read_u32()

        assert exc_info.value.offset == 1
        assert exc_info.value.wanted == 4
        assert exc_info.value.available == 2
        assert cursor.position == 1

    def test_read_on_empty(self):
        with pytest.raises(TruncatedError):
            ByteCursor.from_bytes(b"").read_u16()

    def test_negative_length(self):
        with pytest.raises(ValueError):
            ByteCursor.from_bytes(b"abc").read_exact(-1)

    def test_io_error_wrapped(self):
        """Test OSError from the stream becomes IOFailureError."""
        cursor = ByteCursor(FailingStream(b"MZ"))

        with pytest.raises(IOFailureError) as exc_info:
            cursor.read_u16()

        assert isinstance(exc_info.value.__cause__, OSError)


class TestSeeking:
    """Tests for relative and absolute seeks."""

    def test_seek_forward_and_back(self):
        cursor = ByteCursor.from_bytes(bytes(range(16)))
        cursor.seek_relative(10)
        assert cursor.read_u8() == 10
        cursor.seek_relative(-5)
        assert cursor.position == 6
        assert cursor.read_u8() == 6

    def test_seek_before_start(self):
        """Test seeking before offset 0 fails and leaves the position alone."""
        cursor = ByteCursor.from_bytes(bytes(16))
        cursor.seek_relative(4)

        with pytest.raises(SeekOutOfRangeError) as exc_info:
            cursor.seek_relative(-5)

        assert exc_info.value.offset == 4
        assert exc_info.value.delta == -5
        assert cursor.position == 4

    def test_seek_past_end_deferred(self):
        """Test seeking past the end succeeds and the next read fails."""
        cursor = ByteCursor.from_bytes(bytes(8))

        assert cursor.seek_relative(100) == 100

        with pytest.raises(TruncatedError) as exc_info:
            cursor.read_u8()

        assert exc_info.value.offset == 100
        assert exc_info.value.available == 0

    def test_absolute_seek(self):
        cursor = ByteCursor.from_bytes(b"\x00\x00\x34\x12")
        cursor.seek(2)
        assert cursor.read_u16() == 0x1234

        with pytest.raises(SeekOutOfRangeError):
            cursor.seek(-1)

    def test_starts_at_stream_position(self):
        stream = io.BytesIO(b"abcdef")
        stream.seek(3)
        cursor = ByteCursor(stream)
        assert cursor.position == 3
        assert cursor.read_exact(3) == b"def"
