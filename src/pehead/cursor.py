"""Sequential, seekable little-endian reader over a binary stream."""

import io
import os
import struct
from typing import BinaryIO

from .exceptions import IOFailureError, SeekOutOfRangeError, TruncatedError


class ByteCursor:
    """
    Exact-read cursor over a seekable byte source.

    Every read consumes exactly the requested number of bytes or raises
    TruncatedError; short reads are never padded. Seeking past the end of
    the stream is allowed and surfaces as TruncatedError on the next read.

    The cursor does not own the stream and never closes it.
    """

    def __init__(self, stream: BinaryIO):
        self._stream = stream
        try:
            self._position = stream.tell()
        except OSError as e:
            raise IOFailureError(f"Failed to query stream position: {e}") from e

    @classmethod
    def from_bytes(cls, data: bytes) -> "ByteCursor":
        """Create a cursor over in-memory data."""
        return cls(io.BytesIO(data))

    @property
    def position(self) -> int:
        """Absolute offset of the next byte to be read."""
        return self._position

    def tell(self) -> int:
        return self._position

    def read_exact(self, n: int) -> bytes:
        """
        Read exactly n bytes.

        Raises:
            TruncatedError: If fewer than n bytes remain.
            IOFailureError: If the underlying stream fails.
        """
        if n < 0:
            raise ValueError(f"Cannot read a negative number of bytes: {n}")

        try:
            data = self._stream.read(n)
        except OSError as e:
            raise IOFailureError(
                f"Read of {n} bytes at offset 0x{self._position:x} failed: {e}"
            ) from e

        if len(data) < n:
            self._move_to(self._position)
            raise TruncatedError(self._position, n, len(data))

        self._position += n
        return data

    def read_u8(self) -> int:
        """Read unsigned 8-bit value."""
        return self.read_exact(1)[0]

    def read_u16(self) -> int:
        """Read unsigned 16-bit little-endian value."""
        return struct.unpack("<H", self.read_exact(2))[0]

    def read_u32(self) -> int:
        """Read unsigned 32-bit little-endian value."""
        return struct.unpack("<I", self.read_exact(4))[0]

    def seek_relative(self, delta: int) -> int:
        """
        Move the cursor by delta bytes from the current position.

        Returns:
            The new absolute position.

        Raises:
            SeekOutOfRangeError: If the result would precede offset 0.
        """
        target = self._position + delta
        if target < 0:
            raise SeekOutOfRangeError(self._position, delta)
        return self._move_to(target)

    def seek(self, offset: int) -> int:
        """Move the cursor to an absolute offset."""
        if offset < 0:
            raise SeekOutOfRangeError(self._position, offset - self._position)
        return self._move_to(offset)

    def _move_to(self, target: int) -> int:
        try:
            self._stream.seek(target, os.SEEK_SET)
        except (OSError, OverflowError) as e:
            raise IOFailureError(
                f"Seek to offset 0x{target:x} failed: {e}"
            ) from e
        self._position = target
        return target
