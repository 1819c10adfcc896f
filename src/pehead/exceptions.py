"""Custom exceptions for pehead."""


class PEHeaderError(Exception):
    """Base exception for pehead errors."""
    pass


class TruncatedError(PEHeaderError):
    """Fewer bytes available than a read required."""

    def __init__(self, offset: int, wanted: int, available: int):
        self.offset = offset
        self.wanted = wanted
        self.available = available
        super().__init__(
            f"Truncated input at offset 0x{offset:x}: "
            f"wanted {wanted} bytes, got {available}"
        )


class SeekOutOfRangeError(PEHeaderError):
    """Seek would move the cursor before the start of the stream."""

    def __init__(self, offset: int, delta: int):
        self.offset = offset
        self.delta = delta
        super().__init__(
            f"Cannot seek by {delta} from offset 0x{offset:x}: "
            f"before start of stream"
        )


class InvalidSignatureError(PEHeaderError):
    """File does not have MZ (DOS) header signature."""

    def __init__(self, found: bytes):
        self.found = found
        super().__init__(f"No MZ header - magic is: {found!r}")


class InvalidHeaderOffsetError(PEHeaderError):
    """e_lfanew points into the DOS header or is otherwise unusable."""

    def __init__(self, offset: int):
        self.offset = offset
        super().__init__(
            f"PE offset is too small: 0x{offset:x}, not a PE executable"
        )


class InvalidPESignatureError(PEHeaderError):
    """Bytes at e_lfanew are not the PE signature."""

    def __init__(self, offset: int, found: bytes):
        self.offset = offset
        self.found = found
        super().__init__(
            f"No PE header signature at 0x{offset:x}: {found!r}, "
            f"not a PE executable"
        )


class InvalidMachineTypeError(PEHeaderError):
    """Machine code is not one of the documented machine types."""

    def __init__(self, code: int):
        self.code = code
        super().__init__(f"Invalid machine type: 0x{code:04x}")


class IOFailureError(PEHeaderError):
    """Failed to open or read the byte source."""
    pass
