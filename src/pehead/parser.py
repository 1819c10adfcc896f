"""Core DOS/PE header location and validation logic."""

import io
import logging
import os
import struct
from typing import BinaryIO, Optional, Union

from . import coff
from .constants import (
    DOS_HEADER_FORMAT,
    DOS_HEADER_SIZE,
    DOS_SIGNATURES,
    PE_SIGNATURE,
)
from .cursor import ByteCursor
from .exceptions import (
    IOFailureError,
    InvalidHeaderOffsetError,
    InvalidPESignatureError,
    InvalidSignatureError,
    PEHeaderError,
)
from .models import DosHeader, ParsedHeaderInfo, ParseResult, ParseState

logger = logging.getLogger(__name__)

PathType = Union[str, os.PathLike]


def read_dos_header(cursor: ByteCursor) -> DosHeader:
    """
    Parse the 64-byte DOS header at the cursor.

    The signature is checked before anything else is read. e_lfanew is read
    but not validated.

    Args:
        cursor: Cursor positioned at the start of the file.

    Returns:
        DosHeader with all fields preserved verbatim.

    Raises:
        InvalidSignatureError: If the signature is neither MZ nor ZM.
        TruncatedError: If the file ends inside the header.
    """
    signature = cursor.read_exact(2)
    if signature not in DOS_SIGNATURES:
        raise InvalidSignatureError(signature)

    body = cursor.read_exact(struct.calcsize(DOS_HEADER_FORMAT))
    values = struct.unpack(DOS_HEADER_FORMAT, body)

    (lastsize, nblocks, nreloc, hdrsize, minalloc, maxalloc, ss, sp,
     checksum, ip, cs, relocpos, noverlay) = values[:13]

    header = DosHeader(
        signature=signature,
        lastsize=lastsize,
        nblocks=nblocks,
        nreloc=nreloc,
        hdrsize=hdrsize,
        minalloc=minalloc,
        maxalloc=maxalloc,
        ss=ss,
        sp=sp,
        checksum=checksum,
        ip=ip,
        cs=cs,
        relocpos=relocpos,
        noverlay=noverlay,
        reserved1=tuple(values[13:17]),
        oem_id=values[17],
        oem_info=values[18],
        reserved2=tuple(values[19:29]),
        e_lfanew=values[29],
    )
    logger.debug(
        "DOS header %r: e_lfanew=0x%x", signature, header.e_lfanew
    )
    return header


def locate_pe_signature(cursor: ByteCursor, dos_header: DosHeader) -> int:
    """
    Seek to e_lfanew and verify the PE signature there.

    Args:
        cursor: Cursor positioned just after the DOS header.
        dos_header: Parsed DOS header.

    Returns:
        File offset of the PE signature. The cursor is left just past it.

    Raises:
        InvalidHeaderOffsetError: If e_lfanew points into the DOS header.
        InvalidPESignatureError: If the signature does not match.
        TruncatedError: If the file ends before the signature.
    """
    pe_offset = dos_header.e_lfanew
    if pe_offset < DOS_HEADER_SIZE:
        raise InvalidHeaderOffsetError(pe_offset)

    cursor.seek_relative(pe_offset - cursor.position)

    found = cursor.read_exact(len(PE_SIGNATURE))
    if found != PE_SIGNATURE:
        raise InvalidPESignatureError(pe_offset, found)

    logger.debug("PE signature verified at 0x%x", pe_offset)
    return pe_offset


class HeaderParser:
    """
    Runs the DOS header and PE signature steps over one cursor.

    States advance START -> DOS_HEADER_READ -> PE_SIGNATURE_VERIFIED, or
    to FAILED from any state. A parser runs once.
    """

    def __init__(self, cursor: ByteCursor):
        self.cursor = cursor
        self.state = ParseState.START
        self.error: Optional[PEHeaderError] = None
        self.dos_header: Optional[DosHeader] = None

    def _advance(self, state: ParseState) -> None:
        logger.debug("Parse state %s -> %s", self.state.value, state.value)
        self.state = state

    def run(self) -> ParsedHeaderInfo:
        """
        Parse up to and including the PE signature.

        Returns:
            ParsedHeaderInfo with machine and characteristics unset.

        Raises:
            PEHeaderError: The first error encountered, unchanged.
        """
        if self.state is not ParseState.START:
            raise RuntimeError(f"Parser already finished in state {self.state.value}")

        try:
            self.dos_header = read_dos_header(self.cursor)
            self._advance(ParseState.DOS_HEADER_READ)

            pe_offset = locate_pe_signature(self.cursor, self.dos_header)
            self._advance(ParseState.PE_SIGNATURE_VERIFIED)
        except PEHeaderError as e:
            self.error = e
            self._advance(ParseState.FAILED)
            raise

        return ParsedHeaderInfo(
            dos_header=self.dos_header,
            pe_offset=pe_offset,
            signature=PE_SIGNATURE,
            coff_offset=self.cursor.position,
        )


def _decode_file_header(
    headers: ParsedHeaderInfo, cursor: ByteCursor
) -> ParsedHeaderInfo:
    return headers.with_file_header(coff.read_file_header(cursor))


def parse_stream(
    stream: BinaryIO,
    read_file_header: bool = False,
) -> ParsedHeaderInfo:
    """
    Parse PE headers from a seekable binary stream.

    Parsing always starts at offset 0 of the stream. The stream is not
    closed.

    Args:
        stream: Seekable binary stream.
        read_file_header: Also read the COFF file header and decode its
            machine type and characteristics.

    Returns:
        ParsedHeaderInfo for the stream.

    Raises:
        PEHeaderError: On malformed, truncated, or unreadable input.
    """
    cursor = ByteCursor(stream)
    cursor.seek(0)

    headers = HeaderParser(cursor).run()
    if read_file_header:
        headers = _decode_file_header(headers, cursor)
    return headers


def parse_bytes(data: bytes, read_file_header: bool = False) -> ParsedHeaderInfo:
    """Parse PE headers from raw bytes. See parse_stream."""
    return parse_stream(io.BytesIO(data), read_file_header)


def _open_source(filename: PathType) -> BinaryIO:
    try:
        return open(filename, "rb")
    except OSError as e:
        raise IOFailureError(f"Failed to open file: {e}") from e


def parse_file(filename: PathType, read_file_header: bool = False) -> ParsedHeaderInfo:
    """
    Parse PE headers from a file.

    The file is opened read-only for the duration of the parse and closed
    on every exit path.

    Raises:
        IOFailureError: If the file cannot be opened or read.
        PEHeaderError: On malformed or truncated input.
    """
    with _open_source(filename) as f:
        return parse_stream(f, read_file_header)


def inspect_file(filename: PathType, read_file_header: bool = True) -> ParseResult:
    """
    Parse a file and report the outcome without raising.

    Args:
        filename: Path to PE file.
        read_file_header: Also decode machine type and characteristics.

    Returns:
        ParseResult with parsed data or error information.
    """
    result = ParseResult(filename=os.fspath(filename))

    try:
        with _open_source(filename) as f:
            parser = HeaderParser(ByteCursor(f))
            try:
                result.headers = parser.run()
            finally:
                result.state = parser.state

            if read_file_header:
                result.headers = _decode_file_header(result.headers, parser.cursor)

        result.success = True

    except PEHeaderError as e:
        logger.debug("Parsing %s failed: %s", result.filename, e)
        result.error = str(e)

    return result
