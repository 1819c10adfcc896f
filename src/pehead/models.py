"""Data models for pehead."""

import enum
from dataclasses import dataclass, field, replace
from typing import Optional, Tuple

from .characteristics import Characteristics, decode_characteristics
from .constants import DOS_BLOCK_SIZE, DOS_PARAGRAPH_SIZE
from .machine import MachineType, decode_machine


@dataclass(frozen=True)
class DosHeader:
    """Legacy MS-DOS header at the start of every PE file."""
    signature: bytes  # b"MZ", or b"ZM" from endian-naive linkers
    lastsize: int  # Image size mod 512
    nblocks: int  # Number of 512-byte pages in image
    nreloc: int  # Count of relocation table entries
    hdrsize: int  # Size of header in paragraphs
    minalloc: int
    maxalloc: int
    ss: int
    sp: int
    checksum: int  # 0 means no checksum is used
    ip: int
    cs: int
    relocpos: int  # Offset of first relocation item
    noverlay: int
    reserved1: Tuple[int, ...]
    oem_id: int
    oem_info: int
    reserved2: Tuple[int, ...]
    e_lfanew: int  # File offset of the PE signature

    @property
    def legacy_file_size(self) -> int:
        """File size recorded for the DOS loader."""
        return self.nblocks * DOS_BLOCK_SIZE + self.lastsize

    @property
    def header_size_bytes(self) -> int:
        return self.hdrsize * DOS_PARAGRAPH_SIZE

    @property
    def has_checksum(self) -> bool:
        return self.checksum != 0

    def to_dict(self) -> dict:
        return {
            "signature": self.signature.decode("latin-1"),
            "lastsize": self.lastsize,
            "nblocks": self.nblocks,
            "nreloc": self.nreloc,
            "hdrsize": self.hdrsize,
            "minalloc": self.minalloc,
            "maxalloc": self.maxalloc,
            "ss": self.ss,
            "sp": self.sp,
            "checksum": self.checksum,
            "ip": self.ip,
            "cs": self.cs,
            "relocpos": self.relocpos,
            "noverlay": self.noverlay,
            "oem_id": self.oem_id,
            "oem_info": self.oem_info,
            "e_lfanew": f"0x{self.e_lfanew:x}",
        }


@dataclass(frozen=True)
class FileHeader:
    """Raw COFF file header words following the PE signature."""
    machine: int
    number_of_sections: int
    time_date_stamp: int
    pointer_to_symbol_table: int  # deprecated
    number_of_symbols: int  # deprecated
    size_of_optional_header: int
    characteristics: int


@dataclass(frozen=True)
class ParsedHeaderInfo:
    """Validated header locations, plus decoded COFF fields once known."""
    dos_header: DosHeader
    pe_offset: int  # File offset of the PE signature
    signature: bytes
    coff_offset: int  # Cursor position just past the signature
    file_header: Optional[FileHeader] = None
    machine: Optional[MachineType] = None
    characteristics: Optional[Characteristics] = None

    def with_file_header(self, file_header: FileHeader) -> "ParsedHeaderInfo":
        """
        Return a copy carrying the COFF file header and its decoded fields.

        Raises:
            InvalidMachineTypeError: If the machine code is not documented.
        """
        return replace(
            self,
            file_header=file_header,
            machine=decode_machine(file_header.machine),
            characteristics=decode_characteristics(file_header.characteristics),
        )

    def to_dict(self) -> dict:
        result = {
            "pe_offset": self.pe_offset,
            "coff_offset": self.coff_offset,
            "dos_header": self.dos_header.to_dict(),
        }
        if self.machine is not None:
            result["machine"] = self.machine.name
            result["machine_name"] = self.machine.description
        if self.characteristics is not None:
            result["characteristics"] = f"0x{int(self.characteristics):04x}"
            result["flags"] = self.characteristics.flag_names()
        if self.file_header is not None:
            result["number_of_sections"] = self.file_header.number_of_sections
            result["time_date_stamp"] = self.file_header.time_date_stamp
        return result


class ParseState(enum.Enum):
    """Progress of a single header parse."""
    START = "start"
    DOS_HEADER_READ = "dos_header_read"
    PE_SIGNATURE_VERIFIED = "pe_signature_verified"
    FAILED = "failed"


@dataclass
class ParseResult:
    """Complete result of inspecting a PE file."""
    filename: str
    success: bool = False
    error: Optional[str] = None
    state: ParseState = field(default=ParseState.START)
    headers: Optional[ParsedHeaderInfo] = None

    def to_dict(self) -> dict:
        """Convert result to dictionary for JSON serialization."""
        result = {
            "filename": self.filename,
            "success": self.success,
            "state": self.state.value,
        }
        if self.error:
            result["error"] = self.error
        if self.headers:
            result["headers"] = self.headers.to_dict()
        return result
