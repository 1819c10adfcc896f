"""
pehead - Locate and validate the headers of Windows PE executables.

Parses the legacy DOS header, follows its e_lfanew offset to the
"PE\\0\\0" signature, and decodes the target machine type and image
characteristics from the COFF file header.
"""

__version__ = "1.0.0"

from .parser import (
    HeaderParser,
    read_dos_header,
    locate_pe_signature,
    parse_stream,
    parse_bytes,
    parse_file,
    inspect_file,
)
from .coff import read_file_header
from .cursor import ByteCursor
from .machine import (
    MachineType,
    MACHINE_NAMES,
    decode_machine,
    encode_machine,
    get_machine_name,
)
from .characteristics import (
    Characteristics,
    decode_characteristics,
    encode_characteristics,
)
from .models import (
    DosHeader,
    FileHeader,
    ParsedHeaderInfo,
    ParseResult,
    ParseState,
)
from .constants import (
    MZ_SIGNATURE,
    ZM_SIGNATURE,
    PE_SIGNATURE,
    DOS_HEADER_SIZE,
)
from .exceptions import (
    PEHeaderError,
    TruncatedError,
    SeekOutOfRangeError,
    InvalidSignatureError,
    InvalidHeaderOffsetError,
    InvalidPESignatureError,
    InvalidMachineTypeError,
    IOFailureError,
)

__all__ = [
    # Main API
    "HeaderParser",
    "read_dos_header",
    "locate_pe_signature",
    "read_file_header",
    "parse_stream",
    "parse_bytes",
    "parse_file",
    "inspect_file",
    "ByteCursor",
    # Decoders
    "MachineType",
    "MACHINE_NAMES",
    "decode_machine",
    "encode_machine",
    "get_machine_name",
    "Characteristics",
    "decode_characteristics",
    "encode_characteristics",
    # Models
    "DosHeader",
    "FileHeader",
    "ParsedHeaderInfo",
    "ParseResult",
    "ParseState",
    # Constants
    "MZ_SIGNATURE",
    "ZM_SIGNATURE",
    "PE_SIGNATURE",
    "DOS_HEADER_SIZE",
    # Exceptions
    "PEHeaderError",
    "TruncatedError",
    "SeekOutOfRangeError",
    "InvalidSignatureError",
    "InvalidHeaderOffsetError",
    "InvalidPESignatureError",
    "InvalidMachineTypeError",
    "IOFailureError",
    # Version
    "__version__",
]
