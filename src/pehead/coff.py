"""COFF file header reader, run at the position after the PE signature."""

import logging

from .cursor import ByteCursor
from .models import FileHeader

logger = logging.getLogger(__name__)


def read_file_header(cursor: ByteCursor) -> FileHeader:
    """
    Read the 20-byte COFF file header at the cursor.

    Values are returned raw; decoding machine and characteristics is left
    to ParsedHeaderInfo.with_file_header.

    Raises:
        TruncatedError: If the file ends inside the header.
    """
    offset = cursor.position
    header = FileHeader(
        machine=cursor.read_u16(),
        number_of_sections=cursor.read_u16(),
        time_date_stamp=cursor.read_u32(),
        pointer_to_symbol_table=cursor.read_u32(),
        number_of_symbols=cursor.read_u32(),
        size_of_optional_header=cursor.read_u16(),
        characteristics=cursor.read_u16(),
    )
    logger.debug(
        "COFF file header at 0x%x: machine=0x%04x characteristics=0x%04x "
        "sections=%d",
        offset, header.machine, header.characteristics,
        header.number_of_sections,
    )
    return header
