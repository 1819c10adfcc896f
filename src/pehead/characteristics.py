"""Image characteristics flags from the COFF file header."""

import enum
from typing import List

CHARACTERISTICS_MASK = 0xFFFF


class Characteristics(enum.IntFlag):
    """
    Attributes of an object or image file.

    Each of the 16 bits has a name, including the reserved 0x0040 bit, so
    any 16-bit value decodes and re-encodes without loss.
    """
    RELOCS_STRIPPED = 0x0001  # No base relocations, must load at preferred base
    EXECUTABLE_IMAGE = 0x0002  # Valid and can be run
    LINE_NUMS_STRIPPED = 0x0004  # Deprecated
    LOCAL_SYMS_STRIPPED = 0x0008  # Deprecated
    AGGRESSIVE_WS_TRIM = 0x0010  # Obsolete
    LARGE_ADDRESS_AWARE = 0x0020  # Can handle > 2-GB addresses
    RESERVED = 0x0040
    BYTES_REVERSED_LO = 0x0080  # Deprecated
    MACHINE_32BIT = 0x0100
    DEBUG_STRIPPED = 0x0200
    REMOVABLE_RUN_FROM_SWAP = 0x0400
    NET_RUN_FROM_SWAP = 0x0800
    SYSTEM = 0x1000  # System file, not a user program
    DLL = 0x2000
    UP_SYSTEM_ONLY = 0x4000  # Uniprocessor machines only
    BYTES_REVERSED_HI = 0x8000  # Deprecated

    @property
    def relocs_stripped(self) -> bool:
        return bool(self & Characteristics.RELOCS_STRIPPED)

    @property
    def is_executable(self) -> bool:
        return bool(self & Characteristics.EXECUTABLE_IMAGE)

    @property
    def is_large_address_aware(self) -> bool:
        return bool(self & Characteristics.LARGE_ADDRESS_AWARE)

    @property
    def is_32bit_machine(self) -> bool:
        return bool(self & Characteristics.MACHINE_32BIT)

    @property
    def is_system(self) -> bool:
        return bool(self & Characteristics.SYSTEM)

    @property
    def is_dll(self) -> bool:
        return bool(self & Characteristics.DLL)

    def flag_names(self) -> List[str]:
        """Names of the set flags, lowest bit first."""
        return [
            flag.name
            for flag in sorted(Characteristics, key=int)
            if self & flag
        ]


def decode_characteristics(mask: int) -> Characteristics:
    """
    Decode a raw 16-bit characteristics word.

    Raises:
        ValueError: If mask does not fit in 16 bits.
    """
    if not 0 <= mask <= CHARACTERISTICS_MASK:
        raise ValueError(f"Characteristics mask out of range: {mask:#x}")
    return Characteristics(mask)


def encode_characteristics(flags: Characteristics) -> int:
    return int(flags)
