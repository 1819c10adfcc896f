"""Target machine types from the COFF file header."""

import enum

from .exceptions import InvalidMachineTypeError


@enum.unique
class MachineType(enum.IntEnum):
    """
    CPU type an image is built for.

    An image can be run only on the specified machine or on a system that
    emulates it. Values from https://learn.microsoft.com/en-us/windows/win32/debug/pe-format
    """
    UNKNOWN = 0x0  # Applicable to any machine type
    AM33 = 0x1D3
    AMD64 = 0x8664
    ARM = 0x1C0
    ARM64 = 0xAA64
    ARMNT = 0x1C4
    EBC = 0xEBC
    I386 = 0x14C
    IA64 = 0x200
    M32R = 0x9041
    MIPS16 = 0x266
    MIPSFPU = 0x366
    MIPSFPU16 = 0x466
    POWERPC = 0x1F0
    POWERPCFP = 0x1F1
    R4000 = 0x166
    RISCV32 = 0x5032
    RISCV64 = 0x5064
    RISCV128 = 0x5128
    SH3 = 0x1A2
    SH3DSP = 0x1A3
    SH4 = 0x1A6
    SH5 = 0x1A8
    THUMB = 0x1C2
    WCEMIPSV2 = 0x169

    @property
    def description(self) -> str:
        return MACHINE_NAMES[self]


MACHINE_NAMES = {
    MachineType.UNKNOWN: "Unknown",
    MachineType.AM33: "Matsushita AM33",
    MachineType.AMD64: "x64",
    MachineType.ARM: "ARM LE",
    MachineType.ARM64: "ARMv8 64bit",
    MachineType.ARMNT: "ARMv7+ Thumb",
    MachineType.EBC: "EFI bytecode",
    MachineType.I386: "x32",
    MachineType.IA64: "Intel Itanium",
    MachineType.M32R: "Mitsubishi M32R LE",
    MachineType.MIPS16: "MIPS16",
    MachineType.MIPSFPU: "MIPS w/FPU",
    MachineType.MIPSFPU16: "MIPS16 w/FPU",
    MachineType.POWERPC: "PowerPC LE",
    MachineType.POWERPCFP: "PowerPC w/FPU",
    MachineType.R4000: "MIPS LE",
    MachineType.RISCV32: "RISC-V 32bit",
    MachineType.RISCV64: "RISC-V 64bit",
    MachineType.RISCV128: "RISC-V 128bit",
    MachineType.SH3: "Hitachi SH3",
    MachineType.SH3DSP: "Hitachi SH3 DSP",
    MachineType.SH4: "Hitachi SH4",
    MachineType.SH5: "Hitachi SH5",
    MachineType.THUMB: "ARM or Thumb",
    MachineType.WCEMIPSV2: "MIPS LE WCE v2",
}


def decode_machine(code: int) -> MachineType:
    """
    Map a raw 16-bit machine code to its MachineType.

    Raises:
        InvalidMachineTypeError: If code is not a documented machine type.
    """
    try:
        return MachineType(code)
    except ValueError:
        raise InvalidMachineTypeError(code) from None


def encode_machine(machine: MachineType) -> int:
    return int(machine)


def get_machine_name(code: int) -> str:
    """Get human-readable machine type name."""
    try:
        return decode_machine(code).description
    except InvalidMachineTypeError:
        return f"Unknown (0x{code:04x})"
