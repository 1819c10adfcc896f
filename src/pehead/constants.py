"""Magic numbers and layout constants for PE header parsing."""

# Signature magic values
MZ_SIGNATURE = b"MZ"  # DOS executable signature
ZM_SIGNATURE = b"ZM"  # Byte-swapped "MZ" written by some early linkers
DOS_SIGNATURES = (MZ_SIGNATURE, ZM_SIGNATURE)
PE_SIGNATURE = b"PE\x00\x00"  # PE header signature

# DOS header layout, after the 2-byte signature:
# lastsize, nblocks, nreloc, hdrsize, minalloc, maxalloc, ss, sp,
# checksum, ip, cs, relocpos, noverlay, reserved1[4], oem_id, oem_info,
# reserved2[10], e_lfanew
DOS_HEADER_FORMAT = "<13H4H2H10HI"
DOS_HEADER_SIZE = 0x40
DOS_PE_OFFSET = 0x3C  # File address of e_lfanew

# Legacy size units
DOS_BLOCK_SIZE = 512
DOS_PARAGRAPH_SIZE = 16

# COFF file header, immediately after the PE signature
FILE_HEADER_SIZE = 20

