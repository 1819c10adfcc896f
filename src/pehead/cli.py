"""Command-line interface for pehead."""

import argparse
import json
import logging
import sys
from typing import List, Optional

from . import __version__
from .models import ParseResult
from .parser import inspect_file


def format_characteristics(result: ParseResult) -> str:
    """Format the decoded characteristics flags for display."""
    flags = result.headers.characteristics
    names = flags.flag_names()
    return f"0x{int(flags):04x}" + (f" ({', '.join(names)})" if names else "")


def print_result(result: ParseResult) -> None:
    """Print parse result in human-readable format."""
    print(f"Processing {result.filename}")

    if not result.success:
        print(result.error, file=sys.stderr)
        return

    headers = result.headers
    print(f"PE signature offset: 0x{headers.pe_offset:x}")
    print(f"COFF header offset: 0x{headers.coff_offset:x}")

    if headers.machine is not None:
        print(f"Target machine: {headers.machine.description}")
    if headers.characteristics is not None:
        print(f"Characteristics: {format_characteristics(result)}")


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser."""
    parser = argparse.ArgumentParser(
        prog="pehead",
        description="Locate and validate the headers of Windows PE executables.",
        epilog=(
            "Reads the DOS header, follows e_lfanew to the PE signature and "
            "decodes the target machine and image characteristics."
        ),
    )

    parser.add_argument(
        "files",
        nargs="*",
        metavar="FILE",
        help="PE executable file(s) to analyze",
    )

    parser.add_argument(
        "--json",
        action="store_true",
        help="Output results as JSON",
    )

    parser.add_argument(
        "--header-only",
        action="store_true",
        help="Stop after the PE signature; do not read the COFF file header",
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log parsing steps to stderr",
    )

    parser.add_argument(
        "--version", "-V",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s - %(name)s - %(message)s",
    )

    if not args.files:
        print(
            "PE header decoder. Usage:\n\n"
            "  pehead file ...\n\n"
            "Works on executables, DLLs, drivers and other binary files\n"
            "in the Portable Executable format."
        )
        return 0

    results = []
    for filename in args.files:
        result = inspect_file(filename, read_file_header=not args.header_only)
        results.append(result)

    if args.json:
        output = [r.to_dict() for r in results]
        print(json.dumps(output, indent=2))
    else:
        for result in results:
            print_result(result)

    # Return non-zero if any file failed
    return 0 if all(r.success for r in results) else 1


if __name__ == "__main__":
    sys.exit(main())
