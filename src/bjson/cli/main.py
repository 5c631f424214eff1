"""Main CLI entry point for bjson."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from .. import __version__
from ..codec import decode, encode
from ..exceptions import BjsonError
from ..utils.jsontext import from_json, to_json
from .analyze import analyze_file, read_input

logger = logging.getLogger(__name__)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the bjson CLI.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = argparse.ArgumentParser(
        prog="bjson",
        description="bjson: binary JSON codec",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  bjson --encode doc.json               Print doc.json encoded, as hex
  bjson --encode doc.json -o doc.bjson  Write the encoded bytes to a file
  bjson --decode doc.bjson              Print a bjson buffer as JSON
  bjson --analyze doc.bjson             Show tags, widths and sizes
  bjson --version                       Show version
        """,
    )

    action = parser.add_mutually_exclusive_group()
    action.add_argument("--encode", metavar="FILE", type=str, help="Encode a JSON file")
    action.add_argument("--decode", metavar="FILE", type=str, help="Decode a bjson file to JSON")
    action.add_argument(
        "--analyze",
        metavar="FILE",
        type=str,
        help="Analyze a bjson file and show its tag structure",
    )

    parser.add_argument("-o", "--output", metavar="OUT", type=str, help="Write output to OUT")
    parser.add_argument(
        "--hex", action="store_true", help="bjson input files hold hex text instead of raw bytes"
    )
    parser.add_argument("--indent", type=int, default=None, help="Indent decoded JSON")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"bjson {__version__}")

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    file_arg = args.encode or args.decode or args.analyze
    if file_arg is None:
        # If no command specified, show help
        parser.print_help()
        return 0

    file_path = Path(file_arg)
    if not file_path.exists():
        print(f"Error: File not found: {file_path}", file=sys.stderr)
        return 1

    try:
        if args.encode:
            _run_encode(file_path, args.output)
        elif args.decode:
            _run_decode(file_path, args.output, args.hex, args.indent)
        else:
            analyze_file(file_path, hex_input=args.hex)
        return 0
    except (BjsonError, ValueError, OSError) as e:
        logger.debug("command failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1


def _run_encode(file_path: Path, output: Optional[str]) -> None:
    value = from_json(file_path.read_text(encoding="utf-8"))
    data = encode(value)
    logger.debug("encoded %s to %d bytes", file_path, len(data))
    if output:
        Path(output).write_bytes(data)
    else:
        print(data.hex())


def _run_decode(
    file_path: Path, output: Optional[str], hex_input: bool, indent: Optional[int]
) -> None:
    data = read_input(file_path, hex_input)
    logger.debug("decoding %d bytes from %s", len(data), file_path)
    text = to_json(decode(data), indent=indent)
    if output:
        Path(output).write_text(text + "\n", encoding="utf-8")
    else:
        print(text)


if __name__ == "__main__":
    sys.exit(main())
