"""CLI entry point for bytetools."""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from bytetools.aggregator import DirectorySizeAggregator
from bytetools.codec import HexCodec
from bytetools.strategies import available_strategies
from bytetools.utils import format_size

logging.basicConfig(
    level=logging.INFO,
    format="%(message)s",
)
logger = logging.getLogger(__name__)


def encode(source: Optional[str], uppercase: bool = True) -> None:
    """Print the hex encoding of a file (or stdin).

    Args:
        source: Path to the input file, or None / "-" for stdin
        uppercase: Emit A-F instead of a-f
    """
    if source is None or source == "-":
        data = sys.stdin.buffer.read()
    else:
        source_path = Path(source)
        if not source_path.is_file():
            logger.error(f"File not found: {source}")
            sys.exit(1)
        data = source_path.read_bytes()

    result = HexCodec().encode(data, uppercase=uppercase)
    if result.is_err:
        logger.error(f"Error: {result.error}")
        sys.exit(1)

    print(result.value)


def decode(text: str, output: Optional[str] = None) -> None:
    """Decode hex text and write the bytes to a file (or stdout).

    Args:
        text: Hex string to decode
        output: Path for the decoded bytes, or None for stdout
    """
    result = HexCodec().decode(text.strip())
    if result.is_err:
        logger.error(f"Error: {result.error}")
        sys.exit(1)

    if output is None:
        sys.stdout.buffer.write(result.value)
        sys.stdout.buffer.flush()
        return

    Path(output).write_bytes(result.value)
    logger.info(f"Wrote {len(result.value)} bytes -> {output}")


def size(path: str, strategy: str, human: bool = False) -> None:
    """Print the total size of a directory tree.

    Args:
        path: Directory to measure
        strategy: Name of the size strategy ("flat" or "nested")
        human: Print sizes with units instead of raw bytes
    """
    aggregator = DirectorySizeAggregator(strategy)
    result = aggregator.aggregate(path)
    if result.is_err:
        sys.exit(1)

    report = result.value
    total = format_size(report.total_bytes) if human else f"{report.total_bytes} bytes"

    print(f"Directory size: {total}")
    print(f"  Strategy: {report.strategy}")
    print(f"  Entries: {report.entries_visited}")
    if not report.complete:
        print(f"  Skipped: {report.skipped}")


def main(argv: Optional[list[str]] = None) -> None:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="bytetools",
        description="bytetools - hex codec and directory size utilities",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log every visited entry",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # encode command
    encode_parser = subparsers.add_parser(
        "encode",
        help="Print the hex encoding of a file",
    )
    encode_parser.add_argument(
        "source",
        nargs="?",
        default=None,
        help="Input file (default: stdin)",
    )
    encode_parser.add_argument(
        "--lower",
        action="store_true",
        help="Use lowercase hex digits",
    )

    # decode command
    decode_parser = subparsers.add_parser(
        "decode",
        help="Decode a hex string to raw bytes",
    )
    decode_parser.add_argument("hex", help="Hex string to decode")
    decode_parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="Output file path (default: stdout)",
    )

    # size command
    size_parser = subparsers.add_parser(
        "size",
        help="Compute the total size of a directory tree",
    )
    size_parser.add_argument("path", help="Directory to measure")
    size_parser.add_argument(
        "--strategy",
        choices=available_strategies(),
        default=DirectorySizeAggregator.DEFAULT_STRATEGY,
        help=f"Size strategy (default: {DirectorySizeAggregator.DEFAULT_STRATEGY})",
    )
    size_parser.add_argument(
        "--human",
        action="store_true",
        help="Print sizes as KB/MB/GB",
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    if args.command == "encode":
        encode(args.source, uppercase=not args.lower)
    elif args.command == "decode":
        decode(args.hex, args.output)
    elif args.command == "size":
        size(args.path, args.strategy, human=args.human)


if __name__ == "__main__":
    main()
