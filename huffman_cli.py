# filename: huffman_cli.py

import argparse
import logging
import os
import sys

from huffman_errors import HuffmanError, InvalidArgumentsError
from huffman_service import HuffmanService

LOG_LEVEL_ENV = "HUFFZIP_LOG_LEVEL"


def configure_logging():
    """
    Configure the root logger from the HUFFZIP_LOG_LEVEL environment variable.
    Log records go to stderr so they never mix with the tool's own output.
    """
    log_level = os.getenv(LOG_LEVEL_ENV, "WARNING")
    numeric_level = getattr(logging, log_level.upper(), logging.WARNING)

    log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"
    formatter = logging.Formatter(log_format, date_format)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)

    # Clear any existing handlers to avoid duplicate logs
    if root_logger.handlers:
        root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises instead of printing to stderr and exiting."""

    def error(self, message):
        raise InvalidArgumentsError(message)


def build_parser(prog=None):
    """Build the parser for exactly `<mode> <input> <output>`."""
    parser = _ArgumentParser(
        prog=prog,
        description="Lossless file compression with static Huffman coding",
        add_help=False,
    )
    parser.add_argument("mode", choices=("-c", "-d"),
                        help="-c to compress, -d to decompress")
    parser.add_argument("input", help="file to read")
    parser.add_argument("output", help="file to write")
    return parser


def print_usage(prog):
    """Print the usage message to stdout."""
    print("Usage:")
    print(f"  To compress:   {prog} -c <input_file> <output_file>")
    print(f"  To decompress: {prog} -d <input_file> <output_file>")


def main(argv=None):
    if argv is None:
        argv = sys.argv[1:]
    prog = os.path.basename(sys.argv[0]) or "huffzip"

    configure_logging()
    try:
        # Everything is positional, so paths starting with "-" stay paths.
        args = build_parser(prog).parse_args(["--", *argv])
    except InvalidArgumentsError as exc:
        logging.getLogger(__name__).debug("rejected arguments %r: %s", argv, exc)
        print_usage(prog)
        return 1

    service = HuffmanService()
    try:
        if args.mode == "-c":
            service.compress_file(args.input, args.output)
            print("File compressed successfully!")
        else:
            service.decompress_file(args.input, args.output)
            print("File decompressed successfully!")
    except HuffmanError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
