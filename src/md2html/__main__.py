"""Command line entry point for running with python -m md2html."""

from __future__ import annotations

import argparse
import logging
import sys

from md2html.config import MD2HTML_LOG_LEVEL, MD2HTML_MAX_LINE_BYTES
from md2html.conversion import ConversionOptions, convert_file
from md2html.exceptions import Md2HtmlError
from md2html.io_utils import STDIO_PATH

logger = logging.getLogger("md2html")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="md2html", description="Convert line-oriented Markdown to HTML."
    )
    parser.add_argument(
        "source",
        nargs="?",
        default=STDIO_PATH,
        help="Markdown file to read (default: stdin)",
    )
    parser.add_argument(
        "-o",
        "--output",
        help="HTML file to write (default: SOURCE with .html suffix, or stdout for stdin)",
    )
    parser.add_argument(
        "--max-line-bytes",
        type=int,
        default=MD2HTML_MAX_LINE_BYTES,
        help="Truncate lines longer than this many bytes",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.max_line_bytes <= 0:
        parser.error("--max-line-bytes must be positive")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else MD2HTML_LOG_LEVEL,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    options = ConversionOptions(max_line_bytes=args.max_line_bytes)
    try:
        convert_file(args.source, args.output, options=options)
    except Md2HtmlError as exc:
        logger.debug("Conversion failed", exc_info=True)
        print(f"md2html: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
