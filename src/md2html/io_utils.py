"""File utilities for reading Markdown sources and writing HTML sinks."""

from __future__ import annotations

import io
import sys
from pathlib import Path
from typing import Iterator, TextIO

from md2html.config import MD2HTML_ENCODING
from md2html.exceptions import (
    SinkNotWritableError,
    SinkWriteError,
    SourceNotFoundError,
    SourceReadError,
)

STDIO_PATH = "-"


def open_source(path: str | Path, encoding: str = MD2HTML_ENCODING) -> TextIO:
    """Open a Markdown source for reading.

    Args:
        path: Path to the source file, or ``"-"`` for standard input.
        encoding: Text encoding to use.

    Returns:
        An open text stream. Lines end only at ``\\n``; carriage returns are
        left in place so that :func:`strip_terminators` can cut them.
        Undecodable bytes become U+FFFD for both files and standard input.

    Raises:
        SourceNotFoundError: If the file does not exist.
        SourceReadError: If the file exists but cannot be opened.
    """
    if str(path) == STDIO_PATH:
        if isinstance(sys.stdin, io.TextIOWrapper):
            sys.stdin.reconfigure(encoding=encoding, errors="replace", newline="\n")
        return sys.stdin
    try:
        return open(path, encoding=encoding, errors="replace", newline="\n")
    except FileNotFoundError as exc:
        raise SourceNotFoundError(f"Markdown source not found: {path}") from exc
    except OSError as exc:
        raise SourceReadError(f"Cannot open Markdown source {path}: {exc}") from exc


def strip_terminators(line: str) -> str:
    """Cut a line at its first CR or LF character."""
    return line.partition("\n")[0].partition("\r")[0]


def split_lines(text: str) -> list[str]:
    """Split text on ``\\n`` without a phantom line after a final newline."""
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def read_lines(stream: TextIO) -> Iterator[str]:
    """Yield lines from a stream cut at their first CR/LF character.

    Raises:
        SourceReadError: If reading fails midway.
    """
    try:
        for raw in stream:
            yield strip_terminators(raw)
    except OSError as exc:
        raise SourceReadError(f"Failed to read Markdown source: {exc}") from exc


def open_sink(path: str | Path, encoding: str = MD2HTML_ENCODING) -> TextIO:
    """Open an HTML sink for writing, creating parent directories.

    Args:
        path: Path to the output file, or ``"-"`` for standard output.
        encoding: Text encoding to use.

    Raises:
        SinkNotWritableError: If the file cannot be created.
    """
    if str(path) == STDIO_PATH:
        return sys.stdout
    target = Path(path)
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        return target.open("w", encoding=encoding, newline="")
    except OSError as exc:
        raise SinkNotWritableError(f"Cannot create HTML output {path}: {exc}") from exc


def write_text(stream: TextIO, text: str) -> None:
    """Write text to an opened sink.

    Raises:
        SinkWriteError: If the write fails.
    """
    try:
        stream.write(text)
        stream.flush()
    except OSError as exc:
        raise SinkWriteError(f"Failed to write HTML output: {exc}") from exc


def truncate_line(line: str, max_bytes: int) -> tuple[str, bool]:
    """Cut a line to at most ``max_bytes`` UTF-8 bytes.

    Never splits a multi-byte character.

    Returns:
        Tuple of (line, truncated) where truncated tells whether anything was cut.
    """
    encoded = line.encode("utf-8", errors="surrogatepass")
    if len(encoded) <= max_bytes:
        return line, False
    return encoded[:max_bytes].decode("utf-8", errors="ignore"), True
