"""Conversion pipeline for Markdown lines -> HTML."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

from md2html.classifier import classify
from md2html.config import (
    MD2HTML_ENCODING,
    MD2HTML_MAX_LINE_BYTES,
    MD2HTML_MAX_PAYLOAD_BYTES,
)
from md2html.exceptions import SinkNotWritableError
from md2html.io_utils import (
    STDIO_PATH,
    open_sink,
    open_source,
    read_lines,
    split_lines,
    strip_terminators,
    truncate_line,
    write_text,
)
from md2html.renderer import render_document
from md2html.schemas import ConversionResult, Document

logger = logging.getLogger(__name__)


@dataclass
class ConversionOptions:
    """Options for a conversion run.

    Attributes:
        max_line_bytes: Lines longer than this many UTF-8 bytes are truncated.
        max_payload_bytes: Captures longer than this do not match their rule.
        encoding: Text encoding for reading sources and writing sinks.
    """

    max_line_bytes: int = MD2HTML_MAX_LINE_BYTES
    max_payload_bytes: int = MD2HTML_MAX_PAYLOAD_BYTES
    encoding: str = MD2HTML_ENCODING


@dataclass
class DocumentStats:
    """Counters collected while building a document."""

    skipped_lines: int = 0
    truncated_lines: int = 0


def build_document(
    lines: Iterable[str], *, options: ConversionOptions | None = None
) -> tuple[Document, DocumentStats]:
    """Classify lines into a document.

    Every line is cut at its first CR/LF, lines that end up empty are
    dropped, and oversized lines are truncated before classification.
    """
    opts = options or ConversionOptions()
    document = Document()
    stats = DocumentStats()

    for line_number, raw in enumerate(lines, start=1):
        line = strip_terminators(raw)
        if not line:
            stats.skipped_lines += 1
            continue

        line, truncated = truncate_line(line, opts.max_line_bytes)
        if truncated:
            stats.truncated_lines += 1
            logger.debug(
                "Truncated line %d to %d bytes", line_number, opts.max_line_bytes
            )

        document.append(
            classify(
                line,
                position=len(document),
                max_payload_bytes=opts.max_payload_bytes,
            )
        )

    return document, stats


def convert_lines(
    lines: Iterable[str], *, options: ConversionOptions | None = None
) -> ConversionResult:
    """Convert Markdown lines into HTML."""
    document, stats = build_document(lines, options=options)
    return ConversionResult(
        html=render_document(document),
        node_count=len(document),
        skipped_lines=stats.skipped_lines,
        truncated_lines=stats.truncated_lines,
    )


def convert_text(text: str, *, options: ConversionOptions | None = None) -> str:
    """Convert a Markdown string into HTML."""
    return convert_lines(split_lines(text), options=options).html


def default_sink_for(source: str | Path) -> str | Path:
    """Return the default output path for a source: same name, ``.html`` suffix."""
    if str(source) == STDIO_PATH:
        return STDIO_PATH
    return Path(source).with_suffix(".html")


def convert_file(
    source: str | Path,
    sink: str | Path | None = None,
    *,
    options: ConversionOptions | None = None,
) -> ConversionResult:
    """Read a Markdown file, convert it, and write the HTML.

    The whole source is read and converted before the sink is opened, so a
    failing source never leaves a partial output file behind.

    Args:
        source: Markdown file path, or ``"-"`` for standard input.
        sink: HTML output path, or ``"-"`` for standard output. Defaults to
            the source path with an ``.html`` suffix.
        options: Conversion options. Uses defaults if None.

    Returns:
        The conversion result.

    Raises:
        SourceNotFoundError: If the source does not exist.
        SourceReadError: If the source cannot be read.
        SinkNotWritableError: If the sink cannot be created, or if the default
            sink would overwrite the source.
        SinkWriteError: If writing the sink fails.
    """
    opts = options or ConversionOptions()
    if sink is None:
        target = default_sink_for(source)
        if target != STDIO_PATH and Path(target).resolve() == Path(source).resolve():
            raise SinkNotWritableError(
                f"Default HTML output {target} would overwrite the source; pass an explicit sink"
            )
    else:
        target = sink

    stream = open_source(source, encoding=opts.encoding)
    try:
        result = convert_lines(read_lines(stream), options=opts)
    finally:
        if str(source) != STDIO_PATH:
            stream.close()

    out = open_sink(target, encoding=opts.encoding)
    try:
        write_text(out, result.html)
    finally:
        if str(target) != STDIO_PATH:
            out.close()

    logger.info(
        "Converted Markdown to HTML",
        extra={
            "source": str(source),
            "sink": str(target),
            "node_count": result.node_count,
            "skipped_lines": result.skipped_lines,
            "truncated_lines": result.truncated_lines,
        },
    )
    return result
