"""md2html: convert a line-oriented Markdown subset into HTML."""

from md2html.classifier import RULES, classify
from md2html.conversion import (
    ConversionOptions,
    build_document,
    convert_file,
    convert_lines,
    convert_text,
)
from md2html.exceptions import (
    Md2HtmlError,
    SinkError,
    SinkNotWritableError,
    SinkWriteError,
    SourceError,
    SourceNotFoundError,
    SourceReadError,
)
from md2html.renderer import render, render_document
from md2html.schemas import ConversionResult, Document, Node, NodeKind

__all__ = [
    "ConversionOptions",
    "ConversionResult",
    "Document",
    "Md2HtmlError",
    "Node",
    "NodeKind",
    "RULES",
    "SinkError",
    "SinkNotWritableError",
    "SinkWriteError",
    "SourceError",
    "SourceNotFoundError",
    "SourceReadError",
    "build_document",
    "classify",
    "convert_file",
    "convert_lines",
    "convert_text",
    "render",
    "render_document",
]
