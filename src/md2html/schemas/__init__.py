"""Shared schemas for md2html."""

from md2html.schemas.conversion import ConversionResult
from md2html.schemas.document import Document
from md2html.schemas.nodes import Node, NodeKind

__all__ = ["ConversionResult", "Document", "Node", "NodeKind"]
