"""Node models."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class NodeKind(str, Enum):
    """Kinds a single Markdown line can be classified as."""

    HEADING_1 = "heading_1"
    HEADING_2 = "heading_2"
    HEADING_3 = "heading_3"
    TEXT_BOLD = "text_bold"
    TEXT_ITALIC = "text_italic"
    BLOCK_QUOTE = "block_quote"
    PLAIN_TEXT = "plain_text"
    THEMATIC_BREAK = "thematic_break"


class Node(BaseModel):
    """One classified line.

    Attributes:
        kind: The kind the line was classified as.
        payload: Text carried into rendering. Empty for thematic breaks.
        position: Index of the node within its document.
    """

    model_config = ConfigDict(frozen=True)

    kind: NodeKind
    payload: str = ""
    position: int = Field(0, ge=0)
