"""Conversion output model."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ConversionResult(BaseModel):
    """Final conversion output."""

    html: str
    node_count: int = Field(0, ge=0)
    skipped_lines: int = Field(0, ge=0)
    truncated_lines: int = Field(0, ge=0)
