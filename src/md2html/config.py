"""Local configuration for md2html."""

from __future__ import annotations

import os


DEFAULT_MAX_LINE_BYTES = 1024
DEFAULT_MAX_PAYLOAD_BYTES = 1024
DEFAULT_ENCODING = "utf-8"
DEFAULT_LOG_LEVEL = "WARNING"

# Lines longer than this are truncated on read, never rejected.
MD2HTML_MAX_LINE_BYTES = int(os.getenv("MD2HTML_MAX_LINE_BYTES", str(DEFAULT_MAX_LINE_BYTES)))
MD2HTML_MAX_PAYLOAD_BYTES = int(os.getenv("MD2HTML_MAX_PAYLOAD_BYTES", str(DEFAULT_MAX_PAYLOAD_BYTES)))
MD2HTML_ENCODING = os.getenv("MD2HTML_ENCODING", DEFAULT_ENCODING)
MD2HTML_LOG_LEVEL = os.getenv("MD2HTML_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
