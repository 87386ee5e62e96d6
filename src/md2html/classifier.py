"""Classify single Markdown lines into nodes."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Final

from md2html.config import MD2HTML_MAX_PAYLOAD_BYTES
from md2html.schemas import Node, NodeKind

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Rule:
    """A single classification rule.

    Attributes:
        kind: Node kind produced when the rule matches.
        pattern: Compiled pattern. Capturing rules use group 1 as payload.
        captures: If True, the rule needs a non-empty group 1 to match.
        anchored: If True, the pattern must match at the start of the line;
            otherwise it may match anywhere.
    """

    kind: NodeKind
    pattern: re.Pattern[str]
    captures: bool = True
    anchored: bool = True


# Order matters: first match wins.
RULES: Final[tuple[Rule, ...]] = (
    Rule(NodeKind.HEADING_3, re.compile(r"### +(.*)")),
    Rule(NodeKind.HEADING_2, re.compile(r"## +(.*)")),
    Rule(NodeKind.HEADING_1, re.compile(r"# +(.*)")),
    Rule(NodeKind.BLOCK_QUOTE, re.compile(r"> *(.*)")),
    Rule(NodeKind.THEMATIC_BREAK, re.compile(r" *- *- *-.*"), captures=False),
    Rule(NodeKind.TEXT_BOLD, re.compile(r"\*\*(.*?)\*\*"), anchored=False),
    Rule(NodeKind.TEXT_ITALIC, re.compile(r"\*(.*?)\*"), anchored=False),
)


def classify(
    line: str,
    *,
    position: int = 0,
    max_payload_bytes: int = MD2HTML_MAX_PAYLOAD_BYTES,
) -> Node:
    """Classify one line into a node.

    Rules are tried in order and the first match wins. A capturing rule whose
    capture is empty, or longer than ``max_payload_bytes``, does not match.
    Lines no rule accepts become plain text carrying the whole line.

    Args:
        line: A non-empty line with line terminators already stripped.
        position: Index the node will take in its document.
        max_payload_bytes: Largest accepted capture, in UTF-8 bytes.

    Returns:
        The classified node.
    """
    for rule in RULES:
        payload = _apply_rule(rule, line, max_payload_bytes)
        if payload is not None:
            return Node(kind=rule.kind, payload=payload, position=position)

    logger.debug("No rule matched line %d, falling back to plain text", position)
    return Node(kind=NodeKind.PLAIN_TEXT, payload=line, position=position)


def _apply_rule(rule: Rule, line: str, max_payload_bytes: int) -> str | None:
    match = rule.pattern.match(line) if rule.anchored else rule.pattern.search(line)
    if match is None:
        return None
    if not rule.captures:
        return ""

    capture = match.group(1)
    if not capture:
        return None
    if len(capture.encode("utf-8", errors="surrogatepass")) > max_payload_bytes:
        logger.debug(
            "Capture of %d characters exceeds payload limit for %s",
            len(capture),
            rule.kind.value,
        )
        return None
    return capture
