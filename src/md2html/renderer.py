"""Render classified nodes into HTML fragments."""

from __future__ import annotations

from typing import Final, Iterable

from md2html.schemas import Node, NodeKind

# Payload is inserted verbatim; no HTML escaping.
_TEMPLATES: Final[dict[NodeKind, str]] = {
    NodeKind.HEADING_1: "<h1>{payload}</h1>\n",
    NodeKind.HEADING_2: "<h2>{payload}</h2>\n",
    NodeKind.HEADING_3: "<h3>{payload}</h3>\n",
    NodeKind.TEXT_BOLD: "<b>{payload}</b><br />\n",
    NodeKind.TEXT_ITALIC: "<i>{payload}</i><br />\n",
    NodeKind.BLOCK_QUOTE: "<blockquote>{payload}</blockquote>\n",
    NodeKind.PLAIN_TEXT: "{payload}<br />\n",
    NodeKind.THEMATIC_BREAK: "<hr />\n",
}


def render(node: Node) -> str:
    """Render a single node into its HTML fragment."""
    # Braces inside the payload stay literal.
    return _TEMPLATES[node.kind].replace("{payload}", node.payload)


def render_document(nodes: Iterable[Node]) -> str:
    """Concatenate the fragments of all nodes in order."""
    return "".join(render(node) for node in nodes)
