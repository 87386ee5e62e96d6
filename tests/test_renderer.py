"""Tests for the HTML renderer."""

from __future__ import annotations

import pytest

from md2html.renderer import render, render_document
from md2html.schemas import Node, NodeKind


class TestRender:
    """Tests for render function."""

    @pytest.mark.parametrize(
        ("kind", "expected"),
        [
            (NodeKind.HEADING_1, "<h1>Title</h1>\n"),
            (NodeKind.HEADING_2, "<h2>Title</h2>\n"),
            (NodeKind.HEADING_3, "<h3>Title</h3>\n"),
            (NodeKind.TEXT_BOLD, "<b>Title</b><br />\n"),
            (NodeKind.TEXT_ITALIC, "<i>Title</i><br />\n"),
            (NodeKind.BLOCK_QUOTE, "<blockquote>Title</blockquote>\n"),
            (NodeKind.PLAIN_TEXT, "Title<br />\n"),
        ],
    )
    def test_templates(self, kind: NodeKind, expected: str) -> None:
        assert render(Node(kind=kind, payload="Title")) == expected

    def test_thematic_break_ignores_payload(self) -> None:
        """Breaks render as <hr /> with nothing after the newline."""
        assert render(Node(kind=NodeKind.THEMATIC_BREAK)) == "<hr />\n"
        assert render(Node(kind=NodeKind.THEMATIC_BREAK, payload="x")) == "<hr />\n"

    def test_every_kind_is_renderable(self) -> None:
        for kind in NodeKind:
            assert render(Node(kind=kind, payload="p")).endswith("\n")

    def test_payload_is_not_escaped(self) -> None:
        node = Node(kind=NodeKind.PLAIN_TEXT, payload="<b>a & b</b>")
        assert render(node) == "<b>a & b</b><br />\n"

    def test_braces_in_payload_are_literal(self) -> None:
        node = Node(kind=NodeKind.HEADING_1, payload="{payload} {0}")
        assert render(node) == "<h1>{payload} {0}</h1>\n"

    def test_render_is_idempotent(self) -> None:
        node = Node(kind=NodeKind.BLOCK_QUOTE, payload="quoted")
        assert render(node) == render(node)


class TestRenderDocument:
    """Tests for render_document function."""

    def test_concatenates_in_order(self) -> None:
        nodes = [
            Node(kind=NodeKind.HEADING_1, payload="Title", position=0),
            Node(kind=NodeKind.PLAIN_TEXT, payload="plain line", position=1),
            Node(kind=NodeKind.THEMATIC_BREAK, position=2),
        ]
        assert render_document(nodes) == "<h1>Title</h1>\nplain line<br />\n<hr />\n"

    def test_empty_document(self) -> None:
        assert render_document([]) == ""
