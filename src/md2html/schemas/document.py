"""Document model."""

from __future__ import annotations

from typing import Iterator

from pydantic import BaseModel, Field

from md2html.schemas.nodes import Node


class Document(BaseModel):
    """Ordered, append-only sequence of nodes, one per non-blank line."""

    nodes: list[Node] = Field(default_factory=list)

    def append(self, node: Node) -> None:
        """Append a node, keeping positions in input order."""
        if node.position != len(self.nodes):
            raise ValueError(
                f"Node position {node.position} does not follow document length {len(self.nodes)}"
            )
        self.nodes.append(node)

    def __len__(self) -> int:
        return len(self.nodes)

    def __iter__(self) -> Iterator[Node]:  # type: ignore[override]
        return iter(self.nodes)
