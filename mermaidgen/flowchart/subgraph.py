"""Subgraphs: titled groups of links inside a flowchart, possibly nested."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from mermaidgen.base import INDENTATION, IdGenerator
from mermaidgen.flowchart.link import Link
from mermaidgen.flowchart.node import Node


class SubgraphDirection(str, Enum):
    """Layout directions a subgraph may override."""

    NONE = ""
    TOP_TO_BOTTOM = "TB"
    BOTTOM_UP = "BT"
    RIGHT_LEFT = "RL"
    LEFT_RIGHT = "LR"


@dataclass
class Subgraph:
    """A titled block of a flowchart holding links and nested subgraphs."""

    id: str
    title: str
    direction: SubgraphDirection = SubgraphDirection.NONE
    subgraphs: List["Subgraph"] = field(default_factory=list)
    links: List[Link] = field(default_factory=list)
    _id_generator: Optional[IdGenerator] = field(
        default=None, repr=False, compare=False
    )

    def add_subgraph(self, title: str) -> "Subgraph":
        """Create a nested subgraph; the whole nested tree shares one ID sequence."""
        if self._id_generator is None:
            self._id_generator = IdGenerator()
        child = Subgraph(self._id_generator.next_id(), title)
        child._id_generator = self._id_generator
        self.subgraphs.append(child)
        return child

    def add_link(self, from_node: Node, to_node: Node) -> Link:
        """Create a link inside this subgraph and return it."""
        link = Link(from_node, to_node)
        self.links.append(link)
        return link

    def render(self, indentation: str = "") -> str:
        """Render the subgraph with every line prefixed by indentation."""
        prefix = indentation + INDENTATION
        parts = [f"{prefix}subgraph {self.id} [{self.title}]\n"]
        direction = SubgraphDirection(self.direction)
        if direction is not SubgraphDirection.NONE:
            parts.append(f"{prefix}direction {direction.value}\n")
        parts.extend(child.render(prefix) for child in self.subgraphs)
        parts.extend(f"{prefix}{link}" for link in self.links)
        parts.append(f"{prefix}end\n")
        return "".join(parts)

    def __str__(self) -> str:
        return self.render("")