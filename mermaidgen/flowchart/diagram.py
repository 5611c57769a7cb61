"""Flowchart diagrams: nodes, links, subgraphs and class definitions."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import List, Optional, Union

from mermaidgen.base import IdGenerator, render_to_file
from mermaidgen.flowchart.classdef import ClassDef
from mermaidgen.flowchart.configuration import FlowchartConfigurationProperties
from mermaidgen.flowchart.link import Link
from mermaidgen.flowchart.node import Node
from mermaidgen.flowchart.subgraph import Subgraph


class FlowchartDirection(str, Enum):
    """Overall layout direction of a flowchart."""

    TOP_TO_BOTTOM = "TB"
    TOP_DOWN = "TD"
    BOTTOM_UP = "BT"
    RIGHT_LEFT = "RL"
    LEFT_RIGHT = "LR"


class CurveStyle(str, Enum):
    """Line curve interpolation styles."""

    NONE = ""
    BASIS = "basis"
    BUMP_X = "bumpX"
    BUMP_Y = "bumpY"
    CARDINAL = "cardinal"
    CATMULL_ROM = "catmullRom"
    LINEAR = "linear"
    MONOTONE_X = "monotoneX"
    MONOTONE_Y = "monotoneY"
    NATURAL = "natural"
    STEP = "step"
    STEP_AFTER = "stepAfter"
    STEP_BEFORE = "stepBefore"


def _front_matter(title: str, config: FlowchartConfigurationProperties) -> str:
    config_text = str(config)
    if not title and not config_text:
        return ""
    parts = ["---\n"]
    if title:
        parts.append(f"title: {title}\n")
    if config_text:
        parts.append("config:\n")
        parts.append(config_text)
    parts.append("---\n")
    return "".join(parts)


class Flowchart:
    """A Mermaid flowchart built from nodes, links, subgraphs and classes."""

    def __init__(self, title: str = "") -> None:
        self.title = title
        self.config = FlowchartConfigurationProperties()
        self.direction = FlowchartDirection.TOP_TO_BOTTOM
        self.curve_style = CurveStyle.NONE
        self.classes: List[ClassDef] = []
        self.nodes: List[Node] = []
        self.subgraphs: List[Subgraph] = []
        self.links: List[Link] = []
        self._id_generator = IdGenerator()

    def set_direction(self, direction: FlowchartDirection) -> "Flowchart":
        self.direction = direction
        return self

    def render_to_file(self, path: Union[str, Path]) -> None:
        """Write the rendered flowchart to path."""
        render_to_file(path, str(self))

    def add_subgraph(self, title: str) -> Subgraph:
        """Create a top-level subgraph with the next free ID."""
        subgraph = Subgraph(self._id_generator.next_id(), title)
        self.subgraphs.append(subgraph)
        return subgraph

    def add_node(self, node: Node) -> None:
        """Append an existing node."""
        self.nodes.append(node)

    def new_node(self, text: str) -> Node:
        """Create a node with the next free ID and append it."""
        node = Node(self._id_generator.next_id(), text)
        self.nodes.append(node)
        return node

    def add_link(self, link: Link) -> None:
        """Append an existing link."""
        self.links.append(link)

    def new_link(self, from_node: Optional[Node], to_node: Optional[Node]) -> Link:
        """Create a link between two nodes and append it."""
        link = Link(from_node, to_node)
        self.links.append(link)
        return link

    def add_class(self, name: str) -> ClassDef:
        """Create a class definition with a default style and append it."""
        class_def = ClassDef(name)
        self.classes.append(class_def)
        return class_def

    def __str__(self) -> str:
        direction = FlowchartDirection(self.direction).value
        parts = [f"flowchart {direction}\n"]
        parts.extend(str(class_def) for class_def in self.classes)
        parts.extend(str(node) for node in self.nodes)
        parts.extend(subgraph.render("") for subgraph in self.subgraphs)
        parts.extend(str(link) for link in self.links)
        return _front_matter(self.title, self.config) + "".join(parts)