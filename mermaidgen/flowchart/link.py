"""Links (edges) between flowchart nodes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from mermaidgen.base import INDENTATION
from mermaidgen.flowchart.node import Node


class LinkShape(str, Enum):
    """Line styles; the placeholder marks where length extension goes."""

    OPEN = "--%s"
    DOTTED = "-.%s-"
    THICK = "==%s"
    INVISIBLE = "~~%s"


class LinkArrowType(str, Enum):
    """Markers drawn at either end of a link."""

    NONE = ""
    ARROW = ">"
    LEFT_ARROW = "<"
    BULLET = "o"
    CROSS = "x"


@dataclass
class Link:
    """A connection from one node to another."""

    from_node: Optional[Node]
    to_node: Optional[Node]
    shape: LinkShape = LinkShape.OPEN
    head: LinkArrowType = LinkArrowType.ARROW
    tail: LinkArrowType = LinkArrowType.NONE
    text: str = ""
    length: int = 0

    def set_text(self, text: str) -> "Link":
        self.text = text
        return self

    def set_shape(self, shape: LinkShape) -> "Link":
        self.shape = shape
        return self

    def set_length(self, length: int) -> "Link":
        self.length = length
        return self

    def set_head(self, arrow_type: LinkArrowType) -> "Link":
        self.head = arrow_type
        return self

    def set_tail(self, arrow_type: LinkArrowType) -> "Link":
        self.tail = arrow_type
        return self

    def __str__(self) -> str:
        if self.from_node is None or self.to_node is None:
            raise ValueError("a link needs both a source and a target node")
        pattern = LinkShape(self.shape).value
        extension = pattern[1] * max(self.length, 0)
        line = pattern % extension
        label = f"|{self.text}|" if self.text else ""
        tail = LinkArrowType(self.tail).value
        head = LinkArrowType(self.head).value
        return (
            f"{INDENTATION}{self.from_node.id} {tail}{line}{head}{label} "
            f"{self.to_node.id}\n"
        )