"""Reusable named styles (classDef) for flowchart nodes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from mermaidgen.base import INDENTATION
from mermaidgen.flowchart.node_style import NodeStyle


@dataclass
class ClassDef:
    """A named node style that nodes can reference."""

    name: str
    style: Optional[NodeStyle] = field(default_factory=NodeStyle)

    def __str__(self) -> str:
        if self.style is None:
            return ""
        return f"{INDENTATION}classDef {self.name} {self.style}\n"