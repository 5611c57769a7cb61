"""Inline style attributes for flowchart nodes and class definitions."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class NodeStyle:
    """Colour, fill and stroke settings rendered as a Mermaid style list."""

    color: str = ""
    fill: str = ""
    stroke: str = ""
    stroke_width: int = 1
    stroke_dash: str = "0"

    def __str__(self) -> str:
        parts = []
        if self.color:
            parts.append(f"color:{self.color}")
        if self.fill:
            parts.append(f"fill:{self.fill}")
        if self.stroke:
            parts.append(f"stroke:{self.stroke}")
        if self.stroke_width > 0:
            parts.append(f"stroke-width:{self.stroke_width}")
        if self.stroke_dash:
            parts.append(f"stroke-dasharray:{self.stroke_dash}")
        return ",".join(parts)