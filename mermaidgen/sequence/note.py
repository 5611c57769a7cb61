"""Notes placed beside or over participants of a sequence diagram."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List

from mermaidgen.sequence.actor import Actor


class NotePosition(str, Enum):
    """Where a note sits relative to its participants."""

    LEFT = "left of"
    RIGHT = "right of"
    OVER = "over"


@dataclass
class Note:
    """An annotation attached to one or two participants."""

    position: NotePosition
    text: str
    actors: List[Actor] = field(default_factory=list)

    def render(self, indentation: str = "") -> str:
        """Render the note; unsupported actor counts render as nothing."""
        count = len(self.actors)
        if count == 0:
            return ""
        position = NotePosition(self.position)
        if count == 1:
            return (
                f"{indentation}\tNote {position.value} {self.actors[0].id}: "
                f"{self.text}\n"
            )
        if position is NotePosition.OVER and count == 2:
            first, second = self.actors
            return f"{indentation}\tNote over {first.id},{second.id}: {self.text}\n"
        return ""

    def __str__(self) -> str:
        return self.render("")