"""States of a state diagram, including composite states and notes."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from mermaidgen.base import INDENTATION


class StateType(str, Enum):
    """Kinds of states a state diagram can hold."""

    NORMAL = "normal"
    START = "start"
    END = "end"
    CHOICE = "choice"
    FORK = "fork"
    JOIN = "join"
    COMPOSITE = "composite"


class NotePosition(str, Enum):
    """Side of a state on which a note is drawn."""

    LEFT = "left"
    RIGHT = "right"


_STEREOTYPES = {
    StateType.CHOICE: "choice",
    StateType.FORK: "fork",
    StateType.JOIN: "join",
}


@dataclass
class StateNote:
    """An annotation attached to a state."""

    text: str
    position: NotePosition


def _quote(text: str) -> str:
    return json.dumps(text, ensure_ascii=False)


@dataclass
class State:
    """A state with an optional description, nested states and a note."""

    id: str
    description: str = ""
    state_type: StateType = StateType.NORMAL
    nested: List["State"] = field(default_factory=list)
    note: Optional[StateNote] = None

    def add_nested_state(
        self, state_id: str, description: str, state_type: StateType
    ) -> "State":
        """Create a state nested inside this one and return it."""
        child = State(state_id, description, state_type)
        self.nested.append(child)
        return child

    def add_note(self, text: str, position: NotePosition) -> "State":
        """Attach a note, replacing any previous one; returns self."""
        self.note = StateNote(text, position)
        return self

    def render(self, indentation: str = "") -> str:
        """Render the state with every line prefixed by indentation."""
        prefix = indentation + INDENTATION
        state_type = StateType(self.state_type)
        parts = []
        if state_type is StateType.START:
            parts.append(f"{prefix}[*] --> {self.id}\n")
        elif state_type is StateType.END:
            parts.append(f"{prefix}{self.id} --> [*]\n")
        elif state_type in _STEREOTYPES:
            parts.append(f"{prefix}state {self.id} <<{_STEREOTYPES[state_type]}>>\n")
        elif self.description:
            parts.append(f"{prefix}state {_quote(self.description)} as {self.id}\n")

        if self.nested:
            parts.append(f"{prefix}state {self.id} {{\n")
            inner = indentation + "    "
            parts.extend(child.render(inner) for child in self.nested)
            parts.append(f"{prefix}}}\n")

        if self.note is not None:
            position = NotePosition(self.note.position).value
            parts.append(f"{prefix}note {position} of {self.id}: {self.note.text}\n")

        return "".join(parts)

    def __str__(self) -> str:
        return self.render("")