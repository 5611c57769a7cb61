"""Transitions between states of a state diagram."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from mermaidgen.state.state import State

_TERMINAL = "[*]"


class TransitionType(str, Enum):
    """Line styles for transitions."""

    SOLID = "solid"
    DASHED = "dashed"


@dataclass
class Transition:
    """A transition; a missing endpoint stands for the start/end pseudo-state."""

    from_state: Optional[State]
    to_state: Optional[State]
    description: str = ""
    transition_type: TransitionType = TransitionType.SOLID

    def set_type(self, transition_type: TransitionType) -> "Transition":
        self.transition_type = transition_type
        return self

    def render(self, indentation: str = "") -> str:
        """Render the transition line, prefixed by indentation and a tab."""
        from_id = _TERMINAL if self.from_state is None else self.from_state.id
        to_id = _TERMINAL if self.to_state is None else self.to_state.id
        if self.description:
            return f"{indentation}\t{from_id} --> {to_id}: {self.description}\n"
        return f"{indentation}\t{from_id} --> {to_id}\n"

    def __str__(self) -> str:
        return self.render("")