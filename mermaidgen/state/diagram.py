"""State diagrams: states and the transitions between them."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Union

from mermaidgen.base import render_to_file
from mermaidgen.state.configuration import StateConfigurationProperties
from mermaidgen.state.state import State, StateType
from mermaidgen.state.transition import Transition


def _front_matter(title: str, config: StateConfigurationProperties) -> str:
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


class StateDiagram:
    """A Mermaid state diagram."""

    def __init__(self, title: str = "") -> None:
        self.title = title
        self.config = StateConfigurationProperties()
        self.states: List[State] = []
        self.transitions: List[Transition] = []

    def add_state(
        self, state_id: str, description: str, state_type: StateType
    ) -> State:
        """Create a state, append it and return it."""
        state = State(state_id, description, state_type)
        self.states.append(state)
        return state

    def add_transition(
        self,
        from_state: Optional[State],
        to_state: Optional[State],
        description: str,
    ) -> Transition:
        """Create a transition between two states, append it and return it."""
        transition = Transition(from_state, to_state, description)
        self.transitions.append(transition)
        return transition

    def render_to_file(self, path: Union[str, Path]) -> None:
        """Write the rendered diagram to path."""
        render_to_file(path, str(self))

    def __str__(self) -> str:
        parts = ["stateDiagram-v2\n"]
        parts.extend(state.render("") for state in self.states)
        parts.extend(transition.render("") for transition in self.transitions)
        return _front_matter(self.title, self.config) + "".join(parts)