"""Sequence diagrams: participants, messages and notes."""

from __future__ import annotations

from pathlib import Path
from typing import List, Union

from mermaidgen.base import INDENTATION, render_to_file
from mermaidgen.sequence.actor import Actor, ActorType
from mermaidgen.sequence.configuration import SequenceConfigurationProperties
from mermaidgen.sequence.message import Message, MessageType
from mermaidgen.sequence.note import Note, NotePosition


def _front_matter(title: str, config: SequenceConfigurationProperties) -> str:
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


class SequenceDiagram:
    """A Mermaid sequence diagram."""

    def __init__(self, title: str = "") -> None:
        self.title = title
        self.config = SequenceConfigurationProperties()
        self.actors: List[Actor] = []
        self.messages: List[Message] = []
        self.autonumber = False

    def enable_auto_number(self) -> None:
        """Number messages automatically when rendered."""
        self.autonumber = True

    def add_actor(self, actor_id: str, name: str, actor_type: ActorType) -> Actor:
        """Create a participant, append it and return it."""
        actor = Actor(actor_id, name, actor_type)
        self.actors.append(actor)
        return actor

    def create_actor(
        self, creator: Actor, actor_id: str, name: str, actor_type: ActorType
    ) -> Actor:
        """Add a participant together with a creation message from creator."""
        actor = Actor(actor_id, name, actor_type)
        self.actors.append(actor)
        self.messages.append(Message(creator, actor, MessageType.CREATE))
        return actor

    def destroy_actor(self, actor: Actor) -> None:
        """Add a destruction message for actor."""
        self.messages.append(Message(None, actor, MessageType.DESTROY))

    def add_message(
        self,
        from_actor: Actor,
        to_actor: Actor,
        message_type: MessageType,
        text: str,
    ) -> Message:
        """Create a message, append it and return it."""
        message = Message(from_actor, to_actor, message_type, text)
        self.messages.append(message)
        return message

    def add_note(self, position: NotePosition, text: str, *args: Actor) -> Note:
        """Place a note over or beside the given actors in the message flow."""
        note = Note(position, text, list(args))
        self.messages.append(Message(note=note))
        return note

    def render_to_file(self, path: Union[str, Path]) -> None:
        """Write the rendered diagram to path."""
        render_to_file(path, str(self))

    def __str__(self) -> str:
        parts = ["sequenceDiagram\n"]
        if self.autonumber:
            parts.append("autonumber\n")
        parts.extend(
            f"{INDENTATION}{ActorType(actor.actor_type).value} {actor.id} as "
            f"{actor.name}\n"
            for actor in self.actors
        )
        parts.extend(message.render("") for message in self.messages)
        return _front_matter(self.title, self.config) + "".join(parts)