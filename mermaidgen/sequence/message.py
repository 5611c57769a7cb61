"""Messages exchanged between participants of a sequence diagram."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from mermaidgen.sequence.actor import Actor
from mermaidgen.sequence.note import Note


class MessageType(str, Enum):
    """Arrow kinds and special message markers.

    DASHED is an alias of SOLID and RESPONSE an alias of ASYNC: Mermaid draws
    them the same way.
    """

    SOLID = "-->"
    SOLID_ARROW = "-->>"
    DASHED = "-->"
    ASYNC = "->>"
    DOTTED = "-->>>"
    RESPONSE = "->>"
    ACTIVATE = "+"
    DEACTIVATE = "-"
    CREATE = "create"
    DESTROY = "destroy"


def _actor_id(actor: Optional[Actor], role: str) -> str:
    if actor is None:
        raise ValueError(f"message has no {role} actor")
    return actor.id


@dataclass
class Message:
    """A message, or a note placed in the message flow."""

    from_actor: Optional[Actor] = None
    to_actor: Optional[Actor] = None
    message_type: Optional[MessageType] = None
    text: str = ""
    nested: List["Message"] = field(default_factory=list)
    note: Optional[Note] = None

    def add_nested_message(
        self,
        from_actor: Actor,
        to_actor: Actor,
        message_type: MessageType,
        text: str,
    ) -> "Message":
        """Create a message nested under this one and return it."""
        child = Message(from_actor, to_actor, message_type, text)
        self.nested.append(child)
        return child

    def set_type(self, message_type: MessageType) -> "Message":
        self.message_type = message_type
        return self

    def set_text(self, text: str) -> "Message":
        self.text = text
        return self

    def _line(self, indentation: str, arrow: str, prefix: str = "") -> str:
        from_id = _actor_id(self.from_actor, "source")
        to_id = _actor_id(self.to_actor, "target")
        return f"{indentation}\t{prefix}{from_id}{arrow}{to_id}: {self.text}\n"

    def render(self, indentation: str = "") -> str:
        """Render the message and its nested messages."""
        if self.note is not None:
            return self.note.render(indentation)
        if self.message_type is None:
            raise ValueError("message has neither a type nor a note")

        message_type = MessageType(self.message_type)
        parts = []
        if message_type is MessageType.CREATE:
            if self.text:
                parts.append(
                    self._line(indentation, MessageType.SOLID.value, "create ")
                )
        elif message_type is MessageType.DESTROY:
            to_id = _actor_id(self.to_actor, "target")
            parts.append(f"{indentation}\tdestroy {to_id}\n")
        elif message_type in (MessageType.ACTIVATE, MessageType.DEACTIVATE):
            if self.text:
                parts.append(self._line(indentation, MessageType.SOLID.value))
            keyword = (
                "activate" if message_type is MessageType.ACTIVATE else "deactivate"
            )
            to_id = _actor_id(self.to_actor, "target")
            parts.append(f"{indentation}\t{keyword} {to_id}\n")
        elif self.text:
            parts.append(self._line(indentation, message_type.value))
        else:
            from_id = _actor_id(self.from_actor, "source")
            to_id = _actor_id(self.to_actor, "target")
            parts.append(f"{indentation}\t{from_id}{message_type.value}{to_id}\n")

        inner = indentation + "\t"
        parts.extend(child.render(inner) for child in self.nested)
        return "".join(parts)

    def __str__(self) -> str:
        return self.render("")