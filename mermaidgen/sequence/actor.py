"""Participants of a sequence diagram."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ActorType(str, Enum):
    """How a participant is drawn."""

    PARTICIPANT = "participant"
    ACTOR = "actor"


@dataclass
class Actor:
    """An entity taking part in a sequence diagram."""

    id: str
    name: str = ""
    actor_type: ActorType = ActorType.PARTICIPANT