"""
Turn and session models.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel

from storyloom.models.event import Event, EventType
from storyloom.models.world import WorldModel, WorldState


class TurnResult(BaseModel):
    """Result of one command or tick.

    Attributes:
        narrative: Text to show the player (may be empty for a quiet tick)
        world: The updated World Model, or the untouched input on refusal
        event: What happened, if anything
    """

    narrative: str
    world: WorldModel
    event: Event | None = None

    @property
    def world_state(self) -> WorldState:
        return self.world.world_state

    @property
    def rejected(self) -> bool:
        return self.event is not None and self.event.type == EventType.ACTION_REJECTED


class AdventureLogEntry(BaseModel):
    """One line of the adventure log"""
    type: Literal["narrative", "command", "error", "simulation"]
    content: str
