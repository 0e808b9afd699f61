"""
Mutation models.

A mutation is one externally proposed edit to the World Model (typically
from an AI collaborator). The engine validates each mutation before
applying it.
"""

from __future__ import annotations

import uuid
from datetime import datetime
from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, Field

from storyloom.models.event import Event
from storyloom.models.world import WorldModel


class MutationType(str, Enum):
    """Mutation types the engine understands"""
    ADD_OBJECT = "ADD_OBJECT"
    ENHANCE_NARRATIVE = "ENHANCE_NARRATIVE"


class Mutation(BaseModel):
    """Mutation envelope.

    ``type`` is kept as a plain string so an unknown type survives envelope
    parsing and can be reported as a contract violation.
    """
    type: str
    payload: Any = None
    reason: str = ""


class MutationResult(BaseModel):
    """Outcome of applying one mutation"""
    world: WorldModel
    narrative_update: str = ""
    applied: bool = False
    event: Event | None = None


class MutationLogEntry(BaseModel):
    """Audit record of a mutation seen by a session"""
    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    timestamp: datetime = Field(default_factory=datetime.now)
    mutation: Mutation
    status: Literal["applied", "rejected", "reverted"]
