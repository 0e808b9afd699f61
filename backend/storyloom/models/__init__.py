"""Pydantic models for Storyloom"""

from storyloom.models.command import ParsedCommand
from storyloom.models.event import Event, EventType, RejectionCode, RejectionEvent
from storyloom.models.mutation import (
    Mutation,
    MutationLogEntry,
    MutationResult,
    MutationType,
)
from storyloom.models.properties import PropertyKey
from storyloom.models.session import AdventureLogEntry, TurnResult
from storyloom.models.time import Period, WorldTime
from storyloom.models.validation import ValidationResult, invalid_result, valid_result
from storyloom.models.world import (
    Character,
    CharacterLocation,
    ObjectLocation,
    ObjectProperty,
    Objective,
    Relationship,
    Setting,
    WorldModel,
    WorldObject,
    WorldState,
)

__all__ = [
    # World document
    "Character",
    "CharacterLocation",
    "ObjectLocation",
    "ObjectProperty",
    "Objective",
    "Relationship",
    "Setting",
    "WorldModel",
    "WorldObject",
    "WorldState",
    "PropertyKey",
    "Period",
    "WorldTime",
    # Commands and turns
    "ParsedCommand",
    "TurnResult",
    "AdventureLogEntry",
    # Events and validation
    "Event",
    "EventType",
    "RejectionCode",
    "RejectionEvent",
    "ValidationResult",
    "valid_result",
    "invalid_result",
    # Mutations
    "Mutation",
    "MutationLogEntry",
    "MutationResult",
    "MutationType",
]
