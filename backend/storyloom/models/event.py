"""
Event models for the verb dispatcher.

Every turn produces one Event describing what happened. Successful actions
carry the handler's event type; refusals carry ACTION_REJECTED together with
a RejectionCode explaining why.

Example:
    >>> event = Event(
    ...     type=EventType.CONTAINER_UNLOCKED,
    ...     subject="Iron-bound Chest",
    ...     target="Silver Key",
    ... )
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class EventType(str, Enum):
    """Types of events that can occur in the game.

    Categories:
        Observation: SCENE_BROWSED, ITEM_EXAMINED, CHARACTER_EXAMINED,
            CONTAINER_SEARCHED, INVENTORY_LISTED
        Movement: LOCATION_CHANGED
        Items: ITEM_TAKEN, ITEM_DROPPED, ITEM_USED, ITEM_READ, ITEM_REVEALED,
            ITEM_CONSUMED, ITEM_DESTROYED
        Containers: CONTAINER_OPENED, CONTAINER_CLOSED, CONTAINER_UNLOCKED
        Characters: NPC_CONVERSATION, NPC_ITEM_GIVEN
        World: TIME_ADVANCED, OBJECT_ADDED, NARRATIVE_ENHANCED
        Meta: ACTION_REJECTED, FLAVOR_ACTION, CUSTOM_VERB
    """

    # Observation
    SCENE_BROWSED = "scene_browsed"
    ITEM_EXAMINED = "item_examined"
    CHARACTER_EXAMINED = "character_examined"
    CONTAINER_SEARCHED = "container_searched"
    INVENTORY_LISTED = "inventory_listed"

    # Movement
    LOCATION_CHANGED = "location_changed"

    # Items
    ITEM_TAKEN = "item_taken"
    ITEM_DROPPED = "item_dropped"
    ITEM_USED = "item_used"
    ITEM_READ = "item_read"
    ITEM_REVEALED = "item_revealed"
    ITEM_CONSUMED = "item_consumed"
    ITEM_DESTROYED = "item_destroyed"

    # Containers
    CONTAINER_OPENED = "container_opened"
    CONTAINER_CLOSED = "container_closed"
    CONTAINER_UNLOCKED = "container_unlocked"

    # Characters
    NPC_CONVERSATION = "npc_conversation"
    NPC_ITEM_GIVEN = "npc_item_given"

    # World
    TIME_ADVANCED = "time_advanced"
    OBJECT_ADDED = "object_added"
    NARRATIVE_ENHANCED = "narrative_enhanced"

    # Meta
    ACTION_REJECTED = "action_rejected"
    FLAVOR_ACTION = "flavor_action"
    CUSTOM_VERB = "custom_verb"


class RejectionCode(str, Enum):
    """Why a command was refused.

    These codes let callers tell refusals apart without parsing the
    narrative text.
    """

    # Input
    UNKNOWN_COMMAND = "unknown_command"
    MISSING_TARGET = "missing_target"

    # Resolution
    TARGET_NOT_FOUND = "target_not_found"
    CHARACTER_NOT_HERE = "character_not_here"
    UNKNOWN_DESTINATION = "unknown_destination"
    ALREADY_HERE = "already_here"

    # Possession
    ALREADY_HAVE = "already_have"
    NOT_CARRIED = "not_carried"
    ITEM_HELD = "item_held"

    # Containers
    NOT_A_CONTAINER = "not_a_container"
    CONTAINER_CLOSED = "container_closed"
    CONTAINER_LOCKED = "container_locked"
    ALREADY_OPEN = "already_open"
    ALREADY_CLOSED = "already_closed"

    # Item behavior
    NOTHING_TO_READ = "nothing_to_read"
    NOT_EDIBLE = "not_edible"
    NO_TOOL = "no_tool"
    NO_EFFECT = "no_effect"
    UNSUPPORTED_VERB = "unsupported_verb"


class Event(BaseModel):
    """Something that happened in the world.

    Attributes:
        type: The type of event
        subject: Primary entity involved (object, character or setting name)
        target: Secondary entity, if any
        context: Extra details (rejection code, destination, ...)
    """

    type: EventType
    subject: str | None = None
    target: str | None = None
    context: dict[str, object] = Field(default_factory=dict)


class RejectionEvent(Event):
    """A refused command"""

    type: EventType = EventType.ACTION_REJECTED
    rejection_code: RejectionCode
    rejection_reason: str
