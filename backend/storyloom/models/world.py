"""
World Model schema - Pydantic models for the shared world document

The World Model is the single authoritative document for one adventure.
External collaborators (world generators, AI services, save files) produce
and consume it as JSON; the engine reads it, deep-copies it, and returns the
mutated copy.

Wire names follow the upstream document (``characterName``,
``locationName``, ``objectName``). Unknown keys are preserved so a document
carrying extra sections (vocabulary, knowledge graph, ...) round-trips.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterator

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from storyloom.models.properties import BOOLEAN_KEYS, to_bool
from storyloom.models.time import WorldTime


def _key(key: str | Enum) -> str:
    return key.value if isinstance(key, Enum) else key


class ObjectProperty(BaseModel):
    """A single key/value behavior property"""
    key: str
    value: str


class WorldObject(BaseModel):
    """An item whose behavior is defined entirely by its properties"""

    model_config = ConfigDict(extra="allow")

    name: str = Field(min_length=1)
    properties: list[ObjectProperty]

    @field_validator("properties")
    @classmethod
    def check_boolean_properties(cls, properties: list[ObjectProperty]) -> list[ObjectProperty]:
        """Well-known boolean keys must hold "true" or "false"."""
        for prop in properties:
            if prop.key in BOOLEAN_KEYS:
                normalized = prop.value.strip().lower()
                if normalized not in ("true", "false"):
                    raise ValueError(
                        f"Property '{prop.key}' must be 'true' or 'false', got '{prop.value}'"
                    )
                prop.value = normalized
        return properties

    def get(self, key: str | Enum) -> str | None:
        """Get the first value stored under a key"""
        key = _key(key)
        for prop in self.properties:
            if prop.key == key:
                return prop.value
        return None

    def has(self, key: str | Enum) -> bool:
        return self.get(key) is not None

    def flag(self, key: str | Enum) -> bool:
        """Read a boolean property (absent means False)"""
        return to_bool(self.get(key))

    def set(self, key: str | Enum, value: str) -> None:
        """Set a property, updating the first existing entry or appending"""
        key = _key(key)
        for prop in self.properties:
            if prop.key == key:
                prop.value = value
                return
        self.properties.append(ObjectProperty(key=key, value=value))

    def set_flag(self, key: str | Enum, value: bool) -> None:
        self.set(key, "true" if value else "false")


class Relationship(BaseModel):
    """A directed relationship to another character"""
    model_config = ConfigDict(populate_by_name=True)

    character_name: str = Field(alias="characterName")
    relationship: str = ""


class Character(BaseModel):
    """A character in the world"""

    model_config = ConfigDict(extra="allow")

    name: str = Field(min_length=1)
    aliases: list[str] = Field(default_factory=list)
    personality: list[str] = Field(default_factory=list)
    traits: list[str] = Field(default_factory=list)
    goals: list[str] = Field(default_factory=list)
    dialogue_style: str = ""
    relationships: list[Relationship] = Field(default_factory=list)


class Setting(BaseModel):
    """A location (room) in the world"""

    model_config = ConfigDict(extra="allow")

    name: str = Field(min_length=1)
    ambience_descriptors: list[str] = Field(default_factory=list)
    time_cues: list[str] = Field(default_factory=list)
    geography: str = ""
    culture: str = ""
    climate: str = ""


class CharacterLocation(BaseModel):
    """Where a character currently is"""
    model_config = ConfigDict(populate_by_name=True)

    character_name: str = Field(alias="characterName")
    location_name: str | None = Field(default=None, alias="locationName")


class ObjectLocation(BaseModel):
    """Where an object currently is.

    ``location_name`` is either a Setting name or the name of another
    WorldObject acting as a container.
    """
    model_config = ConfigDict(populate_by_name=True)

    object_name: str = Field(alias="objectName")
    location_name: str = Field(alias="locationName")


class Objective(BaseModel):
    """A narrative goal (maintained outside the simulation core)"""
    description: str
    is_completed: bool = False


class WorldState(BaseModel):
    """Mutable position and time document"""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    current_location: str
    time: WorldTime = Field(default_factory=WorldTime)
    player_inventory: list[str] = Field(default_factory=list)
    character_locations: list[CharacterLocation] = Field(default_factory=list)
    object_locations: list[ObjectLocation] = Field(default_factory=list)
    objectives: list[Objective] = Field(default_factory=list)

    @field_validator("time", mode="before")
    @classmethod
    def parse_time(cls, value: object) -> object:
        if isinstance(value, str):
            return WorldTime.parse(value)
        return value

    @field_serializer("time")
    def serialize_time(self, value: WorldTime) -> str:
        return value.render()


class WorldModel(BaseModel):
    """Complete world document"""

    model_config = ConfigDict(extra="allow")

    characters: list[Character] = Field(default_factory=list)
    settings: list[Setting] = Field(default_factory=list)
    objects: list[WorldObject] = Field(default_factory=list)
    world_state: WorldState

    def to_document(self) -> dict:
        """Serialize using the upstream wire names"""
        return self.model_dump(mode="json", by_alias=True)

    def clone(self) -> "WorldModel":
        """Deep copy, so the caller's snapshot is never aliased"""
        return self.model_copy(deep=True)

    # Lookups

    def get_setting(self, name: str) -> Setting | None:
        return next((s for s in self.settings if s.name == name), None)

    def get_object(self, name: str) -> WorldObject | None:
        return next((o for o in self.objects if o.name == name), None)

    def find_object(self, name: str) -> WorldObject | None:
        """Case-insensitive object lookup"""
        lowered = name.lower()
        return next((o for o in self.objects if o.name.lower() == lowered), None)

    def get_character(self, name: str) -> Character | None:
        return next((c for c in self.characters if c.name == name), None)

    def location_of(self, object_name: str) -> ObjectLocation | None:
        state = self.world_state
        return next(
            (ol for ol in state.object_locations if ol.object_name == object_name),
            None,
        )

    def objects_at(self, location_name: str) -> Iterator[WorldObject]:
        """Objects placed directly in a setting or container, in document order"""
        for entry in self.world_state.object_locations:
            if entry.location_name == location_name:
                obj = self.get_object(entry.object_name)
                if obj is not None:
                    yield obj

    def characters_at(self, location_name: str) -> list[Character]:
        names = [
            cl.character_name
            for cl in self.world_state.character_locations
            if cl.location_name == location_name
        ]
        return [c for c in (self.get_character(n) for n in names) if c is not None]

    def character_location(self, character_name: str) -> CharacterLocation | None:
        return next(
            (
                cl
                for cl in self.world_state.character_locations
                if cl.character_name == character_name
            ),
            None,
        )

    # Placement changes

    def unplace(self, object_name: str) -> None:
        """Remove an object from the inventory and every location entry"""
        state = self.world_state
        state.player_inventory = [n for n in state.player_inventory if n != object_name]
        state.object_locations = [
            ol for ol in state.object_locations if ol.object_name != object_name
        ]

    def place(self, object_name: str, location_name: str) -> None:
        """Move an object to a setting or container"""
        self.unplace(object_name)
        self.world_state.object_locations.append(
            ObjectLocation(object_name=object_name, location_name=location_name)
        )

    def give_to_player(self, object_name: str) -> None:
        self.unplace(object_name)
        self.world_state.player_inventory.append(object_name)

    def remove_object(self, object_name: str) -> None:
        """Consume an object: unplace it and delete it from the world

        Anything placed inside the object is spilled to wherever the object
        was. A held object spills into the current location.
        """
        state = self.world_state
        former = self.location_of(object_name)
        spill_to = former.location_name if former else state.current_location
        for entry in state.object_locations:
            if entry.location_name == object_name:
                entry.location_name = spill_to
        self.unplace(object_name)
        self.objects = [o for o in self.objects if o.name != object_name]
