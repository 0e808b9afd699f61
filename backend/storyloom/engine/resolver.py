"""
Object resolver.

Maps a name typed by the player to a concrete object and the scope it was
found in. Scopes are searched in a fixed priority order and the first match
wins:

    1. The player's inventory
    2. Objects lying in the current location
    3. Objects inside open containers in the current location, searching
       breadth-first through open containers nested in open containers

Closed containers hide their contents, and nothing outside the current
location is visible.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Iterator

from storyloom.models.properties import PropertyKey

if TYPE_CHECKING:
    from storyloom.models.world import Character, WorldModel, WorldObject


ARTICLES = ("a", "an", "the")


def normalize_name(name: str | None) -> str:
    """Lowercase a name and drop a leading article.

    >>> normalize_name("The Silver Key")
    'silver key'
    """
    tokens = (name or "").lower().split()
    if len(tokens) > 1 and tokens[0] in ARTICLES:
        tokens = tokens[1:]
    return " ".join(tokens)


def is_open_container(obj: "WorldObject") -> bool:
    return obj.flag(PropertyKey.IS_CONTAINER) and obj.flag(PropertyKey.IS_OPEN)


class LocationKind(str, Enum):
    """Where a resolved object was found"""
    INVENTORY = "inventory"
    LOCATION = "location"
    CONTAINER = "container"


@dataclass(frozen=True)
class Resolution:
    """A resolved object reference.

    Attributes:
        object: The world object (the live instance inside the model)
        location_kind: Scope the object was found in
        location_name: Setting or container name; None for the inventory
    """

    object: "WorldObject"
    location_kind: LocationKind
    location_name: str | None = None

    @property
    def held(self) -> bool:
        return self.location_kind == LocationKind.INVENTORY


class ObjectResolver:
    """Resolves object and character names against the player's surroundings.

    Example:
        >>> resolver = ObjectResolver()
        >>> found = resolver.resolve("the golden goblet", world)
        >>> found.location_kind
        <LocationKind.CONTAINER: 'container'>
        >>> found.location_name
        'Iron-bound Chest'
    """

    def resolve(self, name: str | None, world: "WorldModel") -> Resolution | None:
        """Find the object the player most plausibly means.

        Args:
            name: Name as typed by the player
            world: World model to search

        Returns:
            The first Resolution in priority order, or None
        """
        target = normalize_name(name)
        if not target:
            return None
        for resolution in self.in_scope(world):
            if normalize_name(resolution.object.name) == target:
                return resolution
        return None

    def in_scope(self, world: "WorldModel") -> Iterator[Resolution]:
        """Yield every object the player can reach, in priority order."""
        for object_name in world.world_state.player_inventory:
            obj = world.get_object(object_name)
            if obj is not None:
                yield Resolution(obj, LocationKind.INVENTORY)

        current = world.world_state.current_location
        room_objects = list(world.objects_at(current))
        for obj in room_objects:
            yield Resolution(obj, LocationKind.LOCATION, current)

        queue = [obj for obj in room_objects if is_open_container(obj)]
        seen = {obj.name for obj in queue}
        while queue:
            container = queue.pop(0)
            for obj in world.objects_at(container.name):
                yield Resolution(obj, LocationKind.CONTAINER, container.name)
                if is_open_container(obj) and obj.name not in seen:
                    seen.add(obj.name)
                    queue.append(obj)

    def contents_of(self, container: "WorldObject", world: "WorldModel") -> list["WorldObject"]:
        """Objects placed directly inside a container"""
        return list(world.objects_at(container.name))

    def find_character_here(self, name: str | None, world: "WorldModel") -> "Character | None":
        """Find a character at the current location by name or alias."""
        target = normalize_name(name)
        if not target:
            return None
        for character in world.characters_at(world.world_state.current_location):
            names = [character.name, *character.aliases]
            if any(normalize_name(n) == target for n in names):
                return character
        return None
