"""
Look and inventory handlers.

Observation commands never change the world; they only describe it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from storyloom.engine.handlers.base import BaseHandler
from storyloom.models.event import EventType, RejectionCode
from storyloom.models.properties import PropertyKey
from storyloom.models.validation import ValidationResult, invalid_result, valid_result

if TYPE_CHECKING:
    from storyloom.models.command import ParsedCommand
    from storyloom.models.world import Character, WorldModel, WorldObject


def describe_object_name(obj: "WorldObject") -> str:
    """Object name, annotated with open/closed for containers"""
    if obj.flag(PropertyKey.IS_CONTAINER):
        state = "open" if obj.flag(PropertyKey.IS_OPEN) else "closed"
        return f"{obj.name} ({state})"
    return obj.name


class LookHandler(BaseHandler):
    """Handles look / examine.

    Forms:
        look                      -> describe the current location
        look <target>             -> describe an object or character
        look at <target>          -> same as above
        look in/inside <target>   -> list a container's contents

    Example:
        >>> handler = LookHandler(resolver)
        >>> result = handler.validate(parser.parse("look in iron-bound chest"), world)
        >>> handler.execute(command, result, world)
        'Inside the Iron-bound Chest, you see: Golden Goblet.'
    """

    verbs = ("look", "l", "examine", "x")
    event_type = EventType.SCENE_BROWSED

    INSIDE_PREPOSITIONS = ("in", "inside")
    TARGET_PREPOSITIONS = ("in", "inside", "at")

    def validate(
        self,
        command: "ParsedCommand",
        world: "WorldModel",
    ) -> ValidationResult:
        looking_inside = command.preposition in self.INSIDE_PREPOSITIONS
        if command.preposition in self.TARGET_PREPOSITIONS:
            target = command.indirect_object or ""
        else:
            target = command.direct_object

        if not target:
            if looking_inside:
                return self.ask_what("look in")
            return valid_result(mode="room", subject=world.world_state.current_location)

        resolution = self.resolver.resolve(target, world)
        if resolution is not None:
            obj = resolution.object
            if obj.flag(PropertyKey.IS_CONTAINER):
                return valid_result(
                    mode="container",
                    item=obj,
                    subject=obj.name,
                    event_type=EventType.CONTAINER_SEARCHED,
                )
            if looking_inside:
                return invalid_result(
                    RejectionCode.NOT_A_CONTAINER,
                    f"You can't look inside the {obj.name}.",
                    subject=obj.name,
                )
            return valid_result(
                mode="object",
                item=obj,
                subject=obj.name,
                event_type=EventType.ITEM_EXAMINED,
            )

        character = self.resolver.find_character_here(target, world)
        if character is not None and not looking_inside:
            return valid_result(
                mode="character",
                character=character,
                subject=character.name,
                event_type=EventType.CHARACTER_EXAMINED,
            )

        return invalid_result(
            RejectionCode.TARGET_NOT_FOUND,
            f"You see nothing special about the {target}.",
        )

    def execute(
        self,
        command: "ParsedCommand",
        result: ValidationResult,
        world: "WorldModel",
    ) -> str:
        mode = result.context["mode"]
        if mode == "room":
            return self._describe_room(world)
        if mode == "character":
            return self._describe_character(result.context["character"])  # type: ignore[arg-type]

        obj: WorldObject = result.context["item"]  # type: ignore[assignment]
        if mode == "container":
            return self._describe_container(obj, world)
        if not obj.properties:
            return f"You see nothing special about the {obj.name}."
        return f"{obj.name}: {', '.join(p.value for p in obj.properties)}."

    def _describe_room(self, world: "WorldModel") -> str:
        current = world.world_state.current_location
        setting = world.get_setting(current)

        opening = f"You are in {current}."
        if setting and setting.ambience_descriptors:
            opening += " " + " ".join(setting.ambience_descriptors)
        lines = [opening]

        characters = world.characters_at(current)
        if characters:
            lines.append(f"You see: {', '.join(c.name for c in characters)}.")

        objects = [describe_object_name(o) for o in world.objects_at(current)]
        if objects:
            lines.append(f"There is a {', '.join(objects)} here.")

        return "\n".join(lines)

    def _describe_container(self, container: "WorldObject", world: "WorldModel") -> str:
        if not container.flag(PropertyKey.IS_OPEN):
            return f"The {container.name} is closed."
        contents = self.resolver.contents_of(container, world)
        if not contents:
            return f"The {container.name} is empty."
        names = ", ".join(describe_object_name(o) for o in contents)
        return f"Inside the {container.name}, you see: {names}."

    def _describe_character(self, character: "Character") -> str:
        if not character.personality:
            text = f"You see {character.name}."
        else:
            text = f"{character.name} seems {' and '.join(character.personality)}."
        if character.goals:
            text += f" Their goal is to {', '.join(character.goals)}."
        return text


class InventoryHandler(BaseHandler):
    """Lists what the player is carrying"""

    verbs = ("inventory", "i", "inv")
    event_type = EventType.INVENTORY_LISTED

    def validate(self, command: "ParsedCommand", world: "WorldModel") -> ValidationResult:
        return valid_result()

    def execute(
        self,
        command: "ParsedCommand",
        result: ValidationResult,
        world: "WorldModel",
    ) -> str:
        inventory = world.world_state.player_inventory
        if not inventory:
            return "You are not carrying anything."
        return f"You have: {', '.join(inventory)}."
