"""
Take and drop handlers.

Both handlers keep the placement invariant: an object is either in the
inventory or in exactly one location entry, never both.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from storyloom.engine.handlers.base import BaseHandler
from storyloom.engine.resolver import LocationKind, normalize_name
from storyloom.models.event import EventType, RejectionCode
from storyloom.models.properties import PropertyKey
from storyloom.models.validation import ValidationResult, invalid_result, valid_result

if TYPE_CHECKING:
    from storyloom.models.command import ParsedCommand
    from storyloom.models.world import WorldModel


class TakeHandler(BaseHandler):
    """Handles take / get.

    Forms:
        take <item>                 -> anything visible that isn't held
        take <item> from <container> -> only from that open container

    Example:
        >>> result = handler.validate(parser.parse("take golden goblet from iron-bound chest"), world)
        >>> handler.execute(command, result, world)
        'You take the Golden Goblet from the Iron-bound Chest.'
    """

    verbs = ("take", "get", "grab", "pick")
    event_type = EventType.ITEM_TAKEN

    CONTAINER_PREPOSITIONS = ("from", "in", "inside")

    def validate(self, command: "ParsedCommand", world: "WorldModel") -> ValidationResult:
        item_name = command.direct_object
        if command.verb == "pick" and item_name.split()[:1] == ["up"]:
            item_name = item_name[2:].strip()
        if not item_name:
            return self.ask_what("take")

        if command.indirect_object and command.preposition in self.CONTAINER_PREPOSITIONS:
            return self._validate_from_container(item_name, command.indirect_object, world)

        resolution = self.resolver.resolve(item_name, world)
        if resolution is None:
            return invalid_result(RejectionCode.TARGET_NOT_FOUND, "You don't see that here.")
        if resolution.held:
            return invalid_result(
                RejectionCode.ALREADY_HAVE,
                f"You already have the {resolution.object.name}.",
                subject=resolution.object.name,
            )

        return valid_result(
            subject=resolution.object.name,
            source=resolution.location_name,
            from_container=resolution.location_name
            if resolution.location_kind == LocationKind.CONTAINER
            else None,
        )

    def _validate_from_container(
        self, item_name: str, container_name: str, world: "WorldModel"
    ) -> ValidationResult:
        resolution = self.resolver.resolve(container_name, world)
        if resolution is None or resolution.held:
            return invalid_result(
                RejectionCode.TARGET_NOT_FOUND,
                f"You don't see a {container_name} here.",
            )
        container = resolution.object
        if not container.flag(PropertyKey.IS_CONTAINER):
            return invalid_result(
                RejectionCode.NOT_A_CONTAINER,
                f"There is nothing inside the {container.name}.",
                subject=container.name,
            )
        if not container.flag(PropertyKey.IS_OPEN):
            return invalid_result(
                RejectionCode.CONTAINER_CLOSED,
                f"The {container.name} is closed.",
                subject=container.name,
            )

        wanted = normalize_name(item_name)
        item = next(
            (
                o
                for o in self.resolver.contents_of(container, world)
                if normalize_name(o.name) == wanted
            ),
            None,
        )
        if item is None:
            return invalid_result(
                RejectionCode.TARGET_NOT_FOUND,
                f"There is no {item_name} in the {container.name}.",
            )
        return valid_result(
            subject=item.name,
            target=container.name,
            source=container.name,
            from_container=container.name,
        )

    def execute(
        self,
        command: "ParsedCommand",
        result: ValidationResult,
        world: "WorldModel",
    ) -> str:
        item_name = str(result.context["subject"])
        world.give_to_player(item_name)

        container = result.context.get("from_container")
        if container:
            return f"You take the {item_name} from the {container}."
        return f"You take the {item_name}."


class DropHandler(BaseHandler):
    """Handles drop: moves a held item to the current location"""

    verbs = ("drop", "discard")
    event_type = EventType.ITEM_DROPPED

    def validate(self, command: "ParsedCommand", world: "WorldModel") -> ValidationResult:
        if not command.direct_object:
            return self.ask_what("drop")

        resolution = self.resolver.resolve(command.direct_object, world)
        if resolution is None or not resolution.held:
            return invalid_result(RejectionCode.NOT_CARRIED, "You don't have that.")

        return valid_result(
            subject=resolution.object.name,
            target=world.world_state.current_location,
        )

    def execute(
        self,
        command: "ParsedCommand",
        result: ValidationResult,
        world: "WorldModel",
    ) -> str:
        item_name = str(result.context["subject"])
        world.place(item_name, world.world_state.current_location)
        return f"You drop the {item_name}."
