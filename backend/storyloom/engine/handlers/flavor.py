"""
Flavor handlers: hardcoded atmosphere (shave) and content-defined verbs.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from storyloom.engine.handlers.base import BaseHandler
from storyloom.engine.resolver import LocationKind
from storyloom.models.event import EventType, RejectionCode
from storyloom.models.properties import verb_key
from storyloom.models.validation import ValidationResult, invalid_result, valid_result

if TYPE_CHECKING:
    from storyloom.models.command import ParsedCommand
    from storyloom.models.world import WorldModel


class ShaveHandler(BaseHandler):
    """Handles shave.

    Needs something called a razor in hand or in the room; lather in the
    room makes for a better shave.
    """

    verbs = ("shave",)
    event_type = EventType.FLAVOR_ACTION

    def validate(self, command: "ParsedCommand", world: "WorldModel") -> ValidationResult:
        nearby = [
            r.object.name
            for r in self.resolver.in_scope(world)
            if r.location_kind in (LocationKind.INVENTORY, LocationKind.LOCATION)
        ]
        razor = next((name for name in nearby if "razor" in name.lower()), None)
        if razor is None:
            return invalid_result(RejectionCode.NO_TOOL, "You have nothing to shave with.")

        current = world.world_state.current_location
        has_lather = any("lather" in o.name.lower() for o in world.objects_at(current))
        return valid_result(subject=razor, lather=has_lather)

    def execute(
        self,
        command: "ParsedCommand",
        result: ValidationResult,
        world: "WorldModel",
    ) -> str:
        if result.context["lather"]:
            return "Using the lather and razor, you have a remarkably close and refreshing shave."
        return "You have a nice, clean shave. You feel refreshed."


class GenericVerbHandler(BaseHandler):
    """Fallback for verbs without a dedicated handler.

    World content defines these: an object with an ``on_<verb>`` property
    answers "<verb> <object>" with the property's value.

    Example:
        >>> # Golden Goblet has on_polish="The goblet gleams."
        >>> result = handler.validate(parser.parse("polish golden goblet"), world)
        >>> handler.execute(command, result, world)
        'The goblet gleams.'
    """

    event_type = EventType.CUSTOM_VERB

    def validate(self, command: "ParsedCommand", world: "WorldModel") -> ValidationResult:
        verb = command.verb
        if not verb or not command.direct_object:
            return invalid_result(
                RejectionCode.UNKNOWN_COMMAND, "I don't understand that command."
            )

        resolution = self.resolver.resolve(command.direct_object, world)
        if resolution is not None:
            outcome = resolution.object.get(verb_key(verb))
            if outcome is not None:
                return valid_result(narrative=outcome, subject=resolution.object.name)

        name = resolution.object.name if resolution else command.direct_object
        return invalid_result(
            RejectionCode.UNSUPPORTED_VERB,
            f"You can't {verb} the {name}.",
            subject=name,
        )

    def execute(
        self,
        command: "ParsedCommand",
        result: ValidationResult,
        world: "WorldModel",
    ) -> str:
        return str(result.context["narrative"])
