"""
Movement handler.

Destinations are matched by substring against setting names, in document
order; the first setting whose name contains the typed text wins.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from storyloom.engine.handlers.base import BaseHandler
from storyloom.engine.resolver import normalize_name
from storyloom.models.event import EventType, RejectionCode
from storyloom.models.validation import ValidationResult, invalid_result, valid_result

if TYPE_CHECKING:
    from storyloom.models.command import ParsedCommand
    from storyloom.models.world import WorldModel


class GoHandler(BaseHandler):
    """Handles go / move / travel.

    Example:
        >>> handler.validate(parser.parse("go to the tower"), world).context["subject"]
        'The Tower'
    """

    verbs = ("go", "move", "travel", "walk")
    event_type = EventType.LOCATION_CHANGED

    def validate(self, command: "ParsedCommand", world: "WorldModel") -> ValidationResult:
        # "go to the tower" parses with an empty direct object
        destination = normalize_name(command.direct_object or command.indirect_object)
        if not destination:
            return invalid_result(RejectionCode.MISSING_TARGET, "Where do you want to go?")

        setting = next(
            (s for s in world.settings if destination in s.name.lower()),
            None,
        )
        if setting is None:
            return invalid_result(
                RejectionCode.UNKNOWN_DESTINATION,
                f'You don\'t know how to get to a place called "{destination}".',
            )
        if setting.name == world.world_state.current_location:
            return invalid_result(
                RejectionCode.ALREADY_HERE,
                f"You are already in {setting.name}.",
                subject=setting.name,
            )

        return valid_result(
            subject=setting.name,
            target=world.world_state.current_location,
        )

    def execute(
        self,
        command: "ParsedCommand",
        result: ValidationResult,
        world: "WorldModel",
    ) -> str:
        destination = str(result.context["subject"])
        world.world_state.current_location = destination
        return f"You travel to {destination}."
