"""
Eat handler.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from storyloom.engine.handlers.base import BaseHandler
from storyloom.models.event import EventType, RejectionCode
from storyloom.models.properties import PropertyKey
from storyloom.models.validation import ValidationResult, invalid_result, valid_result

if TYPE_CHECKING:
    from storyloom.models.command import ParsedCommand
    from storyloom.models.world import WorldModel


class EatHandler(BaseHandler):
    """Handles eat.

    Edible objects (``is_edible=true``) are consumed from wherever they are
    and leave the world. An ``effect`` property is appended to the narrative.
    """

    verbs = ("eat",)
    event_type = EventType.ITEM_CONSUMED

    def validate(self, command: "ParsedCommand", world: "WorldModel") -> ValidationResult:
        if not command.direct_object:
            return self.ask_what("eat")

        resolution = self.resolver.resolve(command.direct_object, world)
        if resolution is None:
            return invalid_result(
                RejectionCode.TARGET_NOT_FOUND,
                f"You don't have or see any {command.direct_object} to eat.",
            )

        item = resolution.object
        if not item.flag(PropertyKey.IS_EDIBLE):
            return invalid_result(
                RejectionCode.NOT_EDIBLE,
                f"You can't eat the {item.name}.",
                subject=item.name,
            )
        return valid_result(subject=item.name, effect=item.get(PropertyKey.EFFECT))

    def execute(
        self,
        command: "ParsedCommand",
        result: ValidationResult,
        world: "WorldModel",
    ) -> str:
        item_name = str(result.context["subject"])
        world.remove_object(item_name)

        effect = result.context.get("effect")
        if effect:
            return f"You eat the {item_name}. {effect}"
        return f"You eat the {item_name}. It's quite tasty."
