"""
Read handler.

Readable objects either carry plain ``content`` or a one-shot reveal:

    on_read_effect: reveals_key
    has_been_read: false
    content_unread: text shown on the first read
    content_read: text shown on later reads
    reveals: name of the object that appears (default "Silver Key")

The first read flips ``has_been_read`` and places the revealed object in
the current location. Later reads reveal nothing.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from storyloom.engine.handlers.base import BaseHandler
from storyloom.models.event import EventType, RejectionCode
from storyloom.models.properties import (
    DEFAULT_REVEALED_OBJECT,
    READ_EFFECT_REVEALS_KEY,
    PropertyKey,
)
from storyloom.models.validation import ValidationResult, invalid_result, valid_result
from storyloom.models.world import WorldObject

if TYPE_CHECKING:
    from storyloom.models.command import ParsedCommand
    from storyloom.models.world import WorldModel


class ReadHandler(BaseHandler):
    """Handles read.

    Example:
        >>> result = handler.validate(parser.parse("read leather-bound book"), world)
        >>> handler.execute(command, result, world)  # first read
        'The pages are filled with cryptic diagrams. Tucked inside is a small silver key.'
    """

    verbs = ("read",)
    event_type = EventType.ITEM_READ

    def validate(self, command: "ParsedCommand", world: "WorldModel") -> ValidationResult:
        if not command.direct_object:
            return self.ask_what("read")

        resolution = self.resolver.resolve(command.direct_object, world)
        if resolution is None:
            return invalid_result(
                RejectionCode.TARGET_NOT_FOUND,
                f'You don\'t see a "{command.direct_object}" here.',
            )

        item = resolution.object
        if item.get(PropertyKey.ON_READ_EFFECT) == READ_EFFECT_REVEALS_KEY:
            if not item.flag(PropertyKey.HAS_BEEN_READ):
                revealed = item.get(PropertyKey.REVEALS) or DEFAULT_REVEALED_OBJECT
                return valid_result(
                    mode="reveal",
                    item=item,
                    subject=item.name,
                    target=revealed,
                    event_type=EventType.ITEM_REVEALED,
                )
            return valid_result(mode="reread", item=item, subject=item.name)

        if item.has(PropertyKey.CONTENT):
            return valid_result(mode="content", item=item, subject=item.name)

        return invalid_result(
            RejectionCode.NOTHING_TO_READ,
            f"There is nothing to read on the {item.name}.",
            subject=item.name,
        )

    def execute(
        self,
        command: "ParsedCommand",
        result: ValidationResult,
        world: "WorldModel",
    ) -> str:
        item: WorldObject = result.context["item"]  # type: ignore[assignment]
        mode = result.context["mode"]

        if mode == "reveal":
            item.set_flag(PropertyKey.HAS_BEEN_READ, True)
            revealed_name = self._reveal(str(result.context["target"]), world)
            return (
                item.get(PropertyKey.CONTENT_UNREAD)
                or item.get(PropertyKey.CONTENT)
                or f"As you read the {item.name}, you find the {revealed_name}."
            )

        if mode == "reread":
            return (
                item.get(PropertyKey.CONTENT_READ)
                or item.get(PropertyKey.CONTENT)
                or f"You have already read the {item.name}."
            )

        return f'The {item.name} reads: "{item.get(PropertyKey.CONTENT)}"'

    def _reveal(self, name: str, world: "WorldModel") -> str:
        """Place the revealed object here, creating it if needed.

        An object that is already held or placed somewhere is left alone.
        """
        revealed = world.find_object(name)
        if revealed is None:
            revealed = WorldObject(name=name, properties=[])
            world.objects.append(revealed)

        already_placed = (
            revealed.name in world.world_state.player_inventory
            or world.location_of(revealed.name) is not None
        )
        if not already_placed:
            world.place(revealed.name, world.world_state.current_location)
        return revealed.name
