"""
Character interaction handlers: talk and give.
"""

from __future__ import annotations

import random
from typing import TYPE_CHECKING

from storyloom.engine.handlers.base import BaseHandler
from storyloom.models.event import EventType, RejectionCode
from storyloom.models.validation import ValidationResult, invalid_result, valid_result

if TYPE_CHECKING:
    from storyloom.engine.resolver import ObjectResolver
    from storyloom.models.command import ParsedCommand
    from storyloom.models.world import Character, WorldModel


# (personality tags, lines, template); the first category with a matching tag wins
RESPONSE_CATEGORIES: list[tuple[frozenset[str], tuple[str, ...], str]] = [
    (
        frozenset({"hurried", "anxious"}),
        ("No time to talk!", "I shall be late!", "Oh dear, oh dear!"),
        '"{line}" {name} mutters, barely looking at you.',
    ),
    (
        frozenset({"melancholic", "philosophical"}),
        (
            "The world is a grand stage, is it not?",
            "What is it you truly seek?",
            "Some questions have no answers.",
        ),
        '{name} regards you with a distant gaze. "{line}"',
    ),
    (
        frozenset({"ambitious", "confident"}),
        ("State your purpose.", "Do not waste my time.", "Success favors the bold."),
        '{name} sizes you up. "{line}"',
    ),
]

SILENT_RESPONSE = "{name} nods at you but doesn't say anything."


class TalkHandler(BaseHandler):
    """Handles talk / ask / speak.

    The reply depends only on the character's personality tags; the exact
    line within a category comes from the injected random source.
    """

    verbs = ("talk", "ask", "speak")
    event_type = EventType.NPC_CONVERSATION

    def __init__(self, resolver: "ObjectResolver", rng: random.Random):
        super().__init__(resolver)
        self.rng = rng

    def validate(self, command: "ParsedCommand", world: "WorldModel") -> ValidationResult:
        # "talk to X" puts the name in the indirect object
        name = command.direct_object or command.indirect_object or ""
        name = name.split(" about ")[0]
        if not name:
            return invalid_result(RejectionCode.MISSING_TARGET, "Who do you want to talk to?")

        character = self.resolver.find_character_here(name, world)
        if character is None:
            return invalid_result(
                RejectionCode.CHARACTER_NOT_HERE,
                f'You don\'t see anyone named "{name}" here.',
            )
        return valid_result(character=character, subject=character.name)

    def execute(
        self,
        command: "ParsedCommand",
        result: ValidationResult,
        world: "WorldModel",
    ) -> str:
        character: Character = result.context["character"]  # type: ignore[assignment]
        return self.respond(character)

    def respond(self, character: "Character") -> str:
        tags = {tag.lower() for tag in character.personality}
        for category, lines, template in RESPONSE_CATEGORIES:
            if tags & category:
                return template.format(line=self.rng.choice(lines), name=character.name)
        return SILENT_RESPONSE.format(name=character.name)


class GiveHandler(BaseHandler):
    """Handles give <item> to <character>.

    Characters have no inventory, so a given item leaves the world.
    """

    verbs = ("give", "offer", "hand")
    event_type = EventType.NPC_ITEM_GIVEN

    def validate(self, command: "ParsedCommand", world: "WorldModel") -> ValidationResult:
        if not command.direct_object:
            return self.ask_what("give")

        resolution = self.resolver.resolve(command.direct_object, world)
        if resolution is None or not resolution.held:
            return invalid_result(RejectionCode.NOT_CARRIED, "You don't have that.")
        item = resolution.object

        if not command.indirect_object:
            return invalid_result(
                RejectionCode.MISSING_TARGET,
                f"Who do you want to give the {item.name} to?",
                subject=item.name,
            )

        character = self.resolver.find_character_here(command.indirect_object, world)
        if character is None:
            return invalid_result(
                RejectionCode.CHARACTER_NOT_HERE,
                f'You don\'t see anyone named "{command.indirect_object}" here.',
                subject=item.name,
            )

        return valid_result(subject=item.name, target=character.name)

    def execute(
        self,
        command: "ParsedCommand",
        result: ValidationResult,
        world: "WorldModel",
    ) -> str:
        item_name = str(result.context["subject"])
        character_name = str(result.context["target"])
        world.remove_object(item_name)
        return f"You give the {item_name} to {character_name}."
