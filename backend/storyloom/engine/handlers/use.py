"""
Use / unlock handler.

Tool and target come from different slots depending on the phrasing:

    use <tool> on|in|at <target>     tool = direct object
    use <target> with|using <tool>   tool = indirect object
    unlock <target> with <tool>      tool = indirect object

Effects are tried in order and the first that applies wins:

    1. Key and lock: the target is locked and the tool's ``item_id`` equals
       the target's ``key_id``. The target unlocks; a tool that was not held
       is picked up as part of the same action.
    2. Positive interaction: the target has ``on_use_<item_id>``; its value
       is the narrative.
    3. Misuse: the target has a ``surface`` and the tool has
       ``on_use_on_<surface>``; ``{target_name}`` is substituted into it, and
       a tool with ``on_break_destroy=true`` is destroyed.
    4. Nothing happens.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from storyloom.engine.handlers.base import BaseHandler
from storyloom.models.event import EventType, RejectionCode
from storyloom.models.properties import PropertyKey, use_on_surface_key, use_with_key
from storyloom.models.validation import ValidationResult, invalid_result, valid_result

if TYPE_CHECKING:
    from storyloom.engine.resolver import Resolution
    from storyloom.models.command import ParsedCommand
    from storyloom.models.world import WorldModel, WorldObject


class UseHandler(BaseHandler):
    """Handles use and unlock.

    Example:
        >>> result = handler.validate(parser.parse("unlock iron-bound chest with silver key"), world)
        >>> result.context["mode"]
        'unlock'
    """

    verbs = ("use", "unlock")
    event_type = EventType.ITEM_USED

    TOOL_LAST_PREPOSITIONS = ("with", "using")

    def split_arguments(self, command: "ParsedCommand") -> tuple[str, str]:
        """Return (tool name, target name) for the command's phrasing."""
        direct = command.direct_object
        indirect = command.indirect_object or ""
        if command.verb == "unlock" or command.preposition in self.TOOL_LAST_PREPOSITIONS:
            return indirect, direct
        return direct, indirect

    def validate(self, command: "ParsedCommand", world: "WorldModel") -> ValidationResult:
        if not command.direct_object:
            return self.ask_what(command.verb)

        tool_name, target_name = self.split_arguments(command)
        if not tool_name:
            return invalid_result(
                RejectionCode.NO_TOOL,
                f"What do you want to {command.verb} the {target_name} with?",
            )

        tool = self.resolver.resolve(tool_name, world)
        if tool is None:
            return invalid_result(
                RejectionCode.NO_TOOL,
                f"You don't have or see a {tool_name}.",
            )

        if not target_name:
            standalone = tool.object.get(PropertyKey.ON_USE)
            if standalone:
                return valid_result(
                    mode="standalone", narrative=standalone, subject=tool.object.name
                )
            return invalid_result(
                RejectionCode.MISSING_TARGET,
                f"What do you want to use the {tool.object.name} on?",
                subject=tool.object.name,
            )

        target = self.resolver.resolve(target_name, world)
        if target is None:
            return invalid_result(
                RejectionCode.TARGET_NOT_FOUND,
                f"You don't see a {target_name} here.",
                subject=tool.object.name,
            )

        return self._choose_effect(command, tool, target.object)

    def _choose_effect(
        self,
        command: "ParsedCommand",
        tool: "Resolution",
        target: "WorldObject",
    ) -> ValidationResult:
        names = {"subject": target.name, "target": tool.object.name}
        item_id = tool.object.get(PropertyKey.ITEM_ID)

        if (
            target.flag(PropertyKey.IS_LOCKED)
            and item_id
            and item_id == target.get(PropertyKey.KEY_ID)
        ):
            return valid_result(
                mode="unlock",
                tool_held=tool.held,
                event_type=EventType.CONTAINER_UNLOCKED,
                **names,
            )

        if command.verb == "unlock" and not target.flag(PropertyKey.IS_LOCKED):
            return invalid_result(
                RejectionCode.NO_EFFECT,
                f"The {target.name} isn't locked.",
                **names,
            )

        if item_id:
            outcome = target.get(use_with_key(item_id))
            if outcome is not None:
                return valid_result(mode="interact", narrative=outcome, **names)

        surface = target.get(PropertyKey.SURFACE)
        if surface:
            template = tool.object.get(use_on_surface_key(surface))
            if template is not None:
                destroy = tool.object.flag(PropertyKey.ON_BREAK_DESTROY)
                return valid_result(
                    mode="misuse",
                    narrative=template.replace("{target_name}", target.name),
                    destroy_tool=destroy,
                    event_type=EventType.ITEM_DESTROYED if destroy else EventType.ITEM_USED,
                    **names,
                )

        return invalid_result(
            RejectionCode.NO_EFFECT,
            "That doesn't seem to do anything.",
            **names,
        )

    def execute(
        self,
        command: "ParsedCommand",
        result: ValidationResult,
        world: "WorldModel",
    ) -> str:
        context = result.context
        mode = context["mode"]

        if mode == "unlock":
            target = world.get_object(str(context["subject"]))
            tool_name = str(context["target"])
            assert target is not None
            target.set_flag(PropertyKey.IS_LOCKED, False)
            if not context["tool_held"]:
                world.give_to_player(tool_name)
                return (
                    f"You pick up the {tool_name} and use it on the {target.name}. "
                    "It unlocks with a click."
                )
            return f"You use the {tool_name} on the {target.name}. It unlocks with a click."

        if mode == "misuse" and context.get("destroy_tool"):
            world.remove_object(str(context["target"]))

        return str(context["narrative"])
