"""
Open and close handlers.

Only objects with ``is_container=true`` can be opened or closed, and never
while the player is holding them.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from storyloom.engine.handlers.base import BaseHandler
from storyloom.engine.resolver import Resolution
from storyloom.models.event import EventType, RejectionCode
from storyloom.models.properties import PropertyKey
from storyloom.models.validation import ValidationResult, invalid_result, valid_result

if TYPE_CHECKING:
    from storyloom.models.command import ParsedCommand
    from storyloom.models.world import WorldModel, WorldObject


class _ContainerHandler(BaseHandler):
    """Shared resolution rules for open/close"""

    action = ""

    def _resolve_container(
        self, command: "ParsedCommand", world: "WorldModel"
    ) -> Resolution | ValidationResult:
        if not command.direct_object:
            return self.ask_what(self.action)

        resolution = self.resolver.resolve(command.direct_object, world)
        if resolution is None:
            return invalid_result(
                RejectionCode.TARGET_NOT_FOUND,
                f"You don't see a {command.direct_object} here.",
            )
        name = resolution.object.name
        if resolution.held:
            return invalid_result(
                RejectionCode.ITEM_HELD,
                f"You'll need to put the {name} down before you can {self.action} it.",
                subject=name,
            )
        if not resolution.object.flag(PropertyKey.IS_CONTAINER):
            return invalid_result(
                RejectionCode.NOT_A_CONTAINER,
                f"You can't {self.action} that.",
                subject=name,
            )
        return resolution


class OpenHandler(_ContainerHandler):
    """Handles open: refuses locked or already-open containers"""

    verbs = ("open",)
    event_type = EventType.CONTAINER_OPENED
    action = "open"

    def validate(self, command: "ParsedCommand", world: "WorldModel") -> ValidationResult:
        found = self._resolve_container(command, world)
        if isinstance(found, ValidationResult):
            return found

        container = found.object
        if container.flag(PropertyKey.IS_LOCKED):
            return invalid_result(
                RejectionCode.CONTAINER_LOCKED, "It's locked.", subject=container.name
            )
        if container.flag(PropertyKey.IS_OPEN):
            return invalid_result(
                RejectionCode.ALREADY_OPEN, "It's already open.", subject=container.name
            )
        return valid_result(container=container, subject=container.name)

    def execute(
        self,
        command: "ParsedCommand",
        result: ValidationResult,
        world: "WorldModel",
    ) -> str:
        container: WorldObject = result.context["container"]  # type: ignore[assignment]
        container.set_flag(PropertyKey.IS_OPEN, True)

        narrative = f"You open the {container.name}."
        contents = self.resolver.contents_of(container, world)
        if contents:
            narrative += f" Inside, you see: {', '.join(o.name for o in contents)}."
        return narrative


class CloseHandler(_ContainerHandler):
    """Handles close: refuses containers that are already closed"""

    verbs = ("close", "shut")
    event_type = EventType.CONTAINER_CLOSED
    action = "close"

    def validate(self, command: "ParsedCommand", world: "WorldModel") -> ValidationResult:
        found = self._resolve_container(command, world)
        if isinstance(found, ValidationResult):
            return found

        container = found.object
        if not container.flag(PropertyKey.IS_OPEN):
            return invalid_result(
                RejectionCode.ALREADY_CLOSED, "It's already closed.", subject=container.name
            )
        return valid_result(container=container, subject=container.name)

    def execute(
        self,
        command: "ParsedCommand",
        result: ValidationResult,
        world: "WorldModel",
    ) -> str:
        container: WorldObject = result.context["container"]  # type: ignore[assignment]
        container.set_flag(PropertyKey.IS_OPEN, False)
        return f"You close the {container.name}."
