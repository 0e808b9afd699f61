"""
Shared behavior for verb handlers.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from storyloom.models.event import Event, EventType, RejectionCode
from storyloom.models.validation import ValidationResult, invalid_result

if TYPE_CHECKING:
    from storyloom.engine.resolver import ObjectResolver
    from storyloom.models.command import ParsedCommand
    from storyloom.models.world import WorldModel


class BaseHandler:
    """Base class for verb handlers.

    Subclasses set ``verbs`` and ``event_type`` and implement validate()
    and execute(). Validation context conventions:
        subject: name of the primary entity
        target: name of the secondary entity
        event_type: overrides ``event_type`` for this particular outcome
    """

    verbs: tuple[str, ...] = ()
    event_type: EventType = EventType.FLAVOR_ACTION

    def __init__(self, resolver: "ObjectResolver"):
        self.resolver = resolver

    def create_event(
        self,
        command: "ParsedCommand",
        result: ValidationResult,
        world: "WorldModel",
    ) -> Event:
        context = result.context
        subject = context.get("subject")
        target = context.get("target")
        return Event(
            type=context.get("event_type", self.event_type),  # type: ignore[arg-type]
            subject=str(subject) if subject is not None else None,
            target=str(target) if target is not None else None,
            context={"verb": command.verb},
        )

    @staticmethod
    def ask_what(verb: str) -> ValidationResult:
        return invalid_result(
            RejectionCode.MISSING_TARGET,
            f"What do you want to {verb}?",
        )
