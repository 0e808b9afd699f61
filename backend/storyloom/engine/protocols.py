"""
Protocol definitions for the simulation engine.

Component Flow:
    Player Input -> CommandParser -> ParsedCommand
                                          |
                                          v
                       VerbHandler.validate -> ValidationResult
                                          |
                                          v (if valid, on a copy of the world)
                        VerbHandler.execute -> narrative text
                                          |
                                          v
                   VerbHandler.create_event -> Event
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from storyloom.models.command import ParsedCommand
    from storyloom.models.event import Event
    from storyloom.models.validation import ValidationResult
    from storyloom.models.world import WorldModel


@runtime_checkable
class VerbHandler(Protocol):
    """Protocol for the handler of one or more verbs.

    validate() must not change the world. execute() receives the dispatcher's
    private copy of the world and may mutate it freely.
    """

    verbs: tuple[str, ...]

    def validate(
        self,
        command: "ParsedCommand",
        world: "WorldModel",
    ) -> "ValidationResult":
        """Check whether the command is allowed.

        Args:
            command: The parsed command
            world: The dispatcher's copy of the world

        Returns:
            ValidationResult with resolved entities in context, or a refusal
        """
        ...

    def execute(
        self,
        command: "ParsedCommand",
        result: "ValidationResult",
        world: "WorldModel",
    ) -> str:
        """Apply the command and return its narrative.

        Args:
            command: The validated command
            result: The successful validation result
            world: The dispatcher's copy of the world (mutable)

        Returns:
            Narrative text for the player
        """
        ...

    def create_event(
        self,
        command: "ParsedCommand",
        result: "ValidationResult",
        world: "WorldModel",
    ) -> "Event":
        """Describe what happened."""
        ...
