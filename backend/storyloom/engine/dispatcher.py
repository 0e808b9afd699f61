"""
Verb dispatcher.

Routes a parsed command to its handler and runs the
validate -> execute -> create_event pipeline against a private copy of the
World Model. A refusal returns the caller's original model untouched
together with the refusal text; refusals are never raised.
"""

from __future__ import annotations

import logging
import random

from storyloom.engine.handlers import (
    CloseHandler,
    DropHandler,
    EatHandler,
    GenericVerbHandler,
    GiveHandler,
    GoHandler,
    InventoryHandler,
    LookHandler,
    OpenHandler,
    ReadHandler,
    ShaveHandler,
    TakeHandler,
    TalkHandler,
    UseHandler,
)
from storyloom.engine.parser import CommandParser
from storyloom.engine.protocols import VerbHandler
from storyloom.engine.resolver import ObjectResolver
from storyloom.models.command import ParsedCommand
from storyloom.models.session import TurnResult
from storyloom.models.world import WorldModel

logger = logging.getLogger(__name__)


class VerbDispatcher:
    """Processes player commands against a World Model.

    The dispatcher keeps no state between calls: dispatch() is a function of
    the world it is given, the command, and the injected random source.

    Example:
        >>> dispatcher = VerbDispatcher(rng=random.Random(7))
        >>> turn = dispatcher.dispatch(world, "open iron-bound chest")
        >>> turn.narrative
        "It's locked."
        >>> turn.world is world
        True
    """

    def __init__(
        self,
        rng: random.Random | None = None,
        parser: CommandParser | None = None,
        resolver: ObjectResolver | None = None,
    ):
        """Initialize the dispatcher.

        Args:
            rng: Random source for varied dialogue lines
            parser: Command parser (default CommandParser)
            resolver: Object resolver shared by all handlers
        """
        self.rng = rng or random.Random()
        self.parser = parser or CommandParser()
        self.resolver = resolver or ObjectResolver()

        handlers: list[VerbHandler] = [
            LookHandler(self.resolver),
            InventoryHandler(self.resolver),
            GoHandler(self.resolver),
            TalkHandler(self.resolver, self.rng),
            GiveHandler(self.resolver),
            TakeHandler(self.resolver),
            DropHandler(self.resolver),
            ReadHandler(self.resolver),
            OpenHandler(self.resolver),
            CloseHandler(self.resolver),
            UseHandler(self.resolver),
            EatHandler(self.resolver),
            ShaveHandler(self.resolver),
        ]
        self._handlers: dict[str, VerbHandler] = {
            verb: handler for handler in handlers for verb in handler.verbs
        }
        self._fallback = GenericVerbHandler(self.resolver)

    @property
    def verbs(self) -> list[str]:
        """Verbs with built-in handlers"""
        return sorted(self._handlers)

    def handler_for(self, verb: str) -> VerbHandler:
        return self._handlers.get(verb, self._fallback)

    def dispatch(self, world: WorldModel, command: str | ParsedCommand) -> TurnResult:
        """Process one command.

        Args:
            world: The current World Model (never mutated)
            command: Raw player input or an already parsed command

        Returns:
            TurnResult with the narrative, the new world (a copy) on success
            or the original world on refusal, and the resulting event
        """
        parsed = self.parser.parse(command) if isinstance(command, str) else command
        handler = self.handler_for(parsed.verb)

        working = world.clone()
        result = handler.validate(parsed, working)

        if not result.valid:
            event = result.to_rejection_event()
            logger.debug(f"Command refused: {parsed.raw_input!r} ({event.rejection_code.value})")
            return TurnResult(narrative=event.rejection_reason, world=world, event=event)

        narrative = handler.execute(parsed, result, working)
        event = handler.create_event(parsed, result, working)
        logger.debug(f"Command {parsed.raw_input!r} -> {event.type.value}")

        return TurnResult(narrative=narrative, world=working, event=event)


def process_command(
    world: WorldModel,
    command: str,
    rng: random.Random | None = None,
) -> TurnResult:
    """Process a single command with a throwaway dispatcher."""
    return VerbDispatcher(rng=rng).dispatch(world, command)
