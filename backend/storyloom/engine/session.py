"""
Game session - owns one World Model and serializes every change to it

The engine functions are pure: they take a world and return a new one. A
session is the single caller that holds the current world, feeds it to the
dispatcher, the tick engine and the mutation validator in turn, and keeps
the adventure log, an undo history and an audit log of mutations.
"""

from __future__ import annotations

import logging
import random
from collections import deque
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from typing import Any

from storyloom.config import EngineSettings
from storyloom.engine.dispatcher import VerbDispatcher
from storyloom.engine.evolution import propose_evolution
from storyloom.engine.mutations import MutationValidator
from storyloom.engine.ticks import TickEngine
from storyloom.models.mutation import (
    Mutation,
    MutationLogEntry,
    MutationResult,
    MutationType,
)
from storyloom.models.session import AdventureLogEntry, TurnResult
from storyloom.models.world import WorldModel

logger = logging.getLogger(__name__)

HELP_TEXT = (
    "CLIENT COMMANDS:\n"
    "[help] - Show this message.\n"
    "[undo] - Take back the last change to the world.\n"
    "[clear] - Clear the adventure log.\n"
    "\n"
    "GAME COMMANDS:\n"
    "look, examine <thing>, go <place>, take <thing> [from <container>], drop,\n"
    "open, close, use <tool> on <thing>, unlock <thing> with <key>, read, eat,\n"
    "talk to <someone>, give <thing> to <someone>, inventory"
)
NOTHING_TO_UNDO = "There is nothing to undo."
UNDONE = "You retrace your steps. The world is as it was a moment ago."
LOG_CLEARED = "Log cleared."


class GameSession:
    """One player's running adventure.

    Example:
        >>> session = GameSession(world, EngineSettings(seed=3))
        >>> session.submit("take the brass lamp").narrative
        'You take the Brass Lamp.'
        >>> session.undo().narrative
        'You retrace your steps. The world is as it was a moment ago.'
    """

    def __init__(
        self,
        world: WorldModel,
        settings: EngineSettings | None = None,
        rng: random.Random | None = None,
    ):
        self.settings = settings or EngineSettings()
        self.rng = rng or random.Random(self.settings.seed)

        self.dispatcher = VerbDispatcher(rng=self.rng)
        self.ticker = TickEngine(
            rng=self.rng,
            wander_chance=self.settings.wander_chance,
            ambient=self.settings.ambient_narration,
        )
        self.mutations = MutationValidator()

        self._world = world
        # (previous world, mutation that replaced it)
        self._history: deque[tuple[WorldModel, MutationLogEntry | None]] = deque(
            maxlen=self.settings.undo_depth
        )
        self._busy = False
        self._commands_since_tick = 0

        self.log: list[AdventureLogEntry] = []
        self.mutation_log: list[MutationLogEntry] = []

        extra = world.world_state.model_extra or {}
        opening = extra.get("initial_description")
        self._log("narrative", str(opening or "Your adventure begins."))

    @property
    def world(self) -> WorldModel:
        return self._world

    @property
    def can_undo(self) -> bool:
        return len(self._history) > 0

    @contextmanager
    def _turn(self) -> Iterator[None]:
        if self._busy:
            raise RuntimeError("GameSession is already processing a turn")
        self._busy = True
        try:
            yield
        finally:
            self._busy = False

    def _log(self, entry_type: str, content: str) -> None:
        self.log.append(AdventureLogEntry(type=entry_type, content=content))

    def _commit(self, world: WorldModel, mutation: MutationLogEntry | None = None) -> None:
        if world is self._world:
            return
        if self.settings.undo_depth > 0:
            self._history.append((self._world, mutation))
        self._world = world

    # Player input

    def submit(self, command: str) -> TurnResult:
        """Process one line of player input.

        Client commands (help, undo, clear) are handled here; everything
        else goes to the verb dispatcher. Refusals leave the world and the
        undo history untouched.
        """
        text = command.strip()
        lowered = text.lower()

        if lowered == "undo":
            return self.undo()

        with self._turn():
            self._log("command", text)

            if lowered == "help":
                self._log("simulation", HELP_TEXT)
                return TurnResult(narrative=HELP_TEXT, world=self._world)

            if lowered == "clear":
                self.log = [
                    AdventureLogEntry(type="command", content=text),
                    AdventureLogEntry(type="simulation", content=LOG_CLEARED),
                ]
                return TurnResult(narrative=LOG_CLEARED, world=self._world)

            turn = self.dispatcher.dispatch(self._world, text)
            if not turn.rejected:
                self._commit(turn.world)
            self._log("narrative", turn.narrative)
            self._commands_since_tick += 1

        if self.settings.tick_every and self._commands_since_tick >= self.settings.tick_every:
            self.tick()
            turn = turn.model_copy(update={"world": self._world})

        return turn

    def undo(self) -> TurnResult:
        """Restore the world as it was before the last change"""
        with self._turn():
            self._log("command", "undo")
            if not self._history:
                self._log("simulation", NOTHING_TO_UNDO)
                return TurnResult(narrative=NOTHING_TO_UNDO, world=self._world)

            self._world, mutation = self._history.pop()
            if mutation is not None:
                mutation.status = "reverted"
            logger.info("Undo: restored previous world snapshot")
            self._log("simulation", UNDONE)
            return TurnResult(narrative=UNDONE, world=self._world)

    # Simulation

    def tick(self) -> TurnResult:
        """Advance the world by one tick"""
        with self._turn():
            turn = self.ticker.advance(self._world)
            self._commit(turn.world)
            self._commands_since_tick = 0
            if turn.narrative:
                self._log("simulation", turn.narrative)
            return turn

    def apply_mutation(self, mutation: Mutation | Mapping[str, Any]) -> MutationResult:
        """Validate and merge one externally proposed mutation.

        Raises:
            MutationError: If the mutation envelope is malformed
            UnknownMutationError: If the mutation type is not supported
        """
        with self._turn():
            envelope = self.mutations.parse(mutation)
            result = self.mutations.apply(envelope, self._world)

            entry = MutationLogEntry(
                mutation=envelope,
                status="applied" if result.applied else "rejected",
            )
            self.mutation_log.append(entry)
            if not result.applied:
                return result

            if envelope.type == MutationType.ENHANCE_NARRATIVE.value:
                self._append_to_narrative(result.narrative_update)
            else:
                self._commit(result.world, entry)
                self._log("narrative", result.narrative_update)
            return result

    def evolve(self) -> MutationResult | None:
        """Maybe let the world evolve on its own"""
        proposal = propose_evolution(self._world, self.rng, self.settings.evolution_chance)
        if proposal is None:
            return None
        logger.debug(f"Evolution proposed: {proposal.type}")
        return self.apply_mutation(proposal)

    def _append_to_narrative(self, text: str) -> None:
        for entry in reversed(self.log):
            if entry.type == "narrative":
                entry.content = f"{entry.content} {text}".strip()
                return
        self._log("narrative", text)
