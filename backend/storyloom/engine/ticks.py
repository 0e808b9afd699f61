"""
Tick engine - advances world time and lets NPCs act

A tick happens between player turns (or whenever the caller decides). It
moves the clock forward one period, may move one NPC, and may add a line of
ambient narration. The input World Model is never mutated.
"""

from __future__ import annotations

import logging
import random

from storyloom.engine.ambience import ambient_line
from storyloom.models.event import Event, EventType
from storyloom.models.session import TurnResult
from storyloom.models.world import WorldModel

logger = logging.getLogger(__name__)

NEW_DAY_LINE = "A new day begins."


class TickEngine:
    """Advances the simulation by one tick.

    Example:
        >>> engine = TickEngine(rng=random.Random(1), wander_chance=0)
        >>> turn = engine.advance(world)   # world at "Day 3, Night"
        >>> str(turn.world.world_state.time), turn.narrative
        ('Day 4, Morning', 'A new day begins.')
    """

    def __init__(
        self,
        rng: random.Random | None = None,
        wander_chance: float = 0.5,
        ambient: bool = False,
    ):
        """Initialize the tick engine.

        Args:
            rng: Random source for NPC movement and ambient lines
            wander_chance: Probability that one NPC moves per tick (0 disables)
            ambient: Whether to add a line of ambient narration
        """
        self.rng = rng or random.Random()
        self.wander_chance = wander_chance
        self.ambient = ambient

    def advance(self, world: WorldModel) -> TurnResult:
        updated = world.clone()
        state = updated.world_state
        lines: list[str] = []

        previous = state.time
        state.time = previous.advance()
        new_day = state.time.day > previous.day
        if new_day:
            lines.append(NEW_DAY_LINE)

        moved = self._wander(updated, lines)

        if self.ambient:
            line = ambient_line(updated, self.rng)
            if line:
                lines.append(line)

        logger.debug(f"Tick: {previous} -> {state.time}")

        context: dict[str, object] = {
            "from": previous.render(),
            "to": state.time.render(),
            "new_day": new_day,
        }
        if moved is not None:
            context["npc_moved"] = {"character": moved[0], "destination": moved[1]}

        return TurnResult(
            narrative=" ".join(lines),
            world=updated,
            event=Event(
                type=EventType.TIME_ADVANCED,
                subject=state.time.render(),
                context=context,
            ),
        )

    def _wander(self, world: WorldModel, lines: list[str]) -> tuple[str, str] | None:
        """Maybe move one NPC to a different setting; returns (name, destination)"""
        if self.wander_chance <= 0 or not world.characters or len(world.settings) < 2:
            return None
        if self.rng.random() >= self.wander_chance:
            return None

        character = self.rng.choice(world.characters)
        entry = world.character_location(character.name)
        if entry is None:
            return None

        destinations = [s.name for s in world.settings if s.name != entry.location_name]
        if not destinations:
            return None
        destination = self.rng.choice(destinations)

        here = world.world_state.current_location
        if entry.location_name == here:
            lines.append(f"{character.name} wanders off towards {destination}.")
        entry.location_name = destination
        if destination == here:
            lines.append(f"{character.name} has arrived.")

        logger.info(f"{character.name} wandered to {destination}")
        return character.name, destination


def advance_simulation(
    world: WorldModel,
    rng: random.Random | None = None,
    wander_chance: float = 0.5,
) -> TurnResult:
    """Advance one tick with a throwaway engine."""
    return TickEngine(rng=rng, wander_chance=wander_chance).advance(world)
