"""
Offline world evolution.

Stands in for a remote collaborator that occasionally proposes a small
change to the world. Proposals go through the mutation validator like any
other mutation.
"""

from __future__ import annotations

import random

from storyloom.models.mutation import Mutation, MutationType
from storyloom.models.world import WorldModel

OBJECT_POOL: list[dict] = [
    {"name": "A forgotten coin", "properties": [{"key": "material", "value": "tarnished brass"}]},
    {"name": "A rusty key", "properties": [{"key": "feature", "value": "ornate handle"}]},
    {"name": "A crumpled note", "properties": [{"key": "state", "value": "barely legible"}]},
    {"name": "A single, white feather", "properties": [{"key": "origin", "value": "unknown bird"}]},
]

ENHANCEMENTS: list[str] = [
    "A floorboard creaks ominously in the distance.",
    "The scent of old paper and dust hangs heavy in the air.",
    "For a moment, the light seems to dim, and a chill runs down your spine.",
    "A faint, musical chime echoes from a place you cannot identify.",
]

ADD_OBJECT_REASON = "The world shifts in subtle ways."
ENHANCE_REASON = "A detail sharpens into focus."


def propose_evolution(
    world: WorldModel,
    rng: random.Random,
    chance: float = 0.05,
) -> Mutation | None:
    """Maybe propose one mutation.

    Returns None most of the time, and also when the drawn object already
    exists in the world.
    """
    if rng.random() >= chance:
        return None

    kind = rng.choice([MutationType.ADD_OBJECT, MutationType.ENHANCE_NARRATIVE])

    if kind == MutationType.ADD_OBJECT:
        candidate = rng.choice(OBJECT_POOL)
        if world.find_object(candidate["name"]) is not None:
            return None
        return Mutation(
            type=kind.value,
            payload={
                "name": candidate["name"],
                "properties": [dict(p) for p in candidate["properties"]],
            },
            reason=ADD_OBJECT_REASON,
        )

    return Mutation(
        type=kind.value,
        payload=rng.choice(ENHANCEMENTS),
        reason=ENHANCE_REASON,
    )
