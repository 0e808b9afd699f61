"""
Ambient narration - small procedural grammar for quiet ticks

Rules are lists of alternatives; ``#symbol#`` inside an alternative is
replaced by an expansion of that symbol. Expansion depth is bounded so a
self-referencing rule cannot loop forever.
"""

from __future__ import annotations

import random
import re

from storyloom.models.world import Character, Setting, WorldModel

SYMBOL_PATTERN = re.compile(r"#(\w+)#")
MAX_EXPANSIONS = 10

Grammar = dict[str, list[str]]

BASE_GRAMMAR: Grammar = {
    "origin": ["#sensory#", "#character#", "#environment#"],
    "sensory": [
        "The scent of #smell# hangs in the air.",
        "A floorboard creaks somewhere in the building.",
        "The distant sound of #sound# tolls once, then falls silent.",
        "A faint, unidentifiable scent drifts by on the air.",
    ],
    "smell": ["old paper", "dust", "damp stone", "ozone"],
    "sound": ["a bell", "a closing door", "a faint shout"],
}


def expand(grammar: Grammar, rng: random.Random, start: str = "origin") -> str:
    """Expand ``start`` by repeatedly replacing the first symbol found.

    Unknown symbols expand to the empty string.
    """
    text = rng.choice(grammar.get(start) or [""])
    for _ in range(MAX_EXPANSIONS):
        match = SYMBOL_PATTERN.search(text)
        if match is None:
            break
        replacement = rng.choice(grammar.get(match.group(1)) or [""])
        text = text[: match.start()] + replacement + text[match.end():]
    return text


def _character_rules(character: Character | None, rng: random.Random) -> list[str]:
    if character is None:
        return ["You feel a profound sense of solitude."]

    if "anxious" in character.personality:
        gesture = rng.choice(
            ["glances nervously towards the exit", "taps their foot impatiently"]
        )
    else:
        gesture = rng.choice(
            ["shifts their weight, lost in thought", "stares blankly into the middle distance"]
        )

    if "ambitious" in character.personality:
        mood = rng.choice(["determination", "calculation"])
    else:
        mood = rng.choice(["boredom", "weariness"])

    return [
        f"{character.name} {gesture}.",
        f"A flicker of {mood} crosses {character.name}'s face.",
    ]


def _environment_rules(setting: Setting | None) -> list[str]:
    if setting is None:
        return ["The world holds its breath."]

    if "dark" in setting.ambience_descriptors:
        light = "Shadows cling to the corners of the room, deep and motionless."
    else:
        light = "A comfortable silence settles over the area."

    if "cold" in setting.ambience_descriptors:
        air = "The cold seems to seep in from the very stones."
    else:
        air = "The air feels heavy and still."

    return [light, air]


def build_grammar(world: WorldModel, rng: random.Random) -> Grammar:
    """Grammar keyed on the player's surroundings"""
    location = world.world_state.current_location
    present = world.characters_at(location)
    character = rng.choice(present) if present else None

    grammar = dict(BASE_GRAMMAR)
    grammar["character"] = _character_rules(character, rng)
    grammar["environment"] = _environment_rules(world.get_setting(location))
    return grammar


def ambient_line(world: WorldModel, rng: random.Random) -> str:
    """One line of ambient narration for the player's current location"""
    return expand(build_grammar(world, rng), rng)
