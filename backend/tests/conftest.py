"""
Shared pytest fixtures for Storyloom tests.

This module provides:
- study_world: A small World Model built around a locked chest puzzle
- world_factory: Builds World Models from compact object descriptions
- dispatcher / rng: Seeded engine components for deterministic turns
- Custom markers for test categorization
"""

from __future__ import annotations

import random
import sys
from pathlib import Path

import pytest

# Add backend to path for imports
backend_path = Path(__file__).parent.parent
if str(backend_path) not in sys.path:
    sys.path.insert(0, str(backend_path))

from storyloom.engine.dispatcher import VerbDispatcher  # noqa: E402
from storyloom.engine.parser import CommandParser  # noqa: E402
from storyloom.engine.resolver import ObjectResolver  # noqa: E402
from storyloom.models.world import (  # noqa: E402
    Character,
    CharacterLocation,
    ObjectLocation,
    Setting,
    WorldModel,
    WorldObject,
    WorldState,
)
from tests.factories import make_object  # noqa: E402


# =============================================================================
# Pytest Configuration
# =============================================================================


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line("markers", "integration: marks tests as integration tests")


# =============================================================================
# World Fixtures
# =============================================================================


@pytest.fixture
def study_settings() -> list[Setting]:
    """Three settings; the study is where the player starts.

    Layout:
        [Study] --- [Stairhead] --- [Tower Roof]
    """
    return [
        Setting(name="Study", ambience_descriptors=["dusty", "cluttered"]),
        Setting(name="Stairhead", ambience_descriptors=["dark", "stone"]),
        Setting(name="Tower Roof", ambience_descriptors=["windy", "cold"]),
    ]


@pytest.fixture
def study_objects() -> list[WorldObject]:
    """Objects for the chest puzzle plus a few props."""
    return [
        make_object(
            "Iron-bound Chest",
            is_container="true",
            is_locked="true",
            is_open="false",
            key_id="silver_key_01",
        ),
        make_object("Golden Goblet", material="gold", feature="exquisitely crafted"),
        make_object(
            "Leather-bound Book",
            on_read_effect="reveals_key",
            has_been_read="false",
            content_unread="A small silver key slips from between the pages.",
            content_read="The diagrams are as cryptic as before.",
        ),
        make_object("Silver Key", item_id="silver_key_01"),
        make_object("Apple", is_edible="true", effect="You feel refreshed."),
        make_object("Wooden Box", is_container="true", is_open="true"),
        make_object("Velvet Pouch", is_container="true", is_open="true"),
        make_object("Copper Ring", feature="engraved"),
        make_object("Letter", content="Meet me at the tower at dusk"),
        make_object("Stone", feature="smooth"),
    ]


@pytest.fixture
def study_world(study_settings, study_objects) -> WorldModel:
    """The player stands in the Study with an empty inventory.

    Placement:
        Study: Iron-bound Chest, Leather-bound Book, Apple, Wooden Box, Letter
        Iron-bound Chest (locked): Golden Goblet
        Wooden Box (open): Velvet Pouch (open): Copper Ring
        Stairhead: Stone
        Silver Key: nowhere until revealed
    """
    return WorldModel(
        characters=[
            Character(
                name="Master Aldous",
                aliases=["Aldous"],
                personality=["ambitious", "confident"],
                goals=["perfect the draught"],
            ),
            Character(name="Wren", personality=["hurried", "anxious"]),
            Character(name="Old Tom"),
        ],
        settings=study_settings,
        objects=study_objects,
        world_state=WorldState(
            current_location="Study",
            time="Day 1, Morning",
            player_inventory=[],
            character_locations=[
                CharacterLocation(character_name="Master Aldous", location_name="Study"),
                CharacterLocation(character_name="Wren", location_name="Stairhead"),
                CharacterLocation(character_name="Old Tom", location_name="Study"),
            ],
            object_locations=[
                ObjectLocation(object_name="Iron-bound Chest", location_name="Study"),
                ObjectLocation(object_name="Golden Goblet", location_name="Iron-bound Chest"),
                ObjectLocation(object_name="Leather-bound Book", location_name="Study"),
                ObjectLocation(object_name="Apple", location_name="Study"),
                ObjectLocation(object_name="Wooden Box", location_name="Study"),
                ObjectLocation(object_name="Velvet Pouch", location_name="Wooden Box"),
                ObjectLocation(object_name="Copper Ring", location_name="Velvet Pouch"),
                ObjectLocation(object_name="Letter", location_name="Study"),
                ObjectLocation(object_name="Stone", location_name="Stairhead"),
            ],
        ),
    )


@pytest.fixture
def world_factory():
    """Factory for small single-room worlds.

    Usage:
        world = world_factory(
            objects=[make_object("Apple", is_edible="true")],
            here=["Apple"],
            inventory=[],
        )
    """

    def _create(
        objects: list[WorldObject],
        here: list[str] | None = None,
        inventory: list[str] | None = None,
        inside: dict[str, str] | None = None,
        location: str = "Study",
        time: str = "Day 1, Morning",
    ) -> WorldModel:
        placements = [
            ObjectLocation(object_name=name, location_name=location) for name in (here or [])
        ]
        placements += [
            ObjectLocation(object_name=name, location_name=container)
            for name, container in (inside or {}).items()
        ]
        return WorldModel(
            settings=[Setting(name=location), Setting(name="Elsewhere")],
            objects=objects,
            world_state=WorldState(
                current_location=location,
                time=time,
                player_inventory=list(inventory or []),
                object_locations=placements,
            ),
        )

    return _create


# =============================================================================
# Engine Fixtures
# =============================================================================


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source."""
    return random.Random(42)


@pytest.fixture
def parser() -> CommandParser:
    return CommandParser()


@pytest.fixture
def resolver() -> ObjectResolver:
    return ObjectResolver()


@pytest.fixture
def dispatcher(rng) -> VerbDispatcher:
    """Dispatcher with a seeded random source."""
    return VerbDispatcher(rng=rng)
