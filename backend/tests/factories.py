"""Small builders shared by the test modules."""

from __future__ import annotations

from storyloom.models.world import ObjectProperty, WorldObject


def make_object(name: str, **properties: str) -> WorldObject:
    """Build a WorldObject from keyword properties (values as strings)."""
    return WorldObject(
        name=name,
        properties=[ObjectProperty(key=k, value=v) for k, v in properties.items()],
    )
