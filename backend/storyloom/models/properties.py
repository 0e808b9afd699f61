"""
Well-known object property keys.

Objects carry no class; their behavior lives entirely in an ordered list of
string key/value pairs. The keys below are the ones the verb handlers read.
Any other key is kept verbatim so world content can define its own verbs
(an ``on_polish`` property answers the command "polish <object>").

Key families:
    Containers: IS_CONTAINER, IS_OPEN, IS_LOCKED, KEY_ID
    Tools: ITEM_ID, SURFACE, ON_BREAK_DESTROY, plus on_use_<item_id> and
        on_use_on_<surface> templates
    Reading: CONTENT, CONTENT_READ, CONTENT_UNREAD, HAS_BEEN_READ,
        ON_READ_EFFECT, REVEALS
    Food: IS_EDIBLE, EFFECT
"""

from __future__ import annotations

from enum import Enum


class PropertyKey(str, Enum):
    """Property keys with engine-defined meaning."""

    # Containers
    IS_CONTAINER = "is_container"
    IS_OPEN = "is_open"
    IS_LOCKED = "is_locked"
    KEY_ID = "key_id"

    # Tools
    ITEM_ID = "item_id"
    SURFACE = "surface"
    ON_BREAK_DESTROY = "on_break_destroy"
    ON_USE = "on_use"

    # Reading
    CONTENT = "content"
    CONTENT_READ = "content_read"
    CONTENT_UNREAD = "content_unread"
    HAS_BEEN_READ = "has_been_read"
    ON_READ_EFFECT = "on_read_effect"
    REVEALS = "reveals"

    # Food
    IS_EDIBLE = "is_edible"
    EFFECT = "effect"


# Keys whose value must be the literal string "true" or "false"
BOOLEAN_KEYS: frozenset[str] = frozenset(
    {
        PropertyKey.IS_CONTAINER.value,
        PropertyKey.IS_OPEN.value,
        PropertyKey.IS_LOCKED.value,
        PropertyKey.IS_EDIBLE.value,
        PropertyKey.HAS_BEEN_READ.value,
        PropertyKey.ON_BREAK_DESTROY.value,
    }
)

# Recognized values for on_read_effect
READ_EFFECT_REVEALS_KEY = "reveals_key"
KNOWN_READ_EFFECTS: frozenset[str] = frozenset({READ_EFFECT_REVEALS_KEY})

# Object revealed by a reveals_key read effect when no ``reveals`` property is set
DEFAULT_REVEALED_OBJECT = "Silver Key"


def use_with_key(item_id: str) -> str:
    """Target property consulted when a tool with ``item_id`` is used on it."""
    return f"on_use_{item_id}"


def use_on_surface_key(surface: str) -> str:
    """Tool property consulted when the tool is used on a ``surface``."""
    return f"on_use_on_{surface}"


def verb_key(verb: str) -> str:
    """Property that defines a content-driven verb."""
    return f"on_{verb}"


def to_bool(value: str | None) -> bool:
    return value is not None and value.strip().lower() == "true"
