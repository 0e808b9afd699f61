"""
Structured world time.

World documents store time as a string such as "Day 3, Evening". Inside
the engine it is a ``WorldTime`` value; the string form only exists at the
serialization boundary.

Example:
    >>> t = WorldTime.parse("Day 3, Night")
    >>> t.advance()
    WorldTime(day=4, period=<Period.MORNING: 'Morning'>, label=None)
    >>> str(WorldTime.parse("Day 1, Dreary Afternoon"))
    'Day 1, Dreary Afternoon'
"""

from __future__ import annotations

import re
from enum import Enum

from pydantic import BaseModel, Field


class Period(str, Enum):
    """Parts of the day, in cycle order."""

    MORNING = "Morning"
    AFTERNOON = "Afternoon"
    EVENING = "Evening"
    NIGHT = "Night"


PERIOD_CYCLE: list[Period] = [
    Period.MORNING,
    Period.AFTERNOON,
    Period.EVENING,
    Period.NIGHT,
]

_DAY_PATTERN = re.compile(r"\d+")


class WorldTime(BaseModel):
    """A point in world time.

    Attributes:
        day: Day number, starting at 1
        period: Part of the day
        label: Original decorated text (e.g. "Day 2, Dreary Afternoon"),
            kept for display until the time next advances
    """

    day: int = Field(default=1, ge=1)
    period: Period = Period.MORNING
    label: str | None = None

    model_config = {"frozen": True}

    @classmethod
    def parse(cls, text: str) -> "WorldTime":
        """Parse a "Day N, <Period>" string.

        The day is the first number before the comma (default 1). The period
        is found by case-insensitive substring search, so decorated phrases
        still resolve. Text with no recognizable period parses as Night,
        which makes the next advance begin a new day.
        """
        text = (text or "").strip()
        head, _, tail = text.partition(",")
        day_match = _DAY_PATTERN.search(head)
        day = max(int(day_match.group(0)), 1) if day_match else 1

        haystack = (tail or head).lower()
        period = next(
            (p for p in PERIOD_CYCLE if p.value.lower() in haystack),
            None,
        )
        if period is None:
            return cls(day=day, period=Period.NIGHT, label=text or None)

        canonical = f"Day {day}, {period.value}"
        label = text if text and text != canonical else None
        return cls(day=day, period=period, label=label)

    def advance(self) -> "WorldTime":
        """Return the next period, rolling Night over into the next day."""
        index = PERIOD_CYCLE.index(self.period)
        if index == len(PERIOD_CYCLE) - 1:
            return WorldTime(day=self.day + 1, period=PERIOD_CYCLE[0])
        return WorldTime(day=self.day, period=PERIOD_CYCLE[index + 1])

    def render(self) -> str:
        if self.label:
            return self.label
        return f"Day {self.day}, {self.period.value}"

    def __str__(self) -> str:
        return self.render()
