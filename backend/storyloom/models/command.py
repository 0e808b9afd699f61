"""
Parsed command model.

A ParsedCommand is the structured form of one line of player input, split
into verb / direct object / preposition / indirect object.

Example:
    >>> ParsedCommand(
    ...     verb="unlock",
    ...     direct_object="iron-bound chest",
    ...     preposition="with",
    ...     indirect_object="silver key",
    ... )
"""

from __future__ import annotations

from pydantic import BaseModel


class ParsedCommand(BaseModel):
    """Structured representation of a player command.

    Attributes:
        verb: First word of the input ("" for empty input)
        direct_object: Words between the verb and the preposition
        preposition: The splitting preposition, if one was found
        indirect_object: Words after the preposition
        raw_input: The original input string
    """

    verb: str
    direct_object: str = ""
    preposition: str | None = None
    indirect_object: str | None = None
    raw_input: str = ""

    @property
    def has_object(self) -> bool:
        return bool(self.direct_object)
