"""
Rule-based command parser.

Splits player input into verb, direct object, preposition and indirect
object. The parser never fails: any string produces a ParsedCommand, and
missing parts are left empty for the handlers to complain about.
"""

from __future__ import annotations

from storyloom.models.command import ParsedCommand


class CommandParser:
    """Parse player input into a ParsedCommand.

    The first token is the verb. The preposition set is checked in the
    order below, and the first preposition that occurs after the verb
    splits the remaining words.

    Example:
        >>> parser = CommandParser()
        >>> cmd = parser.parse("use silver key on iron-bound chest")
        >>> cmd.verb, cmd.direct_object, cmd.preposition, cmd.indirect_object
        ('use', 'silver key', 'on', 'iron-bound chest')

        >>> parser.parse("take apple").indirect_object is None
        True
    """

    PREPOSITIONS: tuple[str, ...] = (
        "on",
        "in",
        "from",
        "with",
        "at",
        "to",
        "inside",
        "using",
    )

    def parse(self, raw_input: str) -> ParsedCommand:
        """Parse a raw command string.

        Args:
            raw_input: The raw player input

        Returns:
            ParsedCommand; ``verb`` is "" for blank input
        """
        tokens = (raw_input or "").lower().split()
        if not tokens:
            return ParsedCommand(verb="", raw_input=raw_input or "")

        verb = tokens[0]
        split_at = self._find_preposition(tokens)

        if split_at is None:
            return ParsedCommand(
                verb=verb,
                direct_object=" ".join(tokens[1:]),
                raw_input=raw_input,
            )

        return ParsedCommand(
            verb=verb,
            direct_object=" ".join(tokens[1:split_at]),
            preposition=tokens[split_at],
            indirect_object=" ".join(tokens[split_at + 1:]),
            raw_input=raw_input,
        )

    def _find_preposition(self, tokens: list[str]) -> int | None:
        for preposition in self.PREPOSITIONS:
            for index in range(1, len(tokens)):
                if tokens[index] == preposition:
                    return index
        return None
