"""Unit tests for TalkHandler and GiveHandler."""

import random

import pytest

from storyloom.engine.handlers.social import GiveHandler, TalkHandler
from storyloom.models.event import RejectionCode


class TestTalkHandler:
    """Tests for talk / ask."""

    @pytest.fixture
    def handler(self, resolver) -> TalkHandler:
        return TalkHandler(resolver, random.Random(3))

    def talk(self, handler, parser, world, raw):
        command = parser.parse(raw)
        result = handler.validate(command, world)
        if not result.valid:
            return result, result.rejection_reason
        return result, handler.execute(command, result, world)

    def test_ambitious_character(self, handler, parser, study_world) -> None:
        _, narrative = self.talk(handler, parser, study_world, "talk to master aldous")

        assert narrative.startswith('Master Aldous sizes you up. "')
        assert any(
            line in narrative
            for line in ("State your purpose.", "Do not waste my time.", "Success favors the bold.")
        )

    def test_alias_and_topic(self, handler, parser, study_world) -> None:
        result, _ = self.talk(handler, parser, study_world, "ask aldous about the chest")

        assert result.valid is True
        assert result.context["subject"] == "Master Aldous"

    def test_silent_character(self, handler, parser, study_world) -> None:
        _, narrative = self.talk(handler, parser, study_world, "talk to old tom")

        assert narrative == "Old Tom nods at you but doesn't say anything."

    def test_anxious_character(self, handler, parser, study_world) -> None:
        study_world.world_state.current_location = "Stairhead"

        _, narrative = self.talk(handler, parser, study_world, "talk to wren")

        assert narrative.endswith("Wren mutters, barely looking at you.")

    def test_character_elsewhere(self, handler, parser, study_world) -> None:
        result, narrative = self.talk(handler, parser, study_world, "talk to wren")

        assert result.rejection_code == RejectionCode.CHARACTER_NOT_HERE
        assert narrative == 'You don\'t see anyone named "wren" here.'

    def test_no_one(self, handler, parser, study_world) -> None:
        result, narrative = self.talk(handler, parser, study_world, "talk")

        assert narrative == "Who do you want to talk to?"

    def test_same_seed_same_line(self, resolver, parser, study_world) -> None:
        lines = []
        for _ in range(2):
            handler = TalkHandler(resolver, random.Random(11))
            _, narrative = self.talk(handler, parser, study_world, "talk to aldous")
            lines.append(narrative)

        assert lines[0] == lines[1]


class TestGiveHandler:
    """Tests for give."""

    @pytest.fixture
    def handler(self, resolver) -> GiveHandler:
        return GiveHandler(resolver)

    def test_give_consumes_item(self, handler, parser, study_world) -> None:
        study_world.give_to_player("Apple")
        command = parser.parse("give apple to aldous")

        result = handler.validate(command, study_world)
        narrative = handler.execute(command, result, study_world)

        assert narrative == "You give the Apple to Master Aldous."
        assert study_world.get_object("Apple") is None
        assert study_world.world_state.player_inventory == []

    def test_must_be_held(self, handler, parser, study_world) -> None:
        result = handler.validate(parser.parse("give apple to aldous"), study_world)

        assert result.rejection_code == RejectionCode.NOT_CARRIED

    def test_recipient_missing(self, handler, parser, study_world) -> None:
        study_world.give_to_player("Apple")

        result = handler.validate(parser.parse("give apple"), study_world)

        assert result.rejection_reason == "Who do you want to give the Apple to?"

    def test_recipient_elsewhere(self, handler, parser, study_world) -> None:
        study_world.give_to_player("Apple")

        result = handler.validate(parser.parse("give apple to wren"), study_world)

        assert result.rejection_code == RejectionCode.CHARACTER_NOT_HERE
