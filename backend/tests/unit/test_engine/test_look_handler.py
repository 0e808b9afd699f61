"""Unit tests for LookHandler and InventoryHandler."""

import pytest

from storyloom.engine.handlers.look import InventoryHandler, LookHandler
from storyloom.models.event import EventType, RejectionCode


class TestLookHandler:
    """Tests for look / examine."""

    @pytest.fixture
    def handler(self, resolver) -> LookHandler:
        return LookHandler(resolver)

    @pytest.fixture
    def look(self, handler, parser, study_world):
        """Run a look command through validate and execute."""

        def _look(raw: str):
            command = parser.parse(raw)
            result = handler.validate(command, study_world)
            if not result.valid:
                return result, result.rejection_reason
            return result, handler.execute(command, result, study_world)

        return _look

    def test_room_description(self, look) -> None:
        result, narrative = look("look")

        assert result.context["mode"] == "room"
        assert narrative.splitlines() == [
            "You are in Study. dusty cluttered",
            "You see: Master Aldous, Old Tom.",
            "There is a Iron-bound Chest (closed), Leather-bound Book, Apple, "
            "Wooden Box (open), Letter here.",
        ]

    @pytest.mark.parametrize("verb", ["l", "examine", "x"])
    def test_aliases(self, handler, verb) -> None:
        assert verb in handler.verbs

    def test_closed_container(self, look) -> None:
        result, narrative = look("look in iron-bound chest")

        assert result.context["event_type"] == EventType.CONTAINER_SEARCHED
        assert narrative == "The Iron-bound Chest is closed."

    def test_open_container_lists_contents(self, look) -> None:
        _, narrative = look("look in wooden box")

        assert narrative == "Inside the Wooden Box, you see: Velvet Pouch (open)."

    def test_empty_container(self, look, study_world) -> None:
        study_world.give_to_player("Copper Ring")

        _, narrative = look("look inside velvet pouch")

        assert narrative == "The Velvet Pouch is empty."

    def test_object_properties_verbatim(self, look, study_world) -> None:
        study_world.get_object("Iron-bound Chest").set_flag("is_open", True)

        _, narrative = look("examine golden goblet")

        assert narrative == "Golden Goblet: gold, exquisitely crafted."

    def test_look_at(self, look) -> None:
        result, narrative = look("look at letter")

        assert result.valid
        assert narrative == "Letter: Meet me at the tower at dusk."

    def test_character(self, look) -> None:
        result, narrative = look("look at aldous")

        assert result.context["event_type"] == EventType.CHARACTER_EXAMINED
        assert narrative == (
            "Master Aldous seems ambitious and confident. Their goal is to perfect the draught."
        )

    def test_unknown_target(self, look) -> None:
        result, narrative = look("look at unicorn")

        assert result.rejection_code == RejectionCode.TARGET_NOT_FOUND
        assert narrative == "You see nothing special about the unicorn."

    def test_look_in_non_container(self, look) -> None:
        result, _ = look("look in apple")

        assert result.rejection_code == RejectionCode.NOT_A_CONTAINER

    def test_look_in_nothing(self, look) -> None:
        result, narrative = look("look in")

        assert result.rejection_code == RejectionCode.MISSING_TARGET
        assert narrative == "What do you want to look in?"


class TestInventoryHandler:
    """Tests for inventory."""

    @pytest.fixture
    def handler(self, resolver) -> InventoryHandler:
        return InventoryHandler(resolver)

    def test_empty(self, handler, parser, study_world) -> None:
        command = parser.parse("inventory")
        result = handler.validate(command, study_world)

        assert handler.execute(command, result, study_world) == "You are not carrying anything."

    def test_lists_held_items(self, handler, parser, study_world) -> None:
        study_world.give_to_player("Apple")
        study_world.give_to_player("Letter")
        command = parser.parse("i")
        result = handler.validate(command, study_world)

        assert handler.execute(command, result, study_world) == "You have: Apple, Letter."
