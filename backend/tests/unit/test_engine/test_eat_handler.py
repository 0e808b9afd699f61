"""Unit tests for EatHandler."""

import pytest

from storyloom.engine.handlers.consume import EatHandler
from storyloom.models.event import RejectionCode
from tests.factories import make_object


class TestEatHandler:
    """Tests for eat."""

    @pytest.fixture
    def handler(self, resolver) -> EatHandler:
        return EatHandler(resolver)

    def test_eat_from_room(self, handler, parser, study_world) -> None:
        command = parser.parse("eat apple")

        result = handler.validate(command, study_world)
        narrative = handler.execute(command, result, study_world)

        assert narrative == "You eat the Apple. You feel refreshed."
        assert study_world.get_object("Apple") is None
        assert study_world.location_of("Apple") is None
        assert "Apple" not in study_world.world_state.player_inventory

    def test_eat_held_item_without_effect(self, handler, parser, world_factory) -> None:
        world = world_factory(
            objects=[make_object("Bread", is_edible="true")],
            inventory=["Bread"],
        )
        command = parser.parse("eat bread")

        result = handler.validate(command, world)

        assert handler.execute(command, result, world) == "You eat the Bread. It's quite tasty."
        assert world.world_state.player_inventory == []

    def test_not_edible(self, handler, parser, study_world) -> None:
        result = handler.validate(parser.parse("eat letter"), study_world)

        assert result.rejection_code == RejectionCode.NOT_EDIBLE
        assert result.rejection_reason == "You can't eat the Letter."

    def test_not_found(self, handler, parser, study_world) -> None:
        result = handler.validate(parser.parse("eat cake"), study_world)

        assert result.rejection_reason == "You don't have or see any cake to eat."
