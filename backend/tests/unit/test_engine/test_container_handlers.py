"""Unit tests for OpenHandler and CloseHandler."""

import pytest

from storyloom.engine.handlers.containers import CloseHandler, OpenHandler
from storyloom.models.event import RejectionCode
from storyloom.models.properties import PropertyKey
from tests.factories import make_object


class TestOpenHandler:
    """Tests for open."""

    @pytest.fixture
    def handler(self, resolver) -> OpenHandler:
        return OpenHandler(resolver)

    def test_locked(self, handler, parser, study_world) -> None:
        result = handler.validate(parser.parse("open iron-bound chest"), study_world)

        assert result.rejection_code == RejectionCode.CONTAINER_LOCKED
        assert result.rejection_reason == "It's locked."

    def test_open_lists_contents(self, handler, parser, study_world) -> None:
        chest = study_world.get_object("Iron-bound Chest")
        chest.set_flag(PropertyKey.IS_LOCKED, False)
        command = parser.parse("open iron-bound chest")

        result = handler.validate(command, study_world)
        narrative = handler.execute(command, result, study_world)

        assert narrative == "You open the Iron-bound Chest. Inside, you see: Golden Goblet."
        assert chest.flag(PropertyKey.IS_OPEN) is True

    def test_open_empty_container(self, handler, parser, world_factory) -> None:
        world = world_factory(
            objects=[make_object("Crate", is_container="true", is_open="false")],
            here=["Crate"],
        )
        command = parser.parse("open crate")

        result = handler.validate(command, world)

        assert handler.execute(command, result, world) == "You open the Crate."

    def test_already_open(self, handler, parser, study_world) -> None:
        result = handler.validate(parser.parse("open wooden box"), study_world)

        assert result.rejection_code == RejectionCode.ALREADY_OPEN
        assert result.rejection_reason == "It's already open."

    def test_not_a_container(self, handler, parser, study_world) -> None:
        result = handler.validate(parser.parse("open apple"), study_world)

        assert result.rejection_code == RejectionCode.NOT_A_CONTAINER
        assert result.rejection_reason == "You can't open that."

    def test_held_container(self, handler, parser, study_world) -> None:
        study_world.give_to_player("Velvet Pouch")

        result = handler.validate(parser.parse("open velvet pouch"), study_world)

        assert result.rejection_code == RejectionCode.ITEM_HELD
        assert "put the Velvet Pouch down" in result.rejection_reason

    def test_unknown(self, handler, parser, study_world) -> None:
        result = handler.validate(parser.parse("open portal"), study_world)

        assert result.rejection_code == RejectionCode.TARGET_NOT_FOUND


class TestCloseHandler:
    """Tests for close."""

    @pytest.fixture
    def handler(self, resolver) -> CloseHandler:
        return CloseHandler(resolver)

    def test_close_open_container(self, handler, parser, study_world) -> None:
        command = parser.parse("close wooden box")

        result = handler.validate(command, study_world)
        narrative = handler.execute(command, result, study_world)

        assert narrative == "You close the Wooden Box."
        assert study_world.get_object("Wooden Box").flag(PropertyKey.IS_OPEN) is False

    def test_already_closed(self, handler, parser, study_world) -> None:
        result = handler.validate(parser.parse("shut iron-bound chest"), study_world)

        assert result.rejection_code == RejectionCode.ALREADY_CLOSED
        assert result.rejection_reason == "It's already closed."
