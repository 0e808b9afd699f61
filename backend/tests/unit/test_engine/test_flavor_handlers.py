"""Unit tests for ShaveHandler and GenericVerbHandler."""

import pytest

from storyloom.engine.handlers.flavor import GenericVerbHandler, ShaveHandler
from storyloom.models.event import RejectionCode
from tests.factories import make_object


class TestShaveHandler:
    """Tests for shave."""

    @pytest.fixture
    def handler(self, resolver) -> ShaveHandler:
        return ShaveHandler(resolver)

    def shave(self, handler, parser, world):
        command = parser.parse("shave")
        result = handler.validate(command, world)
        if not result.valid:
            return result, result.rejection_reason
        return result, handler.execute(command, result, world)

    def test_with_lather(self, handler, parser, world_factory) -> None:
        world = world_factory(
            objects=[make_object("A Razor"), make_object("Bowl of Lather")],
            here=["A Razor", "Bowl of Lather"],
        )

        _, narrative = self.shave(handler, parser, world)

        assert narrative == (
            "Using the lather and razor, you have a remarkably close and refreshing shave."
        )

    def test_held_razor_without_lather(self, handler, parser, world_factory) -> None:
        world = world_factory(objects=[make_object("Straight Razor")], inventory=["Straight Razor"])

        _, narrative = self.shave(handler, parser, world)

        assert narrative == "You have a nice, clean shave. You feel refreshed."

    def test_no_razor(self, handler, parser, study_world) -> None:
        result, narrative = self.shave(handler, parser, study_world)

        assert result.rejection_code == RejectionCode.NO_TOOL
        assert narrative == "You have nothing to shave with."


class TestGenericVerbHandler:
    """Tests for content-defined verbs."""

    @pytest.fixture
    def handler(self, resolver) -> GenericVerbHandler:
        return GenericVerbHandler(resolver)

    @pytest.fixture
    def world(self, world_factory):
        return world_factory(
            objects=[make_object("Brass Lamp", on_polish="The lamp gleams.")],
            here=["Brass Lamp"],
        )

    def test_custom_verb(self, handler, parser, world) -> None:
        command = parser.parse("polish brass lamp")

        result = handler.validate(command, world)

        assert handler.execute(command, result, world) == "The lamp gleams."

    def test_unsupported_verb(self, handler, parser, world) -> None:
        result = handler.validate(parser.parse("lick brass lamp"), world)

        assert result.rejection_code == RejectionCode.UNSUPPORTED_VERB
        assert result.rejection_reason == "You can't lick the Brass Lamp."

    def test_unsupported_verb_unknown_object(self, handler, parser, world) -> None:
        result = handler.validate(parser.parse("lick moon"), world)

        assert result.rejection_reason == "You can't lick the moon."

    def test_unknown_command(self, handler, parser, world) -> None:
        result = handler.validate(parser.parse("dance"), world)

        assert result.rejection_code == RejectionCode.UNKNOWN_COMMAND
        assert result.rejection_reason == "I don't understand that command."
