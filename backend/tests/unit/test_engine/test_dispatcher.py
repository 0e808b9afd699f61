"""Unit tests for VerbDispatcher.

Tests cover:
- Routing of verbs and aliases to handlers
- Copy-on-write: the input world is never mutated
- Refusals return the original world and a rejection event
"""

import random

import pytest

from storyloom.engine.dispatcher import VerbDispatcher, process_command
from storyloom.engine.handlers import GenericVerbHandler, LookHandler, TakeHandler
from storyloom.models.event import EventType, RejectionCode


class TestRouting:
    """Tests for handler lookup."""

    @pytest.mark.parametrize("verb", ["look", "l", "examine"])
    def test_look_aliases(self, dispatcher, verb) -> None:
        assert isinstance(dispatcher.handler_for(verb), LookHandler)

    @pytest.mark.parametrize("verb", ["take", "get"])
    def test_take_aliases(self, dispatcher, verb) -> None:
        assert isinstance(dispatcher.handler_for(verb), TakeHandler)

    def test_unknown_verb_falls_back(self, dispatcher) -> None:
        assert isinstance(dispatcher.handler_for("polish"), GenericVerbHandler)

    def test_verbs_listed(self, dispatcher) -> None:
        assert {"go", "talk", "give", "read", "open", "close", "use", "eat", "shave"} <= set(
            dispatcher.verbs
        )


class TestDispatch:
    """Tests for VerbDispatcher.dispatch."""

    def test_success_returns_new_world(self, dispatcher, study_world) -> None:
        turn = dispatcher.dispatch(study_world, "take apple")

        assert turn.narrative == "You take the Apple."
        assert turn.world is not study_world
        assert turn.world_state.player_inventory == ["Apple"]
        assert turn.event.type == EventType.ITEM_TAKEN
        assert turn.event.subject == "Apple"
        assert turn.rejected is False

    def test_input_world_untouched(self, dispatcher, study_world) -> None:
        before = study_world.to_document()

        dispatcher.dispatch(study_world, "take apple")
        dispatcher.dispatch(study_world, "read leather-bound book")

        assert study_world.to_document() == before

    def test_refusal_returns_original_world(self, dispatcher, study_world) -> None:
        turn = dispatcher.dispatch(study_world, "open iron-bound chest")

        assert turn.narrative == "It's locked."
        assert turn.world is study_world
        assert turn.rejected is True
        assert turn.event.rejection_code == RejectionCode.CONTAINER_LOCKED
        assert turn.event.subject == "Iron-bound Chest"

    def test_blank_command(self, dispatcher, study_world) -> None:
        turn = dispatcher.dispatch(study_world, "   ")

        assert turn.narrative == "I don't understand that command."
        assert turn.event.rejection_code == RejectionCode.UNKNOWN_COMMAND

    def test_accepts_parsed_command(self, dispatcher, parser, study_world) -> None:
        turn = dispatcher.dispatch(study_world, parser.parse("eat apple"))

        assert turn.narrative == "You eat the Apple. You feel refreshed."

    def test_event_context_records_verb(self, dispatcher, study_world) -> None:
        turn = dispatcher.dispatch(study_world, "get apple")

        assert turn.event.context == {"verb": "get"}

    def test_process_command(self, study_world) -> None:
        turn = process_command(study_world, "inventory", rng=random.Random(1))

        assert turn.narrative == "You are not carrying anything."
        assert turn.event.type == EventType.INVENTORY_LISTED

    def test_deterministic_with_seed(self, study_world) -> None:
        first = VerbDispatcher(rng=random.Random(5)).dispatch(study_world, "talk to aldous")
        second = VerbDispatcher(rng=random.Random(5)).dispatch(study_world, "talk to aldous")

        assert first.narrative == second.narrative
