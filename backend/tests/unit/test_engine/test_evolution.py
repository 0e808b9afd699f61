"""Unit tests for the offline evolution proposer."""

import random

from storyloom.engine.evolution import ENHANCEMENTS, OBJECT_POOL, propose_evolution
from storyloom.models.mutation import MutationType
from tests.factories import make_object


class TestProposeEvolution:
    """Tests for propose_evolution."""

    def test_usually_nothing(self, study_world) -> None:
        assert propose_evolution(study_world, random.Random(0), chance=0.0) is None

    def test_proposals_are_well_formed(self, study_world) -> None:
        rng = random.Random(8)
        seen = set()
        for _ in range(50):
            proposal = propose_evolution(study_world, rng, chance=1.0)
            if proposal is None:
                continue
            seen.add(proposal.type)
            if proposal.type == MutationType.ADD_OBJECT.value:
                assert proposal.payload["name"] in {o["name"] for o in OBJECT_POOL}
                assert proposal.reason == "The world shifts in subtle ways."
            else:
                assert proposal.payload in ENHANCEMENTS
                assert proposal.reason == "A detail sharpens into focus."

        assert seen == {MutationType.ADD_OBJECT.value, MutationType.ENHANCE_NARRATIVE.value}

    def test_existing_object_not_proposed(self, study_world) -> None:
        for entry in OBJECT_POOL:
            study_world.objects.append(make_object(entry["name"]))
        rng = random.Random(3)

        for _ in range(30):
            proposal = propose_evolution(study_world, rng, chance=1.0)
            assert proposal is None or proposal.type == MutationType.ENHANCE_NARRATIVE.value

    def test_payload_is_a_copy(self, study_world) -> None:
        rng = random.Random(8)
        for _ in range(50):
            proposal = propose_evolution(study_world, rng, chance=1.0)
            if proposal is not None and proposal.type == MutationType.ADD_OBJECT.value:
                proposal.payload["properties"].append({"key": "x", "value": "y"})
                break

        assert all(len(entry["properties"]) == 1 for entry in OBJECT_POOL)
