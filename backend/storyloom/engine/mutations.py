"""
Mutation validator - safely merges externally proposed world edits

Mutations arrive from untrusted collaborators (usually an AI service).
Each one is validated before it touches the World Model:

- ADD_OBJECT with a malformed payload, or naming an object or setting
  that already exists, is rejected quietly: the model comes back unchanged
  with an empty narrative. Replaying the same mutation is therefore harmless.
- ENHANCE_NARRATIVE never touches the model; it only produces text.
- Anything that is not a mutation envelope, or names an unknown type, is a
  contract violation and raises.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from storyloom.errors import MutationError, UnknownMutationError
from storyloom.models.event import Event, EventType
from storyloom.models.mutation import Mutation, MutationResult, MutationType
from storyloom.models.world import WorldModel, WorldObject

logger = logging.getLogger(__name__)


class MutationValidator:
    """Validates and applies single mutations.

    Example:
        >>> validator = MutationValidator()
        >>> result = validator.apply(
        ...     {"type": "ADD_OBJECT",
        ...      "payload": {"name": "A forgotten coin", "properties": []},
        ...      "reason": "The world shifts in subtle ways."},
        ...     world,
        ... )
        >>> result.narrative_update
        'A new detail materializes: A forgotten coin. (Reason: The world shifts in subtle ways.)'
    """

    def parse(self, mutation: Mutation | Mapping[str, Any]) -> Mutation:
        """Parse an untrusted mutation envelope.

        Raises:
            MutationError: If the envelope is not a mapping with a type
            UnknownMutationError: If the type is not supported
        """
        if isinstance(mutation, Mutation):
            envelope = mutation
        elif isinstance(mutation, Mapping):
            try:
                envelope = Mutation.model_validate(dict(mutation))
            except ValidationError as e:
                logger.error(f"Malformed mutation envelope: {e}")
                raise MutationError(f"Malformed mutation envelope: {e}") from e
        else:
            logger.error(f"Mutation is not a mapping: {type(mutation).__name__}")
            raise MutationError(
                f"Mutation must be a mapping, got {type(mutation).__name__}"
            )

        known = {t.value for t in MutationType}
        if envelope.type not in known:
            logger.error(f"Unknown mutation type: {envelope.type}")
            raise UnknownMutationError(f"Unknown mutation type: {envelope.type}")
        return envelope

    def apply(
        self,
        mutation: Mutation | Mapping[str, Any],
        world: WorldModel,
    ) -> MutationResult:
        """Validate a mutation and apply it to a copy of the world.

        Args:
            mutation: The proposed mutation
            world: The current World Model (never mutated)

        Returns:
            MutationResult; on rejection ``world`` is the input model and
            ``narrative_update`` is empty
        """
        envelope = self.parse(mutation)
        mutation_type = MutationType(envelope.type)

        if mutation_type == MutationType.ADD_OBJECT:
            return self._add_object(envelope, world)
        return self._enhance_narrative(envelope, world)

    def _add_object(self, mutation: Mutation, world: WorldModel) -> MutationResult:
        try:
            new_object = WorldObject.model_validate(mutation.payload)
        except ValidationError as e:
            logger.warning(f"ADD_OBJECT rejected, invalid payload: {e}")
            return MutationResult(world=world)

        if world.find_object(new_object.name) is not None:
            logger.info(f"ADD_OBJECT rejected: object '{new_object.name}' already exists")
            return MutationResult(world=world)

        lowered = new_object.name.lower()
        if any(s.name.lower() == lowered for s in world.settings):
            logger.info(f"ADD_OBJECT rejected: '{new_object.name}' is the name of a setting")
            return MutationResult(world=world)

        updated = world.clone()
        here = updated.world_state.current_location
        updated.objects.append(new_object)
        updated.place(new_object.name, here)

        logger.info(f"ADD_OBJECT applied: '{new_object.name}' at {here}")
        return MutationResult(
            world=updated,
            narrative_update=(
                f"A new detail materializes: {new_object.name}. (Reason: {mutation.reason})"
            ),
            applied=True,
            event=Event(
                type=EventType.OBJECT_ADDED,
                subject=new_object.name,
                target=here,
                context={"reason": mutation.reason},
            ),
        )

    def _enhance_narrative(self, mutation: Mutation, world: WorldModel) -> MutationResult:
        text = mutation.payload
        if not isinstance(text, str) or not text.strip():
            logger.warning("ENHANCE_NARRATIVE rejected: payload is not text")
            return MutationResult(world=world)

        return MutationResult(
            world=world,
            narrative_update=f"{text.strip()} (Reason: {mutation.reason})",
            applied=True,
            event=Event(
                type=EventType.NARRATIVE_ENHANCED,
                context={"reason": mutation.reason},
            ),
        )


def apply_mutation(
    mutation: Mutation | Mapping[str, Any],
    world: WorldModel,
) -> MutationResult:
    """Apply a single mutation with a default validator."""
    return MutationValidator().apply(mutation, world)
