"""
Exception types for contract violations.

Game-logic refusals ("It's locked.") are never raised; they travel back to
the caller as narrative text. The errors below signal that a collaborator
handed the engine something that breaks the World Model contract.
"""


class StoryloomError(ValueError):
    """Base class for all contract violations raised by the engine"""


class WorldIntegrityError(StoryloomError):
    """The World Model breaks one of its invariants"""

    def __init__(self, errors: list[str]):
        self.errors = list(errors)
        detail = "\n  - ".join(self.errors)
        super().__init__(
            f"World model failed integrity check with {len(self.errors)} error(s):\n  - {detail}"
        )


class MutationError(StoryloomError):
    """A mutation envelope could not be understood"""


class UnknownMutationError(MutationError):
    """A mutation named a type the engine does not support"""
