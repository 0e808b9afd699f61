"""
Verb handlers for the dispatcher.

Each handler implements the VerbHandler protocol:
    - validate(): Check if the command is allowed (no world changes)
    - execute(): Apply state changes to the dispatcher's copy, return narrative
    - create_event(): Describe what happened

Example:
    >>> handler = TakeHandler(resolver)
    >>> result = handler.validate(command, world)
    >>> if result.valid:
    ...     narrative = handler.execute(command, result, world)
    ...     event = handler.create_event(command, result, world)
"""

from storyloom.engine.handlers.consume import EatHandler
from storyloom.engine.handlers.containers import CloseHandler, OpenHandler
from storyloom.engine.handlers.flavor import GenericVerbHandler, ShaveHandler
from storyloom.engine.handlers.look import InventoryHandler, LookHandler
from storyloom.engine.handlers.movement import GoHandler
from storyloom.engine.handlers.read import ReadHandler
from storyloom.engine.handlers.social import GiveHandler, TalkHandler
from storyloom.engine.handlers.take import DropHandler, TakeHandler
from storyloom.engine.handlers.use import UseHandler

__all__ = [
    "CloseHandler",
    "DropHandler",
    "EatHandler",
    "GenericVerbHandler",
    "GiveHandler",
    "GoHandler",
    "InventoryHandler",
    "LookHandler",
    "OpenHandler",
    "ReadHandler",
    "ShaveHandler",
    "TakeHandler",
    "TalkHandler",
    "UseHandler",
]
