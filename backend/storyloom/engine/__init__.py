"""Simulation engine components.

- CommandParser: raw text -> ParsedCommand (parser.py)
- ObjectResolver: names -> objects in scope (resolver.py)
- VerbDispatcher: ParsedCommand -> narrative + updated world (dispatcher.py)
- MutationValidator: external world edits (mutations.py)
- TickEngine: time and NPC movement (ticks.py)
- GameSession: stateful wrapper owning one world (session.py)

Import directly from submodules:
    from storyloom.engine.dispatcher import VerbDispatcher
    from storyloom.engine.session import GameSession
"""
