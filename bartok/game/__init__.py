"""Turn phases, events and the controller interface.

The concrete controller lives in :mod:`bartok.game.engine`, which imports
the participant; import it from there.
"""

from bartok.game.events import GameEvent, EventType
from bartok.game.state import TurnPhase
from bartok.game.controller import GameController

__all__ = [
    "GameEvent",
    "EventType",
    "TurnPhase",
    "GameController",
]
