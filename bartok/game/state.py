"""Turn phase enumeration."""

from enum import Enum, auto


class TurnPhase(Enum):
    """
    Global turn phase, owned by the game controller.

    Flow: IDLE → PRE → WAITING → POST → PRE → ... → GAME_OVER
    """

    # Dealing, before the first turn
    IDLE = auto()

    # A participant's turn has started, no move issued yet
    PRE = auto()

    # A card is travelling; the turn ends when it lands
    WAITING = auto()

    # The move landed, the turn is being passed
    POST = auto()

    # Somebody emptied their hand
    GAME_OVER = auto()

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()


VALID_TRANSITIONS: dict[TurnPhase, list[TurnPhase]] = {
    TurnPhase.IDLE: [TurnPhase.PRE, TurnPhase.GAME_OVER],
    TurnPhase.PRE: [TurnPhase.PRE, TurnPhase.WAITING, TurnPhase.GAME_OVER],
    TurnPhase.WAITING: [TurnPhase.POST, TurnPhase.GAME_OVER],
    TurnPhase.POST: [TurnPhase.PRE, TurnPhase.GAME_OVER],
    TurnPhase.GAME_OVER: [],
}


def is_valid_transition(from_phase: TurnPhase, to_phase: TurnPhase) -> bool:
    """
    Check if a phase transition is valid.

    Args:
        from_phase: Current phase
        to_phase: Desired phase

    Returns:
        True if the transition is allowed
    """
    return to_phase in VALID_TRANSITIONS.get(from_phase, [])
