"""Interface a participant needs from the game controller."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from bartok.game.state import TurnPhase

if TYPE_CHECKING:
    from bartok.card_entity import CardEntity


class GameController(ABC):
    """
    Abstract base class for the central game controller.

    The controller owns the turn phase, the piles and the rules. Participants
    read the phase, ask it about legality and hand it cards, but never write
    the phase themselves.
    """

    @property
    @abstractmethod
    def phase(self) -> TurnPhase:
        """Return the current turn phase."""
        ...

    @property
    @abstractmethod
    def hand_fan_degrees(self) -> float:
        """Return the rotation between neighbouring cards in a fanned hand."""
        ...

    @property
    @abstractmethod
    def card_height(self) -> float:
        """Return the height of a card in table units."""
        ...

    @abstractmethod
    def wait_for_move(self) -> None:
        """Enter the waiting phase while a participant's card is moving."""
        ...

    @abstractmethod
    def is_valid_play(self, card: "CardEntity") -> bool:
        """Check whether a card may be played right now."""
        ...

    @abstractmethod
    def draw(self) -> "CardEntity":
        """Take the top card of the draw pile."""
        ...

    @abstractmethod
    def move_to_target(self, card: "CardEntity") -> "CardEntity":
        """Send a played card to the target slot."""
        ...

    @abstractmethod
    def pass_turn(self, num: int | None = None) -> None:
        """
        End the current turn.

        Args:
            num: Seat to pass to, or None for the next seat in order
        """
        ...
