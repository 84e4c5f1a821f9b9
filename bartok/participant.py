"""A seat at the table: its hand, the hand's fan, and the automated turn."""

import logging
from enum import Enum, auto
from random import Random

from bartok.card_entity import MOVING_SORT_LAYER, CardEntity, CardState
from bartok.game.controller import GameController
from bartok.game.state import TurnPhase
from bartok.layout import HandLayout, fan_slots

logger = logging.getLogger(__name__)


class ParticipantKind(Enum):
    """Who decides what a participant plays."""

    HUMAN = auto()
    AUTOMATED = auto()


class Participant:
    """
    One seat in the game, human or automated.

    The participant owns the membership of its hand. Card entities are
    shared with the controller; the participant only requests moves on them
    and is told when a move it registered for has landed.
    """

    def __init__(
        self,
        kind: ParticipantKind,
        index: int,
        hand_layout: HandLayout,
        game: GameController,
        rng: Random | None = None,
    ) -> None:
        """
        Initialize a participant with an empty hand.

        Args:
            kind: Human or automated, fixed for the game
            index: Seat number, stable for the game
            hand_layout: Anchor of this participant's hand on the table
            game: Controller this participant reports to
            rng: Random number generator for choosing among legal plays
        """
        self.kind = kind
        self.index = index
        self.hand_layout = hand_layout
        self.game = game
        self._rng = rng or Random()
        self._hand: list[CardEntity] = []

    @property
    def hand(self) -> list[CardEntity]:
        """Return the cards held, in display order."""
        return self._hand.copy()

    @property
    def is_human(self) -> bool:
        return self.kind is ParticipantKind.HUMAN

    def add_card(self, card: CardEntity) -> CardEntity:
        """
        Take a card into the hand and re-fan.

        A human's hand is re-sorted by rank after every add. Legality is the
        controller's business and is not checked here.

        Args:
            card: Card entity not held by anybody

        Returns:
            The added card
        """
        if card is None:
            raise ValueError("Cannot add a missing card to a hand")
        if any(held is card for held in self._hand):
            raise ValueError(f"{card} is already in hand {self.index}")

        self._hand.append(card)
        if self.is_human:
            self._hand = sorted(self._hand, key=lambda cd: cd.rank)

        card.sort_layer = MOVING_SORT_LAYER
        card.eventual_sort_layer = self.hand_layout.layer_name

        self.fan_hand()
        return card

    def remove_card(self, card: CardEntity) -> CardEntity:
        """
        Take a card out of the hand and re-fan.

        Removing a card that is not held leaves the hand as it is.

        Args:
            card: Card to remove

        Returns:
            The same card
        """
        for i, held in enumerate(self._hand):
            if held is card:
                del self._hand[i]
                break

        self.fan_hand()
        return card

    def fan_hand(self) -> None:
        """Send every held card to its slot in the fan."""
        slots = fan_slots(
            len(self._hand),
            self.hand_layout,
            self.game.hand_fan_degrees,
            self.game.card_height,
        )
        # Outside the initial deal, cards start moving at once
        immediate = self.game.phase is not TurnPhase.IDLE

        for card, slot in zip(self._hand, slots):
            card.move_to(slot.position, slot.rotation, immediate=immediate)
            card.state = CardState.TO_HAND
            card.face_up = self.is_human
            card.eventual_sort_order = slot.sort_order

    def take_turn(self) -> CardEntity | None:
        """
        Decide and start an automated participant's move.

        Plays a random legal card, or draws when there is none. The turn
        only ends when the moved card lands and reports back through
        :meth:`on_card_move_complete`. Human turns are driven by input, so
        this is a no-op for them.

        Returns:
            The card that was played or drawn, None for a human
        """
        if self.is_human:
            return None

        self.game.wait_for_move()

        valid_cards = [cd for cd in self._hand if self.game.is_valid_play(cd)]

        if not valid_cards:
            card = self.add_card(self.game.draw())
            card.callback_participant = self
            logger.debug("Player %d has no legal play, drew %s", self.index, card)
            return card

        card = self._rng.choice(valid_cards)
        self.remove_card(card)
        self.game.move_to_target(card)
        card.callback_participant = self
        logger.debug(
            "Player %d plays %s (%d legal)", self.index, card, len(valid_cards)
        )
        return card

    def on_card_move_complete(self, card: CardEntity) -> None:
        """A move this participant registered for has landed; pass the turn."""
        logger.debug("Player %d: %s finished moving", self.index, card)
        self.game.pass_turn()

    def __str__(self) -> str:
        kind = "human" if self.is_human else "ai"
        return f"Player{self.index}[{kind}]"

    def __repr__(self) -> str:
        return (
            f"Participant(index={self.index}, kind={self.kind.name}, "
            f"cards={len(self._hand)})"
        )
