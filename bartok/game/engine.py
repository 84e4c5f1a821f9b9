"""Bartok game controller with a turn phase state machine."""

import logging
from random import Random
from typing import Callable

from pygame.math import Vector3
from transitions import Machine

from bartok.card_entity import MOVING_SORT_LAYER, CardEntity, CardState
from bartok.cards import Deck
from bartok.game.controller import GameController
from bartok.game.events import EventEmitter, EventType, GameEvent
from bartok.game.state import TurnPhase
from bartok.participant import Participant, ParticipantKind
from config import GameConfig, TableConfig, config

logger = logging.getLogger(__name__)

# Offsets towards the viewer for cards resting on the discard pile
TARGET_DEPTH = Vector3(0, 0, -1)
DISCARD_DEPTH = Vector3(0, 0, -0.5)


class BartokGame(GameController):
    """
    Bartok game controller using a state machine.

    Owns the deck, the draw and discard piles, the target card and the turn
    phase. Participants are driven through ``take_turn`` and report back when
    their card lands; the host advances animations through :meth:`update`.
    """

    # State machine states
    STATES = [p.name.lower() for p in TurnPhase]

    # State machine transitions
    TRANSITIONS = [
        {"trigger": "start_turn", "source": ["idle", "pre", "post"], "dest": "pre"},
        {"trigger": "await_move", "source": "pre", "dest": "waiting"},
        {"trigger": "finish_move", "source": "waiting", "dest": "post"},
        {"trigger": "end_game", "source": "*", "dest": "game_over"},
    ]

    def __init__(
        self,
        game_config: GameConfig | None = None,
        table_config: TableConfig | None = None,
        rng: Random | None = None,
    ) -> None:
        """
        Initialize a new game with seated participants and no cards dealt.

        Args:
            game_config: Game settings (uses the global config if not provided)
            table_config: Table layout (uses the global config if not provided)
            rng: Random number generator for reproducible games
        """
        self.config = game_config or config.game
        self.table = table_config or config.table
        if len(self.table.hand_layouts) < self.config.num_players:
            raise ValueError("Every seat needs a hand layout")

        self.rng = rng or Random(config.seed)
        self.events = EventEmitter()

        self.players = [
            Participant(
                kind=(
                    ParticipantKind.HUMAN
                    if i == self.config.human_seat
                    else ParticipantKind.AUTOMATED
                ),
                index=i,
                hand_layout=self.table.hand_layouts[i],
                game=self,
                rng=self.rng,
            )
            for i in range(self.config.num_players)
        ]

        self.cards: list[CardEntity] = []
        self.draw_pile: list[CardEntity] = []
        self.discard_pile: list[CardEntity] = []
        self.target_card: CardEntity | None = None
        self.current_player: Participant | None = None
        self.winner: Participant | None = None
        self.turns_played = 0

        # Initialize state machine
        self.machine = Machine(
            model=self,
            states=self.STATES,
            transitions=self.TRANSITIONS,
            initial="idle",
            auto_transitions=False,
            model_attribute="_machine_state",
        )

    @property
    def phase(self) -> TurnPhase:
        """Get current turn phase as enum."""
        return TurnPhase[self._machine_state.upper()]  # type: ignore

    @property
    def hand_fan_degrees(self) -> float:
        return self.config.hand_fan_degrees

    @property
    def card_height(self) -> float:
        return self.config.card_height

    @property
    def is_over(self) -> bool:
        return self.phase is TurnPhase.GAME_OVER

    def subscribe(
        self,
        handler: Callable[[GameEvent], None],
        event_type: EventType | None = None,
    ) -> None:
        """Subscribe to game events."""
        self.events.subscribe(handler, event_type)

    def deal(self) -> None:
        """
        Shuffle a fresh deck and deal every hand.

        Cards leave the draw pile one at a time, starting with seat 1, each
        staggered a little after the previous one. The first target card is
        flipped last; the first turn starts when it lands.
        """
        if self.cards:
            raise RuntimeError("Cards have already been dealt")

        deck = Deck(rng=self.rng)
        deck.shuffle()
        self.cards = [
            CardEntity(card, move_duration=self.config.move_duration) for card in deck
        ]
        self.draw_pile = list(self.cards)
        self._arrange_draw_pile()

        n = self.config.num_players
        stagger = self.config.draw_time_stagger
        for i in range(self.config.hand_size):
            for j in range(n):
                card = self.draw()
                card.move_delay = stagger * (i * n + j)
                self.players[(j + 1) % n].add_card(card)

        self.events.emit_new(
            EventType.CARDS_DEALT,
            hand_size=self.config.hand_size,
            players=n,
        )

        first = self.draw()
        first.move_delay = stagger * (self.config.hand_size * n + n)
        self._send_to_target(first, immediate=False)
        first.report_finish_to = self._on_first_target

    def _on_first_target(self, card: CardEntity) -> None:
        self.events.emit_new(EventType.GAME_STARTED, target=str(card))
        logger.info("Game started, first target is %s", card)
        self.pass_turn(1)

    def _arrange_draw_pile(self) -> None:
        """Stack the draw pile face down, top card first."""
        origin = Vector3(self.table.draw_pile_position)
        dx, dy = self.table.draw_pile_stagger
        count = len(self.draw_pile)

        for i, card in enumerate(self.draw_pile):
            card.set_transform(origin + Vector3(dx * i, dy * i, 0), 0.0)
            card.state = CardState.DRAWPILE
            card.face_up = False
            card.sort_layer = card.eventual_sort_layer = self.table.draw_pile_layer
            card.sort_order = card.eventual_sort_order = 4 * (count - i)

    def _reshuffle_discards(self) -> None:
        """Turn the discard pile over into a new draw pile."""
        if not self.discard_pile:
            return

        cards = self.discard_pile
        self.discard_pile = []
        self.rng.shuffle(cards)
        self.draw_pile.extend(cards)
        self._arrange_draw_pile()

        self.events.emit_new(EventType.DRAW_PILE_RESHUFFLED, cards=len(cards))
        logger.info("Reshuffled %d discards into the draw pile", len(cards))

    def is_valid_play(self, card: CardEntity) -> bool:
        """
        Check whether a card may be played onto the target.

        A play is legal when it matches the target card's rank or suit.
        Anything may be played onto an empty table.
        """
        if self.target_card is None:
            return True
        return card.card.matches(self.target_card.card)

    def draw(self) -> CardEntity:
        """
        Take the top card of the draw pile.

        An empty draw pile is refilled from the discard pile first.

        Raises:
            IndexError: If there are no cards left to draw
        """
        if not self.draw_pile:
            self._reshuffle_discards()
        if not self.draw_pile:
            raise IndexError("Cannot draw from empty draw pile")

        card = self.draw_pile.pop(0)

        if self.phase is not TurnPhase.IDLE:
            self.events.emit_new(
                EventType.CARD_DRAWN,
                player=self.current_player.index if self.current_player else None,
                remaining=len(self.draw_pile),
            )
        return card

    def move_to_target(self, card: CardEntity) -> CardEntity:
        """Send a played card to the target slot, retiring the old target."""
        self._send_to_target(card, immediate=True)
        self.events.emit_new(
            EventType.CARD_PLAYED,
            player=self.current_player.index if self.current_player else None,
            card=str(card),
        )
        return card

    def _send_to_target(self, card: CardEntity, immediate: bool) -> None:
        position = Vector3(self.table.discard_pile_position) + TARGET_DEPTH
        card.move_to(position, 0.0, immediate=immediate)
        card.state = CardState.TO_TARGET
        card.face_up = True
        card.sort_layer = MOVING_SORT_LAYER
        card.eventual_sort_layer = self.table.target_layer
        card.eventual_sort_order = 0

        if self.target_card is not None:
            self.move_to_discard(self.target_card)
        self.target_card = card

    def move_to_discard(self, card: CardEntity) -> CardEntity:
        """Drop a card onto the discard pile without animating it."""
        card.state = CardState.DISCARD
        self.discard_pile.append(card)
        card.sort_layer = card.eventual_sort_layer = self.table.discard_pile_layer
        card.sort_order = card.eventual_sort_order = len(self.discard_pile) * 4
        card.set_transform(
            Vector3(self.table.discard_pile_position) + DISCARD_DEPTH, 0.0
        )
        return card

    def wait_for_move(self) -> None:
        """Enter the waiting phase while the current player's card moves."""
        self.await_move()

    def check_game_over(self) -> bool:
        """
        End the game if the player who just moved has emptied their hand.

        Also refills an empty draw pile from the discards.

        Returns:
            True if the game is over
        """
        if not self.draw_pile:
            self._reshuffle_discards()

        if self.current_player is not None and not self.current_player.hand:
            self.winner = self.current_player
            self.end_game()
            self.events.emit_new(
                EventType.GAME_OVER,
                winner=self.winner.index,
                turns=self.turns_played,
            )
            logger.info(
                "Game over: %s wins after %d turns", self.winner, self.turns_played
            )
            return True
        return False

    def pass_turn(self, num: int | None = None) -> None:
        """
        Hand the turn to the next seat and let it act.

        Args:
            num: Seat to pass to, or None for the seat after the current one
        """
        if self.is_over:
            return

        if num is None:
            if self.current_player is None:
                num = 0
            else:
                num = (self.players.index(self.current_player) + 1) % len(self.players)

        if self.phase is TurnPhase.WAITING:
            self.finish_move()

        if self.current_player is not None:
            self.turns_played += 1
            if self.check_game_over():
                return
            self.events.emit_new(
                EventType.TURN_PASSED,
                from_player=self.current_player.index,
                to_player=num,
            )

        self.current_player = self.players[num]
        self.start_turn()
        self.events.emit_new(EventType.TURN_STARTED, player=num)
        logger.debug("Turn %d: %s", self.turns_played + 1, self.current_player)

        self.current_player.take_turn()

    def card_clicked(self, card: CardEntity) -> bool:
        """
        Handle a click on a card during the human's turn.

        Clicking the draw pile draws a card; clicking a legal card in the
        human's hand plays it. Clicks outside the human's turn, or while a
        card is still moving, are ignored.

        Returns:
            True if the click started a move
        """
        player = self.current_player
        if player is None or not player.is_human:
            return False
        if self.phase is not TurnPhase.PRE:
            return False

        if card.state is CardState.DRAWPILE:
            drawn = player.add_card(self.draw())
            drawn.callback_participant = player
            self.await_move()
            return True

        if card.state is CardState.HAND and any(cd is card for cd in player.hand):
            if not self.is_valid_play(card):
                self.events.emit_new(
                    EventType.INVALID_PLAY,
                    player=player.index,
                    card=str(card),
                    target=str(self.target_card),
                )
                logger.debug("Invalid play %s onto %s", card, self.target_card)
                return False

            player.remove_card(card)
            self.move_to_target(card)
            card.callback_participant = player
            self.await_move()
            return True

        return False

    def update(self, dt: float) -> None:
        """
        Advance every card's animation by one frame.

        Args:
            dt: Delta time in seconds
        """
        for card in list(self.cards):
            card.update(dt)
