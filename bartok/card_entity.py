"""Movable card with tweened position and rotation."""

from enum import Enum, auto
from typing import TYPE_CHECKING, Callable, Optional, Sequence

from pygame.math import Vector3

from bartok.animation import EaseType, TweenManager
from bartok.cards import Card, Suit

if TYPE_CHECKING:
    from bartok.participant import Participant


# Sort layer a card is drawn on while it travels across the table
MOVING_SORT_LAYER = "10"

DEFAULT_MOVE_DURATION = 0.5


class CardState(Enum):
    """Where a card is, or where it is heading."""

    DRAWPILE = auto()
    TO_DRAWPILE = auto()
    TO_HAND = auto()
    HAND = auto()
    TO_TARGET = auto()
    TARGET = auto()
    DISCARD = auto()
    IDLE = auto()


# State a card settles into when its move finishes
ARRIVALS = {
    CardState.TO_DRAWPILE: CardState.DRAWPILE,
    CardState.TO_HAND: CardState.HAND,
    CardState.TO_TARGET: CardState.TARGET,
}


class CardEntity:
    """A physical card on the table.

    Moves are requested with :meth:`move_to` and run as tweens advanced by
    :meth:`update`. When a move finishes the card settles into its resting
    state and sort order, then reports back to whoever registered for it:
    ``report_finish_to`` if set, otherwise ``callback_participant``.
    """

    def __init__(
        self,
        card: Card,
        position: Sequence[float] = (0.0, 0.0, 0.0),
        rotation: float = 0.0,
        face_up: bool = False,
        move_duration: float = DEFAULT_MOVE_DURATION,
        ease_type: EaseType = EaseType.EASE_IN_OUT,
    ):
        self.card = card

        self._position = Vector3(position)
        self._rotation = float(rotation)
        self.face_up = face_up

        self.state = CardState.IDLE
        self.sort_layer = "default"
        self.sort_order = 0
        self.eventual_sort_layer = "default"
        self.eventual_sort_order = 0

        # Stagger for the next non-immediate move, set by the dealer
        self.move_delay = 0.0
        self.move_duration = move_duration
        self.ease_type = ease_type

        self.callback_participant: Optional["Participant"] = None
        self.report_finish_to: Optional[Callable[["CardEntity"], None]] = None

        self.tween_manager = TweenManager()
        self.target_position: Optional[Vector3] = None
        self.target_rotation: Optional[float] = None

    @property
    def position(self) -> Vector3:
        return Vector3(self._position)

    @position.setter
    def position(self, value: Sequence[float]) -> None:
        self._position = Vector3(value)

    @property
    def rotation(self) -> float:
        return self._rotation

    @rotation.setter
    def rotation(self, value: float) -> None:
        self._rotation = float(value)

    @property
    def rank(self) -> int:
        """Numeric rank used for ordering a hand."""
        return self.card.rank.value

    @property
    def suit(self) -> Suit:
        return self.card.suit

    @property
    def is_moving(self) -> bool:
        return self.tween_manager.is_animating

    def move_to(
        self,
        position: Sequence[float],
        rotation: float = 0.0,
        immediate: bool = False,
    ) -> None:
        """Start an animated move to a new transform.

        Any move already in flight is cancelled, so only the latest move ever
        reports completion. A non-immediate move keeps the start time of a
        cancelled move that had not started yet.

        Args:
            position: Destination position
            rotation: Destination rotation about z, in degrees
            immediate: Start now instead of waiting out ``move_delay``
        """
        delay = 0.0
        if not immediate:
            delay = max(self.move_delay, self._pending_delay())
        self.move_delay = 0.0

        self.tween_manager.cancel_for(self)

        self.target_position = Vector3(position)
        self.target_rotation = float(rotation)

        self.tween_manager.create(
            self,
            "position",
            Vector3(self.target_position),
            self.move_duration,
            self.ease_type,
            start_value=Vector3(self._position),
            delay=delay,
        )
        self.tween_manager.create(
            self,
            "rotation",
            self.target_rotation,
            self.move_duration,
            self.ease_type,
            start_value=self._rotation,
            delay=delay,
            on_complete=self._finish_move,
        )

    def _pending_delay(self) -> float:
        """Time left before the move in flight starts, 0 if it has started."""
        for tween in self.tween_manager.tweens:
            if not tween.started:
                return max(0.0, tween.delay - tween.elapsed)
        return 0.0

    def set_transform(self, position: Sequence[float], rotation: float = 0.0) -> None:
        """Place the card instantly, cancelling any move in flight."""
        self.tween_manager.cancel_for(self)
        self.position = position
        self.rotation = rotation
        self.target_position = None
        self.target_rotation = None

    def update(self, dt: float) -> None:
        """Advance the card's animations.

        Args:
            dt: Delta time in seconds
        """
        self.tween_manager.update(dt)

    def _finish_move(self) -> None:
        self.state = ARRIVALS.get(self.state, self.state)
        self.sort_layer = self.eventual_sort_layer
        self.sort_order = self.eventual_sort_order

        if self.report_finish_to is not None:
            report, self.report_finish_to = self.report_finish_to, None
            report(self)
        elif self.callback_participant is not None:
            participant, self.callback_participant = self.callback_participant, None
            participant.on_card_move_complete(self)

    def __str__(self) -> str:
        return str(self.card)

    def __repr__(self) -> str:
        return f"CardEntity({self.card!r}, state={self.state.name})"
