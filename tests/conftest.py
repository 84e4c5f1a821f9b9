"""Pytest fixtures for Bartok table tests."""

import pytest
from random import Random

from hypothesis import strategies as st

from bartok.cards import Card, Deck, Rank, Suit
from bartok.card_entity import CardEntity, CardState
from bartok.game.controller import GameController
from bartok.game.engine import BartokGame
from bartok.game.state import TurnPhase
from bartok.layout import HandLayout
from bartok.participant import Participant, ParticipantKind
from config import GameConfig, TableConfig


class FakeController(GameController):
    """Controller double that records what a participant asks of it."""

    def __init__(self, fan_degrees: float = 10.0, card_height: float = 3.5) -> None:
        self._phase = TurnPhase.PRE
        self._fan_degrees = fan_degrees
        self._card_height = card_height
        self.legal: set[int] = set()  # ids of card entities that may be played
        self.deck: list[CardEntity] = []
        self.targets: list[CardEntity] = []
        self.validity_checks = 0
        self.passes = 0

    @property
    def phase(self) -> TurnPhase:
        return self._phase

    @phase.setter
    def phase(self, value: TurnPhase) -> None:
        self._phase = value

    @property
    def hand_fan_degrees(self) -> float:
        return self._fan_degrees

    @property
    def card_height(self) -> float:
        return self._card_height

    def wait_for_move(self) -> None:
        self._phase = TurnPhase.WAITING

    def is_valid_play(self, card: CardEntity) -> bool:
        self.validity_checks += 1
        return id(card) in self.legal

    def draw(self) -> CardEntity:
        return self.deck.pop(0)

    def move_to_target(self, card: CardEntity) -> CardEntity:
        card.move_to((0, 0, -1), 0.0, immediate=True)
        card.state = CardState.TO_TARGET
        self.targets.append(card)
        return card

    def pass_turn(self, num: int | None = None) -> None:
        self.passes += 1


def make_card(rank: int, suit: Suit = Suit.SPADES) -> CardEntity:
    """Build a card entity from a numeric rank."""
    return CardEntity(Card(Rank(rank), suit))


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return Random(42)


@pytest.fixture
def deck(rng):
    """A shuffled deck."""
    d = Deck(rng=rng)
    d.shuffle()
    return d


@pytest.fixture
def controller():
    """A controller double in the PRE phase."""
    return FakeController()


@pytest.fixture
def layout():
    """A hand anchored at the origin, unrotated."""
    return HandLayout(position=(0.0, 0.0, 0.0), rotation=0.0, layer_name="hand0")


@pytest.fixture
def human(controller, layout, rng):
    """A human participant."""
    return Participant(ParticipantKind.HUMAN, 0, layout, controller, rng=rng)


@pytest.fixture
def automated(controller, layout, rng):
    """An automated participant."""
    return Participant(ParticipantKind.AUTOMATED, 1, layout, controller, rng=rng)


@pytest.fixture
def all_ai_config():
    """Game settings with no human seat and quick moves."""
    return GameConfig(move_duration=0.25, draw_time_stagger=0.05, human_seat=None)


@pytest.fixture
def human_config():
    """Game settings with the human in seat 0."""
    return GameConfig(move_duration=0.25, draw_time_stagger=0.05, human_seat=0)


@pytest.fixture
def table():
    """Default table layout."""
    return TableConfig()


@pytest.fixture
def game(all_ai_config, table):
    """A new all-automated game instance."""
    return BartokGame(game_config=all_ai_config, table_config=table, rng=Random(7))


@pytest.fixture
def human_game(human_config, table):
    """A new game with a human at seat 0."""
    return BartokGame(game_config=human_config, table_config=table, rng=Random(11))


# Hypothesis strategies for property-based testing
ranks = st.integers(min_value=1, max_value=13)
suits = st.sampled_from(list(Suit))


@st.composite
def card_entity_strategy(draw):
    """Generate a card entity."""
    return make_card(draw(ranks), draw(suits))
