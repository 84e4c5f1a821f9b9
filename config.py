"""Configuration management with environment variable support."""

import os
from dataclasses import dataclass, field

from bartok.layout import HandLayout


def _parse_human_seat() -> int | None:
    """Parse BARTOK_HUMAN_SEAT; 'none' means every seat is automated."""
    value = os.getenv("BARTOK_HUMAN_SEAT", "0").strip().lower()
    if value in ("", "none"):
        return None
    return int(value)


def _parse_seed() -> int | None:
    """Parse BARTOK_SEED environment variable."""
    value = os.getenv("BARTOK_SEED")
    return int(value) if value else None


def _default_hand_layouts() -> tuple[HandLayout, ...]:
    """Hands around the table, seat 0 at the bottom, going clockwise."""
    return (
        HandLayout(position=(0.0, -8.0, 0.0), rotation=0.0, layer_name="hand0"),
        HandLayout(position=(-12.0, 0.0, 0.0), rotation=-90.0, layer_name="hand1"),
        HandLayout(position=(0.0, 8.0, 0.0), rotation=180.0, layer_name="hand2"),
        HandLayout(position=(12.0, 0.0, 0.0), rotation=90.0, layer_name="hand3"),
    )


@dataclass(frozen=True)
class GameConfig:
    """Default game configuration."""

    num_players: int = 4
    hand_size: int = 7
    hand_fan_degrees: float = 10.0
    card_height: float = 3.5
    move_duration: float = field(
        default_factory=lambda: float(os.getenv("BARTOK_MOVE_DURATION", "0.5"))
    )
    draw_time_stagger: float = 0.1
    human_seat: int | None = field(default_factory=_parse_human_seat)

    def __post_init__(self) -> None:
        """Validate the configuration."""
        if self.num_players < 2:
            raise ValueError("num_players must be at least 2")
        if self.hand_size < 1:
            raise ValueError("hand_size must be at least 1")
        if self.num_players * self.hand_size >= 52:
            raise ValueError("Not enough cards to deal every hand and a target")
        if self.move_duration < 0:
            raise ValueError("move_duration must not be negative")
        if self.human_seat is not None and not 0 <= self.human_seat < self.num_players:
            raise ValueError("human_seat must be a seat at the table")


@dataclass(frozen=True)
class TableConfig:
    """Where the piles and hands sit on the table."""

    draw_pile_position: tuple[float, float, float] = (-3.0, 0.0, 0.0)
    draw_pile_layer: str = "drawpile"
    draw_pile_stagger: tuple[float, float] = (0.01, 0.01)
    discard_pile_position: tuple[float, float, float] = (3.0, 0.0, 0.0)
    discard_pile_layer: str = "discard"
    target_layer: str = "target"
    hand_layouts: tuple[HandLayout, ...] = field(default_factory=_default_hand_layouts)


@dataclass(frozen=True)
class AppConfig:
    """Application configuration."""

    debug: bool = field(default_factory=lambda: os.getenv("DEBUG", "false").lower() == "true")
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    seed: int | None = field(default_factory=_parse_seed)

    game: GameConfig = field(default_factory=GameConfig)
    table: TableConfig = field(default_factory=TableConfig)


# Global configuration instance
config = AppConfig()
