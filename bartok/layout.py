"""Fan layout geometry for a hand of cards."""

from dataclasses import dataclass
from typing import Tuple

from pygame.math import Vector3

# Depth step between neighbouring cards so their hit areas never overlap
DEPTH_STEP = -0.5

# Sort order gap between neighbouring cards in a fan
SORT_ORDER_STEP = 4


@dataclass(frozen=True)
class HandLayout:
    """Anchor of a hand on the table.

    The anchor is the bottom-center of the fan; ``rotation`` is about the
    viewing (z) axis in degrees.
    """

    position: Tuple[float, float, float] = (0.0, 0.0, 0.0)
    rotation: float = 0.0
    layer_name: str = "hand"

    def __post_init__(self) -> None:
        """Validate the layout."""
        if len(self.position) != 3:
            raise ValueError("position must have exactly three components")
        if not self.layer_name:
            raise ValueError("layer_name must not be empty")

    @property
    def origin(self) -> Vector3:
        """Return the anchor position as a vector."""
        return Vector3(self.position)


@dataclass(frozen=True)
class FanSlot:
    """Target transform of one card in a fanned hand."""

    position: Vector3
    rotation: float
    sort_order: int


def start_rotation(count: int, base_rotation: float, fan_degrees: float) -> float:
    """Rotation of the first card so the fan is centered on ``base_rotation``."""
    if count > 1:
        return base_rotation + fan_degrees * (count - 1) / 2
    return base_rotation


def fan_slots(
    count: int,
    layout: HandLayout,
    fan_degrees: float,
    card_height: float,
) -> list[FanSlot]:
    """
    Compute the fan of a hand holding ``count`` cards.

    Each card is rotated ``fan_degrees`` clockwise from the previous one.
    Its position is a point half a card above the anchor, rotated with the
    card, so the cards radiate from a pivot below the visible hand.

    Args:
        count: Number of cards in the hand
        layout: Anchor of the hand
        fan_degrees: Rotation between neighbouring cards
        card_height: Height of a card in table units

    Returns:
        One slot per card, in hand order
    """
    start = start_rotation(count, layout.rotation, fan_degrees)
    origin = layout.origin
    slots = []

    for i in range(count):
        rotation = start - fan_degrees * i

        position = Vector3(0, card_height / 2, 0).rotate_z(rotation)
        position += origin
        position.z = DEPTH_STEP * i

        slots.append(
            FanSlot(
                position=position,
                rotation=rotation,
                sort_order=SORT_ORDER_STEP * i,
            )
        )

    return slots
