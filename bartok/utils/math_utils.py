"""Math utility functions for animations and layout."""

from typing import Any, Tuple, Union

Number = Union[int, float]


def lerp(start: Any, end: Any, t: float) -> Any:
    """Linear interpolation between start and end.

    Works for numbers and for vector types supporting ``+``, ``-`` and
    scalar ``*`` (such as ``pygame.math.Vector3``).

    Args:
        start: Starting value
        end: Ending value
        t: Interpolation factor (0.0 to 1.0, may overshoot for eased curves)

    Returns:
        Interpolated value
    """
    return start + (end - start) * t


def lerp_tuple(
    start: Tuple[Number, ...], end: Tuple[Number, ...], t: float
) -> Tuple[float, ...]:
    """Linear interpolation between two tuples (e.g., positions).

    Args:
        start: Starting tuple
        end: Ending tuple
        t: Interpolation factor (0.0 to 1.0)

    Returns:
        Interpolated tuple
    """
    return tuple(lerp(s, e, t) for s, e in zip(start, end))

