"""Animation system with easing functions and tweening."""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Callable, Dict, List, Optional

from bartok.utils.math_utils import lerp, lerp_tuple


class EaseType(Enum):
    """Available easing function types."""

    LINEAR = auto()
    EASE_IN = auto()
    EASE_OUT = auto()
    EASE_IN_OUT = auto()
    EASE_OUT_BACK = auto()


def ease_linear(t: float) -> float:
    """Linear interpolation (no easing)."""
    return t


def ease_in_quad(t: float) -> float:
    """Quadratic ease in - accelerates from zero."""
    return t * t


def ease_out_quad(t: float) -> float:
    """Quadratic ease out - decelerates to zero."""
    return 1 - (1 - t) * (1 - t)


def ease_in_out_quad(t: float) -> float:
    """Quadratic ease in/out - accelerates then decelerates."""
    if t < 0.5:
        return 2 * t * t
    return 1 - pow(-2 * t + 2, 2) / 2


def ease_out_back(t: float, overshoot: float = 1.70158) -> float:
    """Ease out with overshoot - goes past target then settles back.

    Gives cards a slight snap as they land in a hand.
    """
    c3 = overshoot + 1
    return 1 + c3 * pow(t - 1, 3) + overshoot * pow(t - 1, 2)


EASE_FUNCTIONS: Dict[EaseType, Callable[[float], float]] = {
    EaseType.LINEAR: ease_linear,
    EaseType.EASE_IN: ease_in_quad,
    EaseType.EASE_OUT: ease_out_quad,
    EaseType.EASE_IN_OUT: ease_in_out_quad,
    EaseType.EASE_OUT_BACK: ease_out_back,
}


def get_easing(ease_type: EaseType, t: float) -> float:
    """Get eased value for a given ease type and progress.

    Args:
        ease_type: The type of easing to apply
        t: Progress from 0.0 to 1.0

    Returns:
        Eased progress value
    """
    return EASE_FUNCTIONS[ease_type](t)


@dataclass(eq=False)
class Tween:
    """A single property animation from start to end value.

    Supports animating floats, tuples and vectors.
    """

    target: Any  # Object to animate
    property_name: str
    start_value: Any
    end_value: Any
    duration: float  # Seconds
    ease_type: EaseType = EaseType.EASE_OUT
    delay: float = 0.0  # Seconds before starting
    on_complete: Optional[Callable[[], None]] = None

    elapsed: float = field(default=0.0, init=False)
    started: bool = field(default=False, init=False)
    completed: bool = field(default=False, init=False)

    def update(self, dt: float) -> bool:
        """Update the tween by delta time.

        Args:
            dt: Delta time in seconds

        Returns:
            True if still animating, False if completed
        """
        if self.completed:
            return False

        self.elapsed += dt

        if self.elapsed < self.delay:
            return True

        if not self.started:
            self.started = True
            if self.start_value is None:
                self.start_value = getattr(self.target, self.property_name)

        active_time = self.elapsed - self.delay
        raw_progress = active_time / self.duration if self.duration > 0 else 1.0
        progress = min(1.0, raw_progress)

        eased = get_easing(self.ease_type, progress)

        if isinstance(self.start_value, tuple):
            new_value = lerp_tuple(self.start_value, self.end_value, eased)
        else:
            new_value = lerp(self.start_value, self.end_value, eased)

        if progress >= 1.0:
            # Land exactly on the end value, whatever the easing curve does
            new_value = self.end_value

        setattr(self.target, self.property_name, new_value)

        if progress >= 1.0:
            self.completed = True
            if self.on_complete:
                self.on_complete()
            return False

        return True


class TweenManager:
    """Manages multiple concurrent tweens."""

    def __init__(self):
        self.tweens: List[Tween] = []

    def add(self, tween: Tween) -> Tween:
        """Add a tween to be managed."""
        self.tweens.append(tween)
        return tween

    def create(
        self,
        target: Any,
        property_name: str,
        end_value: Any,
        duration: float,
        ease_type: EaseType = EaseType.EASE_OUT,
        start_value: Any = None,
        delay: float = 0.0,
        on_complete: Optional[Callable[[], None]] = None,
    ) -> Tween:
        """Create and add a new tween.

        Args:
            target: Object to animate
            property_name: Property/attribute name
            end_value: Target value
            duration: Animation duration in seconds
            ease_type: Easing function type
            start_value: Starting value (None = current value)
            delay: Delay before starting
            on_complete: Callback when animation completes

        Returns:
            The created tween
        """
        if start_value is None:
            start_value = getattr(target, property_name)

        tween = Tween(
            target=target,
            property_name=property_name,
            start_value=start_value,
            end_value=end_value,
            duration=duration,
            ease_type=ease_type,
            delay=delay,
            on_complete=on_complete,
        )
        return self.add(tween)

    def update(self, dt: float) -> None:
        """Update all tweens.

        Completion callbacks may add or cancel tweens on this manager while
        the update runs; tweens added that way are kept.

        Args:
            dt: Delta time in seconds
        """
        finished = {id(tween) for tween in list(self.tweens) if not tween.update(dt)}
        self.tweens = [tween for tween in self.tweens if id(tween) not in finished]

    def clear(self) -> None:
        """Remove all tweens."""
        for tween in self.tweens:
            tween.completed = True
        self.tweens.clear()

    def cancel_for(self, target: Any, property_name: Optional[str] = None) -> None:
        """Cancel tweens for a specific target.

        Args:
            target: The target object
            property_name: Specific property to cancel (None = all properties)
        """
        kept = []
        for tween in self.tweens:
            if tween.target is target and (
                property_name is None or tween.property_name == property_name
            ):
                # A cancelled tween never fires its on_complete
                tween.completed = True
            else:
                kept.append(tween)
        self.tweens = kept

    @property
    def is_animating(self) -> bool:
        """Check if any tweens are active."""
        return len(self.tweens) > 0
