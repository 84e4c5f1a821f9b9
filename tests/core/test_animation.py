"""Tests for easing and tweening."""

import pytest
from pygame.math import Vector3

from bartok.animation import EaseType, Tween, TweenManager, get_easing


class Target:
    def __init__(self):
        self.value = 0.0
        self.point = (0.0, 0.0)
        self.vector = Vector3(0, 0, 0)


class TestEasing:
    """Tests for easing functions."""

    @pytest.mark.parametrize("ease_type", list(EaseType))
    def test_endpoints(self, ease_type):
        """Test that every curve starts at 0 and ends at 1."""
        assert get_easing(ease_type, 0.0) == pytest.approx(0.0)
        assert get_easing(ease_type, 1.0) == pytest.approx(1.0)

    def test_ease_out_back_overshoots(self):
        """Test that the back curve goes past the target."""
        assert max(get_easing(EaseType.EASE_OUT_BACK, t / 20) for t in range(21)) > 1.0


class TestTween:
    """Tests for Tween."""

    def test_float(self):
        """Test animating a float."""
        target = Target()
        tween = Tween(target, "value", 0.0, 10.0, 1.0, EaseType.LINEAR)
        assert tween.update(0.5)
        assert target.value == pytest.approx(5.0)
        assert not tween.update(0.5)
        assert target.value == 10.0

    def test_tuple(self):
        """Test animating a tuple."""
        target = Target()
        tween = Tween(target, "point", (0.0, 0.0), (2.0, 4.0), 1.0, EaseType.LINEAR)
        tween.update(0.5)
        assert target.point == pytest.approx((1.0, 2.0))

    def test_vector(self):
        """Test animating a vector."""
        target = Target()
        tween = Tween(
            target, "vector", Vector3(0, 0, 0), Vector3(2, 4, 6), 1.0, EaseType.LINEAR
        )
        tween.update(0.5)
        assert tuple(target.vector) == pytest.approx((1.0, 2.0, 3.0))

    def test_delay(self):
        """Test that nothing happens during the delay."""
        target = Target()
        tween = Tween(target, "value", 0.0, 10.0, 1.0, EaseType.LINEAR, delay=1.0)
        tween.update(0.5)
        assert not tween.started
        assert target.value == 0.0

    def test_zero_duration(self):
        """Test that a zero-length tween completes on its first update."""
        target = Target()
        done = []
        tween = Tween(target, "value", 0.0, 3.0, 0.0, on_complete=lambda: done.append(1))
        assert not tween.update(0.0)
        assert target.value == 3.0
        assert done == [1]

    def test_lands_exactly_with_overshoot(self):
        """Test that an overshooting curve still lands on the end value."""
        target = Target()
        tween = Tween(target, "value", 0.0, 1.0, 1.0, EaseType.EASE_OUT_BACK)
        tween.update(2.0)
        assert target.value == 1.0


class TestTweenManager:
    """Tests for TweenManager."""

    def test_create_uses_current_value(self):
        """Test that the start value defaults to the attribute."""
        target = Target()
        target.value = 4.0
        manager = TweenManager()
        tween = manager.create(target, "value", 8.0, 1.0)
        assert tween.start_value == 4.0

    def test_update_removes_finished(self):
        """Test that completed tweens are dropped."""
        manager = TweenManager()
        manager.create(Target(), "value", 1.0, 0.5)
        assert manager.is_animating
        manager.update(1.0)
        assert not manager.is_animating

    def test_cancel_for(self):
        """Test cancelling one target's tweens."""
        a, b = Target(), Target()
        done = []
        manager = TweenManager()
        manager.create(a, "value", 1.0, 1.0, on_complete=lambda: done.append("a"))
        manager.create(b, "value", 1.0, 1.0, on_complete=lambda: done.append("b"))

        manager.cancel_for(a)
        manager.update(2.0)

        assert done == ["b"]
        assert a.value == 0.0

    def test_cancel_for_property(self):
        """Test cancelling a single property."""
        target = Target()
        manager = TweenManager()
        manager.create(target, "value", 1.0, 1.0)
        manager.create(target, "point", (1.0, 1.0), 1.0)
        manager.cancel_for(target, "value")
        assert [t.property_name for t in manager.tweens] == ["point"]

    def test_tween_added_by_callback_survives(self):
        """Test that a tween created from a completion callback is kept."""
        target = Target()
        manager = TweenManager()

        def chain():
            manager.create(target, "value", 5.0, 1.0)

        manager.create(target, "value", 1.0, 0.5, on_complete=chain)
        manager.update(0.5)

        assert len(manager.tweens) == 1
        manager.update(1.0)
        assert target.value == 5.0

    def test_clear(self):
        """Test removing every tween."""
        manager = TweenManager()
        manager.create(Target(), "value", 1.0, 1.0)
        manager.clear()
        assert not manager.is_animating
