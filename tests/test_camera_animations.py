"""Tests for camera follow and shake."""

import math

import pytest

from anima.animations import Follow, MoveTo, Shake
from anima.animations.easing import linear
from anima.camera import Camera
from anima.mobjects import Circle
from anima.scene import Scene


def _displacement(camera, origin=(0.0, 0.0)):
    return math.hypot(camera.x - origin[0], camera.y - origin[1])


def test_follow_tracks_a_moving_target():
    """The camera stays on a mobject while another animation moves it."""
    scene = Scene()
    circle = Circle()
    scene.add(circle)
    scene.play(MoveTo(circle, 4, 0).ease(linear), Follow(scene.camera, circle))
    timeline = scene.get_timeline()

    timeline.seek(0.5)
    assert scene.camera.position == pytest.approx((2.0, 0.0))

    timeline.seek(1.0)
    assert scene.camera.position == pytest.approx((4.0, 0.0))

    timeline.seek(0.0)
    assert scene.camera.position == pytest.approx((0.0, 0.0))


def test_follow_applies_offset():
    """The camera tracks the target position plus the offset."""
    camera = Camera()
    circle = Circle().pos(4, 0)

    Follow(camera, circle, offset=(1, -1)).update(0.5)

    assert camera.position == pytest.approx((5.0, -1.0))


def test_damped_follow_closes_gap_gradually():
    """With damping, each 1/60 s step closes 1 - damping of the remaining gap."""
    camera = Camera()
    circle = Circle().pos(4, 0)
    follow = Follow(camera, circle, damping=0.5)

    follow.update(1 / 60)
    assert camera.x == pytest.approx(2.0)

    follow.update(2 / 60)
    assert camera.x == pytest.approx(3.0)

    follow.update(0.0)
    assert camera.x == 0.0


def test_follow_rejects_invalid_damping():
    """Damping must be in [0, 1)."""
    with pytest.raises(ValueError, match="damping"):
        Follow(Camera(), Circle(), damping=1.0)


def test_follow_hash_depends_on_settings():
    """Offset and damping are part of the hash."""
    camera = Camera()
    circle = Circle()
    base = Follow(camera, circle).compute_hash()

    assert Follow(camera, circle).compute_hash() == base
    assert Follow(camera, circle, offset=(1, 0)).compute_hash() != base
    assert Follow(camera, circle, damping=0.3).compute_hash() != base


def test_shake_displaces_then_returns():
    """Shake moves the target during the animation and restores it at the end."""
    camera = Camera().pos(10, 20)
    shake = Shake(camera, intensity=0.5)

    displaced = False
    for i in range(1, 20):
        shake.update(i / 20)
        displaced = displaced or _displacement(camera, (10, 20)) > 1e-6
    assert displaced

    shake.update(1.0)
    assert camera.position == pytest.approx((10.0, 20.0))

    shake.update(0.0)
    assert camera.position == pytest.approx((10.0, 20.0))


def test_shake_with_zero_intensity_stays_put():
    """No intensity means no displacement."""
    camera = Camera()
    shake = Shake(camera, intensity=0.0)

    for i in range(11):
        shake.update(i / 10)
        assert camera.position == pytest.approx((0.0, 0.0))


def test_shake_decay_scales_displacement():
    """Linear decay scales the undecayed displacement by 1 - progress."""
    steady_camera = Camera()
    decaying_camera = Camera()

    Shake(steady_camera, decay=0.0, seed=3).update(0.9)
    Shake(decaying_camera, decay=1.0, seed=3).update(0.9)

    assert decaying_camera.x == pytest.approx(steady_camera.x * 0.1)
    assert decaying_camera.y == pytest.approx(steady_camera.y * 0.1)


def test_shake_is_deterministic_per_seed():
    """The same seed reproduces the same motion; another seed differs."""
    first, second, other = Camera(), Camera(), Camera()

    Shake(first, seed=7).update(0.3)
    Shake(second, seed=7).update(0.3)
    Shake(other, seed=8).update(0.3)

    assert first.position == second.position
    assert other.position != first.position
    assert Shake(first, seed=7).compute_hash() != Shake(first, seed=8).compute_hash()


def test_shake_rejects_invalid_settings():
    """Negative intensity or decay and non-positive frequency are errors."""
    camera = Camera()
    with pytest.raises(ValueError, match="intensity"):
        Shake(camera, intensity=-1)
    with pytest.raises(ValueError, match="frequency"):
        Shake(camera, frequency=0)
    with pytest.raises(ValueError, match="decay"):
        Shake(camera, decay=-0.5)


def test_scheduled_shake_leaves_camera_untouched_before_it_starts():
    """A pending shake does not move the camera."""
    scene = Scene()
    scene.wait(1.0)
    scene.play(Shake(scene.camera, intensity=1.0))
    timeline = scene.get_timeline()

    timeline.seek(0.5)
    assert scene.camera.position == pytest.approx((0.0, 0.0))

    timeline.seek(1.5)
    assert _displacement(scene.camera) > 0

    timeline.seek(2.0)
    assert scene.camera.position == pytest.approx((0.0, 0.0))
