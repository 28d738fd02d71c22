"""Tests for Scene registration, validation and segment emission."""

import pytest

from anima.animations import Create, FadeIn, FadeOut, MoveTo, Parallel, Sequence
from anima.animations.easing import linear
from anima.errors import SchedulingError, TargetNotInSceneError
from anima.mobjects import Circle, Rectangle, VGroup
from anima.scene import Scene, SceneConfig


def test_single_play_emits_one_segment():
    """Playing one default FadeIn yields a single [0, 1) segment."""
    scene = Scene()
    scene.play(FadeIn(Circle()))

    (segment,) = scene.get_segments()
    assert segment.index == 0
    assert segment.start_time == 0.0
    assert segment.end_time == 1.0
    assert len(segment.animations) == 1


def test_wait_emits_empty_segment():
    """wait() after play() appends a segment with no animations."""
    scene = Scene()
    scene.play(FadeIn(Circle()))
    scene.wait(0.5)

    segments = scene.get_segments()
    assert len(segments) == 2
    assert (segments[1].start_time, segments[1].end_time) == (1.0, 1.5)
    assert segments[1].animations == ()
    assert scene.get_total_duration() == 1.5


def test_wait_defaults_to_one_second():
    """wait() without arguments holds for one second."""
    scene = Scene()
    scene.wait()

    assert scene.get_segments()[0].duration == 1.0


def test_negative_wait_raises():
    """Waiting a negative time is an error."""
    with pytest.raises(SchedulingError, match="cannot be negative"):
        Scene().wait(-1)


def test_segments_are_contiguous():
    """Each segment starts where the previous one ended, with dense indices."""
    scene = Scene()
    circle = Circle()
    scene.play(FadeIn(circle))
    scene.wait(0.25)
    scene.play(MoveTo(circle, 1, 0).duration(2), FadeIn(Rectangle()).delay(0.5))
    scene.wait()

    segments = scene.get_segments()
    for i, segment in enumerate(segments):
        assert segment.index == i
    for previous, current in zip(segments, segments[1:]):
        assert previous.end_time == current.start_time


def test_play_end_includes_delay():
    """A play lasts as long as its longest duration plus delay."""
    scene = Scene()
    scene.play(FadeIn(Circle()).duration(1), FadeIn(Circle()).duration(1).delay(2))

    assert scene.get_segments()[0].end_time == 3.0


def test_play_without_items_is_noop():
    """play() with nothing to play does not emit a segment."""
    scene = Scene()
    scene.play()

    assert scene.get_segments() == []


def test_identical_scenes_hash_identically():
    """Two identically built scenes produce identical segment hashes."""
    def build(width=1920, radius=1.0):
        scene = Scene(SceneConfig(width=width, height=1080, frame_rate=60))
        scene.play(FadeIn(Circle(radius)))
        return [segment.hash for segment in scene.get_segments()]

    assert build() == build()
    assert build(width=1280) != build()
    assert build(radius=2.0) != build()


def test_segment_hash_depends_on_timing():
    """The same content at a different time hashes differently."""
    scene = Scene()
    scene.wait(1)
    scene.wait(1)

    first, second = scene.get_segments()
    assert first.hash != second.hash


def test_introductory_animation_registers_target():
    """FadeIn and Create add their targets to the scene."""
    scene = Scene()
    circle, square = Circle(), Rectangle()
    scene.play(FadeIn(circle), Create(square))

    assert scene.get_mobjects() == [circle, square]


def test_transformative_animation_requires_target_in_scene():
    """MoveTo on an unknown mobject raises TargetNotInSceneError."""
    scene = Scene()

    with pytest.raises(TargetNotInSceneError, match="target is not in scene") as exc_info:
        scene.play(MoveTo(Circle(), 1, 0))

    assert exc_info.value.animation_name == "MoveTo"
    assert exc_info.value.target_type == "Circle"
    assert scene.get_segments() == []


def test_exit_animation_requires_target_in_scene():
    """FadeOut on an unknown mobject raises TargetNotInSceneError."""
    with pytest.raises(TargetNotInSceneError):
        Scene().play(FadeOut(Circle()))


def test_added_target_can_be_transformed():
    """scene.add makes a mobject visible and valid for transforms."""
    scene = Scene()
    circle = Circle()
    scene.add(circle)

    scene.play(MoveTo(circle, 1, 0))

    assert circle.opacity == 1.0
    assert scene.has(circle)


def test_group_member_counts_as_in_scene():
    """A child of a registered group can be transformed directly."""
    scene = Scene()
    child = Circle()
    group = VGroup(child)
    scene.add(group)

    scene.play(MoveTo(child, 1, 0))

    assert scene.is_in_scene(child)
    assert not scene.has(child)


def test_nested_composition_is_validated():
    """Validation descends into Sequence and Parallel children."""
    scene = Scene()
    circle = Circle()
    stranger = Circle()

    scene.play(Sequence([FadeIn(circle), MoveTo(circle, 1, 0)]))
    assert scene.has(circle)

    with pytest.raises(TargetNotInSceneError):
        scene.play(Parallel([MoveTo(circle, 0, 0), FadeOut(stranger)]))


def test_camera_is_exempt_from_membership():
    """The scene camera can be animated without being added."""
    scene = Scene()
    scene.play(MoveTo(scene.camera, 2, 0))

    assert scene.get_total_duration() == 1.0


def test_play_accepts_mobject_with_queue():
    """A mobject with queued fluent animations can be played directly."""
    scene = Scene()
    circle = Circle()
    circle.fade_in(0.5).move_to(2, 0, duration=1.0)

    scene.play(circle)

    assert scene.get_total_duration() == 1.5
    assert scene.has(circle)


def test_play_mobject_without_queue_raises():
    """Playing a mobject with nothing queued is an error."""
    with pytest.raises(SchedulingError):
        Scene().play(Circle())


def test_consecutive_plays_chain_state():
    """A later play starts from the state the previous play left."""
    scene = Scene()
    circle = Circle()
    scene.play(FadeIn(circle))
    scene.play(MoveTo(circle, 2, 0).ease(linear))
    scene.play(MoveTo(circle, 2, 2).ease(linear))
    timeline = scene.get_timeline()

    timeline.seek(1.5)
    assert circle.position == pytest.approx((1.0, 0.0))

    timeline.seek(2.5)
    assert circle.position == pytest.approx((2.0, 1.0))

    timeline.seek(0.0)
    assert circle.position == pytest.approx((0.0, 0.0))
    assert circle.opacity == 0.0


def test_construct_hook():
    """Subclasses build themselves in construct()."""
    class Demo(Scene):
        def construct(self):
            self.play(FadeIn(Circle()))
            self.wait(0.5)

    scene = Demo()
    scene.construct()

    assert len(scene.get_segments()) == 2
