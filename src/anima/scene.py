"""Scene: mobject registry, playhead and segment log."""

from dataclasses import dataclass

from .animations.animation import Animation, Lifecycle
from .animations.composition import Parallel, Sequence
from .cache.segment import Segment
from .camera import Camera
from .constants import (
    DEFAULT_BACKGROUND_COLOR,
    DEFAULT_FPS,
    DEFAULT_HEIGHT,
    DEFAULT_WAIT_DURATION,
    DEFAULT_WIDTH,
)
from .errors import SchedulingError, TargetNotInSceneError
from .hashing import hash_compose, hash_number
from .mobjects.mobject import Mobject
from .timeline import Timeline


@dataclass(frozen=True)
class SceneConfig:
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    background_color: tuple[int, int, int] = DEFAULT_BACKGROUND_COLOR
    frame_rate: int = DEFAULT_FPS


class Scene:
    """Authoring surface for an animation.

    ``play`` and ``wait`` schedule work on the timeline at the playhead and
    append one Segment each. Subclasses usually override ``construct``.
    """

    def __init__(self, config: SceneConfig | None = None):
        self.config = config or SceneConfig()
        self.camera = Camera(self.config.width, self.config.height)
        self._timeline = Timeline()
        self._mobjects: list[Mobject] = []
        self._segments: list[Segment] = []
        self._playhead = 0.0

    def construct(self) -> None:
        """Build the scene. Override in subclasses."""

    # ---- registry ---------------------------------------------------

    def add(self, *mobjects: Mobject) -> "Scene":
        """Register mobjects and make them visible immediately."""
        for mobject in mobjects:
            self._register(mobject)
            mobject.set_opacity(1.0)
        return self

    def remove(self, *mobjects: Mobject) -> "Scene":
        for mobject in mobjects:
            if mobject in self._mobjects:
                self._mobjects.remove(mobject)
        return self

    def has(self, mobject: Mobject) -> bool:
        return any(m is mobject for m in self._mobjects)

    def is_in_scene(self, mobject: Mobject) -> bool:
        """Whether a mobject is registered directly or through a containing group."""
        if self.has(mobject):
            return True
        return any(self.has(ancestor) for ancestor in mobject.iter_ancestors())

    def get_mobjects(self) -> list[Mobject]:
        return list(self._mobjects)

    def _register(self, mobject: Mobject) -> None:
        if not self.has(mobject):
            self._mobjects.append(mobject)

    # ---- scheduling -------------------------------------------------

    def play(self, *items: Animation | Mobject) -> "Scene":
        """
        Play animations together starting at the playhead.

        Items may be animations or mobjects with queued fluent animations.

        Raises:
            SchedulingError: If a mobject item has nothing queued
            TargetNotInSceneError: If a transformative or exit animation
                targets a mobject that is not in the scene
        """
        if not items:
            return self

        animations = [self._to_animation(item) for item in items]
        for animation in animations:
            self._validate_and_register(animation)

        start = self._playhead
        self._timeline.seek(start)
        self._timeline.schedule_parallel(animations, start)
        end = start + max(a.get_duration() + a.get_delay() for a in animations)
        self._append_segment(start, end, tuple(animations))
        return self

    def wait(self, seconds: float = DEFAULT_WAIT_DURATION) -> "Scene":
        """
        Hold the current state.

        Raises:
            SchedulingError: If seconds is negative
        """
        if seconds < 0:
            raise SchedulingError(f"Wait duration cannot be negative, got {seconds}")
        start = self._playhead
        self._timeline.seek(start)
        self._append_segment(start, start + seconds, ())
        return self

    @staticmethod
    def _to_animation(item: Animation | Mobject) -> Animation:
        if isinstance(item, Animation):
            return item
        return item.to_animation()

    def _validate_and_register(self, animation: Animation) -> None:
        if isinstance(animation, (Sequence, Parallel)):
            for child in animation.get_children():
                self._validate_and_register(child)
            return

        target = animation.get_target()
        if target is None:
            return
        lifecycle = animation.get_lifecycle()
        match lifecycle:
            case Lifecycle.INTRODUCTORY:
                self._register(target)
            case Lifecycle.TRANSFORMATIVE | Lifecycle.EXIT:
                if target is not self.camera and not self.is_in_scene(target):
                    raise TargetNotInSceneError(animation, target)

    def _append_segment(self, start: float, end: float, animations: tuple[Animation, ...]) -> None:
        segment_hash = hash_compose(
            self.camera.compute_hash(),
            *(m.compute_hash() for m in self._mobjects),
            *(a.compute_hash() for a in animations),
            hash_number(start),
            hash_number(end),
        )
        self._segments.append(
            Segment(
                index=len(self._segments),
                start_time=start,
                end_time=end,
                animations=animations,
                hash=segment_hash,
            )
        )
        self._playhead = end

    # ---- accessors --------------------------------------------------

    def get_segments(self) -> list[Segment]:
        return list(self._segments)

    def get_total_duration(self) -> float:
        return self._playhead

    def get_current_time(self) -> float:
        return self._playhead

    def get_timeline(self) -> Timeline:
        return self._timeline

    def get_width(self) -> int:
        return self.config.width

    def get_height(self) -> int:
        return self.config.height

    def get_frame_rate(self) -> int:
        return self.config.frame_rate

    def get_background_color(self) -> tuple[int, int, int]:
        return self.config.background_color
