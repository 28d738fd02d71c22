"""Keyframe tracks: per-property values pinned at normalized times."""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Self

from ..hashing import hash_compose, hash_floats, hash_string
from .animation import TransformativeAnimation
from .easing import EasingFunction, linear

if TYPE_CHECKING:
    from ..mobjects.mobject import Mobject

Interpolator = Callable[[float, float, float], float]
PropertySetter = Callable[["Mobject", float], object]


def lerp(start: float, end: float, progress: float) -> float:
    return start + (end - start) * progress


@dataclass(frozen=True)
class Keyframe:
    """A value at a normalized time; ``easing`` shapes the approach to it."""

    time: float
    value: float
    easing: EasingFunction | None = None


class KeyframeTrack:
    """Sorted keyframes for a single numeric property."""

    def __init__(self, interpolator: Interpolator = lerp):
        self._interpolator = interpolator
        self._keyframes: list[Keyframe] = []

    def add_keyframe(self, time: float, value: float, easing: EasingFunction | None = None) -> Self:
        """
        Add a keyframe, replacing any keyframe at the same time.

        Raises:
            ValueError: If time is outside [0, 1]
        """
        if not 0.0 <= time <= 1.0:
            raise ValueError(f"Keyframe time must be in [0, 1], got {time}")
        self._keyframes = [kf for kf in self._keyframes if kf.time != time]
        self._keyframes.append(Keyframe(float(time), float(value), easing))
        self._keyframes.sort(key=lambda kf: kf.time)
        return self

    def remove_keyframe(self, time: float) -> bool:
        count = len(self._keyframes)
        self._keyframes = [kf for kf in self._keyframes if kf.time != time]
        return len(self._keyframes) < count

    def get_keyframe(self, time: float) -> Keyframe | None:
        return next((kf for kf in self._keyframes if kf.time == time), None)

    def set_keyframe(self, time: float, value: float, easing: EasingFunction | None = None) -> bool:
        """Change an existing keyframe. Returns False if there is none at that time."""
        for index, kf in enumerate(self._keyframes):
            if kf.time == time:
                self._keyframes[index] = Keyframe(kf.time, float(value), easing or kf.easing)
                return True
        return False

    def get_keyframes(self) -> tuple[Keyframe, ...]:
        return tuple(self._keyframes)

    def __len__(self) -> int:
        return len(self._keyframes)

    def value_at(self, time: float) -> float:
        """
        Interpolated value at a normalized time.

        Before the first keyframe the first value holds; after the last, the
        last value holds. Between two keyframes the later one's easing applies.

        Raises:
            ValueError: If the track has no keyframes
        """
        if not self._keyframes:
            raise ValueError("Keyframe track has no keyframes")
        t = max(0.0, min(1.0, time))

        previous = None
        for kf in self._keyframes:
            if kf.time > t:
                if previous is None:
                    return kf.value
                local = (t - previous.time) / (kf.time - previous.time)
                easing = kf.easing or linear
                return self._interpolator(previous.value, kf.value, easing(local))
            previous = kf
        return previous.value

    def compute_hash(self) -> int:
        return hash_compose(
            *(
                hash_compose(
                    hash_floats((kf.time, kf.value)),
                    hash_string(getattr(kf.easing, "__name__", "linear")),
                )
                for kf in self._keyframes
            )
        )


class KeyframeAnimation(TransformativeAnimation):
    """Drive several properties of one target from named keyframe tracks.

    Each track's value is handed to its setter, e.g.
    ``lambda m, v: m.set_opacity(v)``. Tracks are evaluated at the eased
    progress of the animation, in the order they were added.
    """

    def __init__(self, target: "Mobject"):
        super().__init__(target)
        self._tracks: dict[str, tuple[KeyframeTrack, PropertySetter]] = {}

    def add_track(self, name: str, track: KeyframeTrack, setter: PropertySetter) -> Self:
        self._tracks[name] = (track, setter)
        return self

    def get_track(self, name: str) -> KeyframeTrack | None:
        entry = self._tracks.get(name)
        return entry[0] if entry else None

    def track_names(self) -> list[str]:
        return list(self._tracks)

    def capture_start_state(self) -> None:
        # keyframe values are absolute
        pass

    def interpolate(self, progress: float) -> None:
        for track, setter in self._tracks.values():
            setter(self._target, track.value_at(progress))

    def _hash_parameters(self) -> tuple[int, ...]:
        return tuple(
            hash_compose(hash_string(name), track.compute_hash())
            for name, (track, _) in self._tracks.items()
        )
