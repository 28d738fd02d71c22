"""Queue backing the fluent animation API on mobjects."""

from typing import TYPE_CHECKING

from ..animations.composition import Sequence
from ..errors import SchedulingError

if TYPE_CHECKING:
    from ..animations.animation import Animation
    from ..animations.easing import EasingFunction
    from .mobject import Mobject


class AnimationQueue:
    """Ordered animations waiting to be played for one mobject."""

    def __init__(self, target: "Mobject"):
        self.target = target
        self._entries: list["Animation"] = []

    def __len__(self) -> int:
        return len(self._entries)

    def is_empty(self) -> bool:
        return not self._entries

    def enqueue(
        self,
        animation: "Animation",
        duration: float,
        easing: "EasingFunction | None" = None,
    ) -> None:
        """Configure and append a freshly built animation."""
        animation.duration(duration)
        if easing is not None:
            animation.ease(easing)
        self._entries.append(animation)

    def enqueue_animation(self, animation: "Animation") -> None:
        """Append a pre-built animation as-is."""
        self._entries.append(animation)

    def get_total_duration(self) -> float:
        return sum(a.get_duration() + a.get_delay() for a in self._entries)

    def to_animation(self) -> "Animation":
        """
        Build the queue into a single animation and clear it.

        Returns:
            The only queued animation, or a Sequence of all of them

        Raises:
            SchedulingError: If nothing is queued
        """
        if not self._entries:
            raise SchedulingError(
                f"{type(self.target).__name__} has no queued animations to play"
            )

        animations = list(self._entries)
        self._entries.clear()
        if len(animations) == 1:
            return animations[0]
        return Sequence(animations)
