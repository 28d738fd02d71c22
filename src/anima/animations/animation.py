"""Base animation contract: timing, easing, lazy start-state capture."""

from abc import ABC, abstractmethod
from enum import Enum
from typing import TYPE_CHECKING, Self

from ..constants import DEFAULT_ANIMATION_DURATION
from ..errors import SchedulingError
from ..hashing import hash_compose, hash_number, hash_string
from .easing import EasingFunction, smooth

if TYPE_CHECKING:
    from ..mobjects.mobject import Mobject


class Lifecycle(Enum):
    """How an animation relates to its target's membership in a scene."""

    INTRODUCTORY = "introductory"  # brings the target into the scene
    TRANSFORMATIVE = "transformative"  # target must already be in the scene
    EXIT = "exit"  # target must already be in the scene


class Animation(ABC):
    """A time-parameterized change applied to a target mobject.

    Start state is captured lazily, on the first update, so an animation
    scheduled after others sees the state they leave behind. Subclasses
    implement ``capture_start_state`` and ``interpolate``; ``interpolate``
    must be a pure function of progress and the captured state.
    """

    lifecycle: Lifecycle = Lifecycle.TRANSFORMATIVE

    def __init__(self, target: "Mobject | None"):
        self._target = target
        self._duration = DEFAULT_ANIMATION_DURATION
        self._delay = 0.0
        self._easing: EasingFunction = smooth
        self._initialized = False

    # ---- configuration ----------------------------------------------

    def duration(self, seconds: float) -> Self:
        """
        Set the duration.

        Raises:
            SchedulingError: If seconds is not positive
        """
        if seconds <= 0:
            raise SchedulingError(f"Animation duration must be positive, got {seconds}")
        self._duration = float(seconds)
        return self

    def delay(self, seconds: float) -> Self:
        """
        Set the delay before the animation starts.

        Raises:
            SchedulingError: If seconds is negative
        """
        if seconds < 0:
            raise SchedulingError(f"Animation delay cannot be negative, got {seconds}")
        self._delay = float(seconds)
        return self

    def ease(self, easing: EasingFunction) -> Self:
        self._easing = easing
        return self

    def get_duration(self) -> float:
        return self._duration

    def get_delay(self) -> float:
        return self._delay

    def get_easing(self) -> EasingFunction:
        return self._easing

    def get_target(self) -> "Mobject | None":
        return self._target

    def get_lifecycle(self) -> Lifecycle:
        return self.lifecycle

    # ---- evaluation -------------------------------------------------

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    def ensure_initialized(self) -> None:
        """Capture start state if it has not been captured yet."""
        if self._initialized:
            return
        self._initialized = True
        self.capture_start_state()

    def reset(self) -> None:
        """Forget the captured start state; the next update recaptures it."""
        self._initialized = False

    def update(self, progress: float) -> None:
        """Apply the animation at a progress in [0, 1], before easing."""
        progress = max(0.0, min(1.0, progress))
        self.ensure_initialized()
        self.interpolate(self._easing(progress))

    @abstractmethod
    def capture_start_state(self) -> None:
        """Record whatever interpolate needs from the target's current state."""

    @abstractmethod
    def interpolate(self, progress: float) -> None:
        """Write the target's state at an eased progress."""

    # ---- hashing ----------------------------------------------------

    def compute_hash(self) -> int:
        target_hash = self._target.compute_hash() if self._target is not None else 0
        return hash_compose(
            hash_string(type(self).__name__),
            hash_number(self._duration),
            hash_number(self._delay),
            hash_string(getattr(self._easing, "__name__", repr(self._easing))),
            target_hash,
            *self._hash_parameters(),
        )

    def _hash_parameters(self) -> tuple[int, ...]:
        """Hashes of subclass-specific parameters."""
        return ()


class IntroductoryAnimation(Animation):
    """Brings its target into the scene; the scene registers the target."""

    lifecycle = Lifecycle.INTRODUCTORY


class TransformativeAnimation(Animation):
    """Changes an object that is already in the scene."""

    lifecycle = Lifecycle.TRANSFORMATIVE


class ExitAnimation(Animation):
    """Takes an object that is in the scene out of view."""

    lifecycle = Lifecycle.EXIT
