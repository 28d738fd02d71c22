"""Camera motion: tracking a mobject and procedural shake."""

import math
import random
from typing import TYPE_CHECKING

from ..constants import FOLLOW_REFERENCE_RATE, SHAKE_FREQUENCY, SHAKE_INTENSITY
from ..hashing import hash_compose, hash_floats, hash_number
from .animation import TransformativeAnimation
from .easing import linear

if TYPE_CHECKING:
    from ..mobjects.mobject import Mobject


class Follow(TransformativeAnimation):
    """Keep the camera on a moving mobject.

    The followed object's world position is read on every update, so the
    camera tracks whatever moves it. Put the animations that move the
    followed object before the Follow in the same ``play`` call so they are
    evaluated first.

    With ``damping`` above 0 the camera eases toward the target instead of
    snapping: each 1/60 s it closes ``1 - damping`` of the remaining gap.
    """

    def __init__(
        self,
        camera: "Mobject",
        target: "Mobject",
        offset: tuple[float, float] = (0.0, 0.0),
        damping: float = 0.0,
    ):
        if not 0.0 <= damping < 1.0:
            raise ValueError(f"Follow damping must be in [0, 1), got {damping}")
        super().__init__(camera)
        self.followed = target
        self.offset = (float(offset[0]), float(offset[1]))
        self.damping = float(damping)
        self._easing = linear

    def capture_start_state(self) -> None:
        self._start = self._target.position

    def interpolate(self, progress: float) -> None:
        sx, sy = self._start
        if progress <= 0:
            self._target.pos(sx, sy)
            return

        fx, fy = self.followed.to_world((0.0, 0.0))
        gx, gy = fx + self.offset[0], fy + self.offset[1]
        if self.damping == 0:
            self._target.pos(gx, gy)
            return
        steps = progress * self._duration * FOLLOW_REFERENCE_RATE
        factor = 1.0 - self.damping**steps
        self._target.pos(sx + (gx - sx) * factor, sy + (gy - sy) * factor)

    def _hash_parameters(self) -> tuple[int, ...]:
        return (
            hash_floats((*self.offset, self.damping)),
            self.followed.compute_hash(),
        )


class Shake(TransformativeAnimation):
    """Jitter the target around its start position, then settle back on it.

    Displacement is layered sine noise scaled by ``intensity`` (world
    units). ``decay`` shapes how it dies out: 0 keeps full strength, 1 fades
    linearly, larger values fade faster. ``seed`` picks the noise pattern,
    so the same seed always shakes the same way.
    """

    def __init__(
        self,
        target: "Mobject",
        intensity: float = SHAKE_INTENSITY,
        frequency: float = SHAKE_FREQUENCY,
        decay: float = 1.0,
        seed: int = 0,
    ):
        if intensity < 0:
            raise ValueError(f"Shake intensity cannot be negative, got {intensity}")
        if frequency <= 0:
            raise ValueError(f"Shake frequency must be positive, got {frequency}")
        if decay < 0:
            raise ValueError(f"Shake decay cannot be negative, got {decay}")
        super().__init__(target)
        self.intensity = float(intensity)
        self.frequency = float(frequency)
        self.decay = float(decay)
        self.seed = seed
        rng = random.Random(seed)
        self._phase_x = rng.uniform(0.0, 1000.0)
        self._phase_y = rng.uniform(0.0, 1000.0)
        self._easing = linear

    def capture_start_state(self) -> None:
        self._start = self._target.position

    def interpolate(self, progress: float) -> None:
        sx, sy = self._start
        if progress <= 0 or progress >= 1:
            self._target.pos(sx, sy)
            return

        strength = self.intensity
        if self.decay > 0:
            strength *= 1.0 - progress**self.decay
        t = progress * self._duration * self.frequency
        self._target.pos(
            sx + _noise(t, self._phase_x) * strength,
            sy + _noise(t, self._phase_y) * strength,
        )

    def _hash_parameters(self) -> tuple[int, ...]:
        return (
            hash_floats((self.intensity, self.frequency, self.decay)),
            hash_number(self.seed),
        )


def _noise(t: float, phase: float) -> float:
    """Layered sines in [-1, 1]."""
    return (
        math.sin(t * 2 + phase) * 0.5
        + math.sin(t * 3.7 + phase * 1.3) * 0.3
        + math.sin(t * 7.1 + phase * 0.7) * 0.2
    )
