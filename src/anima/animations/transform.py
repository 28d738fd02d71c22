"""Transformative animations on position, rotation and scale."""

from typing import TYPE_CHECKING

from ..hashing import hash_floats
from .animation import TransformativeAnimation

if TYPE_CHECKING:
    from ..mobjects.mobject import Mobject


class MoveTo(TransformativeAnimation):
    """Move the target's local position to an absolute point."""

    def __init__(self, target: "Mobject", x: float, y: float):
        super().__init__(target)
        self.end = (float(x), float(y))

    def capture_start_state(self) -> None:
        self._start = self._target.position

    def interpolate(self, progress: float) -> None:
        sx, sy = self._start
        ex, ey = self.end
        self._target.pos(sx + (ex - sx) * progress, sy + (ey - sy) * progress)

    def _hash_parameters(self) -> tuple[int, ...]:
        return (hash_floats(self.end),)


class Rotate(TransformativeAnimation):
    """Rotate the target by an angle in radians, relative to where it starts."""

    def __init__(self, target: "Mobject", angle: float):
        super().__init__(target)
        self.angle = float(angle)

    def capture_start_state(self) -> None:
        self._start_rotation = self._target.rotation

    def interpolate(self, progress: float) -> None:
        self._target.set_rotation(self._start_rotation + self.angle * progress)

    def _hash_parameters(self) -> tuple[int, ...]:
        return (hash_floats((self.angle,)),)


class Scale(TransformativeAnimation):
    """Scale the target to absolute factors; one factor scales uniformly."""

    def __init__(self, target: "Mobject", factor_x: float, factor_y: float | None = None):
        super().__init__(target)
        self.factor = (float(factor_x), float(factor_x if factor_y is None else factor_y))

    def capture_start_state(self) -> None:
        self._start_scale = self._target.scale

    def interpolate(self, progress: float) -> None:
        sx, sy = self._start_scale
        fx, fy = self.factor
        self._target.set_scale(sx + (fx - sx) * progress, sy + (fy - sy) * progress)

    def _hash_parameters(self) -> tuple[int, ...]:
        return (hash_floats(self.factor),)
