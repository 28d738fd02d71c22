"""Base visual object with a local transform, opacity and scene-graph parent."""

import math
import weakref
from typing import TYPE_CHECKING, Iterator, Self

from PIL import ImageDraw

from ..animations.fade import FadeIn, FadeOut
from ..animations.transform import MoveTo, Rotate, Scale
from ..constants import DEFAULT_ANIMATION_DURATION
from ..hashing import hash_compose, hash_floats, hash_number, hash_string
from .animation_queue import AnimationQueue

if TYPE_CHECKING:
    from ..animations.animation import Animation
    from ..animations.easing import EasingFunction
    from ..render.render_context import RenderContext

Point = tuple[float, float]


class Mobject:
    """A positioned, styled object that animations can act on.

    Transform components are kept separately (position, rotation, scale) and
    composed with the parent chain when a point is mapped to world space.
    New mobjects are invisible until added to a scene or introduced.
    """

    def __init__(self) -> None:
        self.x = 0.0
        self.y = 0.0
        self.rotation = 0.0
        self.scale_x = 1.0
        self.scale_y = 1.0
        self.opacity = 0.0
        self._parent_ref: "weakref.ref[Mobject] | None" = None
        self._queue = AnimationQueue(self)

    # ---- scene graph -------------------------------------------------

    @property
    def parent(self) -> "Mobject | None":
        """Containing group, if any. Held weakly: children never keep parents alive."""
        if self._parent_ref is None:
            return None
        return self._parent_ref()

    def _set_parent(self, parent: "Mobject | None") -> None:
        self._parent_ref = weakref.ref(parent) if parent is not None else None

    def iter_ancestors(self) -> Iterator["Mobject"]:
        """Yield the parent chain from nearest to farthest."""
        current = self.parent
        while current is not None:
            yield current
            current = current.parent

    # ---- transform ---------------------------------------------------

    @property
    def position(self) -> Point:
        return (self.x, self.y)

    @property
    def scale(self) -> Point:
        return (self.scale_x, self.scale_y)

    def pos(self, x: float, y: float) -> Self:
        """Set the local position."""
        self.x = float(x)
        self.y = float(y)
        return self

    def set_rotation(self, angle: float) -> Self:
        """Set the local rotation in radians."""
        self.rotation = float(angle)
        return self

    def set_scale(self, sx: float, sy: float | None = None) -> Self:
        """Set the local scale; a single factor scales uniformly."""
        self.scale_x = float(sx)
        self.scale_y = float(sx if sy is None else sy)
        return self

    def set_opacity(self, value: float) -> Self:
        """Set opacity, clamped to [0, 1]."""
        self.opacity = max(0.0, min(1.0, float(value)))
        return self

    def show(self) -> Self:
        return self.set_opacity(1.0)

    def hide(self) -> Self:
        return self.set_opacity(0.0)

    def to_world(self, point: Point) -> Point:
        """Map a point from local space through this object and its ancestors."""
        px = point[0] * self.scale_x
        py = point[1] * self.scale_y
        cos_r = math.cos(self.rotation)
        sin_r = math.sin(self.rotation)
        world = (px * cos_r - py * sin_r + self.x, px * sin_r + py * cos_r + self.y)
        parent = self.parent
        if parent is not None:
            return parent.to_world(world)
        return world

    # ---- hashing and drawing ----------------------------------------

    def compute_hash(self) -> int:
        """Fingerprint of everything that affects how this object renders."""
        return hash_compose(
            hash_string(type(self).__name__),
            hash_floats((self.x, self.y, self.rotation, self.scale_x, self.scale_y)),
            hash_number(self.opacity),
        )

    def draw(self, draw: ImageDraw.ImageDraw, context: "RenderContext") -> None:
        """Plain mobjects have no visual representation."""
        del draw, context

    # ---- fluent animation queue -------------------------------------

    def fade_in(
        self,
        duration: float = DEFAULT_ANIMATION_DURATION,
        easing: "EasingFunction | None" = None,
    ) -> Self:
        """Queue a FadeIn."""
        self._queue.enqueue(FadeIn(self), duration, easing)
        return self

    def fade_out(
        self,
        duration: float = DEFAULT_ANIMATION_DURATION,
        easing: "EasingFunction | None" = None,
    ) -> Self:
        """Queue a FadeOut."""
        self._queue.enqueue(FadeOut(self), duration, easing)
        return self

    def move_to(
        self,
        x: float,
        y: float,
        duration: float = DEFAULT_ANIMATION_DURATION,
        easing: "EasingFunction | None" = None,
    ) -> Self:
        """Queue a MoveTo."""
        self._queue.enqueue(MoveTo(self, x, y), duration, easing)
        return self

    def rotate(
        self,
        angle: float,
        duration: float = DEFAULT_ANIMATION_DURATION,
        easing: "EasingFunction | None" = None,
    ) -> Self:
        """Queue a relative Rotate."""
        self._queue.enqueue(Rotate(self, angle), duration, easing)
        return self

    def scale_to(
        self,
        factor_x: float,
        factor_y: float | None = None,
        duration: float = DEFAULT_ANIMATION_DURATION,
        easing: "EasingFunction | None" = None,
    ) -> Self:
        """Queue a Scale."""
        self._queue.enqueue(Scale(self, factor_x, factor_y), duration, easing)
        return self

    def then(self, animation: "Animation") -> Self:
        """Queue a pre-built animation, such as a Parallel."""
        self._queue.enqueue_animation(animation)
        return self

    def has_queued_animations(self) -> bool:
        return not self._queue.is_empty()

    def to_animation(self) -> "Animation":
        """Build the queued chain into one animation and clear the queue."""
        return self._queue.to_animation()
