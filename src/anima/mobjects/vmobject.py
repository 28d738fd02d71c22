"""Vector mobject: a styled polyline outline drawn with Pillow."""

import math
from typing import TYPE_CHECKING, Iterable, Self

from PIL import ImageDraw

from ..constants import DEFAULT_STROKE_WIDTH, WHITE
from ..hashing import hash_compose, hash_floats, hash_number
from .mobject import Mobject, Point

if TYPE_CHECKING:
    from ..render.render_context import RenderContext

Color = tuple[int, int, int]


class VMobject(Mobject):
    """A mobject defined by an outline of points with stroke and fill styling."""

    def __init__(self, points: Iterable[Point] = (), closed: bool = False):
        """
        Initialize the outline.

        Args:
            points: Outline vertices in local coordinates
            closed: Whether the last point connects back to the first
        """
        super().__init__()
        self.points: list[Point] = [(float(x), float(y)) for x, y in points]
        self.closed = closed
        self.stroke_color: Color = WHITE
        self.stroke_width = DEFAULT_STROKE_WIDTH
        self.fill_color: Color = WHITE
        self.fill_opacity = 0.0
        self.draw_fraction = 1.0

    def stroke(self, color: Color, width: float | None = None) -> Self:
        """Set the stroke color and, optionally, its width in pixels."""
        self.stroke_color = color
        if width is not None:
            self.stroke_width = float(width)
        return self

    def fill(self, color: Color, opacity: float = 1.0) -> Self:
        """Set the fill color and opacity."""
        self.fill_color = color
        self.fill_opacity = max(0.0, min(1.0, float(opacity)))
        return self

    def set_draw_fraction(self, fraction: float) -> Self:
        """Reveal only the leading fraction of the outline."""
        self.draw_fraction = max(0.0, min(1.0, float(fraction)))
        return self

    def world_points(self) -> list[Point]:
        return [self.to_world(p) for p in self.points]

    def compute_hash(self) -> int:
        flat = [coord for point in self.points for coord in point]
        return hash_compose(
            super().compute_hash(),
            hash_floats(flat),
            hash_number(1.0 if self.closed else 0.0),
            hash_floats((*self.stroke_color, self.stroke_width)),
            hash_floats((*self.fill_color, self.fill_opacity)),
            hash_number(self.draw_fraction),
        )

    def draw(self, draw: ImageDraw.ImageDraw, context: "RenderContext") -> None:
        """Draw the visible part of the outline onto an RGBA overlay."""
        if self.opacity <= 0 or self.draw_fraction <= 0 or len(self.points) < 2:
            return

        screen = [context.to_screen(p) for p in self.world_points()]
        complete = self.draw_fraction >= 1.0
        if self.closed and complete:
            outline = screen + [screen[0]]
        else:
            outline = _partial_outline(screen, self.draw_fraction)

        if self.closed and complete and self.fill_opacity > 0 and len(screen) >= 3:
            draw.polygon(screen, fill=(*self.fill_color, _alpha(self.fill_opacity * self.opacity)))

        width = context.stroke_px(self.stroke_width)
        if width > 0 and len(outline) >= 2:
            draw.line(
                outline,
                fill=(*self.stroke_color, _alpha(self.opacity)),
                width=width,
                joint="curve",
            )


def _alpha(opacity: float) -> int:
    return int(round(max(0.0, min(1.0, opacity)) * 255))


def _partial_outline(points: list[Point], fraction: float) -> list[Point]:
    """Cut a polyline at a fraction of its total length."""
    if fraction >= 1.0:
        return list(points)
    lengths = [math.dist(a, b) for a, b in zip(points, points[1:])]
    remaining = sum(lengths) * fraction
    result = [points[0]]
    for (start, end), length in zip(zip(points, points[1:]), lengths):
        if remaining >= length:
            result.append(end)
            remaining -= length
            continue
        if length > 0:
            t = remaining / length
            result.append((start[0] + (end[0] - start[0]) * t, start[1] + (end[1] - start[1]) * t))
        break
    return result
