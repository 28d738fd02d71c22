"""Basic geometric shapes."""

import math

from ..constants import CIRCLE_SAMPLES
from .mobject import Point
from .vmobject import VMobject


class Arc(VMobject):
    """Circular arc centred on the local origin."""

    def __init__(self, radius: float = 1.0, start_angle: float = 0.0, end_angle: float = math.pi / 2):
        self.radius = radius
        self.start_angle = start_angle
        self.end_angle = end_angle
        super().__init__(self._arc_points(), closed=False)

    def _arc_points(self) -> list[Point]:
        sweep = self.end_angle - self.start_angle
        samples = max(2, math.ceil(CIRCLE_SAMPLES * abs(sweep) / (2 * math.pi)) + 1)
        return [
            (
                self.radius * math.cos(self.start_angle + sweep * i / (samples - 1)),
                self.radius * math.sin(self.start_angle + sweep * i / (samples - 1)),
            )
            for i in range(samples)
        ]


class Circle(Arc):
    """Closed circle of the given radius."""

    def __init__(self, radius: float = 1.0):
        super().__init__(radius, 0.0, 2 * math.pi)
        # The sampled arc repeats its first point; a closed outline doesn't need it.
        self.points = self.points[:-1]
        self.closed = True


class Polygon(VMobject):
    """Closed polygon through the given vertices."""

    def __init__(self, *vertices: Point):
        super().__init__(vertices, closed=True)


class Rectangle(Polygon):
    """Axis-aligned rectangle centred on the local origin."""

    def __init__(self, width: float = 2.0, height: float = 1.0):
        self.width = width
        self.height = height
        half_w = width / 2
        half_h = height / 2
        super().__init__((-half_w, -half_h), (half_w, -half_h), (half_w, half_h), (-half_w, half_h))


class Line(VMobject):
    """Open segment between two points."""

    def __init__(self, start: Point = (-1.0, 0.0), end: Point = (1.0, 0.0)):
        super().__init__((start, end), closed=False)
