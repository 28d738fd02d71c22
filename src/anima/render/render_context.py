"""World-to-screen mapping for one rendered frame."""

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..constants import FRAME_HEIGHT, REFERENCE_PIXEL_HEIGHT

if TYPE_CHECKING:
    from ..camera import Camera


@dataclass(frozen=True)
class RenderContext:
    """Camera state and canvas size frozen at the moment a frame is drawn.

    World units follow the Manim convention: the unzoomed frame is 8 units
    tall and y grows upwards.
    """

    width: int
    height: int
    camera_x: float = 0.0
    camera_y: float = 0.0
    camera_rotation: float = 0.0
    camera_scale_x: float = 1.0
    camera_scale_y: float = 1.0

    @classmethod
    def from_camera(cls, camera: "Camera", width: int, height: int) -> "RenderContext":
        return cls(
            width=width,
            height=height,
            camera_x=camera.x,
            camera_y=camera.y,
            camera_rotation=camera.rotation,
            camera_scale_x=camera.scale_x,
            camera_scale_y=camera.scale_y,
        )

    @property
    def pixels_per_unit(self) -> float:
        return self.height / FRAME_HEIGHT

    def to_screen(self, point: tuple[float, float]) -> tuple[float, float]:
        dx = point[0] - self.camera_x
        dy = point[1] - self.camera_y
        cos_r = math.cos(-self.camera_rotation)
        sin_r = math.sin(-self.camera_rotation)
        rx = (dx * cos_r - dy * sin_r) / self.camera_scale_x
        ry = (dx * sin_r + dy * cos_r) / self.camera_scale_y
        ppu = self.pixels_per_unit
        return (self.width / 2 + rx * ppu, self.height / 2 - ry * ppu)

    def stroke_px(self, stroke_width: float) -> int:
        """Stroke width in pixels, scaled from its 1080p value."""
        if stroke_width <= 0:
            return 0
        return max(1, round(stroke_width * self.height / REFERENCE_PIXEL_HEIGHT))
