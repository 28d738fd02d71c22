"""Scene camera: a mobject whose transform defines the visible frame."""

from typing import Self

from .constants import DEFAULT_HEIGHT, DEFAULT_WIDTH, FRAME_HEIGHT
from .hashing import hash_compose, hash_floats
from .mobjects.mobject import Mobject


class Camera(Mobject):
    """The viewpoint a scene is rendered from.

    Position pans the frame, rotation turns it and scale sizes it: a scale of
    2 shows twice as many world units, so the picture zooms out. Because the
    camera is a mobject, the regular MoveTo / Rotate / Scale animations drive
    it.
    """

    def __init__(self, pixel_width: int = DEFAULT_WIDTH, pixel_height: int = DEFAULT_HEIGHT):
        super().__init__()
        self.pixel_width = pixel_width
        self.pixel_height = pixel_height
        self.opacity = 1.0

    @property
    def frame_height(self) -> float:
        """Visible world height at the current zoom."""
        return FRAME_HEIGHT * self.scale_y

    @property
    def frame_width(self) -> float:
        """Visible world width at the current zoom."""
        return FRAME_HEIGHT * self.pixel_width / self.pixel_height * self.scale_x

    @property
    def zoom(self) -> float:
        return 1.0 / self.scale_x

    def zoom_to(self, zoom: float) -> Self:
        """Set the zoom factor; values above 1 magnify."""
        if zoom <= 0:
            raise ValueError(f"Zoom must be positive, got {zoom}")
        return self.set_scale(1.0 / zoom)

    def reset(self) -> Self:
        self.pos(0.0, 0.0)
        self.set_rotation(0.0)
        return self.set_scale(1.0)

    def compute_hash(self) -> int:
        return hash_compose(
            super().compute_hash(),
            hash_floats((self.pixel_width, self.pixel_height)),
        )
