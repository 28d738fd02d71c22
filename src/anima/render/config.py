"""Render configuration and progress records."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from ..scene import Scene


class RenderFormat(str, Enum):
    MP4 = "mp4"
    GIF = "gif"
    WEBP = "webp"
    PNG = "png"
    SPRITE = "sprite"


class RenderQuality(str, Enum):
    PRODUCTION = "production"
    PREVIEW = "preview"  # half resolution


RESOLUTION_PRESETS: dict[str, tuple[int, int]] = {
    "480": (854, 480),
    "720": (1280, 720),
    "1080": (1920, 1080),
    "4k": (3840, 2160),
}


@dataclass(frozen=True)
class RenderProgress:
    current_frame: int
    total_frames: int
    percentage: float
    elapsed_ms: float
    estimated_remaining_ms: float


ProgressCallback = Callable[[RenderProgress], None]


@dataclass
class RenderConfig:
    """Per-render settings. Unset dimensions and frame rate come from the scene."""

    width: int | None = None
    height: int | None = None
    frame_rate: int | None = None
    format: RenderFormat | str | None = None
    quality: RenderQuality = RenderQuality.PRODUCTION
    cache: bool | None = None  # None: on for segment-cacheable formats
    cache_dir: str | Path | None = None
    on_progress: ProgressCallback | None = None

    def resolve_dimensions(self, scene: "Scene") -> tuple[int, int]:
        width = self.width or scene.get_width()
        height = self.height or scene.get_height()
        if self.quality is RenderQuality.PREVIEW:
            width, height = _even(width // 2), _even(height // 2)
        return width, height

    def resolve_frame_rate(self, scene: "Scene") -> int:
        frame_rate = self.frame_rate or scene.get_frame_rate()
        if frame_rate <= 0:
            raise ValueError(f"Frame rate must be positive, got {frame_rate}")
        return frame_rate


def _even(value: int) -> int:
    # yuv420p needs even dimensions
    return max(2, value - value % 2)
