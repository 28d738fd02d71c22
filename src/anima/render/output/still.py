"""Still-image providers: a single PNG or a directory of numbered PNGs."""

import logging
from io import BytesIO
from typing import Iterator

from PIL import Image

from .base import OutputProvider

logger = logging.getLogger(__name__)

SPRITE_FRAME_TEMPLATE = "frame_{index:04d}.png"


class PngOutputProvider(OutputProvider):
    """Keeps only the last frame of the stream."""

    def encode(self, frames: Iterator[Image.Image], frame_duration: int) -> bytes:
        last = None
        for last in frames:
            pass
        if last is None:
            return b""
        buffer = BytesIO()
        last.save(buffer, format="PNG")
        return buffer.getvalue()


class SpriteOutputProvider(OutputProvider):
    """Writes every frame as ``frame_0000.png``, ``frame_0001.png``... in a directory."""

    def encode(self, frames: Iterator[Image.Image], frame_duration: int) -> bytes:
        raise TypeError("Sprite output is a directory of PNG files, not a single byte stream; use save()")

    def save(self, frames: Iterator[Image.Image], frame_rate: int) -> None:
        if self.path is None:
            raise ValueError("Output path not set")
        self.path.mkdir(parents=True, exist_ok=True)
        count = 0
        for index, frame in enumerate(frames):
            frame.save(self.path / SPRITE_FRAME_TEMPLATE.format(index=index), format="PNG")
            count += 1
        logger.debug("Wrote %d sprite frames to %s", count, self.path)
