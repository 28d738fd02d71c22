"""Animated GIF and WebP providers."""

from .base import PillowSequenceOutputProvider


class GifOutputProvider(PillowSequenceOutputProvider):
    """Palette-quantized animated GIF. Browsers clamp delays below 20ms."""

    @property
    def output_format(self) -> str:
        return "gif"

    @property
    def save_options(self) -> dict[str, object]:
        return {"optimize": False, "disposal": 2}


class WebPOutputProvider(PillowSequenceOutputProvider):
    """Lossless animated WebP."""

    @property
    def output_format(self) -> str:
        return "webp"

    @property
    def save_options(self) -> dict[str, object]:
        return {
            "lossless": True,
            "quality": 100,
            "method": 4,
        }
