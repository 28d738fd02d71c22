"""Pillow output providers for non-video formats."""

from .animated import GifOutputProvider, WebPOutputProvider
from .base import OutputProvider, PillowSequenceOutputProvider, frame_duration_ms
from .still import PngOutputProvider, SpriteOutputProvider

__all__ = [
    "GifOutputProvider",
    "OutputProvider",
    "PillowSequenceOutputProvider",
    "PngOutputProvider",
    "SpriteOutputProvider",
    "WebPOutputProvider",
    "frame_duration_ms",
]
