"""Rendering: frame sampling, encoding and the segment-cached pipeline."""

from .config import (
    RESOLUTION_PRESETS,
    ProgressCallback,
    RenderConfig,
    RenderFormat,
    RenderProgress,
    RenderQuality,
)
from .encoder import FFmpegEncoder, FrameEncoder, concat_segments, resolve_ffmpeg_binary
from .formats import RenderFormatSpec, resolve_render_format, supported_render_formats
from .frame_renderer import FrameRenderer
from .progress import ProgressReporter
from .render_context import RenderContext
from .renderer import Renderer

__all__ = [
    "FFmpegEncoder",
    "FrameEncoder",
    "FrameRenderer",
    "ProgressCallback",
    "ProgressReporter",
    "RESOLUTION_PRESETS",
    "RenderConfig",
    "RenderContext",
    "RenderFormat",
    "RenderFormatSpec",
    "RenderProgress",
    "RenderQuality",
    "Renderer",
    "concat_segments",
    "resolve_ffmpeg_binary",
    "resolve_render_format",
    "supported_render_formats",
]
