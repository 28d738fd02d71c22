"""Output formats and how an output path selects one."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .config import RenderFormat
from .output import (
    GifOutputProvider,
    OutputProvider,
    PngOutputProvider,
    SpriteOutputProvider,
    WebPOutputProvider,
)


@dataclass(frozen=True)
class RenderFormatSpec:
    extension: str
    segment_cacheable: bool
    provider_class: type[OutputProvider] | None  # None: encoded by ffmpeg


_RENDER_FORMATS: dict[RenderFormat, RenderFormatSpec] = {
    RenderFormat.MP4: RenderFormatSpec(
        extension=".mp4",
        segment_cacheable=True,
        provider_class=None,
    ),
    RenderFormat.GIF: RenderFormatSpec(
        extension=".gif",
        segment_cacheable=False,
        provider_class=GifOutputProvider,
    ),
    RenderFormat.WEBP: RenderFormatSpec(
        extension=".webp",
        segment_cacheable=False,
        provider_class=WebPOutputProvider,
    ),
    RenderFormat.PNG: RenderFormatSpec(
        extension=".png",
        segment_cacheable=False,
        provider_class=PngOutputProvider,
    ),
    RenderFormat.SPRITE: RenderFormatSpec(
        extension="",
        segment_cacheable=False,
        provider_class=SpriteOutputProvider,
    ),
}


def supported_render_formats() -> tuple[str, ...]:
    return tuple(fmt.value for fmt in _RENDER_FORMATS)


def format_spec(fmt: RenderFormat) -> RenderFormatSpec:
    return _RENDER_FORMATS[fmt]


def resolve_render_format(output_path: str | Path, fmt: Any = None) -> RenderFormat:
    """
    Pick the output format from an explicit value or the path's extension.

    A path without an extension is a sprite directory.

    Raises:
        ValueError: If the format or extension is not supported
    """
    if fmt is not None:
        try:
            return RenderFormat(str(getattr(fmt, "value", fmt)).lower())
        except ValueError:
            supported = ", ".join(supported_render_formats())
            raise ValueError(f"Invalid format. Choose from: {supported}") from None

    ext = Path(output_path).suffix.lower()
    for render_format, spec in _RENDER_FORMATS.items():
        if spec.extension == ext:
            return render_format
    supported = ", ".join(spec.extension for spec in _RENDER_FORMATS.values() if spec.extension)
    raise ValueError(f"Unsupported output format: {ext}. Supported formats: {supported}")
