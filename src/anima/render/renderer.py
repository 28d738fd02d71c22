"""Scene to file: cache-aware segmented rendering and the monolithic fallback."""

import logging
import math
import os
from functools import partial
from pathlib import Path
from typing import Callable, Iterator, Sequence

from PIL import Image

from ..cache.segment import Segment
from ..cache.segment_cache import SegmentCache
from ..constants import CACHE_DIR_NAME
from ..hashing import hash_compose, hash_number
from ..scene import Scene
from .config import RenderConfig, RenderFormat
from .encoder import FFmpegEncoder, FrameEncoder, concat_segments, resolve_ffmpeg_binary
from .formats import format_spec, resolve_render_format
from .frame_renderer import FrameRenderer
from .progress import ProgressReporter

logger = logging.getLogger(__name__)

EncoderFactory = Callable[[Path, int, int, int], FrameEncoder]
Concatenator = Callable[[Sequence[Path], Path], None]


def segment_frame_count(segment: Segment, frame_rate: int) -> int:
    """Frames sampled for one segment; zero-length segments contribute none."""
    return max(0, round(segment.duration * frame_rate))


def segment_cache_key(segment_hash: int, width: int, height: int, frame_rate: int) -> int:
    """Cache key for a segment rendered at a given output size and frame rate."""
    return hash_compose(segment_hash, hash_number(width), hash_number(height), hash_number(frame_rate))


def total_frame_count(duration: float, frame_rate: int) -> int:
    """Frames for a whole timeline, including the frame at its final instant."""
    # tolerate float error in duration * frame_rate
    return math.floor(duration * frame_rate + 1e-9) + 1


class Renderer:
    """Writes scenes to video, animated image, PNG or sprite outputs.

    The encoder factory and concatenator are injectable so the pipeline can
    run without an ffmpeg binary.
    """

    def __init__(
        self,
        encoder_factory: EncoderFactory | None = None,
        concatenator: Concatenator | None = None,
        ffmpeg_binary: str | None = None,
    ):
        self.ffmpeg_binary = resolve_ffmpeg_binary(ffmpeg_binary)
        self._encoder_factory = encoder_factory or self._ffmpeg_encoder
        self._concatenator = concatenator or partial(
            concat_segments, ffmpeg_binary=self.ffmpeg_binary
        )

    def _ffmpeg_encoder(self, path: Path, width: int, height: int, frame_rate: int) -> FrameEncoder:
        return FFmpegEncoder(path, width, height, frame_rate, ffmpeg_binary=self.ffmpeg_binary)

    # ---- public API -------------------------------------------------

    def render(
        self,
        scene: Scene,
        output_path: str | Path,
        config: RenderConfig | None = None,
    ) -> Path:
        """
        Render a whole scene.

        Segment-cacheable formats with caching enabled render segment by
        segment, reusing cached partial files; everything else renders in
        one pass.

        Args:
            scene: A constructed scene
            output_path: Output file, or directory for sprite output
            config: Render settings

        Returns:
            The output path
        """
        config = config or RenderConfig()
        output = Path(output_path)
        fmt = resolve_render_format(output, config.format)
        spec = format_spec(fmt)
        width, height = config.resolve_dimensions(scene)
        frame_rate = config.resolve_frame_rate(scene)
        frame_renderer = FrameRenderer(scene, width, height)

        use_cache = spec.segment_cacheable if config.cache is None else config.cache
        if use_cache and not spec.segment_cacheable:
            logger.info("Segment cache is not available for %s output; rendering in one pass", fmt.value)
            use_cache = False

        logger.info(
            "Rendering %s to %s (%dx%d @ %dfps, cache %s)",
            type(scene).__name__, output, width, height, frame_rate, "on" if use_cache else "off",
        )
        if use_cache:
            self._render_segmented(scene, frame_renderer, output, frame_rate, config)
        else:
            self._render_monolithic(scene, frame_renderer, output, fmt, frame_rate, config)
        return output

    def render_frame_at(
        self,
        scene: Scene,
        time: float,
        output_path: str | Path,
        config: RenderConfig | None = None,
    ) -> Path:
        """Render the scene at one time to a PNG file."""
        config = config or RenderConfig()
        output = Path(output_path)
        width, height = config.resolve_dimensions(scene)
        image = FrameRenderer(scene, width, height).render_frame(time)
        output.parent.mkdir(parents=True, exist_ok=True)
        image.save(output, format="PNG")
        logger.info("Saved frame at %.3fs to %s", time, output)
        return output

    def render_last_frame(
        self,
        scene: Scene,
        output_path: str | Path,
        config: RenderConfig | None = None,
    ) -> Path:
        """Render the final state of the scene to a PNG file."""
        return self.render_frame_at(scene, scene.get_total_duration(), output_path, config)

    # ---- segmented path ---------------------------------------------

    def _render_segmented(
        self,
        scene: Scene,
        frame_renderer: FrameRenderer,
        output: Path,
        frame_rate: int,
        config: RenderConfig,
    ) -> None:
        segments = scene.get_segments()
        cache_dir = Path(config.cache_dir) if config.cache_dir else output.parent / CACHE_DIR_NAME
        cache = SegmentCache(cache_dir)
        cache.init()

        plan = [(segment, segment_frame_count(segment, frame_rate)) for segment in segments]
        reporter = ProgressReporter(sum(count for _, count in plan), config.on_progress)

        width, height = frame_renderer.width, frame_renderer.height
        keys = [segment_cache_key(segment.hash, width, height, frame_rate) for segment in segments]

        partials: list[Path] = []
        rendered = reused = 0
        for (segment, frame_count), key in zip(plan, keys):
            if frame_count == 0:
                continue
            path = cache.get_path(key)
            if cache.has(key):
                logger.debug("Segment %d reused from %s", segment.index, path.name)
                reporter.advance(frame_count)
                reused += 1
            else:
                self._render_segment(
                    frame_renderer, segment, frame_count, frame_rate, path, cache.get_temp_path(key), reporter
                )
                rendered += 1
            partials.append(path)

        if not partials:
            logger.info("Scene has no frames to segment; rendering in one pass")
            self._render_monolithic(scene, frame_renderer, output, RenderFormat.MP4, frame_rate, config)
            return

        self._concatenator(partials, output)
        reporter.complete()
        logger.info("Segments: %d rendered, %d reused", rendered, reused)

        removed = cache.prune(keys)
        if removed:
            logger.info("Pruned %d stale cached segments", removed)

    def _render_segment(
        self,
        frame_renderer: FrameRenderer,
        segment: Segment,
        frame_count: int,
        frame_rate: int,
        path: Path,
        temp_path: Path,
        reporter: ProgressReporter,
    ) -> None:
        # A cache path only ever holds a completely encoded segment.
        logger.debug("Rendering segment %d (%d frames)", segment.index, frame_count)
        try:
            with self._encoder_factory(temp_path, frame_renderer.width, frame_renderer.height, frame_rate) as encoder:
                for i in range(frame_count):
                    encoder.write_frame(frame_renderer.render_frame(segment.start_time + i / frame_rate))
                    reporter.advance()
            os.replace(temp_path, path)
        except BaseException:
            temp_path.unlink(missing_ok=True)
            raise

    # ---- monolithic path --------------------------------------------

    def _render_monolithic(
        self,
        scene: Scene,
        frame_renderer: FrameRenderer,
        output: Path,
        fmt: RenderFormat,
        frame_rate: int,
        config: RenderConfig,
    ) -> None:
        if fmt is RenderFormat.PNG:
            reporter = ProgressReporter(1, config.on_progress)
            times = [scene.get_total_duration()]
        else:
            frame_count = total_frame_count(scene.get_total_duration(), frame_rate)
            reporter = ProgressReporter(frame_count, config.on_progress)
            times = [i / frame_rate for i in range(frame_count)]

        frames = self._frames(frame_renderer, times, reporter)
        provider_class = format_spec(fmt).provider_class
        if provider_class is None:
            output.parent.mkdir(parents=True, exist_ok=True)
            with self._encoder_factory(output, frame_renderer.width, frame_renderer.height, frame_rate) as encoder:
                for frame in frames:
                    encoder.write_frame(frame)
        else:
            provider_class(output).save(frames, frame_rate)
        reporter.complete()

    @staticmethod
    def _frames(
        frame_renderer: FrameRenderer,
        times: list[float],
        reporter: ProgressReporter,
    ) -> Iterator[Image.Image]:
        for time in times:
            yield frame_renderer.render_frame(time)
            reporter.advance()
