"""FFmpeg subprocess wrappers: frame encoding and stream-copy concatenation."""

import logging
import os
import shutil
import subprocess
from pathlib import Path
from typing import IO, Protocol, Self, Sequence

from PIL import Image

from ..constants import CONCAT_LIST_NAME, DEFAULT_FFMPEG_BINARY, FFMPEG_ENV_VAR
from ..errors import EncoderProcessError

logger = logging.getLogger(__name__)


def resolve_ffmpeg_binary(explicit: str | None = None) -> str:
    """Explicit binary, else ``$ANIMA_FFMPEG``, else ``ffmpeg`` on PATH."""
    return explicit or os.environ.get(FFMPEG_ENV_VAR) or DEFAULT_FFMPEG_BINARY


class FrameEncoder(Protocol):
    """Sink that turns frames into a video file."""

    def write_frame(self, image: Image.Image) -> None: ...

    def close(self) -> None: ...

    def __enter__(self) -> Self: ...

    def __exit__(self, exc_type, exc, tb) -> None: ...


class FFmpegEncoder:
    """One ffmpeg process reading PNG frames from stdin into an H.264 file.

    Use as a context manager: a clean exit waits for ffmpeg and checks its
    exit code, an exception kills the process.
    """

    def __init__(
        self,
        output_path: str | Path,
        width: int,
        height: int,
        frame_rate: int,
        ffmpeg_binary: str = DEFAULT_FFMPEG_BINARY,
        crf: int = 18,
    ):
        self.output_path = Path(output_path)
        self.width = width
        self.height = height
        self.frame_rate = frame_rate
        self.ffmpeg_binary = ffmpeg_binary
        self.crf = crf
        self._process: subprocess.Popen | None = None

    def command(self) -> list[str]:
        return [
            self.ffmpeg_binary,
            "-y",
            "-hide_banner",
            "-loglevel", "error",
            "-f", "image2pipe",
            "-vcodec", "png",
            "-r", str(self.frame_rate),
            "-i", "-",
            "-c:v", "libx264",
            "-pix_fmt", "yuv420p",
            "-crf", str(self.crf),
            str(self.output_path),
        ]

    def start(self) -> None:
        if self._process is not None:
            return
        cmd = self.command()
        logger.debug("Starting encoder: %s", " ".join(cmd))
        try:
            self._process = subprocess.Popen(
                cmd,
                stdin=subprocess.PIPE,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.PIPE,
            )
        except FileNotFoundError as e:
            raise EncoderProcessError(
                f"FFmpeg binary '{self.ffmpeg_binary}' not found; install ffmpeg or set {FFMPEG_ENV_VAR}"
            ) from e

    def write_frame(self, image: Image.Image) -> None:
        self.start()
        stdin: IO[bytes] = self._process.stdin
        if image.size != (self.width, self.height):
            image = image.resize((self.width, self.height))
        try:
            image.save(stdin, format="PNG")
        except BrokenPipeError as e:
            _, stderr = self._process.communicate()
            raise EncoderProcessError(
                "FFmpeg stopped accepting frames",
                self._process.returncode,
                stderr.decode(errors="replace"),
            ) from e

    def close(self) -> None:
        """
        Finish the stream and wait for ffmpeg.

        Raises:
            EncoderProcessError: If ffmpeg exits non-zero
        """
        self.start()
        _, stderr = self._process.communicate()
        if self._process.returncode != 0:
            raise EncoderProcessError(
                f"FFmpeg failed to encode {self.output_path.name}",
                self._process.returncode,
                stderr.decode(errors="replace"),
            )
        logger.debug("Encoded %s", self.output_path)

    def kill(self) -> None:
        if self._process is not None and self._process.poll() is None:
            self._process.kill()
            self._process.communicate()

    def __enter__(self) -> Self:
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if exc_type is not None:
            self.kill()
            return
        self.close()


def concat_segments(
    paths: Sequence[str | Path],
    output_path: str | Path,
    ffmpeg_binary: str = DEFAULT_FFMPEG_BINARY,
) -> None:
    """
    Join partial videos into one file without re-encoding.

    A single input is copied as-is. Otherwise ffmpeg's concat demuxer reads a
    transient list file written next to the output; the list is always
    removed afterwards.

    Raises:
        ValueError: If no paths are given
        EncoderProcessError: If ffmpeg exits non-zero
    """
    if not paths:
        raise ValueError("Nothing to concatenate")
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)

    if len(paths) == 1:
        shutil.copyfile(paths[0], output)
        return

    list_path = output.parent / CONCAT_LIST_NAME
    # concat demuxer syntax: file '<path>' per line, single quotes escaped
    lines = []
    for path in paths:
        escaped = str(Path(path).resolve()).replace("'", "'\\''")
        lines.append(f"file '{escaped}'\n")
    list_path.write_text("".join(lines), encoding="utf-8")

    cmd = [
        ffmpeg_binary,
        "-y",
        "-hide_banner",
        "-loglevel", "error",
        "-f", "concat",
        "-safe", "0",
        "-i", str(list_path),
        "-c", "copy",
        str(output),
    ]
    try:
        logger.debug("Concatenating %d segments: %s", len(paths), " ".join(cmd))
        try:
            proc = subprocess.run(cmd, capture_output=True, text=True)
        except FileNotFoundError as e:
            raise EncoderProcessError(
                f"FFmpeg binary '{ffmpeg_binary}' not found; install ffmpeg or set {FFMPEG_ENV_VAR}"
            ) from e
        if proc.returncode != 0:
            raise EncoderProcessError("FFmpeg failed to concatenate segments", proc.returncode, proc.stderr)
    finally:
        try:
            list_path.unlink()
        except FileNotFoundError:
            pass
        except OSError as e:
            logger.warning("Could not remove concat list %s: %s", list_path, e)
