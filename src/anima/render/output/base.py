"""Base classes for Pillow-backed output providers."""

from abc import ABC, abstractmethod
from io import BytesIO
from pathlib import Path
from typing import Iterator

from PIL import Image


def frame_duration_ms(frame_rate: int) -> int:
    """Per-frame display time in whole milliseconds, never below 1."""
    return max(1, round(1000 / frame_rate))


class OutputProvider(ABC):
    """Turns a stream of rendered frames into an output file."""

    def __init__(self, path: str | Path = ""):
        """
        Initialize the provider with an output path.

        Args:
            path: Path to the output file or directory
        """
        self.path = Path(path) if path else None

    @abstractmethod
    def encode(self, frames: Iterator[Image.Image], frame_duration: int) -> bytes:
        """
        Encode frames into the output format.

        Args:
            frames: Rendered frames in time order
            frame_duration: Frame duration in milliseconds

        Returns:
            Encoded output as bytes
        """
        raise NotImplementedError

    def write(self, data: bytes) -> None:
        """
        Write encoded data to the output path.

        Args:
            data: Encoded data to write
        """
        if self.path is None:
            raise ValueError("Output path not set")
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_bytes(data)

    def save(self, frames: Iterator[Image.Image], frame_rate: int) -> None:
        """Encode frames at a frame rate and write the result."""
        self.write(self.encode(frames, frame_duration_ms(frame_rate)))


class PillowSequenceOutputProvider(OutputProvider, ABC):
    """Template provider for Pillow-supported animated image formats."""

    @property
    @abstractmethod
    def output_format(self) -> str:
        """Pillow format identifier (for example, ``gif`` or ``webp``)."""
        raise NotImplementedError

    @property
    def save_options(self) -> dict[str, object]:
        """Additional Pillow ``save`` kwargs for this format."""
        return {}

    def encode(self, frames: Iterator[Image.Image], frame_duration: int) -> bytes:
        frame_list = list(frames)
        if not frame_list:
            return b""

        buffer = BytesIO()
        frame_list[0].save(
            buffer,
            format=self.output_format,
            save_all=True,
            append_images=frame_list[1:],
            duration=frame_duration,
            loop=0,
            **self.save_options,
        )
        return buffer.getvalue()
