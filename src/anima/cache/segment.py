"""Segment record: the unit of cache granularity."""

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..animations.animation import Animation


@dataclass(frozen=True)
class Segment:
    """The time span of one ``play()`` or ``wait()`` call.

    The hash fingerprints the camera, every registered mobject, the segment's
    animations and its position in time. Wait segments carry no animations.
    """

    index: int
    start_time: float
    end_time: float
    animations: tuple["Animation", ...]
    hash: int

    @property
    def duration(self) -> float:
        return self.end_time - self.start_time
