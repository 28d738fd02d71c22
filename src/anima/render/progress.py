"""Frame-level progress reporting."""

import time
from typing import Callable

from .config import ProgressCallback, RenderProgress


class ProgressReporter:
    """Counts frames against a known total and notifies a callback.

    100% is reported exactly once, whether it is reached by advancing or by
    an explicit ``complete()``.
    """

    def __init__(
        self,
        total_frames: int,
        callback: ProgressCallback | None = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.total_frames = max(0, total_frames)
        self.current_frame = 0
        self._callback = callback
        self._clock = clock
        self._started = clock()
        self._completed = False

    def advance(self, frames: int = 1) -> None:
        """Count frames as done, whether rendered or reused from cache."""
        if frames <= 0:
            return
        self.current_frame = min(self.total_frames, self.current_frame + frames)
        self._emit()

    def complete(self) -> None:
        """Report 100% unless it has already been reported."""
        if self._completed:
            return
        self.current_frame = self.total_frames
        self._emit()

    def _emit(self) -> None:
        if self._completed:
            return
        if self.total_frames == 0:
            percentage = 100.0
        else:
            percentage = self.current_frame / self.total_frames * 100
        self._completed = percentage >= 100

        elapsed_ms = (self._clock() - self._started) * 1000
        if self.current_frame > 0:
            per_frame = elapsed_ms / self.current_frame
            remaining_ms = per_frame * (self.total_frames - self.current_frame)
        else:
            remaining_ms = 0.0

        if self._callback is not None:
            self._callback(
                RenderProgress(
                    current_frame=self.current_frame,
                    total_frames=self.total_frames,
                    percentage=percentage,
                    elapsed_ms=elapsed_ms,
                    estimated_remaining_ms=remaining_ms,
                )
            )
