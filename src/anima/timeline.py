"""Time-indexed schedule of animations with random-access seeking."""

from dataclasses import dataclass
from itertools import groupby
from typing import Iterable

from .animations.animation import Animation
from .errors import SchedulingError


@dataclass(frozen=True)
class ScheduledAnimation:
    """An animation placed at an absolute start time."""

    animation: Animation
    start_time: float


@dataclass(frozen=True)
class ResolvedScheduledAnimation:
    """A scheduled animation with its delay folded into concrete times."""

    animation: Animation
    effective_start: float
    duration: float
    end_time: float


class Timeline:
    """Holds scheduled animations and evaluates them at arbitrary times.

    ``seek`` is the only evaluation primitive. It is idempotent: seeking to
    the same time twice, or to times in any order, leaves targets in the same
    state as a single seek would.
    """

    def __init__(self, loop: bool = False):
        self.loop = loop
        self._scheduled: list[ScheduledAnimation] = []
        self._current_time = 0.0

    @property
    def current_time(self) -> float:
        return self._current_time

    # ---- scheduling -------------------------------------------------

    def schedule(self, animation: Animation, start_time: float = 0.0) -> None:
        """
        Schedule an animation at an absolute time.

        Raises:
            SchedulingError: If start_time is negative
        """
        if start_time < 0:
            raise SchedulingError(f"Start time cannot be negative, got {start_time}")
        self._scheduled.append(ScheduledAnimation(animation, float(start_time)))

    def schedule_sequence(self, animations: Iterable[Animation], start_time: float = 0.0) -> None:
        """Schedule animations back to back, each after the previous one's delay and duration."""
        offset = start_time
        for animation in animations:
            self.schedule(animation, offset)
            offset += animation.get_delay() + animation.get_duration()

    def schedule_parallel(self, animations: Iterable[Animation], start_time: float = 0.0) -> None:
        """Schedule animations all at the same start time."""
        for animation in animations:
            self.schedule(animation, start_time)

    def get_scheduled(self) -> list[ScheduledAnimation]:
        return list(self._scheduled)

    def get_resolved(self) -> list[ResolvedScheduledAnimation]:
        """Compute effective start and end times for every scheduled animation."""
        resolved = []
        for entry in self._scheduled:
            animation = entry.animation
            effective_start = entry.start_time + animation.get_delay()
            duration = animation.get_duration()
            resolved.append(
                ResolvedScheduledAnimation(
                    animation=animation,
                    effective_start=effective_start,
                    duration=duration,
                    end_time=effective_start + duration,
                )
            )
        return resolved

    def get_total_duration(self) -> float:
        return max((r.end_time for r in self.get_resolved()), default=0.0)

    def clear(self) -> None:
        self._scheduled.clear()
        self._current_time = 0.0

    # ---- evaluation -------------------------------------------------

    def seek(self, time: float) -> None:
        """Put every scheduled animation's target into its state at a time."""
        t = max(0.0, time)
        if self.loop:
            total = self.get_total_duration()
            if total > 0 and t > total:
                t %= total
        self._current_time = t
        self._evaluate(t)

    def get_state_at(self, time: float) -> None:
        """Evaluate targets at a time without moving the current time."""
        current = self._current_time
        self.seek(time)
        self._current_time = current

    def _evaluate(self, t: float) -> None:
        self._prime()
        resolved = self.get_resolved()
        indexed = list(enumerate(resolved))

        pending = [(i, r) for i, r in indexed if t < r.effective_start]
        started = [(i, r) for i, r in indexed if t >= r.effective_start]

        # Pending animations rewind latest first so the earliest start wins.
        pending.sort(key=lambda item: (item[1].effective_start, item[0]), reverse=True)
        for _, r in pending:
            r.animation.update(0.0)

        started.sort(key=lambda item: (item[1].effective_start, item[0]))
        for _, r in started:
            if t >= r.end_time or r.duration <= 0:
                r.animation.update(1.0)
            else:
                r.animation.update((t - r.effective_start) / r.duration)

    def _prime(self) -> None:
        """Capture start state for animations that have not run yet.

        Animations are captured in batches of equal start time, in time
        order. Every member of a batch captures before any of them moves,
        then the batch is completed so later batches capture the state it
        leaves behind.
        """
        uninitialized = [e for e in self._scheduled if not e.animation.is_initialized]
        if not uninitialized:
            return

        ordered = sorted(self._scheduled, key=lambda e: e.start_time)
        for _, batch in groupby(ordered, key=lambda e: e.start_time):
            members = [e.animation for e in batch]
            for animation in members:
                animation.ensure_initialized()
            for animation in members:
                animation.update(1.0)
