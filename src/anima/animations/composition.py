"""Composite animations: children played one after another or together."""

from abc import abstractmethod
from typing import Iterable

from ..errors import SchedulingError
from ..hashing import hash_compose
from .animation import Animation, Lifecycle
from .easing import linear


class _Composite(Animation):
    """Shared plumbing for animations built from child animations.

    The composite drives children with raw progress; each child applies its
    own easing, so the composite itself is always linear.
    """

    def __init__(self, animations: Iterable[Animation]):
        children = list(animations)
        super().__init__(children[0].get_target() if children else None)
        self._children = children
        self._easing = linear
        self._duration = self._compute_duration()

    def get_children(self) -> list[Animation]:
        return list(self._children)

    def duration(self, seconds: float):
        raise SchedulingError(f"{type(self).__name__} duration is derived from its children")

    def ease(self, easing):
        raise SchedulingError(f"{type(self).__name__} does not apply easing to its children")

    def reset(self) -> None:
        super().reset()
        for child in self._children:
            child.reset()

    @abstractmethod
    def _compute_duration(self) -> float:
        """Duration implied by the children."""

    def compute_hash(self) -> int:
        return hash_compose(super().compute_hash(), *(c.compute_hash() for c in self._children))


class Sequence(_Composite):
    """Children play back to back; duration is the sum of child durations."""

    def __init__(self, animations: Iterable[Animation]):
        super().__init__(animations)
        first = self._children[0] if self._children else None
        if first is not None and first.get_lifecycle() is Lifecycle.INTRODUCTORY:
            self.lifecycle = Lifecycle.INTRODUCTORY
        else:
            self.lifecycle = Lifecycle.TRANSFORMATIVE

    def _compute_duration(self) -> float:
        return sum(child.get_duration() for child in self._children)

    def capture_start_state(self) -> None:
        # Each child captures after its predecessors have completed.
        for child in self._children:
            child.ensure_initialized()
            child.update(1.0)
        for child in reversed(self._children):
            child.update(0.0)

    def interpolate(self, progress: float) -> None:
        elapsed = progress * self._duration
        started: list[tuple[Animation, float]] = []
        pending: list[Animation] = []
        offset = 0.0
        for child in self._children:
            child_duration = child.get_duration()
            if elapsed < offset:
                pending.append(child)
            else:
                local = 1.0 if child_duration <= 0 else (elapsed - offset) / child_duration
                started.append((child, min(1.0, local)))
            offset += child_duration

        for child in reversed(pending):
            child.update(0.0)
        for child, local in started:
            child.update(local)


class Parallel(_Composite):
    """Children play at the same time; duration is the longest child."""

    def __init__(self, animations: Iterable[Animation]):
        super().__init__(animations)
        if self._children and all(
            child.get_lifecycle() is Lifecycle.INTRODUCTORY for child in self._children
        ):
            self.lifecycle = Lifecycle.INTRODUCTORY
        else:
            self.lifecycle = Lifecycle.TRANSFORMATIVE

    def _compute_duration(self) -> float:
        return max((child.get_duration() for child in self._children), default=0.0)

    def capture_start_state(self) -> None:
        for child in self._children:
            child.ensure_initialized()

    def interpolate(self, progress: float) -> None:
        elapsed = progress * self._duration
        for child in self._children:
            child_duration = child.get_duration()
            if child_duration <= 0:
                child.update(1.0)
            else:
                child.update(min(1.0, elapsed / child_duration))
