"""Progressive outline reveal and erase."""

from .animation import ExitAnimation, IntroductoryAnimation


class Create(IntroductoryAnimation):
    """Draw the target's outline from nothing to complete.

    The target is made fully opaque for the duration; only the drawn
    fraction of its outline changes.
    """

    def capture_start_state(self) -> None:
        self._start_opacity = self._target.opacity

    def interpolate(self, progress: float) -> None:
        if progress <= 0:
            self._target.set_opacity(self._start_opacity)
            self._target.set_draw_fraction(0.0)
            return
        self._target.set_opacity(1.0)
        self._target.set_draw_fraction(progress)


class Unwrite(ExitAnimation):
    """Erase the target's outline, the reverse of Create, ending invisible."""

    def capture_start_state(self) -> None:
        self._start_opacity = self._target.opacity
        self._start_fraction = self._target.draw_fraction

    def interpolate(self, progress: float) -> None:
        if progress <= 0:
            self._target.set_opacity(self._start_opacity)
            self._target.set_draw_fraction(self._start_fraction)
            return
        if progress >= 1:
            self._target.set_opacity(0.0)
            self._target.set_draw_fraction(0.0)
            return
        self._target.set_opacity(self._start_opacity or 1.0)
        self._target.set_draw_fraction(1.0 - progress)
