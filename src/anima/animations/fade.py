"""Opacity animations."""

from .animation import ExitAnimation, IntroductoryAnimation


class FadeIn(IntroductoryAnimation):
    """Fade the target from its current opacity to fully opaque."""

    def capture_start_state(self) -> None:
        self._start_opacity = self._target.opacity

    def interpolate(self, progress: float) -> None:
        start = self._start_opacity
        self._target.set_opacity(start + (1.0 - start) * progress)


class FadeOut(ExitAnimation):
    """Fade the target from its current opacity to fully transparent."""

    def capture_start_state(self) -> None:
        self._start_opacity = self._target.opacity

    def interpolate(self, progress: float) -> None:
        self._target.set_opacity(self._start_opacity * (1.0 - progress))
