"""Exception types raised by the animation engine."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .animations.animation import Animation
    from .mobjects.mobject import Mobject


class AnimaError(Exception):
    """Base exception for all engine errors."""


class SchedulingError(AnimaError, ValueError):
    """Invalid timing passed while authoring a scene.

    Raised for a negative start time, a non-positive duration, a negative
    delay or a negative wait. Always a caller bug.
    """


class TargetNotInSceneError(AnimaError):
    """A transformative or exit animation targets an object the scene does not own."""

    def __init__(self, animation: "Animation", target: "Mobject"):
        self.animation_name = type(animation).__name__
        self.target_type = type(target).__name__
        super().__init__(
            f"Cannot apply '{self.animation_name}' animation to {self.target_type}: "
            "target is not in scene.\n"
            "\n"
            "This animation transforms an existing object, so the target must "
            "already be registered with the scene.\n"
            "\n"
            "Solutions:\n"
            "  1. Call scene.add(target) before this animation\n"
            "  2. Play an introductory animation first (FadeIn, Create)"
        )


class EncoderProcessError(AnimaError):
    """The external encoder subprocess failed."""

    def __init__(self, message: str, returncode: int | None = None, stderr: str = ""):
        self.returncode = returncode
        self.stderr = stderr
        detail = f"{message} (exit code {returncode})" if returncode is not None else message
        if stderr:
            detail = f"{detail}: {stderr.strip()}"
        super().__init__(detail)


class CacheIOError(AnimaError, OSError):
    """Filesystem failure while reading or maintaining the segment cache."""
