"""Animations and the ways they compose."""

from .animation import (
    Animation,
    ExitAnimation,
    IntroductoryAnimation,
    Lifecycle,
    TransformativeAnimation,
)
from .camera import Follow, Shake
from .composition import Parallel, Sequence
from .create import Create, Unwrite
from .easing import BUILTIN_EASINGS, EasingFunction, EasingRegistry
from .fade import FadeIn, FadeOut
from .keyframes import Keyframe, KeyframeAnimation, KeyframeTrack
from .transform import MoveTo, Rotate, Scale

__all__ = [
    "Animation",
    "BUILTIN_EASINGS",
    "Create",
    "EasingFunction",
    "EasingRegistry",
    "ExitAnimation",
    "FadeIn",
    "FadeOut",
    "Follow",
    "IntroductoryAnimation",
    "Keyframe",
    "KeyframeAnimation",
    "KeyframeTrack",
    "Lifecycle",
    "MoveTo",
    "Parallel",
    "Rotate",
    "Scale",
    "Sequence",
    "Shake",
    "TransformativeAnimation",
    "Unwrite",
]
