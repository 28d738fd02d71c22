"""anima: programmatic animations rendered to video with a segment cache."""

from .animations import (
    Animation,
    Create,
    EasingRegistry,
    FadeIn,
    FadeOut,
    Follow,
    KeyframeAnimation,
    KeyframeTrack,
    Lifecycle,
    MoveTo,
    Parallel,
    Rotate,
    Scale,
    Sequence,
    Shake,
    Unwrite,
)
from .camera import Camera
from .errors import (
    AnimaError,
    CacheIOError,
    EncoderProcessError,
    SchedulingError,
    TargetNotInSceneError,
)
from .mobjects import Arc, Circle, Line, Mobject, Polygon, Rectangle, VGroup, VMobject
from .render import RenderConfig, Renderer, RenderFormat, RenderQuality
from .scene import Scene, SceneConfig
from .timeline import Timeline

__version__ = "0.1.0"

__all__ = [
    "AnimaError",
    "Animation",
    "Arc",
    "CacheIOError",
    "Camera",
    "Circle",
    "Create",
    "EasingRegistry",
    "EncoderProcessError",
    "FadeIn",
    "FadeOut",
    "Follow",
    "KeyframeAnimation",
    "KeyframeTrack",
    "Lifecycle",
    "Line",
    "Mobject",
    "MoveTo",
    "Parallel",
    "Polygon",
    "Rectangle",
    "RenderConfig",
    "RenderFormat",
    "RenderQuality",
    "Renderer",
    "Rotate",
    "Scale",
    "Scene",
    "SceneConfig",
    "SchedulingError",
    "Sequence",
    "Shake",
    "TargetNotInSceneError",
    "Timeline",
    "Unwrite",
    "VGroup",
    "VMobject",
]
