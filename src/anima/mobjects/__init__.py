"""Visual objects that scenes register and animations act on."""

from .geometry import Arc, Circle, Line, Polygon, Rectangle
from .mobject import Mobject
from .vgroup import VGroup
from .vmobject import VMobject

__all__ = [
    "Arc",
    "Circle",
    "Line",
    "Mobject",
    "Polygon",
    "Rectangle",
    "VGroup",
    "VMobject",
]
