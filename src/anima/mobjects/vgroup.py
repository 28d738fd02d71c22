"""Group of mobjects transformed and styled as a unit."""

from typing import TYPE_CHECKING, Iterator, Self

from PIL import ImageDraw

from ..hashing import hash_compose
from .mobject import Mobject
from .vmobject import Color, VMobject

if TYPE_CHECKING:
    from ..render.render_context import RenderContext


class VGroup(VMobject):
    """Container whose transform applies to every child.

    Children hold a weak back-reference to the group, so membership checks can
    walk upwards. Insertion rejects anything that would make the containment
    graph cyclic.
    """

    def __init__(self, *mobjects: Mobject):
        super().__init__()
        self._children: list[Mobject] = []
        self.add(*mobjects)

    def __len__(self) -> int:
        return len(self._children)

    def __iter__(self) -> Iterator[Mobject]:
        return iter(list(self._children))

    def __getitem__(self, index: int) -> Mobject:
        return self._children[index]

    def add(self, *mobjects: Mobject) -> Self:
        """
        Add children, moving them out of any previous group.

        Raises:
            ValueError: If a mobject is this group or one of its ancestors
        """
        for mobject in mobjects:
            if mobject is self or any(a is mobject for a in self.iter_ancestors()):
                raise ValueError(
                    f"Adding {type(mobject).__name__} would create a containment cycle"
                )
            if mobject in self._children:
                continue
            previous = mobject.parent
            if isinstance(previous, VGroup):
                previous.remove(mobject)
            mobject._set_parent(self)
            self._children.append(mobject)
        return self

    def remove(self, mobject: Mobject) -> Self:
        if mobject in self._children:
            self._children.remove(mobject)
            mobject._set_parent(None)
        return self

    def get_children(self) -> list[Mobject]:
        return list(self._children)

    def set_opacity(self, value: float) -> Self:
        super().set_opacity(value)
        for child in self._children:
            child.set_opacity(value)
        return self

    def stroke(self, color: Color, width: float | None = None) -> Self:
        super().stroke(color, width)
        for child in self._children:
            if isinstance(child, VMobject):
                child.stroke(color, width)
        return self

    def fill(self, color: Color, opacity: float = 1.0) -> Self:
        super().fill(color, opacity)
        for child in self._children:
            if isinstance(child, VMobject):
                child.fill(color, opacity)
        return self

    def set_draw_fraction(self, fraction: float) -> Self:
        super().set_draw_fraction(fraction)
        for child in self._children:
            if isinstance(child, VMobject):
                child.set_draw_fraction(fraction)
        return self

    def compute_hash(self) -> int:
        return hash_compose(super().compute_hash(), *(c.compute_hash() for c in self._children))

    def draw(self, draw: ImageDraw.ImageDraw, context: "RenderContext") -> None:
        for child in self._children:
            child.draw(draw, context)
