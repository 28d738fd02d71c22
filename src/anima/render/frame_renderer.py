"""Samples a scene at a point in time into a Pillow image."""

from PIL import Image, ImageDraw

from ..scene import Scene
from .render_context import RenderContext


class FrameRenderer:
    """Renders scene state as PIL Images."""

    def __init__(self, scene: Scene, width: int | None = None, height: int | None = None):
        """
        Initialize the renderer.

        Args:
            scene: Scene to sample
            width: Output width in pixels, defaults to the scene's
            height: Output height in pixels, defaults to the scene's
        """
        self.scene = scene
        self.width = width or scene.get_width()
        self.height = height or scene.get_height()

    def render_frame(self, time: float) -> Image.Image:
        """
        Render the scene as it is at a time.

        Args:
            time: Seconds from the start of the scene

        Returns:
            RGB image of the frame
        """
        self.scene.get_timeline().seek(time)

        img = Image.new("RGB", (self.width, self.height), self.scene.get_background_color())

        # Mobjects draw onto a transparent overlay so opacity blends correctly
        overlay = Image.new("RGBA", (self.width, self.height), (0, 0, 0, 0))
        draw = ImageDraw.Draw(overlay, "RGBA")
        context = RenderContext.from_camera(self.scene.camera, self.width, self.height)
        for mobject in self.scene.get_mobjects():
            mobject.draw(draw, context)

        combined = Image.alpha_composite(img.convert("RGBA"), overlay)
        return combined.convert("RGB")
