"""
Render sinks for the game engine.

The engine only knows the Renderer interface: draw or clear one block,
clear everything, and push the HUD texts. ImageRenderer implements it on a
Pillow canvas so headless games can be saved as PNG frames or GIF clips.
"""

import logging
from typing import List, Optional, Tuple

from PIL import Image, ImageColor, ImageDraw, ImageFont

from domain.position import Position

logger = logging.getLogger(__name__)

HUD_HEIGHT = 28
HUD_BACKGROUND = "#1a1f2e"
HUD_TEXT = "#FFFFFF"


class Renderer:
    """
    What the engine needs from a display.

    size is the block size in pixels; positions are field cells.
    """

    def draw_block(self, position: Position, size: int, color: str) -> None:
        raise NotImplementedError("Subclasses should implement this method.")

    def clear_block(self, position: Position, size: int) -> None:
        raise NotImplementedError("Subclasses should implement this method.")

    def clear(self) -> None:
        raise NotImplementedError("Subclasses should implement this method.")

    def update_elapsed_time(self, text: str) -> None:
        raise NotImplementedError("Subclasses should implement this method.")

    def update_infos(self, length: int, speed: int, score: int) -> None:
        raise NotImplementedError("Subclasses should implement this method.")

    def update_message(self, text: str) -> None:
        raise NotImplementedError("Subclasses should implement this method.")


def to_rgb(color: str) -> Tuple[int, int, int]:
    """Convert a color name or hex string to an RGB tuple"""
    return ImageColor.getrgb(color)[:3]


class ImageRenderer(Renderer):
    """Draws the field on a Pillow image, one flat rectangle per block."""

    def __init__(
        self,
        width: int,
        height: int,
        block_size: int,
        background_color: str = "#4F4F4F",
        block_border: int = 0
    ):
        self.width = width
        self.height = height
        self.block_size = block_size
        self.background = to_rgb(background_color)
        self.block_border = block_border

        self.elapsed_time = "00:00:00"
        self.length = 0
        self.speed = 0
        self.score = 0
        self.message = ""

        self.canvas = self._blank()
        self.font = ImageFont.load_default()

    def _blank(self) -> Image.Image:
        return Image.new(
            'RGB',
            (self.width * self.block_size, self.height * self.block_size),
            self.background
        )

    def _block_box(self, position: Position, size: int) -> List[int]:
        # Pillow rectangles include their end coordinate
        inner = size - self.block_border
        x0 = position.x * size
        y0 = position.y * size
        return [x0, y0, x0 + inner - 1, y0 + inner - 1]

    def draw_block(self, position: Position, size: int, color: str) -> None:
        ImageDraw.Draw(self.canvas).rectangle(self._block_box(position, size), fill=to_rgb(color))

    def clear_block(self, position: Position, size: int) -> None:
        ImageDraw.Draw(self.canvas).rectangle(self._block_box(position, size), fill=self.background)

    def clear(self) -> None:
        self.canvas = self._blank()

    def update_elapsed_time(self, text: str) -> None:
        self.elapsed_time = text

    def update_infos(self, length: int, speed: int, score: int) -> None:
        self.length = length
        self.speed = speed
        self.score = score

    def update_message(self, text: str) -> None:
        self.message = text

    def pixel_at(self, position: Position) -> Tuple[int, int, int]:
        """Color at the top-left pixel of a block."""
        return self.canvas.getpixel((position.x * self.block_size, position.y * self.block_size))

    def hud_text(self) -> str:
        text = (
            f"{self.elapsed_time}  length {self.length}  "
            f"speed {self.speed}  score {self.score}"
        )
        if self.message:
            text += f"  {self.message}"
        return text

    def render(self) -> Image.Image:
        """Return the field with the HUD strip underneath."""
        field_w, field_h = self.canvas.size
        img = Image.new('RGB', (field_w, field_h + HUD_HEIGHT), to_rgb(HUD_BACKGROUND))
        img.paste(self.canvas, (0, 0))

        draw = ImageDraw.Draw(img)
        draw.text((6, field_h + 8), self.hud_text(), fill=to_rgb(HUD_TEXT), font=self.font)
        return img

    def save(self, path: str) -> str:
        self.render().save(path)
        logger.info(f"Frame saved to {path}")
        return path


def save_animation(frames: List[Image.Image], path: str, frame_ms: int = 100) -> Optional[str]:
    """Write frames as a looping GIF. Returns None when there is nothing to write."""
    if not frames:
        logger.warning("No frames to write to %s", path)
        return None
    frames[0].save(
        path,
        save_all=True,
        append_images=frames[1:],
        duration=frame_ms,
        loop=0
    )
    logger.info(f"Animation with {len(frames)} frames saved to {path}")
    return path
