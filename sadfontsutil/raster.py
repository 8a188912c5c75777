# -*- coding: utf-8 -*-
"""
sadfontsutil/raster.py

Draws the glyph sheet: optional 1px grid lines, then one white glyph per
selected code point, centered in its cell.

The drawing primitives live behind GlyphBackend so the grid loop can run
against a fake in tests. PillowBackend is the real one (FreeType via
ImageFont.truetype, one bit per pixel so small sizes stay crisp).
"""

from __future__ import annotations

from io import BytesIO
from pathlib import Path
from typing import Any, Protocol, Tuple

from PIL import Image, ImageDraw, ImageFont

from .config import RenderConfig
from .layout import Rect, drawable_code_points

Color = Tuple[int, int, int, int]
Point = Tuple[int, int]

TRANSPARENT: Color = (0, 0, 0, 0)
GRID_COLOR: Color = (128, 128, 255, 255)
GLYPH_COLOR: Color = (255, 255, 255, 255)


class GlyphBackend(Protocol):
    def load_face(self, path: Path, pixel_height: int) -> Any: ...

    def new_canvas(self, width: int, height: int) -> Any: ...

    def draw_line(self, canvas: Any, start: Point, end: Point, color: Color) -> None: ...

    def draw_glyph(self, canvas: Any, face: Any, char: str, rect: Rect, color: Color) -> None: ...

    def encode_png(self, canvas: Any) -> bytes: ...

    def close_canvas(self, canvas: Any) -> None: ...


class PillowBackend:
    def load_face(self, path: Path, pixel_height: int) -> ImageFont.FreeTypeFont:
        return ImageFont.truetype(str(path), size=pixel_height)

    def new_canvas(self, width: int, height: int) -> Image.Image:
        return Image.new("RGBA", (width, height), TRANSPARENT)

    def draw_line(self, canvas: Image.Image, start: Point, end: Point, color: Color) -> None:
        ImageDraw.Draw(canvas).line([start, end], fill=color, width=1)

    def draw_glyph(
        self,
        canvas: Image.Image,
        face: ImageFont.FreeTypeFont,
        char: str,
        rect: Rect,
        color: Color,
    ) -> None:
        # Pillow treats "\n" as a line break, never as a glyph
        if char == "\n":
            return

        draw = ImageDraw.Draw(canvas)
        draw.fontmode = "1"

        # center on the advance width and the full line box (ascent + descent)
        # so every glyph in the sheet shares one baseline
        advance = face.getlength(char)
        ascent, descent = face.getmetrics()
        x = rect.x + (rect.width - advance) / 2.0
        y = rect.y + (rect.height - (ascent + descent)) / 2.0

        draw.text((int(round(x)), int(round(y))), char, font=face, fill=color)

    def encode_png(self, canvas: Image.Image) -> bytes:
        buf = BytesIO()
        canvas.save(buf, format="PNG")
        return buf.getvalue()

    def close_canvas(self, canvas: Image.Image) -> None:
        canvas.close()


def draw_grid_lines(canvas: Any, config: RenderConfig, backend: GlyphBackend) -> None:
    layout = config.layout
    last_x = layout.image_width - 1
    last_y = layout.image_height - 1
    for x in layout.vertical_lines():
        backend.draw_line(canvas, (x, 0), (x, last_y), GRID_COLOR)
    for y in layout.horizontal_lines():
        backend.draw_line(canvas, (0, y), (last_x, y), GRID_COLOR)


def render_sheet(config: RenderConfig, backend: GlyphBackend) -> Any:
    """
    Returns a new canvas of config.layout.size with the grid and glyphs drawn.
    The caller owns the canvas and releases it with backend.close_canvas.
    Font loading and drawing errors propagate; the canvas is released first.
    """
    layout = config.layout
    canvas = backend.new_canvas(layout.image_width, layout.image_height)

    try:
        if config.show_grid_lines:
            draw_grid_lines(canvas, config, backend)

        face = backend.load_face(config.font_path, config.char_height)

        # rows past the grid land off-canvas and are clipped by the backend
        for code in drawable_code_points(config.chars_from, config.chars_to):
            backend.draw_glyph(canvas, face, chr(code), layout.cell_rect(code), GLYPH_COLOR)
    except BaseException:
        backend.close_canvas(canvas)
        raise

    return canvas
