# -*- coding: utf-8 -*-
"""
sadfontsutil/layout.py

Grid geometry for the glyph sheet. Everything here is plain integer math so
the rasterizer can stay a thin loop over these helpers.

Cell index == code point:
  col = code % cols
  row = code // cols
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Tuple

MAX_CODE_POINT = 255


@dataclass(frozen=True)
class Rect:
    x: int
    y: int
    width: int
    height: int

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height


@dataclass(frozen=True)
class GridLayout:
    cols: int
    rows: int
    cell_width: int
    cell_height: int
    line_width: int = 0

    @property
    def image_width(self) -> int:
        return self.cols * self.cell_width + (self.cols + 1) * self.line_width

    @property
    def image_height(self) -> int:
        return self.rows * self.cell_height + (self.rows + 1) * self.line_width

    @property
    def size(self) -> Tuple[int, int]:
        return (self.image_width, self.image_height)

    @property
    def capacity(self) -> int:
        return self.cols * self.rows

    def cell_position(self, code: int) -> Tuple[int, int]:
        """(col, row) of a code point; rows past the grid are not clamped."""
        return (code % self.cols, code // self.cols)

    def cell_rect(self, code: int) -> Rect:
        col, row = self.cell_position(code)
        x = col * (self.cell_width + self.line_width) + self.line_width
        y = row * (self.cell_height + self.line_width) + self.line_width
        return Rect(x, y, self.cell_width, self.cell_height)

    def vertical_lines(self) -> List[int]:
        return [i * (self.cell_width + self.line_width) for i in range(self.cols + 1)]

    def horizontal_lines(self) -> List[int]:
        return [j * (self.cell_height + self.line_width) for j in range(self.rows + 1)]

    def fits(self, code: int) -> bool:
        return code < self.capacity


def drawable_code_points(chars_from: int, chars_to: int) -> Iterator[int]:
    lo = max(0, chars_from)
    hi = min(MAX_CODE_POINT, chars_to)
    return iter(range(lo, hi + 1))
