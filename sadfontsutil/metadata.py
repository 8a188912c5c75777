# -*- coding: utf-8 -*-
"""
sadfontsutil/metadata.py

The SadConsole `.font` sidecar: a fixed-shape JSON record describing the
sheet. Key names and key order are what SadConsole expects.

GlyphPadding carries the grid-line width (0 or 1), not a font metric.
"""

from __future__ import annotations

import json
import os
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

from .config import RenderConfig

SADFONT_TYPE = "SadConsole.SadFont, SadConsole"
SOLID_GLYPH_INDEX = 219  # CP437 full block


@dataclass(frozen=True)
class FontMetadata:
    name: str
    file_path: str
    glyph_width: int
    glyph_height: int
    glyph_padding: int
    columns: int
    solid_glyph_index: int = SOLID_GLYPH_INDEX
    is_sad_extended: bool = False

    @classmethod
    def from_config(cls, config: RenderConfig, png_name: str) -> "FontMetadata":
        return cls(
            name=config.name,
            file_path=png_name,
            glyph_width=config.cell_width,
            glyph_height=config.cell_height,
            glyph_padding=config.line_width,
            columns=config.grid_cols,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "$type": SADFONT_TYPE,
            "Name": self.name,
            "FilePath": self.file_path,
            "GlyphWidth": self.glyph_width,
            "GlyphHeight": self.glyph_height,
            "GlyphPadding": self.glyph_padding,
            "Columns": self.columns,
            "SolidGlyphIndex": self.solid_glyph_index,
            "IsSadExtended": self.is_sad_extended,
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2, ensure_ascii=False)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FontMetadata":
        if data.get("$type") != SADFONT_TYPE:
            raise ValueError(f"Not a SadConsole font record: $type={data.get('$type')!r}")
        try:
            return cls(
                name=str(data["Name"]),
                file_path=str(data["FilePath"]),
                glyph_width=int(data["GlyphWidth"]),
                glyph_height=int(data["GlyphHeight"]),
                glyph_padding=int(data["GlyphPadding"]),
                columns=int(data["Columns"]),
                solid_glyph_index=int(data["SolidGlyphIndex"]),
                is_sad_extended=bool(data["IsSadExtended"]),
            )
        except KeyError as e:
            raise ValueError(f"Font record is missing key {e.args[0]!r}") from None


def write_font_file(record: FontMetadata, path: Path) -> None:
    """Writes via a temp file in the same directory so readers never see a partial record."""
    path = Path(path)
    fd, tmp = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=str(path.parent.resolve()))
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(record.to_json())
        os.replace(tmp, path)
    except BaseException:
        Path(tmp).unlink(missing_ok=True)
        raise


def read_font_file(path: Path) -> FontMetadata:
    with Path(path).open("r", encoding="utf-8-sig") as f:
        return FontMetadata.from_dict(json.load(f))
