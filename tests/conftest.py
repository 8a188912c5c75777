from __future__ import annotations

from pathlib import Path
from typing import Dict, Tuple

import pytest
from fontTools.fontBuilder import FontBuilder
from fontTools.pens.ttGlyphPen import TTGlyphPen

UPM = 1000
ADVANCE = 500

# code points that get a solid box glyph in the test font
BOX_CODES = tuple(range(ord("A"), ord("F") + 1))


def _box_glyph(x0: int, y0: int, x1: int, y1: int):
    pen = TTGlyphPen(None)
    pen.moveTo((x0, y0))
    pen.lineTo((x0, y1))
    pen.lineTo((x1, y1))
    pen.lineTo((x1, y0))
    pen.closePath()
    return pen.glyph()


def build_box_font(path: Path) -> Path:
    """A tiny TTF: space plus solid boxes for A-F, 500 units wide."""
    glyph_order = [".notdef", "space"] + [f"uni{cp:04X}" for cp in BOX_CODES]
    glyf: Dict[str, object] = {
        ".notdef": TTGlyphPen(None).glyph(),
        "space": TTGlyphPen(None).glyph(),
    }
    hmtx: Dict[str, Tuple[int, int]] = {".notdef": (ADVANCE, 0), "space": (ADVANCE, 0)}
    cmap = {0x20: "space"}
    for cp in BOX_CODES:
        name = f"uni{cp:04X}"
        glyf[name] = _box_glyph(50, 0, 450, 700)
        hmtx[name] = (ADVANCE, 50)
        cmap[cp] = name

    fb = FontBuilder(UPM, isTTF=True)
    fb.setupGlyphOrder(glyph_order)
    fb.setupCharacterMap(cmap)
    fb.setupGlyf(glyf)
    fb.setupHorizontalMetrics(hmtx)
    fb.setupHorizontalHeader(ascent=800, descent=-200)
    fb.setupMaxp()
    fb.setupNameTable({"familyName": "Mono", "styleName": "Regular"})
    fb.setupOS2(
        sTypoAscender=800,
        sTypoDescender=-200,
        sTypoLineGap=0,
        usWinAscent=800,
        usWinDescent=200,
    )
    fb.setupPost()
    fb.save(str(path))
    return path


@pytest.fixture(scope="session")
def box_font_file(tmp_path_factory) -> Path:
    return build_box_font(tmp_path_factory.mktemp("fonts") / "mono.ttf")


@pytest.fixture
def mono_ttf(tmp_path: Path, box_font_file: Path) -> Path:
    """mono.ttf copied into the test's working directory."""
    dest = tmp_path / "mono.ttf"
    dest.write_bytes(box_font_file.read_bytes())
    return dest
