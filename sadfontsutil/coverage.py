# -*- coding: utf-8 -*-
"""
sadfontsutil/coverage.py

Checks which requested code points the font actually has glyphs for, using
the font's best Unicode cmap. Only sfnt fonts (TTF/OTF) can be inspected;
Windows .fon files are bitmap containers fontTools does not read.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Optional

from fontTools.ttLib import TTFont, TTLibError


def missing_code_points(font_path: Path, code_points: Iterable[int]) -> Optional[List[int]]:
    """
    Returns the code points with no cmap entry, or None when the font
    cannot be inspected.
    """
    try:
        font = TTFont(str(font_path), lazy=True)
    except (TTLibError, OSError):
        return None

    try:
        cmap = font.getBestCmap()
    finally:
        font.close()

    if cmap is None:
        return None
    return [cp for cp in code_points if cp not in cmap]


def format_code_points(codes: List[int], limit: int = 12) -> str:
    shown = ", ".join(f"{cp} (0x{cp:02X})" for cp in codes[:limit])
    if len(codes) > limit:
        shown += f", ... (+{len(codes) - limit} more)"
    return shown
