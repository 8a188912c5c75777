# -*- coding: utf-8 -*-
"""
sadfontsutil/cli.py

Entry point: resolve config -> render sheet -> write <name>.png ->
write <name>.font -> optional preview -> report.

Usage:
  sadfontsutil --font mono.ttf --grid 16x16 --gridcell 8x16 --gridlines --chars 32-126
  python -m sadfontsutil            (prints usage, then prompts for everything)
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional, Sequence

from .config import USAGE, ConfigError, Prompt, RenderConfig, resolve_config
from .coverage import format_code_points, missing_code_points
from .layout import drawable_code_points
from .metadata import FontMetadata, write_font_file
from .output import open_in_viewer, report_saved, save_png
from .raster import GlyphBackend, PillowBackend, render_sheet


def warn_layout(config: RenderConfig) -> None:
    layout = config.layout
    if not layout.fits(config.chars_to):
        print(
            f"[warn] chars up to {config.chars_to} need {config.chars_to // layout.cols + 1} rows; "
            f"grid has {layout.rows}. Glyphs past code {layout.capacity - 1} fall outside the image.",
            file=sys.stderr,
        )


def warn_coverage(config: RenderConfig) -> None:
    codes = list(drawable_code_points(config.chars_from, config.chars_to))
    missing = missing_code_points(config.font_path, codes)
    if missing is None:
        print(f"[warn] Glyph coverage not checked: {config.font_path.name} is not a TrueType/OpenType font", file=sys.stderr)
    elif missing:
        print(
            f"[warn] {len(missing)} of {len(codes)} code points have no glyph in {config.font_path.name}: "
            f"{format_code_points(missing)}",
            file=sys.stderr,
        )


def generate(config: RenderConfig, backend: GlyphBackend, out_dir: Path) -> FontMetadata:
    png_name = f"{config.name}.png"
    font_name = f"{config.name}.font"

    canvas = render_sheet(config, backend)
    try:
        png_bytes = backend.encode_png(canvas)
    finally:
        backend.close_canvas(canvas)

    png_path = save_png(png_bytes, out_dir / png_name)
    print(f"Wrote: {png_path.name}")

    record = FontMetadata.from_config(config, png_name)
    write_font_file(record, out_dir / font_name)
    print(f"Wrote: {font_name}")
    return record


def main(
    argv: Optional[Sequence[str]] = None,
    prompt: Prompt = input,
    backend: Optional[GlyphBackend] = None,
    cwd: Optional[Path] = None,
) -> int:
    if argv is None:
        argv = sys.argv[1:]
    directory = cwd if cwd is not None else Path.cwd()

    if not argv:
        print(USAGE)

    try:
        config = resolve_config(argv, prompt=prompt, cwd=directory)
    except ConfigError as e:
        print(f"Error: {e}")
        return 1

    warn_layout(config)
    warn_coverage(config)

    generate(config, backend or PillowBackend(), directory)

    png_name = f"{config.name}.png"
    if config.preview:
        open_in_viewer(directory / png_name)

    layout = config.layout
    report_saved(png_name, layout.image_width, layout.image_height)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
