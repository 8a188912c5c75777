# -*- coding: utf-8 -*-
"""
sadfontsutil/config.py

Resolves the run configuration from CLI flags, falling back to interactive
prompts for anything missing.

Every parameter goes through the same decision:
  flag present -> parse/validate the flag value
  flag absent  -> prompt once; blank answer -> default, otherwise parse/validate

All flag values are validated before the first prompt is shown. A malformed
value is never corrected or re-prompted: ConfigError ends the run.
"""

from __future__ import annotations

import argparse
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, List, Optional, Sequence, Tuple, TypeVar

from .layout import MAX_CODE_POINT, GridLayout

T = TypeVar("T")

Prompt = Callable[[str], str]

FONT_EXTENSIONS = (".ttf", ".otf", ".fon")

TRUE_ANSWERS = ("", "1", "yes", "y")
FALSE_ANSWERS = ("0", "no", "n")


class ConfigError(ValueError):
    """Invalid or missing input; reported as `Error: ...` and nothing is written."""


@dataclass(frozen=True)
class Defaults:
    CHAR_HEIGHT: int = 16
    CHARS_FROM: int = 0
    CHARS_TO: int = MAX_CODE_POINT
    GRID_COLS: int = 16
    GRID_ROWS: int = 16
    CELL_WIDTH: int = 8
    CELL_HEIGHT: int = 16
    GRID_LINES: bool = True
    PREVIEW: bool = True


D = Defaults()


@dataclass(frozen=True)
class RenderConfig:
    font_path: Path
    char_height: int
    chars_from: int
    chars_to: int
    grid_cols: int
    grid_rows: int
    cell_width: int
    cell_height: int
    show_grid_lines: bool
    preview: bool

    @property
    def line_width(self) -> int:
        return 1 if self.show_grid_lines else 0

    @property
    def name(self) -> str:
        return self.font_path.stem

    @property
    def layout(self) -> GridLayout:
        return GridLayout(
            cols=self.grid_cols,
            rows=self.grid_rows,
            cell_width=self.cell_width,
            cell_height=self.cell_height,
            line_width=self.line_width,
        )


USAGE = """\
SadFontsUtil - Generate font sprite sheet with grid

Usage:
  sadfontsutil --font <path_to_ttf> [options]

Options:
  --font <path>           Path to TTF/FON font file (prompted if omitted)
  --charHeight <pixels>   Font size in pixels (default: 16)
  --chars <from-to>       Defines which ASCII characters to render
                          Example: --chars 32-126
  --grid <WxH>            Grid dimensions in characters (default: 16x16)
                          Example: --grid 32x8
  --gridcell <WxH>        Cell size in pixels (default: 8x16)
                          Example: --gridcell 8x16
  --gridlines             Draw 1px grid lines between characters
  --preview               Auto-open default image viewer to preview output

Examples:
  sadfontsutil --font "C:\\Fonts\\IBM_VGA.ttf"
  sadfontsutil --font font.ttf --charHeight 16 --gridlines
  sadfontsutil --font font.ttf --grid 32x8 --gridcell 8x14 --gridlines --preview

Output:
  Generated PNG and .font file will be saved in the current directory.
"""


# -----------------------------
# Value parsers (shared by the flag and prompt paths)
# -----------------------------

def _parse_int(text: str, what: str) -> int:
    try:
        return int(text.strip())
    except ValueError:
        raise ConfigError(f"{what} must be an integer: {text!r}") from None


def parse_positive_int(text: str, what: str = "value") -> int:
    value = _parse_int(text, what)
    if value <= 0:
        raise ConfigError(f"{what} must be greater than zero: {text!r}")
    return value


def parse_char_range(text: str) -> Tuple[int, int]:
    parts = text.strip().split("-")
    if len(parts) != 2:
        raise ConfigError(f"chars format must be from-to: {text!r}")
    lo = _parse_int(parts[0], "chars 'from'")
    hi = _parse_int(parts[1], "chars 'to'")
    for value in (lo, hi):
        if not 0 <= value <= MAX_CODE_POINT:
            raise ConfigError(f"chars must be within 0-{MAX_CODE_POINT}: {text!r}")
    if lo > hi:
        raise ConfigError(f"chars 'from' must not exceed 'to': {text!r}")
    return (lo, hi)


def parse_dimensions(text: str, what: str = "size") -> Tuple[int, int]:
    parts = text.strip().lower().split("x")
    if len(parts) != 2:
        raise ConfigError(f"{what} format must be WxH: {text!r}")
    w = parse_positive_int(parts[0], f"{what} width")
    h = parse_positive_int(parts[1], f"{what} height")
    return (w, h)


def parse_yes_no(text: str) -> bool:
    answer = text.strip().lower()
    if answer in TRUE_ANSWERS:
        return True
    if answer in FALSE_ANSWERS:
        return False
    raise ConfigError(f"expected yes/no (y/n/1/0): {text!r}")


# -----------------------------
# Prompting
# -----------------------------

def ask(prompt: Prompt, question: str) -> str:
    """A closed stdin reads as a blank answer, so unattended runs take the defaults."""
    try:
        return prompt(question)
    except EOFError:
        return ""


def prompt_or_default(
    question: str,
    default: T,
    parse: Callable[[str], T],
    prompt: Prompt,
) -> T:
    answer = ask(prompt, question)
    if not answer.strip():
        return default
    return parse(answer)


def find_font_files(directory: Path) -> List[Path]:
    return sorted(
        (p for p in directory.iterdir() if p.is_file() and p.suffix.lower() in FONT_EXTENSIONS),
        key=lambda p: p.name.lower(),
    )


def check_font_file(raw: str) -> Path:
    if not raw.strip():
        raise ConfigError("Font file not found: (empty path)")
    path = Path(raw)
    if not path.is_file() or not os.access(path, os.R_OK):
        raise ConfigError(f"Font file not found: {path}")
    return path


def choose_font(directory: Path, prompt: Prompt) -> Path:
    candidates = find_font_files(directory)
    if not candidates:
        raise ConfigError(
            f"no font files ({', '.join(FONT_EXTENSIONS)}) found in {directory}; use --font <path>"
        )
    if len(candidates) == 1:
        print(f"Using font: {candidates[0].name}")
        return candidates[0]

    print("Font files found:")
    for i, p in enumerate(candidates):
        print(f"  [{i}] {p.name}")
    answer = ask(prompt, f"Select font [0-{len(candidates) - 1}] (default 0): ").strip()
    if not answer:
        return candidates[0]
    try:
        index = int(answer)
    except ValueError:
        raise ConfigError(f"invalid font selection: {answer!r}") from None
    if not 0 <= index < len(candidates):
        raise ConfigError(f"font selection out of range: {answer!r}")
    return candidates[index]


# -----------------------------
# argparse + resolution
# -----------------------------

class ArgumentParser(argparse.ArgumentParser):
    """Reports bad command lines as ConfigError instead of exiting."""

    def error(self, message: str):
        raise ConfigError(message)


def build_parser() -> argparse.ArgumentParser:
    ap = ArgumentParser(
        prog="sadfontsutil",
        description="Generate a SadConsole font sprite sheet (.png + .font) from a TTF/FON font.",
        allow_abbrev=False,
        add_help=False,
    )
    ap.add_argument("--font", dest="font", type=str, default=None, help="Path to TTF/FON font file")
    ap.add_argument("--charHeight", dest="char_height", type=str, default=None, help="Font size in pixels")
    ap.add_argument("--chars", dest="chars", type=str, default=None, help="Character range, e.g. 32-126")
    ap.add_argument("--grid", dest="grid", type=str, default=None, help="Grid size in characters, e.g. 16x16")
    ap.add_argument("--gridcell", dest="gridcell", type=str, default=None, help="Cell size in pixels, e.g. 8x16")
    ap.add_argument("--gridlines", dest="gridlines", action="store_const", const=True, default=None)
    ap.add_argument("--preview", dest="preview", action="store_const", const=True, default=None)
    return ap


def resolve_config(
    argv: Sequence[str],
    prompt: Prompt = input,
    cwd: Optional[Path] = None,
) -> RenderConfig:
    """
    Flag values are all validated before the first prompt; only the
    parameters without a flag are asked for afterwards, in order.
    """
    args = build_parser().parse_args(list(argv))
    directory = cwd if cwd is not None else Path.cwd()

    # (flag value, question, default, parser) in prompt order
    params = [
        (
            args.char_height,
            f"Character height in pixels (default {D.CHAR_HEIGHT}): ",
            D.CHAR_HEIGHT,
            lambda s: parse_positive_int(s, "charHeight"),
        ),
        (
            args.chars,
            f"Characters to render from-to (default {D.CHARS_FROM}-{D.CHARS_TO}): ",
            (D.CHARS_FROM, D.CHARS_TO),
            parse_char_range,
        ),
        (
            args.grid,
            f"Grid size in characters WxH (default {D.GRID_COLS}x{D.GRID_ROWS}): ",
            (D.GRID_COLS, D.GRID_ROWS),
            lambda s: parse_dimensions(s, "grid"),
        ),
        (
            args.gridcell,
            f"Cell size in pixels WxH (default {D.CELL_WIDTH}x{D.CELL_HEIGHT}): ",
            (D.CELL_WIDTH, D.CELL_HEIGHT),
            lambda s: parse_dimensions(s, "gridcell"),
        ),
        ("yes" if args.gridlines else None, "Draw grid lines? [Y/n]: ", D.GRID_LINES, parse_yes_no),
        ("yes" if args.preview else None, "Open preview when done? [Y/n]: ", D.PREVIEW, parse_yes_no),
    ]

    font_path = check_font_file(args.font) if args.font is not None else None
    values: List[Any] = [parse(raw) if raw is not None else None for raw, _, _, parse in params]

    if font_path is None:
        font_path = choose_font(directory, prompt)
    for i, (raw, question, default, parse) in enumerate(params):
        if raw is None:
            values[i] = prompt_or_default(question, default, parse, prompt)

    char_height, (chars_from, chars_to), (grid_cols, grid_rows), (cell_width, cell_height), show_grid_lines, preview = values

    return RenderConfig(
        font_path=font_path,
        char_height=char_height,
        chars_from=chars_from,
        chars_to=chars_to,
        grid_cols=grid_cols,
        grid_rows=grid_rows,
        cell_width=cell_width,
        cell_height=cell_height,
        show_grid_lines=show_grid_lines,
        preview=preview,
    )
