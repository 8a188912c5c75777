# -*- coding: utf-8 -*-
"""
sadfontsutil/output.py

Writes the encoded sheet and optionally hands it to the OS default viewer.
"""

from __future__ import annotations

import os
import shutil
import subprocess
import sys
from pathlib import Path


def save_png(png_bytes: bytes, path: Path) -> Path:
    path = Path(path)
    path.write_bytes(png_bytes)
    return path


def _viewer_command(path: Path):
    if sys.platform == "darwin":
        return ["open", str(path)]
    return ["xdg-open", str(path)]


def open_in_viewer(path: Path) -> bool:
    """
    Launches the default application for `path`. Failures are reported as a
    warning and never abort the run.
    """
    try:
        if sys.platform.startswith("win"):
            os.startfile(str(path))  # type: ignore[attr-defined]
            return True

        cmd = _viewer_command(path)
        exe = shutil.which(cmd[0])
        if not exe:
            print(f"[warn] Preview skipped: {cmd[0]} not found", file=sys.stderr)
            return False

        proc = subprocess.run(
            [exe, *cmd[1:]],
            stdout=subprocess.DEVNULL,
            stderr=subprocess.PIPE,
            check=False,
        )
        if proc.returncode != 0:
            msg = proc.stderr.decode("utf-8", errors="replace").strip()
            print(f"[warn] Preview failed for {path.name}: {msg or f'exit status {proc.returncode}'}", file=sys.stderr)
            return False
        return True
    except OSError as e:
        print(f"[warn] Preview failed for {path.name}: {e}", file=sys.stderr)
        return False


def report_saved(png_name: str, width: int, height: int) -> None:
    print(f"Saved: {png_name} ({width}x{height}px)")
