"""Shared constants and helpers for writing ASCII event-generator files.

All quantities are in cm, s (or ns where stated) and GeV.
"""

from __future__ import annotations

import os
import sys
from typing import TextIO

FERMI = 1e-13  # cm
BARN = 1e-24  # cm^2
MBARN = 1e-27  # cm^2
PICO_SEC = 1e-12  # s
DAY = 86400.0  # s
ATOMIC_MASS = 0.93150  # GeV/c^2
AVOGADRO = 6.022e23
SPEED_OF_LIGHT = 29.9792  # cm/ns

_BAR = "|" * 60
BAR_WIDTH = len(_BAR)


def progress_bar(percentage: float) -> str:
    """Text of a progress bar for a fraction ``percentage`` in [0, 1]."""
    value = int(percentage * 100)
    filled = int(percentage * BAR_WIDTH)
    empty = BAR_WIDTH - filled
    bar = _BAR[:filled] if filled >= 0 else _BAR
    return f"\r{value:3d}% [{bar}{' ' * abs(empty)}]"


def show_progress(percentage: float, stream: TextIO | None = None) -> None:
    """Write the progress bar to ``stream`` (standard output by default)."""
    stream = stream or sys.stdout
    stream.write(progress_bar(percentage))
    stream.flush()


def ensure_folder(path: str | os.PathLike[str]) -> bool:
    """Create the folder ``path``; return False if it already exists.

    Any other failure raises OSError.
    """
    try:
        os.mkdir(path, 0o775)
    except FileExistsError:
        return False
    return True