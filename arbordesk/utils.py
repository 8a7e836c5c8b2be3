"""Shared helpers: definition state, colours, resources and logging."""

from __future__ import annotations

import logging
import math
import os
import sys
from enum import Enum
from pathlib import Path

_LOG = logging.getLogger("arbordesk")

PI = 3.141
FRAME_TIME = 1.0 / 60.0
WHITESPACE = " \t\n\v\f\r"
RESOURCES_BASE = Path(sys.prefix) / "share" / "arbor-gui"

_GOLDEN_RATIO_CONJUGATE = 0.618033988749895

_PALETTE = tuple(
    (r / 256.0, g / 256.0, b / 256.0, 255.0 / 256.0)
    for r, g, b in (
        (166, 206, 227),
        (31, 120, 180),
        (178, 223, 138),
        (51, 160, 44),
        (251, 154, 153),
        (227, 26, 28),
        (253, 191, 111),
        (255, 127, 0),
        (202, 178, 214),
        (106, 61, 154),
    )
)

Color = tuple[float, float, float, float]


class DefState(Enum):
    """State of a user supplied definition."""

    EMPTY = "empty"
    ERROR = "error"
    GOOD = "good"


def split_off(text: str, by: str) -> tuple[str, str]:
    """Split ``text`` at the first ``by``; return the head and what follows it."""
    sep = text.find(by)
    if sep < 0:
        return text, ""
    return text[:sep], text[sep + len(by):]


def hsv2rgb(hsv: Color) -> Color:
    """Convert an (h, s, v, alpha) colour with h in [0, 1) to (r, g, b, alpha)."""
    h, s, v, alpha = hsv
    if s == 0.0:
        return (v, v, v, alpha)
    h = math.fmod(h, 1.0) / (60.0 / 360.0)
    sector = int(h)
    f = h - sector
    p = v * (1.0 - s)
    q = v * (1.0 - s * f)
    t = v * (1.0 - s * (1.0 - f))
    sectors = {
        0: (v, t, p),
        1: (q, v, p),
        2: (p, v, t),
        3: (p, q, v),
        4: (t, p, v),
    }
    r, g, b = sectors.get(sector, (v, p, q))
    return (r, g, b, alpha)


class ColorCycle:
    """Hands out a fixed palette first, then hues spaced by the golden ratio."""

    def __init__(self) -> None:
        self._index = 0
        self._current: Color = (0.27, 0.5, 0.95, 1.0)

    def next(self) -> Color:
        if self._index < len(_PALETTE):
            colour = _PALETTE[self._index]
            self._index += 1
            return colour
        hue = self._current[0] + _GOLDEN_RATIO_CONJUGATE
        if hue >= 1.0:
            hue -= 1.0
        self._current = (hue, *self._current[1:])
        return hsv2rgb(self._current)

    def __iter__(self) -> ColorCycle:
        return self

    def __next__(self) -> Color:
        return self.next()


_default_cycle = ColorCycle()


def next_color() -> Color:
    """Return the next colour of the process-wide colour cycle."""
    return _default_cycle.next()


def slurp(path: str | os.PathLike[str]) -> str:
    """Read a whole text file."""
    try:
        return Path(path).read_text(encoding="utf-8")
    except OSError:
        _LOG.error("Could not find file %s", path)
        raise


def get_resource_path(name: str | os.PathLike[str]) -> Path:
    """Locate a bundled resource, honouring an AppImage's ``APPDIR``."""
    appdir = os.environ.get("APPDIR")
    if appdir is not None:
        return Path(appdir) / "usr/share/arbor-gui" / name
    return RESOURCES_BASE / name


def log_init() -> None:
    """Set the package's log level to INFO."""
    _LOG.setLevel(logging.INFO)