"""Ground texture colour palette.

The landscape stores ground colour as an index into a 256 entry gradient made
of four 64 step bands: snow to grass, grass to yellow-green, yellow-green to
brown, and brown to dark soil.
"""
from __future__ import annotations

from typing import Tuple

Color = Tuple[int, int, int]

PALETTE_SIZE = 256
BAND_SIZE = 64

# java.awt.Color.darker() scales each channel by this factor.
DARKEN_FACTOR = 0.7

_PALETTE: Tuple[Color, ...] | None = None


def _clamp(value: float) -> int:
    return max(0, min(255, int(value)))


def _build_palette() -> Tuple[Color, ...]:
    colors: list[Color] = []
    for i in range(BAND_SIZE):
        colors.append((_clamp(255 - i * 4), _clamp(255 - i * 1.75), _clamp(255 - i * 4)))
    for i in range(BAND_SIZE):
        colors.append((_clamp(i * 3), 144, 0))
    for i in range(BAND_SIZE):
        colors.append((_clamp(192 - i * 1.5), _clamp(144 - i * 1.5), 0))
    for i in range(BAND_SIZE):
        colors.append((_clamp(96 - i * 1.5), _clamp(48 + i * 1.5), 0))
    return tuple(colors)


def ground_palette() -> Tuple[Color, ...]:
    """Return the shared palette, building it on first use."""
    global _PALETTE
    if _PALETTE is None:
        _PALETTE = _build_palette()
    return _PALETTE


def darker(color: Color, times: int = 1) -> Color:
    r, g, b = color
    for _ in range(times):
        r = int(r * DARKEN_FACTOR)
        g = int(g * DARKEN_FACTOR)
        b = int(b * DARKEN_FACTOR)
    return (r, g, b)


def ground_color(palette: Tuple[Color, ...], index: int, *, light: bool = True) -> Color:
    """Colour for a ground texture index; dark mode applies ``darker`` twice.

    Indices beyond the palette wrap, matching the unsigned byte storage of the
    landscape format.
    """
    color = palette[index % len(palette)]
    return color if light else darker(color, times=2)
