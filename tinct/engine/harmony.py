# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
Color harmonies and palette schemes.

Two generators live here:

- ``get_harmonies`` works in HSV and returns the base color followed by
  a few hue-rotated (or, for monochromatic, saturation/value-shifted)
  companions. It backs the picker's harmony swatches.
- ``generate_palette`` works in HSL and returns larger design palettes
  with tints and shades mixed in. It backs the palette generator.

Hue offsets wrap modulo 360; saturation/value/lightness offsets clamp to
[0, 100]. Output order is fixed for every scheme.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Optional, Union

import numpy as np

from tinct.engine.colorspace import hsl_to_hex, hsv_to_hex, normalize_hsl, normalize_hsv
from tinct.schema import HSLColor, HSVColor

logger = logging.getLogger(__name__)


def _clamp_pct(x: float) -> float:
    return max(0.0, min(100.0, x))


# =============================================================================
# HSV harmonies
# =============================================================================


class HarmonyType(Enum):
    """Harmony rules for ``get_harmonies``."""
    COMPLEMENTARY = "complementary"
    TRIADIC = "triadic"
    ANALOGOUS = "analogous"
    SPLIT = "split"  # split-complementary
    TETRADIC = "tetradic"
    MONOCHROMATIC = "monochromatic"


# Hue offsets (degrees) added to the base color, in output order
_HUE_OFFSETS: dict[HarmonyType, tuple[float, ...]] = {
    HarmonyType.COMPLEMENTARY: (180.0,),
    HarmonyType.TRIADIC: (120.0, 240.0),
    HarmonyType.ANALOGOUS: (30.0, -30.0),
    HarmonyType.SPLIT: (150.0, 210.0),
    HarmonyType.TETRADIC: (90.0, 180.0, 270.0),
}

# (saturation delta, value delta) at the base hue
_MONOCHROMATIC_SHIFTS: tuple[tuple[float, float], ...] = (
    (-30.0, 0.0),
    (20.0, -20.0),
    (0.0, 20.0),
)


def _resolve_harmony(harmony_type: Union[HarmonyType, str]) -> Optional[HarmonyType]:
    if isinstance(harmony_type, HarmonyType):
        return harmony_type
    try:
        return HarmonyType(str(harmony_type).lower())
    except ValueError:
        logger.debug("Unknown harmony type %r, returning base color only", harmony_type)
        return None


def harmony_colors(
    h: float,
    s: float,
    v: float,
    harmony_type: Union[HarmonyType, str],
) -> list[HSVColor]:
    """
    Harmony members as HSV values, base color first.

    Unknown harmony types yield only the base color.
    """
    base = normalize_hsv(h, s, v)
    colors = [base]

    kind = _resolve_harmony(harmony_type)
    if kind is None:
        return colors

    if kind is HarmonyType.MONOCHROMATIC:
        for ds, dv in _MONOCHROMATIC_SHIFTS:
            colors.append(normalize_hsv(base.h, _clamp_pct(base.s + ds), _clamp_pct(base.v + dv)))
        return colors

    for offset in _HUE_OFFSETS[kind]:
        colors.append(normalize_hsv(base.h + offset, base.s, base.v))
    return colors


def get_harmonies(
    h: float,
    s: float,
    v: float,
    harmony_type: Union[HarmonyType, str],
) -> list[str]:
    """
    Harmony members as "#RRGGBB" strings, base color first.

    Example:
        >>> get_harmonies(0, 100, 100, "complementary")
        ['#FF0000', '#00FFFF']
    """
    return [hsv_to_hex(*color) for color in harmony_colors(h, s, v, harmony_type)]


# =============================================================================
# HSL palette schemes
# =============================================================================


class PaletteScheme(Enum):
    """Palette layouts for ``generate_palette``."""
    COMPLEMENTARY = "complementary"
    ANALOGOUS = "analogous"
    TRIADIC = "triadic"
    TETRADIC = "tetradic"
    MONOCHROMATIC = "monochromatic"
    SHADES = "shades"


# (hue offset, saturation delta, lightness delta) per swatch, in output order
_SCHEME_STEPS: dict[PaletteScheme, tuple[tuple[float, float, float], ...]] = {
    PaletteScheme.COMPLEMENTARY: (
        (0, 0, 0),
        (180, 0, 0),
        (0, -20, 15),
        (0, 20, -15),
        (180, -20, 15),
        (180, 20, -15),
    ),
    PaletteScheme.ANALOGOUS: (
        (-30, 0, 0),
        (0, 0, 0),
        (30, 0, 0),
        (60, 0, 0),
        (-30, 10, -10),
        (60, 10, -10),
    ),
    PaletteScheme.TRIADIC: (
        (0, 0, 0),
        (120, 0, 0),
        (240, 0, 0),
        (0, -15, 15),
        (120, -15, 15),
        (240, -15, 15),
    ),
    PaletteScheme.TETRADIC: (
        (0, 0, 0),
        (90, 0, 0),
        (180, 0, 0),
        (270, 0, 0),
        (0, 15, -10),
        (180, 15, -10),
    ),
    PaletteScheme.MONOCHROMATIC: (
        (0, 15, 30),
        (0, 10, 15),
        (0, 0, 0),
        (0, 10, -15),
        (0, 15, -30),
        (0, -15, 0),
    ),
}

# Lightness ramp for the shades scheme, light to dark
_SHADE_LIGHTNESS = (90, 75, 60, 45, 30, 15)


def generate_palette(
    base: Union[HSLColor, tuple[float, float, float]],
    scheme: Union[PaletteScheme, str],
) -> list[str]:
    """
    Build a design palette around an HSL base color.

    Every scheme yields six colors, except ``shades`` which yields eight:
    white, six lightness steps of the base hue/saturation, then black.

    Returns:
        Hex strings, or an empty list for an unknown scheme.
    """
    h, s, l = normalize_hsl(*base)  # noqa: E741
    if isinstance(scheme, PaletteScheme):
        kind = scheme
    else:
        try:
            kind = PaletteScheme(str(scheme).lower())
        except ValueError:
            logger.debug("Unknown palette scheme %r", scheme)
            return []

    if kind is PaletteScheme.SHADES:
        return ["#FFFFFF", *(hsl_to_hex(h, s, step) for step in _SHADE_LIGHTNESS), "#000000"]

    return [
        hsl_to_hex(h + dh, _clamp_pct(s + ds), _clamp_pct(l + dl))
        for dh, ds, dl in _SCHEME_STEPS[kind]
    ]


# =============================================================================
# Random colors
# =============================================================================


def random_hsv(rng: Optional[np.random.Generator] = None) -> HSVColor:
    """
    A random, pleasantly saturated color.

    Hue is uniform over [0, 360); saturation is drawn from [30, 100) and
    value from [40, 90), avoiding washed-out and near-black picks.
    Pass a seeded ``numpy.random.Generator`` for reproducible output.
    """
    gen = rng if rng is not None else np.random.default_rng()
    return HSVColor(
        h=int(gen.integers(0, 360)),
        s=int(gen.integers(30, 100)),
        v=int(gen.integers(40, 90)),
    )
