# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
Tinct -- Color conversion and accessibility engine for color pickers.

Converts between HSV, RGB, HSL, CMYK and HEX, measures WCAG contrast,
simulates color vision deficiencies and generates harmonies. Every
function is pure: explicit values in, fresh values out.

Quick start::

    import tinct

    tinct.hsv_to_rgb(120, 100, 100)            # RGBColor(r=0, g=255, b=0)
    tinct.get_contrast_ratio((0, 0, 0), (255, 255, 255))   # 21.0
    tinct.simulate_color_blindness(255, 0, 0, "achromatopsia")
    tinct.get_harmonies(0, 100, 100, "triadic")
"""

from __future__ import annotations

__version__ = "1.0.0"

from tinct.engine import (
    HarmonyType,
    PaletteScheme,
    VisionDeficiency,
    WCAGThresholds,
    cmyk_to_rgb,
    contrast_ratio,
    generate_palette,
    get_contrast_ratio,
    get_harmonies,
    hex_to_rgb,
    hex_to_rgba,
    hsl_to_rgb,
    hsv_to_hex,
    hsv_to_rgb,
    relative_luminance,
    rgb_to_cmyk,
    rgb_to_hex,
    rgb_to_hsl,
    rgb_to_hsv,
    simulate_color_blindness,
    wcag_levels,
)
from tinct.schema import (
    CMYKColor,
    ColorSnapshot,
    CSSFormat,
    HSLColor,
    HSVColor,
    RGBColor,
)

__all__ = [
    # Conversions
    "hsv_to_rgb",
    "rgb_to_hsv",
    "rgb_to_hsl",
    "hsl_to_rgb",
    "rgb_to_cmyk",
    "cmyk_to_rgb",
    "rgb_to_hex",
    "hex_to_rgb",
    "hex_to_rgba",
    "hsv_to_hex",
    # Accessibility
    "relative_luminance",
    "contrast_ratio",
    "get_contrast_ratio",
    "wcag_levels",
    "WCAGThresholds",
    # Vision simulation
    "simulate_color_blindness",
    "VisionDeficiency",
    # Harmonies
    "get_harmonies",
    "generate_palette",
    "HarmonyType",
    "PaletteScheme",
    # Types
    "RGBColor",
    "HSVColor",
    "HSLColor",
    "CMYKColor",
    "ColorSnapshot",
    "CSSFormat",
    # Version
    "__version__",
]
