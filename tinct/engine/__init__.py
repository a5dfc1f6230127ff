# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
Conversion and analysis core for Tinct.

Pure, stateless functions over explicit color values. Nothing here keeps
state between calls, so every function is safe to call from any thread.
"""

from tinct.engine.colorspace import (
    cmyk_to_rgb,
    hex_to_rgb,
    hex_to_rgba,
    hsl_to_hex,
    hsl_to_hsv,
    hsl_to_rgb,
    hsl_to_rgb_array,
    hsv_to_hex,
    hsv_to_hsl,
    hsv_to_rgb,
    hsv_to_rgb_array,
    rgb_to_cmyk,
    rgb_to_hex,
    rgb_to_hsl,
    rgb_to_hsl_array,
    rgb_to_hsv,
    rgb_to_hsv_array,
)
from tinct.engine.contrast import (
    SuggestionConfig,
    WCAGResult,
    WCAGThresholds,
    check_contrast,
    contrast_grade,
    contrast_ratio,
    get_contrast_ratio,
    readable_text_color,
    relative_luminance,
    suggest_contrast_colors,
    wcag_levels,
)
from tinct.engine.harmony import (
    HarmonyType,
    PaletteScheme,
    generate_palette,
    get_harmonies,
    harmony_colors,
    random_hsv,
)
from tinct.engine.vision import (
    VisionDeficiency,
    simulate_all,
    simulate_array,
    simulate_color_blindness,
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
    "hsl_to_hex",
    "hsv_to_hsl",
    "hsl_to_hsv",
    # Vectorized conversions
    "hsv_to_rgb_array",
    "rgb_to_hsv_array",
    "hsl_to_rgb_array",
    "rgb_to_hsl_array",
    # Accessibility
    "relative_luminance",
    "contrast_ratio",
    "get_contrast_ratio",
    "wcag_levels",
    "check_contrast",
    "contrast_grade",
    "readable_text_color",
    "suggest_contrast_colors",
    "WCAGThresholds",
    "WCAGResult",
    "SuggestionConfig",
    # Vision simulation
    "VisionDeficiency",
    "simulate_color_blindness",
    "simulate_array",
    "simulate_all",
    # Harmonies and palettes
    "HarmonyType",
    "PaletteScheme",
    "get_harmonies",
    "harmony_colors",
    "generate_palette",
    "random_hsv",
]
