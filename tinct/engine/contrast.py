# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
WCAG 2.x relative luminance and contrast.

References:
- https://www.w3.org/TR/WCAG21/#dfn-relative-luminance
- https://www.w3.org/TR/WCAG21/#dfn-contrast-ratio

Luminance uses the WCAG 2.x linearization threshold of 0.03928 (not the
0.04045 of IEC 61966-2-1). For 8-bit input the two thresholds select
the same segment for every channel value.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import numpy as np
from numpy.typing import ArrayLike, NDArray

from tinct.engine.colorspace import (
    RGBLike,
    as_rgb,
    hsl_to_rgb,
    rgb_to_hex,
    rgb_to_hsl,
)

# Rec. 709 luma weights applied to linear channels
_LUMA_WEIGHTS = np.array([0.2126, 0.7152, 0.0722], dtype=np.float64)
_LUMA_WEIGHTS.setflags(write=False)

# Flare term added to both luminances
_FLARE = 0.05


@dataclass(frozen=True)
class WCAGThresholds:
    """Minimum contrast ratios for each WCAG 2.x success criterion."""

    aa_normal: float = 4.5
    aa_large: float = 3.0
    aaa_normal: float = 7.0
    aaa_large: float = 4.5
    # Non-text contrast (SC 1.4.11): icons, borders, focus rings
    ui_components: float = 3.0


@dataclass(frozen=True)
class SuggestionConfig:
    """Search parameters for ``suggest_contrast_colors``."""

    lightness_steps: tuple[int, ...] = (5, 15, 25, 35, 45, 55, 65, 75, 85, 95)
    target_ratios: tuple[float, ...] = (4.5, 7.0)
    # A candidate is kept when within this distance of any target ratio
    tolerance: float = 0.5
    # Lightness offset of the always-included darker/lighter variants
    lightness_shift: float = 20.0


@dataclass(frozen=True, slots=True)
class WCAGResult:
    """Pass/fail of one contrast ratio against every WCAG criterion."""

    ratio: float
    aa_normal: bool
    aa_large: bool
    aaa_normal: bool
    aaa_large: bool
    ui_components: bool

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "ratio": self.ratio,
            "AA": self.aa_normal,
            "AA-Large": self.aa_large,
            "AAA": self.aaa_normal,
            "AAA-Large": self.aaa_large,
            "UI-Components": self.ui_components,
        }


# =============================================================================
# Luminance
# =============================================================================


def srgb_to_linear(channels: ArrayLike) -> NDArray[np.float64]:
    """
    Linearize 0-255 sRGB channels.

    - For values <= 0.03928: value/12.92
    - Otherwise: ((value + 0.055) / 1.055) ^ 2.4
    """
    c = np.clip(np.asarray(channels, dtype=np.float64), 0.0, 255.0) / 255.0
    return np.where(c <= 0.03928, c / 12.92, np.power((c + 0.055) / 1.055, 2.4))


def relative_luminance_array(rgb: ArrayLike) -> NDArray[np.float64]:
    """
    Relative luminance for an array of colors.

    Args:
        rgb: Array of shape (..., 3) with channels 0-255

    Returns:
        Array of shape (...) with luminance in [0, 1]
    """
    return srgb_to_linear(rgb) @ _LUMA_WEIGHTS


def relative_luminance(color: RGBLike) -> float:
    """Relative luminance of one color: 0.0 for black, 1.0 for white."""
    return float(relative_luminance_array(as_rgb(color).as_tuple()))


# =============================================================================
# Contrast ratio
# =============================================================================


def contrast_ratio(color_a: RGBLike, color_b: RGBLike) -> float:
    """
    WCAG contrast ratio (L_lighter + 0.05) / (L_darker + 0.05).

    Symmetric in its arguments; ranges from 1.0 (identical luminance)
    to 21.0 (black on white).
    """
    l_a = relative_luminance(color_a)
    l_b = relative_luminance(color_b)
    lighter, darker = max(l_a, l_b), min(l_a, l_b)
    return (lighter + _FLARE) / (darker + _FLARE)


# Name used by picker front-ends
get_contrast_ratio = contrast_ratio


def wcag_levels(ratio: float, thresholds: Optional[WCAGThresholds] = None) -> WCAGResult:
    """Classify a contrast ratio against the WCAG criteria."""
    t = thresholds or WCAGThresholds()
    return WCAGResult(
        ratio=ratio,
        aa_normal=ratio >= t.aa_normal,
        aa_large=ratio >= t.aa_large,
        aaa_normal=ratio >= t.aaa_normal,
        aaa_large=ratio >= t.aaa_large,
        ui_components=ratio >= t.ui_components,
    )


def check_contrast(
    foreground: RGBLike,
    background: RGBLike,
    thresholds: Optional[WCAGThresholds] = None,
) -> WCAGResult:
    """Contrast ratio of a color pair, classified."""
    return wcag_levels(contrast_ratio(foreground, background), thresholds)


def contrast_grade(ratio: float) -> str:
    """
    Coarse traffic-light grade for a ratio.

    Returns one of "excellent" (>= 7), "good" (>= 4.5), "fair" (>= 3)
    or "poor".
    """
    if ratio >= 7.0:
        return "excellent"
    if ratio >= 4.5:
        return "good"
    if ratio >= 3.0:
        return "fair"
    return "poor"


def readable_text_color(color: RGBLike) -> str:
    """
    Black or white, whichever reads better on ``color``.

    Uses YIQ brightness (299R + 587G + 114B) / 1000 with a midpoint of 128.
    """
    r, g, b = as_rgb(color)
    yiq = (r * 299 + g * 587 + b * 114) / 1000
    return "#000000" if yiq >= 128 else "#FFFFFF"


# =============================================================================
# Suggestions
# =============================================================================


def suggest_contrast_colors(
    color: RGBLike,
    against: RGBLike,
    *,
    limit: int = 4,
    config: Optional[SuggestionConfig] = None,
) -> list[str]:
    """
    Propose replacements for ``color`` that contrast better with ``against``.

    Candidates keep the hue and saturation of ``color``:
    1. Lightness steps whose ratio lands near a target ratio (4.5 or 7.0)
    2. The color shifted darker and lighter by ``lightness_shift``
    3. Pure black and pure white

    Duplicates are dropped (first occurrence wins) and the rest are
    ordered by descending contrast against ``against``.

    Returns:
        Up to ``limit`` hex strings.
    """
    cfg = config or SuggestionConfig()
    target = as_rgb(against)
    hsl = rgb_to_hsl(*as_rgb(color))

    def candidate(lightness: float) -> tuple[str, float]:
        rgb = hsl_to_rgb(hsl.h, hsl.s, lightness)
        return rgb_to_hex(*rgb), contrast_ratio(rgb, target)

    # Insertion-ordered: the first occurrence of a hex keeps its place
    found: dict[str, float] = {}
    for lightness in cfg.lightness_steps:
        hex_color, ratio = candidate(lightness)
        if any(abs(ratio - goal) < cfg.tolerance for goal in cfg.target_ratios):
            found.setdefault(hex_color, ratio)

    for lightness in (
        max(0.0, hsl.l - cfg.lightness_shift),
        min(100.0, hsl.l + cfg.lightness_shift),
    ):
        hex_color, ratio = candidate(lightness)
        found.setdefault(hex_color, ratio)

    for extreme in ((0, 0, 0), (255, 255, 255)):
        found.setdefault(rgb_to_hex(*extreme), contrast_ratio(extreme, target))

    # sorted() is stable, so equal ratios keep insertion order
    ordered = sorted(found, key=found.__getitem__, reverse=True)
    return ordered[:max(0, limit)]
