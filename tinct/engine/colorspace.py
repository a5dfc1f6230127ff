# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
Color space conversions.

Conversion hub: every model converts through sRGB.

    HSV ↔ RGB ↔ HSL
           ↕
       CMYK, HEX

Vectorized kernels work on arrays of shape (..., 3) so that whole pixel
buffers (or the full 256³ RGB cube) convert in one call. The scalar
functions are thin wrappers over the same kernels, so scalar and array
results are bit-identical.

Units at the public boundary:
- RGB: 0-255 (integers on output)
- Hue: degrees [0, 360)
- Saturation / value / lightness / CMYK: percent 0-100

Rounding is "round half away from zero" everywhere an integer is
produced. All values involved are non-negative, so this is floor(x + 0.5).
NumPy's round-half-to-even is never used.

Inputs are clamped or wrapped, never rejected: hue wraps modulo 360,
percentages clamp to [0, 100], channels clamp to [0, 255], NaN becomes 0.
"""

from __future__ import annotations

import logging
import math
import re
from typing import Optional, Sequence, Union

import numpy as np
from numpy.typing import ArrayLike, NDArray

from tinct.schema import CMYKColor, HSLColor, HSVColor, RGBColor

logger = logging.getLogger(__name__)

RGBLike = Union[RGBColor, Sequence[float]]


# =============================================================================
# Rounding and clamping
# =============================================================================


def round_half_up(x: float) -> int:
    """Round to the nearest integer, halves away from zero (0.5 → 1, 2.5 → 3)."""
    if x < 0:
        return -int(math.floor(-x + 0.5))
    return int(math.floor(x + 0.5))


def _clamp(x: float, lo: float, hi: float) -> float:
    if x != x:  # NaN
        return lo
    return max(lo, min(hi, x))


def _wrap_hue(h: float) -> float:
    if h != h or math.isinf(h):
        return 0.0
    h = h % 360.0
    # A tiny negative input wraps to exactly 360.0 in floating point
    return 0.0 if h >= 360.0 else h


def clamp_alpha(alpha: float) -> float:
    """Clamp an opacity into [0, 1]."""
    return _clamp(float(alpha), 0.0, 1.0)


def clamp_rgb(r: float, g: float, b: float) -> RGBColor:
    """Round and clamp arbitrary channel values into a valid RGBColor."""
    return RGBColor(
        r=round_half_up(_clamp(float(r), 0.0, 255.0)),
        g=round_half_up(_clamp(float(g), 0.0, 255.0)),
        b=round_half_up(_clamp(float(b), 0.0, 255.0)),
    )


def normalize_hsv(h: float, s: float, v: float) -> HSVColor:
    """Wrap hue and clamp saturation/value without any rounding."""
    return HSVColor(
        h=_wrap_hue(float(h)),
        s=_clamp(float(s), 0.0, 100.0),
        v=_clamp(float(v), 0.0, 100.0),
    )


def normalize_hsl(h: float, s: float, l: float) -> HSLColor:  # noqa: E741
    """Wrap hue and clamp saturation/lightness without any rounding."""
    return HSLColor(
        h=_wrap_hue(float(h)),
        s=_clamp(float(s), 0.0, 100.0),
        l=_clamp(float(l), 0.0, 100.0),
    )


def as_rgb(color: RGBLike) -> RGBColor:
    """Accept an RGBColor or any (r, g, b) sequence."""
    if isinstance(color, RGBColor):
        return color
    r, g, b = color
    return clamp_rgb(r, g, b)


# =============================================================================
# Array helpers
# =============================================================================


def _wrap_hue_array(h: NDArray[np.float64]) -> NDArray[np.float64]:
    h = np.nan_to_num(h, nan=0.0, posinf=0.0, neginf=0.0) % 360.0
    return np.where(h >= 360.0, 0.0, h)


def _unit_percent(x: NDArray[np.float64]) -> NDArray[np.float64]:
    """Percent [0, 100] → unit [0, 1], clamped."""
    return np.clip(np.nan_to_num(x, nan=0.0), 0.0, 100.0) / 100.0


def _unit_rgb(rgb: ArrayLike) -> NDArray[np.float64]:
    """0-255 channels → unit floats, clamped."""
    rgb = np.asarray(rgb, dtype=np.float64)
    return np.clip(np.nan_to_num(rgb, nan=0.0), 0.0, 255.0) / 255.0


def _to_uint8(unit: NDArray[np.float64]) -> NDArray[np.uint8]:
    """Unit floats → 0-255 with half-up rounding."""
    scaled = np.floor(unit * 255.0 + 0.5)
    return np.clip(scaled, 0.0, 255.0).astype(np.uint8)


def _hue_from_unit_rgb(
    r: NDArray[np.float64],
    g: NDArray[np.float64],
    b: NDArray[np.float64],
    cmax: NDArray[np.float64],
    delta: NDArray[np.float64],
) -> NDArray[np.float64]:
    """Six-case hue formula shared by HSV and HSL. Achromatic → 0."""
    safe = np.where(delta == 0, 1.0, delta)
    sector = np.select(
        [delta == 0, cmax == r, cmax == g],
        [
            np.zeros_like(r),
            (g - b) / safe + np.where(g < b, 6.0, 0.0),
            (b - r) / safe + 2.0,
        ],
        default=(r - g) / safe + 4.0,
    )
    return _wrap_hue_array(sector / 6.0 * 360.0)


# =============================================================================
# Unit-space kernels (no rounding)
# =============================================================================


def _hsv_to_unit_rgb(hsv: ArrayLike) -> NDArray[np.float64]:
    hsv = np.asarray(hsv, dtype=np.float64)
    h = _wrap_hue_array(hsv[..., 0])
    s = _unit_percent(hsv[..., 1])
    v = _unit_percent(hsv[..., 2])

    c = v * s
    x = c * (1.0 - np.abs((h / 60.0) % 2.0 - 1.0))
    m = v - c
    zero = np.zeros_like(c)

    sectors = [h < 60.0, h < 120.0, h < 180.0, h < 240.0, h < 300.0]
    r = np.select(sectors, [c, x, zero, zero, x], default=c)
    g = np.select(sectors, [x, c, c, x, zero], default=zero)
    b = np.select(sectors, [zero, zero, x, c, c], default=x)

    return np.stack([r + m, g + m, b + m], axis=-1)


def _hue_to_channel(
    p: NDArray[np.float64],
    q: NDArray[np.float64],
    t: NDArray[np.float64],
) -> NDArray[np.float64]:
    t = np.where(t < 0.0, t + 1.0, t)
    t = np.where(t > 1.0, t - 1.0, t)
    return np.select(
        [t < 1.0 / 6.0, t < 1.0 / 2.0, t < 2.0 / 3.0],
        [p + (q - p) * 6.0 * t, q, p + (q - p) * (2.0 / 3.0 - t) * 6.0],
        default=p,
    )


def _hsl_to_unit_rgb(hsl: ArrayLike) -> NDArray[np.float64]:
    hsl = np.asarray(hsl, dtype=np.float64)
    h = _wrap_hue_array(hsl[..., 0]) / 360.0
    s = _unit_percent(hsl[..., 1])
    l = _unit_percent(hsl[..., 2])  # noqa: E741

    q = np.where(l < 0.5, l * (1.0 + s), l + s - l * s)
    p = 2.0 * l - q

    r = _hue_to_channel(p, q, h + 1.0 / 3.0)
    g = _hue_to_channel(p, q, h)
    b = _hue_to_channel(p, q, h - 1.0 / 3.0)

    achromatic = s == 0
    return np.stack(
        [np.where(achromatic, l, r), np.where(achromatic, l, g), np.where(achromatic, l, b)],
        axis=-1,
    )


def _unit_rgb_to_hsv(rgb: NDArray[np.float64]) -> NDArray[np.float64]:
    r, g, b = rgb[..., 0], rgb[..., 1], rgb[..., 2]
    cmax = rgb.max(axis=-1)
    cmin = rgb.min(axis=-1)
    delta = cmax - cmin

    s = np.where(cmax == 0, 0.0, delta / np.where(cmax == 0, 1.0, cmax))
    h = _hue_from_unit_rgb(r, g, b, cmax, delta)
    return np.stack([h, s * 100.0, cmax * 100.0], axis=-1)


def _unit_rgb_to_hsl(rgb: NDArray[np.float64]) -> NDArray[np.float64]:
    r, g, b = rgb[..., 0], rgb[..., 1], rgb[..., 2]
    cmax = rgb.max(axis=-1)
    cmin = rgb.min(axis=-1)
    delta = cmax - cmin
    l = (cmax + cmin) / 2.0  # noqa: E741

    denom = np.where(l > 0.5, 2.0 - cmax - cmin, cmax + cmin)
    s = np.where(delta == 0, 0.0, delta / np.where(denom == 0, 1.0, denom))
    h = _hue_from_unit_rgb(r, g, b, cmax, delta)
    return np.stack([h, s * 100.0, l * 100.0], axis=-1)


# =============================================================================
# Vectorized public API
# =============================================================================


def hsv_to_rgb_array(hsv: ArrayLike) -> NDArray[np.uint8]:
    """
    Convert HSV to RGB.

    Args:
        hsv: Array of shape (..., 3): hue degrees, saturation %, value %

    Returns:
        uint8 array of shape (..., 3) with RGB channels
    """
    return _to_uint8(_hsv_to_unit_rgb(hsv))


def rgb_to_hsv_array(rgb: ArrayLike) -> NDArray[np.float64]:
    """
    Convert RGB to HSV at full float precision.

    Args:
        rgb: Array of shape (..., 3) with channels 0-255

    Returns:
        Array of shape (..., 3): hue [0, 360), saturation %, value %
    """
    return _unit_rgb_to_hsv(_unit_rgb(rgb))


def hsl_to_rgb_array(hsl: ArrayLike) -> NDArray[np.uint8]:
    """
    Convert HSL to RGB.

    Args:
        hsl: Array of shape (..., 3): hue degrees, saturation %, lightness %

    Returns:
        uint8 array of shape (..., 3) with RGB channels
    """
    return _to_uint8(_hsl_to_unit_rgb(hsl))


def rgb_to_hsl_array(rgb: ArrayLike) -> NDArray[np.float64]:
    """
    Convert RGB to HSL at full float precision.

    Args:
        rgb: Array of shape (..., 3) with channels 0-255

    Returns:
        Array of shape (..., 3): hue [0, 360), saturation %, lightness %
    """
    return _unit_rgb_to_hsl(_unit_rgb(rgb))


# =============================================================================
# Scalar API
# =============================================================================


def _rgb_from_array(arr: NDArray[np.uint8]) -> RGBColor:
    r, g, b = arr.tolist()
    return RGBColor(r, g, b)


def hsv_to_rgb(h: float, s: float, v: float) -> RGBColor:
    """
    Convert HSV to RGB.

    Example:
        >>> hsv_to_rgb(120, 100, 100)
        RGBColor(r=0, g=255, b=0)
    """
    return _rgb_from_array(hsv_to_rgb_array([h, s, v]))


def rgb_to_hsv(r: float, g: float, b: float) -> HSVColor:
    """
    Convert RGB to HSV.

    The result keeps full precision so that ``hsv_to_rgb`` recovers the
    input exactly. Call ``.rounded()`` for display.
    """
    h, s, v = rgb_to_hsv_array([r, g, b]).tolist()
    return HSVColor(h, s, v)


def hsl_to_rgb(h: float, s: float, l: float) -> RGBColor:  # noqa: E741
    """Convert HSL to RGB."""
    return _rgb_from_array(hsl_to_rgb_array([h, s, l]))


def rgb_to_hsl(r: float, g: float, b: float) -> HSLColor:
    """Convert RGB to HSL at full precision (``.rounded()`` for display)."""
    h, s, l = rgb_to_hsl_array([r, g, b]).tolist()  # noqa: E741
    return HSLColor(h, s, l)


def hsv_to_hsl(h: float, s: float, v: float) -> HSLColor:
    """HSV → HSL through unrounded RGB."""
    h2, s2, l2 = _unit_rgb_to_hsl(_hsv_to_unit_rgb([h, s, v])).tolist()
    return HSLColor(h2, s2, l2)


def hsl_to_hsv(h: float, s: float, l: float) -> HSVColor:  # noqa: E741
    """HSL → HSV through unrounded RGB."""
    h2, s2, v2 = _unit_rgb_to_hsv(_hsl_to_unit_rgb([h, s, l])).tolist()
    return HSVColor(h2, s2, v2)


def rgb_to_cmyk(r: float, g: float, b: float) -> CMYKColor:
    """
    Convert RGB to CMYK percentages.

    K = 1 - max(r, g, b). A key that rounds to 100 is pure black and
    reports (0, 0, 0, 100) regardless of the residual inks.
    """
    rgb = clamp_rgb(r, g, b)
    r_f, g_f, b_f = rgb.r / 255.0, rgb.g / 255.0, rgb.b / 255.0
    k = 1.0 - max(r_f, g_f, b_f)
    k_pct = round_half_up(k * 100.0)
    if k == 1.0 or k_pct == 100:
        return CMYKColor(0, 0, 0, 100)
    denom = 1.0 - k
    return CMYKColor(
        c=round_half_up((1.0 - r_f - k) / denom * 100.0),
        m=round_half_up((1.0 - g_f - k) / denom * 100.0),
        y=round_half_up((1.0 - b_f - k) / denom * 100.0),
        k=k_pct,
    )


def cmyk_to_rgb(c: float, m: float, y: float, k: float) -> RGBColor:
    """Convert CMYK percentages to RGB: channel = 255·(1 − ink)·(1 − key)."""
    c_f = _clamp(float(c), 0.0, 100.0) / 100.0
    m_f = _clamp(float(m), 0.0, 100.0) / 100.0
    y_f = _clamp(float(y), 0.0, 100.0) / 100.0
    k_f = _clamp(float(k), 0.0, 100.0) / 100.0
    return RGBColor(
        r=round_half_up(255.0 * (1.0 - c_f) * (1.0 - k_f)),
        g=round_half_up(255.0 * (1.0 - m_f) * (1.0 - k_f)),
        b=round_half_up(255.0 * (1.0 - y_f) * (1.0 - k_f)),
    )


# =============================================================================
# HEX
# =============================================================================

_HEX_DIGITS_RE = re.compile(r"[0-9A-Fa-f]+")


def rgb_to_hex(r: float, g: float, b: float, alpha: Optional[float] = None) -> str:
    """
    Encode RGB as an uppercase hex string like "#3941C8".

    When ``alpha`` is given and below 1, a fourth byte pair
    round(alpha·255) is appended ("#3941C880").
    """
    rgb = clamp_rgb(r, g, b)
    text = f"#{rgb.r:02X}{rgb.g:02X}{rgb.b:02X}"
    if alpha is not None:
        a = clamp_alpha(alpha)
        if a < 1.0:
            text += f"{round_half_up(a * 255.0):02X}"
    return text


def _hex_digits(text: object) -> Optional[str]:
    """Digits after an optional leading '#', or None if not pure hex."""
    if not isinstance(text, str):
        return None
    digits = text[1:] if text.startswith("#") else text
    if not _HEX_DIGITS_RE.fullmatch(digits):
        return None
    return digits


def _decode_rgb(digits: str) -> RGBColor:
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    return RGBColor(
        r=int(digits[0:2], 16),
        g=int(digits[2:4], 16),
        b=int(digits[4:6], 16),
    )


def hex_to_rgb(text: str) -> Optional[RGBColor]:
    """
    Decode "#RGB" or "#RRGGBB" (the '#' is optional, case-insensitive).

    Returns:
        RGBColor, or None for anything that is not exactly 3 or 6 hex digits.
    """
    digits = _hex_digits(text)
    if digits is None or len(digits) not in (3, 6):
        logger.debug("Rejected hex color %r", text)
        return None
    return _decode_rgb(digits)


def hex_to_rgba(text: str) -> Optional[tuple[RGBColor, float]]:
    """
    Decode a hex color that may carry alpha.

    Accepts 3, 6 or 8 digits. For 8 digits the last pair is alpha/255;
    shorter forms are fully opaque.

    Returns:
        (RGBColor, alpha), or None for malformed input.
    """
    digits = _hex_digits(text)
    if digits is None or len(digits) not in (3, 6, 8):
        logger.debug("Rejected hex color %r", text)
        return None
    if len(digits) == 8:
        return _decode_rgb(digits[:6]), int(digits[6:8], 16) / 255.0
    return _decode_rgb(digits), 1.0


def hsv_to_hex(h: float, s: float, v: float) -> str:
    """HSV straight to "#RRGGBB"."""
    return rgb_to_hex(*hsv_to_rgb(h, s, v))


def hsl_to_hex(h: float, s: float, l: float) -> str:  # noqa: E741
    """HSL straight to "#RRGGBB"."""
    return rgb_to_hex(*hsl_to_rgb(h, s, l))
