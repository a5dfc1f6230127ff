# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
Color vision deficiency simulation.

Each deficiency is approximated by a fixed 3×3 matrix applied directly to
the gamma-encoded RGB vector:

    out[i] = Σ_j M[i][j] · in[j]

followed by clamping to [0, 255] and half-up rounding. These are the
lightweight matrices used by browser-based simulators, not the
physiologically based Machado/Viénot models in linear LMS space.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Union

import numpy as np
from numpy.typing import ArrayLike, NDArray

from tinct.engine.colorspace import clamp_rgb
from tinct.schema import RGBColor

logger = logging.getLogger(__name__)


class VisionDeficiency(Enum):
    """Supported vision models."""
    NORMAL = "normal"
    PROTANOPIA = "protanopia"        # no red cones
    DEUTERANOPIA = "deuteranopia"    # no green cones
    TRITANOPIA = "tritanopia"        # no blue cones
    ACHROMATOPSIA = "achromatopsia"  # no color vision
    PROTANOMALY = "protanomaly"      # weak red cones


def _matrix(rows: list[list[float]]) -> NDArray[np.float64]:
    m = np.array(rows, dtype=np.float64)
    m.setflags(write=False)
    return m


SIMULATION_MATRICES: dict[VisionDeficiency, NDArray[np.float64]] = {
    VisionDeficiency.PROTANOPIA: _matrix([
        [0.567, 0.433, 0.0],
        [0.558, 0.442, 0.0],
        [0.0, 0.242, 0.758],
    ]),
    VisionDeficiency.DEUTERANOPIA: _matrix([
        [0.625, 0.375, 0.0],
        [0.7, 0.3, 0.0],
        [0.0, 0.3, 0.7],
    ]),
    VisionDeficiency.TRITANOPIA: _matrix([
        [0.95, 0.05, 0.0],
        [0.0, 0.433, 0.567],
        [0.0, 0.475, 0.525],
    ]),
    # Luma-weighted grayscale replicated across channels
    VisionDeficiency.ACHROMATOPSIA: _matrix([
        [0.299, 0.587, 0.114],
        [0.299, 0.587, 0.114],
        [0.299, 0.587, 0.114],
    ]),
    VisionDeficiency.PROTANOMALY: _matrix([
        [0.817, 0.183, 0.0],
        [0.333, 0.667, 0.0],
        [0.0, 0.125, 0.875],
    ]),
}


def _resolve(variant: Union[VisionDeficiency, str]) -> VisionDeficiency:
    """Map a variant name to the enum. Unknown names fall back to NORMAL."""
    if isinstance(variant, VisionDeficiency):
        return variant
    try:
        return VisionDeficiency(str(variant).lower())
    except ValueError:
        logger.debug("Unknown vision deficiency %r, returning input unchanged", variant)
        return VisionDeficiency.NORMAL


def simulate_array(
    pixels: ArrayLike,
    variant: Union[VisionDeficiency, str],
) -> NDArray[np.uint8]:
    """
    Simulate a deficiency over an array of colors.

    Args:
        pixels: Array of shape (..., 3) with RGB channels 0-255
            (e.g. an (H, W, 3) uint8 image)
        variant: Deficiency to simulate

    Returns:
        uint8 array of the same shape
    """
    rgb = np.clip(np.nan_to_num(np.asarray(pixels, dtype=np.float64), nan=0.0), 0.0, 255.0)
    deficiency = _resolve(variant)
    if deficiency is VisionDeficiency.NORMAL:
        return np.floor(rgb + 0.5).astype(np.uint8)
    out = np.einsum("...j,ij->...i", rgb, SIMULATION_MATRICES[deficiency])
    return np.clip(np.floor(out + 0.5), 0.0, 255.0).astype(np.uint8)


def simulate_color_blindness(
    r: int,
    g: int,
    b: int,
    variant: Union[VisionDeficiency, str],
) -> RGBColor:
    """
    Simulate how (r, g, b) appears under a vision deficiency.

    ``normal`` and unrecognized variant names return the input unchanged
    (after channel clamping).

    Example:
        >>> simulate_color_blindness(255, 0, 0, "achromatopsia")
        RGBColor(r=76, g=76, b=76)
    """
    deficiency = _resolve(variant)
    if deficiency is VisionDeficiency.NORMAL:
        return clamp_rgb(r, g, b)
    out = simulate_array([r, g, b], deficiency).tolist()
    return RGBColor(*out)


def simulate_all(r: int, g: int, b: int) -> dict[VisionDeficiency, RGBColor]:
    """Every supported vision model applied to one color, in enum order."""
    return {
        deficiency: simulate_color_blindness(r, g, b, deficiency)
        for deficiency in VisionDeficiency
    }
