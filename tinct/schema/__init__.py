# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
Schema definitions for color values.

All types in this module are immutable (frozen dataclasses).
Every conversion produces a fresh value; nothing is shared or mutated.
"""

from tinct.schema.color_values import (
    SCHEMA_VERSION,
    CMYKColor,
    ColorSnapshot,
    CSSFormat,
    HSLColor,
    HSVColor,
    RGBColor,
)

__all__ = [
    # Version
    "SCHEMA_VERSION",
    # Core types
    "RGBColor",
    "HSVColor",
    "HSLColor",
    "CMYKColor",
    # All representations of one color, plus alpha
    "ColorSnapshot",
    "CSSFormat",
]
