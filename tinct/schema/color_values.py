# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
Color value types for the Tinct engine.

Design principles:
- Immutable: All types are frozen dataclasses
- Validated: Constructors reject values outside their model's range
- Pivot: RGB is the canonical form; every other model converts through it
- Serializable: JSON-ready via to_dict / from_dict

Constructors are strict. The conversion functions in ``tinct.engine`` are
lenient instead: they clamp or wrap their numeric inputs before building
these values, so they never trip this validation.

Ranges:
- RGB: integer channels 0-255
- HSV / HSL: hue in degrees [0, 360), saturation/value/lightness 0-100
- CMYK: integer percentages 0-100; K=100 means pure black (C=M=Y=0)
- Alpha: 0.0 (transparent) to 1.0 (opaque)
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional, Union


# =============================================================================
# Schema Version
# =============================================================================

SCHEMA_VERSION = "1.0"


def _check_int_range(name: str, value: object, upper: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    if not 0 <= value <= upper:
        raise ValueError(f"{name} must be 0-{upper}, got {value}")


def _check_hue(value: float) -> None:
    if not 0.0 <= value < 360.0:
        raise ValueError(f"Hue must be 0-360, got {value}")


def _check_percent(name: str, value: float) -> None:
    if not 0.0 <= value <= 100.0:
        raise ValueError(f"{name} must be 0-100, got {value}")


# =============================================================================
# Core Color Types
# =============================================================================


@dataclass(frozen=True, slots=True)
class RGBColor:
    """
    A color in sRGB space with 8-bit integer channels.

    This is the pivot representation: the analyzer, the simulator and the
    harmony generator all consume or produce RGB.

    Attributes:
        r: Red channel (0-255)
        g: Green channel (0-255)
        b: Blue channel (0-255)
    """
    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        """Validate channel values are 8-bit integers."""
        _check_int_range("Red", self.r, 255)
        _check_int_range("Green", self.g, 255)
        _check_int_range("Blue", self.b, 255)

    def __iter__(self) -> Iterator[int]:
        return iter((self.r, self.g, self.b))

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)

    @property
    def hex(self) -> str:
        """Uppercase hex string like "#3941C8"."""
        from tinct.engine.colorspace import rgb_to_hex
        return rgb_to_hex(self.r, self.g, self.b)

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"r": self.r, "g": self.g, "b": self.b}

    @classmethod
    def from_dict(cls, data: dict) -> RGBColor:
        """Deserialize from dictionary."""
        return cls(r=data["r"], g=data["g"], b=data["b"])


@dataclass(frozen=True, slots=True)
class HSVColor:
    """
    A color in HSV (a.k.a. HSB) space.

    Components are floats so that chained conversions keep full precision.
    Use ``rounded()`` for the integer form shown to users.

    Attributes:
        h: Hue in degrees [0, 360)
        s: Saturation (0-100)
        v: Value / brightness (0-100)
    """
    h: float
    s: float
    v: float

    def __post_init__(self) -> None:
        _check_hue(self.h)
        _check_percent("Saturation", self.s)
        _check_percent("Value", self.v)

    def __iter__(self) -> Iterator[float]:
        return iter((self.h, self.s, self.v))

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.h, self.s, self.v)

    def rounded(self) -> HSVColor:
        """Integer display form. A hue that rounds up to 360 wraps to 0."""
        from tinct.engine.colorspace import round_half_up
        return HSVColor(
            h=round_half_up(self.h) % 360,
            s=round_half_up(self.s),
            v=round_half_up(self.v),
        )

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"h": self.h, "s": self.s, "v": self.v}

    @classmethod
    def from_dict(cls, data: dict) -> HSVColor:
        """Deserialize from dictionary."""
        return cls(h=data["h"], s=data["s"], v=data["v"])


@dataclass(frozen=True, slots=True)
class HSLColor:
    """
    A color in HSL space.

    Attributes:
        h: Hue in degrees [0, 360)
        s: Saturation (0-100)
        l: Lightness (0-100)
    """
    h: float
    s: float
    l: float  # noqa: E741

    def __post_init__(self) -> None:
        _check_hue(self.h)
        _check_percent("Saturation", self.s)
        _check_percent("Lightness", self.l)

    def __iter__(self) -> Iterator[float]:
        return iter((self.h, self.s, self.l))

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.h, self.s, self.l)

    def rounded(self) -> HSLColor:
        """Integer display form. A hue that rounds up to 360 wraps to 0."""
        from tinct.engine.colorspace import round_half_up
        return HSLColor(
            h=round_half_up(self.h) % 360,
            s=round_half_up(self.s),
            l=round_half_up(self.l),
        )

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"h": self.h, "s": self.s, "l": self.l}

    @classmethod
    def from_dict(cls, data: dict) -> HSLColor:
        """Deserialize from dictionary."""
        return cls(h=data["h"], s=data["s"], l=data["l"])


@dataclass(frozen=True, slots=True)
class CMYKColor:
    """
    A color in subtractive CMYK space, as integer percentages.

    Pure black is always (0, 0, 0, 100): when K is 100 the other inks
    carry no information and must be zero.
    """
    c: int
    m: int
    y: int
    k: int

    def __post_init__(self) -> None:
        _check_int_range("Cyan", self.c, 100)
        _check_int_range("Magenta", self.m, 100)
        _check_int_range("Yellow", self.y, 100)
        _check_int_range("Key", self.k, 100)
        if self.k == 100 and (self.c or self.m or self.y):
            raise ValueError(
                f"Pure black (K=100) must have C=M=Y=0, got "
                f"({self.c}, {self.m}, {self.y}, {self.k})"
            )

    def __iter__(self) -> Iterator[int]:
        return iter((self.c, self.m, self.y, self.k))

    def as_tuple(self) -> tuple[int, int, int, int]:
        return (self.c, self.m, self.y, self.k)

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"c": self.c, "m": self.m, "y": self.y, "k": self.k}

    @classmethod
    def from_dict(cls, data: dict) -> CMYKColor:
        """Deserialize from dictionary."""
        return cls(c=data["c"], m=data["m"], y=data["y"], k=data["k"])


# =============================================================================
# Snapshot (all representations at once)
# =============================================================================


class CSSFormat(Enum):
    """Text formats a color can be copied as."""
    HEX = "hex"
    RGB = "rgb"
    HSL = "hsl"
    HSV = "hsv"
    CMYK = "cmyk"


def _format_alpha(alpha: float) -> str:
    """Alpha rounded to two decimals, without trailing zeros (0.5, 0.25)."""
    from tinct.engine.colorspace import round_half_up
    return f"{round_half_up(alpha * 100) / 100:g}"


@dataclass(frozen=True, slots=True)
class ColorSnapshot:
    """
    One color expressed in every supported model, plus its alpha.

    This is what a picker shows for its current color. The HSV component
    is kept at full precision (it is usually the picker's own state);
    HSL is stored in its rounded display form.

    Attributes:
        hex: Uppercase "#RRGGBB" (alpha is never folded in here)
        rgb: Pivot RGB value
        hsl: Rounded HSL
        hsv: HSV as given (or derived from RGB at full precision)
        cmyk: CMYK percentages
        alpha: Opacity 0-1
    """
    hex: str
    rgb: RGBColor
    hsl: HSLColor
    hsv: HSVColor
    cmyk: CMYKColor
    alpha: float = 1.0

    def __post_init__(self) -> None:
        if not 0.0 <= self.alpha <= 1.0:
            raise ValueError(f"Alpha must be 0-1, got {self.alpha}")

    @property
    def has_alpha(self) -> bool:
        """True when the color is not fully opaque."""
        return self.alpha < 1.0

    @property
    def hex_with_alpha(self) -> str:
        """8-digit hex when translucent, otherwise the plain 6-digit hex."""
        from tinct.engine.colorspace import rgb_to_hex
        return rgb_to_hex(self.rgb.r, self.rgb.g, self.rgb.b, alpha=self.alpha)

    @classmethod
    def from_hsv(cls, h: float, s: float, v: float, alpha: float = 1.0) -> ColorSnapshot:
        """Build a snapshot from HSV components (clamped/wrapped like all engine inputs)."""
        from tinct.engine.colorspace import clamp_alpha, hsv_to_rgb, normalize_hsv
        hsv = normalize_hsv(h, s, v)
        return cls._build(hsv_to_rgb(*hsv), hsv, clamp_alpha(alpha))

    @classmethod
    def from_rgb(cls, r: float, g: float, b: float, alpha: float = 1.0) -> ColorSnapshot:
        """Build a snapshot from RGB channels."""
        from tinct.engine.colorspace import clamp_alpha, clamp_rgb, rgb_to_hsv
        rgb = clamp_rgb(r, g, b)
        return cls._build(rgb, rgb_to_hsv(*rgb), clamp_alpha(alpha))

    @classmethod
    def from_hex(cls, text: str) -> Optional[ColorSnapshot]:
        """
        Build a snapshot from a 3, 6 or 8 digit hex string.

        Returns None for malformed input, like ``hex_to_rgb``.
        """
        from tinct.engine.colorspace import hex_to_rgba
        parsed = hex_to_rgba(text)
        if parsed is None:
            return None
        rgb, alpha = parsed
        return cls.from_rgb(rgb.r, rgb.g, rgb.b, alpha=alpha)

    @classmethod
    def _build(cls, rgb: RGBColor, hsv: HSVColor, alpha: float) -> ColorSnapshot:
        from tinct.engine.colorspace import rgb_to_cmyk, rgb_to_hex, rgb_to_hsl
        return cls(
            hex=rgb_to_hex(*rgb),
            rgb=rgb,
            hsl=rgb_to_hsl(*rgb).rounded(),
            hsv=hsv,
            cmyk=rgb_to_cmyk(*rgb),
            alpha=alpha,
        )

    def to_css(self, format: Union[CSSFormat, str] = CSSFormat.HEX) -> str:
        """
        Format the color as copyable text.

        Translucent colors use ``rgba()``, ``hsla()`` and 8-digit hex.
        HSV and CMYK have no alpha form and ignore it.

        Raises:
            ValueError: If ``format`` is not a known CSSFormat.
        """
        fmt = CSSFormat(format)
        r, g, b = self.rgb
        hsl = self.hsl
        if fmt == CSSFormat.HEX:
            return self.hex_with_alpha
        if fmt == CSSFormat.RGB:
            if self.has_alpha:
                return f"rgba({r}, {g}, {b}, {_format_alpha(self.alpha)})"
            return f"rgb({r}, {g}, {b})"
        if fmt == CSSFormat.HSL:
            if self.has_alpha:
                return f"hsla({hsl.h}, {hsl.s}%, {hsl.l}%, {_format_alpha(self.alpha)})"
            return f"hsl({hsl.h}, {hsl.s}%, {hsl.l}%)"
        if fmt == CSSFormat.HSV:
            hsv = self.hsv.rounded()
            return f"hsv({hsv.h}, {hsv.s}%, {hsv.v}%)"
        c, m, y, k = self.cmyk
        return f"cmyk({c}%, {m}%, {y}%, {k}%)"

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "hex": self.hex,
            "rgb": self.rgb.to_dict(),
            "hsl": self.hsl.to_dict(),
            "hsv": self.hsv.to_dict(),
            "cmyk": self.cmyk.to_dict(),
            "alpha": self.alpha,
        }

    @classmethod
    def from_dict(cls, data: dict) -> ColorSnapshot:
        """Deserialize from dictionary."""
        return cls(
            hex=data["hex"],
            rgb=RGBColor.from_dict(data["rgb"]),
            hsl=HSLColor.from_dict(data["hsl"]),
            hsv=HSVColor.from_dict(data["hsv"]),
            cmyk=CMYKColor.from_dict(data["cmyk"]),
            alpha=data.get("alpha", 1.0),
        )
