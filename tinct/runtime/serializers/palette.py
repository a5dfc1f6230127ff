# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
Palette export serializer.

Turns an ordered list of colors into text a designer can paste into a
project: CSS custom properties, SASS variables, JSON, a Tailwind theme
extension, or one hex per line.

Colors are normalized to uppercase "#RRGGBB" (or "#RRGGBBAA" when they
carry alpha) before formatting. Order is preserved and names are
1-based (``--color-1``, ``$color-1``, ``color1``).
"""

from __future__ import annotations

import json
from enum import Enum
from typing import Iterable, Optional, Union

from tinct.engine.colorspace import hex_to_rgba, rgb_to_hex
from tinct.schema import RGBColor


class ExportFormat(Enum):
    """Palette export formats."""

    CSS = "css"
    SASS = "sass"
    JSON = "json"
    TAILWIND = "tailwind"
    TEXT = "text"


def _normalize(color: Union[str, RGBColor]) -> str:
    if isinstance(color, RGBColor):
        return color.hex
    parsed = hex_to_rgba(color)
    if parsed is None:
        raise ValueError(f"Not a hex color: {color!r}")
    rgb, alpha = parsed
    return rgb_to_hex(rgb.r, rgb.g, rgb.b, alpha=alpha)


def export_palette(
    colors: Iterable[Union[str, RGBColor]],
    format: Union[ExportFormat, str] = ExportFormat.CSS,
    *,
    name: Optional[str] = None,
    harmony: Optional[str] = None,
    base_color: Optional[str] = None,
) -> str:
    """Serialize a palette for export.

    Args:
        colors: Hex strings (3, 6 or 8 digits) or RGBColor values.
        format: Target format.
        name: Palette name (JSON only). Defaults to "<Harmony> Palette"
            when ``harmony`` is given.
        harmony: Harmony/scheme the palette was generated from (JSON only).
        base_color: Seed color of the palette (JSON only).

    Returns:
        The exported text. Empty palettes export as an empty document
        of the requested format.

    Raises:
        ValueError: On an unknown format or a malformed color.

    Example (CSS)::

        :root {
          --color-1: #FF0000;
          --color-2: #00FFFF;
        }
    """
    fmt = ExportFormat(format)
    hexes = [_normalize(c) for c in colors]

    if fmt == ExportFormat.CSS:
        body = "".join(f"  --color-{i}: {c};\n" for i, c in enumerate(hexes, start=1))
        return ":root {\n" + body + "}"
    if fmt == ExportFormat.SASS:
        return "".join(f"$color-{i}: {c};\n" for i, c in enumerate(hexes, start=1))
    if fmt == ExportFormat.JSON:
        return _to_json(hexes, name=name, harmony=harmony, base_color=base_color)
    if fmt == ExportFormat.TAILWIND:
        body = "".join(f"        color{i}: '{c}',\n" for i, c in enumerate(hexes, start=1))
        return (
            "module.exports = {\n  theme: {\n    extend: {\n      colors: {\n"
            + body
            + "      }\n    }\n  }\n}"
        )
    return "".join(f"{c}\n" for c in hexes)


def _to_json(
    hexes: list[str],
    *,
    name: Optional[str],
    harmony: Optional[str],
    base_color: Optional[str],
) -> str:
    palette: dict = {}
    if name is None and harmony is not None:
        name = f"{harmony.replace('_', ' ').title()} Palette"
    if name is not None:
        palette["name"] = name
    if harmony is not None:
        palette["harmony"] = harmony
    if base_color is not None:
        palette["baseColor"] = _normalize(base_color)
    palette["colors"] = hexes
    return json.dumps({"palette": palette}, indent=2)
