# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
Contrast report serializer.

Summarizes a foreground/background pair: the WCAG ratio, pass/fail for
each criterion, a coarse grade, and (optionally) better-contrasting
replacements for either color.
"""

from __future__ import annotations

from typing import Optional, Union

from tinct.engine.colorspace import RGBLike, as_rgb, round_half_up
from tinct.engine.contrast import (
    WCAGThresholds,
    check_contrast,
    contrast_grade,
    suggest_contrast_colors,
)
from tinct.runtime.serializers.base import SerializerFormat, dump_json
from tinct.schema import SCHEMA_VERSION

# (label, WCAGResult field) in display order
_CRITERIA = (
    ("AA normal text", "aa_normal"),
    ("AA large text", "aa_large"),
    ("AA UI components", "ui_components"),
    ("AAA normal text", "aaa_normal"),
    ("AAA large text", "aaa_large"),
)


def to_contrast_report(
    foreground: RGBLike,
    background: RGBLike,
    *,
    format: Union[SerializerFormat, str] = SerializerFormat.JSON,
    thresholds: Optional[WCAGThresholds] = None,
    include_suggestions: bool = False,
) -> str:
    """Serialize the contrast analysis of a color pair.

    Args:
        foreground: Text color (RGBColor or (r, g, b)).
        background: Background color.
        format: JSON, JSON_PRETTY or NATURAL (enum member or its value).
        thresholds: Custom WCAG thresholds (defaults to WCAG 2.x values).
        include_suggestions: Add up to four replacement colors for each
            side. Suggestions are only produced while the pair is below
            AAA for normal text.

    Returns:
        The report text.

    Example (NATURAL)::

        Contrast #000000 on #FFFFFF: 21.00:1 (excellent)
        - AA normal text: pass
        - AA large text: pass
        ...
    """
    fmt = SerializerFormat(format)
    fg = as_rgb(foreground)
    bg = as_rgb(background)
    result = check_contrast(fg, bg, thresholds)

    suggestions: Optional[dict] = None
    if include_suggestions and not result.aaa_normal:
        suggestions = {
            "foreground": suggest_contrast_colors(fg, bg),
            "background": suggest_contrast_colors(bg, fg),
        }

    if fmt == SerializerFormat.NATURAL:
        lines = [
            f"Contrast {fg.hex} on {bg.hex}: {result.ratio:.2f}:1 "
            f"({contrast_grade(result.ratio)})"
        ]
        for label, field_name in _CRITERIA:
            verdict = "pass" if getattr(result, field_name) else "fail"
            lines.append(f"- {label}: {verdict}")
        if suggestions is not None:
            lines.append(f"Suggested text colors: {', '.join(suggestions['foreground'])}")
            lines.append(f"Suggested backgrounds: {', '.join(suggestions['background'])}")
        return "\n".join(lines)

    data: dict = {
        "version": SCHEMA_VERSION,
        "foreground": fg.hex,
        "background": bg.hex,
        "ratio": round_half_up(result.ratio * 100) / 100,
        "grade": contrast_grade(result.ratio),
        "levels": {
            key: value for key, value in result.to_dict().items() if key != "ratio"
        },
    }
    if suggestions is not None:
        data["suggestions"] = suggestions
    return dump_json(data, fmt)
