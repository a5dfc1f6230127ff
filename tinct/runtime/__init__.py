# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
Output runtime for Tinct.

Formats engine results for the outside world:

1. Palette export -- CSS, SASS, JSON, Tailwind or plain text
2. Contrast report -- WCAG analysis of a color pair as JSON or prose
"""

from tinct.runtime.serializers import (
    ExportFormat,
    SerializerFormat,
    export_palette,
    to_contrast_report,
)

__all__ = [
    "export_palette",
    "to_contrast_report",
    "ExportFormat",
    "SerializerFormat",
]
