# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
Serializers for handing engine results to other tools.

Serializers only format; they never change the colors they are given
(beyond normalizing hex spelling).
"""

from tinct.runtime.serializers.base import SerializerFormat
from tinct.runtime.serializers.palette import ExportFormat, export_palette
from tinct.runtime.serializers.report import to_contrast_report

__all__ = [
    "SerializerFormat",
    "ExportFormat",
    "export_palette",
    "to_contrast_report",
]
