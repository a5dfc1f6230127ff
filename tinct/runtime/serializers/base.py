# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""Base types and utilities for serializers."""

from __future__ import annotations

import json
from enum import Enum
from typing import Union


class SerializerFormat(Enum):
    """Output format for serializers."""

    JSON = "json"
    JSON_PRETTY = "json_pretty"
    NATURAL = "natural"


def dump_json(data: dict, format: Union[SerializerFormat, str]) -> str:
    """Compact JSON, or indented JSON for JSON_PRETTY."""
    if SerializerFormat(format) == SerializerFormat.JSON_PRETTY:
        return json.dumps(data, indent=2)
    return json.dumps(data, separators=(",", ":"))
