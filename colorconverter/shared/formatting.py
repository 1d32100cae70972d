#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: colorconverter/shared/formatting.py

import enum
from typing import Tuple

from colorconverter.core import conversions as conv
from colorconverter.core.channel import rgb_to_hex


class OutputKind(enum.Enum):
    HEX = "hex value"
    RGB = "RGB notation"
    HSL = "HSL notation"

    @property
    def description(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


def format_hsl(r: int, g: int, b: int) -> str:
    """Render the HSL body: truncated hue, rounded percentages."""
    h, s, l = conv.rgb_to_hsl(r, g, b)
    return f"{int(h)},{conv.round_half_up(s * 100)}%,{conv.round_half_up(l * 100)}%"


RENDERERS = {
    OutputKind.HEX: lambda r, g, b: f"#{rgb_to_hex(r, g, b)}",
    OutputKind.RGB: lambda r, g, b: f"rgb({r},{g},{b})",
    OutputKind.HSL: lambda r, g, b: f"hsl({format_hsl(r, g, b)})",
}


def format_color(rgb: Tuple[int, int, int], kind: OutputKind) -> str:
    return RENDERERS[kind](*rgb)
