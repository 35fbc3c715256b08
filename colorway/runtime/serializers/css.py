# Copyright (c) 2026 Colorway
# SPDX-License-Identifier: MIT

"""
CSS text serializer.

Writes colors back as CSS Color 4 syntax:
- RGB and XYZ spaces as ``color(<space> c0 c1 c2)``
- HSL and HWB with percentages
- Lab, Lch, Oklab, Oklch with their own functions

Missing components are written as ``none`` rather than 0, so parsing the
output restores the missing set. Alpha is written only when it is below
1 or missing.
"""

from __future__ import annotations

from typing import Optional

from colorway.runtime.serializers.base import format_number
from colorway.schema.dynamic import DynamicColor
from colorway.schema.rgba8 import Rgba8
from colorway.space.tag import ColorSpaceTag

# Spaces with their own CSS function; the rest use color()
_FUNCTIONS = {
    ColorSpaceTag.HSL: "hsl",
    ColorSpaceTag.HWB: "hwb",
    ColorSpaceTag.LAB: "lab",
    ColorSpaceTag.LCH: "lch",
    ColorSpaceTag.OKLAB: "oklab",
    ColorSpaceTag.OKLCH: "oklch",
}

# Channels written as percentages
_PERCENT_CHANNELS = {
    ColorSpaceTag.HSL: (1, 2),
    ColorSpaceTag.HWB: (1, 2),
}


def _component(color: DynamicColor, ix: int, precision: Optional[int]) -> str:
    if color.missing.contains(ix):
        return "none"
    text = format_number(color.components[ix], precision)
    if ix in _PERCENT_CHANNELS.get(color.cs, ()):
        text += "%"
    return text


def to_css(color: DynamicColor, precision: Optional[int] = None) -> str:
    """
    Serialize a color as CSS.

    Named colors are written as their name.

    Args:
        color: The color to serialize
        precision: Decimal places per component (shortest exact form if None)

    Returns:
        CSS color text, e.g. ``"oklch(0.7 0.1 none / 0.5)"``
    """
    if color.name is not None:
        return color.name

    channels = " ".join(_component(color, i, precision) for i in range(3))
    if color.cs in _FUNCTIONS:
        body = f"{_FUNCTIONS[color.cs]}({channels}"
    else:
        body = f"color({color.cs.value} {channels}"

    if color.missing.contains(3) or color.components[3] < 1.0:
        alpha = min(max(color.components[3], 0.0), 1.0)
        alpha_text = "none" if color.missing.contains(3) else format_number(alpha, precision)
        body += f" / {alpha_text}"
    return body + ")"


def rgba8_to_css(rgba: Rgba8) -> str:
    """Serialize as ``rgb(r, g, b)``, or ``rgba(r, g, b, a)`` when translucent."""
    if rgba.a == 255:
        return f"rgb({rgba.r}, {rgba.g}, {rgba.b})"
    alpha = format_number(rgba.a / 255.0, 4)
    return f"rgba({rgba.r}, {rgba.g}, {rgba.b}, {alpha})"


def rgba8_to_hex(rgba: Rgba8, upper: bool = False) -> str:
    """Serialize as ``#rrggbb``, or ``#rrggbbaa`` when translucent."""
    text = f"#{rgba.r:02x}{rgba.g:02x}{rgba.b:02x}"
    if rgba.a != 255:
        text += f"{rgba.a:02x}"
    return text.upper() if upper else text
