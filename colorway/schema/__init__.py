# Copyright (c) 2026 Colorway
# SPDX-License-Identifier: MIT

"""
Color value types.

All types in this module are immutable (frozen dataclasses). Every
operation returns a new value.
"""

from colorway.schema.color import (
    AlphaColor,
    HueDirection,
    OpaqueColor,
    PremulColor,
    fixup_hue,
)
from colorway.schema.dynamic import POWERLESS_EPSILON, DynamicColor, Interpolator
from colorway.schema.missing import Missing
from colorway.schema.rgba8 import PremulRgba8, Rgba8

__all__ = [
    # Static colors
    "OpaqueColor",
    "AlphaColor",
    "PremulColor",
    # Runtime colors
    "DynamicColor",
    "Interpolator",
    "Missing",
    "POWERLESS_EPSILON",
    # Hue handling
    "HueDirection",
    "fixup_hue",
    # 8-bit interop
    "Rgba8",
    "PremulRgba8",
]
