# Copyright (c) 2026 Colorway
# SPDX-License-Identifier: MIT

"""
Color spaces for Colorway.

Descriptor classes define each space statically; ``ColorSpaceTag`` names
them at runtime. All conversions go through linear sRGB.
"""

from colorway.space.base import ColorSpace, ColorSpaceLayout
from colorway.space.chromaticity import ACES, D50, D65, Chromaticity
from colorway.space.colorspace import (
    A98Rgb,
    Aces2065_1,
    AcesCg,
    DisplayP3,
    Hsl,
    Hwb,
    Lab,
    Lch,
    LinearSrgb,
    Oklab,
    Oklch,
    ProphotoRgb,
    Rec2020,
    Srgb,
    XyzD50,
    XyzD65,
)
from colorway.space.tag import ColorSpaceTag

__all__ = [
    # Protocol
    "ColorSpace",
    "ColorSpaceLayout",
    "ColorSpaceTag",
    # White points
    "Chromaticity",
    "D65",
    "D50",
    "ACES",
    # RGB-like
    "Srgb",
    "LinearSrgb",
    "DisplayP3",
    "A98Rgb",
    "ProphotoRgb",
    "Rec2020",
    "AcesCg",
    "Aces2065_1",
    "XyzD50",
    "XyzD65",
    # Lab-like
    "Lab",
    "Lch",
    "Oklab",
    "Oklch",
    # sRGB cylindrical
    "Hsl",
    "Hwb",
]
