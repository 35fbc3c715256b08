# Copyright (c) 2026 Colorway
# SPDX-License-Identifier: MIT

"""
Colorway -- CSS Color 4 color spaces, conversion and gradients.

Models colors in many color spaces, converts between them, tracks missing
(``none``) components, and flattens interpolated gradients into a minimal
set of linear stops.

Quick start::

    from colorway import parse_color, gradient, ColorSpaceTag, HueDirection

    red = parse_color("oklch(0.63 0.26 29)")
    blue = parse_color("color(display-p3 0 0 1)")
    red.convert(ColorSpaceTag.SRGB).to_css()

    for t, stop in gradient(red, blue, ColorSpaceTag.OKLCH, HueDirection.LONGER):
        ...
"""

from __future__ import annotations

__version__ = "1.0.0"

from colorway.ramp import GradientConfig, gradient
from colorway.runtime import BlockFormat, ParseError, parse_color, to_css, to_gradient_block
from colorway.schema import (
    AlphaColor,
    DynamicColor,
    HueDirection,
    Interpolator,
    Missing,
    OpaqueColor,
    PremulColor,
    PremulRgba8,
    Rgba8,
)
from colorway.space import (
    ColorSpace,
    ColorSpaceLayout,
    ColorSpaceTag,
    Hsl,
    LinearSrgb,
    Oklab,
    Oklch,
    Srgb,
)

__all__ = [
    # Core API
    "parse_color",
    "ParseError",
    "gradient",
    "GradientConfig",
    "to_css",
    "to_gradient_block",
    "BlockFormat",
    # Colors
    "DynamicColor",
    "Interpolator",
    "Missing",
    "HueDirection",
    "OpaqueColor",
    "AlphaColor",
    "PremulColor",
    "Rgba8",
    "PremulRgba8",
    # Color spaces (commonly needed; see colorway.space for all)
    "ColorSpace",
    "ColorSpaceLayout",
    "ColorSpaceTag",
    "Srgb",
    "LinearSrgb",
    "Oklab",
    "Oklch",
    "Hsl",
    # Version
    "__version__",
]
