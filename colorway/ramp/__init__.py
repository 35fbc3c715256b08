# Copyright (c) 2026 Colorway
# SPDX-License-Identifier: MIT

"""
Gradient ramps for Colorway.

Flattens an interpolated color ramp into linear stops suitable for a
rasterizer.
"""

from colorway.ramp.gradient import GradientConfig, GradientIter, gradient

__all__ = ["gradient", "GradientIter", "GradientConfig"]
