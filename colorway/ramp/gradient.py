# Copyright (c) 2026 Colorway
# SPDX-License-Identifier: MIT

"""
Piecewise linear approximation of color gradients.

CSS Color 4 gradients may interpolate in any color space. Rendering them
exactly means interpolating in that space per pixel and converting each
result to the compositing space. Instead, this module precomputes a small
set of stops in the compositing (target) space such that linear
interpolation between neighbouring stops stays within a tolerance of the
exact ramp.

Error is ΔEOK: Euclidean distance between premultiplied Oklab colors,
measured at the midpoint of each segment. The stop count grows roughly as
the inverse square root of the tolerance.

Subdivision works on dyadic intervals ``[t0 * dt, (t0 + 1) * dt)`` with an
integer counter ``t0`` and a power-of-two ``dt``, so positions are exact.
After a segment is accepted, trailing zero bits of the counter are shifted
into ``dt``, which lets the next segment grow back to the widest size its
position allows.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, replace
from typing import Iterator, Optional

from colorway.schema.color import HueDirection, PremulColor
from colorway.schema.dynamic import DynamicColor, Interpolator
from colorway.space.base import ColorSpace
from colorway.space.colorspace import Oklab, Srgb
from colorway.space.tag import ColorSpaceTag

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GradientConfig:
    """Configuration for gradient approximation."""

    # Maximum midpoint error in ΔEOK units
    # 0.01 is nearly indistinguishable from the exact ramp
    tolerance: float = 0.01

    # Deepest subdivision; a segment is never narrower than 2 ** -max_depth
    max_depth: int = 24

    def __post_init__(self) -> None:
        """Validate settings."""
        if not self.tolerance >= 0.0:
            raise ValueError(f"Tolerance must be >= 0, got {self.tolerance}")
        if not 0 <= self.max_depth <= 52:
            raise ValueError(f"max_depth must be 0-52, got {self.max_depth}")


class GradientIter:
    """
    Lazy sequence of ``(t, PremulColor)`` gradient stops.

    The first stop is at t = 0 and the last at t = 1. Iteration is forward
    only; once exhausted the iterator stays exhausted.
    """

    def __init__(
        self,
        interpolator: Interpolator,
        target0: PremulColor,
        end_color: PremulColor,
        tolerance: float,
        max_depth: int,
    ) -> None:
        self._interpolator = interpolator
        self._tolerance = tolerance
        self._min_dt = 2.0 ** -max_depth
        self._t0 = 0
        self._dt = 0.0
        self._target0 = target0
        self._target1 = end_color
        self._end_color = end_color
        self._target_cs = end_color.cs

    def __iter__(self) -> Iterator[tuple[float, PremulColor]]:
        return self

    def __next__(self) -> tuple[float, PremulColor]:
        if self._dt == 0.0:
            self._dt = 1.0
            return 0.0, self._target0
        t0 = self._t0 * self._dt
        if t0 == 1.0:
            raise StopIteration

        while True:
            midpoint = self._interpolator.eval(t0 + 0.5 * self._dt)
            midpoint_oklab = midpoint.to_alpha_color(Oklab).premultiply()
            approx = self._target0.lerp_rect(self._target1, 0.5)
            error = midpoint_oklab.difference(approx.convert(Oklab))

            if not error <= self._tolerance:
                if not math.isfinite(error):
                    # Subdividing cannot make a non-finite error converge
                    logger.debug("[Gradient] Non-finite error at t=%s, accepting segment", t0)
                elif self._dt <= self._min_dt:
                    logger.debug(
                        "[Gradient] Depth cap reached at t=%s (error=%.6g), accepting segment",
                        t0, error,
                    )
                else:
                    self._t0 *= 2
                    self._dt *= 0.5
                    self._target1 = midpoint.to_alpha_color(self._target_cs).premultiply()
                    continue

            t1 = t0 + self._dt
            self._t0 += 1
            shift = (self._t0 & -self._t0).bit_length() - 1
            self._t0 >>= shift
            self._dt *= 1 << shift
            self._target0 = self._target1
            new_t1 = t1 + self._dt
            if new_t1 < 1.0:
                self._target1 = (
                    self._interpolator.eval(new_t1).to_alpha_color(self._target_cs).premultiply()
                )
            else:
                self._target1 = self._end_color
            return t1, self._target0


def gradient(
    color0: DynamicColor,
    color1: DynamicColor,
    interp_cs: ColorSpaceTag = ColorSpaceTag.OKLAB,
    direction: HueDirection = HueDirection.SHORTER,
    tolerance: Optional[float] = None,
    *,
    target: type[ColorSpace] = Srgb,
    config: Optional[GradientConfig] = None,
) -> GradientIter:
    """
    Approximate a gradient ramp with linear segments in ``target``.

    Args:
        color0: Start color
        color1: End color
        interp_cs: Color space the exact ramp interpolates in
        direction: Hue interpolation direction for cylindrical spaces
        tolerance: Maximum error in ΔEOK (overrides ``config.tolerance``)
        target: Color space the stops are produced in
        config: Approximation settings (uses defaults if None)

    Returns:
        Iterator of ``(t, PremulColor)`` stops in ``target``
    """
    cfg = config or GradientConfig()
    if tolerance is not None:
        cfg = replace(cfg, tolerance=tolerance)
    tolerance = cfg.tolerance

    interpolator = color0.interpolate(color1, interp_cs, direction)
    # Missing components resolve against the other endpoint
    if not color0.missing.is_empty():
        color0 = interpolator.eval(0.0)
    if not color1.missing.is_empty():
        color1 = interpolator.eval(1.0)
    target0 = color0.to_alpha_color(target).premultiply()
    end_color = color1.to_alpha_color(target).premultiply()

    logger.debug(
        "[Gradient] %s → %s in %s (%s), tolerance=%s",
        color0.cs.value, color1.cs.value, interp_cs.value, direction.value, tolerance,
    )
    return GradientIter(interpolator, target0, end_color, tolerance, cfg.max_depth)
