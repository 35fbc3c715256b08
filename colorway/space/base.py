# Copyright (c) 2026 Colorway
# SPDX-License-Identifier: MIT

"""
The color space descriptor protocol.

A color space is a class that is never instantiated: the class object itself
is the identity of the space, so two spaces are the same only if they are
the same class. Linear sRGB is the hub; every space defines conversion to
and from it, and any other conversion is composed through it.

White point is handled by the descriptor: for spaces whose reference white
is not D65, ``to_linear_srgb`` includes a Bradford adaptation to D65 and the
``*_absolute`` variants leave it out.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, ClassVar, Optional, Sequence

import numpy as np
from numpy.typing import NDArray

from colorway.space.chromaticity import D65, Chromaticity, bradford_matrix

if TYPE_CHECKING:
    from colorway.space.tag import ColorSpaceTag


Vec3 = tuple[float, float, float]


def as_vec3(values: Sequence[float] | NDArray[np.float64]) -> Vec3:
    """Coerce a length-3 array or sequence into a tuple of Python floats."""
    return (float(values[0]), float(values[1]), float(values[2]))


def matmul(matrix: NDArray[np.float64], src: Sequence[float]) -> Vec3:
    """Multiply a 3×3 matrix by a 3-vector."""
    return as_vec3(matrix @ np.asarray(src, dtype=np.float64))


# =============================================================================
# Layout
# =============================================================================


class ColorSpaceLayout(Enum):
    """
    Position of the hue channel, if any.

    Hue is never premultiplied, so the layout decides which channels
    alpha scales.
    """
    RECTANGULAR = "rectangular"
    HUE_FIRST = "hue_first"    # HSL, HWB
    HUE_THIRD = "hue_third"    # Lch, Oklch

    @property
    def hue_channel(self) -> Optional[int]:
        """Index of the hue channel, or None for rectangular spaces."""
        if self is ColorSpaceLayout.HUE_FIRST:
            return 0
        if self is ColorSpaceLayout.HUE_THIRD:
            return 2
        return None

    def scale(self, components: Sequence[float], scale: float) -> Vec3:
        """
        Multiply all components except hue by ``scale``.

        Used for both premultiplying and un-premultiplying.
        """
        c0, c1, c2 = components[0], components[1], components[2]
        if self is ColorSpaceLayout.HUE_FIRST:
            return (c0, c1 * scale, c2 * scale)
        if self is ColorSpaceLayout.HUE_THIRD:
            return (c0 * scale, c1 * scale, c2)
        return (c0 * scale, c1 * scale, c2 * scale)


# =============================================================================
# Descriptor base
# =============================================================================


class ColorSpace:
    """
    Base class for color space descriptors.

    Subclasses override ``to_linear_srgb`` and ``from_linear_srgb`` and may
    override ``clip`` and ``scale_chroma``. Conversions do no gamut clipping.

    Class attributes:
        IS_LINEAR: Whether the space is a linear transform of linear sRGB
        LAYOUT: Position of the hue channel
        TAG: Matching runtime tag, or None for spaces only usable statically
        WHITE_POINT: Reference white chromaticity
        WHITE: Components of the reference white in this space
    """
    IS_LINEAR: ClassVar[bool] = False
    LAYOUT: ClassVar[ColorSpaceLayout] = ColorSpaceLayout.RECTANGULAR
    TAG: ClassVar[Optional["ColorSpaceTag"]] = None
    WHITE_POINT: ClassVar[Chromaticity] = D65
    WHITE: ClassVar[Vec3] = (1.0, 1.0, 1.0)

    def __new__(cls, *args, **kwargs):
        raise TypeError(f"{cls.__name__} is a color space descriptor and cannot be instantiated")

    @classmethod
    def to_linear_srgb(cls, src: Sequence[float]) -> Vec3:
        """Convert opaque components to linear sRGB (D65)."""
        raise NotImplementedError

    @classmethod
    def from_linear_srgb(cls, src: Sequence[float]) -> Vec3:
        """Convert opaque linear sRGB (D65) components into this space."""
        raise NotImplementedError

    @classmethod
    def to_linear_srgb_absolute(cls, src: Sequence[float]) -> Vec3:
        """Convert to linear sRGB without white point adaptation."""
        rgb = cls.to_linear_srgb(src)
        if cls.WHITE_POINT == D65:
            return rgb
        return adapt_linear_srgb(rgb, D65, cls.WHITE_POINT)

    @classmethod
    def from_linear_srgb_absolute(cls, src: Sequence[float]) -> Vec3:
        """Convert from linear sRGB without white point adaptation."""
        if cls.WHITE_POINT != D65:
            src = adapt_linear_srgb(src, cls.WHITE_POINT, D65)
        return cls.from_linear_srgb(src)

    @classmethod
    def convert(cls, target: type[ColorSpace], src: Sequence[float]) -> Vec3:
        """Convert components into ``target`` through linear sRGB."""
        if cls is target:
            return as_vec3(src)
        return target.from_linear_srgb(cls.to_linear_srgb(src))

    @classmethod
    def convert_absolute(cls, target: type[ColorSpace], src: Sequence[float]) -> Vec3:
        """Convert components into ``target`` without chromatic adaptation."""
        if cls is target:
            return as_vec3(src)
        return target.from_linear_srgb_absolute(cls.to_linear_srgb_absolute(src))

    @classmethod
    def chromatically_adapt(
        cls,
        src: Sequence[float],
        source: Chromaticity,
        destination: Chromaticity,
    ) -> Vec3:
        """Adapt components from one reference white to another (Bradford)."""
        if source == destination:
            return as_vec3(src)
        rgb = adapt_linear_srgb(cls.to_linear_srgb(src), source, destination)
        return cls.from_linear_srgb(rgb)

    @classmethod
    def clip(cls, src: Sequence[float]) -> Vec3:
        """Clip components to the natural gamut of the space."""
        return as_vec3(src)

    @classmethod
    def scale_chroma(cls, src: Sequence[float], scale: float) -> Vec3:
        """
        Scale the chroma by the given amount.

        Spaces with a natural chroma axis scale it directly; the default
        gives the same result as scaling chroma in Oklab.
        """
        from colorway.space.colorspace import LinearSrgb

        rgb = cls.to_linear_srgb(src)
        return cls.from_linear_srgb(LinearSrgb.scale_chroma(rgb, scale))


# =============================================================================
# Shared linear sRGB ↔ XYZ-D65 matrices
# =============================================================================

# https://drafts.csswg.org/css-color-4/#color-conversion-code
LINEAR_SRGB_TO_XYZ_D65 = np.array([
    [0.41239079926595934, 0.357584339383878, 0.1804807884018343],
    [0.21263900587151027, 0.715168678767756, 0.07219231536073371],
    [0.01933081871559182, 0.11919477979462598, 0.9505321522496607],
], dtype=np.float64)

XYZ_D65_TO_LINEAR_SRGB = np.array([
    [3.2409699419045226, -1.537383177570094, -0.4986107602930034],
    [-0.9692436362808796, 1.8759675015077202, 0.04155505740717559],
    [0.05563007969699366, -0.20397695888897652, 1.0569715142428786],
], dtype=np.float64)


def adapt_linear_srgb(
    rgb: Sequence[float],
    source: Chromaticity,
    destination: Chromaticity,
) -> Vec3:
    """Bradford-adapt a linear sRGB color from one white to another."""
    matrix = XYZ_D65_TO_LINEAR_SRGB @ bradford_matrix(source, destination) @ LINEAR_SRGB_TO_XYZ_D65
    return matmul(matrix, rgb)
